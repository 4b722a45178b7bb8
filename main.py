"""
Vedic Engine — FastAPI Backend
==============================
Endpoints:
  POST /api/kundali          — Birth chart + numerology
  POST /api/panchang         — Daily panchang
  POST /api/numerology       — Mulank / Bhagyank
  POST /api/matchmaker       — Moon-distance compatibility
  GET  /api/health           — Health check
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from vedic_engine import settings
from vedic_engine import compute_chart, compute_panchang, InvalidInstant
from vedic_engine.core.ephemeris import parse_date, parse_instant
from vedic_engine.core.numerology import compute_numerology
from matchmaker import compute_compatibility

_LEVEL_MAP = {"debug": logging.DEBUG, "info": logging.INFO, "warn": logging.WARNING, "warning": logging.WARNING}
logging.basicConfig(
    level=_LEVEL_MAP.get(settings.LOG_LEVEL, logging.INFO),
    format="[%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Vedic engine: Kundali, Numerology, Panchang, Matchmaking",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Models ─────────────────────────────────────────────

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_PATTERN = r"^\d{2}:\d{2}(:\d{2})?$"


class BirthData(BaseModel):
    date:  str = Field(..., pattern=DATE_PATTERN, description="YYYY-MM-DD")
    time:  str = Field(..., pattern=TIME_PATTERN, description="HH:MM, 24-hour")
    place: str = Field("Unknown", max_length=200)


class MatchmakerRequest(BaseModel):
    person1: BirthData
    person2: BirthData


class PanchangRequest(BaseModel):
    date:      Optional[str]   = Field(None, pattern=DATE_PATTERN,
                                       description="Defaults to today (UTC)")
    time:      str             = Field("00:00", pattern=TIME_PATTERN)
    latitude:  Optional[float] = Field(None, ge=-90,  le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)


class NumerologyRequest(BaseModel):
    date: str = Field(..., pattern=DATE_PATTERN)


# ── Endpoints ──────────────────────────────────────────────────

@app.get("/api/health")
def health():
    return {
        "status": "ok",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "endpoints": [
            "POST /api/kundali",
            "POST /api/panchang",
            "POST /api/numerology",
            "POST /api/matchmaker",
        ],
    }


@app.post("/api/kundali")
def kundali_endpoint(data: BirthData):
    try:
        chart = compute_chart(data.date, data.time, data.place)
    except InvalidInstant as e:
        logger.info("Rejected kundali request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    return {"success": True, "chart": chart.to_dict()}


@app.post("/api/panchang")
def panchang_endpoint(data: PanchangRequest):
    try:
        if data.date:
            instant = parse_instant(data.date, data.time)
        else:
            instant = datetime.now(timezone.utc).replace(tzinfo=None)
    except InvalidInstant as e:
        logger.info("Rejected panchang request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    panchang = compute_panchang(instant, data.latitude, data.longitude)
    return {"success": True, "panchang": panchang.to_dict()}


@app.post("/api/numerology")
def numerology_endpoint(data: NumerologyRequest):
    try:
        birth_date = parse_date(data.date)
    except InvalidInstant as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"success": True, "numerology": compute_numerology(birth_date.date()).to_dict()}


@app.post("/api/matchmaker")
def matchmaker_endpoint(data: MatchmakerRequest):
    try:
        chart1 = compute_chart(data.person1.date, data.person1.time, data.person1.place)
        chart2 = compute_chart(data.person2.date, data.person2.time, data.person2.place)
    except InvalidInstant as e:
        logger.info("Rejected matchmaker request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    return {"success": True, "compatibility": compute_compatibility(chart1, chart2)}
