"""
kundali.py
==========
Main Kundali (birth chart) generator.

Orchestrates the ephemeris, house and numerology modules to produce an
immutable NatalChart.

Usage:
    from vedic_engine.tools.kundali import compute_chart

    chart = compute_chart("1995-08-15", "10:30", "Delhi")
    chart.ascendant_sign          # Lagna rashi
    chart.planet("Moon").house    # 1–12
    chart.numerology.mulank       # 1–9
"""

import logging

from ..core.ephemeris import (
    PLANETS, RASHIS, parse_instant, sidereal_longitude, to_julian_day,
)
from ..core.houses import compute_lagna, house_number, local_hour, sign_index
from ..core.models import NatalChart, PlacedBody
from ..core.numerology import compute_numerology

logger = logging.getLogger(__name__)


def _place_body(idx: int, name: str, jd: float, lagna_idx: int) -> PlacedBody:
    lon = sidereal_longitude(jd, name)
    sign_idx = sign_index(lon)
    deg = lon % 30
    return PlacedBody(
        id=idx,
        name=name,
        longitude=lon,
        sign_index=sign_idx,
        sign=RASHIS[sign_idx],
        house=house_number(sign_idx, lagna_idx),
        degree_in_sign=deg,
        degree=f"{deg:.2f}",
    )


def compute_chart(date_iso: str, time_hhmm: str, place: str) -> NatalChart:
    """
    Generate a birth chart.

    Args:
        date_iso:  "YYYY-MM-DD"
        time_hhmm: "HH:MM" civil time, used without timezone correction
        place:     free-text label, carried through for display

    Raises:
        InvalidInstant: when the date/time cannot be parsed
    """
    instant = parse_instant(date_iso, time_hhmm)
    jd = to_julian_day(instant)

    # ---- Lagna ----
    sun_sid = sidereal_longitude(jd, "Sun")
    lagna_lon, lagna_idx = compute_lagna(sun_sid, local_hour(instant.hour, instant.minute))

    # ---- Planets ----
    planets = tuple(
        _place_body(idx, name, jd, lagna_idx) for idx, name in enumerate(PLANETS)
    )

    logger.debug("Chart %s %s @ %s: jd=%.5f lagna=%s",
                 date_iso, time_hhmm, place, jd, RASHIS[lagna_idx])

    return NatalChart(
        ascendant_index=lagna_idx,
        ascendant_sign=RASHIS[lagna_idx],
        ascendant_longitude=lagna_lon,
        planets=planets,
        instant=instant,
        julian_day=jd,
        date=date_iso,
        time=time_hhmm,
        place=place,
        numerology=compute_numerology(instant.date()),
    )
