"""
panchang.py
===========
Daily Panchang (Hindu almanac) from the mean Sun and Moon.

Five limbs of Panchang:
  1. Vara      — Day of week
  2. Tithi     — Lunar day (1–30), 12° of Moon–Sun separation each
  3. Nakshatra — Lunar mansion (27 × 13°20')
  4. Yoga      — (Sun + Moon) in 13°20' steps
  5. Karana    — Half tithi (6° steps)

Plus: Rahu Kalam (fixed weekday table), Ritu (season), Ayana.
Sunrise, sunset, moonrise and Abhijit are display placeholders taken from
settings, not computed. Coordinates are echoed for display only.
"""

import logging
import math
from datetime import date, datetime, time, timezone
from typing import Optional, Tuple

from .. import settings
from .ephemeris import NAKSHATRAS, sidereal_longitude, to_julian_day
from .models import PanchangDay

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

TITHIS = (
    "Pratipada", "Dwitiya", "Tritiya", "Chaturthi", "Panchami",
    "Shashthi", "Saptami", "Ashtami", "Navami", "Dashami",
    "Ekadashi", "Dwadashi", "Trayodashi", "Chaturdashi", "Purnima/Amavasya",
)

YOGAS = (
    "Vishkumbha", "Priti", "Ayushman", "Saubhagya", "Shobhana",
    "Atiganda", "Sukarma", "Dhriti", "Shula", "Ganda",
    "Vriddhi", "Dhruva", "Vyaghata", "Harshana", "Vajra",
    "Siddhi", "Vyatipata", "Variyan", "Parigha", "Shiva",
    "Siddha", "Sadhya", "Shubha", "Shukla", "Brahma",
    "Indra", "Vaidhriti",
)

# 7 movable karanas followed by the 4 fixed ones
KARANAS = (
    "Bava", "Balava", "Kaulava", "Taitila", "Garija",
    "Vanija", "Vishti", "Shakuni", "Chatushpada", "Nagava", "Kimstughna",
)

VARA = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

# Rahu Kalam for a nominal 06:00–18:00 day, 0=Sunday
RAHU_KALAM = (
    "16:30 - 18:00",   # Sunday    — 8th slot
    "07:30 - 09:00",   # Monday    — 2nd slot
    "15:00 - 16:30",   # Tuesday   — 7th slot
    "12:00 - 13:30",   # Wednesday — 5th slot
    "13:30 - 15:00",   # Thursday  — 6th slot
    "10:30 - 12:00",   # Friday    — 4th slot
    "09:00 - 10:30",   # Saturday  — 3rd slot
)

# Two civil months per ritu, starting January
RITUS = ("Shishira", "Vasanta", "Grishma", "Varsha", "Sharad", "Hemanta")

UTTARAYANA = "Uttarayana"       # northward
DAKSHINAYANA = "Dakshinayana"   # southward

NAKSHATRA_SPAN = 360.0 / 27.0   # 13°20'
TITHI_SPAN = 12.0
KARANA_SPAN = 6.0
MOVABLE_KARANAS = 7
NO_INDEX = -1                   # limb index for a non-finite longitude


# ---------------------------------------------------------------------------
# Limbs
# ---------------------------------------------------------------------------

def lunar_phase_diff(sun_sid: float, moon_sid: float) -> float:
    """Moon minus Sun, shifted by 360° when negative."""
    diff = moon_sid - sun_sid
    if diff < 0:
        diff += 360.0
    return diff


def _step(value: float, span: float) -> Optional[int]:
    # None when a NaN/inf longitude leaks in from the ephemeris
    if not math.isfinite(value):
        return None
    return int(math.floor(value / span))


def compute_tithi(sun_sid: float, moon_sid: float) -> Tuple[int, Optional[str], Optional[str]]:
    """
    Returns (index 1–30, name, paksha).
    Tithis 1–15 are Shukla (bright), 16–30 Krishna (dark); names repeat
    every 15 with Purnima/Amavasya closing each half.
    Non-finite longitudes give (NO_INDEX, None, None).
    """
    step = _step(lunar_phase_diff(sun_sid, moon_sid), TITHI_SPAN)
    if step is None:
        return NO_INDEX, None, None
    index = step + 1
    paksha = "Krishna" if index > 15 else "Shukla"
    return index, TITHIS[(index - 1) % 15], paksha


def compute_nakshatra(moon_sid: float) -> Tuple[int, Optional[str]]:
    step = _step(moon_sid, NAKSHATRA_SPAN)
    if step is None:
        return NO_INDEX, None
    index = step % 27
    return index, NAKSHATRAS[index]


def compute_yoga(sun_sid: float, moon_sid: float) -> Tuple[int, Optional[str]]:
    """Yoga from the un-normalized sum, wrapped into 27."""
    step = _step(moon_sid + sun_sid, NAKSHATRA_SPAN)
    if step is None:
        return NO_INDEX, None
    index = step % 27
    return index, YOGAS[index]


def compute_karana(sun_sid: float, moon_sid: float) -> Tuple[int, Optional[str]]:
    """
    Karana = half tithi, cycled through the movable karanas only.
    The four fixed karanas (Shakuni … Kimstughna) are never selected.
    """
    step = _step(lunar_phase_diff(sun_sid, moon_sid), KARANA_SPAN)
    if step is None:
        return NO_INDEX, None
    index = step % MOVABLE_KARANAS
    return index, KARANAS[index]


def weekday_index(day: date) -> int:
    """0=Sunday … 6=Saturday."""
    return (day.weekday() + 1) % 7


def get_rahu_kalam(weekday: int) -> str:
    """Rahu Kalam window for weekday 0=Sunday … 6=Saturday."""
    return RAHU_KALAM[weekday % 7]


def get_ritu(month: int) -> str:
    """Season for civil month 1–12."""
    return RITUS[(month - 1) // 2]


def get_ayana(month: int) -> str:
    return UTTARAYANA if month <= 6 else DAKSHINAYANA


def _format_coordinate(value: Optional[float]) -> Optional[str]:
    if value is None:
        return None
    return f"{value:.2f}"


# ---------------------------------------------------------------------------
# Full Panchang
# ---------------------------------------------------------------------------

def compute_panchang(instant, latitude: Optional[float] = None,
                     longitude: Optional[float] = None) -> PanchangDay:
    """
    Compute the Panchang for a civil instant.

    Args:
        instant: datetime (a plain date is taken at 00:00). Aware values are
                 converted to UTC first, so the weekday, season and date
                 fields agree with the Julian Day.
        latitude, longitude: optional, echoed back for display only
    """
    if not isinstance(instant, datetime):
        instant = datetime.combine(instant, time())
    elif instant.tzinfo is not None:
        instant = instant.astimezone(timezone.utc).replace(tzinfo=None)

    jd = to_julian_day(instant)
    sun_sid = sidereal_longitude(jd, "Sun")
    moon_sid = sidereal_longitude(jd, "Moon")

    tithi_idx, tithi, paksha = compute_tithi(sun_sid, moon_sid)
    nak_idx, nakshatra = compute_nakshatra(moon_sid)
    yoga_idx, yoga = compute_yoga(sun_sid, moon_sid)
    karana_idx, karana = compute_karana(sun_sid, moon_sid)
    vara_idx = weekday_index(instant)

    logger.debug("Panchang %s jd=%.5f sun=%.4f moon=%.4f tithi=%d",
                 instant.isoformat(), jd, sun_sid, moon_sid, tithi_idx)

    return PanchangDay(
        instant=instant,
        julian_day=jd,
        tithi_index=tithi_idx,
        tithi=tithi,
        paksha=paksha,
        nakshatra_index=nak_idx,
        nakshatra=nakshatra,
        yoga_index=yoga_idx,
        yoga=yoga,
        karana_index=karana_idx,
        karana=karana,
        weekday_index=vara_idx,
        weekday=VARA[vara_idx],
        rahu_kalam=get_rahu_kalam(vara_idx),
        ritu=get_ritu(instant.month),
        ayana=get_ayana(instant.month),
        sunrise=settings.PANCHANG_SUNRISE,
        sunset=settings.PANCHANG_SUNSET,
        moonrise=settings.PANCHANG_MOONRISE,
        abhijit=settings.PANCHANG_ABHIJIT,
        latitude=_format_coordinate(latitude),
        longitude=_format_coordinate(longitude),
    )
