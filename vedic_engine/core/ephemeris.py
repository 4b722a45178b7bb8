"""
ephemeris.py  —  Sidereal mean longitudes
==========================================
Linear mean-motion model for the nine Vedic grahas.

Each body follows a single linear term

    L = L0 + rate * d        d = jd - J2000

from which a slowly drifting ayanamsa is subtracted to move the tropical
longitude onto the sidereal zodiac:

    ayanamsa = 23.85 + (d / 36525) * 0.01

There are no eccentricity, perturbation or nutation terms, so the error
grows over the centuries away from J2000. Values stay finite for any date
a `datetime` can hold.

Julian Day here is epoch based (Unix epoch = JD 2440587.5), which keeps
the conversion monotonic and leap-year safe without calendar arithmetic.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, Tuple

logger = logging.getLogger(__name__)

# ── Constants ──────────────────────────────────────────────────
J2000          = 2451545.0
UNIX_EPOCH_JD  = 2440587.5
SECONDS_PER_DAY = 86400.0
DAYS_PER_CENTURY = 36525.0

AYANAMSA_J2000 = 23.85      # degrees at J2000
AYANAMSA_DRIFT = 0.01       # degrees per Julian century

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

PLANETS: Tuple[str, ...] = (
    "Sun", "Moon", "Mars", "Mercury", "Jupiter", "Venus", "Saturn", "Rahu", "Ketu",
)

RASHIS: Tuple[str, ...] = (
    "Mesha", "Vrishabha", "Mithuna", "Karka", "Simha", "Kanya",
    "Tula", "Vrishchika", "Dhanu", "Makara", "Kumbha", "Meena",
)

NAKSHATRAS: Tuple[str, ...] = (
    "Ashwini", "Bharani", "Krittika", "Rohini", "Mrigashira", "Ardra",
    "Punarvasu", "Pushya", "Ashlesha", "Magha", "Purva Phalguni", "Uttara Phalguni",
    "Hasta", "Chitra", "Swati", "Vishakha", "Anuradha", "Jyeshtha",
    "Mula", "Purva Ashadha", "Uttara Ashadha", "Shravana", "Dhanishta",
    "Shatabhisha", "Purva Bhadrapada", "Uttara Bhadrapada", "Revati",
)

# (L0 at J2000 in degrees, mean daily motion in degrees/day)
MEAN_ELEMENTS: Dict[str, Tuple[float, float]] = {
    "Sun":     (280.460, 0.9856474),
    "Moon":    (218.316, 13.176396),
    "Mars":    (355.433, 0.524033),
    "Mercury": (252.251, 4.092334),
    "Jupiter": (34.351,  0.083085),
    "Venus":   (181.979, 1.602130),
    "Saturn":  (50.077,  0.033445),
    "Rahu":    (125.045, -0.052954),   # mean node, retrograde
}


class InvalidInstant(ValueError):
    """Raised when a date/time string cannot be read as a civil instant."""

    def __init__(self, date_iso, time_hhmm=None):
        self.date_iso = date_iso
        self.time_hhmm = time_hhmm
        shown = date_iso if time_hhmm is None else f"{date_iso} {time_hhmm}"
        super().__init__(f"Invalid date/time: {shown!r} (expected YYYY-MM-DD and HH:MM)")


def normalize_angle(degrees: float) -> float:
    """Normalize angle to [0, 360)."""
    angle = degrees % 360.0
    # -1e-20 % 360.0 rounds to 360.0
    return 0.0 if angle >= 360.0 else angle


# ── Julian Day ─────────────────────────────────────────────────

_DATE_FORMAT = "%Y-%m-%d"
_TIME_FORMATS = ("%H:%M", "%H:%M:%S")


def parse_instant(date_iso: str, time_hhmm: str = "00:00") -> datetime:
    """
    Read "YYYY-MM-DD" + "HH:MM" (seconds optional) as a naive civil datetime.
    No timezone is attached; the value is used as-is downstream.
    """
    for time_format in _TIME_FORMATS:
        try:
            return datetime.strptime(f"{date_iso} {time_hhmm}", f"{_DATE_FORMAT} {time_format}")
        except (TypeError, ValueError):
            continue
    raise InvalidInstant(date_iso, time_hhmm)


def parse_date(date_iso: str) -> datetime:
    try:
        return datetime.strptime(date_iso, _DATE_FORMAT)
    except (TypeError, ValueError):
        raise InvalidInstant(date_iso) from None


def to_julian_day(instant: datetime) -> float:
    """
    Days since the Unix epoch + 2440587.5.
    Naive datetimes are read as UTC; aware ones are converted to UTC.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    seconds = (instant - _UNIX_EPOCH).total_seconds()
    return seconds / SECONDS_PER_DAY + UNIX_EPOCH_JD


# ── Sidereal longitudes ────────────────────────────────────────

def ayanamsa(jd: float) -> float:
    """Precession correction in degrees for the given Julian Day."""
    d = jd - J2000
    return AYANAMSA_J2000 + (d / DAYS_PER_CENTURY) * AYANAMSA_DRIFT


def mean_longitude(jd: float, body: str) -> float:
    """Tropical mean longitude (not normalized). Unknown bodies sit at 0°."""
    d = jd - J2000
    elements = MEAN_ELEMENTS.get(body)
    if elements is None:
        logger.warning("Unknown body %r; using zero mean longitude", body)
        return 0.0
    L0, rate = elements
    return L0 + rate * d


def sidereal_longitude(jd: float, body: str) -> float:
    """
    Sidereal ecliptic longitude of `body` in [0, 360).
    Ketu is always Rahu + 180°.
    """
    if body == "Ketu":
        return normalize_angle(sidereal_longitude(jd, "Rahu") + 180.0)
    return normalize_angle(mean_longitude(jd, body) - ayanamsa(jd))


def all_longitudes(jd: float) -> Dict[str, float]:
    return {body: sidereal_longitude(jd, body) for body in PLANETS}
