"""
houses.py
=========
Lagna (ascendant) and whole-sign house numbering.

The ascendant is an hour-angle approximation built on the Sun: at 06:00
civil time the Lagna sits exactly opposite the Sun, and it advances 15° per
hour. The hour is taken straight from the input; there is no timezone or
geographic-longitude correction.
"""

import math
from typing import Tuple

from .ephemeris import normalize_angle

DEGREES_PER_HOUR = 15.0
SIGN_SPAN = 30.0


def local_hour(hour: int, minute: int) -> float:
    return hour + minute / 60.0


def ascendant_longitude(sun_longitude: float, hour: float) -> float:
    """Lagna longitude = Sun + (hour - 6) * 15° + 180°, normalized."""
    offset = (hour - 6.0) * DEGREES_PER_HOUR
    return normalize_angle(sun_longitude + offset + 180.0)


NO_SIGN = -1


def sign_index(longitude: float) -> int:
    """
    Zodiac sign (0–11) holding this longitude.
    A non-finite longitude has no sign and gives NO_SIGN (-1).
    """
    if not math.isfinite(longitude):
        return NO_SIGN
    return int(math.floor(longitude / SIGN_SPAN))


def compute_lagna(sun_longitude: float, hour: float) -> Tuple[float, int]:
    asc = ascendant_longitude(sun_longitude, hour)
    return asc, sign_index(asc)


def house_number(planet_sign: int, lagna_sign: int) -> int:
    """
    Whole-sign house (1–12) counted from the Lagna sign.
    The Lagna sign itself is house 1.
    """
    house = (planet_sign - lagna_sign + 1 + 12) % 12
    return 12 if house == 0 else house
