# Vedic Engine - Core modules
from .ephemeris import (
    InvalidInstant, normalize_angle, parse_instant, to_julian_day,
    ayanamsa, sidereal_longitude, all_longitudes,
)
from .houses import compute_lagna, house_number
from .numerology import compute_numerology
from .panchang import compute_panchang, get_rahu_kalam
from .models import NatalChart, PlacedBody, Numerology, PanchangDay, MatchResult

__all__ = [
    "InvalidInstant", "normalize_angle", "parse_instant", "to_julian_day",
    "ayanamsa", "sidereal_longitude", "all_longitudes",
    "compute_lagna", "house_number",
    "compute_numerology",
    "compute_panchang", "get_rahu_kalam",
    "NatalChart", "PlacedBody", "Numerology", "PanchangDay", "MatchResult",
]
