"""
Vedic Engine
============
A deterministic Vedic positional and calendrical engine: sidereal
longitudes, birth chart (Kundali), numerology, daily Panchang.

Quick start:
    from datetime import datetime
    from vedic_engine import compute_chart, compute_panchang

    chart = compute_chart("1990-06-15", "10:30", "Delhi")
    panchang = compute_panchang(datetime(2024, 1, 1, 6, 0))
"""

from .core.ephemeris import InvalidInstant
from .core.panchang import compute_panchang
from .tools.kundali import compute_chart

__version__ = "1.0.0"
__all__ = ["compute_chart", "compute_panchang", "InvalidInstant"]
