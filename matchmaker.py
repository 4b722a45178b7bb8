"""
matchmaker.py
=============
Moon-distance compatibility score for two birth charts.

    distance = |moon1 - moon2| mod 120
    score    = floor(distance / 120 * 31) + 5        → 5 … 36

Verdict bands:
    score > 28        Excellent
    18 < score ≤ 28   Good
    10 ≤ score ≤ 18   Average
    score < 10        Difficult

If either chart has no Moon, the score falls back to the midpoint, 18.
"""

import logging
import math
from typing import Optional

from vedic_engine.core.models import MatchResult, NatalChart

logger = logging.getLogger(__name__)

MIN_SCORE = 5
MAX_SCORE = 36
DEFAULT_SCORE = 18
TRINE = 120.0

VERDICTS = ("Excellent", "Good", "Average", "Difficult")


def verdict_for_score(score: int) -> str:
    if score > 28:
        return "Excellent"
    if score > 18:
        return "Good"
    if score < 10:
        return "Difficult"
    return "Average"


def moon_distance_score(moon1: float, moon2: float) -> int:
    distance = abs(moon1 - moon2) % TRINE
    return int(math.floor((distance / TRINE) * 31)) + MIN_SCORE


def _moon_longitude(chart: NatalChart) -> Optional[float]:
    moon = chart.planet("Moon")
    return None if moon is None else moon.longitude


def match_charts(chart1: NatalChart, chart2: NatalChart) -> MatchResult:
    moon1 = _moon_longitude(chart1)
    moon2 = _moon_longitude(chart2)

    if moon1 is None or moon2 is None:
        logger.warning("Moon missing from a chart; using default score %d", DEFAULT_SCORE)
        score = DEFAULT_SCORE
    else:
        score = moon_distance_score(moon1, moon2)

    return MatchResult(score=score, verdict=verdict_for_score(score))


# ── Manglik check ────────────────────────────────────────────

MANGLIK_HOUSES = frozenset({1, 2, 4, 7, 8, 12})
DOUBLE_MANGLIK_HOUSES = frozenset({1, 8})

MANGLIK_NOTES = {
    "double": "Mars in house {house}: double Manglik.",
    "single": "Mars in house {house}: Manglik.",
    "none":   "Mars in house {house}: no Manglik dosha.",
}


def check_manglik(chart: NatalChart) -> dict:
    """Mars-house dosha report; a chart without Mars reports house 0."""
    mars = chart.planet("Mars")
    mars_house = mars.house if mars is not None else 0
    if mars_house in DOUBLE_MANGLIK_HOUSES:
        level = "double"
    elif mars_house in MANGLIK_HOUSES:
        level = "single"
    else:
        level = "none"
    return {
        "is_manglik": level != "none",
        "is_double_manglik": level == "double",
        "mars_house": mars_house,
        "note": MANGLIK_NOTES[level].format(house=mars_house),
    }


# ── Main compatibility function ───────────────────────────────

def compute_compatibility(chart1: NatalChart, chart2: NatalChart) -> dict:
    """
    Match score plus Manglik reports and Moon signs for both charts.
    """
    result = match_charts(chart1, chart2)

    manglik1 = check_manglik(chart1)
    manglik2 = check_manglik(chart2)

    if manglik1["is_manglik"] and manglik2["is_manglik"]:
        manglik_note = "Both charts are Manglik; the doshas offset each other."
    elif manglik1["is_manglik"] or manglik2["is_manglik"]:
        manglik_note = "Only one chart is Manglik."
    else:
        manglik_note = "Neither chart is Manglik."

    def _moon_sign(chart):
        moon = chart.planet("Moon")
        return moon.sign if moon is not None else None

    return {
        **result.to_dict(),
        "manglik": {
            "person1": manglik1,
            "person2": manglik2,
            "note": manglik_note,
        },
        "moon_signs": {"person1": _moon_sign(chart1), "person2": _moon_sign(chart2)},
    }
