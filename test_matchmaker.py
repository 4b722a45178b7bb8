from dataclasses import replace

import pytest

from vedic_engine import compute_chart
from matchmaker import (
    VERDICTS, check_manglik, compute_compatibility, match_charts,
    moon_distance_score, verdict_for_score,
)

BASE = compute_chart("2000-01-01", "12:00", "Greenwich")


def _with_planet(chart, name, **changes):
    planets = tuple(replace(p, **changes) if p.name == name else p for p in chart.planets)
    return replace(chart, planets=planets)


def _without_moon(chart):
    return replace(chart, planets=tuple(p for p in chart.planets if p.name != "Moon"))


@pytest.mark.parametrize("moon1,moon2,score,verdict", [
    (100.0, 100.0, 5,  "Difficult"),    # same Moon
    (0.0,   16.0,  9,  "Difficult"),
    (0.0,   20.0,  10, "Average"),
    (0.0,   52.0,  18, "Average"),      # 18 is still Average
    (100.0, 160.0, 20, "Good"),
    (0.0,   90.0,  28, "Good"),         # 28 is still Good
    (0.0,   93.0,  29, "Excellent"),
    (0.0,   120.0, 5,  "Difficult"),    # trine wraps to zero
    (300.0, 60.0,  5,  "Difficult"),    # 240° wraps to zero
])
def test_match_scores(moon1, moon2, score, verdict):
    chart1 = _with_planet(BASE, "Moon", longitude=moon1)
    chart2 = _with_planet(BASE, "Moon", longitude=moon2)
    result = match_charts(chart1, chart2)
    assert (result.score, result.verdict) == (score, verdict)


def test_match_is_symmetric():
    chart1 = _with_planet(BASE, "Moon", longitude=17.5)
    chart2 = _with_planet(BASE, "Moon", longitude=301.25)
    assert match_charts(chart1, chart2) == match_charts(chart2, chart1)


def test_score_bounds():
    for a in range(0, 360, 7):
        for b in range(0, 360, 11):
            score = moon_distance_score(float(a), b + 0.5)
            assert 5 <= score <= 36


def test_verdict_is_monotonic_in_score():
    rank = {v: i for i, v in enumerate(reversed(VERDICTS))}
    ranks = [rank[verdict_for_score(s)] for s in range(5, 37)]
    assert ranks == sorted(ranks)
    assert verdict_for_score(9) == "Difficult"
    assert verdict_for_score(10) == "Average"
    assert verdict_for_score(19) == "Good"
    assert verdict_for_score(29) == "Excellent"


def test_missing_moon_defaults_to_midpoint(caplog):
    result = match_charts(_without_moon(BASE), BASE)
    assert (result.score, result.verdict) == (18, "Average")
    assert "Moon missing" in caplog.text


# ── Manglik ──────────────────────────────────────────────────

@pytest.mark.parametrize("house,manglik,double", [
    (1, True, True), (8, True, True), (7, True, False), (12, True, False),
    (3, False, False), (10, False, False),
])
def test_check_manglik(house, manglik, double):
    report = check_manglik(_with_planet(BASE, "Mars", house=house))
    assert report["is_manglik"] is manglik
    assert report["is_double_manglik"] is double
    assert report["mars_house"] == house


def test_compute_compatibility_bundle():
    partner = compute_chart("1992-03-08", "18:45", "Mumbai")
    result = compute_compatibility(BASE, partner)
    assert 5 <= result["score"] <= 36
    assert result["max_score"] == 36
    assert result["verdict"] in VERDICTS
    assert result["moon_signs"]["person1"] == "Tula"
    assert set(result["manglik"]) == {"person1", "person2", "note"}


def test_both_manglik_note():
    chart = _with_planet(BASE, "Mars", house=7)
    result = compute_compatibility(chart, chart)
    assert result["manglik"]["note"].startswith("Both charts are Manglik")


@pytest.mark.parametrize("house,note", [
    (8, "Mars in house 8: double Manglik."),
    (4, "Mars in house 4: Manglik."),
    (5, "Mars in house 5: no Manglik dosha."),
])
def test_manglik_note_names_the_mars_house(house, note):
    assert check_manglik(_with_planet(BASE, "Mars", house=house))["note"] == note


def test_chart_without_mars_is_not_manglik():
    chart = replace(BASE, planets=tuple(p for p in BASE.planets if p.name != "Mars"))
    report = check_manglik(chart)
    assert report["mars_house"] == 0
    assert report["is_manglik"] is False


def test_one_sided_manglik_note():
    manglik = _with_planet(BASE, "Mars", house=7)
    clear = _with_planet(BASE, "Mars", house=3)
    assert compute_compatibility(manglik, clear)["manglik"]["note"] == "Only one chart is Manglik."
    assert compute_compatibility(clear, clear)["manglik"]["note"] == "Neither chart is Manglik."
