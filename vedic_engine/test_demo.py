"""
test_demo.py
============
Smoke tests for the printed sample report.
"""

from vedic_engine.demo import format_planet_table, run_demo
from vedic_engine import compute_chart


def test_format_planet_table():
    table = format_planet_table(compute_chart("2000-01-01", "12:00", "Greenwich"))
    lines = table.splitlines()
    assert len(lines) == 2 + 9
    assert lines[2].startswith("Sun")
    assert "Dhanu" in lines[2] and "H4" in lines[2]


def test_run_demo(capsys):
    run_demo()
    out = capsys.readouterr().out
    assert "VEDIC ENGINE" in out
    assert "PANCHANG" in out
    assert "KUNDLI MILAN" in out
