"""
demo.py
=======
Demonstration of the Vedic Engine.
Run: python -m vedic_engine.demo

Generates a birth chart, a Panchang and a match for sample inputs and
prints a formatted report.
"""

from datetime import datetime

from vedic_engine import compute_chart, compute_panchang


def print_section(title: str):
    print(f"\n{'─'*60}")
    print(f"  {title}")
    print(f"{'─'*60}")


def format_planet_table(chart) -> str:
    lines = [f"{'Planet':<12} {'Sign':<14} {'Degree':<10} {'House':<6}"]
    lines.append("─" * 45)
    for p in chart.planets:
        lines.append(f"{p.name:<12} {p.sign:<14} {p.degree:<10} H{p.house}")
    return "\n".join(lines)


def run_demo():
    print("=" * 60)
    print("   VEDIC ENGINE — SAMPLE BIRTH CHART")
    print("=" * 60)

    # ── Sample birth data ──
    params = {"date_iso": "1990-06-15", "time_hhmm": "10:30", "place": "Delhi"}

    print(f"\n  Birth Date  : {params['date_iso']}")
    print(f"  Birth Time  : {params['time_hhmm']} (civil, no timezone correction)")
    print(f"  Place       : {params['place']}")

    chart = compute_chart(**params)

    print_section("LAGNA (ASCENDANT)")
    print(f"  Sign        : {chart.ascendant_sign}")
    print(f"  Longitude   : {chart.ascendant_longitude:.2f}°")

    print_section("RASI CHART — PLANET POSITIONS")
    print(format_planet_table(chart))

    print_section("NUMEROLOGY")
    print(f"  Mulank      : {chart.numerology.mulank}")
    print(f"  Bhagyank    : {chart.numerology.bhagyank}")

    print_section("PANCHANG")
    p = compute_panchang(datetime(2024, 1, 15, 6, 0), 28.6139, 77.2090)
    print(f"  Vara (Day)    : {p.weekday}")
    print(f"  Tithi         : {p.tithi} ({p.paksha} Paksha)")
    print(f"  Nakshatra     : {p.nakshatra}")
    print(f"  Yoga          : {p.yoga}")
    print(f"  Karana        : {p.karana}")
    print(f"  Rahu Kalam    : {p.rahu_kalam}")
    print(f"  Ritu / Ayana  : {p.ritu} / {p.ayana}")
    print(f"  Sunrise       : {p.sunrise}   Sunset: {p.sunset}")
    print(f"  Location      : {p.latitude}, {p.longitude}")

    print_section("KUNDLI MILAN")
    # root-level module, installed beside the package
    from matchmaker import compute_compatibility

    partner = compute_chart("1992-03-08", "18:45", "Mumbai")
    match = compute_compatibility(chart, partner)
    print(f"  Score         : {match['score']}/{match['max_score']}")
    print(f"  Verdict       : {match['verdict']}")
    print(f"  Manglik       : {match['manglik']['note']}")

    print_section("TECHNICAL METADATA")
    print(f"  Julian Day    : {chart.julian_day}")

    print("\n")


if __name__ == "__main__":
    run_demo()
