"""
numerology.py
=============
Mulank (birth number) and Bhagyank (destiny number).

    Mulank   = day of month            mod 9   (0 → 9)
    Bhagyank = digit sum of YYYYMMDD   mod 9   (0 → 9)

Only one mod-9 step is applied. For positive integers that already equals
the repeated digit sum, so no further passes are made.
"""

from datetime import date

from .models import Numerology


def reduce_to_digit(value: int) -> int:
    """value mod 9, with 0 read as 9."""
    remainder = value % 9
    return 9 if remainder == 0 else remainder


def digit_sum(text: str) -> int:
    return sum(int(ch) for ch in text if ch.isdigit())


def mulank(birth_date: date) -> int:
    return reduce_to_digit(birth_date.day)


def bhagyank(birth_date: date) -> int:
    compact = f"{birth_date.year:04d}{birth_date.month:02d}{birth_date.day:02d}"
    return reduce_to_digit(digit_sum(compact))


def compute_numerology(birth_date: date) -> Numerology:
    return Numerology(mulank=mulank(birth_date), bhagyank=bhagyank(birth_date))
