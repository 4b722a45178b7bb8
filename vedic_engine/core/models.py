"""
models.py
=========
Immutable result values returned by the engine.

Every value is built once by the engine and never mutated; `to_dict()`
gives the JSON-ready shape served by the API.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class PlacedBody:
    id:             int
    name:           str
    longitude:      float
    sign_index:     int
    sign:           str
    house:          int
    degree_in_sign: float
    degree:         str     # degree_in_sign with two decimals

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "longitude": self.longitude,
            "sign_index": self.sign_index,
            "sign": self.sign,
            "house": self.house,
            "degree_in_sign": self.degree_in_sign,
            "degree": self.degree,
        }


@dataclass(frozen=True)
class Numerology:
    mulank:   int
    bhagyank: int

    def to_dict(self) -> dict:
        return {"mulank": self.mulank, "bhagyank": self.bhagyank}


@dataclass(frozen=True)
class NatalChart:
    ascendant_index:     int
    ascendant_sign:      str
    ascendant_longitude: float
    planets:             Tuple[PlacedBody, ...]
    instant:             datetime
    julian_day:          float
    date:                str
    time:                str
    place:               str
    numerology:          Numerology

    def planet(self, name: str) -> Optional[PlacedBody]:
        for body in self.planets:
            if body.name == name:
                return body
        return None

    @property
    def is_valid(self) -> bool:
        """False when any longitude came out non-finite."""
        values = [self.julian_day, self.ascendant_longitude]
        values.extend(p.longitude for p in self.planets)
        return all(math.isfinite(v) for v in values)

    def to_dict(self) -> dict:
        return {
            "lagna": {
                "index": self.ascendant_index,
                "sign": self.ascendant_sign,
                "longitude": self.ascendant_longitude,
            },
            "planets": [p.to_dict() for p in self.planets],
            "details": {"date": self.date, "time": self.time, "place": self.place},
            "numerology": self.numerology.to_dict(),
            "julian_day": self.julian_day,
            "instant": self.instant.isoformat(),
        }


@dataclass(frozen=True)
class PanchangDay:
    instant:         datetime
    julian_day:      float
    tithi_index:     int        # 1–30
    tithi:           str
    paksha:          str        # Shukla (bright) / Krishna (dark)
    nakshatra_index: int
    nakshatra:       str
    yoga_index:      int
    yoga:            str
    karana_index:    int
    karana:          str
    weekday_index:   int        # 0=Sunday
    weekday:         str
    rahu_kalam:      str
    ritu:            str
    ayana:           str
    sunrise:         str
    sunset:          str
    moonrise:        str
    abhijit:         str
    latitude:        Optional[str] = None
    longitude:       Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "date": self.instant.date().isoformat(),
            "julian_day": self.julian_day,
            "tithi": {"index": self.tithi_index, "name": self.tithi, "paksha": self.paksha},
            "nakshatra": {"index": self.nakshatra_index, "name": self.nakshatra},
            "yoga": {"index": self.yoga_index, "name": self.yoga},
            "karana": {"index": self.karana_index, "name": self.karana},
            "day": self.weekday,
            "rahu_kalam": self.rahu_kalam,
            "ritu": self.ritu,
            "ayana": self.ayana,
            "sunrise": self.sunrise,
            "sunset": self.sunset,
            "moonrise": self.moonrise,
            "abhijit": self.abhijit,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


@dataclass(frozen=True)
class MatchResult:
    score:   int
    verdict: str

    def to_dict(self) -> dict:
        return {"score": self.score, "max_score": 36, "verdict": self.verdict}
