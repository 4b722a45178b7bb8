from __future__ import annotations
import os
from typing import List


APP_NAME = os.getenv("APP_NAME", "Vedic Engine API")
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "info").lower()  # "debug" | "info" | "warning"

CORS_ALLOW_ORIGINS: List[str] = [o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()]

# Panchang display placeholders (not computed)
PANCHANG_SUNRISE = os.getenv("PANCHANG_SUNRISE", "06:12")
PANCHANG_SUNSET = os.getenv("PANCHANG_SUNSET", "18:24")
PANCHANG_MOONRISE = os.getenv("PANCHANG_MOONRISE", "19:05")
PANCHANG_ABHIJIT = os.getenv("PANCHANG_ABHIJIT", "11:54 - 12:42")
