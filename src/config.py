# config.py
"""Configuration settings for the charlie-weather application."""

import os
from zoneinfo import ZoneInfo

from src.paths import data_path


def _env_float(name: str) -> float | None:
    """Lue valinnainen liukuluku ympäristömuuttujasta (tyhjä tai virheellinen → None)."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw.replace(",", "."))
    except ValueError:
        return None


DEV: bool = os.environ.get("DEV", "0") == "1"

# ------------------- HTTP -------------------

API_BASE_URL: str = os.environ.get("CHARLIE_API_BASE_URL", "http://localhost:3000").rstrip("/")
"""Base URL of the weather backend serving /api/location, /api/weather and /api/forecast."""

MUNICIPALITIES_URL: str = os.environ.get(
    "CHARLIE_MUNICIPALITIES_URL",
    "https://servicodados.ibge.gov.br/api/v1/localidades/municipios",
)
"""IBGE municipality registry."""

HTTP_TIMEOUT_S: float | None = _env_float("HTTP_TIMEOUT_S")
"""Request timeout in seconds. Unset means requests wait without a timeout."""

USER_AGENT: str = "charlie-weather/1.0"

# ------------------- LOCATION COOKIE -------------------

LOCATION_COOKIE_NAME: str = "@challenge-charlie"
LOCATION_COOKIE_MAX_AGE_S: int = 60 * 60 * 4  # 4 h
LOCATION_COOKIE_PATH: str = "/"
LOCATION_COOKIE_FILE = data_path("location_cookie.json")

# ------------------- GEOLOCATION AND TIMEZONE -------------------

LAT: float | None = _env_float("CHARLIE_LAT")
LON: float | None = _env_float("CHARLIE_LON")
"""Optional fallback coordinates when the page query string has none."""

TZ: ZoneInfo = ZoneInfo(os.environ.get("CHARLIE_TZ", "America/Sao_Paulo"))
"""Timezone used to decide which forecast day is 'today'."""

FORECAST_DATE_FMT: str = "%d/%m/%Y"
"""Date format of forecast dt_txt values (dd/MM/yyyy)."""

# ------------------- UI -------------------

SUGGESTION_LIMIT: int = 8
"""Max autocomplete suggestions shown under the city search."""
