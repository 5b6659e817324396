from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from src.api.errors import UpstreamError
from src.api.http import http_get_json
from src.api.models import ForecastEntry
from src.api.units import to_celsius_display, to_fahrenheit_display
from src.api.weather_utils import as_float, strip_accents
from src.config import API_BASE_URL, FORECAST_DATE_FMT, TZ


def forecast_url() -> str:
    return f"{API_BASE_URL}/api/forecast"


def _parse_day(dt_txt: Any) -> date | None:
    """
    Päivämäärä dt_txt-kentästä.
    Tuetaan 'dd/MM/yyyy[ ...]' sekä ISO 'yyyy-mm-dd[ HH:MM:SS]'.
    """
    if not isinstance(dt_txt, str):
        return None
    text = dt_txt.strip()
    try:
        return datetime.strptime(text[:10], FORECAST_DATE_FMT).date()
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def dedupe_forecast(items: list[dict[str, Any]], today: date) -> list[dict[str, Any]]:
    """
    Pudottaa intervallin, jonka dt_txt on jo nähty aiemmin listassa JA osuu tälle päivälle.

    Tämän päivän tuplat supistuvat yhdeksi, muiden päivien tuplat pääsevät läpi sellaisinaan.
    """
    seen: set[Any] = set()
    out: list[dict[str, Any]] = []

    for item in items:
        ts = item.get("dt_txt") if isinstance(item, Mapping) else None
        if ts in seen and _parse_day(ts) == today:
            continue
        seen.add(ts)
        out.append(item)

    return out


def map_forecast_entry(item: Any) -> ForecastEntry:
    try:
        temp = as_float(item["main"]["temp"])
        ts = item["dt_txt"]
    except (KeyError, TypeError) as e:
        raise UpstreamError(f"malformed forecast interval: {e!r}") from e

    if temp is None or not math.isfinite(temp):
        raise UpstreamError("malformed forecast interval: main.temp is not a finite number")

    return ForecastEntry(
        temperature_raw=temp,
        temperature_c=to_celsius_display(temp),
        temperature_f=to_fahrenheit_display(temp),
        timestamp=str(ts),
    )


def fetch_forecast(city: str, today: date | None = None) -> list[ForecastEntry]:
    """Hakee monen päivän ennusteen, poistaa tämän päivän tuplat ja muuntaa näkymämalliksi."""
    normalized_city = strip_accents(city)
    data = http_get_json(forecast_url(), params={"cidade": normalized_city})

    raw_list = data.get("list") if isinstance(data, Mapping) else None
    if not isinstance(raw_list, list):
        raise UpstreamError("malformed forecast payload: 'list' missing")

    if today is None:
        today = datetime.now(TZ).date()

    return [map_forecast_entry(item) for item in dedupe_forecast(raw_list, today)]
