"""
Nykyisen sään haku /api/weather -rajapinnasta.

Palauttaa CurrentWeather-mallin tai nostaa:
- NotFoundError, jos palvelu ei tunne kaupunkia (HTTP 404 tai cod == "404")
- UpstreamError muista verkko- ja datavirheistä
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from src.api.errors import NotFoundError, UpstreamError
from src.api.http import http_get_json
from src.api.models import CurrentWeather
from src.api.units import to_celsius_display, to_fahrenheit_display
from src.api.weather_utils import as_float, as_int, as_str, strip_accents
from src.config import API_BASE_URL


def weather_url() -> str:
    return f"{API_BASE_URL}/api/weather"


def _is_not_found(data: Any) -> bool:
    return isinstance(data, Mapping) and str(data.get("cod", "")) == "404"


def map_current_weather(data: Any) -> CurrentWeather:
    """Muuntaa palvelun vastauksen (main/weather/wind) näkymämalliksi."""
    try:
        main = data["main"]
        conditions = data["weather"][0]
        wind = data["wind"]
        temp = as_float(main["temp"])
    except (KeyError, IndexError, TypeError) as e:
        raise UpstreamError(f"malformed weather payload: {e!r}") from e

    if not all(isinstance(part, Mapping) for part in (main, conditions, wind)):
        raise UpstreamError("malformed weather payload: main/weather/wind must be objects")
    if temp is None or not math.isfinite(temp):
        raise UpstreamError("malformed weather payload: main.temp is not a finite number")

    return CurrentWeather(
        temperature_raw=temp,
        temperature_c=to_celsius_display(temp),
        temperature_f=to_fahrenheit_display(temp),
        humidity=as_int(main.get("humidity")),
        pressure=as_int(main.get("pressure")),
        icon=as_str(conditions.get("icon")) or "",
        description=as_str(conditions.get("description")) or "",
        wind_degrees=as_int(wind.get("deg")),
        wind_speed=as_float(wind.get("speed")),
    )


def fetch_weather(city: str) -> CurrentWeather:
    normalized_city = strip_accents(city)
    try:
        data = http_get_json(weather_url(), params={"cidade": normalized_city})
    except UpstreamError as e:
        if e.status_code == 404:
            raise NotFoundError(f"city not found: {normalized_city}", status_code=404) from e
        raise

    if _is_not_found(data):
        raise NotFoundError(f"city not found: {normalized_city}", status_code=404)

    return map_current_weather(data)
