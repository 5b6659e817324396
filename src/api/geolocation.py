# src/api/geolocation.py
from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from src.api.models import Coordinates
from src.api.weather_utils import as_float
from src.config import LAT, LON

CoordinatesCallback = Callable[[Coordinates], None]
Geolocator = Callable[[CoordinatesCallback], None]
"""Kertaluonteinen paikannus: kutsuu callbackia korkeintaan kerran, ei aikakatkaisua."""


def fixed_geolocator(lat: float | None, lon: float | None) -> Geolocator:
    def _request(callback: CoordinatesCallback) -> None:
        callback(Coordinates(latitude=lat, longitude=lon))

    return _request


def query_param_geolocator(params: Mapping[str, Any]) -> Geolocator | None:
    """Lukee ?lat=..&lon=.. sivun osoitteesta. None, jos kumpaakaan ei ole."""
    lat = as_float(params.get("lat"))
    lon = as_float(params.get("lon"))
    if lat is None and lon is None:
        return None
    return fixed_geolocator(lat, lon)


def default_geolocator(params: Mapping[str, Any]) -> Geolocator | None:
    geolocate = query_param_geolocator(params)
    if geolocate is not None:
        return geolocate
    if LAT is not None or LON is not None:
        return fixed_geolocator(LAT, LON)
    return None
