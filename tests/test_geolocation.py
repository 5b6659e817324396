from __future__ import annotations

import src.api.geolocation as geo
from src.api.models import Coordinates


def _collect(geolocate):
    got: list[Coordinates] = []
    geolocate(got.append)
    return got


def test_fixed_geolocator_calls_back_once():
    assert _collect(geo.fixed_geolocator(-23.5, -46.6)) == [Coordinates(-23.5, -46.6)]


def test_query_param_geolocator_reads_lat_lon():
    geolocate = geo.query_param_geolocator({"lat": "-15.8", "lon": "-47.9"})
    assert geolocate is not None
    assert _collect(geolocate) == [Coordinates(latitude=-15.8, longitude=-47.9)]


def test_query_param_geolocator_unavailable_without_params():
    assert geo.query_param_geolocator({}) is None
    assert geo.query_param_geolocator({"lat": "abc"}) is None


def test_default_geolocator_falls_back_to_config(monkeypatch):
    monkeypatch.setattr(geo, "LAT", -30.0)
    monkeypatch.setattr(geo, "LON", -51.2)

    geolocate = geo.default_geolocator({})
    assert geolocate is not None
    assert _collect(geolocate) == [Coordinates(-30.0, -51.2)]


def test_default_geolocator_none_when_nothing_configured(monkeypatch):
    monkeypatch.setattr(geo, "LAT", None)
    monkeypatch.setattr(geo, "LON", None)

    assert geo.default_geolocator({}) is None
