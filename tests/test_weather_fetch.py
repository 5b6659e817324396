# tests/test_weather_fetch.py
from __future__ import annotations

import pytest

import src.api.weather as weather
from src.api.errors import NotFoundError, UpstreamError


def _fake_payload():
    return {
        "main": {"temp": 27.8, "humidity": 74, "pressure": 1012},
        "weather": [{"icon": "02d", "description": "algumas nuvens"}],
        "wind": {"deg": 140, "speed": 3.6},
    }


def test_fetch_weather_normalizes_city(monkeypatch):
    captured = {}

    def fake_get(url, params=None, **kw):
        captured["url"] = url
        captured["params"] = params
        return _fake_payload()

    monkeypatch.setattr(weather, "http_get_json", fake_get)

    weather.fetch_weather("São Paulo")

    assert captured["url"].endswith("/api/weather")
    assert captured["params"] == {"cidade": "Sao Paulo"}


def test_fetch_weather_maps_fields(monkeypatch):
    monkeypatch.setattr(weather, "http_get_json", lambda *a, **k: _fake_payload())

    out = weather.fetch_weather("Salvador")

    assert out.temperature_raw == 27.8
    assert out.temperature_c == "27 °C"
    assert out.temperature_f == "82 °F"
    assert out.humidity == 74
    assert out.pressure == 1012
    assert out.icon == "02d"
    assert out.description == "algumas nuvens"
    assert out.wind_degrees == 140
    assert out.wind_speed == 3.6


def test_fetch_weather_city_not_found_payload(monkeypatch):
    monkeypatch.setattr(
        weather, "http_get_json", lambda *a, **k: {"cod": "404", "message": "city not found"}
    )

    with pytest.raises(NotFoundError):
        weather.fetch_weather("Atlantis")


def test_fetch_weather_http_404_is_not_found(monkeypatch):
    def fake_get(*a, **k):
        raise UpstreamError("GET failed", status_code=404)

    monkeypatch.setattr(weather, "http_get_json", fake_get)

    with pytest.raises(NotFoundError):
        weather.fetch_weather("Atlantis")


def test_fetch_weather_other_http_errors_stay_upstream(monkeypatch):
    def fake_get(*a, **k):
        raise UpstreamError("GET failed", status_code=500)

    monkeypatch.setattr(weather, "http_get_json", fake_get)

    with pytest.raises(UpstreamError) as exc:
        weather.fetch_weather("Salvador")

    assert not isinstance(exc.value, NotFoundError)


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"main": {"temp": 20}, "weather": [], "wind": {}},
        {"main": {"temp": "warm"}, "weather": [{}], "wind": {}},
        None,
    ],
)
def test_fetch_weather_malformed_payload(monkeypatch, payload):
    monkeypatch.setattr(weather, "http_get_json", lambda *a, **k: payload)

    with pytest.raises(UpstreamError):
        weather.fetch_weather("Salvador")


@pytest.mark.parametrize("temp", [float("inf"), "-inf", "Infinity"])
def test_fetch_weather_non_finite_temperature(monkeypatch, temp):
    payload = _fake_payload()
    payload["main"]["temp"] = temp
    monkeypatch.setattr(weather, "http_get_json", lambda *a, **k: payload)

    with pytest.raises(UpstreamError):
        weather.fetch_weather("Salvador")


def test_fetch_weather_non_finite_humidity_is_dropped(monkeypatch):
    payload = _fake_payload()
    payload["main"]["humidity"] = float("inf")
    monkeypatch.setattr(weather, "http_get_json", lambda *a, **k: payload)

    assert weather.fetch_weather("Salvador").humidity is None
