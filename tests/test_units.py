from __future__ import annotations

import math

import pytest

from src.api.models import CurrentWeather, ForecastEntry
from src.api.units import TempUnit, display_temperature, to_celsius_display, to_fahrenheit_display


def test_celsius_display_truncates_towards_zero():
    assert to_celsius_display(23.9) == "23 °C"
    assert to_celsius_display(-3.7) == "-3 °C"
    assert to_celsius_display(0) == "0 °C"


def test_fahrenheit_display_known_values():
    assert to_fahrenheit_display(0) == "32 °F"
    assert to_fahrenheit_display(100) == "212 °F"
    # 37 * 1.8 + 32 = 98.6 → 98
    assert to_fahrenheit_display(37) == "98 °F"


@pytest.mark.parametrize("temp", [-12.5, -0.4, 0.0, 12.34, 21.0, 36.6, 41.99])
def test_fahrenheit_display_matches_formula(temp):
    assert to_fahrenheit_display(temp) == f"{math.trunc(temp * 1.8 + 32)} °F"


def test_temp_unit_flips_both_ways():
    assert TempUnit.CELSIUS.flipped() is TempUnit.FAHRENHEIT
    assert TempUnit.FAHRENHEIT.flipped() is TempUnit.CELSIUS
    assert TempUnit.CELSIUS.value == "tempC"


def test_display_temperature_picks_unit():
    entry = ForecastEntry(
        temperature_raw=20.5, temperature_c="20 °C", temperature_f="68 °F", timestamp="20/10/2026"
    )
    weather = CurrentWeather(
        temperature_raw=10.0,
        temperature_c="10 °C",
        temperature_f="50 °F",
        humidity=None,
        pressure=None,
        icon="",
        description="",
        wind_degrees=None,
        wind_speed=None,
    )
    assert display_temperature(entry, TempUnit.CELSIUS) == "20 °C"
    assert display_temperature(entry, TempUnit.FAHRENHEIT) == "68 °F"
    assert display_temperature(weather, TempUnit.FAHRENHEIT) == "50 °F"
