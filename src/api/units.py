from __future__ import annotations

import math
from enum import Enum

from src.api.models import CurrentWeather, ForecastEntry


class TempUnit(str, Enum):
    """Which of the two display strings the UI shows."""

    CELSIUS = "tempC"
    FAHRENHEIT = "tempF"

    def flipped(self) -> TempUnit:
        return TempUnit.FAHRENHEIT if self is TempUnit.CELSIUS else TempUnit.CELSIUS


def to_celsius_display(temp: float) -> str:
    # provider palauttaa metrisiä arvoja, joten raakalukema on jo °C
    return f"{math.trunc(temp)} °C"


def to_fahrenheit_display(temp: float) -> str:
    return f"{math.trunc(temp * 1.8 + 32)} °F"


def display_temperature(item: CurrentWeather | ForecastEntry, unit: TempUnit) -> str:
    return item.temperature_f if unit is TempUnit.FAHRENHEIT else item.temperature_c
