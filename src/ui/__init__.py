"""Expose dashboard card render functions."""

from .card_weather import card_weather

__all__ = [
    "card_weather",
]
