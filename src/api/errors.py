from __future__ import annotations


class WeatherAppError(Exception):
    """Yhteinen kantaluokka sovelluksen omille virheille."""


class InputError(WeatherAppError):
    """Raised when a location cannot be resolved from the given input (no cache, no coordinates)."""


class UpstreamError(WeatherAppError):
    """Network, HTTP or payload failure from one of the upstream endpoints."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(UpstreamError):
    """The weather provider does not recognise the requested city."""
