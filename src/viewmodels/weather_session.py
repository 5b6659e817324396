"""
Sääsivun tila ja sen orkestrointi.

WeatherSession omistaa SessionState-olion. Käyttäjät lukevat tilan
``session.state``-kopion kautta ja muuttavat sitä vain alla olevilla operaatioilla:

    start(geolocate)          kuntalista + sijainti (eväste tai laitteen koordinaatit)
    refresh_weather(city)     nykyinen sää
    refresh_forecast(city)    ennuste
    toggle_temperature_unit() °C <-> °F, ei uutta hakua

Sää ja ennuste käynnistetään vasta, kun sijainti on ratkaistu.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Executor, Future, ThreadPoolExecutor, wait as wait_futures
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from src.api.errors import InputError, NotFoundError, UpstreamError
from src.api.forecast import fetch_forecast
from src.api.geolocation import Geolocator
from src.api.location import resolve_location
from src.api.location_store import LocationStore
from src.api.models import Coordinates, CurrentWeather, Directory, ForecastEntry, Location, Municipality
from src.api.municipalities import load_directory, suggest_municipalities
from src.api.units import TempUnit
from src.api.weather import fetch_weather
from src.config import SUGGESTION_LIMIT
from src.utils import report_error

logger = logging.getLogger("charlie")

CITY_NOT_FOUND_NOTICE = "Cidade não encontrada!"
WEATHER_UNAVAILABLE_NOTICE = "Não foi possível carregar o clima. Tente novamente."


class SessionStatus(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOCATING = "locating"
    READY = "ready"


@dataclass
class SessionState:
    status: SessionStatus = SessionStatus.UNINITIALIZED
    temp_unit: TempUnit = TempUnit.CELSIUS
    location: Location = field(default_factory=Location)
    weather: CurrentWeather | None = None
    forecast: list[ForecastEntry] | None = None
    # None = kuntalistaa ei ole (vielä) ladattu, [] = ladattu mutta tyhjä
    names: list[str] | None = None
    municipalities: list[Municipality] | None = None
    notice: str | None = None
    in_flight: int = 0

    @property
    def loading(self) -> bool:
        return self.in_flight > 0


class WeatherSession:
    def __init__(
        self,
        store: LocationStore | None = None,
        executor: Executor | None = None,
        on_notice: Callable[[str], None] | None = None,
    ) -> None:
        self._store = store if store is not None else LocationStore()
        self._executor = executor if executor is not None else ThreadPoolExecutor(
            max_workers=4, thread_name_prefix="charlie"
        )
        self._on_notice = on_notice
        self._state = SessionState()
        self._lock = threading.Lock()
        self._pending: set[Future] = set()

    # --- tilan luku -----------------------------------------------------------

    @property
    def state(self) -> SessionState:
        """Kopio nykytilasta listoineen; muutokset tehdään vain operaatioiden kautta."""
        with self._lock:
            state = self._state
            return replace(
                state,
                forecast=list(state.forecast) if state.forecast is not None else None,
                names=list(state.names) if state.names is not None else None,
                municipalities=list(state.municipalities) if state.municipalities is not None else None,
            )

    @property
    def loading(self) -> bool:
        with self._lock:
            return self._state.loading

    # --- sisäiset setterit ----------------------------------------------------

    def _update(self, **changes: Any) -> None:
        with self._lock:
            for name, value in changes.items():
                setattr(self._state, name, value)

    def _begin_fetch(self) -> None:
        with self._lock:
            self._state.in_flight += 1

    def _end_fetch(self) -> None:
        with self._lock:
            self._state.in_flight = max(0, self._state.in_flight - 1)

    def _notify(self, message: str) -> None:
        self._update(notice=message)
        if self._on_notice is not None:
            self._on_notice(message)

    def _submit(self, fn: Callable[..., Any], *args: Any) -> Future:
        future = self._executor.submit(fn, *args)
        with self._lock:
            self._pending.add(future)
        future.add_done_callback(self._forget)
        return future

    def _forget(self, future: Future) -> None:
        with self._lock:
            self._pending.discard(future)
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.error("background task failed: %s: %s", type(exc).__name__, exc, exc_info=exc)

    # --- käynnistys ja sijainti -----------------------------------------------

    def start(self, geolocate: Geolocator | None) -> None:
        """
        Käynnistää istunnon kerran:
        1) kuntalista taustalle (riippumaton sijainnista)
        2) sijainti evästeestä, tai laitteen koordinaateista jos evästettä ei ole
        """
        with self._lock:
            if self._state.status is not SessionStatus.UNINITIALIZED:
                logger.debug("session already started (%s)", self._state.status.value)
                return
            self._state.status = SessionStatus.LOCATING

        self._submit(self.load_directory)

        cached = self._store.load()
        if cached is not None:
            logger.info("using cached location: %s / %s", cached.city, cached.state)
            self._adopt_location(cached)
            return

        if geolocate is None:
            logger.warning("geolocation unavailable and no cached location; waiting")
            return

        geolocate(self._on_coordinates)

    def _on_coordinates(self, coords: Coordinates) -> None:
        self._submit(self._resolve, coords)

    def _resolve(self, coords: Coordinates) -> None:
        try:
            location = resolve_location(self._store.load(), coords, store=self._store)
        except InputError as e:
            logger.warning("location not resolved: %s", e)
            return
        except UpstreamError:
            # resolve_location on jo kirjannut virheen
            return
        self._adopt_location(location)

    def _adopt_location(self, location: Location) -> None:
        self._update(location=location, status=SessionStatus.READY)
        if location.city:
            self._submit(self.refresh_weather, location.city)
            self._submit(self.refresh_forecast, location.city)

    # --- haut -----------------------------------------------------------------

    def refresh_weather(self, city: str) -> CurrentWeather | None:
        self._begin_fetch()
        try:
            weather = fetch_weather(city)
        except NotFoundError as e:
            report_error(f"weather: {city}", e)
            self._notify(CITY_NOT_FOUND_NOTICE)
            return None
        except UpstreamError as e:
            report_error(f"weather: {city}", e)
            self._notify(WEATHER_UNAVAILABLE_NOTICE)
            return None
        else:
            self._update(weather=weather)
            return weather
        finally:
            self._end_fetch()

    def refresh_forecast(self, city: str) -> list[ForecastEntry] | None:
        self._begin_fetch()
        try:
            forecast = fetch_forecast(city)
        except UpstreamError as e:
            report_error(f"forecast: {city}", e)
            return None
        else:
            self._update(forecast=forecast)
            return forecast
        finally:
            self._end_fetch()

    def load_directory(self) -> Directory | None:
        try:
            directory = load_directory()
        except UpstreamError as e:
            report_error("municipalities", e)
            return None
        self._update(names=directory.names, municipalities=directory.municipalities)
        return directory

    # --- käyttäjän toiminnot --------------------------------------------------

    def toggle_temperature_unit(self) -> TempUnit:
        with self._lock:
            self._state.temp_unit = self._state.temp_unit.flipped()
            return self._state.temp_unit

    def suggest(self, query: str, limit: int = SUGGESTION_LIMIT) -> list[Municipality]:
        with self._lock:
            names = self._state.names
            municipalities = self._state.municipalities
        if names is None or municipalities is None:
            return []
        return suggest_municipalities(Directory(names, municipalities), query, limit=limit)

    def clear_notice(self) -> None:
        self._update(notice=None)

    def wait(self, timeout: float | None = None) -> None:
        """Odottaa, että jonossa oleva työ (myös sen käynnistämä jatkotyö) on valmis."""
        while True:
            with self._lock:
                pending = set(self._pending)
            if not pending:
                return
            _, not_done = wait_futures(pending, timeout=timeout)
            if not_done:
                return
