from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from typing import Any

from src.api.errors import UpstreamError


@dataclass(frozen=True)
class Coordinates:
    """Laitteen antama yksittäinen paikkatieto."""

    latitude: float | None = None
    longitude: float | None = None


@dataclass(frozen=True)
class Location:
    """Resolved city/state pair, also the payload of the location cookie."""

    city: str | None = None
    state: str | None = None

    def to_json(self) -> str:
        return json.dumps(asdict(self), ensure_ascii=False)

    @classmethod
    def from_mapping(cls, data: Any) -> Location:
        if not isinstance(data, Mapping):
            raise UpstreamError(f"location payload is not an object: {type(data).__name__}")
        city = data.get("city")
        state = data.get("state")
        return cls(
            city=str(city) if city is not None else None,
            state=str(state) if state is not None else None,
        )

    @classmethod
    def from_json(cls, raw: str) -> Location:
        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise UpstreamError(f"location json is invalid: {e}") from e
        return cls.from_mapping(data)


@dataclass
class CurrentWeather:
    temperature_raw: float
    temperature_c: str
    temperature_f: str
    humidity: int | None
    pressure: int | None
    icon: str
    description: str
    wind_degrees: int | None
    wind_speed: float | None


@dataclass
class ForecastEntry:
    temperature_raw: float
    temperature_c: str
    temperature_f: str
    timestamp: str


@dataclass(frozen=True)
class Municipality:
    id: int
    city: str
    state: str | None


@dataclass(frozen=True)
class Directory:
    """Kuntarekisterin kaksi projektiota; indeksi i viittaa samaan kuntaan molemmissa."""

    names: list[str] = field(default_factory=list)
    municipalities: list[Municipality] = field(default_factory=list)
