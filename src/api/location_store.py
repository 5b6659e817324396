"""
Sijainnin välimuisti.

Selaimen evästettä vastaava JSON-tiedosto, jossa jokainen tietue on muotoa
``{nimi: {"value": <json>, "expires": <epoch s>, "path": "/"}}``.
Vanhentuminen tarkistetaan täällä, ei sijainnin ratkaisijassa.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any

from src.api.errors import UpstreamError
from src.api.models import Location
from src.config import (
    LOCATION_COOKIE_FILE,
    LOCATION_COOKIE_MAX_AGE_S,
    LOCATION_COOKIE_NAME,
    LOCATION_COOKIE_PATH,
)

logger = logging.getLogger("charlie")


class LocationStore:
    def __init__(
        self,
        path: Path = LOCATION_COOKIE_FILE,
        name: str = LOCATION_COOKIE_NAME,
        max_age_s: int = LOCATION_COOKIE_MAX_AGE_S,
        cookie_path: str = LOCATION_COOKIE_PATH,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.path = Path(path)
        self.name = name
        self.max_age_s = max_age_s
        self.cookie_path = cookie_path
        self._clock = clock

    def _read_all(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("location cookie unreadable (%s): %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def load(self) -> Location | None:
        """Palauttaa voimassa olevan sijainnin tai None (puuttuu / vanhentunut / rikki)."""
        record = self._read_all().get(self.name)
        if not isinstance(record, dict):
            return None

        expires = record.get("expires")
        if not isinstance(expires, int | float) or expires <= self._clock():
            return None

        try:
            location = Location.from_json(record.get("value"))
        except UpstreamError as e:
            logger.warning("location cookie has invalid value: %s", e)
            return None
        return location

    def save(self, location: Location) -> None:
        cookies = self._read_all()
        cookies[self.name] = {
            "value": location.to_json(),
            "expires": self._clock() + self.max_age_s,
            "path": self.cookie_path,
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(cookies, ensure_ascii=False), encoding="utf-8")
        logger.info("location cookie saved: %s / %s", location.city, location.state)
