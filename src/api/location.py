from __future__ import annotations

import logging

from src.api.errors import InputError, UpstreamError
from src.api.http import http_get_json
from src.api.location_store import LocationStore
from src.api.models import Coordinates, Location
from src.config import API_BASE_URL

logger = logging.getLogger("charlie")


def location_url() -> str:
    return f"{API_BASE_URL}/api/location"


def resolve_location(
    cached: Location | None,
    coords: Coordinates,
    store: LocationStore | None = None,
) -> Location:
    """
    Ratkaisee käyttäjän kaupungin ja osavaltion.

    1) välimuistissa oleva sijainti palautetaan sellaisenaan (ei verkkokutsua)
    2) ilman koordinaatteja → InputError
    3) muuten käänteinen geokoodaus /api/location -rajapinnasta, tulos talteen storeen
    """
    if cached is not None:
        return cached

    if coords.latitude is None and coords.longitude is None:
        raise InputError("coordinates unavailable")

    try:
        data = http_get_json(
            location_url(),
            params={"lon": coords.longitude, "lat": coords.latitude},
        )
        location = Location.from_mapping(data)
    except UpstreamError as e:
        logger.error("location lookup failed (lat=%s, lon=%s): %s", coords.latitude, coords.longitude, e)
        raise

    if store is not None:
        try:
            store.save(location)
        except OSError as e:
            # sijainti on silti käyttökelpoinen, vain välimuisti jää kirjoittamatta
            logger.warning("could not persist location: %s", e)

    return location
