# src/api/municipalities.py
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import pandas as pd

from src.api.errors import UpstreamError
from src.api.http import http_get_json
from src.api.models import Directory, Municipality
from src.api.weather_utils import as_int, as_str, strip_accents
from src.config import MUNICIPALITIES_URL

logger = logging.getLogger("charlie")

_STATE_COLUMN = "microrregiao.mesorregiao.UF.nome"


def build_directory(records: Any) -> Directory:
    """
    Rakentaa kuntalistasta kaksi projektiota:
    - names: kuntien nimet pienillä kirjaimilla (haku / autocomplete)
    - municipalities: {id, city, state}
    """
    if not isinstance(records, list):
        raise UpstreamError(f"municipality payload is not a list: {type(records).__name__}")
    if not records:
        return Directory(names=[], municipalities=[])
    if not all(isinstance(record, Mapping) for record in records):
        raise UpstreamError("municipality payload contains non-object records")

    frame = pd.json_normalize(records)
    missing = {"id", "nome"} - set(frame.columns)
    if missing:
        raise UpstreamError(f"municipality records missing fields: {sorted(missing)}")

    # jos aluehierarkia puuttuu kokonaan (null), osavaltio jää tyhjäksi
    if _STATE_COLUMN in frame.columns:
        states = frame[_STATE_COLUMN]
    else:
        states = pd.Series([None] * len(frame))

    municipalities: list[Municipality] = []
    names: list[str] = []
    for raw_id, raw_name, raw_state in zip(frame["id"], frame["nome"], states):
        ident = as_int(raw_id)
        name = as_str(raw_name)
        if ident is None or name is None:
            raise UpstreamError(f"invalid municipality record: id={raw_id!r} nome={raw_name!r}")
        municipalities.append(Municipality(id=ident, city=name, state=as_str(raw_state)))
        names.append(name.lower())

    return Directory(names=names, municipalities=municipalities)


def load_directory() -> Directory:
    directory = build_directory(http_get_json(MUNICIPALITIES_URL))
    logger.info("municipality directory loaded: %d entries", len(directory.names))
    return directory


def suggest_municipalities(directory: Directory, query: str, limit: int = 8) -> list[Municipality]:
    """Autocomplete: nimen alkuosa, kirjainkoosta ja aksenteista välittämättä."""
    needle = strip_accents(query).strip().lower()
    if not needle:
        return []

    out: list[Municipality] = []
    for name, municipality in zip(directory.names, directory.municipalities):
        if strip_accents(name).startswith(needle):
            out.append(municipality)
            if len(out) >= limit:
                break
    return out
