from __future__ import annotations

import math
import re
import unicodedata
from typing import Any

import pandas as pd

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")


def strip_accents(text: str) -> str:
    """
    Poistaa diakriittiset merkit: 'São Paulo' -> 'Sao Paulo'.
    NFD-hajotelma ja yhdistyvien merkkien (U+0300–U+036F) poisto.
    """
    return _COMBINING_MARKS.sub("", unicodedata.normalize("NFD", text))


def _cast_to_float(value: Any) -> float | None:
    """Muunna annettu arvo float-tyypiksi, tai palauta None jos muunnos epäonnistuu."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", ".")

    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _cast_to_int(value: Any) -> int | None:
    """Muunna annettu arvo int-tyypiksi, tai palauta None jos muunnos epäonnistuu."""
    as_f = _cast_to_float(value)
    if as_f is None or not math.isfinite(as_f):
        return None
    return int(as_f)


def _normalize_scalar(value: Any) -> Any | None:
    """
    Yhtenäinen esikäsittely eri lähdetyypeille:
    - None → None
    - pandas NA / NaN → None
    - numpy-scalar tms. → .item()
    """
    if value is None:
        return None

    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None

    if hasattr(value, "item"):
        try:
            value = value.item()
        except (TypeError, ValueError):
            pass

    return value


def safe_cast(value: Any, type_: type) -> Any | None:
    """
    Turvallinen muunnos annetuksi tyypiksi (int, float, str).
    Palauttaa None, jos muunnos ei onnistu.
    """
    value = _normalize_scalar(value)
    if value is None:
        return None

    if type_ is float:
        return _cast_to_float(value)
    if type_ is int:
        return _cast_to_int(value)
    if type_ is str:
        return str(value)

    try:
        return type_(value)
    except (TypeError, ValueError):
        return None


def as_int(x: Any) -> int | None:
    return safe_cast(x, int)


def as_float(x: Any) -> float | None:
    return safe_cast(x, float)


def as_str(x: Any) -> str | None:
    return safe_cast(x, str)
