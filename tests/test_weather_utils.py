from __future__ import annotations

import pandas as pd

from src.api.weather_utils import as_float, as_int, as_str, strip_accents


def test_strip_accents_removes_diacritics():
    assert strip_accents("São Paulo") == "Sao Paulo"
    assert strip_accents("Goiânia") == "Goiania"
    assert strip_accents("Maceió") == "Maceio"
    assert strip_accents("Florianópolis") == "Florianopolis"


def test_strip_accents_keeps_plain_text():
    assert strip_accents("Curitiba") == "Curitiba"
    assert strip_accents("") == ""


def test_as_float_accepts_strings_and_commas():
    assert as_float("1,5") == 1.5
    assert as_float(" 22.25 ") == 22.25
    assert as_float(7) == 7.0


def test_as_float_invalid_or_missing_is_none():
    assert as_float(None) is None
    assert as_float("abc") is None
    assert as_float(float("nan")) is None
    assert as_float(True) is None


def test_as_int_truncates():
    assert as_int("12.7") == 12
    assert as_int(pd.Series([1013]).iloc[0]) == 1013
    assert as_int("x") is None


def test_as_str_handles_pandas_na():
    assert as_str(pd.NA) is None
    assert as_str(float("nan")) is None
    assert as_str("Bahia") == "Bahia"


def test_as_int_non_finite_is_none():
    assert as_int(float("inf")) is None
    assert as_int("-inf") is None
    assert as_int(float("nan")) is None
