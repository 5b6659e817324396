from __future__ import annotations

import json

from src.api.location_store import LocationStore
from src.api.models import Location


def _store(tmp_path, now=1000.0):
    clock = {"now": now}
    store = LocationStore(path=tmp_path / "cookies.json", clock=lambda: clock["now"])
    return store, clock


def test_load_missing_file_returns_none(tmp_path):
    store, _ = _store(tmp_path)
    assert store.load() is None


def test_save_then_load_round_trip(tmp_path):
    store, _ = _store(tmp_path)
    store.save(Location(city="Curitiba", state="Paraná"))

    assert store.load() == Location(city="Curitiba", state="Paraná")


def test_save_writes_cookie_record(tmp_path):
    store, _ = _store(tmp_path, now=1000.0)
    store.save(Location(city="Natal", state="Rio Grande do Norte"))

    data = json.loads((tmp_path / "cookies.json").read_text(encoding="utf-8"))
    record = data["@challenge-charlie"]
    assert record["path"] == "/"
    assert record["expires"] == 1000.0 + 4 * 60 * 60
    assert json.loads(record["value"]) == {"city": "Natal", "state": "Rio Grande do Norte"}


def test_load_after_four_hours_is_expired(tmp_path):
    store, clock = _store(tmp_path, now=1000.0)
    store.save(Location(city="Natal", state="RN"))

    clock["now"] = 1000.0 + 4 * 60 * 60 - 1
    assert store.load() is not None

    clock["now"] = 1000.0 + 4 * 60 * 60
    assert store.load() is None


def test_save_keeps_other_records(tmp_path):
    path = tmp_path / "cookies.json"
    path.write_text(json.dumps({"other": {"value": "x", "expires": 9e12}}), encoding="utf-8")
    store, _ = _store(tmp_path)

    store.save(Location(city="Belém", state="Pará"))

    data = json.loads(path.read_text(encoding="utf-8"))
    assert "other" in data
    assert "@challenge-charlie" in data


def test_corrupted_file_or_value_returns_none(tmp_path):
    path = tmp_path / "cookies.json"
    store, _ = _store(tmp_path)

    path.write_text("{not json", encoding="utf-8")
    assert store.load() is None

    path.write_text(
        json.dumps({"@challenge-charlie": {"value": "[1, 2", "expires": 9e12}}), encoding="utf-8"
    )
    assert store.load() is None
