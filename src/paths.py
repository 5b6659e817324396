"""
paths.py – keskitetyt polut charlie-weatherille.

Tämän ideana on, että voit aina kirjoittaa:
    from src.paths import DATA, LOGS, data_path

…ja saat oikean polun riippumatta siitä, kutsutaanko sovellusta
projektin juuresta (streamlit run main.py) vai jostain muualta.
"""

from __future__ import annotations
from pathlib import Path

# src/paths.py -> src -> projektin juuri (= src:n parent)
ROOT_DIR = Path(__file__).resolve().parent.parent

SRC = ROOT_DIR / "src"
ASSETS = ROOT_DIR / "assets"
DATA = ROOT_DIR / "data"
LOGS = ROOT_DIR / "logs"


def root_path(*parts: str) -> Path:
    """Palauttaa polun projektin juureen suhteessa."""
    return ROOT_DIR.joinpath(*parts)


def asset_path(*parts: str) -> Path:
    """Palauttaa polun assets-kansioon."""
    return ASSETS.joinpath(*parts)


def data_path(*parts: str) -> Path:
    """Palauttaa polun data-kansioon."""
    return DATA.joinpath(*parts)


def ensure_dirs() -> None:
    """Varmistaa, että logs/ ja data/ ovat olemassa."""
    LOGS.mkdir(parents=True, exist_ok=True)
    DATA.mkdir(parents=True, exist_ok=True)
