# src/ui/common.py
from __future__ import annotations

import html

import streamlit as st

from src.paths import asset_path

OWM_ICON_URL = "https://openweathermap.org/img/wn/{icon}@2x.png"


def load_css(file_name: str) -> None:
    path = asset_path(file_name)
    if not path.exists():
        return
    with path.open("r", encoding="utf-8") as f:
        st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)


def esc(value: object) -> str:
    """HTML-escape for provider and user supplied text (city names, descriptions)."""
    return html.escape("" if value is None else str(value))


def section_title(title_html: str, mt: int = 10, mb: int = 10) -> None:
    """Render a section title; the caller escapes any untrusted parts of ``title_html``."""
    st.markdown(
        f"<div class='section-title' style='margin:{mt}px 0 {mb}px 0'>{title_html}</div>",
        unsafe_allow_html=True,
    )


def card(title: str, body_html: str, height_dvh: int = 16) -> None:
    """Render a card with a plain-text title and an HTML body."""
    st.markdown(
        f"""
        <section class="card" style="min-height:{height_dvh}dvh;">
          <div class="card-title">{esc(title)}</div>
          <div class="card-body">{body_html}</div>
        </section>
        """,
        unsafe_allow_html=True,
    )


def weather_icon_html(icon: str, size: int = 64) -> str:
    """OpenWeather-ikoni kuvana; tyhjä koodi → tyhjä merkkijono."""
    if not icon:
        return ""
    src = OWM_ICON_URL.format(icon=esc(icon))
    return f'<img src="{src}" width="{size}" height="{size}" alt="{esc(icon)}">'
