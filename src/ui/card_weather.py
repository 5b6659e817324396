# src/ui/card_weather.py
from __future__ import annotations

import streamlit as st
from streamlit.components.v1 import html as st_html

from src.api.geolocation import default_geolocator
from src.api.models import CurrentWeather, ForecastEntry
from src.api.units import TempUnit, display_temperature
from src.ui.common import card, esc, section_title, weather_icon_html
from src.viewmodels.weather_session import SessionStatus, WeatherSession

SESSION_KEY = "weather_session"


def _get_session() -> WeatherSession:
    """Yksi WeatherSession per selainistunto; käynnistetään ensimmäisellä ajolla."""
    session = st.session_state.get(SESSION_KEY)
    if session is None:
        session = WeatherSession()
        st.session_state[SESSION_KEY] = session
        session.start(default_geolocator(st.query_params))
    return session


def _search(session: WeatherSession) -> None:
    query = st.text_input("Buscar cidade", key="weather_city_query")
    if not query:
        return

    suggestions = session.suggest(query)
    if suggestions:
        st.caption("Sugestões: " + ", ".join(f"{m.city} ({m.state or '—'})" for m in suggestions))

    if st.button("Buscar", key="weather_city_search"):
        # ensimmäinen ehdotus, jos sellainen on; muuten kirjoitettu teksti sellaisenaan
        city = suggestions[0].city if suggestions else query.strip()
        session.refresh_weather(city)
        session.refresh_forecast(city)


def _current_html(weather: CurrentWeather, unit: TempUnit) -> str:
    return f"""
        <div class="weather-now">
          <div class="icon">{weather_icon_html(weather.icon, size=64)}</div>
          <div class="temp">{esc(display_temperature(weather, unit))}</div>
          <div class="desc">{esc(weather.description)}</div>
          <div class="sub">Vento: {esc(weather.wind_speed)} m/s ({esc(weather.wind_degrees)}°)</div>
          <div class="sub">Umidade: {esc(weather.humidity)}% · Pressão: {esc(weather.pressure)} hPa</div>
        </div>
    """


def _forecast_html(entries: list[ForecastEntry], unit: TempUnit) -> str:
    cells = "".join(
        f"""
        <div class="weather-cell">
          <div class="label">{esc(entry.timestamp)}</div>
          <div class="temp">{esc(display_temperature(entry, unit))}</div>
        </div>
        """
        for entry in entries
    )
    return f'<div class="weather-row">{cells}</div>'


def card_weather() -> None:
    """Render the weather card: location, current conditions, forecast, unit toggle and search."""
    try:
        session = _get_session()
        with st.spinner("Carregando clima..."):
            session.wait()

        _search(session)
        if st.button("°C / °F", key="weather_unit_toggle"):
            session.toggle_temperature_unit()

        state = session.state
        if state.notice:
            st.error(state.notice)
            session.clear_notice()

        if state.status is SessionStatus.READY and state.location.city:
            title = f"🌤️ {esc(state.location.city)}"
            if state.location.state:
                title += f" — {esc(state.location.state)}"
        else:
            title = "🌤️ Localizando..."
        section_title(title, mb=3)

        body = ""
        if state.weather is not None:
            body += _current_html(state.weather, state.temp_unit)
        if state.forecast:
            body += _forecast_html(state.forecast, state.temp_unit)
        if not body:
            body = "<div class='hint'>Sem dados de clima.</div>"

        inner_html = (
            """
            <!doctype html>
            <html><head><meta charset="utf-8">
            <style>
              html,body {margin:0;padding:0;background:transparent;color:#e7eaee;
                         font-family:ui-sans-serif,system-ui,-apple-system,Segoe UI,Roboto,Ubuntu;}
              .weather-now {display:grid;justify-items:center;padding:6px 0 10px;}
              .weather-now .temp {font-size:2rem;}
              .weather-row {display:grid;grid-template-columns:repeat(auto-fit,minmax(88px,1fr));gap:10px;}
              .weather-cell {display:grid;justify-items:center;background:rgba(255,255,255,0.06);
                             border-radius:14px;padding:6px;}
              .label,.sub,.desc {font-size:.85rem;opacity:.85;}
            </style></head><body>
            """
            + body
            + "</body></html>"
        )
        st_html(inner_html, height=320, scrolling=False)

    except Exception as e:
        card("Clima", f"<span class='hint'>Erro: {esc(e)}</span>", height_dvh=15)
