# src/api/__init__.py
from .forecast import fetch_forecast as fetch_forecast
from .location import resolve_location as resolve_location
from .municipalities import load_directory as load_directory
from .units import to_celsius_display as to_celsius_display, to_fahrenheit_display as to_fahrenheit_display
from .weather import fetch_weather as fetch_weather
