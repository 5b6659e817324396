# main.py
"""Main entry point for the charlie-weather Streamlit application."""

import sys
import traceback

import streamlit as st

from src.logger_config import setup_logging
from src.paths import ensure_dirs
from src.ui import card_weather
from src.ui.common import load_css

ensure_dirs()

logger = setup_logging()


def main() -> None:
    """Initialize the page and render the weather card."""
    try:
        logger.info("Starting charlie-weather")
        st.set_page_config(
            page_title="Clima",
            layout="centered",
            page_icon="🌤️",
        )
        load_css("style.css")

        card_weather()

    except KeyboardInterrupt:
        logger.info("charlie-weather shutdown requested")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Unhandled error: {str(e)}")
        logger.error(traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
