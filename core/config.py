"""
Environment-driven configuration.

Values come from the process environment, optionally seeded from a .env file.
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

from core.constants import FLIP_RESOLVE_DELAY_SECONDS, GIPHY_SEARCH_URL

# Load environment
load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///gif_match.db"
DEFAULT_HTTP_TIMEOUT = 10.0

LOG_FORMAT = "[%(name)s] %(levelname)s %(message)s"


def get_giphy_api_key() -> str | None:
    """Giphy API key, or None when not configured."""
    return os.getenv("GIPHY_API_KEY") or None


def get_search_url() -> str:
    return os.getenv("GIPHY_SEARCH_URL", GIPHY_SEARCH_URL)


def get_database_url() -> str:
    """
    Get the database URL for the key-value store.

    Falls back to a local SQLite file so the app runs without setup.
    """
    return os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        logging.getLogger(__name__).warning("Ignoring non-numeric %s=%r", name, raw)
        return default
    return max(0.0, value)


def get_flip_delay() -> float:
    """Seconds a flipped tile stays up before it resolves."""
    return _float_env("GIF_MATCH_FLIP_DELAY", FLIP_RESOLVE_DELAY_SECONDS)


def get_http_timeout() -> float:
    return _float_env("GIF_MATCH_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT)


def configure_logging() -> None:
    """
    Set up root logging once (safe to call on every Streamlit rerun).
    """
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    root = logging.getLogger()
    if not any(getattr(h, "_gif_match", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._gif_match = True
        root.addHandler(handler)
    root.setLevel(level)
