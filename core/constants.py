"""
GIF Match Constants

Configurable limits, storage keys and timing parameters in one place.
"""

from enum import Enum


# ---- Search Limits ----

SEARCH_LIMIT_MIN = 1
SEARCH_LIMIT_MAX = 100
SEARCH_LIMIT_DEFAULT = 17  # Fits a few rows of the results grid

GIPHY_SEARCH_URL = "https://api.giphy.com/v1/gifs/search"


# ---- Game Timing ----

FLIP_RESOLVE_DELAY_SECONDS = 1.0  # How long a flipped tile stays up before resolving
PENDING_POLL_SECONDS = 0.1        # UI polling interval while resolutions are pending


# ---- Storage Keys ----

LIBRARY_KEY = "all_gifs"
SELECTION_KEY = "chosen_gif_ids"
THEME_KEY = "theme"


class Theme(str, Enum):
    """Display theme flag."""
    LIGHT = "light"
    DARK = "dark"


class View(str, Enum):
    """Which page the app is showing."""
    SEARCH = "search"
    BOARD = "board"  # Chosen gifs only, optionally covered
