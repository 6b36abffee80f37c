"""
Streamlit session state and storage initialization helpers.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import load_session
from core import config, storage
from core.giphy_client import GiphyClient
from core.match_game import MatchGame


def get_store() -> storage.LibraryStore:
    """
    Open the persistent store (cached per Streamlit server process).
    """
    @st.cache_resource
    def _open_store() -> storage.LibraryStore:
        return storage.open_store()

    return _open_store()


def get_client() -> GiphyClient:
    @st.cache_resource
    def _client() -> GiphyClient:
        return GiphyClient()

    return _client()


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "game_session" not in st.session_state:
        game = MatchGame(resolve_delay=config.get_flip_delay())
        st.session_state.game_session = load_session(get_store(), game)
