"""
GIF Match - Main App

Search Giphy, choose some gifs, then find them again behind placeholder tiles.
"""

import time

import streamlit as st

from app import session_controller as controller
from app.router import get_page
from app.state import ensure_session_state, get_store
from app.ui import apply_theme, render_theme_toggle
from core import config


# ---- Page Setup ----

st.set_page_config(
    page_title="GIF Match",
    page_icon="🎞️",
    layout="wide"
)

config.configure_logging()


# ---- Session State Initialization ----

ensure_session_state()


# ---- Main App ----

def main():
    """Main app entry point."""
    session = st.session_state.game_session

    # Resolve any flips whose delay has passed
    controller.tick(session, time.monotonic())

    if render_theme_toggle(session.theme):
        controller.toggle_theme(session, get_store())
        st.rerun()
    apply_theme(session.theme)

    get_page(session.view).render(session)


if __name__ == "__main__":
    main()
