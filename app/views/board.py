"""
Board page rendering: the chosen gifs, covered or not.
"""

from __future__ import annotations

import time

import streamlit as st

from app import session_controller as controller
from app.session_types import GameSession
from app.state import get_store
from app.ui import (
    render_gif,
    render_placeholder_button,
    render_round_complete,
    render_target_panel,
)
from core.constants import PENDING_POLL_SECONDS

GRID_COLUMNS = 5


def render_board_page(session: GameSession) -> None:
    """
    Render chosen gifs, the game controls and the game status panels.
    """
    game = session.game

    if session.last_error:
        st.error(session.last_error)

    if game.is_covered:
        _render_covered_grid(session)
    else:
        _render_chosen_grid(session)

    if render_round_complete(game):
        controller.rematch(session)
        st.rerun()

    _render_controls(session)
    render_target_panel(game)

    # Keep rerunning until pending flips have resolved
    if game.has_pending():
        time.sleep(PENDING_POLL_SECONDS)
        st.rerun()


def _render_chosen_grid(session: GameSession) -> None:
    chosen = session.library.selected_items()
    if not chosen:
        st.caption("Nothing chosen yet. Go back and choose some gifs.")
        return
    for start in range(0, len(chosen), GRID_COLUMNS):
        row = st.columns(GRID_COLUMNS)
        for col, item in zip(row, chosen[start:start + GRID_COLUMNS]):
            with col:
                render_gif(item, border="green")


def _render_covered_grid(session: GameSession) -> None:
    game = session.game
    slots = game.slots()
    for start in range(0, len(slots), GRID_COLUMNS):
        row = st.columns(GRID_COLUMNS)
        for col, slot in zip(row, slots[start:start + GRID_COLUMNS]):
            with col:
                if game.is_revealed(slot.key) or game.is_matched(slot.key):
                    render_gif(slot.item, border="purple")
                elif render_placeholder_button(key=f"tile_{slot.key}"):
                    controller.flip(session, slot.key, time.monotonic())
                    st.rerun()


def _render_controls(session: GameSession) -> None:
    col_wipe, col_cover, col_undo = st.columns(3)

    with col_wipe:
        if st.button("Wipe", disabled=not controller.controls_unlocked(session), use_container_width=True):
            controller.wipe(session, get_store())
            st.rerun()

    with col_cover:
        if st.button("Cover", disabled=not controller.can_cover(session), use_container_width=True):
            controller.cover(session, time.monotonic())
            st.rerun()

    with col_undo:
        if st.button("Undo", disabled=not controller.controls_unlocked(session), use_container_width=True):
            controller.undo(session)
            st.rerun()
