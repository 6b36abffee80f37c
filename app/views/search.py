"""
Search page rendering.
"""

from __future__ import annotations

import streamlit as st

from app import session_controller as controller
from app.session_types import GameSession
from app.state import get_client, get_store
from app.ui import render_gif
from core.constants import SEARCH_LIMIT_MAX, SEARCH_LIMIT_MIN

GRID_COLUMNS = 4


def render_search_page(session: GameSession) -> None:
    """
    Render the query form and the latest batch of results.
    """
    st.title("Search Giphy:")

    with st.form("search_form"):
        query = st.text_input("Search", value=session.search_text, placeholder="search gifs")
        limit = st.slider("How many", SEARCH_LIMIT_MIN, SEARCH_LIMIT_MAX, session.limit)
        submitted = st.form_submit_button("Search", disabled=session.loading)

    if submitted:
        with st.spinner("Loading gifs..."):
            controller.run_search(session, get_client(), get_store(), query=query, limit=limit)

    if session.last_error:
        st.error(session.last_error)

    _render_results(session)

    if session.pending_download is not None:
        st.download_button(
            f"Save {session.pending_download.filename}",
            data=session.pending_download.data,
            file_name=session.pending_download.filename,
            mime=session.pending_download.mime,
        )

    st.markdown("<br>", unsafe_allow_html=True)
    if st.button("Store Selected Gifs For Later", type="primary", use_container_width=True):
        controller.store_for_later(session)
        st.rerun()


def _render_results(session: GameSession) -> None:
    results = session.library.current_results()
    if not results:
        st.caption("No results yet.")
        return

    for start in range(0, len(results), GRID_COLUMNS):
        row = st.columns(GRID_COLUMNS)
        for col, item in zip(row, results[start:start + GRID_COLUMNS]):
            with col:
                chosen = session.library.is_selected(item.id)
                render_gif(item, border="green" if chosen else "none")
                left, right = st.columns(2)
                if left.button("Download", key=f"download_{item.id}"):
                    if not controller.prepare_download(session, item):
                        st.toast("Download failed")
                if right.button("Unchoose" if chosen else "Choose", key=f"choose_{item.id}"):
                    controller.toggle_selected(session, get_store(), item.id)
                    st.rerun()
