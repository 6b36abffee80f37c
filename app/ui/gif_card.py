"""
GIF tile UI

Renders a single gif, either as its picture or as a placeholder tile.
"""

import html

import streamlit as st

from core.schemas import GifItem

TILE_PX = 120


def render_gif(item: GifItem, border: str = "none") -> None:
    """Render the looping preview with an optional border color."""
    border_css = f"5px solid {border}" if border != "none" else "none"
    st.markdown(
        f"""
        <div style="border: {border_css}; display: inline-block; border-radius: 5px;">
            <img src="{html.escape(item.preview_url)}" alt="{html.escape(item.title)}"
                 style="width: {TILE_PX}px; height: {TILE_PX}px; object-fit: cover; border-radius: 10px;" />
        </div>
        """,
        unsafe_allow_html=True
    )


def render_placeholder_button(key: str, disabled: bool = False) -> bool:
    """
    Render a uniform placeholder tile.

    Returns:
        True if it was clicked
    """
    return st.button("🟪", key=key, disabled=disabled, use_container_width=True, help="Flip")
