"""
Theme UI

Applies the light/dark flag and renders its toggle.
"""

import streamlit as st

from core.constants import Theme

_COLORS = {
    Theme.LIGHT: ("white", "black"),
    Theme.DARK: ("black", "white"),
}


def apply_theme(theme: Theme) -> None:
    background, color = _COLORS[theme]
    st.markdown(
        f"""
        <style>
        .stApp {{ background-color: {background}; color: {color}; }}
        .stApp h1, .stApp h2, .stApp h3, .stApp p {{ color: {color}; }}
        </style>
        """,
        unsafe_allow_html=True
    )


def render_theme_toggle(theme: Theme) -> bool:
    """
    Render the theme switch.

    Returns:
        True if the user flipped it
    """
    icon = "🌙" if theme == Theme.DARK else "☀️"
    return st.toggle(icon, value=theme == Theme.DARK, key="theme_toggle") != (theme == Theme.DARK)
