"""
Game status UI

Target panel while guessing, and the completion panel with rematch.
"""

import streamlit as st

from app.ui.gif_card import render_gif
from core.match_game import MatchGame, RoundStatus


def render_target_panel(game: MatchGame) -> None:
    """Show the gif the player is looking for, plus the running score."""
    if game.status != RoundStatus.IN_PROGRESS or game.target is None:
        return
    st.divider()
    st.markdown("### Find This Gif")
    render_gif(game.target)
    st.markdown(f"**Score:** {game.score}")


def render_round_complete(game: MatchGame) -> bool:
    """
    Render the winning message.

    Returns:
        True if Play Again was clicked
    """
    if game.status != RoundStatus.COMPLETE:
        return False
    st.success("🎉 Congratulations! 🎉")
    st.metric("You scored", game.score)
    return st.button("Play Again", type="primary", use_container_width=True)
