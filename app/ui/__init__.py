"""UI Components for GIF Match"""

from app.ui.gif_card import render_gif, render_placeholder_button
from app.ui.game_status import render_target_panel, render_round_complete
from app.ui.theme import apply_theme, render_theme_toggle

__all__ = [
    "render_gif",
    "render_placeholder_button",
    "render_target_panel",
    "render_round_complete",
    "apply_theme",
    "render_theme_toggle",
]
