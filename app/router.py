"""
Simple page router keyed by the session view.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from app.session_types import GameSession
from app.views.board import render_board_page
from app.views.search import render_search_page
from core.constants import View


@dataclass(frozen=True)
class AppPage:
    title: str
    render: Callable[[GameSession], None]


PAGES = {
    View.SEARCH: AppPage(title="Search", render=render_search_page),
    View.BOARD: AppPage(title="Chosen Gifs", render=render_board_page),
}


def get_page(view: View) -> AppPage:
    return PAGES[view]
