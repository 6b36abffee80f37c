"""
Session lifecycle helpers for the Streamlit app.

Each operation mutates the GameSession through the pure core and then
persists explicitly. Nothing here touches Streamlit, so the whole flow is
testable with an in-memory store and a stub search client.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from app.session_types import GameSession
from core import downloads
from core.constants import Theme, View
from core.errors import SearchFailure
from core.giphy_client import clamp_limit
from core.match_game import FlipOutcome, MatchGame, RoundStatus
from core.schemas import GifItem
from core.storage import LibraryStore

logger = logging.getLogger(__name__)


class SearchProvider(Protocol):
    def search(self, query: str, limit: int) -> list[GifItem]: ...


SAVE_FAILED_MESSAGE = "Could not save your changes. They will be lost on reload."


def _persist_library(session: GameSession, store: LibraryStore) -> None:
    if not store.save_library(session.library):
        session.last_error = SAVE_FAILED_MESSAGE


def load_session(store: LibraryStore, game: Optional[MatchGame] = None) -> GameSession:
    """
    Build a session from persisted state.
    """
    return GameSession(
        library=store.load_library(),
        game=game or MatchGame(),
        theme=store.load_theme(),
    )


# ---- Library operations ----

def run_search(
    session: GameSession,
    client: SearchProvider,
    store: LibraryStore,
    query: Optional[str] = None,
    limit: Optional[int] = None
) -> bool:
    """
    Fetch one batch and merge it into the library.

    Returns:
        True when results were merged. On failure the library is left
        untouched and session.last_error explains why.
    """
    if session.loading:
        logger.debug("Search declined: another search is loading")
        return False

    if query is not None:
        session.search_text = query
    if limit is not None:
        session.limit = clamp_limit(limit)

    text = session.search_text.strip()
    if not text:
        session.last_error = "Type something to search for."
        return False

    session.loading = True
    try:
        items = client.search(text, session.limit)
    except SearchFailure as exc:
        session.last_error = f"Error fetching gifs: {exc}"
        return False
    finally:
        session.loading = False

    session.library.merge_batch(items)
    session.pending_download = None
    session.last_error = None
    _persist_library(session, store)
    return True


def toggle_selected(session: GameSession, store: LibraryStore, item_id: str) -> bool:
    changed = session.library.toggle_selected(item_id)
    if changed:
        _persist_library(session, store)
    return changed


def store_for_later(session: GameSession) -> None:
    """Switch to the board showing only chosen gifs."""
    session.view = View.BOARD


def wipe(session: GameSession, store: LibraryStore) -> None:
    """
    Forget everything: library, selection, any round, and persisted copies.
    """
    session.game.reset()
    session.library.wipe()
    session.pending_download = None
    session.last_error = None
    if not store.clear_library():
        session.last_error = SAVE_FAILED_MESSAGE


# ---- Game operations ----

def cover(session: GameSession, now: float) -> bool:
    """Hide the chosen gifs behind tiles and pick the first target."""
    return session.game.start_round(session.library.selected_items(), now)


def flip(session: GameSession, slot_key: str, now: float) -> FlipOutcome:
    return session.game.flip(slot_key, now)


def tick(session: GameSession, now: float) -> int:
    return session.game.tick(now)


def rematch(session: GameSession) -> None:
    """Reset the board so the same chosen gifs can be covered again."""
    session.game.rematch(session.library.selected_items())


def undo(session: GameSession) -> bool:
    """
    Leave the board and go back to searching.

    Declined while a round is in progress.
    """
    if not session.game.abandon():
        return False
    session.view = View.SEARCH
    return True


def controls_unlocked(session: GameSession) -> bool:
    """Wipe and Undo stay disabled while a round is being played."""
    return session.game.status != RoundStatus.IN_PROGRESS


def can_cover(session: GameSession) -> bool:
    return (
        session.game.status == RoundStatus.NOT_STARTED
        and bool(session.library.selected_items())
    )


# ---- Misc ----

def toggle_theme(session: GameSession, store: LibraryStore) -> Theme:
    session.theme = Theme.LIGHT if session.theme == Theme.DARK else Theme.DARK
    if not store.save_theme(session.theme):
        session.last_error = SAVE_FAILED_MESSAGE
    return session.theme


def prepare_download(session: GameSession, item: GifItem) -> bool:
    """
    Fetch a gif so the UI can offer a save button for it.
    """
    session.pending_download = downloads.fetch_gif(item.preview_url, item.id)
    return session.pending_download is not None
