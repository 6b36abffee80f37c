"""
Session state types used by the Streamlit controller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from core.constants import SEARCH_LIMIT_DEFAULT, Theme, View
from core.downloads import DownloadedFile
from core.library import Library
from core.match_game import MatchGame


@dataclass
class GameSession:
    """
    Everything the UI renders from, owned by the controller.
    """
    library: Library = field(default_factory=Library)
    game: MatchGame = field(default_factory=MatchGame)
    search_text: str = ""
    limit: int = SEARCH_LIMIT_DEFAULT
    loading: bool = False
    theme: Theme = Theme.LIGHT
    view: View = View.SEARCH
    last_error: Optional[str] = None
    pending_download: Optional[DownloadedFile] = None
