"""
Shared pytest fixtures.
"""

import pytest

from core.schemas import GifItem


def make_item(gif_id: str, title: str = "") -> GifItem:
    return GifItem(
        id=gif_id,
        title=title or f"gif {gif_id}",
        preview_url=f"https://media.giphy.com/media/{gif_id}/200.gif",
    )


@pytest.fixture
def items():
    """Five distinct gifs."""
    return [make_item(gif_id) for gif_id in ("a1", "b2", "c3", "d4", "e5")]
