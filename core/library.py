"""
Library Manager

Holds every GIF fetched so far, the most recent search batch and the
user's selection. Pure state: persistence is handled by the caller.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Optional

from core.schemas import GifItem

logger = logging.getLogger(__name__)

_VALID_ID = re.compile(r"^[A-Za-z0-9_-]+$")


def is_valid_item_id(item_id: object) -> bool:
    """True when item_id looks like a Giphy id."""
    return isinstance(item_id, str) and bool(_VALID_ID.match(item_id))


class Library:
    """
    Deduplicated collection of fetched items plus the selection set.

    Library order is fetch order: re-fetched items move to the position of
    their newest batch.
    """

    def __init__(self) -> None:
        self._items: dict[str, GifItem] = {}
        self._current: list[GifItem] = []
        self._selected: dict[str, None] = {}  # insertion-ordered set

    # ---- Queries ----

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def get(self, item_id: str) -> Optional[GifItem]:
        return self._items.get(item_id)

    def items(self) -> list[GifItem]:
        """All items in library order."""
        return list(self._items.values())

    def current_results(self) -> list[GifItem]:
        """The most recent search batch (not the whole library)."""
        return list(self._current)

    def selected_ids(self) -> list[str]:
        return list(self._selected)

    def is_selected(self, item_id: str) -> bool:
        return item_id in self._selected

    def selected_items(self) -> list[GifItem]:
        """Library entries whose id is selected, in library order."""
        return [item for item_id, item in self._items.items() if item_id in self._selected]

    # ---- Mutations ----

    def merge_batch(self, batch: Iterable[GifItem]) -> list[GifItem]:
        """
        Merge a freshly fetched batch and make it the current results.

        Stored records sharing an id with the batch are replaced, so the
        freshest metadata wins. Duplicate ids inside the batch keep their
        last occurrence.

        Returns:
            The deduplicated batch as stored in current results
        """
        fresh: dict[str, GifItem] = {}
        for item in batch:
            fresh.pop(item.id, None)
            fresh[item.id] = item

        for item_id in fresh:
            self._items.pop(item_id, None)
        self._items.update(fresh)

        self._current = list(fresh.values())
        logger.debug("Merged %d items, library now holds %d", len(fresh), len(self._items))
        return self.current_results()

    def toggle_selected(self, item_id: str) -> bool:
        """
        Flip membership of item_id in the selection.

        Unknown ids are accepted. Syntactically invalid ids are declined.

        Returns:
            True if the selection changed, False if the id was declined
        """
        if not is_valid_item_id(item_id):
            logger.warning("Declining selection toggle for invalid id %r", item_id)
            return False

        if item_id in self._selected:
            del self._selected[item_id]
        else:
            if item_id not in self._items:
                logger.debug("Selecting %s which is not in the library", item_id)
            self._selected[item_id] = None
        return True

    def wipe(self) -> None:
        """Forget every item, the current results and the selection."""
        self._items.clear()
        self._current = []
        self._selected.clear()

    # ---- Serialization ----

    def to_records(self) -> tuple[list[dict], list[str]]:
        """Library records and selected ids, ready for JSON encoding."""
        return [item.model_dump() for item in self._items.values()], self.selected_ids()

    @classmethod
    def from_records(
        cls,
        items: Iterable[GifItem],
        selection: Iterable[str] = ()
    ) -> "Library":
        """
        Rebuild a library from stored state.

        The restored items do not become current results; those only come
        from a live search.
        """
        library = cls()
        for item in items:
            library._items.pop(item.id, None)
            library._items[item.id] = item
        for item_id in selection:
            if is_valid_item_id(item_id):
                library._selected[item_id] = None
        return library
