"""
Persistence adapter for library, selection and theme.

Stored values are JSON documents. Anything that fails to decode is treated
as absent, so a corrupt store can never stop the app from starting.
"""

from __future__ import annotations

import json
import logging
from typing import Optional

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from core.constants import LIBRARY_KEY, SELECTION_KEY, THEME_KEY, Theme
from core.errors import StorageDecodeFailure
from core.library import Library
from core.schemas import GifItem
from core.storage.database import KeyValueStore, SqlKeyValueStore, get_engine

logger = logging.getLogger(__name__)


# ---- Decoding ----

def decode_items(raw: str) -> list[GifItem]:
    """
    Decode a stored library document.

    Raises:
        StorageDecodeFailure: if the document is not a list of valid items
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise StorageDecodeFailure(f"Library is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise StorageDecodeFailure("Library document is not a list")
    try:
        return [GifItem.model_validate(entry) for entry in data]
    except ValidationError as exc:
        raise StorageDecodeFailure(f"Library record invalid: {exc}") from exc


def decode_selection(raw: str) -> list[str]:
    """
    Decode a stored selection document.

    Raises:
        StorageDecodeFailure: if the document is not a list of strings
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise StorageDecodeFailure(f"Selection is not valid JSON: {exc}") from exc
    if not isinstance(data, list) or not all(isinstance(x, str) for x in data):
        raise StorageDecodeFailure("Selection document is not a list of ids")
    return data


# ---- Adapter ----

class LibraryStore:
    """
    Reads and writes the app's persisted state through a KeyValueStore.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    def _read(self, key: str) -> Optional[str]:
        try:
            return self.store.get(key)
        except SQLAlchemyError as exc:
            logger.error("Could not read %s: %s", key, exc)
            return None

    def load_library(self) -> Library:
        """
        Restore library and selection. Missing or corrupt parts start empty.
        """
        items: list[GifItem] = []
        selection: list[str] = []

        raw_items = self._read(LIBRARY_KEY)
        if raw_items:
            try:
                items = decode_items(raw_items)
            except StorageDecodeFailure as exc:
                logger.warning("Ignoring stored library: %s", exc)

        raw_selection = self._read(SELECTION_KEY)
        if raw_selection:
            try:
                selection = decode_selection(raw_selection)
            except StorageDecodeFailure as exc:
                logger.warning("Ignoring stored selection: %s", exc)

        library = Library.from_records(items, selection)
        logger.debug("Restored %d gifs and %d selections", len(library), len(library.selected_ids()))
        return library

    def save_library(self, library: Library) -> bool:
        """
        Write library and selection.

        Returns:
            False if the store rejected the write (logged, never raised)
        """
        records, selection = library.to_records()
        try:
            self.store.set(LIBRARY_KEY, json.dumps(records))
            self.store.set(SELECTION_KEY, json.dumps(selection))
        except SQLAlchemyError as exc:
            logger.error("Could not save library: %s", exc)
            return False
        return True

    def clear_library(self) -> bool:
        try:
            self.store.remove(LIBRARY_KEY)
            self.store.remove(SELECTION_KEY)
        except SQLAlchemyError as exc:
            logger.error("Could not clear stored library: %s", exc)
            return False
        return True

    def load_theme(self) -> Theme:
        raw = self._read(THEME_KEY)
        try:
            return Theme(raw) if raw else Theme.LIGHT
        except ValueError:
            logger.warning("Ignoring stored theme %r", raw)
            return Theme.LIGHT

    def save_theme(self, theme: Theme) -> bool:
        try:
            self.store.set(THEME_KEY, theme.value)
        except SQLAlchemyError as exc:
            logger.error("Could not save theme: %s", exc)
            return False
        return True

    def clear_theme(self) -> bool:
        try:
            self.store.remove(THEME_KEY)
        except SQLAlchemyError as exc:
            logger.error("Could not clear stored theme: %s", exc)
            return False
        return True


def open_store(db_url: Optional[str] = None) -> LibraryStore:
    """Build the adapter over the configured SQL store."""
    return LibraryStore(SqlKeyValueStore(get_engine(db_url)))
