"""
Storage - persisted library, selection and theme.

Quick start:
    from core import storage

    library_store = storage.open_store()
    library = library_store.load_library()
    library_store.save_library(library)
"""

from core.storage.database import (
    KeyValueStore,
    MemoryKeyValueStore,
    SqlKeyValueStore,
    get_engine,
    init_db,
)
from core.storage.persistence import (
    LibraryStore,
    decode_items,
    decode_selection,
    open_store,
)

__all__ = [
    "KeyValueStore",
    "MemoryKeyValueStore",
    "SqlKeyValueStore",
    "get_engine",
    "init_db",
    "LibraryStore",
    "decode_items",
    "decode_selection",
    "open_store",
]
