"""
Tests for the storage reset maintenance script.
"""

from core import storage
from core.constants import LIBRARY_KEY, SELECTION_KEY, THEME_KEY
from scripts.maintenance import reset_store


def _seeded_store():
    return storage.LibraryStore(storage.MemoryKeyValueStore({
        LIBRARY_KEY: "[]",
        SELECTION_KEY: "[]",
        THEME_KEY: "dark",
    }))


def test_reset_with_yes_clears_library_only(monkeypatch):
    library_store = _seeded_store()
    monkeypatch.setattr(reset_store.storage, "open_store", lambda url=None: library_store)

    assert reset_store.main(["--yes"])
    assert library_store.store.data == {THEME_KEY: "dark"}


def test_reset_theme_flag_clears_theme(monkeypatch):
    library_store = _seeded_store()
    monkeypatch.setattr(reset_store.storage, "open_store", lambda url=None: library_store)

    reset_store.main(["--yes", "--theme"])
    assert library_store.store.data == {}


def test_declined_prompt_changes_nothing(monkeypatch):
    library_store = _seeded_store()
    monkeypatch.setattr(reset_store.storage, "open_store", lambda url=None: library_store)
    monkeypatch.setattr("builtins.input", lambda prompt: "no")

    assert not reset_store.main([])
    assert len(library_store.store.data) == 3
