"""
Tests for the Library Manager: merge/dedup, selection and wipe.
"""

from conftest import make_item
from core.library import Library, is_valid_item_id


def test_merge_sets_current_results(items):
    library = Library()
    library.merge_batch(items)

    assert len(library) == 5
    assert [i.id for i in library.current_results()] == ["a1", "b2", "c3", "d4", "e5"]


def test_current_results_is_latest_batch_only(items):
    library = Library()
    library.merge_batch(items[:3])
    library.merge_batch(items[3:])

    assert len(library) == 5
    assert [i.id for i in library.current_results()] == ["d4", "e5"]


def test_overlapping_batches_keep_freshest_record():
    library = Library()
    library.merge_batch([make_item("a1", "old title"), make_item("b2")])
    library.merge_batch([make_item("a1", "new title"), make_item("c3")])

    assert len(library) == 3
    assert library.get("a1").title == "new title"
    # Re-fetched items move to the position of their newest batch
    assert [i.id for i in library.items()] == ["b2", "a1", "c3"]


def test_duplicate_ids_inside_one_batch_collapse():
    library = Library()
    results = library.merge_batch([make_item("a1", "first"), make_item("a1", "second")])

    assert len(library) == 1
    assert len(results) == 1
    assert library.get("a1").title == "second"


def test_toggle_twice_restores_membership(items):
    library = Library()
    library.merge_batch(items)

    assert library.toggle_selected("b2")
    assert library.is_selected("b2")
    assert library.toggle_selected("b2")
    assert not library.is_selected("b2")


def test_toggle_unknown_id_is_tolerated():
    library = Library()
    assert library.toggle_selected("zz9")
    assert library.selected_ids() == ["zz9"]
    # Unknown ids never show up as selected items
    assert library.selected_items() == []


def test_toggle_invalid_id_is_declined():
    library = Library()
    assert not library.toggle_selected("")
    assert not library.toggle_selected("has space")
    assert not library.toggle_selected(None)
    assert library.selected_ids() == []


def test_selected_items_follow_library_order(items):
    library = Library()
    library.merge_batch(items)
    library.toggle_selected("d4")
    library.toggle_selected("a1")

    assert [i.id for i in library.selected_items()] == ["a1", "d4"]


def test_wipe_is_idempotent(items):
    library = Library()
    library.merge_batch(items)
    library.toggle_selected("a1")

    library.wipe()
    first = (library.items(), library.current_results(), library.selected_ids())
    library.wipe()
    second = (library.items(), library.current_results(), library.selected_ids())

    assert first == second == ([], [], [])


def test_records_round_trip_keeps_selection(items):
    library = Library()
    library.merge_batch(items)
    library.toggle_selected("c3")

    records, selection = library.to_records()
    restored = Library.from_records(
        [make_item(r["id"], r["title"]) for r in records],
        selection,
    )

    assert [i.id for i in restored.items()] == [i.id for i in items]
    assert restored.selected_ids() == ["c3"]
    assert restored.current_results() == []


def test_valid_item_ids():
    assert is_valid_item_id("3o7TKsQ8UQ4l4LhGz6")
    assert is_valid_item_id("a_b-c")
    assert not is_valid_item_id("a/b")
    assert not is_valid_item_id(42)
