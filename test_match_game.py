"""
Tests for the Match Game Engine state machine.
"""

import random

import pytest

from conftest import make_item
from core.match_game import FlipOutcome, MatchGame, PendingResolution, RoundStatus

DELAY = 1.0


class LastIndexRandom(random.Random):
    """Always picks the last remaining index."""

    def randrange(self, *args, **kwargs):
        return args[0] - 1


class FirstIndexRandom(random.Random):
    def randrange(self, *args, **kwargs):
        return 0


def slot_for(game: MatchGame, item_id: str) -> str:
    return next(s.key for s in game.slots() if s.item.id == item_id)


def miss_slot(game: MatchGame) -> str:
    return next(
        s.key for s in game.slots()
        if s.item.id != game.target.id and not game.is_matched(s.key)
    )


def play_to_completion(game: MatchGame, now: float = 0.0) -> list[str]:
    """Find every target in turn and return the target ids in order."""
    seen = []
    while game.status == RoundStatus.IN_PROGRESS:
        target = game.target
        seen.append(target.id)
        assert game.flip(slot_for(game, target.id), now) == FlipOutcome.MATCH
        now += DELAY
        game.tick(now)
    return seen


@pytest.fixture
def game():
    return MatchGame(rng=random.Random(7), resolve_delay=DELAY)


def test_start_round_captures_exact_pool(game, items):
    assert game.start_round(items[:3], now=0.0)

    assert game.status == RoundStatus.IN_PROGRESS
    assert game.pool_size == 3
    assert {s.item.id for s in game.slots()} == {"a1", "b2", "c3"}
    assert game.target.id in {"a1", "b2", "c3"}
    assert game.score == 0


def test_start_round_with_empty_selection_is_declined(game):
    assert not game.start_round([], now=0.0)
    assert game.status == RoundStatus.NOT_STARTED
    assert game.round is None


def test_start_round_declined_while_in_progress(game, items):
    game.start_round(items[:2], now=0.0)
    round_id = game.round.round_id

    assert not game.start_round(items, now=0.0)
    assert game.round.round_id == round_id
    assert game.pool_size == 2


def test_slot_keys_are_id_and_position(game, items):
    game.start_round(items[:2], now=0.0)
    assert [s.key for s in game.slots()] == ["a1-0", "b2-1"]


def test_correct_match_shrinks_pool_by_one_after_delay(game, items):
    game.start_round(items[:3], now=0.0)
    key = slot_for(game, game.target.id)

    assert game.flip(key, now=10.0) == FlipOutcome.MATCH
    assert game.score == 1
    assert game.is_revealed(key)
    assert game.pool_size == 3

    assert game.tick(10.5) == 0
    assert game.pool_size == 3

    assert game.tick(11.0) == 1
    assert game.pool_size == 2
    assert game.is_matched(key)
    assert game.target is not None


def test_wrong_guess_rehides_after_delay(game, items):
    game.start_round(items[:3], now=0.0)
    key = miss_slot(game)

    assert game.flip(key, now=0.0) == FlipOutcome.MISS
    assert game.is_revealed(key)
    assert game.score == 0

    game.tick(DELAY)
    assert not game.is_revealed(key)
    assert game.score == 0
    assert game.pool_size == 3


def test_pending_slot_rejects_second_flip(game, items):
    game.start_round(items[:2], now=0.0)
    key = slot_for(game, game.target.id)

    assert game.flip(key, now=0.0) == FlipOutcome.MATCH
    assert game.flip(key, now=0.1) == FlipOutcome.IGNORED
    assert game.score == 1


def test_missed_slot_can_be_flipped_again_once_hidden(game, items):
    game.start_round(items[:3], now=0.0)
    key = miss_slot(game)

    game.flip(key, now=0.0)
    assert game.flip(key, now=0.5) == FlipOutcome.IGNORED
    game.tick(DELAY)
    assert game.flip(key, now=2.0) == FlipOutcome.MISS


def test_unknown_slot_is_ignored(game, items):
    game.start_round(items[:2], now=0.0)
    assert game.flip("nope-9", now=0.0) == FlipOutcome.IGNORED


def test_single_item_round_completes_on_one_flip(game, items):
    game.start_round(items[:1], now=0.0)
    key = slot_for(game, "a1")

    game.flip(key, now=0.0)
    game.tick(DELAY)

    assert game.status == RoundStatus.COMPLETE
    assert game.score == 1
    assert game.target is None
    assert game.pool_size == 0


def test_flips_ignored_after_completion(game, items):
    game.start_round(items[:2], now=0.0)
    play_to_completion(game)

    for slot in game.slots():
        assert game.flip(slot.key, now=100.0) == FlipOutcome.IGNORED
    assert game.score == 2


@pytest.mark.parametrize("rng_cls", [LastIndexRandom, FirstIndexRandom])
def test_every_item_becomes_target_exactly_once(rng_cls, items):
    game = MatchGame(rng=rng_cls(), resolve_delay=DELAY)
    game.start_round(items, now=0.0)

    seen = play_to_completion(game)

    assert sorted(seen) == sorted(i.id for i in items)
    assert game.score == len(items)


def test_last_index_target_is_exact_pool_entry(items):
    game = MatchGame(rng=LastIndexRandom(), resolve_delay=DELAY)
    game.start_round(items[:3], now=0.0)
    assert game.target.id == "c3"


@pytest.mark.parametrize("seed", range(10))
def test_random_targets_cover_pool(seed, items):
    game = MatchGame(rng=random.Random(seed), resolve_delay=DELAY)
    game.start_round(items, now=0.0)
    assert sorted(play_to_completion(game)) == sorted(i.id for i in items)


def test_abandon_declined_while_in_progress(game, items):
    game.start_round(items[:2], now=0.0)
    assert not game.abandon()
    assert game.status == RoundStatus.IN_PROGRESS


def test_abandon_allowed_when_complete_or_not_started(game, items):
    assert game.abandon()

    game.start_round(items[:1], now=0.0)
    play_to_completion(game)
    assert game.abandon()
    assert game.round is None


def test_stale_resolution_after_reset_is_noop(game, items):
    game.start_round(items[:2], now=0.0)
    key = miss_slot(game)
    game.flip(key, now=0.0)
    stale = game.round.pending[key]

    game.reset()
    assert game.tick(100.0) == 0
    assert not game.resolve(stale)

    game.start_round(items[:2], now=0.0)
    assert not game.resolve(stale)
    assert game.score == 0


def test_resolution_for_other_round_is_ignored(game, items):
    game.start_round(items[:2], now=0.0)
    foreign = PendingResolution(
        round_id="other", slot_key="a1-0", item_id="a1", is_match=True, due_at=0.0
    )
    assert not game.resolve(foreign)
    assert game.pool_size == 2


def test_rematch_resets_to_not_started(game, items):
    game.start_round(items[:2], now=0.0)
    play_to_completion(game)

    game.rematch(items[:3])

    assert game.status == RoundStatus.NOT_STARTED
    assert game.score == 0
    assert game.target is None
    assert not game.has_pending()
    assert game.start_round(items[:3], now=0.0)
    assert game.pool_size == 3


def test_next_due_reports_earliest_pending(game, items):
    game.start_round(items[:3], now=0.0)
    assert game.next_due() is None

    game.flip(miss_slot(game), now=5.0)
    assert game.next_due() == 5.0 + DELAY


def test_other_slot_flipped_during_pending_match_is_a_miss(game, items):
    game.start_round(items[:3], now=0.0)
    target = game.target
    hit = slot_for(game, target.id)
    other = miss_slot(game)

    assert game.flip(hit, now=0.0) == FlipOutcome.MATCH
    assert game.flip(other, now=0.5) == FlipOutcome.MISS
    assert game.score == 1

    game.tick(DELAY)
    assert game.pool_size == 2
    assert game.is_revealed(other)
    assert target.id not in [s.item.id for s in game.slots() if not game.is_matched(s.key)]

    game.tick(0.5 + DELAY)
    assert not game.is_revealed(other)
    assert game.score == 1
    assert game.pool_size == 2
