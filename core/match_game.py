"""
Match Game Engine

Cover/flip/guess state machine for a round over a snapshot of selected
GIFs. Time is passed in by the caller, so deferred resolutions are plain
due timestamps checked by tick().
"""

from __future__ import annotations

import logging
import random
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from core.constants import FLIP_RESOLVE_DELAY_SECONDS
from core.schemas import GifItem

logger = logging.getLogger(__name__)


class RoundStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


class FlipOutcome(str, Enum):
    MATCH = "match"
    MISS = "miss"
    IGNORED = "ignored"


@dataclass(frozen=True)
class Slot:
    """A display position holding one item during a round."""
    key: str
    item: GifItem


@dataclass(frozen=True)
class PendingResolution:
    """A deferred outcome for a flipped slot."""
    round_id: str
    slot_key: str
    item_id: str
    is_match: bool
    due_at: float


@dataclass
class Round:
    """
    Live game-session state.
    """
    round_id: str
    slots: list[Slot]
    pool: list[GifItem]
    revealed: dict[str, bool] = field(default_factory=dict)
    matched: set[str] = field(default_factory=set)
    pending: dict[str, PendingResolution] = field(default_factory=dict)
    target: Optional[GifItem] = None
    score: int = 0
    status: RoundStatus = RoundStatus.NOT_STARTED

    def slot(self, slot_key: str) -> Optional[Slot]:
        for slot in self.slots:
            if slot.key == slot_key:
                return slot
        return None


def _snapshot(items: Sequence[GifItem]) -> list[GifItem]:
    seen: set[str] = set()
    pool: list[GifItem] = []
    for item in items:
        if item.id in seen:
            continue
        seen.add(item.id)
        pool.append(item)
    return pool


def _build_round(items: Sequence[GifItem]) -> Round:
    pool = _snapshot(items)
    slots = [Slot(key=f"{item.id}-{idx}", item=item) for idx, item in enumerate(pool)]
    return Round(
        round_id=str(uuid.uuid4()),
        slots=slots,
        pool=list(pool),
        revealed={slot.key: False for slot in slots},
    )


class MatchGame:
    """
    Owns at most one Round and drives it through its transitions.

    Declined transitions return False / FlipOutcome.IGNORED instead of
    raising, so a stray click can never corrupt the round.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        resolve_delay: float = FLIP_RESOLVE_DELAY_SECONDS
    ):
        self.rng = rng or random.Random()
        self.resolve_delay = resolve_delay
        self.round: Optional[Round] = None

    # ---- Queries ----

    @property
    def status(self) -> RoundStatus:
        if self.round is None:
            return RoundStatus.NOT_STARTED
        return self.round.status

    @property
    def is_covered(self) -> bool:
        """True while tiles are showing placeholders (in progress or complete)."""
        return self.status != RoundStatus.NOT_STARTED

    @property
    def score(self) -> int:
        return self.round.score if self.round else 0

    @property
    def target(self) -> Optional[GifItem]:
        return self.round.target if self.round else None

    @property
    def pool_size(self) -> int:
        return len(self.round.pool) if self.round else 0

    def slots(self) -> list[Slot]:
        return list(self.round.slots) if self.round else []

    def is_revealed(self, slot_key: str) -> bool:
        return bool(self.round and self.round.revealed.get(slot_key, False))

    def is_matched(self, slot_key: str) -> bool:
        return bool(self.round and slot_key in self.round.matched)

    def is_pending(self, slot_key: str) -> bool:
        return bool(self.round and slot_key in self.round.pending)

    def has_pending(self) -> bool:
        return bool(self.round and self.round.pending)

    def next_due(self) -> Optional[float]:
        """Earliest due time among pending resolutions, or None."""
        if not self.has_pending():
            return None
        return min(p.due_at for p in self.round.pending.values())

    # ---- Transitions ----

    def start_round(self, items: Sequence[GifItem], now: float = 0.0) -> bool:
        """
        Cover the given items and pick the first target.

        Declined when items is empty or a round is already in progress.
        """
        if self.status == RoundStatus.IN_PROGRESS:
            logger.debug("start_round declined: round already in progress")
            return False
        if not items:
            logger.debug("start_round declined: nothing selected")
            return False

        self.round = _build_round(items)
        self.round.status = RoundStatus.IN_PROGRESS
        self._pick_target()
        logger.info("Round %s started with %d gifs", self.round.round_id, len(self.round.pool))
        return True

    def flip(self, slot_key: str, now: float) -> FlipOutcome:
        """
        Reveal a hidden slot and schedule its resolution.
        """
        rnd = self.round
        if rnd is None or rnd.status != RoundStatus.IN_PROGRESS or rnd.target is None:
            return FlipOutcome.IGNORED

        slot = rnd.slot(slot_key)
        if slot is None:
            return FlipOutcome.IGNORED
        if rnd.revealed.get(slot_key) or slot_key in rnd.matched or slot_key in rnd.pending:
            return FlipOutcome.IGNORED

        rnd.revealed[slot_key] = True
        is_match = slot.item.id == rnd.target.id
        if is_match:
            rnd.score += 1

        rnd.pending[slot_key] = PendingResolution(
            round_id=rnd.round_id,
            slot_key=slot_key,
            item_id=slot.item.id,
            is_match=is_match,
            due_at=now + self.resolve_delay,
        )
        return FlipOutcome.MATCH if is_match else FlipOutcome.MISS

    def tick(self, now: float) -> int:
        """
        Fire every pending resolution due at or before now.

        Returns:
            Number of resolutions applied
        """
        if not self.has_pending():
            return 0

        due = sorted(
            (p for p in self.round.pending.values() if p.due_at <= now),
            key=lambda p: p.due_at,
        )
        applied = 0
        for pending in due:
            if self.resolve(pending):
                applied += 1
        return applied

    def resolve(self, pending: PendingResolution) -> bool:
        """
        Apply one pending resolution.

        A resolution from a discarded round, or for a slot that no longer
        has it pending, is a no-op.
        """
        rnd = self.round
        if rnd is None or rnd.round_id != pending.round_id:
            return False
        if rnd.pending.get(pending.slot_key) != pending:
            return False

        del rnd.pending[pending.slot_key]

        if not pending.is_match:
            rnd.revealed[pending.slot_key] = False
            return True

        rnd.matched.add(pending.slot_key)
        for idx, item in enumerate(rnd.pool):
            if item.id == pending.item_id:
                del rnd.pool[idx]
                break

        if not rnd.pool:
            rnd.status = RoundStatus.COMPLETE
            rnd.target = None
            logger.info("Round %s complete with score %d", rnd.round_id, rnd.score)
        else:
            self._pick_target()
        return True

    def rematch(self, items: Sequence[GifItem]) -> None:
        """
        Reset to a fresh, not yet started round over the current selection.
        """
        self.round = _build_round(items) if items else None

    def abandon(self) -> bool:
        """
        Discard the round (undo). Declined while a round is in progress.
        """
        if self.status == RoundStatus.IN_PROGRESS:
            logger.debug("abandon declined: round in progress")
            return False
        self.round = None
        return True

    def reset(self) -> None:
        """Discard the round unconditionally."""
        self.round = None

    def _pick_target(self) -> None:
        rnd = self.round
        if not rnd.pool:
            rnd.target = None
            return
        idx = self.rng.randrange(len(rnd.pool))
        rnd.target = rnd.pool[idx]
