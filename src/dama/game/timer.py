"""Per-turn countdown timer."""

from __future__ import annotations

import time
from dataclasses import dataclass

from dama.core.enums import Side
from dama.game.interfaces import ITurnTimer


@dataclass(frozen=True, slots=True)
class TimerSnapshot:
    """Read-only view of the timer, e.g. for a UI label."""

    active_side: Side | None
    remaining: float
    is_running: bool


class TurnTimer(ITurnTimer):
    """Countdown that restarts from the full limit on every turn.

    Uses monotonic time for accuracy.
    """

    __slots__ = ("_limit", "_remaining", "_active_side", "_last_tick", "_running")

    def __init__(self, limit_seconds: float) -> None:
        self._limit = limit_seconds
        self._remaining = limit_seconds
        self._active_side: Side | None = None
        self._last_tick: float = 0.0
        self._running: bool = False

    # -- ITurnTimer implementation ------------------------------------------

    def start(self, side: Side) -> None:
        self._active_side = side
        self._remaining = self._limit
        self._last_tick = time.monotonic()
        self._running = True

    def stop(self) -> None:
        if self._running:
            self._consume_elapsed()
            self._running = False

    def remaining(self) -> float:
        if self._running:
            elapsed = time.monotonic() - self._last_tick
            return max(0.0, self._remaining - elapsed)
        return max(0.0, self._remaining)

    def is_expired(self) -> bool:
        return self.remaining() <= 0.0

    # -- Extra helpers ------------------------------------------------------

    @property
    def limit(self) -> float:
        return self._limit

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def active_side(self) -> Side | None:
        return self._active_side

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            active_side=self._active_side,
            remaining=self.remaining(),
            is_running=self._running,
        )

    # -- Internal -----------------------------------------------------------

    def _consume_elapsed(self) -> None:
        now = time.monotonic()
        self._remaining = max(0.0, self._remaining - (now - self._last_tick))
        self._last_tick = now
