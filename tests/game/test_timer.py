"""Tests for TurnTimer."""

import time

from dama.core.enums import Side
from dama.game.timer import TurnTimer


class TestTurnTimer:
    def test_initial_state(self) -> None:
        timer = TurnTimer(60)
        assert timer.remaining() == 60
        assert not timer.is_running
        assert timer.active_side is None
        assert not timer.is_expired()

    def test_counts_down_while_running(self) -> None:
        timer = TurnTimer(60)
        timer.start(Side.BLUE)
        time.sleep(0.05)
        assert timer.remaining() < 60
        assert timer.active_side == Side.BLUE

    def test_stop_freezes_remaining(self) -> None:
        timer = TurnTimer(60)
        timer.start(Side.BLUE)
        time.sleep(0.02)
        timer.stop()
        frozen = timer.remaining()
        time.sleep(0.02)
        assert timer.remaining() == frozen
        assert not timer.is_running

    def test_start_resets_to_full_limit(self) -> None:
        timer = TurnTimer(60)
        timer.start(Side.BLUE)
        time.sleep(0.02)
        timer.stop()
        timer.start(Side.YELLOW)
        assert timer.remaining() > 59.9
        assert timer.active_side == Side.YELLOW

    def test_expires(self) -> None:
        timer = TurnTimer(0.01)
        timer.start(Side.YELLOW)
        time.sleep(0.03)
        assert timer.is_expired()
        assert timer.remaining() == 0.0

    def test_snapshot(self) -> None:
        timer = TurnTimer(30)
        timer.start(Side.BLUE)
        snap = timer.snapshot()
        assert snap.active_side == Side.BLUE
        assert snap.is_running
        assert 0 < snap.remaining <= 30
