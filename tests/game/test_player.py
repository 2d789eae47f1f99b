"""Tests for player implementations."""

from dama.config import CONFIG, Difficulty
from dama.core.board import Board
from dama.core.enums import Side
from dama.game.player import AIPlayer, HumanPlayer


class TestHumanPlayer:
    def test_properties(self) -> None:
        player = HumanPlayer(Side.BLUE, "Ayse")
        assert player.side == Side.BLUE
        assert player.name == "Ayse"
        assert player.is_human

    def test_default_name(self) -> None:
        assert HumanPlayer(Side.YELLOW).name == "Player"

    def test_request_move_is_noop(self) -> None:
        HumanPlayer(Side.BLUE).request_move(Board.initial())


class TestAIPlayer:
    def test_properties(self) -> None:
        player = AIPlayer(Side.YELLOW, Difficulty.HARD)
        assert player.side == Side.YELLOW
        assert not player.is_human
        assert player.difficulty == Difficulty.HARD
        assert player.depth == CONFIG.search.hard_depth

    def test_request_move_forwards_board(self) -> None:
        seen: list[Board] = []
        player = AIPlayer(Side.YELLOW, on_request_move=seen.append)
        board = Board.initial()
        player.request_move(board)
        assert seen == [board]

    def test_request_move_without_callback(self) -> None:
        AIPlayer(Side.YELLOW).request_move(Board.initial())

    def test_move_delay(self) -> None:
        assert AIPlayer(Side.YELLOW).move_delay_ms == 0
        assert AIPlayer(Side.YELLOW, move_delay_ms=500).move_delay_ms == 500

    def test_negative_move_delay_is_clamped(self) -> None:
        assert AIPlayer(Side.YELLOW, move_delay_ms=-5).move_delay_ms == 0
