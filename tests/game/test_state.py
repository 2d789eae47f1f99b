"""Tests for GameState: phases, history, repetition and terminal detection."""

from dama.core.board import Board
from dama.core.enums import GameResult, Rank, Side
from dama.core.move import Move
from dama.core.notation import board_from_diagram
from dama.game.interfaces import GameEndReason, GamePhase
from dama.game.state import GameState

_LONE_KINGS = """
    .......Y
    ........
    ........
    ........
    ........
    ........
    ........
    B.......
"""

_SHUFFLE = [
    Move((7, 0), (7, 1)),
    Move((0, 7), (0, 6)),
    Move((7, 1), (7, 0)),
    Move((0, 6), (0, 7)),
]


def _kings_state(limit: int = 3) -> GameState:
    state = GameState(repetition_limit=limit)
    state.setup(board_from_diagram(_LONE_KINGS))
    return state


class TestSetup:
    def test_default_setup(self) -> None:
        state = GameState()
        state.setup()
        assert state.phase == GamePhase.AWAITING_MOVE
        assert state.side_to_move == Side.BLUE
        assert state.result == GameResult.IN_PROGRESS
        assert state.board.key() == Board.initial().key()
        assert state.ply_count == 0
        assert state.last_move is None

    def test_setup_copies_board(self, single_capture_board: Board) -> None:
        state = GameState()
        state.setup(single_capture_board)
        state.apply_move(state.legal_moves()[0])
        assert single_capture_board[(3, 3)] is not None

    def test_setup_on_lost_position(self, blocked_blue_board: Board) -> None:
        state = GameState()
        state.setup(blocked_blue_board, Side.BLUE)
        assert state.is_game_over
        assert state.result == GameResult.YELLOW_WINS
        assert state.end_reason == GameEndReason.NO_MOVES
        assert state.legal_moves() == []


class TestApplyMove:
    def test_switches_side_and_records(self) -> None:
        state = GameState()
        state.setup()
        record = state.apply_move(Move((5, 2), (4, 2)))
        assert state.side_to_move == Side.YELLOW
        assert record.side == Side.BLUE
        assert record.text == "c3-c4"
        assert record.captured == 0
        assert state.last_move == Move((5, 2), (4, 2))
        assert state.ply_count == 1

    def test_capture_ends_game_when_opponent_is_wiped_out(
        self, single_capture_board: Board
    ) -> None:
        state = GameState()
        state.setup(single_capture_board)
        record = state.apply_move(state.legal_moves()[0])
        assert record.captured == 1
        assert state.is_game_over
        assert state.result == GameResult.BLUE_WINS
        assert state.end_reason == GameEndReason.NO_MOVES

    def test_promotion_is_kept_on_board(self) -> None:
        board = board_from_diagram(
            """
            ........
            .b......
            ........
            ........
            ........
            ........
            ........
            .....y..
            """
        )
        state = GameState()
        state.setup(board)
        state.apply_move(Move((1, 1), (0, 1)))
        piece = state.board[(0, 1)]
        assert piece is not None and piece.rank == Rank.KING


class TestRepetition:
    def test_third_occurrence_is_a_draw(self) -> None:
        state = _kings_state()
        for ply in range(8):
            state.apply_move(_SHUFFLE[ply % 4])
            assert not state.is_game_over
        state.apply_move(_SHUFFLE[0])
        assert state.is_game_over
        assert state.result == GameResult.DRAW
        assert state.end_reason == GameEndReason.REPETITION
        assert state.ply_count == 9

    def test_limit_is_configurable(self) -> None:
        state = _kings_state(limit=2)
        for ply in range(4):
            state.apply_move(_SHUFFLE[ply % 4])
        state.apply_move(_SHUFFLE[0])
        assert state.result == GameResult.DRAW
        assert state.ply_count == 5

    def test_repetition_count_tracks_current_board(self) -> None:
        state = _kings_state()
        state.apply_move(_SHUFFLE[0])
        assert state.repetition_count() == 1


class TestTerminalTransitions:
    def test_flag_fall(self) -> None:
        state = GameState()
        state.setup()
        state.flag_fall(Side.BLUE)
        assert state.result == GameResult.YELLOW_WINS
        assert state.end_reason == GameEndReason.TIMEOUT
        assert state.legal_moves() == []

    def test_declare_loss(self) -> None:
        state = GameState()
        state.setup()
        state.declare_loss(Side.YELLOW, GameEndReason.NO_MOVES)
        assert state.result == GameResult.BLUE_WINS
        assert state.phase == GamePhase.GAME_OVER
