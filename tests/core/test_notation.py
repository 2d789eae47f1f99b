"""Tests for board diagrams and move text."""

import pytest

from dama.core.board import Board
from dama.core.enums import Side
from dama.core.move import Move
from dama.core.move_generator import legal_moves
from dama.core.notation import (
    STARTING_DIAGRAM,
    board_from_diagram,
    board_to_diagram,
    parse_move,
)
from dama.core.types import cell_name, parse_cell


class TestDiagram:
    def test_starting_diagram_matches_initial_board(self) -> None:
        assert board_from_diagram(STARTING_DIAGRAM).key() == Board.initial().key()

    def test_initial_board_serialises_to_starting_diagram(self) -> None:
        assert board_to_diagram(Board.initial()) == STARTING_DIAGRAM

    def test_spaces_are_ignored(self) -> None:
        spaced = "\n".join(" ".join(line) for line in STARTING_DIAGRAM.splitlines())
        assert board_from_diagram(spaced).key() == Board.initial().key()

    def test_wrong_row_count(self) -> None:
        with pytest.raises(ValueError):
            board_from_diagram("........\n........")

    def test_wrong_row_width(self) -> None:
        bad = STARTING_DIAGRAM.replace("........", ".......", 1)
        with pytest.raises(ValueError):
            board_from_diagram(bad)

    def test_unknown_character(self) -> None:
        bad = STARTING_DIAGRAM.replace("........", "...x....", 1)
        with pytest.raises(ValueError):
            board_from_diagram(bad)


class TestCellNames:
    @pytest.mark.parametrize(
        "cell,name",
        [((7, 0), "a1"), ((0, 7), "h8"), ((4, 3), "d4"), ((2, 3), "d6")],
    )
    def test_cell_name(self, cell: tuple[int, int], name: str) -> None:
        assert cell_name(cell) == name
        assert parse_cell(name) == cell

    @pytest.mark.parametrize("name", ["", "i1", "a9", "a0", "abc"])
    def test_invalid_names(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_cell(name)


class TestMoveText:
    def test_quiet_move_str(self) -> None:
        assert str(Move((5, 2), (4, 2))) == "c3-c4"

    def test_capture_str_lists_every_landing(self) -> None:
        move = Move((6, 0), (2, 0), ((4, 0), (2, 0)), ((5, 0), (3, 0)))
        assert str(move) == "a2xa4xa6"

    def test_parse_quiet(self) -> None:
        legal = legal_moves(Board.initial(), Side.BLUE)
        assert parse_move("c3-c4", legal) == Move((5, 2), (4, 2))

    def test_parse_capture_short_form(self, single_capture_board: Board) -> None:
        legal = legal_moves(single_capture_board, Side.BLUE)
        assert parse_move("d4xd6", legal) == legal[0]

    def test_parse_capture_full_form(self) -> None:
        board = board_from_diagram(
            """
            ........
            ........
            ........
            y.......
            ........
            y.......
            b.......
            ........
            """
        )
        legal = legal_moves(board, Side.BLUE)
        assert parse_move("a2xa4xa6", legal) == legal[0]
        assert parse_move("a2xa6", legal) == legal[0]

    def test_parse_illegal(self) -> None:
        legal = legal_moves(Board.initial(), Side.BLUE)
        with pytest.raises(ValueError):
            parse_move("c3-c5", legal)

    def test_parse_garbage(self) -> None:
        with pytest.raises(ValueError):
            parse_move("hello", [])


class TestMoveValidation:
    def test_path_without_captures_rejected(self) -> None:
        with pytest.raises(ValueError):
            Move((4, 3), (2, 3), path=((2, 3),))

    def test_mismatched_lengths_rejected(self) -> None:
        with pytest.raises(ValueError):
            Move((4, 3), (2, 3), ((2, 3),), ((3, 3), (2, 2)))
