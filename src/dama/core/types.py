"""Cell type alias and coordinate helpers.

Board layout (row-major, row 0 at the top)::

    row 0  a8 b8 ... h8   <- blue promotes here
    ...
    row 7  a1 b1 ... h1   <- yellow promotes here

Cells are ``(row, col)`` tuples. Names follow the usual letter-file /
number-rank convention, so ``(7, 0)`` is ``a1`` and ``(0, 7)`` is ``h8``.
"""

from __future__ import annotations

from typing import TypeAlias

BOARD_SIZE = 8

Cell: TypeAlias = tuple[int, int]  # (row, col), each 0-7

ORTHOGONAL_DIRS: tuple[Cell, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


def is_on_board(row: int, col: int) -> bool:
    """Check whether the coordinates fall inside the 8x8 grid."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def cell_index(cell: Cell) -> int:
    """Flat index 0-63 used by :class:`~dama.core.board.Board` storage."""
    return cell[0] * BOARD_SIZE + cell[1]


def cell_name(cell: Cell) -> str:
    """Human-readable name, e.g. (7, 0) -> 'a1', (4, 3) -> 'd4'."""
    row, col = cell
    return chr(ord("a") + col) + str(BOARD_SIZE - row)


def parse_cell(name: str) -> Cell:
    """Parse cell name, e.g. 'd4' -> (4, 3)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid cell name: {name!r}")
    return (BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))
