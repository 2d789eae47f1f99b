"""Board - piece placement on an 8x8 Dama board."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import replace

from dama.core.enums import Rank, Side
from dama.core.piece import Piece
from dama.core.types import BOARD_SIZE, Cell, cell_index

_CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class Board:
    """Mutable 64-cell board.

    Storing a piece keeps its ``row``/``col`` in sync with the target cell.
    Rules code never mutates a board it was handed; it works on :meth:`copy`.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[Piece | None] = [None] * _CELL_COUNT

    # -- Element access -----------------------------------------------------

    def __getitem__(self, cell: Cell) -> Piece | None:
        return self._cells[cell_index(cell)]

    def __setitem__(self, cell: Cell, piece: Piece | None) -> None:
        if piece is not None and piece.cell != cell:
            piece = replace(piece, row=cell[0], col=cell[1])
        self._cells[cell_index(cell)] = piece

    def is_empty(self, cell: Cell) -> bool:
        return self._cells[cell_index(cell)] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, side: Side) -> list[Piece]:
        """All pieces of *side* in row-major order."""
        return [p for p in self._cells if p is not None and p.side == side]

    def count(self, side: Side, rank: Rank | None = None) -> int:
        """Number of *side*'s pieces, optionally restricted to *rank*."""
        return sum(
            1
            for p in self._cells
            if p is not None and p.side == side and (rank is None or p.rank == rank)
        )

    def __iter__(self) -> Iterator[Piece]:
        """Occupied cells' pieces in row-major order."""
        return (p for p in self._cells if p is not None)

    def key(self) -> str:
        """Position key ignoring piece ids, used for repetition tracking."""
        return "".join(str(p) if p is not None else "." for p in self._cells)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = self._cells.copy()
        return b

    def clear(self) -> None:
        self._cells = [None] * _CELL_COUNT

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard Turkish Dama setup: yellow on rows 1-2, blue on rows 5-6."""
        b = cls()
        for side, rows in ((Side.YELLOW, (1, 2)), (Side.BLUE, (5, 6))):
            for row in rows:
                for col in range(BOARD_SIZE):
                    b[(row, col)] = Piece(f"{side}-{row}-{col}", side, Rank.PAWN, row, col)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            line = []
            for col in range(BOARD_SIZE):
                p = self[(row, col)]
                line.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - row} {' '.join(line)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
