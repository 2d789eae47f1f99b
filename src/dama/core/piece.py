"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from dama.core.enums import Rank, Side
from dama.core.types import Cell

# Diagram character <-> (Side, Rank)
_CHAR_MAP: dict[str, tuple[Side, Rank]] = {
    "b": (Side.BLUE, Rank.PAWN),
    "B": (Side.BLUE, Rank.KING),
    "y": (Side.YELLOW, Rank.PAWN),
    "Y": (Side.YELLOW, Rank.KING),
}

_DIAGRAM_CHARS: dict[tuple[Side, Rank], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a Dama piece.

    ``id`` is opaque to the rules; it only lets a UI follow the same piece
    across boards. ``row``/``col`` always mirror the cell the piece occupies.
    """

    id: str
    side: Side
    rank: Rank
    row: int
    col: int

    @property
    def cell(self) -> Cell:
        return (self.row, self.col)

    @property
    def is_king(self) -> bool:
        return self.rank == Rank.KING

    def moved_to(self, cell: Cell) -> Piece:
        """Copy of this piece placed on *cell*, promoted if it reached the far row."""
        row, col = cell
        rank = self.rank
        if rank == Rank.PAWN and row == self.side.promotion_row:
            rank = Rank.KING
        return replace(self, row=row, col=col, rank=rank)

    # -- Serialisation ------------------------------------------------------

    def __str__(self) -> str:
        """Diagram character (lowercase = pawn, uppercase = king)."""
        return _DIAGRAM_CHARS[(self.side, self.rank)]

    @classmethod
    def from_char(cls, char: str, cell: Cell, piece_id: str | None = None) -> Piece:
        """Create piece from diagram character, e.g. 'Y' -> yellow king."""
        try:
            side, rank = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        row, col = cell
        return cls(piece_id or f"{side}-{row}-{col}", side, rank, row, col)
