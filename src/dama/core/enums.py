"""Core enumerations for the Dama domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Side (piece colour)."""

    BLUE = 0
    YELLOW = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a forward step: blue advances toward row 0."""
        return -1 if self is Side.BLUE else 1

    @property
    def promotion_row(self) -> int:
        return 0 if self is Side.BLUE else 7

    @property
    def back_row(self) -> int:
        """Rear rank of the starting setup."""
        return 6 if self is Side.BLUE else 1

    def __str__(self) -> str:
        return self.name.lower()


class Rank(IntEnum):
    """Piece rank. Only ever increases: pawn -> king."""

    PAWN = 1
    KING = 2


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    BLUE_WINS = 1
    YELLOW_WINS = 2
    DRAW = 3

    @classmethod
    def win_for(cls, side: Side) -> GameResult:
        return cls.BLUE_WINS if side is Side.BLUE else cls.YELLOW_WINS
