"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from dama.core.types import Cell, cell_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a quiet step or a capture chain.

    For captures ``path[i]`` is the landing cell reached by jumping
    ``captures[i]``; the last landing equals ``to_cell``. Quiet moves carry
    neither sequence.
    """

    from_cell: Cell
    to_cell: Cell
    path: tuple[Cell, ...] | None = None
    captures: tuple[Cell, ...] | None = None

    def __post_init__(self) -> None:
        if (self.path is None) != (self.captures is None):
            raise ValueError("Move path and captures must be given together")
        if self.path is not None and self.captures is not None:
            if len(self.path) != len(self.captures) or not self.path:
                raise ValueError("Move path and captures must have equal, non-zero length")

    @property
    def is_capture(self) -> bool:
        return self.captures is not None

    @property
    def capture_count(self) -> int:
        return len(self.captures) if self.captures is not None else 0

    # -- Display ------------------------------------------------------------

    def __str__(self) -> str:
        if self.path is None:
            return f"{cell_name(self.from_cell)}-{cell_name(self.to_cell)}"
        return "x".join(cell_name(c) for c in (self.from_cell, *self.path))
