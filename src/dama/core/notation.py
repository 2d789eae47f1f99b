"""Text diagrams for boards and text notation for moves.

A diagram is eight lines of eight characters, row 0 first::

    ........
    yyyyyyyy
    yyyyyyyy
    ........
    ........
    bbbbbbbb
    bbbbbbbb
    ........

``.`` is an empty cell, ``b``/``y`` are blue/yellow pawns and ``B``/``Y``
their kings. Whitespace between characters and blank lines are ignored.
"""

from __future__ import annotations

from collections.abc import Iterable

from dama.core.board import Board
from dama.core.move import Move
from dama.core.piece import Piece
from dama.core.types import BOARD_SIZE, parse_cell

STARTING_DIAGRAM = "\n".join(
    [
        "........",
        "yyyyyyyy",
        "yyyyyyyy",
        "........",
        "........",
        "bbbbbbbb",
        "bbbbbbbb",
        "........",
    ]
)


def board_from_diagram(diagram: str) -> Board:
    """Parse a text diagram into a :class:`Board`."""
    rows = ["".join(line.split()) for line in diagram.strip().splitlines()]
    rows = [r for r in rows if r]
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid diagram (must contain {BOARD_SIZE} rows): {diagram!r}")

    board = Board()
    for row, text in enumerate(rows):
        if len(text) != BOARD_SIZE:
            raise ValueError(f"Invalid diagram row width: {text!r}")
        for col, ch in enumerate(text):
            if ch == ".":
                continue
            board[(row, col)] = Piece.from_char(ch, (row, col))
    return board


def board_to_diagram(board: Board) -> str:
    """Serialise a :class:`Board` to a text diagram."""
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        rows.append(
            "".join(str(board[(row, col)] or ".") for col in range(BOARD_SIZE))
        )
    return "\n".join(rows)


def parse_move(text: str, legal: Iterable[Move]) -> Move:
    """Resolve move text against *legal* moves.

    Accepts ``d3-d4`` for a step and ``d4xd6xf6`` (every landing listed) or
    the short ``d4xf6`` (origin and destination only) for captures. The short
    capture form must match exactly one legal chain.
    """
    text = text.strip()
    if "x" in text:
        cells = [parse_cell(part) for part in text.split("x")]
        if len(cells) < 2:
            raise ValueError(f"Invalid capture notation: {text!r}")
        candidates = [
            m
            for m in legal
            if m.is_capture
            and m.from_cell == cells[0]
            and m.to_cell == cells[-1]
            and (len(cells) == 2 or list(m.path or ()) == cells[1:])
        ]
    else:
        parts = text.split("-")
        if len(parts) != 2:
            raise ValueError(f"Invalid move notation: {text!r}")
        origin, target = parse_cell(parts[0]), parse_cell(parts[1])
        candidates = [
            m
            for m in legal
            if not m.is_capture and m.from_cell == origin and m.to_cell == target
        ]

    if not candidates:
        raise ValueError(f"Illegal move: {text!r}")
    if len(candidates) > 1:
        raise ValueError(f"Ambiguous move: {text!r}")
    return candidates[0]
