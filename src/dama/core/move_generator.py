"""Legal move generation with mandatory maximal capture."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dama.core.enums import Rank, Side
from dama.core.move import Move
from dama.core.types import ORTHOGONAL_DIRS, Cell, is_on_board

if TYPE_CHECKING:
    from dama.core.board import Board
    from dama.core.piece import Piece


# Pawns never step or jump backward.
_PAWN_DIRS: dict[Side, tuple[Cell, ...]] = {
    Side.BLUE: ((-1, 0), (0, -1), (0, 1)),
    Side.YELLOW: ((1, 0), (0, -1), (0, 1)),
}

# Landing/captured cells of one finished chain, in jump order.
_Chain = tuple[tuple[Cell, ...], tuple[Cell, ...]]


class MoveGenerator:
    """Generates legal moves for a given :class:`Board`.

    The board passed in is never modified; capture chains are explored on
    private copies.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self, side: Side) -> list[Move]:
        """All legal moves for *side*.

        If any piece can capture, only the captures with the highest capture
        count across all of *side*'s pieces are returned. Otherwise every
        quiet step is legal. An empty list means *side* cannot move.
        """
        captures = self.generate_captures(side)
        if captures:
            best = max(m.capture_count for m in captures)
            return [m for m in captures if m.capture_count == best]
        return self.generate_quiet_moves(side)

    def generate_captures(self, side: Side) -> list[Move]:
        """Every complete capture chain for *side*, of any length."""
        moves: list[Move] = []
        for piece in self._board.pieces(side):
            origin = piece.cell
            for path, captured in self._capture_chains(self._board, piece, ()):
                moves.append(Move(origin, path[-1], path, captured))
        return moves

    def generate_quiet_moves(self, side: Side) -> list[Move]:
        """Non-capturing moves for *side*, ignoring the capture obligation."""
        moves: list[Move] = []
        for piece in self._board.pieces(side):
            if piece.rank == Rank.KING:
                self._gen_king_slides(piece, moves)
            else:
                self._gen_pawn_steps(piece, moves)
        return moves

    def has_capture(self, side: Side) -> bool:
        board = self._board
        for piece in board.pieces(side):
            if self._capture_chains(board, piece, ()):
                return True
        return False

    # -- Quiet moves (private) ----------------------------------------------

    def _gen_pawn_steps(self, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        row, col = piece.cell
        for dr, dc in _PAWN_DIRS[piece.side]:
            nr, nc = row + dr, col + dc
            if is_on_board(nr, nc) and board.is_empty((nr, nc)):
                moves.append(Move((row, col), (nr, nc)))

    def _gen_king_slides(self, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        row, col = piece.cell
        for dr, dc in ORTHOGONAL_DIRS:
            nr, nc = row + dr, col + dc
            while is_on_board(nr, nc) and board.is_empty((nr, nc)):
                moves.append(Move((row, col), (nr, nc)))
                nr += dr
                nc += dc

    # -- Capture chains (private) -------------------------------------------

    def _capture_chains(
        self,
        board: Board,
        piece: Piece,
        visited: tuple[Cell, ...],
    ) -> list[_Chain]:
        """Depth-first enumeration of the chains *piece* can complete on *board*.

        *visited* holds the cells already captured earlier in this chain; a
        piece there is never jumped twice.
        """
        if piece.rank == Rank.KING:
            jumps = self._king_jumps(board, piece, visited)
        else:
            jumps = self._pawn_jumps(board, piece, visited)

        chains: list[_Chain] = []
        for captured, landing in jumps:
            jumped = piece.moved_to(landing)
            if jumped.rank != piece.rank:
                # Promotion ends the turn's capture sequence.
                chains.append(((landing,), (captured,)))
                continue

            virtual = board.copy()
            virtual[piece.cell] = None
            virtual[captured] = None
            virtual[landing] = jumped

            tails = self._capture_chains(virtual, jumped, visited + (captured,))
            if not tails:
                chains.append(((landing,), (captured,)))
                continue
            for tail_path, tail_captured in tails:
                chains.append(((landing, *tail_path), (captured, *tail_captured)))
        return chains

    def _pawn_jumps(
        self,
        board: Board,
        piece: Piece,
        visited: tuple[Cell, ...],
    ) -> list[tuple[Cell, Cell]]:
        jumps: list[tuple[Cell, Cell]] = []
        row, col = piece.cell
        for dr, dc in _PAWN_DIRS[piece.side]:
            end_r, end_c = row + 2 * dr, col + 2 * dc
            if not is_on_board(end_r, end_c):
                continue
            mid = (row + dr, col + dc)
            target = board[mid]
            if (
                target is not None
                and target.side != piece.side
                and mid not in visited
                and board.is_empty((end_r, end_c))
            ):
                jumps.append((mid, (end_r, end_c)))
        return jumps

    def _king_jumps(
        self,
        board: Board,
        piece: Piece,
        visited: tuple[Cell, ...],
    ) -> list[tuple[Cell, Cell]]:
        jumps: list[tuple[Cell, Cell]] = []
        row, col = piece.cell
        for dr, dc in ORTHOGONAL_DIRS:
            mid_r, mid_c = row + dr, col + dc
            while is_on_board(mid_r, mid_c) and board.is_empty((mid_r, mid_c)):
                mid_r += dr
                mid_c += dc
            if not is_on_board(mid_r, mid_c):
                continue

            mid = (mid_r, mid_c)
            target = board[mid]
            if target is None or target.side == piece.side or mid in visited:
                continue

            end_r, end_c = mid_r + dr, mid_c + dc
            while is_on_board(end_r, end_c) and board.is_empty((end_r, end_c)):
                jumps.append((mid, (end_r, end_c)))
                end_r += dr
                end_c += dc
        return jumps


def legal_moves(board: Board, side: Side) -> list[Move]:
    """Legal moves for *side* on *board* (see :meth:`MoveGenerator.generate_legal_moves`)."""
    return MoveGenerator(board).generate_legal_moves(side)
