from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple, Union

from .board import Board, Move, PieceKind, Side, in_bounds


_ORTHOGONAL: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
_DIAGONAL: Tuple[Tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))

# Single-step offsets per kind; table order is candidate order.
DIRECTIONS: Dict[PieceKind, Tuple[Tuple[int, int], ...]] = {
    PieceKind.PAWN: ((1, 0), (-1, 0)),
    PieceKind.ROOK: _ORTHOGONAL,
    PieceKind.BISHOP: _DIAGONAL,
    PieceKind.QUEEN: _ORTHOGONAL + _DIAGONAL,
    PieceKind.KING: _ORTHOGONAL + _DIAGONAL,
    PieceKind.KNIGHT: (
        (2, 1), (2, -1), (-2, 1), (-2, -1),
        (1, 2), (1, -2), (-1, 2), (-1, -2),
    ),
}


@dataclass(frozen=True)
class Selected:
    move: Move
    candidates: Tuple[Move, ...]


@dataclass(frozen=True)
class NoCandidates:
    side: Side


MoveGenerationResult = Union[Selected, NoCandidates]


def generate_moves(board: Board, side: Side) -> List[Move]:
    """Enumerate pseudo-legal single-step moves for ``side``.

    Squares are scanned row-major and each piece's offsets are tried in
    ``DIRECTIONS`` order. A destination qualifies when it is on the board and
    either empty or held by the other side. The board is never mutated.
    """
    moves: List[Move] = []
    for row, squares in enumerate(board):
        for col, occupant in enumerate(squares):
            if occupant is None or occupant.side is not side:
                continue
            for d_row, d_col in DIRECTIONS[occupant.kind]:
                to_row, to_col = row + d_row, col + d_col
                if not in_bounds(to_row, to_col):
                    continue
                target = board[to_row][to_col]
                if target is None or target.side is not side:
                    moves.append(Move((row, col), (to_row, to_col)))
    return moves


def select_move(board: Board, side: Side) -> MoveGenerationResult:
    """Pick the first candidate; there is no evaluation or randomness."""
    candidates = generate_moves(board, side)
    if not candidates:
        return NoCandidates(side)
    return Selected(move=candidates[0], candidates=tuple(candidates))
