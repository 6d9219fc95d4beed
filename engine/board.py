from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple

import chess


BOARD_SIZE = 8


class PieceKind(Enum):
    """Piece kinds, valued as python-chess piece types."""

    PAWN = chess.PAWN
    ROOK = chess.ROOK
    KNIGHT = chess.KNIGHT
    BISHOP = chess.BISHOP
    QUEEN = chess.QUEEN
    KING = chess.KING


class Side(Enum):
    WHITE = chess.WHITE
    BLACK = chess.BLACK

    @property
    def opponent(self) -> "Side":
        return Side.BLACK if self is Side.WHITE else Side.WHITE

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Occupant:
    kind: PieceKind
    side: Side

    def to_chess(self) -> chess.Piece:
        return chess.Piece(self.kind.value, self.side.value)

    def symbol(self) -> str:
        return self.to_chess().symbol()


Square = Tuple[int, int]
Board = List[List[Optional[Occupant]]]

BACK_RANK: Tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Move(NamedTuple):
    src: Square
    dst: Square

    def uci(self) -> str:
        return square_name(self.src) + square_name(self.dst)


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def to_chess_square(square: Square) -> chess.Square:
    # Row 0 holds Black's back rank, i.e. the eighth rank.
    row, col = square
    return chess.square(col, BOARD_SIZE - 1 - row)


def square_name(square: Square) -> str:
    return chess.square_name(to_chess_square(square))


def empty_board() -> Board:
    return [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]


def initial_board() -> Board:
    """Standard starting setup: Black on rows 0-1, White on rows 6-7."""
    board = empty_board()
    for col in range(BOARD_SIZE):
        board[1][col] = Occupant(PieceKind.PAWN, Side.BLACK)
        board[6][col] = Occupant(PieceKind.PAWN, Side.WHITE)
    for col, kind in enumerate(BACK_RANK):
        board[0][col] = Occupant(kind, Side.BLACK)
        board[7][col] = Occupant(kind, Side.WHITE)
    return board


def copy_board(board: Board) -> Board:
    return [list(row) for row in board]


def to_base_board(board: Board) -> chess.BaseBoard:
    """Mirror the grid onto a python-chess BaseBoard (placement only)."""
    base = chess.BaseBoard.empty()
    for row_idx, row in enumerate(board):
        for col_idx, occupant in enumerate(row):
            if occupant is not None:
                base.set_piece_at(to_chess_square((row_idx, col_idx)), occupant.to_chess())
    return base


def board_fen(board: Board) -> str:
    return to_base_board(board).board_fen()
