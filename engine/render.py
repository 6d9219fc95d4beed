from __future__ import annotations

import sys
from typing import Optional, TextIO

from .board import Board, to_base_board


def board_to_text(board: Board) -> str:
    """Grid text, row 0 first: White uppercase, Black lowercase, '.' empty."""
    return str(to_base_board(board))


def render_board(board: Board, stream: Optional[TextIO] = None) -> None:
    out = stream if stream is not None else sys.stdout
    out.write(board_to_text(board) + "\n\n")
