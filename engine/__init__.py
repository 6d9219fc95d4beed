"""Pseudo-legal chess board simulator.

Modules:
- board: pieces, sides, the 8x8 grid and the starting setup
- movegen: direction tables, candidate enumeration and first-candidate selection
- render: console rendering of the grid
- game: game state and the limit-driven game loop
- config: time and move limits
"""

from .board import Move, Occupant, PieceKind, Side, initial_board
from .config import SimulationConfig
from .game import Game, GameOutcome, GameStatus
from .movegen import NoCandidates, Selected, generate_moves, select_move
from .render import board_to_text, render_board

__all__ = [
    "Game",
    "GameOutcome",
    "GameStatus",
    "Move",
    "NoCandidates",
    "Occupant",
    "PieceKind",
    "Selected",
    "Side",
    "SimulationConfig",
    "board_to_text",
    "generate_moves",
    "initial_board",
    "render_board",
    "select_move",
]
