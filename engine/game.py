from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional

from .board import Board, Move, Side, board_fen, initial_board
from .config import SimulationConfig
from .movegen import MoveGenerationResult, NoCandidates, generate_moves, select_move
from .render import board_to_text, render_board

log = logging.getLogger(__name__)

TIME_LIMIT_MESSAGE = "Game over! Time limit of {limit} seconds reached."
MOVE_LIMIT_MESSAGE = "Game over! Move limit of {limit} moves reached."
CHECKMATE_MESSAGE = "Checkmate! {winner} wins!"
NO_MOVES_MESSAGE = "Game over! No more moves for {side}"


def _format_seconds(limit: float) -> str:
    return str(int(limit)) if float(limit).is_integer() else repr(float(limit))


class GameStatus(Enum):
    RUNNING = "running"
    STOPPED_BY_TIME = "stopped_by_time"
    STOPPED_BY_MOVE_LIMIT = "stopped_by_move_limit"
    # Kept as a terminal shape only: an empty candidate list is consumed once
    # per iteration and always reported as checkmate.
    STOPPED_BY_NO_MOVES = "stopped_by_no_moves"
    STOPPED_BY_CHECKMATE = "stopped_by_checkmate"


@dataclass
class GameOutcome:
    status: GameStatus
    message: str
    move_count: int
    winner: Optional[Side] = None


class Game:
    """Owns the board, the side to move and the move counter.

    The state is mutated in place by ``make_move``/``switch_turn`` and by the
    ``play`` loop; there is no history and no undo.
    """

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.board: Board = initial_board()
        self.turn: Side = Side.WHITE
        self.move_count: int = 0
        self.status: GameStatus = GameStatus.RUNNING
        self.last_move: Optional[Move] = None

    def candidate_moves(self) -> List[Move]:
        return generate_moves(self.board, self.turn)

    def make_move(self, move: Move) -> None:
        (from_row, from_col), (to_row, to_col) = move
        self.board[to_row][to_col] = self.board[from_row][from_col]
        self.board[from_row][from_col] = None
        self.last_move = move

    def switch_turn(self) -> None:
        self.turn = self.turn.opponent

    def step(self) -> MoveGenerationResult:
        """Apply the selected move for the side to move, if there is one."""
        result = select_move(self.board, self.turn)
        if isinstance(result, NoCandidates):
            self.status = GameStatus.STOPPED_BY_CHECKMATE
            return result
        self.status = GameStatus.RUNNING
        mover = self.turn
        self.make_move(result.move)
        self.switch_turn()
        self.move_count += 1
        log.debug("Move %d: %s played %s", self.move_count, mover, result.move.uci())
        return result

    def play(
        self,
        config: Optional[SimulationConfig] = None,
        renderer: Callable[[Board], None] = render_board,
        clock: Callable[[], float] = time.monotonic,
        echo: Callable[[str], None] = print,
    ) -> GameOutcome:
        """Run the loop until a limit is hit or the side to move has no candidates.

        Each iteration checks, in order: elapsed time, moves applied in this
        run, then renders the board and either applies the first candidate or
        reports checkmate for the other side.
        """
        cfg = config or SimulationConfig()
        start_ts = clock()
        start_count = self.move_count
        self.status = GameStatus.RUNNING
        log.info(
            "Starting game: time_limit=%gs move_limit=%d turn=%s",
            cfg.time_limit_s,
            cfg.move_limit,
            self.turn,
        )

        while True:
            if clock() - start_ts >= cfg.time_limit_s:
                return self._finish(
                    GameStatus.STOPPED_BY_TIME,
                    TIME_LIMIT_MESSAGE.format(limit=_format_seconds(cfg.time_limit_s)),
                    echo,
                )

            if self.move_count - start_count >= cfg.move_limit:
                return self._finish(
                    GameStatus.STOPPED_BY_MOVE_LIMIT,
                    MOVE_LIMIT_MESSAGE.format(limit=cfg.move_limit),
                    echo,
                )

            renderer(self.board)

            result = self.step()
            if isinstance(result, NoCandidates):
                winner = result.side.opponent
                return self._finish(
                    GameStatus.STOPPED_BY_CHECKMATE,
                    CHECKMATE_MESSAGE.format(winner=winner),
                    echo,
                    winner=winner,
                )

    def _finish(
        self,
        status: GameStatus,
        message: str,
        echo: Callable[[str], None],
        winner: Optional[Side] = None,
    ) -> GameOutcome:
        self.status = status
        echo(message)
        log.info("Game ended (%s) after %d moves", status.value, self.move_count)
        return GameOutcome(status=status, message=message, move_count=self.move_count, winner=winner)

    def snapshot(self) -> Dict[str, object]:
        return {
            "fen": board_fen(self.board),
            "board": board_to_text(self.board),
            "turn": str(self.turn).lower(),
            "move_count": self.move_count,
            "status": self.status.value,
            "last_move": self.last_move.uci() if self.last_move else None,
            "candidates": [mv.uci() for mv in self.candidate_moves()],
        }
