"""
Run limits for a simulated game.

- time_limit_s: wall-clock budget for the whole loop (default 300 seconds).
- move_limit: number of moves applied before the loop stops (default 40, 20 per side).

Values come from CLI flags or an API payload only; nothing is read from the environment.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping


DEFAULT_TIME_LIMIT_S = 300.0
DEFAULT_MOVE_LIMIT = 40


@dataclass(frozen=True)
class SimulationConfig:
    time_limit_s: float = DEFAULT_TIME_LIMIT_S
    move_limit: int = DEFAULT_MOVE_LIMIT

    def __post_init__(self) -> None:
        if not math.isfinite(self.time_limit_s):
            raise ValueError(f"time_limit_s must be a finite number, got {self.time_limit_s}")
        if self.time_limit_s < 0:
            raise ValueError(f"time_limit_s must be >= 0, got {self.time_limit_s}")
        if self.move_limit < 0:
            raise ValueError(f"move_limit must be >= 0, got {self.move_limit}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "SimulationConfig":
        data = data or {}
        if not isinstance(data, Mapping):
            raise ValueError(f"Limits must be given as an object, got {type(data).__name__}")
        try:
            time_limit_s = float(data.get("time_limit", DEFAULT_TIME_LIMIT_S))
            move_limit = int(data.get("move_limit", DEFAULT_MOVE_LIMIT))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid limits: {exc}") from exc
        return cls(time_limit_s=time_limit_s, move_limit=move_limit)
