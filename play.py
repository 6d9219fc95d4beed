import argparse
import logging

from engine import Game, SimulationConfig
from engine.config import DEFAULT_MOVE_LIMIT, DEFAULT_TIME_LIMIT_S


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Simulate a game of first-candidate pseudo-legal chess moves.")
    ap.add_argument("--time-limit", type=float, default=DEFAULT_TIME_LIMIT_S, help="Wall-clock limit in seconds for the whole game")
    ap.add_argument("--move-limit", type=int, default=DEFAULT_MOVE_LIMIT, help="Stop after this many applied moves")
    ap.add_argument("--log-level", default="WARNING", help="Python logging level (e.g., INFO, DEBUG)")
    return ap


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = SimulationConfig(time_limit_s=args.time_limit, move_limit=args.move_limit)
    except ValueError as exc:
        ap.error(str(exc))

    Game().play(cfg)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
