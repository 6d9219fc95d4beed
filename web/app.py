from __future__ import annotations

from flask import Flask, jsonify, request
import logging
import sys
from pathlib import Path

# Ensure project root is importable when running this file directly
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from engine import Game, NoCandidates, SimulationConfig, board_to_text

log = logging.getLogger(__name__)


def create_app() -> Flask:
    app = Flask(__name__)

    game = Game()

    @app.get("/api/state")
    def api_state():
        return jsonify(game.snapshot())

    @app.post("/api/new")
    def api_new():
        game.reset()
        return jsonify(game.snapshot())

    @app.post("/api/step")
    def api_step():
        result = game.step()
        snap = game.snapshot()
        if isinstance(result, NoCandidates):
            snap["move"] = None
            snap["winner"] = str(result.side.opponent).lower()
        else:
            snap["move"] = result.move.uci()
            snap["winner"] = None
        return jsonify(snap)

    @app.post("/api/play")
    def api_play():
        payload = request.get_json(silent=True) or {}
        if not isinstance(payload, dict):
            return jsonify({"error": "Expected a JSON object"}), 400
        try:
            cfg = SimulationConfig.from_mapping(payload)
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400

        if payload.get("reset", True):
            game.reset()

        # Capture frames and messages instead of writing to the console
        frames: list[str] = []
        messages: list[str] = []
        outcome = game.play(
            cfg,
            renderer=lambda board: frames.append(board_to_text(board)),
            echo=messages.append,
        )
        log.info("API game finished: %s", outcome.message)

        snap = game.snapshot()
        snap["outcome"] = outcome.status.value
        snap["message"] = outcome.message
        snap["winner"] = str(outcome.winner).lower() if outcome.winner is not None else None
        snap["frames"] = frames
        return jsonify(snap)

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True)
