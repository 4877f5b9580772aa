from __future__ import annotations

import os
import random
import threading
import uuid
from collections import OrderedDict
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request

from game import (
    Card,
    PyramidError,
    PyramidSolitaire,
    apply_move,
    build_deck,
    legal_moves,
    move_from_json,
    move_to_json,
    parse_card,
)
from pyramid_core.config import DEFAULT_DRAWS, DEFAULT_ROWS, MAX_GAMES
from pyramid_core.logging_utils import get_logger, setup_logging

logger = get_logger(__name__)

app = Flask(__name__)


class GameStore:
    """
    In-process registry of running games. Each game has its own lock; callers hold it while playing.

    Holds at most `max_games` games; adding past the cap evicts the least recently used ones.
    """

    def __init__(self, max_games: int = MAX_GAMES) -> None:
        self.max_games = max(1, max_games)
        self._lock = threading.Lock()
        self._games: OrderedDict[str, Tuple[PyramidSolitaire, threading.Lock]] = OrderedDict()

    def add(self, game: PyramidSolitaire) -> str:
        game_id = uuid.uuid4().hex
        with self._lock:
            self._games[game_id] = (game, threading.Lock())
            while len(self._games) > self.max_games:
                evicted, _ = self._games.popitem(last=False)
                logger.info("Evicted game %s (store full at %d)", evicted, self.max_games)
        return game_id

    def get(self, game_id: str) -> Optional[Tuple[PyramidSolitaire, threading.Lock]]:
        with self._lock:
            entry = self._games.get(game_id)
            if entry is not None:
                self._games.move_to_end(game_id)
            return entry

    def remove(self, game_id: str) -> bool:
        with self._lock:
            return self._games.pop(game_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)


games = GameStore()


def _card_to_json(card: Optional[Card]) -> Optional[str]:
    return card.label if card is not None else None


def state_to_json(game: PyramidSolitaire) -> Dict[str, Any]:
    won = game.is_game_won()
    return {
        "pyramid": [[_card_to_json(card) for card in row] for row in game.get_pyramid()],
        "draws": [_card_to_json(card) for card in game.get_draw_cards()],
        "stockSize": game.stock_size(),
        "score": game.score(),
        "gameOver": game.is_game_over(),
        "won": won,
    }


def _legal_json(game: PyramidSolitaire) -> List[Dict[str, Any]]:
    return [move_to_json(m) for m in legal_moves(game)]


def _error(status: int, error: str, message: str) -> Any:
    return jsonify({"ok": False, "error": error, "message": message}), status


def _json_body() -> Optional[Dict[str, Any]]:
    """The request's JSON object; a missing body counts as {} and any other JSON value as None."""
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


def _lookup(body: Dict[str, Any]) -> Optional[Tuple[PyramidSolitaire, threading.Lock]]:
    game_id = body.get("gameId")
    if not isinstance(game_id, str):
        return None
    return games.get(game_id)


# ---------- Game API ----------

@app.post("/api/new")
def api_new() -> Any:
    body = _json_body()
    if body is None:
        return _error(400, "BadRequest", "JSON object required")
    try:
        rows = int(body.get("rows", DEFAULT_ROWS))
        draws = int(body.get("draws", DEFAULT_DRAWS))
        seed = body.get("seed", None)
        seed = None if seed is None else int(seed)
        shuffle = bool(body.get("shuffle", True))
        deck_in = body.get("deck")
        deck = [parse_card(str(x)) for x in deck_in] if isinstance(deck_in, list) else build_deck()
    except (TypeError, ValueError, OverflowError) as e:
        return _error(400, "BadRequest", f"bad request: {e}")

    game = PyramidSolitaire(rng=random.Random(seed))
    try:
        game.start(deck, shuffle, rows, draws)
    except PyramidError as e:
        return _error(400, e.kind, str(e))
    game_id = games.add(game)
    logger.info("New game %s: rows=%d draws=%d seed=%s", game_id, rows, draws, seed)
    return jsonify({
        "ok": True,
        "gameId": game_id,
        "state": state_to_json(game),
        "legalMoves": _legal_json(game),
    })


@app.post("/api/state")
def api_state() -> Any:
    body = _json_body()
    if body is None:
        return _error(400, "BadRequest", "JSON object required")
    entry = _lookup(body)
    if entry is None:
        return _error(404, "UnknownGame", "game not found")
    game, lock = entry
    with lock:
        return jsonify({"ok": True, "state": state_to_json(game), "legalMoves": _legal_json(game)})


@app.post("/api/legal")
def api_legal() -> Any:
    body = _json_body()
    if body is None:
        return _error(400, "BadRequest", "JSON object required")
    entry = _lookup(body)
    if entry is None:
        return _error(404, "UnknownGame", "game not found")
    game, lock = entry
    with lock:
        return jsonify({"ok": True, "legalMoves": _legal_json(game)})


@app.post("/api/move")
def api_move() -> Any:
    body = _json_body()
    if body is None:
        return _error(400, "BadRequest", "JSON object required")
    entry = _lookup(body)
    if entry is None:
        return _error(404, "UnknownGame", "game not found")
    move_in = body.get("move")
    if not isinstance(move_in, dict):
        return _error(400, "BadRequest", "move required")
    try:
        move = move_from_json(move_in)
    except (TypeError, ValueError, OverflowError) as e:
        return _error(400, "BadRequest", f"bad move: {e}")

    game, lock = entry
    with lock:
        try:
            apply_move(game, move)
        except PyramidError as e:
            logger.info("Rejected move %s: %s (%s)", move, e.kind, e)
            return jsonify({
                "ok": False,
                "error": e.kind,
                "message": str(e),
                "legalMoves": _legal_json(game),
            }), 400
        return jsonify({"ok": True, "state": state_to_json(game), "legalMoves": _legal_json(game)})


@app.post("/api/end")
def api_end() -> Any:
    body = _json_body()
    if body is None:
        return _error(400, "BadRequest", "JSON object required")
    game_id = body.get("gameId")
    if not isinstance(game_id, str) or not games.remove(game_id):
        return _error(404, "UnknownGame", "game not found")
    return jsonify({"ok": True})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    setup_logging()
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
