from __future__ import annotations

import logging
import os
import threading
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request

from game import (
    BOARDS,
    Collided,
    GameArea,
    MatchError,
    MatchResult,
    MatchState,
    Move,
    MoveOutcome,
    Placed,
    board_view,
    public_state,
)

logger = logging.getLogger(__name__)

HISTORY_LIMIT = int(os.getenv("QTTT_HISTORY_LIMIT", "100"))

app = Flask(__name__)

# area id -> GameArea; areas are created on first use
_areas: Dict[str, GameArea] = {}
_areas_lock = threading.Lock()


def get_area(area_id: str) -> GameArea:
    with _areas_lock:
        area = _areas.get(area_id)
        if area is None:
            area = GameArea(area_id, history_limit=HISTORY_LIMIT)
            _areas[area_id] = area
            logger.info("created area %s", area_id)
        return area


def reset_areas() -> None:
    with _areas_lock:
        _areas.clear()


# ---------- JSON helpers ----------

def move_to_json(m: Move) -> Dict[str, Any]:
    return {"board": m.board, "row": int(m.row), "col": int(m.col), "gamePiece": m.piece}


def outcome_to_json(o: MoveOutcome) -> Dict[str, Any]:
    if isinstance(o, Placed):
        return {"kind": o.kind, **move_to_json(o.move)}
    return {"kind": o.kind, "board": o.board, "row": int(o.row), "col": int(o.col)}


def state_to_json(s: Optional[MatchState], player_id: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """Wire payload for a snapshot as seen by `player_id`; observers (None) get revealed cells only."""
    if s is None:
        return None
    s = public_state(s, player_id)
    out: Dict[str, Any] = {
        "matchId": s.match_id,
        "status": s.status,
        "x": s.seat_x,
        "o": s.seat_o,
        "moves": [move_to_json(m) for m in s.moves],
        "publiclyVisible": {b: [list(row) for row in s.revealed[b]] for b in BOARDS},
        "xScore": int(s.x_score),
        "oScore": int(s.o_score),
        "attemptCount": int(s.attempt_count),
        "winner": s.winner,
    }
    view = board_view(s, player_id)
    out["boards"] = {b: [list(row) for row in view[b]] for b in BOARDS}
    return out


def result_to_json(r: MatchResult) -> Dict[str, Any]:
    return {"matchId": r.match_id, "scores": dict(r.scores)}


def _error(e: MatchError, status: int = 400) -> Any:
    return jsonify({"ok": False, "error": str(e), "code": e.code}), status


def _player(body: Dict[str, Any]) -> Optional[str]:
    p = body.get("player")
    if p is None or p == "":
        return None
    return str(p)


# ---------- Match API ----------

@app.get("/api/areas/<area_id>")
def api_area(area_id: str) -> Any:
    area = get_area(area_id)
    viewer = request.args.get("player") or None
    st = area.state()
    return jsonify({
        "ok": True,
        "area": area_id,
        "state": state_to_json(st, viewer),
        "whoseTurn": area.match.whose_turn() if area.match is not None else None,
    })


@app.post("/api/areas/<area_id>/join")
def api_join(area_id: str) -> Any:
    body = request.get_json(force=True, silent=True) or {}
    player = _player(body)
    if player is None:
        return jsonify({"ok": False, "error": "player required"}), 400
    area = get_area(area_id)
    try:
        match_id = area.join(player, body.get("name"))
    except MatchError as e:
        logger.info("join rejected in area %s for %s: %s", area_id, player, e)
        return _error(e)
    return jsonify({"ok": True, "matchId": match_id, "state": state_to_json(area.state(), player)})


@app.post("/api/areas/<area_id>/leave")
def api_leave(area_id: str) -> Any:
    body = request.get_json(force=True, silent=True) or {}
    player = _player(body)
    if player is None:
        return jsonify({"ok": False, "error": "player required"}), 400
    area = get_area(area_id)
    try:
        area.leave(player, body.get("matchId"))
    except MatchError as e:
        logger.info("leave rejected in area %s for %s: %s", area_id, player, e)
        return _error(e)
    return jsonify({"ok": True, "state": state_to_json(area.state(), player)})


@app.post("/api/areas/<area_id>/move")
def api_move(area_id: str) -> Any:
    body = request.get_json(force=True, silent=True) or {}
    player = _player(body)
    if player is None:
        return jsonify({"ok": False, "error": "player required"}), 400
    for field in ("board", "row", "col"):
        if field not in body:
            return jsonify({"ok": False, "error": f"{field} required"}), 400
    area = get_area(area_id)
    try:
        outcome = area.apply_move(player, body.get("matchId"), body["board"], body["row"], body["col"])
    except MatchError as e:
        logger.info("move rejected in area %s for %s: %s", area_id, player, e)
        return _error(e)
    return jsonify({
        "ok": True,
        "outcome": outcome_to_json(outcome),
        "collision": isinstance(outcome, Collided),
        "state": state_to_json(area.state(), player),
    })


@app.get("/api/areas/<area_id>/history")
def api_history(area_id: str) -> Any:
    area = get_area(area_id)
    return jsonify({"ok": True, "history": [result_to_json(r) for r in area.history]})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    logging.basicConfig(level=os.getenv("QTTT_LOG_LEVEL", "INFO").upper())
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
