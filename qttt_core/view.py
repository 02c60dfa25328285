from __future__ import annotations

from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from .board import BOARDS, SIZE, BoardLabel, Grid, Move, pretty_grids
from .state import MatchState


def visible_moves(state: MatchState, player_id: Optional[str] = None) -> Tuple[Move, ...]:
    """Recorded moves `player_id` is allowed to see: their own plus every revealed cell."""
    piece = state.piece_of(player_id) if player_id is not None else None
    return tuple(
        m for m in state.moves
        if m.piece == piece or state.is_revealed(m.board, m.row, m.col)
    )


def board_view(state: MatchState, player_id: Optional[str] = None) -> Dict[BoardLabel, Grid]:
    """Per-board 3x3 grids as seen by `player_id`; observers see only revealed cells."""
    rows: Dict[BoardLabel, List[List[Optional[str]]]] = {
        b: [[None] * SIZE for _ in range(SIZE)] for b in BOARDS
    }
    for m in visible_moves(state, player_id):
        rows[m.board][m.row][m.col] = m.piece
    return {b: tuple(tuple(r) for r in rows[b]) for b in BOARDS}


def pretty(state: MatchState, player_id: Optional[str] = None) -> str:
    """Text rendering of the three boards from `player_id`'s point of view."""
    views = board_view(state, player_id)
    return pretty_grids((views[b] for b in BOARDS), BOARDS)


def public_state(state: MatchState, player_id: Optional[str] = None) -> MatchState:
    """Snapshot with `moves` cut down to what `player_id` may see."""
    return replace(state, moves=visible_moves(state, player_id))
