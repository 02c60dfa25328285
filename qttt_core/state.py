from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .board import BoardLabel, Move, Piece

WAITING_TO_START = 'WAITING_TO_START'
IN_PROGRESS = 'IN_PROGRESS'
OVER = 'OVER'

RevealGrid = Tuple[Tuple[bool, bool, bool], ...]


@dataclass(frozen=True)
class MatchState:
    """Read-only snapshot of a match, taken after every engine call."""
    match_id: str
    status: str
    seat_x: Optional[str]
    seat_o: Optional[str]
    moves: Tuple[Move, ...]  # in the order they were recorded
    revealed: Dict[BoardLabel, RevealGrid]
    x_score: int
    o_score: int
    attempt_count: int
    winner: Optional[str] = None

    def is_revealed(self, board: BoardLabel, row: int, col: int) -> bool:
        return self.revealed[board][row][col]

    def seat_of(self, piece: Piece) -> Optional[str]:
        return self.seat_x if piece == 'X' else self.seat_o

    def piece_of(self, player_id: str) -> Optional[Piece]:
        if player_id is not None and player_id == self.seat_x:
            return 'X'
        if player_id is not None and player_id == self.seat_o:
            return 'O'
        return None

    def piece_to_move(self) -> Optional[Piece]:
        """Piece whose turn it is, or None unless the match is in progress."""
        if self.status != IN_PROGRESS:
            return None
        return 'X' if self.attempt_count % 2 == 0 else 'O'

