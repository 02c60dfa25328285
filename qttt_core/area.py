from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from .board import BoardLabel
from .engine import QuantumMatch
from .errors import InvalidCommand, MatchIdMismatch, NoMatchInProgress
from .moves import MoveOutcome
from .state import OVER, MatchState

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 100


@dataclass(frozen=True)
class MatchResult:
    match_id: str
    scores: Dict[str, int]  # display name -> boards won


class GameArea:
    """
    Hosts the current match for one play area and routes player commands to it.

    Commands are serialized with a per-area lock. A join on an area with no
    match, or whose match is over, starts a fresh match. Finished matches
    are recorded once in `history`.
    """

    def __init__(self, area_id: str, history_limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        self.area_id = area_id
        self.history_limit = history_limit
        self.match: Optional[QuantumMatch] = None
        self.history: List[MatchResult] = []
        self.names: Dict[str, str] = {}
        self._lock = threading.Lock()

    def join(self, player_id: str, name: Optional[str] = None) -> str:
        with self._lock:
            if name:
                self.names[player_id] = name
            match = self.match
            if match is None or match.status == OVER:
                match = QuantumMatch()
                self.match = match
                logger.info("area %s: new match %s", self.area_id, match.match_id)
            match.join(player_id)
            self._state_updated(match)
            return match.match_id

    def leave(self, player_id: str, match_id: str) -> None:
        with self._lock:
            match = self._current(match_id)
            match.leave(player_id)
            self._state_updated(match)

    def apply_move(self, player_id: str, match_id: str, board: BoardLabel, row: int, col: int) -> MoveOutcome:
        with self._lock:
            match = self._current(match_id)
            outcome = match.apply_move(player_id, board, row, col)
            logger.debug("area %s: %s %s", self.area_id, player_id, outcome)
            self._state_updated(match)
            return outcome

    def handle_command(self, command: Mapping[str, Any], player_id: str) -> Any:
        """Dispatches a {'type': 'JoinGame' | 'GameMove' | 'LeaveGame', ...} command."""
        kind = command.get('type')
        if kind == 'JoinGame':
            return {'matchId': self.join(player_id, command.get('name'))}
        if kind == 'GameMove':
            move = command.get('move') or {}
            return self.apply_move(
                player_id,
                command.get('matchId'),
                move.get('board'),
                move.get('row'),
                move.get('col'),
            )
        if kind == 'LeaveGame':
            self.leave(player_id, command.get('matchId'))
            return None
        raise InvalidCommand()

    def state(self) -> Optional[MatchState]:
        return self.match.snapshot() if self.match is not None else None

    def display_name(self, player_id: str) -> str:
        return self.names.get(player_id, player_id)

    def _current(self, match_id: str) -> QuantumMatch:
        if self.match is None:
            raise NoMatchInProgress()
        if self.match.match_id != match_id:
            raise MatchIdMismatch()
        return self.match

    def _state_updated(self, match: QuantumMatch) -> None:
        if match.status != OVER:
            return
        if any(r.match_id == match.match_id for r in self.history):
            return
        if match.seat_x is None or match.seat_o is None:
            return
        result = MatchResult(
            match_id=match.match_id,
            scores={
                self.display_name(match.seat_x): match.x_score,
                self.display_name(match.seat_o): match.o_score,
            },
        )
        self.history.append(result)
        if self.history_limit > 0 and len(self.history) > self.history_limit:
            del self.history[: len(self.history) - self.history_limit]
        logger.info(
            "area %s: match %s over, winner=%s scores=%s",
            self.area_id, match.match_id, match.winner, result.scores,
        )
