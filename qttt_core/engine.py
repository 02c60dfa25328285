from __future__ import annotations

import uuid
from typing import Dict, List, Optional

from .board import BOARDS, SIZE, BoardLabel, Move, Piece, board_is_full, board_winner
from .errors import (
    AlreadySeated,
    BoardAlreadyWon,
    CellAlreadyOwnedBySelf,
    Full,
    InvalidPlayer,
    NotInGame,
    NotInProgress,
    NotSeated,
    OutOfTurn,
)
from .moves import Collided, MoveOutcome, Placed, check_coords
from .state import IN_PROGRESS, OVER, WAITING_TO_START, MatchState


class QuantumMatch:
    """
    One match of quantum tic-tac-toe between seats X and O over boards A, B and C.

    Each player sees only their own placements. Claiming a cell the opponent
    already holds is a collision: the cell becomes public, no move is
    recorded, and the turn still passes. A board is won by three in a row;
    the first side to win two boards wins the match. When every board is
    won or full, the higher score wins and equal scores are a tie.

    Calls run to completion and either return with a consistent state or
    raise a MatchError without changing anything. Callers serialize access.
    """

    def __init__(self, match_id: Optional[str] = None) -> None:
        self.match_id = match_id or uuid.uuid4().hex
        self.seat_x: Optional[str] = None
        self.seat_o: Optional[str] = None
        self._reset_play()

    def _reset_play(self) -> None:
        self.status = WAITING_TO_START
        self.moves: List[Move] = []
        self.revealed: Dict[BoardLabel, List[List[bool]]] = {
            b: [[False] * SIZE for _ in range(SIZE)] for b in BOARDS
        }
        self.x_score = 0
        self.o_score = 0
        self.attempt_count = 0
        self.winner: Optional[str] = None

    # ---------- seats ----------

    def join(self, player_id: str) -> None:
        if player_id is None:
            raise InvalidPlayer()
        if player_id in (self.seat_x, self.seat_o):
            raise AlreadySeated()
        if self.seat_x is None:
            self.seat_x = player_id
        elif self.seat_o is None:
            self.seat_o = player_id
        else:
            raise Full()
        if self.seat_x is not None and self.seat_o is not None:
            self.status = IN_PROGRESS
            self.attempt_count = 0

    def leave(self, player_id: str) -> None:
        piece = self.piece_for(player_id)
        if piece is None:
            raise NotSeated()
        if self.status == OVER:
            return
        other = self.seat_o if piece == 'X' else self.seat_x
        if other is None:
            # Nobody else ever sat down: start over so the seat can be taken again.
            self.seat_x = None
            self.seat_o = None
            self._reset_play()
            return
        self.status = OVER
        self.winner = other

    # ---------- play ----------

    def apply_move(self, player_id: str, board: BoardLabel, row: int, col: int) -> MoveOutcome:
        """Attempts a placement for `player_id` and returns what happened."""
        if self.status != IN_PROGRESS:
            raise NotInProgress()
        check_coords(board, row, col)
        piece = self.piece_for(player_id)
        if piece is None:
            raise NotInGame()
        if self.attempt_count % 2 != (0 if piece == 'X' else 1):
            raise OutOfTurn()
        if board_winner(self.moves, board) is not None:
            raise BoardAlreadyWon()
        holder = self._holder(board, row, col)
        if holder == piece:
            raise CellAlreadyOwnedBySelf()

        outcome: MoveOutcome
        if holder is not None:
            self.revealed[board][row][col] = True
            outcome = Collided(board, row, col)
        else:
            move = Move(board, row, col, piece)
            self.moves.append(move)
            outcome = Placed(move)
        self.attempt_count += 1
        self._recompute_scores()
        self._check_for_game_ending()
        return outcome

    def _holder(self, board: BoardLabel, row: int, col: int) -> Optional[Piece]:
        for m in self.moves:
            if m.board == board and m.row == row and m.col == col:
                return m.piece
        return None

    def _recompute_scores(self) -> None:
        winners = [board_winner(self.moves, b) for b in BOARDS]
        self.x_score = winners.count('X')
        self.o_score = winners.count('O')

    def _check_for_game_ending(self) -> None:
        if self.x_score >= 2 or self.o_score >= 2:
            self._finish()
            return
        for b in BOARDS:
            if board_winner(self.moves, b) is None and not board_is_full(self.moves, b):
                return
        self._finish()

    def _finish(self) -> None:
        self.status = OVER
        if self.x_score > self.o_score:
            self.winner = self.seat_x
        elif self.o_score > self.x_score:
            self.winner = self.seat_o
        else:
            self.winner = None

    # ---------- reads ----------

    def piece_for(self, player_id: str) -> Optional[Piece]:
        if player_id is None:
            return None
        if player_id == self.seat_x:
            return 'X'
        if player_id == self.seat_o:
            return 'O'
        return None

    def is_player(self, player_id: str) -> bool:
        return self.piece_for(player_id) is not None

    def whose_turn(self) -> Optional[str]:
        """Seat id of the player to move, or None unless the match is in progress."""
        if self.status != IN_PROGRESS:
            return None
        return self.seat_x if self.attempt_count % 2 == 0 else self.seat_o

    def snapshot(self) -> MatchState:
        revealed = {b: tuple(tuple(row) for row in self.revealed[b]) for b in BOARDS}
        return MatchState(
            match_id=self.match_id,
            status=self.status,
            seat_x=self.seat_x,
            seat_o=self.seat_o,
            moves=tuple(self.moves),
            revealed=revealed,
            x_score=self.x_score,
            o_score=self.o_score,
            attempt_count=self.attempt_count,
            winner=self.winner,
        )
