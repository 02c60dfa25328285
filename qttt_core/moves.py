from __future__ import annotations

from dataclasses import dataclass
from typing import List, Set, Tuple, Union

from .board import BOARDS, SIZE, BoardLabel, Move, Piece, board_winner
from .errors import InvalidMove
from .state import MatchState


@dataclass(frozen=True)
class Placed:
    """The attempt recorded a new move."""
    move: Move
    kind: str = 'placed'


@dataclass(frozen=True)
class Collided:
    """The opponent already holds the cell: it is revealed and the turn is spent."""
    board: BoardLabel
    row: int
    col: int
    kind: str = 'collided'


MoveOutcome = Union[Placed, Collided]


def check_coords(board: BoardLabel, row: int, col: int) -> None:
    """Rejects a board label or coordinates outside the 3x3 grids."""
    if board not in BOARDS:
        raise InvalidMove()
    # bool is an int subclass; True/False are not coordinates
    for v in (row, col):
        if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v < SIZE:
            raise InvalidMove()


def legal_moves(state: MatchState, piece: Piece) -> List[Tuple[BoardLabel, int, int]]:
    """Cells `piece` may attempt: boards not yet won, cells it has not already claimed.

    Cells held by the opponent are included; attempting one is a collision.
    """
    owned: Set[Tuple[BoardLabel, int, int]] = {m.cell() for m in state.moves if m.piece == piece}
    out: List[Tuple[BoardLabel, int, int]] = []
    for b in BOARDS:
        if board_winner(state.moves, b) is not None:
            continue
        for r in range(SIZE):
            for c in range(SIZE):
                if (b, r, c) not in owned:
                    out.append((b, r, c))
    return out
