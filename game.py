from __future__ import annotations

# Facade module that re-exports the quantum tic-tac-toe core.
# Used by the Flask app, the tests and the tools.
# Single-responsibility modules live under qttt_core/*.

from qttt_core.board import (  # noqa: F401
    BOARDS,
    PIECES,
    SIZE,
    WIN_LINES,
    Move,
    board_grid,
    board_is_full,
    board_winner,
    other_piece,
    pretty_grids,
    win_line,
)
from qttt_core.state import (  # noqa: F401
    IN_PROGRESS,
    OVER,
    WAITING_TO_START,
    MatchState,
)
from qttt_core.moves import (  # noqa: F401
    Collided,
    MoveOutcome,
    Placed,
    check_coords,
    legal_moves,
)
from qttt_core.errors import (  # noqa: F401
    AlreadySeated,
    BoardAlreadyWon,
    CellAlreadyOwnedBySelf,
    Full,
    InvalidCommand,
    InvalidMove,
    InvalidPlayer,
    MatchError,
    MatchIdMismatch,
    NoMatchInProgress,
    NotInGame,
    NotInProgress,
    NotSeated,
    OutOfTurn,
)
from qttt_core.engine import QuantumMatch  # noqa: F401
from qttt_core.view import board_view, pretty, public_state, visible_moves  # noqa: F401
from qttt_core.area import GameArea, MatchResult  # noqa: F401


def main() -> None:
    # CLI driver delegated to qttt_core.cli
    from qttt_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
