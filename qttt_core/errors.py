from __future__ import annotations


class MatchError(ValueError):
    """Base class for rejected match commands. The match state is unchanged when raised."""
    message = "Invalid parameters"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)

    @property
    def code(self) -> str:
        return type(self).__name__


class AlreadySeated(MatchError):
    message = "Player is already in this game"


class Full(MatchError):
    message = "Game is full"


class NotSeated(MatchError):
    message = "Player is not in this game"


class NotInGame(MatchError):
    message = "Player is not in this game"


class NotInProgress(MatchError):
    message = "Game is not in progress"


class BoardAlreadyWon(MatchError):
    message = "Board has already been won"


class CellAlreadyOwnedBySelf(MatchError):
    message = "Board position is not empty"


class OutOfTurn(MatchError):
    message = "Not your turn"


class InvalidMove(MatchError):
    message = "Board must be A, B or C and row/col 0..2"


class InvalidPlayer(MatchError):
    message = "Player id required"


# Raised by the game area, not the engine.

class NoMatchInProgress(MatchError):
    message = "No game in progress"


class MatchIdMismatch(MatchError):
    message = "Game ID mismatch"


class InvalidCommand(MatchError):
    message = "Invalid command"
