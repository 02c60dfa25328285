from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

Piece = str  # 'X' or 'O'
BoardLabel = str  # 'A', 'B' or 'C'
Cell = Optional[Piece]
Grid = Tuple[Tuple[Cell, ...], ...]

PIECES: Tuple[Piece, ...] = ('X', 'O')
BOARDS: Tuple[BoardLabel, ...] = ('A', 'B', 'C')
SIZE = 3

# Rows, then columns, then the two diagonals.
WIN_LINES: Tuple[Tuple[Tuple[int, int], ...], ...] = (
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


@dataclass(frozen=True)
class Move:
    """A recorded placement of one piece on one cell of one board."""
    board: BoardLabel
    row: int
    col: int
    piece: Piece

    def cell(self) -> Tuple[BoardLabel, int, int]:
        return (self.board, self.row, self.col)


def other_piece(piece: Piece) -> Piece:
    return 'O' if piece == 'X' else 'X'


def board_grid(moves: Iterable[Move], board: BoardLabel) -> Grid:
    """Builds the 3x3 grid of one board from the recorded moves (empty cells are None)."""
    rows: List[List[Cell]] = [[None] * SIZE for _ in range(SIZE)]
    for m in moves:
        if m.board == board:
            rows[m.row][m.col] = m.piece
    return tuple(tuple(r) for r in rows)


def win_line(grid: Grid) -> Optional[Tuple[Tuple[int, int], ...]]:
    """Returns the first completed line of the grid, or None."""
    for line in WIN_LINES:
        (r0, c0), (r1, c1), (r2, c2) = line
        first = grid[r0][c0]
        if first is not None and first == grid[r1][c1] == grid[r2][c2]:
            return line
    return None


def board_winner(moves: Iterable[Move], board: BoardLabel) -> Optional[Piece]:
    """Board Evaluator: the piece holding three in a row on `board`, or None."""
    grid = board_grid(moves, board)
    line = win_line(grid)
    if line is None:
        return None
    r, c = line[0]
    return grid[r][c]


def board_is_full(moves: Iterable[Move], board: BoardLabel) -> bool:
    return sum(1 for m in moves if m.board == board) >= SIZE * SIZE


def pretty_grids(grids: Iterable[Grid], labels: Iterable[str] = BOARDS) -> str:
    """Renders grids side by side with a label row, '.' for empty cells."""
    grids = list(grids)
    sep = "   "
    header = sep.join(f"{label:<5}" for label in labels)
    lines: List[str] = [header.rstrip()]
    for r in range(SIZE):
        row_parts = [" ".join(g[r][c] or "." for c in range(SIZE)) for g in grids]
        lines.append(sep.join(row_parts))
    return "\n".join(lines)
