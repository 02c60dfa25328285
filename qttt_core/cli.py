from __future__ import annotations

import argparse
import random
from typing import Optional, Tuple

from .board import BOARDS, BoardLabel
from .engine import QuantumMatch
from .errors import MatchError
from .moves import Collided, legal_moves
from .view import pretty


def parse_move(text: str) -> Tuple[BoardLabel, int, int]:
    """Parses 'A 0 2', 'a,0,2' or 'A02' into (board, row, col)."""
    cleaned = text.replace(',', ' ').strip()
    parts = [t for t in cleaned.split(' ') if t != '']
    if len(parts) == 1 and len(parts[0]) == 3:
        parts = list(parts[0])
    if len(parts) != 3:
        raise ValueError(f'could not parse move: {text!r}')
    board = parts[0].upper()
    if board not in BOARDS:
        raise ValueError(f'unknown board: {parts[0]!r}')
    return board, int(parts[1]), int(parts[2])


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description='Quantum tic-tac-toe on three boards')
    parser.add_argument('--x', default='X-player', help='Player id for seat X')
    parser.add_argument('--o', default='O-player', help='Player id for seat O')
    parser.add_argument('--vs-random', action='store_true', help='Seat O picks random legal moves')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the random player')
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    match = QuantumMatch()
    match.join(args.x)
    match.join(args.o)
    print(f"Match {match.match_id}: {args.x} plays X, {args.o} plays O.")

    while match.whose_turn() is not None:
        player = match.whose_turn()
        piece = match.piece_for(player)
        state = match.snapshot()
        if args.vs_random and piece == 'O':
            board, row, col = rng.choice(legal_moves(state, piece))
            print(f"{player} tries {board} {row} {col}")
        else:
            print()
            print(pretty(state, player))
            print(f"Score X {state.x_score} - O {state.o_score}. {player} ({piece}) to move.")
            text = input('Enter board row col (e.g. A 1 2): ')
            try:
                board, row, col = parse_move(text)
            except ValueError as e:
                print(e)
                continue
        try:
            outcome = match.apply_move(player, board, row, col)
        except MatchError as e:
            print(f"Rejected: {e}")
            continue
        if isinstance(outcome, Collided):
            print(f"Collision on {board} {row} {col}! The cell is now public and the turn passes.")

    state = match.snapshot()
    print()
    print(pretty(state))
    print(f"Final score X {state.x_score} - O {state.o_score}.")
    if state.winner is None:
        print("It's a tie.")
    else:
        print(f"{state.winner} wins!")
