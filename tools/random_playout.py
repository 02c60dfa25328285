import argparse
import random
import sys
from typing import Tuple

sys.path.append('.')
import game  # type: ignore


def check_invariants(match: game.QuantumMatch) -> None:
    s = match.snapshot()
    cells = [m.cell() for m in s.moves]
    assert len(cells) == len(set(cells)), "two recorded moves on one cell"
    wins = [game.board_winner(s.moves, b) for b in game.BOARDS]
    assert s.x_score == wins.count('X'), "x score out of sync with moves"
    assert s.o_score == wins.count('O'), "o score out of sync with moves"
    assert s.x_score + s.o_score <= 3


def play_one(rng: random.Random) -> Tuple[str, int, int]:
    match = game.QuantumMatch()
    match.join('x')
    match.join('o')
    collisions = 0
    while match.status == game.IN_PROGRESS:
        player = match.whose_turn()
        piece = match.piece_for(player)
        before = match.snapshot()
        board, row, col = rng.choice(game.legal_moves(before, piece))
        outcome = match.apply_move(player, board, row, col)
        after = match.snapshot()
        assert after.attempt_count == before.attempt_count + 1
        if isinstance(outcome, game.Collided):
            collisions += 1
            assert after.moves == before.moves
            assert after.is_revealed(board, row, col)
        else:
            assert len(after.moves) == len(before.moves) + 1
        # Replaying the same cell on the same turn parity must be rejected.
        if match.status == game.IN_PROGRESS:
            try:
                match.apply_move(player, board, row, col)
            except game.OutOfTurn:
                pass
            else:
                raise AssertionError("same player moved twice in a row")
            assert match.snapshot() == after
        check_invariants(match)
    s = match.snapshot()
    label = 'tie' if s.winner is None else ('X' if s.winner == 'x' else 'O')
    return label, len(s.moves), collisions


def main():
    parser = argparse.ArgumentParser(description='Play random matches and check engine invariants')
    parser.add_argument('--games', type=int, default=200)
    parser.add_argument('--seed', type=int, default=0)
    args = parser.parse_args()

    rng = random.Random(args.seed)
    tally = {'X': 0, 'O': 0, 'tie': 0}
    total_collisions = 0
    total_moves = 0
    for _ in range(args.games):
        label, moves, collisions = play_one(rng)
        tally[label] += 1
        total_moves += moves
        total_collisions += collisions
    print(f"Played {args.games} games: X={tally['X']} O={tally['O']} tie={tally['tie']}")
    if args.games:
        print(f"avg moves={total_moves / args.games:.1f} avg collisions={total_collisions / args.games:.1f}")


if __name__ == '__main__':
    main()
