import unittest

from game import (
    Move,
    QuantumMatch,
    board_view,
    legal_moves,
    pretty,
    public_state,
    visible_moves,
)


def played_match():
    match = QuantumMatch()
    match.join('p1')
    match.join('p2')
    match.apply_move('p1', 'A', 0, 0)
    match.apply_move('p2', 'B', 1, 1)
    match.apply_move('p1', 'C', 2, 2)
    match.apply_move('p2', 'C', 2, 2)  # collision: X's C(2,2) becomes public
    return match


class TestBoardView(unittest.TestCase):
    def test_given_player_when_building_view_then_own_pieces_and_revealed_cells_only(self):
        s = played_match().snapshot()
        x_view = board_view(s, 'p1')
        self.assertEqual(x_view['A'][0][0], 'X')
        self.assertEqual(x_view['C'][2][2], 'X')
        self.assertIsNone(x_view['B'][1][1])  # O's hidden placement

        o_view = board_view(s, 'p2')
        self.assertEqual(o_view['B'][1][1], 'O')
        self.assertEqual(o_view['C'][2][2], 'X')  # revealed by the collision
        self.assertIsNone(o_view['A'][0][0])

    def test_given_observer_when_building_view_then_only_revealed_cells(self):
        s = played_match().snapshot()
        view = board_view(s)
        filled = [(b, r, c) for b in 'ABC' for r in range(3) for c in range(3) if view[b][r][c]]
        self.assertEqual(filled, [('C', 2, 2)])
        self.assertEqual(board_view(s, 'someone-else'), view)

    def test_given_player_when_public_state_then_moves_filtered_and_rest_kept(self):
        s = played_match().snapshot()
        ps = public_state(s, 'p2')
        self.assertEqual(ps.moves, (Move('B', 1, 1, 'O'), Move('C', 2, 2, 'X')))
        self.assertEqual(ps.attempt_count, s.attempt_count)
        self.assertEqual(ps.revealed, s.revealed)
        self.assertEqual(len(visible_moves(s, 'p1')), 2)

    def test_given_state_when_pretty_then_viewer_pieces_rendered(self):
        s = played_match().snapshot()
        txt = pretty(s, 'p1')
        self.assertIn('X', txt)
        self.assertNotIn('O', txt.split("\n", 1)[1])


class TestLegalMoves(unittest.TestCase):
    def test_given_fresh_match_when_listing_then_all_27_cells(self):
        match = QuantumMatch()
        match.join('p1')
        match.join('p2')
        self.assertEqual(len(legal_moves(match.snapshot(), 'X')), 27)

    def test_given_own_and_opponent_cells_when_listing_then_only_own_excluded(self):
        s = played_match().snapshot()
        x_moves = legal_moves(s, 'X')
        self.assertNotIn(('A', 0, 0), x_moves)
        self.assertIn(('B', 1, 1), x_moves)  # would be a collision
        self.assertEqual(len(x_moves), 25)

    def test_given_won_board_when_listing_then_board_skipped(self):
        match = QuantumMatch()
        match.join('p1')
        match.join('p2')
        for player, board, row, col in [
            ('p1', 'A', 0, 0), ('p2', 'B', 0, 0), ('p1', 'A', 0, 1),
            ('p2', 'B', 0, 1), ('p1', 'A', 0, 2),
        ]:
            match.apply_move(player, board, row, col)
        o_moves = legal_moves(match.snapshot(), 'O')
        self.assertFalse([m for m in o_moves if m[0] == 'A'])
        self.assertEqual(len(o_moves), 16)


if __name__ == '__main__':
    unittest.main(verbosity=2)
