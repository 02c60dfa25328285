import io
import unittest
from contextlib import redirect_stdout
from unittest import mock

from qttt_core import cli


class TestCli(unittest.TestCase):
    def test_given_move_text_when_parsing_then_board_row_col(self):
        self.assertEqual(cli.parse_move('A 0 2'), ('A', 0, 2))
        self.assertEqual(cli.parse_move('b,1,1'), ('B', 1, 1))
        self.assertEqual(cli.parse_move('c22'), ('C', 2, 2))
        with self.assertRaises(ValueError):
            cli.parse_move('D 0 0')
        with self.assertRaises(ValueError):
            cli.parse_move('A 0')

    def test_given_scripted_inputs_when_playing_then_x_wins_two_boards(self):
        inputs = [
            'A 0 0', 'B 0 0', 'A 0 1', 'B 0 1', 'A 0 2',
            'C 0 0', 'B 1 0', 'C 0 1', 'B 1 1', 'C 1 0', 'B 1 2',
        ]
        out = io.StringIO()
        with mock.patch('builtins.input', side_effect=inputs), redirect_stdout(out):
            cli.main(['--x', 'alice', '--o', 'bob'])
        text = out.getvalue()
        self.assertIn('Final score X 2 - O 0.', text)
        self.assertIn('alice wins!', text)

    def test_given_bad_and_rejected_inputs_when_playing_then_reprompts(self):
        # X, O collides, X retries its own cell, then X takes A and B.
        inputs = [
            'nonsense', 'A 0 0', 'A 0 0', 'A 0 0', 'A 0 1', 'B 0 0', 'A 0 2',
            'B 0 1', 'B 1 0', 'C 0 0', 'B 1 1', 'C 0 1', 'B 1 2',
        ]
        out = io.StringIO()
        with mock.patch('builtins.input', side_effect=inputs), redirect_stdout(out):
            cli.main([])
        text = out.getvalue()
        self.assertIn('could not parse move', text)
        self.assertIn('Collision on A 0 0', text)
        self.assertIn('Rejected: Board position is not empty', text)
        self.assertIn('X-player wins!', text)

    def test_given_random_opponent_when_playing_then_match_finishes(self):
        out = io.StringIO()
        moves = ['%s %d %d' % (b, r, c) for b in 'ABC' for r in range(3) for c in range(3)]
        with mock.patch('builtins.input', side_effect=moves * 3), redirect_stdout(out):
            cli.main(['--vs-random', '--seed', '3'])
        self.assertIn('Final score', out.getvalue())


if __name__ == '__main__':
    unittest.main(verbosity=2)
