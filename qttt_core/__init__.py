"""
Quantum tic-tac-toe core Python package.

Pure game logic for the three-board variant, kept free of HTTP concerns so
it can be driven by the Flask app, the CLI and the tools alike.
Modules:
- board.py: pieces, Move, the per-board evaluator and text grids
- state.py: MatchState snapshot and status constants
- moves.py: Placed / Collided outcomes, coordinate checks, legal_moves
- engine.py: QuantumMatch (join, leave, apply_move)
- view.py: per-player board reconstruction
- area.py: GameArea command dispatch and match history
- cli.py: terminal driver
"""
