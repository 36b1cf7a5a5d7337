"""tictac package.

Exhaustive minimax move selection for 3x3 tic-tac-toe, board file
persistence, and a simple CLI.

Convenience imports are exposed for common workflows.
"""

from .board import EMPTY, PLAYER_A, PLAYER_B, Move, empty_board, print_board
from .evaluator import evaluate, moves_left
from .search import MoveResult, make_move, minimax, next_mover
from .storage import load_board, save_board

__all__ = [
    "EMPTY",
    "PLAYER_A",
    "PLAYER_B",
    "Move",
    "MoveResult",
    "empty_board",
    "evaluate",
    "load_board",
    "make_move",
    "minimax",
    "moves_left",
    "next_mover",
    "print_board",
    "save_board",
]
