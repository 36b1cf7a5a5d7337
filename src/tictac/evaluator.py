"""
Terminal-state evaluation: winner detection and remaining moves.

Scores are absolute: +1 means player A has a line, -1 player B, 0 neither.
A 0 score is a tie only when moves_left() is also False.
"""
from .board import EMPTY, Board


def evaluate(board: Board) -> int:
    for i in range(3):
        # row i
        if board[i][0] == board[i][1] == board[i][2] and board[i][1] != EMPTY:
            return board[i][1]
        # column i
        if board[0][i] == board[1][i] == board[2][i] and board[1][i] != EMPTY:
            return board[1][i]
    if board[0][0] == board[1][1] == board[2][2] and board[1][1] != EMPTY:
        return board[1][1]
    if board[0][2] == board[1][1] == board[2][0] and board[1][1] != EMPTY:
        return board[1][1]
    return 0


def moves_left(board: Board) -> bool:
    for row in board:
        for v in row:
            if v == EMPTY:
                return True
    return False


def is_terminal(board: Board) -> bool:
    return evaluate(board) != 0 or not moves_left(board)
