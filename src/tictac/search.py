"""
Exhaustive minimax search over the remaining game tree (no pruning, no memoization).

Scores are absolute: player A (+1) maximizes, player B (-1) minimizes.

Board discipline:
- The board is shared by every branch. Each placement is undone before the
  next sibling is tried, so the board is unchanged when minimax returns.
- make_move is the only place that leaves a placement on the board.

Tie-break policy for make_move:
- Candidate cells are tried in row-major order.
- A placement that wins on the spot is committed at once, before the
  remaining cells are scored.
- Otherwise only a strictly better score replaces the best so far, so among
  equal scores the earliest cell wins.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from .board import EMPTY, PLAYER_A, PLAYER_B, Board, Move, format_board
from .evaluator import evaluate, moves_left

logger = logging.getLogger(__name__)

STATUS_WON = "won"
STATUS_TIE = "tie"
STATUS_MOVED = "moved"


@dataclass
class MoveResult:
    status: str
    mover: Optional[int] = None
    move: Optional[Move] = None
    score: int = 0
    immediate: bool = False

    @property
    def message(self) -> str:
        if self.status == STATUS_WON:
            return f"{self.score} has already won!"
        if self.status == STATUS_TIE:
            return "It's a tie!"
        return f"{self.mover} move made at {self.move.row}, {self.move.col}"


def minimax(board: Board, maximizing: bool, trace: bool = False) -> int:
    """Game-theoretic value of `board` with the given side to move.

    Terminal checks run before any recursion, in order: full board (0),
    player A line (+1), player B line (-1). A full board is therefore
    scored 0 even when its last placement completed a line.
    """
    if trace:
        logger.debug("%s", format_board(board))
    if not moves_left(board):
        return 0
    w = evaluate(board)
    if w == 1:
        return 1
    if w == -1:
        return -1

    symbol = 1 if maximizing else -1
    best = -math.inf if maximizing else math.inf
    for r in range(3):
        for c in range(3):
            if board[r][c] != EMPTY:
                continue
            board[r][c] = symbol
            score = minimax(board, not maximizing, trace)
            board[r][c] = EMPTY
            if maximizing:
                if score > best:
                    best = score
            elif score < best:
                best = score
    return int(best)


def next_mover(board: Board) -> int:
    """Side to move, inferred from the cell sum (A starts, so 0 -> A)."""
    state = -sum(sum(row) for row in board)
    return PLAYER_A if state == 0 else state


def make_move(board: Board, mover: Optional[int] = None, trace: bool = False) -> MoveResult:
    """Place the best move for the side to move directly on `board`.

    Returns a MoveResult; the board is left untouched when the game is
    already won or tied. `mover` overrides the side inferred by next_mover.
    """
    if mover is not None and mover not in (PLAYER_A, PLAYER_B):
        raise ValueError(f"Unknown mover: {mover}")
    logger.debug("Processing...")
    winner = evaluate(board)
    if winner != 0:
        result = MoveResult(status=STATUS_WON, score=winner)
        logger.info(result.message)
        return result
    if not moves_left(board):
        result = MoveResult(status=STATUS_TIE)
        logger.info(result.message)
        return result

    if mover is None:
        mover = next_mover(board)
    maximizing = mover == PLAYER_A

    best_score = -math.inf if maximizing else math.inf
    best_move: Optional[Move] = None
    for r in range(3):
        for c in range(3):
            if board[r][c] != EMPTY:
                continue
            board[r][c] = mover
            if evaluate(board) == mover:
                result = MoveResult(
                    status=STATUS_MOVED, mover=mover, move=Move(r, c), score=mover, immediate=True
                )
                logger.info(result.message)
                return result
            score = minimax(board, not maximizing, trace)
            board[r][c] = EMPTY
            if (maximizing and score > best_score) or (not maximizing and score < best_score):
                best_score = score
                best_move = Move(r, c)

    board[best_move.row][best_move.col] = mover
    result = MoveResult(status=STATUS_MOVED, mover=mover, move=best_move, score=int(best_score))
    logger.info(result.message)
    return result
