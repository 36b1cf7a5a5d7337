"""
Board basics: cell values, the 3x3 grid, lines, rendering, validity.
Notes:
- A board is a list of 3 rows of 3 ints: 0=empty, 1=player A, -1=player B.
- Player A always starts, so a reachable board sums to 0 (A to move) or 1 (B to move).
- The search mutates boards in place; use copy_board when a private copy is needed.
"""
from typing import List, NamedTuple, Tuple

EMPTY = 0
PLAYER_A = 1
PLAYER_B = -1

CELL_VALUES = (EMPTY, PLAYER_A, PLAYER_B)

Board = List[List[int]]


class Move(NamedTuple):
    row: int
    col: int


# rows, columns, diagonals as (row, col) triples
WIN_LINES: List[Tuple[Tuple[int, int], ...]] = (
    [tuple((r, c) for c in range(3)) for r in range(3)]
    + [tuple((r, c) for r in range(3)) for c in range(3)]
    + [((0, 0), (1, 1), (2, 2)), ((0, 2), (1, 1), (2, 0))]
)


def empty_board() -> Board:
    return [[EMPTY] * 3 for _ in range(3)]


def copy_board(board: Board) -> Board:
    return [list(row) for row in board]


def cells(board: Board):
    """Yield (row, col, value) in row-major order."""
    for r in range(3):
        for c in range(3):
            yield r, c, board[r][c]


def piece_counts(board: Board) -> Tuple[int, int]:
    flat = [v for _, _, v in cells(board)]
    return flat.count(PLAYER_A), flat.count(PLAYER_B)


def format_board(board: Board) -> str:
    lines = ["board:"]
    for row in board:
        lines.append(" ".join(str(v) for v in row))
    return "\n".join(lines)


def print_board(board: Board) -> None:
    print(format_board(board))


def is_well_formed(board) -> bool:
    try:
        if len(board) != 3 or any(len(row) != 3 for row in board):
            return False
    except TypeError:
        return False
    return all(v in CELL_VALUES for _, _, v in cells(board))


def is_valid_state(board: Board) -> bool:
    """True if the board could arise from alternating play with A moving first.

    The search engine itself never calls this; it is the guard callers use
    before handing a board to it.
    """
    if not is_well_formed(board):
        return False
    a_count, b_count = piece_counts(board)
    if not (a_count == b_count or a_count == b_count + 1):
        return False

    def winning_lines(p: int) -> int:
        return sum(1 for line in WIN_LINES if all(board[r][c] == p for r, c in line))

    a_wins = winning_lines(PLAYER_A)
    b_wins = winning_lines(PLAYER_B)
    if a_wins and b_wins:
        return False
    if a_wins and a_count != b_count + 1:
        return False
    if b_wins and a_count != b_count:
        return False
    return True
