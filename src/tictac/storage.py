"""
Board persistence: three lines of three whitespace-separated integers.

Reading and writing go through numpy's text I/O. Failures surface as
BoardFileError subclasses so callers can tell a missing board from one
that cannot be written or parsed.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import numpy as np

from .board import CELL_VALUES, Board

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class BoardFileError(Exception):
    """Base class for board load/save failures."""


class BoardNotFoundError(BoardFileError):
    pass


class BoardSaveError(BoardFileError):
    pass


class BoardReadError(BoardFileError):
    pass


class BoardFormatError(BoardFileError, ValueError):
    pass


def load_board(path: PathLike) -> Board:
    path = Path(path)
    if not path.is_file():
        raise BoardNotFoundError(f"Board file does not exist: {path}")
    try:
        grid = np.loadtxt(path, dtype=int, ndmin=2)
    except ValueError as e:
        raise BoardFormatError(f"Could not parse board file {path}: {e}") from e
    except OSError as e:
        raise BoardReadError(f"Cannot read board file {path}: {e}") from e
    if grid.shape != (3, 3):
        raise BoardFormatError(f"Board file {path} must hold a 3x3 grid, got shape {grid.shape}")
    if not np.isin(grid, CELL_VALUES).all():
        raise BoardFormatError(f"Board file {path} holds values outside {sorted(CELL_VALUES)}")
    logger.debug("Loaded board from %s", path)
    return grid.tolist()


def save_board(path: PathLike, board: Board) -> Path:
    path = Path(path)
    grid = np.asarray(board, dtype=int)
    try:
        with path.open("w") as f:
            np.savetxt(f, grid, fmt="%d")
    except OSError as e:
        raise BoardSaveError(f"Cannot open board file for writing: {path}") from e
    logger.debug("Saved board to %s", path)
    return path
