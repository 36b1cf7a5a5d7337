"""Centralized path helpers for board files.

Environment-first, with fallbacks that still work when installed
as a package or executed from arbitrary CWDs.
"""

from __future__ import annotations

import os
from pathlib import Path

BOARD_FILENAME = "board.txt"


def _find_git_root(start: Path) -> Path | None:
    cur = start
    for _ in range(5):
        if (cur / ".git").exists():
            return cur
        if cur.parent == cur:
            break
        cur = cur.parent
    return None


def repo_root() -> Path:
    """Best-effort repository root.

    Order: env var TTT_REPO_ROOT -> nearest parent containing .git -> CWD.
    """
    env = os.getenv("TTT_REPO_ROOT")
    if env:
        return Path(env)
    git_root = _find_git_root(Path.cwd().resolve())
    if git_root is not None:
        return git_root
    return Path.cwd()


def default_board_file() -> Path:
    p = os.getenv("TTT_BOARD_FILE")
    return Path(p) if p else repo_root() / BOARD_FILENAME
