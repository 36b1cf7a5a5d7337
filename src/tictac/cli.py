from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path
from typing import Optional

from .board import Board, empty_board, is_valid_state, print_board
from .evaluator import evaluate, moves_left
from .paths import default_board_file
from .search import make_move, minimax, next_mover
from .storage import BoardFileError, load_board, save_board
from .tracking import log_move_result, maybe_mlflow_run


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Tic-tac-toe minimax CLI")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )

    def add_board_file(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--board-file",
            type=Path,
            default=None,
            help="Board file: 3 lines of 3 ints (0=empty, 1=A, -1=B). Default: $TTT_BOARD_FILE or ./board.txt",
        )

    p_new = sub.add_parser("new", help="Write an empty board")
    add_board_file(p_new)

    p_show = sub.add_parser("show", help="Print a board")
    add_board_file(p_show)

    p_eval = sub.add_parser("evaluate", help="Report winner, remaining moves and minimax value")
    add_board_file(p_eval)

    p_move = sub.add_parser("move", help="Make the best move for the side to move and save the board")
    add_board_file(p_move)
    p_move.add_argument(
        "--out", type=Path, default=None, help="Write the resulting board here (default: --board-file)"
    )
    p_move.add_argument(
        "--mover",
        type=int,
        choices=[1, -1],
        default=None,
        help="Side to move; inferred when omitted (boards left unreachable are not saved)",
    )
    p_move.add_argument(
        "--trace", action="store_true", help="Log every board visited by the search (implies --verbose)"
    )
    p_move.add_argument(
        "--tracking",
        choices=["none", "mlflow"],
        default="none",
        help="Experiment tracking backend",
    )
    p_move.add_argument(
        "--log-dir",
        type=Path,
        default=Path("runs"),
        help="Directory for tracking logs/artifacts (for mlflow local backend)",
    )

    return p


def _print_info() -> None:
    import importlib.util
    import platform
    import sys

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    for pkg in ["numpy", "mlflow"]:
        spec = importlib.util.find_spec(pkg)
        if spec is None:
            print(f"{pkg}=<not installed>")
        else:
            mod = __import__(pkg)
            ver = getattr(mod, "__version__", "?")
            print(f"{pkg}={ver}")


def _load_valid(path: Path) -> Optional[Board]:
    try:
        board = load_board(path)
    except BoardFileError as e:
        logging.error("%s", e)
        return None
    if not is_valid_state(board):
        logging.error("Board is not a valid reachable state.")
        return None
    return board


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    verbose = getattr(ns, "verbose", False) or getattr(ns, "trace", False)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("tictac"))
        except Exception:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    if ns.cmd is None:
        parser.print_help()
        return 0

    board_file = ns.board_file if ns.board_file is not None else default_board_file()

    if ns.cmd == "new":
        try:
            save_board(board_file, empty_board())
        except BoardFileError as e:
            logging.error("%s", e)
            return 2
        logging.info("Wrote empty board to: %s", board_file)
        return 0

    board = _load_valid(board_file)
    if board is None:
        return 2

    if ns.cmd == "show":
        print_board(board)
        return 0

    if ns.cmd == "evaluate":
        winner = evaluate(board)
        left = moves_left(board)
        to_move = next_mover(board)
        if winner == 0 and left:
            value = minimax(board, to_move == 1)
            logging.info("winner=%d moves_left=%s to_move=%d value=%d", winner, left, to_move, value)
        else:
            logging.info("winner=%d moves_left=%s to_move=%d", winner, left, to_move)
        return 0

    if ns.cmd == "move":
        with maybe_mlflow_run(ns.tracking == "mlflow", run_name="make_move", log_dir=ns.log_dir):
            t0 = time.perf_counter()
            result = make_move(board, mover=ns.mover, trace=ns.trace)
            elapsed = time.perf_counter() - t0
            if ns.tracking == "mlflow":
                log_move_result(result, elapsed)
        if result.move is None:
            return 0
        if not is_valid_state(board):
            logging.error("Resulting board is not a valid reachable state; not saved.")
            return 2
        out = ns.out if ns.out is not None else board_file
        try:
            save_board(out, board)
        except BoardFileError as e:
            logging.error("%s", e)
            return 2
        logging.debug("Search took %.3fs; board saved to %s", elapsed, out)
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
