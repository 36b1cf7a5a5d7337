#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import math
import statistics as stats
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from tictac.board import empty_board
from tictac.search import make_move
from tictac.tracking import log_metrics, log_params, maybe_mlflow_run


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    z = 1.96
    half = z * (s / math.sqrt(len(values)))
    return m, half


@dataclass
class Config:
    repeats: int = 5
    tracking: str = "none"  # or "mlflow"
    log_dir: Path = Path("runs")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Time make_move from the empty board")
    ap.add_argument("--repeats", type=int, default=Config.repeats)
    ap.add_argument("--tracking", choices=["none", "mlflow"], default=Config.tracking)
    ap.add_argument("--log-dir", type=Path, default=Config.log_dir)
    ns = ap.parse_args(argv)
    cfg = Config(repeats=ns.repeats, tracking=ns.tracking, log_dir=ns.log_dir)
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    with maybe_mlflow_run(cfg.tracking == "mlflow", run_name="benchmarks", log_dir=cfg.log_dir):
        log_params({"repeats": cfg.repeats})
        times: List[float] = []
        for _ in range(cfg.repeats):
            board = empty_board()
            t0 = time.perf_counter()
            make_move(board)
            times.append(time.perf_counter() - t0)
        m, h = ci95(times)
        log_metrics({"make_move_empty_mean_s": m, "make_move_empty_ci95_half_s": h})
        logging.info("make_move(empty): mean=%.4fs +/- %.4fs (95%% CI, N=%d)", m, h, cfg.repeats)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
