"""
Experiment tracking helpers (optional MLflow backend).

MLflow is only imported when tracking is requested, so it stays an
optional extra (`pip install .[tracking]`).
"""
from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Optional

from .search import MoveResult


@contextmanager
def maybe_mlflow_run(enabled: bool, run_name: str, log_dir: Optional[Path] = None) -> Iterator[None]:
    if not enabled:
        yield None
        return
    try:
        import mlflow  # type: ignore
    except ImportError:
        # Soft-fail: continue without tracking
        yield None
        return
    if log_dir is not None:
        mlflow.set_tracking_uri((log_dir / "mlruns").resolve().as_uri())
    with mlflow.start_run(run_name=run_name):
        yield None


def log_params(params: Dict[str, object]) -> None:
    try:
        import mlflow  # type: ignore

        mlflow.log_params(params)
    except Exception:
        pass


def log_metrics(metrics: Dict[str, float]) -> None:
    try:
        import mlflow  # type: ignore

        mlflow.log_metrics(metrics)
    except Exception:
        pass


def log_move_result(result: MoveResult, elapsed_s: float) -> None:
    params: Dict[str, object] = {"status": result.status, "mover": result.mover}
    if result.move is not None:
        params["row"] = result.move.row
        params["col"] = result.move.col
    log_params(params)
    log_metrics({
        "score": float(result.score),
        "immediate_win": float(result.immediate),
        "elapsed_s": elapsed_s,
    })
