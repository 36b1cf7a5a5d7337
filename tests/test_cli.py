import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from tictac.cli import main
from tictac.storage import load_board, save_board

SRC = Path(__file__).resolve().parents[1] / "src"


@pytest.fixture(autouse=True)
def _info_logs(caplog):
    caplog.set_level(logging.INFO)


def _write(path: Path, board) -> Path:
    return save_board(path, board)


def test_new_then_show(tmp_path: Path, capsys):
    f = tmp_path / "b.txt"
    assert main(["new", "--board-file", str(f)]) == 0
    assert main(["show", "--board-file", str(f)]) == 0
    out = capsys.readouterr().out
    assert out == "board:\n0 0 0\n0 0 0\n0 0 0\n"


def test_move_completes_line_and_saves(tmp_path: Path, caplog):
    f = _write(tmp_path / "b.txt", [[1, 1, 0], [-1, -1, 0], [0, 0, 0]])
    assert main(["move", "--board-file", str(f)]) == 0
    assert load_board(f)[0] == [1, 1, 1]
    assert "1 move made at 0, 2" in caplog.text


def test_move_to_separate_output(tmp_path: Path):
    board = [[1, 0, 0], [-1, -1, 0], [1, 0, 0]]
    f = _write(tmp_path / "b.txt", board)
    out = tmp_path / "after.txt"
    assert main(["move", "--board-file", str(f), "--out", str(out)]) == 0
    assert load_board(f) == board
    assert load_board(out)[1] == [-1, -1, 1]


def test_move_on_decided_board_keeps_file(tmp_path: Path, caplog):
    board = [[1, 1, 1], [-1, -1, 0], [0, 0, 0]]
    f = _write(tmp_path / "b.txt", board)
    before = f.read_text()
    assert main(["move", "--board-file", str(f)]) == 0
    assert f.read_text() == before
    assert "has already won" in caplog.text


def test_move_with_trace_logs_boards(tmp_path: Path, caplog):
    caplog.set_level(logging.DEBUG)
    f = _write(tmp_path / "b.txt", [[1, -1, 1], [-1, -1, 1], [0, 1, 0]])
    assert main(["move", "--trace", "--board-file", str(f)]) == 0
    assert "board:" in caplog.text


def test_evaluate_reports_value(tmp_path: Path, caplog):
    f = _write(tmp_path / "b.txt", [[1, 1, 0], [-1, -1, 0], [0, 0, 0]])
    assert main(["evaluate", "--board-file", str(f)]) == 0
    assert "winner=0 moves_left=True to_move=1 value=1" in caplog.text


def test_missing_board_file_exit_code(tmp_path: Path, caplog):
    assert main(["move", "--board-file", str(tmp_path / "missing.txt")]) == 2
    assert "does not exist" in caplog.text


def test_unreachable_board_rejected(tmp_path: Path, caplog):
    f = _write(tmp_path / "b.txt", [[1, 1, 0], [0, 0, 0], [0, 0, 0]])
    assert main(["move", "--board-file", str(f)]) == 2
    assert "not a valid reachable state" in caplog.text


def test_unwritable_output_exit_code(tmp_path: Path):
    f = _write(tmp_path / "b.txt", [[1, 1, 0], [-1, -1, 0], [0, 0, 0]])
    assert main(["move", "--board-file", str(f), "--out", str(tmp_path / "no" / "dir.txt")]) == 2


def test_board_file_from_environment(tmp_path: Path, monkeypatch, capsys):
    f = _write(tmp_path / "env.txt", [[0, 0, 0], [0, 1, 0], [0, 0, 0]])
    monkeypatch.setenv("TTT_BOARD_FILE", str(f))
    assert main(["show"]) == 0
    assert "0 1 0" in capsys.readouterr().out


def test_cli_module_subprocess(tmp_path: Path):
    f = _write(tmp_path / "b.txt", [[1, 0, -1], [0, 1, -1], [0, 0, 0]])
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(p for p in [str(SRC), env.get("PYTHONPATH", "")] if p)
    r = subprocess.run(
        [sys.executable, "-m", "tictac.cli", "move", "--board-file", str(f)],
        cwd=tmp_path, capture_output=True, text=True, env=env,
    )
    assert r.returncode == 0
    assert "1 move made at 2, 2" in r.stdout + r.stderr
    assert load_board(f)[2] == [0, 0, 1]


def test_unreadable_board_file_exit_code(tmp_path: Path, monkeypatch, caplog):
    import tictac.storage as S

    f = _write(tmp_path / "b.txt", [[0, 0, 0], [0, 0, 0], [0, 0, 0]])

    def broken_loadtxt(*args, **kwargs):
        raise OSError(5, "Input/output error")

    monkeypatch.setattr(S.np, "loadtxt", broken_loadtxt)
    assert main(["show", "--board-file", str(f)]) == 2
    assert "Cannot read board file" in caplog.text


def test_move_override_leaving_unreachable_board_is_not_saved(tmp_path: Path, caplog):
    board = [[1, 0, 0], [0, -1, 0], [0, 0, 0]]
    f = _write(tmp_path / "b.txt", board)
    before = f.read_text()
    assert main(["move", "--mover", "-1", "--board-file", str(f)]) == 2
    assert f.read_text() == before
    assert "not saved" in caplog.text
