"""
Tests for the --solve command line mode.
"""

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from main import run_solve
from watersort.settings import DEFAULT_SETTINGS


@pytest.fixture
def settings():
    return dict(DEFAULT_SETTINGS, max_states=50_000)


def write_puzzle(tmp_path, data):
    path = tmp_path / "puzzle.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_run_solve_prints_moves(tmp_path, settings, capsys):
    path = write_puzzle(tmp_path, {"vials": [["red", "blue"], ["blue", "red"], []]})

    assert run_solve(settings, path, loose=False, max_states=None) == 0
    out = capsys.readouterr().out
    assert "Solved in 3 moves" in out
    assert "1. Pour 1 blue from vial 1 to vial 3" in out


def test_run_solve_loose_flag(tmp_path, settings, capsys):
    path = write_puzzle(tmp_path, {"vials": [["red", "blue"], ["blue", "red"], []]})

    assert run_solve(settings, path, loose=True, max_states=None) == 0
    assert "Solved in 2 moves" in capsys.readouterr().out


def test_run_solve_request_shape_strict_mode(tmp_path, settings, capsys):
    path = write_puzzle(tmp_path, {
        "gameState": {"vials": [["red", "red"], ["red", "red"]]},
        "strictMode": False,
    })

    assert run_solve(settings, path, loose=False, max_states=None) == 0
    assert "Solved in 0 moves" in capsys.readouterr().out


def test_run_solve_unsolvable(tmp_path, settings, capsys):
    path = write_puzzle(tmp_path, {"vials": [["red", "blue"], ["blue", "red"]]})

    assert run_solve(settings, path, loose=False, max_states=None) == 1
    assert "unsolvable" in capsys.readouterr().out


def test_run_solve_missing_file(tmp_path, settings):
    assert run_solve(settings, str(tmp_path / "nope.json"), False, None) == 2


@pytest.mark.parametrize("data", [
    {"vials": [["red"] * 6, [], []]},
    {"vials": [[["red"]], []]},
    {"gameState": {"vials": [["red", "red"], ["red", "red"]]}, "strictMode": "false"},
], ids=["over-capacity", "non-string-color", "non-bool-strict-mode"])
def test_run_solve_rejects_invalid_puzzle(tmp_path, settings, capsys, data):
    path = write_puzzle(tmp_path, data)

    assert run_solve(settings, path, loose=False, max_states=None) == 2
    # Rejected before anything is searched or printed
    assert capsys.readouterr().out == ""
