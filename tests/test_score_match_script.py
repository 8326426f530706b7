import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "score_match.py"


@pytest.fixture
def score_match():
    spec = importlib.util.spec_from_file_location("score_match", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def match_file(tmp_path, match_payload):
    def _write(payload: dict) -> Path:
        path = tmp_path / "match.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


def test_prints_scorecard(score_match, match_file, match_payload, capsys):
    assert score_match.main([str(match_file(match_payload))]) == 0
    card = json.loads(capsys.readouterr().out)
    assert card["team_a_points"] == 21.0
    assert card["state"] == "draft"


def test_finalize_and_team_point_flags(score_match, match_file, match_payload, capsys):
    assert score_match.main([str(match_file(match_payload)), "--finalize", "--team-point"]) == 0
    card = json.loads(capsys.readouterr().out)
    assert card["state"] == "final"
    assert card["team_point"] == "A"


def test_difference_mode_flag(score_match, match_file, match_payload, capsys):
    assert score_match.main([str(match_file(match_payload)), "--stroke-mode", "difference"]) == 0
    card = json.loads(capsys.readouterr().out)
    # a-high receives 6 strokes from the 10 vs 4 difference, on indices 1-6.
    assert card["matchups"][1]["player_a"]["points"] == 12.0


def test_finalize_incomplete_fails(score_match, match_file, match_payload, capsys):
    match_payload["team_b"][0]["hole_scores"].pop()
    assert score_match.main([str(match_file(match_payload)), "--finalize"]) == 1
    err = capsys.readouterr().err
    assert "Cannot finalize" in err
    assert "player b-low hole h18" in err


def test_invalid_file(score_match, tmp_path, capsys):
    path = tmp_path / "broken.json"
    path.write_text("{", encoding="utf-8")
    assert score_match.main([str(path)]) == 1
    assert "Could not read" in capsys.readouterr().err
