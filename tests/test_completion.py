import pytest

from league_scoring.completion import ScoringState, can_finalize, finalize, progress_status
from league_scoring.errors import IncompleteMatchError, MatchAlreadyFinalizedError
from league_scoring.scorecard import build_scorecard
from league_scoring.scoring import compute_match


def _match(course, make_player, a_high_strokes):
    team_a = [make_player("a-high", 10, course, a_high_strokes), make_player("a-low", 0, course, [4] * 18)]
    team_b = [make_player("b-low", 0, course, [4] * 18), make_player("b-high", 4, course, [4] * 18)]
    return compute_match(team_a, team_b, course)


def test_progress_status(course, make_player):
    assert progress_status(_match(course, make_player, [4] * 18)) == "completed"
    assert progress_status(_match(course, make_player, [4] * 9 + [None] * 9)) == "in_progress"

    empty = compute_match(
        [make_player("a1", 0, course, []), make_player("a2", 1, course, [])],
        [make_player("b1", 0, course, []), make_player("b2", 1, course, [])],
        course,
    )
    assert progress_status(empty) == "not_started"
    assert empty.team_a_points == empty.team_b_points == 0.0


def test_finalize_complete_match(course, make_player):
    result = _match(course, make_player, [4] * 18)
    assert can_finalize(result)
    assert finalize(result) is ScoringState.FINAL


def test_finalize_refuses_missing_scores(course, make_player):
    result = _match(course, make_player, [4] * 17 + [None])
    assert not can_finalize(result)
    with pytest.raises(IncompleteMatchError) as excinfo:
        finalize(result)
    assert excinfo.value.missing == [("a-high", "h18")]
    assert "1 hole score" in str(excinfo.value)


def test_finalize_only_once(course, make_player):
    result = _match(course, make_player, [4] * 18)
    assert not can_finalize(result, ScoringState.FINAL)
    with pytest.raises(MatchAlreadyFinalizedError):
        finalize(result, ScoringState.FINAL)


def test_scorecard_marks_every_hole(course, make_player):
    result = _match(course, make_player, [4] * 17 + [None])
    card = build_scorecard(result)

    assert card["state"] == "draft"
    assert card["status"] == "in_progress"
    assert card["status_label"] == "In progress"
    assert card["is_complete"] is False
    assert card["can_finalize"] is False
    assert card["missing"] == [{"player_id": "a-high", "hole_id": "h18"}]

    low, high = card["matchups"]
    assert low["rows"][0]["result"] == "Halved"
    assert low["rows"][0]["winner"] == "T"
    assert len(high["rows"]) == 18
    last = high["rows"][-1]
    assert last["decided"] is False
    assert last["result"] == "—"
    assert last["net_a"] is None
    assert last["gross_a"] is None
    assert last["gross_b"] == 4
    assert high["meta"]["holes_decided"] == 17

    stroke_hole = next(row for row in high["rows"] if row["hole_id"] == "h18")
    assert stroke_hole["strokes_a"] == 1  # index 5


def test_scorecard_for_final_match(course, make_player):
    result = _match(course, make_player, [4] * 18)
    card = build_scorecard(result, finalize(result))

    assert card["state"] == "final"
    assert card["status"] == "completed"
    assert card["can_finalize"] is False
    assert (card["team_a_points"], card["team_b_points"]) == (21.0, 15.0)
    assert card["winner"] == "A"
    assert card["max_team_points"] == 36.0
    assert card["team_point"] is None
    won = next(row for row in card["matchups"][1]["rows"] if row["hole_id"] == "h1")
    assert (won["net_a"], won["net_b"], won["net_diff"]) == (3, 4, -1)
    assert won["result"] == "A"


def test_scorecard_team_totals_and_player_points(course, make_player):
    card = build_scorecard(_match(course, make_player, [4] * 18))

    assert (card["team_a_gross"], card["team_b_gross"]) == (144, 144)
    assert (card["team_a_net"], card["team_b_net"]) == (141.0, 144.0)
    assert card["points_by_player"] == {"a-low": 9.0, "b-low": 9.0, "a-high": 12.0, "b-high": 6.0}
