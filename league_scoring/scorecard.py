from __future__ import annotations

from league_scoring.completion import MATCH_STATUS_LABELS, ScoringState, can_finalize, progress_status
from league_scoring.models import DecidedHole, HoleResult, MatchResult, MatchupResult, Player, Winner

RESULT_LABELS = {
    Winner.A: "A",
    Winner.B: "B",
    Winner.TIE: "Halved",
}
UNDECIDED_LABEL = "—"


def _player_row(player: Player, points: float) -> dict:
    return {
        "player_id": player.player_id,
        "handicap": player.handicap,
        "points": points,
    }


def _hole_row(result: HoleResult) -> dict:
    hole = result.hole
    row = {
        "hole_id": hole.hole_id,
        "hole_number": hole.number,
        "par": hole.par,
        "handicap": hole.handicap_index,
        "gross_a": result.gross_a,
        "gross_b": result.gross_b,
        "strokes_a": result.strokes_a,
        "strokes_b": result.strokes_b,
        "net_a": None,
        "net_b": None,
        "net_diff": None,
        "decided": result.decided,
        "winner": None,
        "result": UNDECIDED_LABEL,
        "points_a": result.points_a,
        "points_b": result.points_b,
    }
    if isinstance(result, DecidedHole):
        row.update(
            {
                "net_a": result.net_a,
                "net_b": result.net_b,
                "net_diff": result.net_a - result.net_b,
                "winner": result.winner.value,
                "result": RESULT_LABELS[result.winner],
            }
        )
    return row


def _matchup_card(result: MatchupResult) -> dict:
    return {
        "position": result.matchup.position,
        "player_a": _player_row(result.player_a, result.points_a),
        "player_b": _player_row(result.player_b, result.points_b),
        "winner": result.winner.value,
        "rows": [_hole_row(hole) for hole in result.holes],
        "meta": {
            "holes_decided": len(result.decided_holes),
            "total_holes": len(result.holes),
            "gross_a": result.gross_a,
            "gross_b": result.gross_b,
            "net_a": result.net_a,
            "net_b": result.net_b,
            "total_points_a": result.points_a,
            "total_points_b": result.points_b,
        },
    }


def build_scorecard(result: MatchResult, state: ScoringState = ScoringState.DRAFT) -> dict:
    """Plain dict view of a match result, ready to render or return as JSON."""
    status = progress_status(result)
    return {
        "state": state.value,
        "status": status,
        "status_label": MATCH_STATUS_LABELS.get(status, status),
        "is_complete": result.is_complete,
        "can_finalize": can_finalize(result, state),
        "team_a_points": result.team_a_points,
        "team_b_points": result.team_b_points,
        "max_team_points": result.max_team_points,
        "team_a_gross": result.team_a_gross,
        "team_b_gross": result.team_b_gross,
        "team_a_net": result.team_a_net,
        "team_b_net": result.team_b_net,
        "team_point": result.team_point.value if result.team_point else None,
        "points_by_player": {
            player.player_id: result.points_for(player.player_id)
            for matchup in result.matchups
            for player in (matchup.player_a, matchup.player_b)
        },
        "winner": result.winner.value,
        "matchups": [_matchup_card(matchup) for matchup in result.matchups],
        "missing": [
            {"player_id": player_id, "hole_id": hole_id}
            for player_id, hole_id in result.missing_scores()
        ],
    }
