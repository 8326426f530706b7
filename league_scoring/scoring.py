"""
Net match-play scoring for a two-player team match.

Each team's players are paired lowest handicap against lowest handicap. Every
hole of every matchup is worth one point: 1-0 to the lower net score, 0.5-0.5
when the net scores are equal. A hole without a score for both players is left
undecided and earns nothing until it is scored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from league_scoring.handicap import allocate_strokes, net_score, playing_handicap
from league_scoring.models import (
    DecidedHole,
    Hole,
    HoleResult,
    MatchResult,
    Matchup,
    MatchupResult,
    Player,
    UndecidedHole,
    Winner,
)
from league_scoring.pairing import pair_by_handicap

logger = logging.getLogger(__name__)


class StrokeMode(str, Enum):
    FULL = "full"
    DIFFERENCE = "difference"


@dataclass(frozen=True)
class ScoringOptions:
    stroke_mode: StrokeMode = StrokeMode.FULL
    par_three_strokes: bool = True
    team_point: bool = False


def decide_hole(net_a: int, net_b: int) -> Winner:
    if net_a < net_b:
        return Winner.A
    if net_a > net_b:
        return Winner.B
    return Winner.TIE


def score_hole(
    hole: Hole,
    gross_a: int | None,
    gross_b: int | None,
    strokes_a: int = 0,
    strokes_b: int = 0,
) -> HoleResult:
    if gross_a is None or gross_b is None:
        return UndecidedHole(hole, gross_a, gross_b, strokes_a, strokes_b)
    winner = decide_hole(net_score(gross_a, strokes_a), net_score(gross_b, strokes_b))
    return DecidedHole(hole, winner, gross_a, gross_b, strokes_a, strokes_b)


def accumulate_points(results: Iterable[HoleResult]) -> tuple[float, float]:
    points_a = 0.0
    points_b = 0.0
    for result in results:
        points_a += result.points_a
        points_b += result.points_b
    return points_a, points_b


def matchup_strokes(
    matchup: Matchup,
    holes: Sequence[Hole],
    options: ScoringOptions,
) -> tuple[dict[str, int], dict[str, int]]:
    """Strokes received on each hole by the two players of a matchup."""
    if options.stroke_mode is StrokeMode.FULL:
        return (
            allocate_strokes(matchup.player_a.handicap, holes, par_three_strokes=options.par_three_strokes),
            allocate_strokes(matchup.player_b.handicap, holes, par_three_strokes=options.par_three_strokes),
        )
    stroke_diff = playing_handicap(matchup.player_a.handicap) - playing_handicap(matchup.player_b.handicap)
    allocation = allocate_strokes(abs(stroke_diff), holes, par_three_strokes=options.par_three_strokes)
    scratch = {hole.hole_id: 0 for hole in holes}
    strokes_for_a = allocation if stroke_diff > 0 else scratch
    strokes_for_b = allocation if stroke_diff < 0 else scratch
    return strokes_for_a, strokes_for_b


def score_matchup(
    matchup: Matchup,
    holes: Sequence[Hole],
    options: ScoringOptions | None = None,
) -> MatchupResult:
    options = options or ScoringOptions()
    strokes_for_a, strokes_for_b = matchup_strokes(matchup, holes, options)
    scores_a = matchup.player_a.strokes_by_hole()
    scores_b = matchup.player_b.strokes_by_hole()
    results = tuple(
        score_hole(
            hole,
            scores_a.get(hole.hole_id),
            scores_b.get(hole.hole_id),
            strokes_for_a[hole.hole_id],
            strokes_for_b[hole.hole_id],
        )
        for hole in holes
    )
    points_a, points_b = accumulate_points(results)
    logger.debug(
        "Matchup %s (%s vs %s): %s-%s over %s decided holes",
        matchup.position,
        matchup.player_a.player_id,
        matchup.player_b.player_id,
        points_a,
        points_b,
        sum(1 for result in results if result.decided),
    )
    return MatchupResult(matchup, results, points_a, points_b)


def _average_handicap(players: Iterable[Player]) -> float:
    handicaps = [player.handicap for player in players]
    return sum(handicaps) / len(handicaps)


def team_totals(matchups: Sequence[MatchupResult]) -> tuple[int, int, float, float]:
    """
    Team gross and net totals over the decided holes, as (gross_a, gross_b, net_a, net_b).
    The team with the higher average handicap takes the difference between the
    averages off its gross total; the other team's net equals its gross.
    """
    gross_a = sum(matchup.gross_a for matchup in matchups)
    gross_b = sum(matchup.gross_b for matchup in matchups)
    average_a = _average_handicap(matchup.player_a for matchup in matchups)
    average_b = _average_handicap(matchup.player_b for matchup in matchups)
    handicap_diff = abs(average_a - average_b)
    net_a = gross_a - handicap_diff if average_a > average_b else float(gross_a)
    net_b = gross_b - handicap_diff if average_b > average_a else float(gross_b)
    return gross_a, gross_b, net_a, net_b


def team_point_winner(matchups: Sequence[MatchupResult]) -> Winner | None:
    """Lower team net total earns the team point. None until every hole of both matchups is scored."""
    if not all(matchup.is_complete for matchup in matchups):
        return None
    _, _, net_a, net_b = team_totals(matchups)
    return decide_hole(net_a, net_b)


def compute_match(
    team_a: Sequence[Player],
    team_b: Sequence[Player],
    holes: Sequence[Hole],
    options: ScoringOptions | None = None,
) -> MatchResult:
    options = options or ScoringOptions()
    matchups = tuple(score_matchup(matchup, holes, options) for matchup in pair_by_handicap(team_a, team_b))
    team_a_points = sum(matchup.points_a for matchup in matchups)
    team_b_points = sum(matchup.points_b for matchup in matchups)
    gross_a, gross_b, net_a, net_b = team_totals(matchups)

    team_point = team_point_winner(matchups) if options.team_point else None
    if team_point is Winner.A:
        team_a_points += 1
    elif team_point is Winner.B:
        team_b_points += 1

    return MatchResult(
        matchups=matchups,
        team_a_points=team_a_points,
        team_b_points=team_b_points,
        team_a_gross=gross_a,
        team_b_gross=gross_b,
        team_a_net=net_a,
        team_b_net=net_b,
        team_point=team_point,
        team_point_enabled=options.team_point,
    )
