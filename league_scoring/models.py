"""Value types passed into and returned from the match scoring engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Winner(str, Enum):
    A = "A"
    B = "B"
    TIE = "T"


@dataclass(frozen=True)
class Hole:
    hole_id: str
    number: int
    par: int
    handicap_index: int


@dataclass(frozen=True)
class HoleScore:
    hole_id: str
    strokes: int


@dataclass(frozen=True)
class Player:
    player_id: str
    handicap: float
    hole_scores: tuple[HoleScore, ...] = ()

    def strokes_by_hole(self) -> dict[str, int]:
        """Gross strokes keyed by hole id. A later entry for the same hole replaces an earlier one."""
        return {entry.hole_id: entry.strokes for entry in self.hole_scores}


@dataclass(frozen=True)
class Matchup:
    position: int
    player_a: Player
    player_b: Player


@dataclass(frozen=True)
class DecidedHole:
    hole: Hole
    winner: Winner
    gross_a: int
    gross_b: int
    strokes_a: int
    strokes_b: int

    decided = True

    @property
    def net_a(self) -> int:
        return self.gross_a - self.strokes_a

    @property
    def net_b(self) -> int:
        return self.gross_b - self.strokes_b

    @property
    def points_a(self) -> float:
        if self.winner is Winner.A:
            return 1.0
        if self.winner is Winner.TIE:
            return 0.5
        return 0.0

    @property
    def points_b(self) -> float:
        return 1.0 - self.points_a


@dataclass(frozen=True)
class UndecidedHole:
    hole: Hole
    gross_a: int | None
    gross_b: int | None
    strokes_a: int
    strokes_b: int

    decided = False
    winner = None
    points_a = 0.0
    points_b = 0.0

    @property
    def missing(self) -> tuple[str, ...]:
        sides = []
        if self.gross_a is None:
            sides.append(Winner.A.value)
        if self.gross_b is None:
            sides.append(Winner.B.value)
        return tuple(sides)


HoleResult = Union[DecidedHole, UndecidedHole]


@dataclass(frozen=True)
class MatchupResult:
    matchup: Matchup
    holes: tuple[HoleResult, ...]
    points_a: float
    points_b: float

    @property
    def player_a(self) -> Player:
        return self.matchup.player_a

    @property
    def player_b(self) -> Player:
        return self.matchup.player_b

    @property
    def decided_holes(self) -> tuple[DecidedHole, ...]:
        return tuple(result for result in self.holes if isinstance(result, DecidedHole))

    @property
    def undecided_holes(self) -> tuple[UndecidedHole, ...]:
        return tuple(result for result in self.holes if isinstance(result, UndecidedHole))

    @property
    def is_complete(self) -> bool:
        return bool(self.holes) and not self.undecided_holes

    @property
    def winner(self) -> Winner:
        if self.points_a > self.points_b:
            return Winner.A
        if self.points_a < self.points_b:
            return Winner.B
        return Winner.TIE

    @property
    def gross_a(self) -> int:
        return sum(result.gross_a for result in self.decided_holes)

    @property
    def gross_b(self) -> int:
        return sum(result.gross_b for result in self.decided_holes)

    @property
    def net_a(self) -> int:
        return sum(result.net_a for result in self.decided_holes)

    @property
    def net_b(self) -> int:
        return sum(result.net_b for result in self.decided_holes)

    def missing_scores(self) -> list[tuple[str, str]]:
        missing: list[tuple[str, str]] = []
        for result in self.undecided_holes:
            if result.gross_a is None:
                missing.append((self.player_a.player_id, result.hole.hole_id))
            if result.gross_b is None:
                missing.append((self.player_b.player_id, result.hole.hole_id))
        return missing


@dataclass(frozen=True)
class MatchResult:
    matchups: tuple[MatchupResult, MatchupResult]
    team_a_points: float
    team_b_points: float
    team_a_gross: int = 0
    team_b_gross: int = 0
    team_a_net: float = 0.0
    team_b_net: float = 0.0
    team_point: Winner | None = None
    team_point_enabled: bool = False

    @property
    def is_complete(self) -> bool:
        """True once every player has a score on every hole of the round."""
        return all(matchup.is_complete for matchup in self.matchups)

    @property
    def hole_count(self) -> int:
        return len(self.matchups[0].holes) if self.matchups else 0

    @property
    def max_team_points(self) -> float:
        """Most points one team can take: every hole of both matchups, plus the team point when it is played."""
        hole_points = self.hole_count * len(self.matchups)
        return float(hole_points + 1 if self.team_point_enabled else hole_points)

    @property
    def winner(self) -> Winner:
        if self.team_a_points > self.team_b_points:
            return Winner.A
        if self.team_a_points < self.team_b_points:
            return Winner.B
        return Winner.TIE

    def missing_scores(self) -> list[tuple[str, str]]:
        missing: list[tuple[str, str]] = []
        for matchup in self.matchups:
            missing.extend(matchup.missing_scores())
        return missing

    def points_for(self, player_id: str) -> float:
        for matchup in self.matchups:
            if matchup.player_a.player_id == player_id:
                return matchup.points_a
            if matchup.player_b.player_id == player_id:
                return matchup.points_b
        raise KeyError(player_id)
