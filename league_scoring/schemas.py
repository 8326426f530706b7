"""Request payloads validated before anything reaches the scoring engine."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from league_scoring.completion import ScoringState
from league_scoring.handicap import MAX_HANDICAP, VALID_PARS, validate_hole_layout
from league_scoring.models import Hole, HoleScore, Player
from league_scoring.scoring import ScoringOptions, StrokeMode


class HolePayload(BaseModel):
    hole_id: str
    number: int = Field(ge=1, le=18)
    par: int
    handicap_index: int = Field(ge=1, le=18)

    @field_validator("par")
    @classmethod
    def check_par(cls, value: int) -> int:
        if value not in VALID_PARS:
            raise ValueError("par must be 3, 4 or 5")
        return value

    def to_hole(self) -> Hole:
        return Hole(self.hole_id, self.number, self.par, self.handicap_index)


class HoleScorePayload(BaseModel):
    hole_id: str
    strokes: int = Field(ge=1)


class PlayerPayload(BaseModel):
    player_id: str
    handicap: float = Field(ge=0, le=MAX_HANDICAP, allow_inf_nan=False)
    hole_scores: list[HoleScorePayload] = Field(default_factory=list)

    def to_player(self) -> Player:
        return Player(
            player_id=self.player_id,
            handicap=self.handicap,
            hole_scores=tuple(HoleScore(entry.hole_id, entry.strokes) for entry in self.hole_scores),
        )


class OptionsPayload(BaseModel):
    stroke_mode: StrokeMode = StrokeMode.FULL
    par_three_strokes: bool = True
    team_point: bool = False

    def to_options(self) -> ScoringOptions:
        return ScoringOptions(
            stroke_mode=self.stroke_mode,
            par_three_strokes=self.par_three_strokes,
            team_point=self.team_point,
        )


class MatchPayload(BaseModel):
    team_a: list[PlayerPayload] = Field(min_length=2, max_length=2)
    team_b: list[PlayerPayload] = Field(min_length=2, max_length=2)
    holes: list[HolePayload] = Field(min_length=1)
    options: OptionsPayload | None = None

    @model_validator(mode="after")
    def check_match(self) -> "MatchPayload":
        player_ids = [player.player_id for player in self.team_a + self.team_b]
        if len(set(player_ids)) != len(player_ids):
            raise ValueError("each player may appear only once in a match")
        validate_hole_layout(self.course())
        return self

    def course(self) -> list[Hole]:
        return [hole.to_hole() for hole in self.holes]

    def teams(self) -> tuple[tuple[Player, ...], tuple[Player, ...]]:
        return (
            tuple(player.to_player() for player in self.team_a),
            tuple(player.to_player() for player in self.team_b),
        )

    def scoring_options(self, default: ScoringOptions | None = None) -> ScoringOptions:
        if self.options is None:
            return default or ScoringOptions()
        return self.options.to_options()


class FinalizePayload(MatchPayload):
    state: ScoringState = ScoringState.DRAFT
