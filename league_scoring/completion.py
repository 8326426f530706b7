"""
Draft -> Final workflow around a computed match result.

Scores may be saved and re-scored as often as needed while a match is a draft.
Finalizing locks the points in and is only allowed once every player has a
score on every hole of the round.
"""

from __future__ import annotations

import logging
from enum import Enum

from league_scoring.errors import IncompleteMatchError, MatchAlreadyFinalizedError
from league_scoring.models import MatchResult

logger = logging.getLogger(__name__)


class ScoringState(str, Enum):
    DRAFT = "draft"
    FINAL = "final"


MATCH_STATUS_LABELS = {
    "not_started": "Not started",
    "in_progress": "In progress",
    "completed": "Completed",
}


def progress_status(result: MatchResult) -> str:
    if result.is_complete:
        return "completed"
    if any(matchup.decided_holes for matchup in result.matchups):
        return "in_progress"
    return "not_started"


def can_finalize(result: MatchResult, state: ScoringState = ScoringState.DRAFT) -> bool:
    return state is ScoringState.DRAFT and result.is_complete


def finalize(result: MatchResult, state: ScoringState = ScoringState.DRAFT) -> ScoringState:
    if state is ScoringState.FINAL:
        raise MatchAlreadyFinalizedError("Match is already finalized.")
    missing = result.missing_scores()
    if missing or not result.is_complete:
        logger.info("Refusing to finalize match with %s missing hole score(s)", len(missing))
        raise IncompleteMatchError(missing)
    return ScoringState.FINAL
