from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

from league_scoring.errors import InvalidHoleLayoutError
from league_scoring.models import Hole

logger = logging.getLogger(__name__)

HOLES_PER_ROUND = 18
VALID_PARS = (3, 4, 5)
MAX_HANDICAP = 54


def playing_handicap(handicap: float) -> int:
    """Resolve a course handicap to a whole number of strokes, rounding halves up."""
    if handicap <= 0:
        return 0
    return int(Decimal(str(handicap)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def strokes_for_hole(handicap: float, handicap_index: int) -> int:
    """Strokes received on a hole ranked `handicap_index` (1 = hardest) by a player of `handicap`."""
    every_hole, hardest_holes = divmod(playing_handicap(handicap), HOLES_PER_ROUND)
    return every_hole + (1 if handicap_index <= hardest_holes else 0)


def allocate_strokes(
    handicap: float,
    holes: Iterable[Hole],
    *,
    par_three_strokes: bool = True,
) -> dict[str, int]:
    allocation: dict[str, int] = {}
    for hole in holes:
        if hole.par == 3 and not par_three_strokes:
            allocation[hole.hole_id] = 0
            continue
        allocation[hole.hole_id] = strokes_for_hole(handicap, hole.handicap_index)
    return allocation


def net_score(gross: int, strokes: int) -> int:
    return gross - strokes


def validate_hole_layout(holes: Sequence[Hole]) -> None:
    """
    Reject a round setup the engine cannot score fairly: repeated holes, repeated
    or out of range handicap indices, and pars other than 3, 4 or 5.

    A nine-hole round keeps each hole's 18-hole index, so indices 1-18 stay valid
    and are not expected to be re-ranked 1-9.
    """
    if len(holes) > HOLES_PER_ROUND:
        raise InvalidHoleLayoutError(
            f"A round has at most {HOLES_PER_ROUND} holes, got {len(holes)}."
        )
    seen_ids: set[str] = set()
    seen_indices: dict[int, str] = {}
    for hole in holes:
        if hole.hole_id in seen_ids:
            raise InvalidHoleLayoutError(f"Hole {hole.hole_id} appears more than once.")
        seen_ids.add(hole.hole_id)
        if not 1 <= hole.handicap_index <= HOLES_PER_ROUND:
            raise InvalidHoleLayoutError(
                f"Hole {hole.number} has handicap index {hole.handicap_index}; expected 1-{HOLES_PER_ROUND}."
            )
        if hole.handicap_index in seen_indices:
            raise InvalidHoleLayoutError(
                f"Handicap index {hole.handicap_index} is used by holes "
                f"{seen_indices[hole.handicap_index]} and {hole.hole_id}."
            )
        seen_indices[hole.handicap_index] = hole.hole_id
        if hole.par not in VALID_PARS:
            raise InvalidHoleLayoutError(f"Hole {hole.number} has par {hole.par}; expected 3, 4 or 5.")
    logger.debug("Validated layout of %s holes", len(holes))
