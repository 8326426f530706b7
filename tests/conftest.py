import pytest

from league_scoring.models import Hole, HoleScore, Player

PEBBLE_HOLES = [
    (1, 4, 6),
    (2, 5, 10),
    (3, 4, 12),
    (4, 4, 16),
    (5, 3, 14),
    (6, 5, 2),
    (7, 3, 18),
    (8, 4, 4),
    (9, 4, 8),
    (10, 4, 3),
    (11, 4, 9),
    (12, 3, 17),
    (13, 4, 7),
    (14, 5, 1),
    (15, 4, 13),
    (16, 4, 11),
    (17, 3, 15),
    (18, 5, 5),
]


@pytest.fixture
def course() -> list[Hole]:
    return [Hole(f"h{number}", number, par, handicap) for number, par, handicap in PEBBLE_HOLES]


@pytest.fixture
def make_player():
    """Build a player whose strokes line up with the given holes, skipping None entries."""

    def _make(player_id: str, handicap: float, holes: list[Hole], strokes: list[int | None]) -> Player:
        scores = tuple(
            HoleScore(hole.hole_id, value) for hole, value in zip(holes, strokes) if value is not None
        )
        return Player(player_id, handicap, scores)

    return _make


@pytest.fixture
def match_payload(course) -> dict:
    """Complete 18-hole match as the HTTP layer receives it."""
    holes = [
        {"hole_id": hole.hole_id, "number": hole.number, "par": hole.par, "handicap_index": hole.handicap_index}
        for hole in course
    ]

    def _player(player_id: str, handicap: float, strokes: int) -> dict:
        return {
            "player_id": player_id,
            "handicap": handicap,
            "hole_scores": [{"hole_id": hole.hole_id, "strokes": strokes} for hole in course],
        }

    return {
        "team_a": [_player("a-high", 10, 4), _player("a-low", 0, 4)],
        "team_b": [_player("b-low", 0, 4), _player("b-high", 4, 4)],
        "holes": holes,
    }
