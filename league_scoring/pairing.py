from typing import Sequence

from league_scoring.models import Matchup, Player

PLAYERS_PER_TEAM = 2


def order_by_handicap(team: Sequence[Player]) -> list[Player]:
    """Lowest handicap first. Equal handicaps keep the order the team was given in."""
    return sorted(team, key=lambda player: player.handicap)


def pair_by_handicap(team_a: Sequence[Player], team_b: Sequence[Player]) -> tuple[Matchup, Matchup]:
    """
    Lowest handicap plays the opponent's lowest handicap, next-lowest plays next-lowest.

    Pairs are fixed by handicap rank within each team, so the order players are
    supplied in and which team is labelled A never change who plays whom.
    """
    for label, team in (("A", team_a), ("B", team_b)):
        if len(team) != PLAYERS_PER_TEAM:
            raise ValueError(f"team {label} must have exactly {PLAYERS_PER_TEAM} players, got {len(team)}")
    ordered_a = order_by_handicap(team_a)
    ordered_b = order_by_handicap(team_b)
    low, high = (
        Matchup(position, player_a, player_b)
        for position, (player_a, player_b) in enumerate(zip(ordered_a, ordered_b), 1)
    )
    return low, high
