"""
Bonus points that sit on top of the rank-based base points.

Tournament points stack: a semifinalist gets 1, the runner-up a further 2 and
the champion a further 4. A team recorded as champion and runner-up collects
all three (7). These tiers are cumulative, not highest-tier-only.
"""

from .models import PlayoffResult, TournamentResult
from .teams import normalize

SEMIFINAL_POINTS = 1
RUNNER_UP_POINTS = 2
CHAMPION_POINTS = 4

SERIES_WIN_POINTS = 6
FINALS_CHAMPION_POINTS = 12

LAST_PLACE_POINTS = 3


def tournament_bonus(team: str, result: TournamentResult) -> int:
    n = normalize(team)
    bonus = 0

    if any(normalize(t) == n for t in result.semifinalists):
        bonus += SEMIFINAL_POINTS

    if result.runner_up and normalize(result.runner_up) == n:
        bonus += RUNNER_UP_POINTS

    if result.champion and normalize(result.champion) == n:
        bonus += CHAMPION_POINTS

    return bonus


def playoff_bonus(team: str, result: PlayoffResult) -> int:
    bonus = result.series_won(team) * SERIES_WIN_POINTS

    if result.finals_champion and normalize(result.finals_champion) == normalize(team):
        bonus += FINALS_CHAMPION_POINTS

    return bonus


def last_place_bonus(is_league_worst: bool) -> int:
    return LAST_PLACE_POINTS if is_league_worst else 0
