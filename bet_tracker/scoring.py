import logging
from collections import Counter
from typing import Dict, List, Tuple

from .bonuses import last_place_bonus, playoff_bonus, tournament_bonus
from .models import (
    CONFERENCES,
    TEAMS_PER_CONFERENCE,
    ConferenceStandings,
    DraftBoard,
    IncompleteSnapshotError,
    ParticipantScore,
    PlayoffResult,
    ScoredTeam,
    TeamLookup,
    TeamRecord,
    TournamentResult,
)
from .ranking import find_team, league_worst
from .teams import normalize

logger = logging.getLogger(__name__)

MAX_POINTS = 16
MISSING_TEAM_RANK = 15


def base_points(conference_rank: int) -> int:
    return MAX_POINTS - conference_rank


def expected_points(draft_position: int) -> int:
    return MAX_POINTS - draft_position


def validate_snapshot(standings: ConferenceStandings) -> None:
    """Reject snapshots whose ranks would not mean anything."""
    for conference in CONFERENCES:
        count = len(standings.group(conference))
        if count != TEAMS_PER_CONFERENCE:
            raise IncompleteSnapshotError(
                f"{conference} has {count} teams, expected {TEAMS_PER_CONFERENCE}"
            )

    seen = Counter(normalize(t.team) for t in standings.all_teams())
    duplicates = sorted(name for name, count in seen.items() if count > 1)
    if duplicates:
        raise IncompleteSnapshotError(
            f"Teams listed more than once: {', '.join(duplicates)}"
        )


def _placeholder(team: str) -> TeamLookup:
    logger.warning("Drafted team %r not found in standings, scoring as rank %d", team, MISSING_TEAM_RANK)
    return TeamLookup(record=TeamRecord(team=team), rank=MISSING_TEAM_RANK, conference="Unknown")


def score_team(
    team: str,
    draft_position: int,
    standings: ConferenceStandings,
    worst_team: str,
    tournament: TournamentResult,
    playoff: PlayoffResult,
) -> ScoredTeam:
    lookup = find_team(standings, team)
    if lookup is None:
        lookup = _placeholder(team)

    is_worst = bool(worst_team) and normalize(team) == worst_team
    base = base_points(lookup.rank)
    last_place = last_place_bonus(is_worst)
    cup = tournament_bonus(team, tournament)
    postseason = playoff_bonus(team, playoff)
    total = base + last_place + cup + postseason
    expected = expected_points(draft_position)

    return ScoredTeam(
        name=team,
        wins=lookup.record.wins,
        losses=lookup.record.losses,
        conference=lookup.conference,
        conference_rank=lookup.rank,
        draft_position=draft_position,
        base_points=base,
        tournament_bonus=cup,
        playoff_bonus=postseason,
        last_place_bonus=last_place,
        total_points=total,
        expected_points=expected,
        points_vs_expected=total - expected,
        is_league_worst=is_worst,
    )


def score_standings(
    standings: ConferenceStandings,
    draft: DraftBoard,
    tournament: TournamentResult,
    playoff: PlayoffResult,
    validate: bool = True,
) -> Dict[str, ParticipantScore]:
    """
    Score every participant's drafted teams against one standings snapshot.

    The snapshot's group order is taken as the conference rank. Drafted teams
    missing from the snapshot are scored as a 0-0 team at rank 15 rather than
    failing the whole league. With ``validate`` set, a snapshot without
    exactly 15 distinct teams per conference raises
    ``IncompleteSnapshotError`` before anything is scored.
    """
    if validate:
        validate_snapshot(standings)

    worst_team = league_worst(standings) or ""
    scores: Dict[str, ParticipantScore] = {}

    for participant, teams in draft.items():
        result = ParticipantScore()
        for idx, team in enumerate(teams):
            scored = score_team(team, idx + 1, standings, worst_team, tournament, playoff)
            result.total_points += scored.total_points
            result.breakdown.add(scored)
            result.teams.append(scored)

        result.teams.sort(key=lambda t: t.total_points, reverse=True)
        scores[participant] = result

    return scores


def leaderboard(scores: Dict[str, ParticipantScore]) -> List[Tuple[str, int]]:
    standings = [(name, score.total_points) for name, score in scores.items()]
    standings.sort(key=lambda item: item[1], reverse=True)
    return standings
