"""Conference ranking and lookups over a standings snapshot."""

from typing import List, Optional, Sequence

from .models import ConferenceStandings, TeamLookup, TeamRecord
from .teams import normalize


def rank(teams: Sequence[TeamRecord]) -> List[TeamRecord]:
    """
    Order one conference by win percentage, then total wins, both descending.

    Records equal on both keys keep their input order (``sorted`` is stable),
    so the same input always produces the same ranking. Rank is the 1-based
    position in the returned list.
    """
    return sorted(teams, key=lambda t: (-t.win_pct, -t.wins))


def rank_standings(standings: ConferenceStandings) -> ConferenceStandings:
    return ConferenceStandings(east=rank(standings.east), west=rank(standings.west))


def find_team(standings: ConferenceStandings, name: str) -> Optional[TeamLookup]:
    """Locate a team by normalized name, East before West. ``None`` if absent."""
    target = normalize(name)
    for conference in ("East", "West"):
        for idx, record in enumerate(standings.group(conference)):
            if normalize(record.team) == target:
                return TeamLookup(record=record, rank=idx + 1, conference=conference)
    return None


def league_worst(standings: ConferenceStandings) -> Optional[str]:
    """
    Normalized name of the team with the lowest win percentage league-wide.

    Teams are scanned East then West and only a strictly lower percentage
    replaces the current holder, so a tie goes to the first team seen.
    """
    worst: Optional[str] = None
    worst_pct = 1.0
    for record in standings.all_teams():
        pct = record.win_pct
        if pct < worst_pct:
            worst_pct = pct
            worst = normalize(record.team)
    return worst
