"""
Projected standings from market win totals.

Teams are re-ranked inside their conference by projected wins instead of
their current record, and scored with the same base-points formula. Bonuses
are not projected.
"""

from typing import Dict, List, Optional

from .models import (
    CONFERENCES,
    ConferenceStandings,
    DraftBoard,
    ProjectionComparison,
    ProjectionTable,
)
from .ranking import find_team
from .scoring import base_points
from .teams import normalize


def projected_ranking(
    standings: ConferenceStandings, projections: ProjectionTable
) -> ConferenceStandings:
    ranked = {
        conference: sorted(
            standings.group(conference),
            key=lambda t: projections.projected_wins(t.team),
            reverse=True,
        )
        for conference in CONFERENCES
    }
    return ConferenceStandings(east=ranked["East"], west=ranked["West"])


def project(
    standings: ConferenceStandings,
    projections: ProjectionTable,
    draft: DraftBoard,
) -> Dict[str, int]:
    """Projected point total per participant. Teams missing from the snapshot add nothing."""
    projected = projected_ranking(standings, projections)
    totals: Dict[str, int] = {}

    for participant, teams in draft.items():
        total = 0
        for team in teams:
            lookup = find_team(projected, team)
            if lookup is not None:
                total += base_points(lookup.rank)
        totals[participant] = total

    return totals


def drafted_by(draft: DraftBoard, team: str) -> Optional[str]:
    n = normalize(team)
    owner = None
    for participant, teams in draft.items():
        if any(normalize(t) == n for t in teams):
            owner = participant
    return owner


def compare_to_projections(
    standings: ConferenceStandings,
    projections: ProjectionTable,
    draft: DraftBoard,
) -> List[ProjectionComparison]:
    """
    Current rank and points next to projected rank and points for every team.

    ``diff`` is current minus projected points, so overperformers are
    positive. Sorted by ``diff`` descending; equal diffs keep East-then-West
    standings order.
    """
    rows: List[ProjectionComparison] = []

    for conference in CONFERENCES:
        group = standings.group(conference)
        order = sorted(
            range(len(group)),
            key=lambda i: projections.projected_wins(group[i].team),
            reverse=True,
        )
        projected_ranks = {position: rank for rank, position in enumerate(order, start=1)}

        for idx, record in enumerate(group):
            current_rank = idx + 1
            projected_rank = projected_ranks[idx]
            current_pts = base_points(current_rank)
            projected_pts = base_points(projected_rank)
            rows.append(
                ProjectionComparison(
                    name=record.team,
                    owner=drafted_by(draft, record.team),
                    conference=conference,
                    current_rank=current_rank,
                    current_points=current_pts,
                    projected_rank=projected_rank,
                    projected_points=projected_pts,
                    diff=current_pts - projected_pts,
                    record=record.record,
                )
            )

    rows.sort(key=lambda row: row.diff, reverse=True)
    return rows
