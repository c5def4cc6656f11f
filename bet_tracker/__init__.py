"""
Core utilities for the NBA standings bet tracker.

This package hosts the scoring rules so the Flask service and the scheduled
standings scripts score snapshots the same way.
"""

from .history import build_series
from .models import ConferenceStandings, IncompleteSnapshotError, TeamRecord
from .projections import compare_to_projections, project
from .ranking import rank
from .scoring import score_standings
from .teams import normalize

__all__ = [
    "ConferenceStandings",
    "IncompleteSnapshotError",
    "TeamRecord",
    "build_series",
    "compare_to_projections",
    "normalize",
    "project",
    "rank",
    "score_standings",
]
