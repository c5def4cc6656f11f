from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Dict, Iterable, List, Sequence, Tuple

from .models import ConferenceStandings, DraftBoard, PlayoffResult, SeriesPoint, TournamentResult
from .scoring import score_standings

NOW_LABEL = "Now"


def format_label(date: str) -> str:
    """'2025-11-18' -> 'Nov 18'. Anything else is returned unchanged."""
    try:
        parsed = datetime.strptime(date, "%Y-%m-%d")
    except (TypeError, ValueError):
        return date
    return f"{parsed.strftime('%b')} {parsed.day}"


def _totals(
    standings: ConferenceStandings,
    draft: DraftBoard,
    tournament: TournamentResult,
    playoff: PlayoffResult,
    validate: bool,
) -> Dict[str, int]:
    scores = score_standings(standings, draft, tournament, playoff, validate=validate)
    return {participant: score.total_points for participant, score in scores.items()}


def build_series(
    dated_snapshots: Sequence[Tuple[str, ConferenceStandings]],
    current: ConferenceStandings,
    draft: DraftBoard,
    tournament: TournamentResult,
    playoff: PlayoffResult,
    validate: bool = True,
) -> List[SeriesPoint]:
    """
    Score each dated snapshot on its own, then the current standings last.

    Snapshots are kept in the order given; the caller sorts them. With
    ``validate`` set, an incomplete snapshot raises ``IncompleteSnapshotError``.
    """
    series = [
        SeriesPoint(label=format_label(date), totals=_totals(snapshot, draft, tournament, playoff, validate))
        for date, snapshot in dated_snapshots
    ]
    series.append(SeriesPoint(label=NOW_LABEL, totals=_totals(current, draft, tournament, playoff, validate)))
    return series


@dataclass(frozen=True)
class LeagueHistoryEntry:
    year: int
    first: str
    second: str
    third: str

    def as_dict(self) -> Dict:
        return asdict(self)


def podium_counts(
    history: Iterable[LeagueHistoryEntry], participants: Iterable[str]
) -> Dict[str, Dict[str, int]]:
    """First/second/third place finishes per participant across past seasons."""
    counts = {name: {"first": 0, "second": 0, "third": 0} for name in participants}
    for season in history:
        for place in ("first", "second", "third"):
            name = getattr(season, place)
            if name in counts:
                counts[name][place] += 1
    return counts
