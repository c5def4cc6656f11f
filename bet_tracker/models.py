from dataclasses import dataclass, asdict, field
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional

from .teams import normalize

CONFERENCES = ("East", "West")
TEAMS_PER_CONFERENCE = 15
TEAMS_PER_PARTICIPANT = 10

DraftBoard = Dict[str, List[str]]


class IncompleteSnapshotError(ValueError):
    """Raised when a standings snapshot cannot be ranked meaningfully."""


@dataclass(frozen=True)
class TeamRecord:
    team: str
    wins: int = 0
    losses: int = 0

    @property
    def win_pct(self) -> float:
        games = self.wins + self.losses
        if games == 0:
            return 0.0
        return self.wins / games

    @property
    def record(self) -> str:
        return f"{self.wins}-{self.losses}"

    @classmethod
    def from_dict(cls, data: Mapping) -> "TeamRecord":
        return cls(
            team=str(data.get("team", "")),
            wins=int(data.get("w", 0) or 0),
            losses=int(data.get("l", 0) or 0),
        )

    def as_dict(self) -> Dict:
        return {"team": self.team, "w": self.wins, "l": self.losses}


@dataclass(frozen=True)
class ConferenceStandings:
    """Both conference tables, each ordered by rank (index 0 is rank 1)."""

    east: List[TeamRecord] = field(default_factory=list)
    west: List[TeamRecord] = field(default_factory=list)

    def group(self, conference: str) -> List[TeamRecord]:
        if conference == "East":
            return self.east
        if conference == "West":
            return self.west
        raise KeyError(conference)

    def all_teams(self) -> List[TeamRecord]:
        """East first, then West. Several tie-breaks depend on this order."""
        return list(self.east) + list(self.west)

    @classmethod
    def from_dict(cls, data: Mapping) -> "ConferenceStandings":
        return cls(
            east=[TeamRecord.from_dict(t) for t in data.get("East", [])],
            west=[TeamRecord.from_dict(t) for t in data.get("West", [])],
        )

    def as_dict(self) -> Dict:
        return {
            "East": [t.as_dict() for t in self.east],
            "West": [t.as_dict() for t in self.west],
        }


@dataclass(frozen=True)
class TournamentResult:
    semifinalists: FrozenSet[str] = frozenset()
    runner_up: Optional[str] = None
    champion: Optional[str] = None

    @classmethod
    def from_teams(
        cls,
        semifinalists: Iterable[str] = (),
        runner_up: Optional[str] = None,
        champion: Optional[str] = None,
    ) -> "TournamentResult":
        return cls(frozenset(semifinalists), runner_up, champion)


@dataclass(frozen=True)
class PlayoffResult:
    series_wins: Mapping[str, int] = field(default_factory=dict)
    finals_champion: Optional[str] = None

    def series_won(self, team: str) -> int:
        n = normalize(team)
        for name, count in self.series_wins.items():
            if normalize(name) == n:
                return int(count)
        return 0


@dataclass(frozen=True)
class ProjectionTable:
    """Market win totals keyed by team name, with a fallback for unlisted teams."""

    wins: Mapping[str, float] = field(default_factory=dict)
    default: float = 30.0

    def projected_wins(self, team: str) -> float:
        n = normalize(team)
        for name, total in self.wins.items():
            if normalize(name) == n:
                return float(total)
        return self.default


@dataclass(frozen=True)
class TeamLookup:
    record: TeamRecord
    rank: int
    conference: str


@dataclass
class ScoredTeam:
    name: str
    wins: int
    losses: int
    conference: str
    conference_rank: int
    draft_position: int
    base_points: int
    tournament_bonus: int
    playoff_bonus: int
    last_place_bonus: int
    total_points: int
    expected_points: int
    points_vs_expected: int
    is_league_worst: bool = False

    def as_dict(self) -> Dict:
        return asdict(self)


@dataclass
class ScoreBreakdown:
    base_points: int = 0
    tournament_bonus: int = 0
    playoff_bonus: int = 0
    last_place_bonus: int = 0

    def add(self, team: ScoredTeam) -> None:
        self.base_points += team.base_points
        self.tournament_bonus += team.tournament_bonus
        self.playoff_bonus += team.playoff_bonus
        self.last_place_bonus += team.last_place_bonus

    def as_dict(self) -> Dict:
        return asdict(self)


@dataclass
class ParticipantScore:
    total_points: int = 0
    breakdown: ScoreBreakdown = field(default_factory=ScoreBreakdown)
    teams: List[ScoredTeam] = field(default_factory=list)

    def as_dict(self) -> Dict:
        return asdict(self)


@dataclass
class ProjectionComparison:
    name: str
    owner: Optional[str]
    conference: str
    current_rank: int
    current_points: int
    projected_rank: int
    projected_points: int
    diff: int
    record: str

    def as_dict(self) -> Dict:
        return asdict(self)


@dataclass
class SeriesPoint:
    label: str
    totals: Dict[str, int] = field(default_factory=dict)

    def as_dict(self) -> Dict:
        return {"label": self.label, **self.totals}
