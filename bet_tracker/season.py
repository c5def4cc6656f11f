"""
Season facts for the 2025-26 bet. Update once per season (results as they happen).
"""

from typing import List

from .history import LeagueHistoryEntry
from .models import ConferenceStandings, DraftBoard, PlayoffResult, ProjectionTable, TeamRecord, TournamentResult

DRAFT: DraftBoard = {
    "Chris": [
        "Cavaliers", "Knicks", "Timberwolves", "Bucks", "Hawks",
        "Grizzlies", "Pacers", "Bulls", "Trail Blazers", "Jazz",
    ],
    "Ian": [
        "Nuggets", "Magic", "Clippers", "Spurs", "Rockets",
        "Celtics", "Pelicans", "Kings", "Suns", "Wizards",
    ],
    "Karan": [
        "Lakers", "Thunder", "Warriors", "Mavericks", "76ers",
        "Pistons", "Raptors", "Heat", "Hornets", "Nets",
    ],
}

# Consensus win totals (FanDuel, Covers, SportsBettingDime), last updated Dec 4, 2025
VEGAS_PROJECTIONS = ProjectionTable(
    wins={
        "thunder": 67.5,
        "nuggets": 56.5,
        "rockets": 56.5,
        "cavaliers": 55.5,
        "lakers": 53.5,
        "pistons": 52.5,
        "knicks": 51.5,
        "timberwolves": 49.5,
        "warriors": 47.5,
        "hawks": 47.5,
        "magic": 47.5,
        "heat": 46.5,
        "spurs": 45.5,
        "raptors": 45.5,
        "76ers": 44.5,
        "celtics": 42.5,
        "bucks": 42.5,
        "bulls": 42.5,
        "clippers": 40.5,
        "suns": 38.5,
        "trail blazers": 38.5,
        "grizzlies": 32.5,
        "mavericks": 31.5,
        "kings": 26.5,
        "hornets": 26.5,
        "pacers": 25.5,
        "pelicans": 23.5,
        "jazz": 21.5,
        "nets": 16.5,
        "wizards": 15.5,
    },
    default=30.0,
)

NBA_CUP_RESULTS = TournamentResult.from_teams(
    semifinalists=[],
    runner_up=None,
    champion=None,
)

PLAYOFF_RESULTS = PlayoffResult(series_wins={}, finals_champion=None)

LEAGUE_HISTORY: List[LeagueHistoryEntry] = [
    LeagueHistoryEntry(2020, "Karan", "Ian", "Chris"),
    LeagueHistoryEntry(2021, "Chris", "Ian", "Karan"),
    LeagueHistoryEntry(2022, "Ian", "Karan", "Chris"),
    LeagueHistoryEntry(2023, "Karan", "Chris", "Ian"),
    LeagueHistoryEntry(2024, "Karan", "Chris", "Ian"),
    LeagueHistoryEntry(2025, "Karan", "Ian", "Chris"),
]


def _records(rows) -> List[TeamRecord]:
    return [TeamRecord(team, wins, losses) for team, wins, losses in rows]


# Used when the standings provider is unavailable
FALLBACK_STANDINGS = ConferenceStandings(
    east=_records(
        [
            ("Pistons", 12, 2),
            ("Cavaliers", 10, 5),
            ("Raptors", 9, 5),
            ("Hawks", 9, 5),
            ("Knicks", 8, 5),
            ("76ers", 8, 5),
            ("Heat", 8, 6),
            ("Bulls", 7, 6),
            ("Bucks", 8, 7),
            ("Magic", 7, 7),
            ("Celtics", 7, 7),
            ("Hornets", 4, 10),
            ("Nets", 2, 11),
            ("Wizards", 1, 12),
            ("Pacers", 1, 13),
        ]
    ),
    west=_records(
        [
            ("Thunder", 14, 1),
            ("Nuggets", 10, 3),
            ("Rockets", 9, 3),
            ("Lakers", 10, 4),
            ("Spurs", 9, 4),
            ("Timberwolves", 9, 5),
            ("Warriors", 9, 6),
            ("Suns", 8, 6),
            ("Trail Blazers", 6, 7),
            ("Jazz", 5, 8),
            ("Grizzlies", 4, 10),
            ("Clippers", 4, 10),
            ("Mavericks", 4, 11),
            ("Kings", 3, 11),
            ("Pelicans", 2, 12),
        ]
    ),
)
