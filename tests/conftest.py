import pytest

from bet_tracker.models import ConferenceStandings, PlayoffResult, TeamRecord, TournamentResult
from bet_tracker.season import DRAFT, FALLBACK_STANDINGS


def make_conference(rows):
    return [TeamRecord(team, wins, losses) for team, wins, losses in rows]


EAST_ROWS = [
    ("Pistons", 30, 5),
    ("Cavaliers", 28, 7),
    ("Raptors", 26, 9),
    ("Hawks", 24, 11),
    ("Knicks", 22, 13),
    ("76ers", 20, 15),
    ("Heat", 19, 16),
    ("Bulls", 18, 17),
    ("Bucks", 17, 18),
    ("Magic", 16, 19),
    ("Celtics", 15, 20),
    ("Hornets", 12, 23),
    ("Nets", 9, 26),
    ("Wizards", 6, 29),
    ("Pacers", 4, 31),
]

WEST_ROWS = [
    ("Thunder", 31, 4),
    ("Nuggets", 27, 8),
    ("Rockets", 25, 10),
    ("Lakers", 24, 11),
    ("Spurs", 23, 12),
    ("Timberwolves", 21, 14),
    ("Warriors", 20, 15),
    ("Suns", 19, 16),
    ("Trail Blazers", 16, 19),
    ("Jazz", 14, 21),
    ("Grizzlies", 13, 22),
    ("Clippers", 11, 24),
    ("Mavericks", 10, 25),
    ("Kings", 8, 27),
    ("Pelicans", 5, 30),
]


@pytest.fixture
def standings():
    return ConferenceStandings(east=make_conference(EAST_ROWS), west=make_conference(WEST_ROWS))


@pytest.fixture
def fallback_standings():
    return FALLBACK_STANDINGS


@pytest.fixture
def draft():
    return {name: list(teams) for name, teams in DRAFT.items()}


@pytest.fixture
def no_tournament():
    return TournamentResult()


@pytest.fixture
def no_playoffs():
    return PlayoffResult()
