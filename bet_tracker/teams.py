"""
Team name handling shared by the scoring engine and the data fetchers.

Standings providers report full display names ("Portland Trail Blazers"),
the draft board uses short names ("Trail Blazers") and people type nicknames
("Blazers"). Everything is compared through ``normalize``.
"""

from typing import Dict, Optional

# Lower-cased alias -> canonical lower-cased short name
TEAM_NAME_MAP: Dict[str, str] = {
    "lakers": "lakers",
    "clippers": "clippers",
    "warriors": "warriors",
    "knicks": "knicks",
    "nets": "nets",
    "cavaliers": "cavaliers",
    "cavs": "cavaliers",
    "timberwolves": "timberwolves",
    "wolves": "timberwolves",
    "trail blazers": "trail blazers",
    "blazers": "trail blazers",
    "76ers": "76ers",
    "sixers": "76ers",
}

# Provider display name -> draft-board short name
DISPLAY_NAME_MAP: Dict[str, str] = {
    "Atlanta Hawks": "Hawks",
    "Boston Celtics": "Celtics",
    "Brooklyn Nets": "Nets",
    "Charlotte Hornets": "Hornets",
    "Chicago Bulls": "Bulls",
    "Cleveland Cavaliers": "Cavaliers",
    "Dallas Mavericks": "Mavericks",
    "Denver Nuggets": "Nuggets",
    "Detroit Pistons": "Pistons",
    "Golden State Warriors": "Warriors",
    "Houston Rockets": "Rockets",
    "Indiana Pacers": "Pacers",
    "LA Clippers": "Clippers",
    "Los Angeles Clippers": "Clippers",
    "Los Angeles Lakers": "Lakers",
    "LA Lakers": "Lakers",
    "Memphis Grizzlies": "Grizzlies",
    "Miami Heat": "Heat",
    "Milwaukee Bucks": "Bucks",
    "Minnesota Timberwolves": "Timberwolves",
    "New Orleans Pelicans": "Pelicans",
    "New York Knicks": "Knicks",
    "Oklahoma City Thunder": "Thunder",
    "Orlando Magic": "Magic",
    "Philadelphia 76ers": "76ers",
    "Phoenix Suns": "Suns",
    "Portland Trail Blazers": "Trail Blazers",
    "Sacramento Kings": "Kings",
    "San Antonio Spurs": "Spurs",
    "Toronto Raptors": "Raptors",
    "Utah Jazz": "Jazz",
    "Washington Wizards": "Wizards",
}

EAST_TEAMS = frozenset(
    [
        "hawks", "celtics", "nets", "hornets", "bulls",
        "cavaliers", "pistons", "pacers", "heat", "bucks",
        "knicks", "magic", "76ers", "raptors", "wizards",
    ]
)


def normalize(name: Optional[str]) -> str:
    """Canonical lower-cased team name used for every comparison."""
    if not name:
        return ""
    key = name.strip().lower()
    return TEAM_NAME_MAP.get(key, key)


def short_name(display_name: str) -> str:
    return DISPLAY_NAME_MAP.get(display_name, display_name)


def conference_of(name: str) -> str:
    return "East" if normalize(name) in EAST_TEAMS else "West"
