import logging
import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    configured = os.getenv(name)
    if not configured:
        return default
    try:
        return int(configured)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r, using %d", name, configured, default)
        return default


# Standings source
STANDINGS_URL = os.getenv(
    "STANDINGS_URL", "https://site.api.espn.com/apis/v2/sports/basketball/nba/standings"
)
STANDINGS_CACHE_SECONDS = _env_int("STANDINGS_CACHE_SECONDS", 60 * 60)
STANDINGS_TIMEOUT = _env_int("STANDINGS_TIMEOUT", 10)

# Daily snapshots written by scripts/update_standings.py
HISTORY_FILE = os.getenv("HISTORY_FILE", "data/historic_standings.json")

# Application Settings
SEASON_LABEL = os.getenv("SEASON_LABEL", "2025-26")
PORT = _env_int("PORT", 5000)
