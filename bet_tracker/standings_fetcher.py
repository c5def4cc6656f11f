import logging
import time
from datetime import datetime, timezone
from typing import Dict, List, Mapping, Optional

import requests

from . import settings
from .models import ConferenceStandings, IncompleteSnapshotError, TeamRecord
from .ranking import rank
from .scoring import validate_snapshot
from .season import FALLBACK_STANDINGS
from .teams import short_name

logger = logging.getLogger(__name__)


class StandingsFetchError(RuntimeError):
    """The standings provider could not be reached or returned an unusable payload."""


def _stat_value(stats: List[Dict], name: str) -> int:
    for stat in stats:
        if stat.get("name") == name:
            try:
                return int(stat.get("value") or 0)
            except (TypeError, ValueError):
                return 0
    return 0


def parse_espn_standings(payload: Mapping) -> ConferenceStandings:
    """Turn ESPN's standings response into ranked East/West tables."""
    conferences = payload.get("children")
    if not conferences:
        raise StandingsFetchError("Unexpected ESPN API response structure")

    east: List[TeamRecord] = []
    west: List[TeamRecord] = []

    for conference in conferences:
        target = east if conference.get("name") == "Eastern Conference" else west
        entries = (conference.get("standings") or {}).get("entries") or []
        if not entries:
            logger.warning("No standings entries found for %s", conference.get("name"))

        for entry in entries:
            display_name = entry.get("team", {}).get("displayName", "")
            stats = entry.get("stats", [])
            target.append(
                TeamRecord(
                    team=short_name(display_name),
                    wins=_stat_value(stats, "wins"),
                    losses=_stat_value(stats, "losses"),
                )
            )

    return ConferenceStandings(east=rank(east), west=rank(west))


class StandingsFetcher:
    """Pulls NBA standings from ESPN with a short-lived cache and a static fallback."""

    def __init__(
        self,
        url: str = settings.STANDINGS_URL,
        cache_seconds: int = settings.STANDINGS_CACHE_SECONDS,
        timeout: int = settings.STANDINGS_TIMEOUT,
        fallback: ConferenceStandings = FALLBACK_STANDINGS,
    ):
        self.url = url
        self.cache_seconds = cache_seconds
        self.timeout = timeout
        self.fallback = fallback
        self.api_error: Optional[str] = None
        self.source = "fallback"
        self.last_update: Optional[datetime] = None

        self._cached: Optional[ConferenceStandings] = None
        self._cached_at: Optional[float] = None

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #
    def get_current(self, force_refresh: bool = False) -> ConferenceStandings:
        """Cached standings if fresh, otherwise a live fetch, otherwise the fallback."""
        if not force_refresh and self._cache_is_fresh():
            age_minutes = round((time.monotonic() - self._cached_at) / 60)
            logger.info("Using cached standings (%d minutes old)", age_minutes)
            self.source = "cache"
            return self._cached

        try:
            standings = self.fetch_current()
            validate_snapshot(standings)
        except (StandingsFetchError, IncompleteSnapshotError) as exc:
            logger.warning("Live standings unavailable: %s", exc)
            self.api_error = str(exc)
            if self._cached is not None:
                self.source = "stale-cache"
                return self._cached
            self.source = "fallback"
            return self.fallback

        self._cached = standings
        self._cached_at = time.monotonic()
        self.last_update = datetime.now(timezone.utc)
        self.api_error = None
        self.source = "live"
        return standings

    def fetch_current(self) -> ConferenceStandings:
        return parse_espn_standings(self._get_json())

    def fetch_by_date(self, date: str) -> ConferenceStandings:
        """Standings as of ``date`` (YYYY-MM-DD)."""
        return parse_espn_standings(self._get_json({"dates": date.replace("-", "")}))

    def build_snapshot(self, force_refresh: bool = False) -> Dict:
        """Return the latest standings plus metadata for consumers."""
        standings = self.get_current(force_refresh=force_refresh)
        return {
            "standings": standings.as_dict(),
            "last_update": self.last_update.isoformat() if self.last_update else None,
            "source": self.source,
            "api_error": self.api_error,
        }

    # ------------------------------------------------------------------ #
    # ESPN helpers
    # ------------------------------------------------------------------ #
    def _cache_is_fresh(self) -> bool:
        if self._cached is None or self._cached_at is None:
            return False
        return time.monotonic() - self._cached_at < self.cache_seconds

    def _get_json(self, params: Optional[Dict[str, str]] = None) -> Dict:
        try:
            response = requests.get(self.url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as exc:
            raise StandingsFetchError(f"ESPN API error: {exc}") from exc
        except ValueError as exc:
            raise StandingsFetchError(f"ESPN API returned invalid JSON: {exc}") from exc
