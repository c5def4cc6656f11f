"""
NBA Standings Bet Tracker
=========================
A JSON service over the season's standings that reports:
- Current points per participant and per drafted team
- Vegas-projected points and over/under-performing teams
- Points over time from saved daily snapshots
"""

import logging
from typing import Optional

from flask import Flask, jsonify

from bet_tracker import settings
from bet_tracker.history import build_series, podium_counts
from bet_tracker.projections import compare_to_projections, project
from bet_tracker.repository import StandingsRepository
from bet_tracker.scoring import leaderboard, score_standings
from bet_tracker.season import DRAFT, LEAGUE_HISTORY, NBA_CUP_RESULTS, PLAYOFF_RESULTS, VEGAS_PROJECTIONS
from bet_tracker.standings_fetcher import StandingsFetcher

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


class StandingsTracker:
    """Flask wrapper around the standings fetcher and the scoring engine."""

    def __init__(self, fetcher: Optional[StandingsFetcher] = None, repository: Optional[StandingsRepository] = None):
        self.app = Flask(__name__)
        self.fetcher = fetcher or StandingsFetcher()
        self.repository = repository or StandingsRepository(settings.HISTORY_FILE, fetcher=self.fetcher)

        self._setup_routes()

    # ------------------------------------------------------------------ #
    # Payloads
    # ------------------------------------------------------------------ #
    def scores_payload(self, force_refresh: bool = False):
        standings = self.fetcher.get_current(force_refresh=force_refresh)
        scores = score_standings(standings, DRAFT, NBA_CUP_RESULTS, PLAYOFF_RESULTS)
        return {
            "season": settings.SEASON_LABEL,
            "leaderboard": [{"participant": name, "points": points} for name, points in leaderboard(scores)],
            "scores": {name: score.as_dict() for name, score in scores.items()},
            "last_update": self.fetcher.last_update.isoformat() if self.fetcher.last_update else None,
            "source": self.fetcher.source,
            "api_error": self.fetcher.api_error,
        }

    def projections_payload(self):
        standings = self.fetcher.get_current()
        return {
            "projected": project(standings, VEGAS_PROJECTIONS, DRAFT),
            "teams": [row.as_dict() for row in compare_to_projections(standings, VEGAS_PROJECTIONS, DRAFT)],
        }

    def history_payload(self):
        current = self.fetcher.get_current()
        series = build_series(self.repository.get_history(), current, DRAFT, NBA_CUP_RESULTS, PLAYOFF_RESULTS)
        return {
            "series": [point.as_dict() for point in series],
            "podiums": podium_counts(LEAGUE_HISTORY, DRAFT.keys()),
            "past_seasons": [season.as_dict() for season in LEAGUE_HISTORY],
        }

    # ------------------------------------------------------------------ #
    # Routes
    # ------------------------------------------------------------------ #
    def _setup_routes(self):
        @self.app.after_request
        def add_header(response):
            response.cache_control.no_cache = True
            response.cache_control.must_revalidate = True
            response.cache_control.no_store = True
            return response

        @self.app.route("/api/scores")
        def api_scores():
            return jsonify(self.scores_payload())

        @self.app.route("/api/projections")
        def api_projections():
            return jsonify(self.projections_payload())

        @self.app.route("/api/history")
        def api_history():
            return jsonify(self.history_payload())

        @self.app.route("/api/refresh", methods=["POST"])
        def api_refresh():
            logger.info("Forcing a fresh standings fetch")
            return jsonify(self.scores_payload(force_refresh=True))

    def run(self, host="0.0.0.0", port: Optional[int] = None, debug: bool = False):
        if port is None:
            port = settings.PORT
        self.app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    tracker = StandingsTracker()
    tracker.run(debug=True)
