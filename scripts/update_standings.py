#!/usr/bin/env python3
"""
Daily standings writer that appends today's NBA standings to the history file.

Intended for scheduled runs (e.g., GitHub Actions cron) after the night's
games have finished. Re-running for a date that is already saved is a no-op.
"""

import argparse
import logging
import sys
from datetime import datetime
from zoneinfo import ZoneInfo

from bet_tracker import settings
from bet_tracker.models import IncompleteSnapshotError
from bet_tracker.repository import HistoryFileError, StandingsRepository
from bet_tracker.scoring import validate_snapshot
from bet_tracker.standings_fetcher import StandingsFetcher, StandingsFetchError

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def today_eastern() -> str:
    # NBA games finish by ~midnight ET
    return datetime.now(ZoneInfo("America/New_York")).strftime("%Y-%m-%d")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch NBA standings and append them to the history file.")
    parser.add_argument(
        "--history",
        default=settings.HISTORY_FILE,
        help=f"Path of the history JSON file (default: {settings.HISTORY_FILE}).",
    )
    parser.add_argument(
        "--date",
        default=None,
        help="Date to fetch as YYYY-MM-DD (default: today, US Eastern).",
    )
    return parser.parse_args(argv)


def main(argv=None, fetcher=None) -> int:
    args = parse_args(argv)
    date = args.date or today_eastern()
    repository = StandingsRepository(args.history)

    if repository.has_date(date):
        logger.info("%s already exists in %s, skipping.", date, args.history)
        return 0

    fetcher = fetcher or StandingsFetcher()
    logger.info("Fetching standings for %s...", date)

    try:
        standings = fetcher.fetch_by_date(date) if args.date else fetcher.fetch_current()
        validate_snapshot(standings)
    except (StandingsFetchError, IncompleteSnapshotError) as exc:
        logger.error("Error: %s", exc)
        return 1

    logger.info("Got %dE + %dW teams", len(standings.east), len(standings.west))
    try:
        repository.save(date, standings)
    except HistoryFileError as exc:
        logger.error("Refusing to overwrite history: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
