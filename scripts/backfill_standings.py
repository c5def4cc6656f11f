#!/usr/bin/env python3
"""
Backfill the history file with one standings snapshot per day over a date range.

Usage: python scripts/backfill_standings.py --start 2025-11-18 --end 2026-02-11
"""

import argparse
import logging
import sys
import time
from datetime import date, timedelta

from bet_tracker import settings
from bet_tracker.models import IncompleteSnapshotError
from bet_tracker.repository import HistoryFileError, StandingsRepository
from bet_tracker.scoring import validate_snapshot
from bet_tracker.standings_fetcher import StandingsFetcher, StandingsFetchError

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Backfill daily NBA standings into the history file.")
    parser.add_argument("--start", required=True, type=date.fromisoformat, help="First date, YYYY-MM-DD.")
    parser.add_argument("--end", required=True, type=date.fromisoformat, help="Last date, YYYY-MM-DD.")
    parser.add_argument(
        "--history",
        default=settings.HISTORY_FILE,
        help=f"Path of the history JSON file (default: {settings.HISTORY_FILE}).",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=3.0,
        help="Seconds to wait between requests (default: 3).",
    )
    return parser.parse_args(argv)


def date_range(start: date, end: date):
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def main(argv=None, fetcher=None, sleep=time.sleep) -> int:
    args = parse_args(argv)
    repository = StandingsRepository(args.history)
    fetcher = fetcher or StandingsFetcher()
    saved = 0

    for count, day in enumerate(date_range(args.start, args.end), start=1):
        date_str = day.isoformat()
        if repository.has_date(date_str):
            logger.info("%s already saved, skipping", date_str)
            continue

        logger.info("Fetching %s (%d)...", date_str, count)
        try:
            standings = fetcher.fetch_by_date(date_str)
            validate_snapshot(standings)
        except IncompleteSnapshotError as exc:
            logger.warning("Unexpected team count for %s, skipping: %s", date_str, exc)
        except StandingsFetchError as exc:
            logger.warning("Error fetching %s: %s", date_str, exc)
        else:
            try:
                if repository.save(date_str, standings):
                    saved += 1
            except HistoryFileError as exc:
                logger.error("Refusing to overwrite history: %s", exc)
                return 1

        sleep(args.delay)

    logger.info("Backfilled %d dates into %s", saved, args.history)
    return 0


if __name__ == "__main__":
    sys.exit(main())
