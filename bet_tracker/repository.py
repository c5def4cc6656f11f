"""
Dated standings snapshots kept in a single JSON file.

File shape::

    {"2025-11-18": {"East": [{"team": "Pistons", "w": 12, "l": 2}, ...], "West": [...]}, ...}
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple, Union

from .models import ConferenceStandings, IncompleteSnapshotError
from .scoring import validate_snapshot

logger = logging.getLogger(__name__)


class HistoryFileError(RuntimeError):
    """The history file exists but could not be read as dated standings."""


class StandingsRepository:
    """Static history merged with snapshots saved at runtime. Saved entries win on the same date."""

    def __init__(
        self,
        path: Union[str, Path],
        static_history: Optional[Mapping[str, ConferenceStandings]] = None,
        fetcher=None,
    ):
        self.path = Path(path)
        self.static_history = dict(static_history or {})
        self.fetcher = fetcher

    def _read(self) -> Dict[str, ConferenceStandings]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                raw = json.load(handle)
            if not isinstance(raw, dict):
                raise ValueError(f"expected an object keyed by date, got {type(raw).__name__}")
            return {date: ConferenceStandings.from_dict(data) for date, data in raw.items()}
        except (OSError, ValueError, AttributeError, TypeError) as exc:
            raise HistoryFileError(f"Unreadable history file {self.path}: {exc}") from exc

    def load_saved(self) -> Dict[str, ConferenceStandings]:
        """Saved snapshots, or nothing if the file cannot be read."""
        try:
            return self._read()
        except HistoryFileError:
            logger.exception("Failed to load saved standings, continuing without them")
            return {}

    def has_date(self, date: str) -> bool:
        return date in self.load_saved()

    def save(self, date: str, standings: ConferenceStandings) -> bool:
        """Store ``standings`` under ``date``. Returns False if that date is already stored."""
        saved = self._read()
        if date in saved:
            logger.info("%s already exists in %s, skipping.", date, self.path)
            return False

        saved[date] = standings
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as handle:
            json.dump(
                {key: saved[key].as_dict() for key in sorted(saved)},
                handle,
                indent=2,
            )
            handle.write("\n")

        logger.info("Saved standings for %s to %s", date, self.path)
        return True

    def get_history(self) -> List[Tuple[str, ConferenceStandings]]:
        """Dated snapshots in date order. Incomplete snapshots are left out."""
        merged = dict(self.static_history)
        merged.update(self.load_saved())

        history = []
        for date in sorted(merged):
            try:
                validate_snapshot(merged[date])
            except IncompleteSnapshotError as exc:
                logger.warning("Skipping standings for %s: %s", date, exc)
                continue
            history.append((date, merged[date]))
        return history

    def get_current(self, force_refresh: bool = False) -> ConferenceStandings:
        if self.fetcher is None:
            raise RuntimeError("No standings fetcher configured")
        return self.fetcher.get_current(force_refresh=force_refresh)
