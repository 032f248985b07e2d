# core/highscores.py
"""Top-N score table persisted as a small JSON file."""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

from core import settings
from core.errors import ScoreStoreError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreRecord:
    name: str
    score: int
    wave: int
    timestamp: str

    def sort_key(self):
        return (-self.score, -self.wave)


class HighScoreTable:
    """
    Ordered list of the best runs.
    - sorted by score descending, then wave descending
    - capped at `limit` entries
    - qualifies() is a pure query, submit() is the only write
    """

    def __init__(self, path: Union[str, Path, None] = None, limit: int = settings.HIGH_SCORE_LIMIT):
        self.path = Path(path) if path is not None else None
        self.limit = int(limit)
        self._records: List[ScoreRecord] = []

    @property
    def records(self) -> List[ScoreRecord]:
        return list(self._records)

    def load(self) -> List[ScoreRecord]:
        if self.path is None or not self.path.exists():
            self._records = []
            return self.records

        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ScoreStoreError(f"Cannot read high scores from {self.path}: {exc}") from exc

        if not isinstance(payload, list):
            raise ScoreStoreError("High score file must contain a JSON list.")

        records = []
        for raw in payload:
            try:
                records.append(
                    ScoreRecord(
                        name=str(raw["name"]),
                        score=int(raw["score"]),
                        wave=int(raw["wave"]),
                        timestamp=str(raw.get("timestamp", "")),
                    )
                )
            except (KeyError, TypeError, ValueError) as exc:
                raise ScoreStoreError(f"Malformed high score entry: {raw!r}") from exc

        records.sort(key=ScoreRecord.sort_key)
        self._records = records[: self.limit]
        return self.records

    def qualifies(self, score: int, wave: int) -> bool:
        if score <= 0:
            return False
        if len(self._records) < self.limit:
            return True
        last = self._records[-1]
        return (-score, -wave) < last.sort_key()

    def submit(self, name: str, score: int, wave: int) -> Optional[int]:
        """Insert a run and return its 1-based rank, or None if it missed the table."""
        if not self.qualifies(score, wave):
            return None

        clean = (name or "").strip()[: settings.NAME_MAX_LENGTH] or "Anonymous"
        record = ScoreRecord(
            name=clean,
            score=int(score),
            wave=int(wave),
            timestamp=datetime.now(timezone.utc).isoformat(timespec="seconds"),
        )

        # stable insert: ties keep older records ahead
        index = len(self._records)
        for i, existing in enumerate(self._records):
            if record.sort_key() < existing.sort_key():
                index = i
                break
        records = list(self._records)
        records.insert(index, record)
        del records[self.limit:]

        # memory only changes once the file write succeeded
        self._save(records)
        self._records = records
        logger.info("high score #%d: %s %d (wave %d)", index + 1, clean, score, wave)
        return index + 1

    def _save(self, records: List[ScoreRecord]):
        if self.path is None:
            return
        try:
            self.path.write_text(
                json.dumps([asdict(r) for r in records], indent=2),
                encoding="utf-8",
            )
        except OSError as exc:
            raise ScoreStoreError(f"Cannot write high scores to {self.path}: {exc}") from exc
