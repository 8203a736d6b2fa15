"""JSON-lines event log for history sessions."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional


class HistoryLogger:
    """Minimal logger that appends session events to a log file.

    Passing ``None`` as the path disables logging.
    """

    def __init__(self, log_path: Optional[Path] = None) -> None:
        self.log_path = Path(log_path).expanduser() if log_path else None

    @property
    def enabled(self) -> bool:
        return self.log_path is not None

    def _write(self, payload: dict) -> None:
        if self.log_path is None:
            return
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        entry = {"timestamp": datetime.now(timezone.utc).isoformat(), **payload}
        with self.log_path.open("a", encoding="utf-8") as fp:
            fp.write(json.dumps(entry) + "\n")

    def log_loaded(self, path: Path, count: int) -> None:
        self._write({"event": "loaded", "path": str(path), "count": count})

    def log_saved(self, path: Path, count: int) -> None:
        self._write({"event": "saved", "path": str(path), "count": count})

    def log_save_failed(self, path: Path, reason: str) -> None:
        self._write({"event": "save_failed", "path": str(path), "reason": reason})

    def log_rejected(self, rule: str) -> None:
        # The rejected text itself is never written.
        self._write({"event": "rejected", "rule": rule})
