"""Flat-file persistence with merge-on-save."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Iterable, List


class HistoryFile:
    """Reads and rewrites a newline-delimited history file.

    The file holds one entry per line, most recent first, with no header.
    Saving merges the in-memory entries with whatever another session may
    have written since this one started.
    """

    def __init__(self, path: Path, max_size: int = 500) -> None:
        self.path = Path(path).expanduser()
        self.max_size = max_size

    def load(self) -> List[str]:
        """Load entries in file order, return [] if missing or unreadable."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return []
        return [line for line in text.split("\n") if line]

    def merge(self, current: Iterable[str], on_disk: Iterable[str]) -> List[str]:
        """Union of ``current`` then ``on_disk``, first occurrence wins, capped."""
        merged: List[str] = []
        seen = set()
        for entry in list(current) + list(on_disk):
            if entry in seen:
                continue
            # A line break inside an entry would split it on reload.
            if "\n" in entry or "\r" in entry:
                continue
            seen.add(entry)
            merged.append(entry)
            if len(merged) >= self.max_size:
                break
        return merged

    def save(self, current: Iterable[str]) -> List[str]:
        """Merge ``current`` with the file contents and rewrite the file."""
        entries = self.merge(current, self.load())
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(tmp_fd, "w", encoding="utf-8") as fp:
                fp.write("".join(f"{entry}\n" for entry in entries))
                fp.flush()
                os.fsync(fp.fileno())
            # os.replace raises when the target is a directory.
            os.replace(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
        return entries

    def clear(self) -> None:
        """Remove the history file."""
        if self.path.exists():
            self.path.unlink()
