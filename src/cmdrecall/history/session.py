"""Session hook tying a host environment to the history core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence

from ..utils.logger import HistoryLogger
from .errors import SessionContextError
from .filters import DEFAULT_RULES, FilterRule, first_match, reject_multiline, rules_from_patterns
from .hooks import SessionHost
from .persistence import HistoryFile
from .store import HistoryStore

if TYPE_CHECKING:
    from ..config import HistorySettings


@dataclass(frozen=True)
class TrimPolicy:
    """Whitespace stripping applied to raw input before filtering."""

    left: bool = True
    right: bool = True

    def apply(self, raw: str) -> str:
        text = raw
        if self.left:
            text = text.lstrip()
        if self.right:
            text = text.rstrip()
        return text


class HistorySession:
    """Records submitted commands for one interactive session.

    While active, the session listens on the host's ``before_submit`` hook
    and saves to disk when the host shuts down. Persisted history is loaded
    into the store on the first activation only.
    """

    def __init__(
        self,
        host: SessionHost,
        store: HistoryStore,
        history_file: HistoryFile,
        rules: Sequence[FilterRule] = DEFAULT_RULES,
        trim: Optional[TrimPolicy] = None,
        logger: Optional[HistoryLogger] = None,
    ) -> None:
        self.host = host
        self.store = store
        self.history_file = history_file
        self.rules = list(rules)
        self.trim = trim or TrimPolicy()
        self.logger = logger or HistoryLogger()
        self._loaded = False
        self._active = False

    @classmethod
    def from_settings(cls, settings: "HistorySettings", host: SessionHost) -> "HistorySession":
        """Build a session from resolved configuration."""
        rules: List[FilterRule] = list(DEFAULT_RULES)
        rules.extend(rules_from_patterns(settings.patterns))
        if settings.reject_multiline:
            rules.append(reject_multiline)
        return cls(
            host=host,
            store=HistoryStore(settings.max_size),
            history_file=HistoryFile(settings.history_file, settings.max_size),
            rules=rules,
            trim=TrimPolicy(left=settings.left_trim, right=settings.right_trim),
            logger=HistoryLogger(settings.log_file),
        )

    @property
    def is_active(self) -> bool:
        return self._active

    def activate(self) -> None:
        """Load persisted history (first time only) and attach to the host."""
        if not self._loaded:
            entries = self.history_file.load()
            self.store.seed(entries)
            self._loaded = True
            self.logger.log_loaded(self.history_file.path, len(self.store))
        self.host.before_submit.register(self._handle_submit)
        self.host.shutdown.register(self._handle_shutdown)
        self._active = True

    def deactivate(self) -> None:
        """Detach from the host. The in-memory history is kept."""
        self.host.before_submit.unregister(self._handle_submit)
        self.host.shutdown.unregister(self._handle_shutdown)
        self._active = False

    def on_submit(self, raw: str) -> Optional[str]:
        """Trim, filter and record ``raw``.

        Returns the recorded text, or None if a filter rule rejected it.
        """
        if not self._active:
            raise SessionContextError("No active history session to record input")
        text = self.trim.apply(raw)
        rule = first_match(text, self.rules)
        if rule is not None:
            self.logger.log_rejected(rule.name)
            return None
        self.store.insert(text)
        return text

    def search(self) -> List[str]:
        """Current history, most recent first."""
        return self.store.snapshot()

    def save(self) -> List[str]:
        """Merge the in-memory history into the history file."""
        try:
            written = self.history_file.save(self.store.snapshot())
        except OSError as exc:
            self.logger.log_save_failed(self.history_file.path, str(exc))
            raise
        self.logger.log_saved(self.history_file.path, len(written))
        return written

    def _handle_submit(self, raw: str) -> None:
        self.on_submit(raw)

    def _handle_shutdown(self) -> None:
        self.save()
