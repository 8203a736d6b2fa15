"""Command history core: filtering, storage and persistence."""

from .errors import ConfigError, HistoryError, SessionContextError
from .filters import (
    DEFAULT_RULES,
    FilterRule,
    PatternRule,
    PredicateRule,
    first_match,
    reject_blank,
    reject_multiline,
    rules_from_patterns,
    should_reject,
)
from .hooks import EventHook, SessionHost
from .persistence import HistoryFile
from .session import HistorySession, TrimPolicy
from .store import HistoryStore

__all__ = [
    "ConfigError",
    "HistoryError",
    "SessionContextError",
    "DEFAULT_RULES",
    "FilterRule",
    "PatternRule",
    "PredicateRule",
    "first_match",
    "reject_blank",
    "reject_multiline",
    "rules_from_patterns",
    "should_reject",
    "EventHook",
    "SessionHost",
    "HistoryFile",
    "HistorySession",
    "TrimPolicy",
    "HistoryStore",
]
