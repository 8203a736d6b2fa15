"""cmd-recall - command history recorder for interactive shells."""

__version__ = "0.1.0"
__author__ = "cmd-recall Contributors"

from .config import ConfigLoader, HistorySettings
from .history import HistoryFile, HistorySession, HistoryStore, SessionHost, should_reject

__all__ = [
    "ConfigLoader",
    "HistorySettings",
    "HistoryFile",
    "HistorySession",
    "HistoryStore",
    "SessionHost",
    "should_reject",
]
