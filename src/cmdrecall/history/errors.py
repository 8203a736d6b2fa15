"""Exceptions raised by the history core."""

from __future__ import annotations


class HistoryError(Exception):
    """Base exception for command-history errors."""


class ConfigError(HistoryError):
    """Raised when a configuration value cannot be used."""


class SessionContextError(HistoryError):
    """Raised when input is submitted without an active session."""
