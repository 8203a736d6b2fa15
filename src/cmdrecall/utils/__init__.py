"""Utility helpers."""

from .logger import HistoryLogger

__all__ = ["HistoryLogger"]
