"""Interactive Textual front end."""

from .app import RecallApp

__all__ = ["RecallApp"]
