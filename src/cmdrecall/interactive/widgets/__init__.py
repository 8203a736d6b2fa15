"""Interactive mode widgets."""

from .command_bar import CommandBar
from .history_picker import HistoryPickerModal
from .output_panel import OutputPanel

__all__ = [
    "CommandBar",
    "HistoryPickerModal",
    "OutputPanel",
]
