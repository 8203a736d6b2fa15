"""Output panel widget for command output."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import RichLog


class OutputPanel(Widget):
    """Scrolling log of submitted commands and their output."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.border_title = "Output"

    def compose(self) -> ComposeResult:
        yield RichLog(id="output-log", markup=False, auto_scroll=True)

    def write_line(self, text: str, style: str | None = None) -> None:
        log = self.query_one("#output-log", RichLog)
        log.write(Text(text, style=style or ""))

    def write_command(self, command: str) -> None:
        self.write_line(f"$ {command}", style="bold cyan")

    def write_warning(self, message: str) -> None:
        self.write_line(message, style="bold yellow")

    def clear(self) -> None:
        self.query_one("#output-log", RichLog).clear()
