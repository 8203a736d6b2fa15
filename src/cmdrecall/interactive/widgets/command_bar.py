"""Command input bar feeding the session host."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, Static


class CommandBar(Widget):
    """Single-line command input with a prompt label."""

    DEFAULT_CSS = """
    CommandBar {
        height: 3;
    }

    #command-bar-container {
        height: 3;
    }

    #prompt {
        width: auto;
        padding: 1 1 0 0;
    }
    """

    def compose(self) -> ComposeResult:
        with Horizontal(id="command-bar-container"):
            yield Static("recall>", id="prompt")
            yield Input(placeholder="Enter a command (ctrl+r for history)", id="command-input")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.post_message(self.CommandSubmitted(event.value))
        event.input.value = ""

    def insert(self, text: str) -> None:
        """Replace the input text with ``text`` and focus it."""
        cmd_input = self.query_one("#command-input", Input)
        cmd_input.value = text
        cmd_input.cursor_position = len(text)
        cmd_input.focus()

    class CommandSubmitted(Message):
        """Message sent when command is submitted."""

        def __init__(self, command: str) -> None:
            super().__init__()
            self.command = command
