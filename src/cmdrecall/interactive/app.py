"""Textual application hosting a history session."""

from __future__ import annotations

import asyncio
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer

from ..history.hooks import SessionHost
from ..history.session import HistorySession
from .widgets import CommandBar, HistoryPickerModal, OutputPanel


class RecallApp(App):
    """Command prompt TUI with a history picker."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #output-panel {
        height: 1fr;
        border: tall $primary;
        padding: 0;
    }
    """

    BINDINGS = [
        Binding("ctrl+r", "pick_history", "History"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, session: HistorySession, host: SessionHost, run_commands: bool = True, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.session = session
        self.host = host
        self.run_commands = run_commands

    def compose(self) -> ComposeResult:
        self.output_panel = OutputPanel(id="output-panel")
        self.command_bar = CommandBar(id="command-bar")
        yield self.output_panel
        yield self.command_bar
        yield Footer()

    def on_mount(self) -> None:
        self.session.activate()
        self.output_panel.write_line(f"History file: {self.session.history_file.path}", style="dim")
        self.output_panel.write_line(f"{len(self.session.search())} entries loaded. ctrl+r to browse.", style="dim")

    def on_command_bar_command_submitted(self, event: CommandBar.CommandSubmitted) -> None:
        self.host.submit(event.command)
        command = event.command.strip()
        if not command:
            return
        self.output_panel.write_command(command)
        if self.run_commands:
            self.run_worker(self._run_command(command), group="commands")

    async def _run_command(self, command: str) -> None:
        process = await asyncio.create_subprocess_shell(
            command,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT,
        )
        stdout, _ = await process.communicate()
        for line in stdout.decode(errors="replace").splitlines():
            self.output_panel.write_line(line)
        if process.returncode:
            self.output_panel.write_warning(f"[exit {process.returncode}]")

    def action_pick_history(self) -> None:
        self.push_screen(HistoryPickerModal(self.session.search()), self._insert_picked)

    def _insert_picked(self, entry: Optional[str]) -> None:
        if entry:
            self.command_bar.insert(entry)
