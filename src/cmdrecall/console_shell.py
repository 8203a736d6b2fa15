"""Plain console shell that records submitted commands."""

from __future__ import annotations

import subprocess
from typing import Callable, Optional

try:
    import readline  # type: ignore
except ImportError:  # pragma: no cover - platform dependent
    readline = None

import click

from .history.hooks import SessionHost
from .history.session import HistorySession


class ConsoleShell:
    """Line-oriented shell loop backed by a history session."""

    def __init__(
        self,
        session: HistorySession,
        host: SessionHost,
        read_line: Callable[[str], str] = input,
        execute: Optional[Callable[[str], int]] = None,
    ) -> None:
        self.session = session
        self.host = host
        self.read_line = read_line
        self.execute = execute or self._run_command

    def run(self) -> None:
        """Start the shell. Returns when the user exits."""
        self._print_header()
        self.session.activate()
        try:
            self._loop()
        finally:
            self.host.close()

    def _loop(self) -> None:
        while True:
            self._sync_readline()
            try:
                line = self.read_line(self._prompt_label())
            except (KeyboardInterrupt, EOFError):
                click.echo("\nExiting.")
                return

            command = line.strip()
            # Slash commands drive the shell itself and are not recorded.
            if command.startswith("/"):
                if not self._handle_command(command):
                    return
                continue

            self.host.submit(line)
            if not command:
                continue

            returncode = self.execute(command)
            if returncode:
                click.echo(self._color(f"[exit {returncode}]", "warning"))

    def _handle_command(self, command: str) -> bool:
        """Handle slash commands. Returns False to exit loop."""
        name, _, arg = command.partition(" ")
        if name in ("/exit", "/quit"):
            return False
        if name == "/history":
            self._print_history(arg.strip())
            return True
        click.echo(self._color(f"Unknown command: {name} (try /history or /exit)", "warning"))
        return True

    def _print_history(self, arg: str) -> None:
        entries = self.session.search()
        if arg:
            try:
                entries = entries[: max(int(arg), 0)]
            except ValueError:
                click.echo(self._color(f"Not a number: {arg}", "warning"))
                return
        if not entries:
            click.echo(self._muted("(history is empty)"))
            return
        for index, entry in enumerate(entries, start=1):
            click.echo(f"{self._muted(f'{index:>4}')}  {entry}")

    @staticmethod
    def _run_command(command: str) -> int:
        return subprocess.run(command, shell=True).returncode

    def _sync_readline(self) -> None:
        """Mirror the session history into readline, oldest first."""
        if readline is None:
            return
        readline.clear_history()
        for entry in reversed(self.session.search()):
            readline.add_history(entry)

    # Display helpers
    @staticmethod
    def _color(text: str, style: str) -> str:
        palette = {
            "primary": "bright_green",
            "accent": "bright_cyan",
            "muted": "bright_black",
            "warning": "bright_yellow",
        }
        return click.style(text, fg=palette.get(style, "white"))

    def _muted(self, text: str) -> str:
        return self._color(text, "muted")

    def _prompt_label(self) -> str:
        return self._color("recall> ", "accent")

    def _print_header(self) -> None:
        border = self._muted("=" * 60)
        title = click.style(self._color("cmd-recall shell", "primary"), bold=True)
        path = self._color(f"history: {self.session.history_file.path}", "accent")
        click.echo(f"{border}\n{title}  [{path}]\n{border}")
        click.echo(self._muted("Type /history to list entries, /exit or Ctrl+D to leave."))
