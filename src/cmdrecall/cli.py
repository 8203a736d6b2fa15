"""cmd-recall CLI entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

import click

from . import __version__
from .config import ConfigLoader, HistorySettings
from .history.errors import ConfigError
from .history.hooks import SessionHost
from .history.session import HistorySession


def _load_settings(history_file: Optional[Path], max_size: Optional[int]) -> HistorySettings:
    """Resolve settings; command-line flags win over every config source."""
    try:
        settings = HistorySettings.from_config(ConfigLoader())
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    if history_file is not None:
        settings.history_file = history_file.expanduser()
    if max_size is not None:
        settings.max_size = max_size
    return settings


def _build_session(ctx: click.Context) -> Tuple[HistorySession, SessionHost]:
    host = SessionHost()
    return HistorySession.from_settings(ctx.obj["settings"], host), host


@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.option(
    "--history-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="History file to use (overrides history.file)",
)
@click.option(
    "--max-size",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of entries kept (overrides history.max_size)",
)
@click.pass_context
def main(ctx: click.Context, history_file: Optional[Path], max_size: Optional[int]) -> None:
    """cmd-recall - command history recorder for interactive shells."""
    ctx.ensure_object(dict)
    ctx.obj["settings"] = _load_settings(history_file, max_size)
    if ctx.invoked_subcommand is None:
        ctx.invoke(shell)


@main.command()
@click.pass_context
def shell(ctx: click.Context) -> None:
    """Start the console shell."""
    from .console_shell import ConsoleShell

    session, host = _build_session(ctx)
    ConsoleShell(session, host).run()


@main.command()
@click.pass_context
def tui(ctx: click.Context) -> None:
    """Start Textual TUI."""
    try:
        from .interactive import RecallApp
    except ImportError as exc:  # pragma: no cover - optional front end
        raise click.ClickException(f"Unable to start interactive mode: {exc}") from exc

    session, host = _build_session(ctx)
    try:
        RecallApp(session, host).run()
    finally:
        host.close()


@main.command(name="list")
@click.option("--limit", "-n", type=click.IntRange(min=1), default=None, help="Show at most N entries")
@click.pass_context
def list_entries(ctx: click.Context, limit: Optional[int]) -> None:
    """Print persisted history, most recent first."""
    session, _ = _build_session(ctx)
    session.activate()
    entries = session.search()
    if limit is not None:
        entries = entries[:limit]
    for entry in entries:
        click.echo(entry)


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("words", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_context
def add(ctx: click.Context, words: Tuple[str, ...]) -> None:
    """Record a command without running it."""
    session, _ = _build_session(ctx)
    session.activate()
    recorded = session.on_submit(" ".join(words))
    if recorded is None:
        click.echo("Rejected by filter rules; not recorded.", err=True)
        ctx.exit(1)
    session.save()


@main.command()
@click.confirmation_option(prompt="Delete the history file?")
@click.pass_context
def clear(ctx: click.Context) -> None:
    """Delete the history file."""
    session, _ = _build_session(ctx)
    path = session.history_file.path
    if not path.exists():
        click.echo(f"No history file at {path}")
        return
    session.history_file.clear()
    click.echo(f"Removed {path}")


if __name__ == "__main__":
    main()
