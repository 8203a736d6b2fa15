from pathlib import Path
from typing import List

from cmdrecall.console_shell import ConsoleShell
from cmdrecall.history.hooks import SessionHost
from cmdrecall.history.persistence import HistoryFile
from cmdrecall.history.session import HistorySession
from cmdrecall.history.store import HistoryStore


def _scripted(lines: List[str]):
    pending = list(lines)

    def read_line(prompt: str) -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    return read_line


def _shell(tmp_path: Path, lines: List[str], executed: List[str]):
    host = SessionHost()
    session = HistorySession(host, HistoryStore(10), HistoryFile(tmp_path / "history", 10))

    def execute(command: str) -> int:
        executed.append(command)
        return 0

    return ConsoleShell(session, host, read_line=_scripted(lines), execute=execute), session


def test_lines_are_recorded_executed_and_saved(tmp_path: Path) -> None:
    executed: List[str] = []
    shell, session = _shell(tmp_path, ["  ls -la\n", "", "pwd", "ls -la"], executed)
    shell.run()

    assert executed == ["ls -la", "pwd", "ls -la"]
    assert session.search() == ["ls -la", "pwd"]
    assert HistoryFile(tmp_path / "history").load() == ["ls -la", "pwd"]


def test_history_command_lists_entries(tmp_path: Path, capsys) -> None:
    executed: List[str] = []
    shell, _ = _shell(tmp_path, ["echo one", "echo two", "/history 1", "/exit"], executed)
    shell.run()

    lines = capsys.readouterr().out.splitlines()
    assert "   1  echo two" in lines
    assert not any(line.startswith("   2  ") for line in lines)
    assert executed == ["echo one", "echo two"]


def test_unknown_slash_command(tmp_path: Path, capsys) -> None:
    shell, _ = _shell(tmp_path, ["/nope"], [])
    shell.run()
    assert "Unknown command: /nope" in capsys.readouterr().out


def test_slash_commands_are_not_recorded(tmp_path: Path) -> None:
    shell, session = _shell(tmp_path, ["pwd", "/history", "/exit"], [])
    shell.run()

    assert session.search() == ["pwd"]
    assert HistoryFile(tmp_path / "history").load() == ["pwd"]
