import os
from pathlib import Path

import pytest


@pytest.fixture
def isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point global config at tmp_path and run from a clean working dir."""
    config_home = tmp_path / "xdg"
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.chdir(workdir)
    for key in list(os.environ):
        if key.startswith("CMDRECALL_"):
            monkeypatch.delenv(key)
    return tmp_path
