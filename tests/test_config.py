from pathlib import Path

import pytest

from cmdrecall.config import ConfigLoader, HistorySettings
from cmdrecall.history.errors import ConfigError


def test_defaults_and_first_run_file(isolated: Path) -> None:
    loader = ConfigLoader()
    settings = HistorySettings.from_config(loader)

    assert settings.max_size == 500
    assert settings.left_trim is True
    assert settings.right_trim is True
    assert settings.patterns == []
    assert settings.reject_multiline is True
    assert settings.history_file == isolated / "xdg" / "cmdrecall" / "history"
    assert settings.log_file == isolated / "xdg" / "cmdrecall" / "cmdrecall.log"
    assert (isolated / "xdg" / "cmdrecall" / "config.toml").exists()

    # The generated file parses back to the same settings.
    again = HistorySettings.from_config(ConfigLoader())
    assert again == settings


def test_project_config_overrides_global(isolated: Path) -> None:
    global_dir = isolated / "xdg" / "cmdrecall"
    global_dir.mkdir(parents=True)
    (global_dir / "config.toml").write_text(
        "[history]\nmax_size = 100\nleft_trim = false\n", encoding="utf-8"
    )
    project_dir = isolated / "work" / ".cmdrecall"
    project_dir.mkdir()
    (project_dir / "config.toml").write_text(
        '[history]\nmax_size = 50\n\n[filters]\npatterns = ["^secret", "password"]\n',
        encoding="utf-8",
    )

    settings = HistorySettings.from_config(ConfigLoader())
    assert settings.max_size == 50
    assert settings.left_trim is False
    assert settings.patterns == ["^secret", "password"]


def test_env_overrides(isolated: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CMDRECALL_HISTORY__MAX_SIZE", "25")
    monkeypatch.setenv("CMDRECALL_HISTORY__RIGHT_TRIM", "no")
    monkeypatch.setenv("CMDRECALL_FILTERS__PATTERNS", "^sudo")
    monkeypatch.setenv("CMDRECALL_GENERAL__LOG_FILE", "")

    settings = HistorySettings.from_config(ConfigLoader())
    assert settings.max_size == 25
    assert settings.right_trim is False
    assert settings.patterns == ["^sudo"]
    assert settings.log_file is None


@pytest.mark.parametrize(
    "key, value",
    [
        ("CMDRECALL_HISTORY__MAX_SIZE", "0"),
        ("CMDRECALL_HISTORY__MAX_SIZE", "many"),
        ("CMDRECALL_HISTORY__LEFT_TRIM", "maybe"),
        ("CMDRECALL_FILTERS__PATTERNS", "([bad"),
    ],
)
def test_invalid_values_raise_config_error(
    isolated: Path, monkeypatch: pytest.MonkeyPatch, key: str, value: str
) -> None:
    monkeypatch.setenv(key, value)
    with pytest.raises(ConfigError):
        HistorySettings.from_config(ConfigLoader())


def test_invalid_toml_raises_config_error(isolated: Path) -> None:
    global_dir = isolated / "xdg" / "cmdrecall"
    global_dir.mkdir(parents=True)
    (global_dir / "config.toml").write_text("[history\nmax_size = ", encoding="utf-8")
    with pytest.raises(ConfigError):
        ConfigLoader()


def test_get_dotted_keys(isolated: Path) -> None:
    loader = ConfigLoader()
    assert loader.get("history.max_size") == 500
    assert loader.get("history.missing", "fallback") == "fallback"
    assert loader.get("history.max_size.deeper", "fallback") == "fallback"
