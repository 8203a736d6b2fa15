"""Configuration loader for cmd-recall (global + project with TOML-based defaults)."""

from __future__ import annotations

import os
import platform
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for Python <3.11
    import tomli as tomllib  # type: ignore

from .history.errors import ConfigError
from .history.filters import PatternRule


class ConfigLoader:
    """
    Handles configuration loading from multiple sources with priority resolution.

    Priority (highest → lowest):
    1. Command-line arguments (not handled here)
    2. Environment variables (CMDRECALL_<SECTION>__<KEY>)
    3. Project config (.cmdrecall/config.toml)
    4. Global config (~/.config/cmdrecall/config.toml)
    5. Built-in defaults
    """

    ENV_PREFIX = "CMDRECALL_"

    def __init__(self) -> None:
        self.global_dir = self.get_global_config_dir()
        self.project_dir = self.get_project_config_dir()

        self.config: Dict[str, Any] = {}

        self._load_all()

    # ------------------------------------------------------------------ #
    # Public getters
    # ------------------------------------------------------------------ #
    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by dot-separated key."""
        keys = key.split(".")
        value: Any = self.config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
        return value if value is not None else default

    # ------------------------------------------------------------------ #
    # Load/merge helpers
    # ------------------------------------------------------------------ #
    def _load_all(self) -> None:
        """Load all configuration files with proper priority."""
        self.config = self._get_default_config()
        self._load_global_config()

        if self.project_dir:
            self._load_project_config()

        self._apply_env_overrides()

    def _load_global_config(self) -> None:
        """Load global configuration, writing defaults on first run."""
        config_file = self.global_dir / "config.toml"
        if config_file.exists():
            self._deep_merge(self.config, self._read_toml(config_file))
        else:
            self._create_default_config()

    def _load_project_config(self) -> None:
        """Load project-specific config and merge with global."""
        config_file = self.project_dir / "config.toml"
        if config_file.exists():
            self._deep_merge(self.config, self._read_toml(config_file))

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides (CMDRECALL_HISTORY__MAX_SIZE=...)."""
        for key, value in os.environ.items():
            if not key.startswith(self.ENV_PREFIX):
                continue
            config_key = key[len(self.ENV_PREFIX) :].lower().replace("__", ".")
            self._set_nested(self.config, config_key, value)

    @staticmethod
    def _read_toml(path: Path) -> Dict[str, Any]:
        try:
            with open(path, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    # ------------------------------------------------------------------ #
    # Static paths/helpers
    # ------------------------------------------------------------------ #
    @staticmethod
    def get_global_config_dir() -> Path:
        """Get platform-specific global config directory following XDG spec."""
        system = platform.system()
        if system == "Windows":
            base = Path(os.environ.get("APPDATA", "~\\AppData\\Roaming")).expanduser()
        elif system == "Darwin":
            xdg = os.environ.get("XDG_CONFIG_HOME")
            base = Path(xdg) if xdg else Path.home() / ".config"
        else:
            base = Path(os.environ.get("XDG_CONFIG_HOME", "~/.config")).expanduser()
        return base / "cmdrecall"

    @staticmethod
    def get_project_config_dir() -> Path | None:
        """Find .cmdrecall directory in current or parent directories."""
        current = Path.cwd()
        for parent in [current] + list(current.parents):
            config_dir = parent / ".cmdrecall"
            if config_dir.is_dir():
                return config_dir
        return None

    # ------------------------------------------------------------------ #
    # Default content
    # ------------------------------------------------------------------ #
    def _create_default_config(self) -> None:
        self.global_dir.mkdir(parents=True, exist_ok=True)
        config_file = self.global_dir / "config.toml"
        with open(config_file, "w", encoding="utf-8") as f:
            f.write(self._get_default_config_toml())

    def _get_default_config(self) -> Dict[str, Any]:
        """Built-in defaults."""
        return {
            "general": {
                "log_file": str(self.global_dir / "cmdrecall.log"),
            },
            "history": {
                "file": str(self.global_dir / "history"),
                "max_size": 500,
                "left_trim": True,
                "right_trim": True,
            },
            "filters": {
                "patterns": [],
                "reject_multiline": True,
            },
        }

    def _get_default_config_toml(self) -> str:
        """Default config TOML text for first-run creation."""
        default = self._get_default_config()
        return "\n".join(
            [
                "[general]",
                "# Set to an empty string to disable the event log.",
                f'log_file = "{_toml_path(default["general"]["log_file"])}"',
                "",
                "[history]",
                f'file = "{_toml_path(default["history"]["file"])}"',
                "max_size = 500",
                "left_trim = true",
                "right_trim = true",
                "",
                "[filters]",
                "# Commands matching any of these regular expressions are not recorded.",
                "patterns = []",
                "reject_multiline = true",
                "",
            ]
        )

    # ------------------------------------------------------------------ #
    # Utility helpers
    # ------------------------------------------------------------------ #
    def _deep_merge(self, base: dict, override: dict) -> None:
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _set_nested(self, d: dict, path: str, value: Any) -> None:
        keys = path.split(".")
        for key in keys[:-1]:
            d = d.setdefault(key, {})
        d[keys[-1]] = value


def _toml_path(value: str) -> str:
    return value.replace("\\", "\\\\")


# --- Typed settings ---


@dataclass
class HistorySettings:
    """Resolved, validated history settings."""

    history_file: Path
    max_size: int = 500
    left_trim: bool = True
    right_trim: bool = True
    patterns: List[str] = field(default_factory=list)
    reject_multiline: bool = True
    log_file: Optional[Path] = None

    @classmethod
    def from_config(cls, loader: ConfigLoader) -> "HistorySettings":
        """Coerce raw config values (env overrides arrive as strings)."""
        patterns = _as_list(loader.get("filters.patterns", []), "filters.patterns")
        for pattern in patterns:
            try:
                PatternRule(pattern).validate()
            except re.error as exc:
                raise ConfigError(f"Invalid filter pattern {pattern!r}: {exc}") from exc

        log_file = loader.get("general.log_file")
        return cls(
            history_file=Path(str(loader.get("history.file"))).expanduser(),
            max_size=_as_positive_int(loader.get("history.max_size", 500), "history.max_size"),
            left_trim=_as_bool(loader.get("history.left_trim", True), "history.left_trim"),
            right_trim=_as_bool(loader.get("history.right_trim", True), "history.right_trim"),
            patterns=patterns,
            reject_multiline=_as_bool(
                loader.get("filters.reject_multiline", True), "filters.reject_multiline"
            ),
            log_file=Path(str(log_file)).expanduser() if log_file else None,
        )


def _as_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off"):
            return False
    raise ConfigError(f"{key} must be a boolean, got {value!r}")


def _as_positive_int(value: Any, key: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{key} must be a positive integer, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{key} must be a positive integer, got {value!r}") from exc
    if number < 1:
        raise ConfigError(f"{key} must be a positive integer, got {value!r}")
    return number


def _as_list(value: Any, key: str) -> List[str]:
    # A single pattern from the environment arrives as a plain string.
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, list):
        return [str(item) for item in value]
    raise ConfigError(f"{key} must be a list of strings, got {value!r}")


__all__ = ["ConfigLoader", "HistorySettings"]
