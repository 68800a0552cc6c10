"""Optional YAML settings for the command line tool.

Example::

    log_level: INFO
    log_file: logs/file-tools.log
    buffer_size: 4M
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from .size_spec import SizeSpecError, parse_size
from .splitter import DEFAULT_BUFFER_SIZE

__all__ = ["ConfigError", "Settings", "load_settings"]

_KNOWN_KEYS = {"log_level", "log_file", "buffer_size"}


class ConfigError(Exception):
    """Raised when the settings file is invalid."""


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.WARNING
    log_file: Path | None = None
    buffer_size: int = DEFAULT_BUFFER_SIZE


def _resolve_path(value: str | Path, base: Path) -> Path:
    path = Path(value)
    if not path.is_absolute():
        path = (base / path).resolve()
    return path


def _parse_log_level(value: object) -> int:
    if isinstance(value, str):
        level = logging.getLevelName(value.strip().upper())
        if isinstance(level, int):
            return level
    raise ConfigError(f"Unknown log_level {value!r}.")


def _parse_buffer_size(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ConfigError(f"buffer_size must be a size such as 64K, got {value!r}.")
    try:
        return parse_size(str(value))
    except SizeSpecError as exc:
        raise ConfigError(f"Invalid buffer_size: {exc}") from exc


def _parse_settings(raw: dict, base_path: Path) -> Settings:
    unknown = sorted(str(key) for key in raw if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Unknown setting(s): {', '.join(unknown)}.")

    defaults = Settings()
    log_file = raw.get("log_file")
    if log_file is not None and not isinstance(log_file, str):
        raise ConfigError(f"log_file must be a path, got {log_file!r}.")
    return Settings(
        log_level=_parse_log_level(raw["log_level"]) if "log_level" in raw else defaults.log_level,
        log_file=_resolve_path(log_file, base_path) if log_file else None,
        buffer_size=(
            _parse_buffer_size(raw["buffer_size"]) if "buffer_size" in raw else defaults.buffer_size
        ),
    )


def load_settings(config_path: Path | None) -> Settings:
    """Load settings from ``config_path``; ``None`` yields the defaults."""
    if config_path is None:
        return Settings()

    config_path = config_path.resolve()
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigError(f"Configuration file not found: {config_path}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration file {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Unable to parse YAML: {exc}") from exc

    if raw is None:
        return Settings()
    if not isinstance(raw, dict):
        raise ConfigError("Configuration must be a mapping.")
    return _parse_settings(raw, config_path.parent)
