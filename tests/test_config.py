from __future__ import annotations

import logging

import pytest

from file_tools.config import ConfigError, Settings, load_settings
from file_tools.splitter import DEFAULT_BUFFER_SIZE


def test_defaults_without_file():
    settings = load_settings(None)

    assert settings == Settings()
    assert settings.log_level == logging.WARNING
    assert settings.log_file is None
    assert settings.buffer_size == DEFAULT_BUFFER_SIZE


def test_load_full_settings(tmp_path):
    config = tmp_path / "settings.yaml"
    config.write_text("log_level: debug\nlog_file: logs/run.log\nbuffer_size: 64K\n")

    settings = load_settings(config)

    assert settings.log_level == logging.DEBUG
    assert settings.log_file == (tmp_path / "logs" / "run.log").resolve()
    assert settings.buffer_size == 64 * 1024


def test_integer_buffer_size(tmp_path):
    config = tmp_path / "settings.yaml"
    config.write_text("buffer_size: 4096\n")

    assert load_settings(config).buffer_size == 4096


def test_empty_file_gives_defaults(tmp_path):
    config = tmp_path / "settings.yaml"
    config.write_text("")

    assert load_settings(config) == Settings()


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("- a\n- b\n", "must be a mapping"),
        ("colour: blue\n", "Unknown setting"),
        ("log_level: LOUD\n", "Unknown log_level"),
        ("buffer_size: 1.5M\n", "Invalid buffer_size"),
        ("buffer_size: true\n", "buffer_size must be"),
        ("log_file: 12\n", "log_file must be"),
        ("log_level: [unclosed\n", "Unable to parse YAML"),
    ],
)
def test_invalid_settings(tmp_path, content, message):
    config = tmp_path / "settings.yaml"
    config.write_text(content)

    with pytest.raises(ConfigError, match=message):
        load_settings(config)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_settings(tmp_path / "nope.yaml")
