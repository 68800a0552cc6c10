from __future__ import annotations

import logging
import random
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    monkeypatch.delenv("FILE_TOOLS_CONFIG", raising=False)
    yield
    logger = logging.getLogger("file_tools")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def make_source(tmp_path):
    """Write a file of ``size`` seeded random bytes and return its path."""

    def _make(size: int, name: str = "test.txt") -> Path:
        path = tmp_path / name
        path.write_bytes(random.Random(42).randbytes(size))
        return path

    return _make
