"""Pytest fixtures shared by the todomvc test suite."""

import pytest

from todo_store import MemoryKeyVal
from utils import conf


@pytest.fixture(autouse=True)
def isolated_log(tmp_path, monkeypatch):
    """Send todo_log output to a per-test file instead of the user's home."""
    log_file = tmp_path / "logs" / "todo.log"
    monkeypatch.setattr(conf, "LOG_FILE", log_file)
    monkeypatch.setattr(conf, "LOG_TO_STDERR", False)
    monkeypatch.setattr(conf, "LOG_ENABLED", True)
    yield log_file


@pytest.fixture
def memory_kv():
    """Empty in-memory key/value store."""
    return MemoryKeyVal()
