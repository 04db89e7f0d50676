"""Todomvc - Central path configuration."""

import os
from pathlib import Path

USER_HOME = Path.home()
TODO_HOME = Path(os.environ.get("TODOMVC_HOME", USER_HOME / ".todomvc")).expanduser()

STORE_FILE = TODO_HOME / "store.json"
LOG_FILE = TODO_HOME / "todo.log"

DEFAULT_COLLECTION = "todos"

LOG_ENABLED = os.environ.get("TODOMVC_LOG", "1").lower() not in ("0", "false", "off")
LOG_TO_STDERR = True  # Use stderr so logs don't pollute rendered output on stdout


def get_store_file(home: Path | None = None) -> Path:
    """Return the key/value file for a todomvc home directory.

    Path: <home>/store.json
    Creates the directory if it doesn't exist.
    """
    base = home if home is not None else TODO_HOME
    base.mkdir(parents=True, exist_ok=True)
    return base / STORE_FILE.name
