"""
Todomvc - Logging Module
Provides centralized logging functionality for the store and its callers.
"""
import sys
from datetime import datetime

from utils import conf

first_line = True

# =============================================================================
# LOGGING
# =============================================================================

def todo_log(message: str) -> None:
    """Append log message to todo.log if logging is enabled."""
    global first_line
    if not conf.LOG_ENABLED:
        return
    if first_line:
        first_line = False
        todo_log("--- New Todomvc Session ---")
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    log_line = f"[{timestamp}] {message}\n"
    if conf.LOG_TO_STDERR:
        sys.stderr.write(log_line)
    conf.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
    with open(conf.LOG_FILE, "a", encoding="utf-8") as f:
        f.write(log_line)


def todo_log_print() -> None:
    """Print the contents of the log file to stdout."""
    if conf.LOG_FILE.exists():
        log_contents = conf.LOG_FILE.read_text(encoding="utf-8")
        if log_contents:
            print(log_contents, end="")
        else:
            print("[Todomvc Log is empty]")
    else:
        print("[Todomvc Log file does not exist]")


def todo_log_clear() -> None:
    """Delete the log file."""
    if conf.LOG_FILE.exists():
        conf.LOG_FILE.unlink()
