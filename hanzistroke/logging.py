"""Debug logging for the command line tool."""

import sys

# Module-level state
_DEBUG = False


def set_debug(enabled: bool) -> None:
    """Turn debug output on or off for the whole process."""
    global _DEBUG
    _DEBUG = bool(enabled)


def is_debug() -> bool:
    return _DEBUG


def log_debug(message: str) -> None:
    """Print a debug message to stderr if debugging is enabled."""
    if _DEBUG:
        print(f"[debug] {message}", file=sys.stderr)
