"""Terminal output: ANSI styling and stderr status lines."""

from __future__ import annotations

import os
import sys

_ANSI_CODES = {"bold": 1, "dim": 2, "red": 31, "green": 32, "yellow": 33}


def colorize(text: str, style: str) -> str:
    """Wrap ``text`` in an ANSI style; plain when piped or NO_COLOR is set."""
    code = _ANSI_CODES.get(style)
    if code is None or "NO_COLOR" in os.environ or not sys.stdout.isatty():
        return str(text)
    return f"\033[{code}m{text}\033[0m"


def log(msg: str) -> None:
    print(colorize(msg, "dim"), file=sys.stderr)


def print_error(msg: str) -> None:
    print(colorize(f"Error: {msg}", "red"), file=sys.stderr)


__all__ = ["colorize", "log", "print_error"]
