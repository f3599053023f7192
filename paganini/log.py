"""Console diagnostics: info, warnings, fatal errors."""

from __future__ import annotations

import sys

_BOLD_RED = "\x1b[01m\x1b[31m"
_BOLD_GREEN = "\x1b[01m\x1b[32m"
_RESET = "\x1b[0m"


class EngineError(RuntimeError):
    """Raised when the engine meets an error it cannot recover from."""


def fatal(message: str) -> None:
    """Report an unrecoverable error by raising EngineError."""
    raise EngineError(message)


def warning(message: str) -> None:
    """Print a warning line to standard output."""
    print(f"{_BOLD_RED}WARNING:{_RESET} {message}", file=sys.stdout)


def info(message: str) -> None:
    """Print an informational line to standard output."""
    print(f"{_BOLD_GREEN}INFO:{_RESET} {message}", file=sys.stdout)


def register_error(message: str, file: str, line: int) -> None:
    """Record a non-fatal error raised at a given source location."""
    print(f"ERROR: received in {file}:{line}{message}", file=sys.stdout)