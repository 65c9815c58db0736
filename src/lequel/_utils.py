"""Internal shared utilities for lequel."""

from __future__ import annotations

#: Default maximum number of text lines examined when building a profile.
DEFAULT_MAX_LINES: int = 2000

#: Default number of trigrams kept per reference language profile.
DEFAULT_MAX_TRIGRAMS: int = 1000

#: Default maximum number of bytes read from a file or stdin.
DEFAULT_MAX_BYTES: int = 200_000


def _validate_positive_int(value: int, name: str) -> None:
    """Raise ValueError if *value* is not a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        msg = f"{name} must be a positive integer"
        raise ValueError(msg)


def _validate_max_lines(max_lines: int | None) -> None:
    """Raise ValueError unless *max_lines* is ``None`` or a positive integer."""
    if max_lines is not None:
        _validate_positive_int(max_lines, "max_lines")
