"""Exception types raised by slashglob."""

from __future__ import annotations


class GlobError(Exception):
    """Base class for all slashglob errors."""


class PatternError(GlobError, ValueError):
    """A glob pattern that cannot be decomposed into path segments."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid glob pattern {pattern!r}: {reason}")
        self.pattern: str = pattern
        self.reason: str = reason


class GlobAccessError(GlobError, OSError):
    """
    A directory could not be read while resolving a pattern, for reasons other
    than it not existing (e.g. missing permissions). The original `OSError` is
    chained as `__cause__`.
    """

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(cause.errno, f"Cannot read directory {path!r}: {cause.strerror or cause}")
        self.path: str = path


class ConfigError(GlobError):
    """A config file exists but could not be parsed."""
