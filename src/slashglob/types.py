"""Segment and option types shared by the translator and the resolver."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Literal:
    """A path component that must match an entry name exactly."""

    text: str


@dataclass(frozen=True)
class Wildcard:
    """A path component matched against entry names with a compiled regex."""

    regex: re.Pattern[str]
    source: str = field(default="", compare=False)

    def matches(self, name: str) -> bool:
        return self.regex.fullmatch(name) is not None


class Globstar:
    """Zero or more path components, recursively. Use the `GLOBSTAR` singleton."""

    _instance: Globstar | None = None

    def __new__(cls) -> Globstar:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "GLOBSTAR"


GLOBSTAR = Globstar()

Segment = Union[Literal, Wildcard, Globstar]


@dataclass(frozen=True)
class TranslatedPattern:
    """
    Result of translating a glob string: one segment sequence per brace
    alternative, and whether the pattern carried a leading `!`.
    """

    patterns: list[tuple[Segment, ...]]
    is_negated: bool = False


@dataclass(frozen=True)
class GlobOptions:
    """
    Options for glob resolution.

    `dot` lets wildcards match names starting with `.`. `globstar=False` makes
    `**` an ordinary wildcard confined to one path component. `ignore` is one
    pattern or a list of patterns whose matches are dropped from the result.
    `ignore_errors` turns unreadable directories into "no match" instead of
    raising `GlobAccessError`.
    """

    dot: bool = False
    globstar: bool = True
    ignore: str | list[str] | None = None
    ignore_errors: bool = False

    @property
    def ignore_patterns(self) -> list[str]:
        """The `ignore` option normalized to a list."""
        if self.ignore is None:
            return []
        if isinstance(self.ignore, str):
            return [self.ignore]
        return list(self.ignore)
