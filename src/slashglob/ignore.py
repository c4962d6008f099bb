"""Ignore filtering: `ignore` option patterns and `.slashglobignore` files."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pathspec

from slashglob.translate import get_matcher, translate

IGNORE_FILE_NAME = ".slashglobignore"


def filter_ignored(paths: list[str], ignore: str | Sequence[str]) -> list[str]:
    """
    Remove all paths matching the ignore pattern(s). Each pattern is applied
    in turn. A negated pattern (`!x`) instead removes everything that does
    not match `x`.
    """
    if isinstance(ignore, str):
        ignore = [ignore]
    for pattern in ignore:
        translated = translate(pattern)
        keep = get_matcher(translated.patterns, negate=not translated.is_negated)
        paths = [p for p in paths if keep(p)]
    return paths


def _read_ignore_file(path: Path) -> list[str]:
    lines = path.read_text().splitlines()
    return [line for line in lines if line.strip() and not line.strip().startswith("#")]


def load_ignore_file(start_dir: Path, name: str = IGNORE_FILE_NAME) -> pathspec.PathSpec | None:
    """
    Walk up from `start_dir` looking for an ignore file in gitignore syntax.
    Returns a compiled `PathSpec` from the first one found, or `None`.
    """
    current = start_dir.resolve()
    while True:
        candidate = current / name
        if candidate.is_file():
            lines = _read_ignore_file(candidate)
            if lines:
                return pathspec.PathSpec.from_lines("gitignore", lines)
            return None
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def filter_ignore_spec(paths: list[str], spec: pathspec.PathSpec) -> list[str]:
    """Remove paths matched by a gitignore-style `PathSpec`."""
    return [p for p in paths if not spec.match_file(p)]
