"""
GlobResolver — resolves one translated segment sequence against the filesystem.

The sequence is split into its literal prefix and the remainder starting at the
first wildcard. A purely literal path is checked for existence directly; anything
else is resolved by walking the matching directories one component at a time,
with `**` expanding to every descendant of the directory it's applied to.
"""

from __future__ import annotations

import errno
import logging
from collections.abc import Sequence

from slashglob.errors import GlobAccessError
from slashglob.filesystem import SEPARATOR, FileSystem, join
from slashglob.types import Globstar, GlobOptions, Literal, Segment, Wildcard

logger = logging.getLogger(__name__)

# Listing errors that just mean the directory went away (or never was one).
_MISSING_ERRNOS = frozenset({errno.ENOENT, errno.ENOTDIR})


def split_prefix(segments: Sequence[Segment]) -> tuple[list[Literal], list[Segment]]:
    """Split `segments` into its leading run of literals and the rest."""
    idx = 0
    while idx < len(segments) and isinstance(segments[idx], Literal):
        idx += 1
    prefix = [s for s in segments[:idx] if isinstance(s, Literal)]
    return prefix, list(segments[idx:])


def _join_prefix(prefix: Sequence[Literal], has_remainder: bool) -> str:
    path = SEPARATOR.join(s.text for s in prefix)
    if not path and has_remainder and len(prefix) == 1:
        # An absolute pattern whose first wildcard is directly below the root.
        return SEPARATOR
    return path


class GlobResolver:
    """
    Resolves segment sequences against a `FileSystem`.

    One instance serves all alternatives of a single `glob()` call; it keeps no
    state between calls to `resolve()`.
    """

    def __init__(self, fs: FileSystem, options: GlobOptions) -> None:
        self._fs: FileSystem = fs
        self._options: GlobOptions = options

    def resolve(self, segments: Sequence[Segment]) -> list[str] | None:
        """
        Return the paths matching `segments`, or `None` if a purely literal
        sequence names nothing on disk.
        """
        prefix, remainder = split_prefix(segments)
        path = _join_prefix(prefix, bool(remainder))
        if not remainder:
            return self._resolve_string_path(path)
        result: list[str] = []
        self._walk(path, remainder, result)
        return result

    def _resolve_string_path(self, path: str) -> list[str] | None:
        """
        Check a literal path. A trailing slash additionally requires the path
        to be a directory.
        """
        if not self._fs.exists(path):
            return None
        if path.endswith(SEPARATOR) and not self._fs.is_dir(path):
            return None
        return [path]

    def _walk(self, prefix: str, remainder: list[Segment], result: list[str]) -> None:
        """
        Consume `remainder` one path component at a time, starting in the
        directory `prefix`, and append complete matches to `result`.
        """
        stack: list[tuple[str, list[Segment]]] = [(prefix, remainder)]
        while stack:
            current, segments = stack.pop()
            if not self._fs.exists(current) or not self._fs.is_dir(current):
                logger.debug("Pruning %r: not a directory", current)
                continue

            pattern = segments[0]
            rest = segments[1:]
            limit_to_dirs = len(rest) == 1 and rest[0] == Literal("")
            is_finished = limit_to_dirs or not rest

            if isinstance(pattern, Globstar):
                candidates = self._expand_globstar(current, limit_to_dirs)
                if not current and not is_finished:
                    # Zero-descent match of the working directory: `**/*` covers its entries.
                    candidates.append(current)
            else:
                candidates = [
                    join(current, name)
                    for name in self._list(current)
                    if self._name_matches(pattern, name)
                    and (not limit_to_dirs or self._fs.is_dir(join(current, name)))
                ]

            if limit_to_dirs:
                candidates = [c + SEPARATOR for c in candidates]
            if is_finished:
                result.extend(candidates)
            else:
                stack.extend((candidate, list(rest)) for candidate in candidates)

    def _expand_globstar(self, root: str, limit_to_dirs: bool) -> list[str]:
        """
        Every path below `root` at any depth, plus `root` itself when it is
        non-empty. Symbolic links are listed but never descended into, and
        dot entries are skipped unless the `dot` option is set.
        """
        found: list[str] = []
        pending = [root]
        while pending:
            relative_path = pending.pop()
            is_dir = self._fs.is_dir(relative_path)
            if relative_path and (not limit_to_dirs or is_dir):
                found.append(relative_path)
            if is_dir and not self._fs.is_link(relative_path):
                pending.extend(
                    join(relative_path, name)
                    for name in self._list(relative_path)
                    if self._options.dot or not name.startswith(".")
                )
        return found

    @staticmethod
    def _name_matches(pattern: Segment, name: str) -> bool:
        if isinstance(pattern, Wildcard):
            return pattern.matches(name)
        if isinstance(pattern, Literal):
            return pattern.text == name
        return False

    def _list(self, path: str) -> list[str]:
        """
        List a directory. A directory that vanished yields no entries; other
        failures raise `GlobAccessError` unless `ignore_errors` is set.
        """
        try:
            return self._fs.list(path)
        except OSError as e:
            if e.errno in _MISSING_ERRNOS:
                return []
            if self._options.ignore_errors:
                logger.debug("Skipping unreadable directory %r: %s", path, e)
                return []
            raise GlobAccessError(path or ".", e) from e
