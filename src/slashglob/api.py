"""
Public glob entry points.

Usage::

    from slashglob import glob

    glob("*.md")                        # ['README.md']
    glob("./src/**/*.py")               # ['./src/slashglob/api.py', ...]
    glob("**/", ignore="node_modules")  # every directory, with trailing slash
"""

from __future__ import annotations

import dataclasses
import logging
import os
from collections.abc import Iterator
from typing import Any

from slashglob.filesystem import FileSystem
from slashglob.ignore import filter_ignored
from slashglob.resolver import GlobResolver
from slashglob.translate import translate
from slashglob.types import GlobOptions

logger = logging.getLogger(__name__)


def glob(
    pattern: str,
    options: GlobOptions | None = None,
    *,
    cwd: str | os.PathLike[str] | None = None,
    **kwargs: Any,
) -> list[str]:
    """
    Resolve a slash-style glob pattern and return the sorted list of matching
    paths. Relative patterns are resolved against `cwd` (default: the current
    working directory, captured once per call) and yield relative paths.

    Options may be given as a `GlobOptions` and/or as keyword arguments
    (`dot`, `globstar`, `ignore`, `ignore_errors`), keywords taking precedence.
    A pattern that matches nothing yields an empty list.
    """
    options = options or GlobOptions()
    if kwargs:
        options = dataclasses.replace(options, **kwargs)

    translated = translate(pattern, options)
    if translated.is_negated:
        logger.warning(
            "Ignoring leading '!' in %r: use the ignore option to exclude paths", pattern
        )

    resolver = GlobResolver(FileSystem(cwd), options)
    result: list[str] = []
    for segments in translated.patterns:
        paths = resolver.resolve(segments)
        if paths is not None:
            result.extend(paths)

    if options.ignore is not None:
        result = filter_ignored(result, options.ignore_patterns)
    result.sort()
    logger.debug("Pattern %r matched %d path(s)", pattern, len(result))
    return result


def iglob(
    pattern: str,
    options: GlobOptions | None = None,
    *,
    cwd: str | os.PathLike[str] | None = None,
    **kwargs: Any,
) -> Iterator[str]:
    """Like `glob()`, but yields the sorted matches one by one."""
    yield from glob(pattern, options, cwd=cwd, **kwargs)
