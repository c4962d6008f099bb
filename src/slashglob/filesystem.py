"""
Filesystem access for glob resolution.

All paths handled here are slash-style strings, relative paths are resolved
against the working directory the `FileSystem` was created with (never the
process-wide current directory at the time of the call).
"""

from __future__ import annotations

import os

SEPARATOR = "/"


def join(*segments: str) -> str:
    """
    Join path segments with `/`, skipping empty ones. Unlike `os.path.join`,
    this never uses the OS separator and an absolute segment doesn't reset the
    result.
    """
    result = ""
    for segment in segments:
        if not segment:
            continue
        if not result or result.endswith(SEPARATOR):
            result += segment
        else:
            result += SEPARATOR + segment
    return result


class FileSystem:
    """Filesystem primitives bound to a fixed working directory."""

    def __init__(self, working_dir: str | os.PathLike[str] | None = None) -> None:
        self._working_dir: str = os.path.abspath(
            os.fspath(working_dir) if working_dir is not None else os.getcwd()
        )

    def working_directory(self) -> str:
        return self._working_dir

    def resolve(self, path: str, base: str | None = None) -> str:
        """Absolute form of `path`, relative to `base` (default: the working directory)."""
        return os.path.join(base if base is not None else self._working_dir, path)

    def exists(self, path: str) -> bool:
        return os.path.exists(self.resolve(path))

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(self.resolve(path))

    def is_link(self, path: str) -> bool:
        return os.path.islink(self.resolve(path))

    def list(self, path: str) -> list[str]:
        """
        Entry names of the directory `path`, in no particular order. Raises
        `OSError` if the directory can't be read.
        """
        return os.listdir(self.resolve(path))
