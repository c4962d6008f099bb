"""
Shell-style glob pattern resolution against the filesystem.

Supports `*` and `?` wildcards, character classes (`[a-z]`, `[!abc]`), brace
expansion (`{abc,def}`, `a{b,c{d,e}}`, `{0..9}`), globstar (`**`) and ignore
patterns. Patterns and results always use `/` as the separator.

Usage::

    from slashglob import glob

    glob("*.md")                    # ['README.md']
    glob("./lib/*.py")              # ['./lib/api.py', ...]
    glob("**", dot=True)            # everything below the cwd, dot entries included
    glob("src/**", ignore="*.pyc")  # everything below src/ except compiled files
"""

from slashglob.api import glob, iglob
from slashglob.errors import ConfigError, GlobAccessError, GlobError, PatternError
from slashglob.translate import escape, has_magic, translate
from slashglob.types import GLOBSTAR, GlobOptions, Literal, Wildcard

__all__ = [
    "GLOBSTAR",
    "ConfigError",
    "GlobAccessError",
    "GlobError",
    "GlobOptions",
    "Literal",
    "PatternError",
    "Wildcard",
    "escape",
    "glob",
    "has_magic",
    "iglob",
    "translate",
]
