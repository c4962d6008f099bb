"""
Glob pattern translation.

A glob string is brace-expanded with `bracex` into one or more alternatives,
and each alternative is split on `/` into path segments. A segment without
wildcard characters becomes a `Literal`, a bare `**` becomes `GLOBSTAR` (when
globstar is enabled), and anything else is compiled into a `Wildcard` regex
that matches a single directory entry name.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence

import bracex

from slashglob.errors import PatternError
from slashglob.types import (
    GLOBSTAR,
    Globstar,
    GlobOptions,
    Literal,
    Segment,
    TranslatedPattern,
    Wildcard,
)

logger = logging.getLogger(__name__)

SEPARATOR = "/"

# Upper bound on the number of alternatives a single pattern may expand into.
BRACE_LIMIT = 1000

_MAGIC_CHARS = frozenset("*?[")
_ESCAPE_RE = re.compile(r"([*?\[\]{}\\])")


def has_magic(text: str) -> bool:
    """True if `text` contains an unescaped `*`, `?` or `[`."""
    escaped = False
    for c in text:
        if escaped:
            escaped = False
        elif c == "\\":
            escaped = True
        elif c in _MAGIC_CHARS:
            return True
    return False


def escape(path: str) -> str:
    """
    Escape all glob metacharacters in `path`, so that `glob(escape(path))`
    matches `path` literally.
    """
    escaped = _ESCAPE_RE.sub(r"\\\1", path)
    if escaped.startswith("!"):
        escaped = "\\" + escaped
    return escaped


def _unescape(text: str) -> str:
    return re.sub(r"\\(.)", r"\1", text)


def _class_to_regex(pattern: str, body: str) -> str:
    """Translate the inside of a `[...]` character class (brackets excluded)."""
    negate = body[:1] in ("!", "^")
    if negate:
        body = body[1:]

    chars: list[str] = []
    i = 0
    while i < len(body):
        c = body[i]
        if c == "\\" and i + 1 < len(body):
            chars.append(re.escape(body[i + 1]))
            i += 2
            continue
        if c == "-" and chars and i + 1 < len(body):
            chars.append("-")
        else:
            chars.append(re.escape(c))
        i += 1

    if not chars:
        raise PatternError(pattern, "empty character class")
    # Neither a wildcard nor a negated class may ever match a separator.
    return "[" + ("^/" if negate else "") + "".join(chars) + "]"


def _find_class_end(part: str, start: int) -> int:
    """Index of the `]` closing the class that opens at `part[start]`, or -1."""
    j = start + 1
    if j < len(part) and part[j] in "!^":
        j += 1
    # A `]` right after the opening bracket is a literal member.
    if j < len(part) and part[j] == "]":
        j += 1
    while j < len(part):
        if part[j] == "\\":
            j += 2
            continue
        if part[j] == "]":
            return j
        j += 1
    return -1


def _segment_to_regex(pattern: str, part: str, dot: bool) -> str:
    result: list[str] = []
    i = 0
    while i < len(part):
        c = part[i]
        if c == "\\":
            if i + 1 >= len(part):
                raise PatternError(pattern, "trailing backslash")
            result.append(re.escape(part[i + 1]))
            i += 2
            continue
        if c == "*":
            while i + 1 < len(part) and part[i + 1] == "*":
                i += 1
            result.append("[^/]*")
        elif c == "?":
            result.append("[^/]")
        elif c == "[":
            end = _find_class_end(part, i)
            if end < 0:
                raise PatternError(pattern, f"unterminated character class in {part!r}")
            result.append(_class_to_regex(pattern, part[i + 1 : end]))
            i = end
        else:
            result.append(re.escape(c))
        i += 1

    regex = "".join(result)
    if not dot and not part.startswith(".") and not part.startswith("\\."):
        regex = r"(?!\.)" + regex
    return regex


def compile_segment(pattern: str, part: str, options: GlobOptions) -> Segment:
    """Turn one `/`-free component of `pattern` into a segment."""
    if part == "**" and options.globstar:
        return GLOBSTAR
    if not has_magic(part):
        if (len(part) - len(part.rstrip("\\"))) % 2:
            raise PatternError(pattern, "trailing backslash")
        return Literal(_unescape(part))
    regex = _segment_to_regex(pattern, part, options.dot)
    try:
        return Wildcard(re.compile(regex, re.DOTALL), part)
    except re.error as e:
        raise PatternError(pattern, f"cannot compile {part!r}: {e}") from e


def _expand_braces(pattern: str) -> list[str]:
    try:
        return bracex.expand(pattern, keep_escapes=True, limit=BRACE_LIMIT)
    except bracex.ExpansionLimitException as e:
        raise PatternError(pattern, f"brace expansion exceeds {BRACE_LIMIT} alternatives") from e


def translate(pattern: str, options: GlobOptions | None = None) -> TranslatedPattern:
    """
    Translate a glob string into segment sequences, one per brace alternative.

    A single leading `!` marks the pattern as negated and is stripped. Raises
    `PatternError` for patterns that cannot be translated.
    """
    if options is None:
        options = GlobOptions()
    if not pattern:
        raise PatternError(pattern, "empty pattern")
    if "\0" in pattern:
        raise PatternError(pattern, "NUL character in pattern")

    is_negated = pattern.startswith("!")
    body = pattern[1:] if is_negated else pattern
    if not body:
        raise PatternError(pattern, "nothing after negation")

    patterns = [
        tuple(compile_segment(pattern, part, options) for part in alternative.split(SEPARATOR))
        for alternative in _expand_braces(body)
    ]
    logger.debug("Translated %r into %d alternative(s)", pattern, len(patterns))
    return TranslatedPattern(patterns=patterns, is_negated=is_negated)


def _match_parts(segments: Sequence[Segment], parts: Sequence[str]) -> bool:
    """Match a whole path, given as its components, against a segment sequence."""
    if not segments:
        return not parts
    head = segments[0]
    if isinstance(head, Globstar):
        rest = segments[1:]
        return any(_match_parts(rest, parts[i:]) for i in range(len(parts) + 1))
    if not parts:
        return False
    if isinstance(head, Literal):
        matched = head.text == parts[0]
    else:
        matched = head.matches(parts[0])
    return matched and _match_parts(segments[1:], parts[1:])


def _match_any_part(segment: Segment, parts: Sequence[str]) -> bool:
    if isinstance(segment, Literal):
        return segment.text in parts
    if isinstance(segment, Wildcard):
        return any(segment.matches(part) for part in parts)
    return True


def match_path(segments: Sequence[Segment], path: str) -> bool:
    """
    True if `path` matches the segment sequence. A single-component pattern
    such as `a` or `*.md` matches a path when any of its components matches.
    A directory result with a trailing slash matches like the bare path, unless
    the pattern itself ends in a slash.
    """
    parts = path.split(SEPARATOR)
    if len(parts) > 1 and parts[-1] == "" and not (segments and segments[-1] == Literal("")):
        parts = parts[:-1]
    if len(segments) == 1:
        return _match_any_part(segments[0], [p for p in parts if p])
    return _match_parts(segments, parts)


def get_matcher(
    patterns: Sequence[Sequence[Segment]], negate: bool = False
) -> Callable[[str], bool]:
    """
    Return a predicate that is true for paths matching any of `patterns`, or,
    with `negate=True`, for paths matching none of them.
    """

    def matcher(path: str) -> bool:
        is_match = any(match_path(segments, path) for segments in patterns)
        return is_match != negate

    return matcher
