"""Tests for glob pattern translation and path matching."""

from __future__ import annotations

import pytest

from slashglob import (
    GLOBSTAR,
    GlobOptions,
    Literal,
    PatternError,
    Wildcard,
    escape,
    has_magic,
    translate,
)
from slashglob.translate import compile_segment, get_matcher, match_path


def _only(pattern: str, options: GlobOptions | None = None):
    translated = translate(pattern, options)
    assert len(translated.patterns) == 1
    return translated.patterns[0]


def test_translate_literal_segments():
    assert _only("a/bcd/EF") == (Literal("a"), Literal("bcd"), Literal("EF"))


def test_translate_absolute_and_trailing_slash():
    assert _only("/tmp/x") == (Literal(""), Literal("tmp"), Literal("x"))
    assert _only("a/") == (Literal("a"), Literal(""))


def test_translate_wildcard_segments():
    segments = _only("src/*.py")
    assert segments[0] == Literal("src")
    assert isinstance(segments[1], Wildcard)
    assert segments[1].source == "*.py"
    assert segments[1].matches("api.py")
    assert not segments[1].matches("api.pyc")


def test_translate_globstar():
    assert _only("a/**/b") == (Literal("a"), GLOBSTAR, Literal("b"))
    segments = _only("a/**/b", GlobOptions(globstar=False))
    assert isinstance(segments[1], Wildcard)
    assert segments[1].matches("xyz")
    # Only a whole component is a globstar.
    assert isinstance(_only("a**")[0], Wildcard)


def test_translate_braces():
    translated = translate("{aab,aac}/F")
    assert translated.patterns == [
        (Literal("aab"), Literal("F")),
        (Literal("aac"), Literal("F")),
    ]
    assert len(translate("a{b,c{d,e},{f,g}h}x{y,z}").patterns) == 10
    assert [p[0] for p in translate("file{0..3}").patterns] == [
        Literal("file0"),
        Literal("file1"),
        Literal("file2"),
        Literal("file3"),
    ]


def test_translate_negation():
    translated = translate("!*.md")
    assert translated.is_negated
    assert isinstance(translated.patterns[0][0], Wildcard)
    assert not translate("*.md").is_negated
    assert not translate("\\!x").is_negated


def test_wildcard_dot_handling():
    star = compile_segment("*", "*", GlobOptions())
    assert isinstance(star, Wildcard)
    assert not star.matches(".hidden")
    assert star.matches("visible")

    star_dot = compile_segment("*", "*", GlobOptions(dot=True))
    assert isinstance(star_dot, Wildcard)
    assert star_dot.matches(".hidden")

    dot_star = compile_segment(".*", ".*", GlobOptions())
    assert isinstance(dot_star, Wildcard)
    assert dot_star.matches(".hidden")

    negated_class = compile_segment("[!a]x", "[!a]x", GlobOptions())
    assert isinstance(negated_class, Wildcard)
    assert not negated_class.matches(".x")
    assert negated_class.matches("bx")


@pytest.mark.parametrize(
    ("part", "matching", "not_matching"),
    [
        ("?aa", ["aaa", "baa"], ["aa", "aaaa"]),
        ("aa[ab]", ["aaa", "aab"], ["aac"]),
        ("[a-c]x", ["ax", "bx", "cx"], ["dx"]),
        ("[!a-c]x", ["dx"], ["ax", "cx"]),
        ("[^a]", ["b"], ["a"]),
        ("[]]", ["]"], ["a"]),
        ("[a-]", ["a", "-"], ["b"]),
        ("\\**", ["*x", "*"], ["ax"]),
        ("a.b*", ["a.b", "a.bc"], ["axb"]),
        ("(x)+*", ["(x)+", "(x)+y"], ["xx"]),
    ],
)
def test_wildcard_matching(part: str, matching: list[str], not_matching: list[str]):
    segment = compile_segment(part, part, GlobOptions())
    for name in matching:
        assert isinstance(segment, Wildcard) and segment.matches(name), name
    for name in not_matching:
        assert isinstance(segment, Wildcard) and not segment.matches(name), name


def test_escaped_literal():
    assert _only("a\\*b") == (Literal("a*b"),)
    assert _only(escape("x[1]{2}.txt")) == (Literal("x[1]{2}.txt"),)


def test_has_magic():
    assert has_magic("*.md")
    assert has_magic("a?")
    assert has_magic("[ab]")
    assert not has_magic("plain/path.txt")
    assert not has_magic("\\*")


def test_escape():
    assert escape("a*b?") == "a\\*b\\?"
    assert escape("!x") == "\\!x"
    assert escape("plain/path") == "plain/path"


@pytest.mark.parametrize("pattern", ["", "!", "a/[bc", "a\0b", "[z-a]", "{1..5000}"])
def test_translate_invalid(pattern: str):
    with pytest.raises(PatternError):
        translate(pattern)


def test_compile_segment_trailing_backslash():
    with pytest.raises(PatternError, match="trailing backslash"):
        compile_segment("a\\", "a\\", GlobOptions())
    with pytest.raises(PatternError, match="trailing backslash"):
        compile_segment("*\\", "*\\", GlobOptions())
    with pytest.raises(PatternError, match="trailing backslash"):
        compile_segment("a\\\\\\", "a\\\\\\", GlobOptions())
    assert compile_segment("a\\\\", "a\\\\", GlobOptions()) == Literal("a\\")


@pytest.mark.parametrize(
    ("pattern", "path", "expected"),
    [
        ("a/bcd", "a/bcd", True),
        ("a/bcd", "a/bcd/EF", False),
        ("a/*", "a/D", True),
        ("a/*", "a/bcd/EF", False),
        ("a/**", "a/bcd/EF", True),
        ("a/**", "a", True),
        ("**/EF", "a/bcd/EF", True),
        ("a", "a/bcd/efg/ha", True),
        ("a", "aaa/zzzF", False),
        ("*.md", "docs/guide.md", True),
        ("*", ".hidden", False),
        ("a/", "a/", True),
        ("a/", "a", False),
        ("a/bcd", "a/bcd/", True),
        ("a/*", "a/bcd/", True),
        ("**/efg", "a/bcd/efg/", True),
        ("a/", "a/bcd/", False),
    ],
)
def test_match_path(pattern: str, path: str, expected: bool):
    (segments,) = translate(pattern).patterns
    assert match_path(segments, path) is expected


def test_get_matcher():
    patterns = translate("{a,b}/*").patterns
    matcher = get_matcher(patterns)
    assert matcher("a/x")
    assert matcher("b/y")
    assert not matcher("c/z")
    excluder = get_matcher(patterns, negate=True)
    assert not excluder("a/x")
    assert excluder("c/z")
