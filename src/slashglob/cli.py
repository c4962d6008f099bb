#!/usr/bin/env python3
"""
slashglob: Shell-style glob pattern matching against the filesystem

Common usage:
  slashglob '*.md'
  slashglob 'src/**/*.py' --ignore '**/test_*'
  slashglob '**/' --dot
  slashglob -C /var/log '*.{log,gz}'

Quote patterns so the shell doesn't expand them first. Paths matching a
`.slashglobignore` file (gitignore syntax) are left out unless --no-ignore-file
is given.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from slashglob.api import glob
from slashglob.config import find_config_file, load_config, merge_cli_with_config
from slashglob.errors import ConfigError, GlobAccessError, PatternError
from slashglob.ignore import filter_ignore_spec, load_ignore_file
from slashglob.types import GlobOptions


@dataclass
class Options:
    """Command-line options for the slashglob tool."""

    patterns: list[str]
    dot: bool
    globstar: bool
    ignore: list[str]
    ignore_errors: bool
    ignore_file: bool
    cwd: str | None
    null: bool
    count: bool
    verbose: int
    version: bool


def _parse_args(args: list[str] | None = None) -> tuple[Options, set[str]]:
    """
    Parse command-line arguments.

    Returns a tuple of (options, explicit_flags) where `explicit_flags` tracks
    which flags the user explicitly passed (for config merge precedence).
    """
    # Use the module's docstring as the description
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        prog="slashglob",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "patterns",
        nargs="*",
        type=str,
        default=[],
        metavar="PATTERN",
        help="Glob patterns to resolve (relative to the working directory unless absolute)",
    )
    # Flags default to None so that we can tell "not given" from "given".
    parser.add_argument(
        "--dot",
        action="store_true",
        default=None,
        help="Let wildcards match names starting with '.'",
    )
    parser.add_argument(
        "--no-globstar",
        action="store_true",
        default=None,
        dest="no_globstar",
        help="Treat '**' as an ordinary wildcard that stays within one directory",
    )
    parser.add_argument(
        "--ignore",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Leave out paths matching this glob pattern. Can be repeated",
    )
    parser.add_argument(
        "--ignore-errors",
        action="store_true",
        default=None,
        dest="ignore_errors",
        help="Skip unreadable directories instead of failing",
    )
    parser.add_argument(
        "--no-ignore-file",
        action="store_true",
        default=None,
        dest="no_ignore_file",
        help="Don't read .slashglobignore files",
    )
    parser.add_argument(
        "-C",
        "--cwd",
        type=str,
        default=None,
        metavar="DIR",
        help="Resolve relative patterns against DIR instead of the current directory",
    )
    parser.add_argument(
        "-0",
        "--null",
        action="store_true",
        help="Separate output paths with NUL characters instead of newlines",
    )
    parser.add_argument(
        "--count",
        action="store_true",
        help="Print only the number of matching paths",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (repeat for debug output)",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit",
    )
    opts = parser.parse_args(args)

    explicit_flags: set[str] = set()
    for dest_name, field_name in (
        ("dot", "dot"),
        ("no_globstar", "globstar"),
        ("ignore_errors", "ignore_errors"),
        ("no_ignore_file", "ignore_file"),
    ):
        if getattr(opts, dest_name) is not None:
            explicit_flags.add(field_name)

    return (
        Options(
            patterns=opts.patterns,
            dot=bool(opts.dot),
            globstar=not opts.no_globstar,
            ignore=opts.ignore,
            ignore_errors=bool(opts.ignore_errors),
            ignore_file=not opts.no_ignore_file,
            cwd=opts.cwd,
            null=opts.null,
            count=opts.count,
            verbose=opts.verbose,
            version=opts.version,
        ),
        explicit_flags,
    )


def _setup_logging(verbose: int) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def _resolve_patterns(options: Options) -> list[str]:
    """Resolve every pattern in argument order, each block sorted."""
    glob_options = GlobOptions(
        dot=options.dot,
        globstar=options.globstar,
        ignore=options.ignore or None,
        ignore_errors=options.ignore_errors,
    )
    result: list[str] = []
    for pattern in options.patterns:
        result.extend(glob(pattern, glob_options, cwd=options.cwd))

    if options.ignore_file:
        spec = load_ignore_file(Path(options.cwd or "."))
        if spec is not None:
            result = filter_ignore_spec(result, spec)
    return result


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the slashglob CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 if anything matched, 1 if nothing matched or a directory
        couldn't be read, 2 for invalid patterns or config)
    """
    options, explicit_flags = _parse_args(args)
    _setup_logging(options.verbose)
    log = logging.getLogger("slashglob")

    if options.version:
        try:
            version = importlib.metadata.version("slashglob")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    if not options.patterns:
        print(
            "Error: No pattern specified. Provide at least one glob pattern"
            " (quote it to keep the shell from expanding it). Use --help for more options.",
            file=sys.stderr,
        )
        return 2

    try:
        config_path = find_config_file(Path(options.cwd or "."))
        if config_path:
            log.info("Using config file %s", config_path)
            merge_cli_with_config(options, load_config(config_path), explicit_flags)
        paths = _resolve_patterns(options)
    except (PatternError, ConfigError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except GlobAccessError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if options.count:
        print(len(paths))
    elif options.null:
        sys.stdout.write("".join(p + "\0" for p in paths))
    else:
        for p in paths:
            print(p)

    return 0 if paths else 1


if __name__ == "__main__":
    sys.exit(main())
