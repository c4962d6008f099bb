"""
TOML-based config file loading for slashglob.

Searches for `.slashglob.toml`, `slashglob.toml`, or `pyproject.toml [tool.slashglob]`
walking up from the current directory. Config values are merged with CLI flags
using three-way precedence: explicit CLI flags > config file > built-in defaults.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, TypeVar, cast

from slashglob.errors import ConfigError

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]


@dataclass
class SlashglobConfig:
    """
    Parsed config from a TOML file. Fields are `None` when not set in the config,
    allowing the merge logic to distinguish "not configured" from "explicitly set
    to default value".
    """

    dot: bool | None = None
    globstar: bool | None = None
    ignore: list[str] | None = None
    ignore_errors: bool | None = None
    ignore_file: bool | None = None


# Config file search order (first match wins within each directory level)
_CONFIG_FILENAMES = [".slashglob.toml", "slashglob.toml", "pyproject.toml"]

_VALID_FIELDS = {f.name for f in fields(SlashglobConfig)}


def find_config_file(start_dir: Path) -> Path | None:
    """
    Walk up from `start_dir` looking for a config file. Returns the first
    found, or `None`. Search order per directory: `.slashglob.toml` >
    `slashglob.toml` > `pyproject.toml` (only if it has `[tool.slashglob]`).
    """
    current = start_dir.resolve()
    while True:
        for filename in _CONFIG_FILENAMES:
            candidate = current / filename
            if candidate.is_file():
                if filename == "pyproject.toml":
                    if _pyproject_has_section(candidate):
                        return candidate
                else:
                    return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def _pyproject_has_section(path: Path) -> bool:
    """Check if a pyproject.toml has a [tool.slashglob] section."""
    try:
        data = tomllib.loads(path.read_text())
        return "slashglob" in data.get("tool", {})
    except (tomllib.TOMLDecodeError, OSError):
        return False


def load_config(config_path: Path) -> SlashglobConfig:
    """
    Load a `SlashglobConfig` from a TOML file. Supports both standalone
    `slashglob.toml` / `.slashglob.toml` and `pyproject.toml` (extracts
    `[tool.slashglob]`). TOML kebab-case keys are mapped to Python snake_case.
    Raises `ConfigError` if the file isn't valid TOML or has mistyped values.
    """
    try:
        data = tomllib.loads(config_path.read_text())
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    if config_path.name == "pyproject.toml":
        data = data.get("tool", {}).get("slashglob", {})

    return _parse_config_data(data, config_path)


def _parse_config_data(data: dict[str, Any], source: Path) -> SlashglobConfig:
    """Parse a flat TOML dict into SlashglobConfig, ignoring unknown keys."""
    mapped: dict[str, Any] = {}
    for key, value in data.items():
        snake_key = key.replace("-", "_")
        if snake_key not in _VALID_FIELDS:
            continue
        if snake_key == "ignore":
            if isinstance(value, str):
                value = [value]
            if not isinstance(value, list) or not all(
                isinstance(v, str) for v in cast(list[Any], value)
            ):
                raise ConfigError(f"{source}: `ignore` must be a string or a list of strings")
        elif not isinstance(value, bool):
            raise ConfigError(f"{source}: `{key}` must be true or false")
        mapped[snake_key] = value

    return SlashglobConfig(**mapped)


_T = TypeVar("_T")


def merge_cli_with_config(
    cli_opts: _T,
    config: SlashglobConfig | None,
    explicit_flags: set[str],
) -> _T:
    """
    Merge CLI options with config file settings.

    Precedence: explicit CLI flags > config file > built-in defaults. The
    `ignore` list is the exception: CLI `--ignore` patterns extend the
    configured ones rather than replacing them.
    """
    if config is None:
        return cli_opts

    for cfg_field in fields(SlashglobConfig):
        cfg_value = getattr(config, cfg_field.name)
        if cfg_value is None:
            continue  # Not set in config
        if not hasattr(cli_opts, cfg_field.name):
            continue

        if cfg_field.name == "ignore":
            setattr(cli_opts, "ignore", list(cfg_value) + list(getattr(cli_opts, "ignore")))
            continue

        # Skip if CLI explicitly set this flag
        if cfg_field.name in explicit_flags:
            continue

        setattr(cli_opts, cfg_field.name, cfg_value)

    return cli_opts
