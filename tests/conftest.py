"""Shared fixtures: the directory tree used throughout the glob tests."""

from __future__ import annotations

from pathlib import Path

import pytest

# tmp tree:
#   a/D
#   aab/F
#   aac/F
#   .aa/G
#   .bb/H
#   aaa/zzzF
#   ZZZ
#   a/bcd/EF
#   a/bcd/efg/ha
TREE_FILES = [
    "a/D",
    "aab/F",
    "aac/F",
    ".aa/G",
    ".bb/H",
    "aaa/zzzF",
    "ZZZ",
    "a/bcd/EF",
    "a/bcd/efg/ha",
]


def make_tree(root: Path, files: list[str]) -> None:
    """Create empty files (and their parent directories) below `root`."""
    for name in files:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()


@pytest.fixture
def tree(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """The standard test tree, with the working directory set to its root."""
    root = tmp_path / "glob_test"
    root.mkdir()
    make_tree(root, TREE_FILES)
    monkeypatch.chdir(root)
    return root
