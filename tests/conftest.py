"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import itertools
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture
def trash_dir(tmp_path: Path) -> Path:
    """Directory standing in for the system trash."""
    path = tmp_path / "trash"
    path.mkdir()
    return path


@pytest.fixture
def fake_trash(trash_dir: Path) -> Iterator[Path]:
    """Patch send2trash to move files into ``trash_dir``.

    Yields the trash directory so tests can inspect what was trashed.
    """
    counter = itertools.count()

    def _move(path: str) -> None:
        src = Path(path)
        src.rename(trash_dir / f"{next(counter)}-{src.name}")

    with patch("dsclean.cleaner.operator.send2trash", side_effect=_move):
        yield trash_dir


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small tree with three .DS_Store files.

    Layout::

        root/.DS_Store
        root/notes.txt
        root/sub/.DS_Store
        root/sub/.hidden/.DS_Store
    """
    root = tmp_path / "root"
    hidden = root / "sub" / ".hidden"
    hidden.mkdir(parents=True)
    (root / ".DS_Store").write_bytes(b"\x00\x00\x00\x01Bud1")
    (root / "notes.txt").write_text("keep me")
    (root / "sub" / ".DS_Store").write_bytes(b"\x00\x00\x00\x01Bud1")
    (hidden / ".DS_Store").write_bytes(b"\x00\x00\x00\x01Bud1")
    return root


@pytest.fixture
def deep_tree(tmp_path: Path) -> Path:
    """Create a five-level tree with a .DS_Store in every directory.

    Layout: root/.DS_Store, root/d1/.DS_Store, ..., root/d1/d2/d3/d4/.DS_Store
    """
    root = tmp_path / "deep"
    current = root
    current.mkdir()
    (current / ".DS_Store").write_bytes(b"x")
    for level in range(1, 5):
        current = current / f"d{level}"
        current.mkdir()
        (current / ".DS_Store").write_bytes(b"x")
    return root
