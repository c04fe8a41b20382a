"""Depth-first directory walker.

Lazily yields DirectoryEntry objects under a root directory, honoring
a depth limit and optionally pruning hidden directories. Depth and
prune decisions are made as entries are produced, so the tree is never
materialized in memory.
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from dsclean.cleaner.models import DirectoryEntry, EntryKind

logger = logging.getLogger(__name__)


class DirectoryWalker:
    """Walks a directory tree depth-first.

    Siblings are visited in name order so that the sequence is
    deterministic for a given filesystem state. Symbolic links are
    reported but never followed.

    Args:
        root: Directory to walk.
        max_depth: Deepest level to yield (None for unbounded). The
            root's immediate children are at depth 0; a directory at
            depth ``max_depth`` is yielded but not descended into.
        recurse: If False, behaves as ``max_depth=0``.
        skip_hidden: If True, directories whose name starts with "." are
            neither yielded nor descended into. The root itself is never
            pruned.
    """

    def __init__(
        self,
        root: Path | str,
        *,
        max_depth: int | None = None,
        recurse: bool = True,
        skip_hidden: bool = False,
    ) -> None:
        self._root = Path(root)
        self._max_depth = 0 if not recurse else max_depth
        self._skip_hidden = skip_hidden

    def walk(self) -> Iterator[DirectoryEntry]:
        """Yield entries under the root in depth-first order.

        Directories that cannot be listed and entries whose type cannot
        be determined are skipped with a warning; the walk continues.

        Yields:
            DirectoryEntry for each visited entry.
        """
        stack: list[tuple[Iterator[os.DirEntry[str]], int]] = [
            (iter(self._list_dir(self._root)), 0),
        ]

        while stack:
            entries, depth = stack[-1]
            entry = next(entries, None)
            if entry is None:
                stack.pop()
                continue

            try:
                kind = self._get_entry_kind(entry)
            except OSError as e:
                logger.warning("Cannot determine type of %s: %s", entry.path, e)
                continue

            if kind == EntryKind.DIRECTORY and self._is_pruned(entry.name):
                logger.debug("Skipping hidden directory: %s", entry.path)
                continue

            yield DirectoryEntry(path=entry.path, name=entry.name, kind=kind, depth=depth)

            if kind == EntryKind.DIRECTORY and self._can_descend(depth):
                stack.append((iter(self._list_dir(Path(entry.path))), depth + 1))

    def _can_descend(self, depth: int) -> bool:
        """Check whether children of a directory at ``depth`` are in range."""
        return self._max_depth is None or depth + 1 <= self._max_depth

    def _is_pruned(self, name: str) -> bool:
        """Check whether a directory name is excluded by the hidden rule."""
        return self._skip_hidden and name.startswith(".")

    @staticmethod
    def _list_dir(path: Path) -> list[os.DirEntry[str]]:
        """List a directory sorted by name.

        Args:
            path: Directory to list.

        Returns:
            Sorted directory entries, or an empty list if the directory
            cannot be read (permission denied, vanished mid-walk).
        """
        try:
            with os.scandir(path) as it:
                return sorted(it, key=lambda e: e.name)
        except OSError as e:
            logger.warning("Cannot read directory %s: %s", path, e)
            return []

    @staticmethod
    def _get_entry_kind(entry: os.DirEntry[str]) -> EntryKind:
        """Classify a directory entry without following symlinks.

        Args:
            entry: Entry returned by os.scandir.

        Returns:
            EntryKind classification.
        """
        if entry.is_symlink():
            return EntryKind.SYMLINK
        if entry.is_dir(follow_symlinks=False):
            return EntryKind.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return EntryKind.FILE
        return EntryKind.OTHER


def walk(
    root: Path | str,
    max_depth: int | None = None,
    recurse: bool = True,
    skip_hidden: bool = False,
) -> Iterator[DirectoryEntry]:
    """Walk a directory tree. See DirectoryWalker for semantics."""
    walker = DirectoryWalker(root, max_depth=max_depth, recurse=recurse, skip_hidden=skip_hidden)
    return walker.walk()
