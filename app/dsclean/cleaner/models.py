"""Cleaner domain models for scanning and disposal.

This module defines the core data structures for a cleanup run:
the resolved scan configuration, entries produced by the directory
walker, per-file disposal results, and the statistics snapshot
handed to the presentation layer.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class EntryKind(str, Enum):
    """Kind of filesystem entry produced by the walker.

    Attributes:
        FILE: Regular file.
        DIRECTORY: Real directory (not a symlink to one).
        SYMLINK: Symbolic link of any kind. Never followed.
        OTHER: Sockets, FIFOs, device nodes.
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"


class DisposalOutcome(str, Enum):
    """Outcome of a single disposal attempt.

    Attributes:
        MOVED: File was moved to the system trash.
        PREVIEWED: Preview mode; the file would have been moved.
        SKIPPED_NOT_FOUND: File vanished between discovery and disposal.
        SKIPPED_NOT_A_FILE: Path no longer matches the target criteria.
        FAILED: The trash operation was attempted and did not succeed.
    """

    MOVED = "moved"
    PREVIEWED = "previewed"
    SKIPPED_NOT_FOUND = "skipped_not_found"
    SKIPPED_NOT_A_FILE = "skipped_not_a_file"
    FAILED = "failed"


class ScanState(str, Enum):
    """Lifecycle state of a ScanOrchestrator."""

    INITIALIZING = "initializing"
    SCANNING = "scanning"
    REPORTING = "reporting"
    DONE = "done"
    ABORTED = "aborted"


@dataclass(frozen=True, slots=True)
class ScanConfiguration:
    """Fully resolved options for one cleanup run.

    Built once by the CLI layer and owned by the orchestrator for the
    duration of the run. The root path is checked by the orchestrator,
    not here, so that a missing root surfaces as a configuration error
    at run start.

    Attributes:
        root: Directory to scan.
        max_depth: Deepest level to visit (None for unbounded). The
            root's immediate children are at depth 0.
        recursive: If False, only the root's immediate children are visited.
        skip_hidden: Prune directories whose name starts with ".".
        dry_run: Preview mode; report matches without moving anything.
        verbose: Collect per-file events in the final result.
        workers: Number of parallel disposal workers (1 = sequential).
    """

    root: Path
    max_depth: int | None = None
    recursive: bool = True
    skip_hidden: bool = False
    dry_run: bool = False
    verbose: bool = False
    workers: int = 1

    def __post_init__(self) -> None:
        """Validate configuration values after initialization."""
        if self.max_depth is not None and self.max_depth < 0:
            msg = f"max_depth must be a non-negative integer, got {self.max_depth}"
            raise ValueError(msg)
        if self.workers < 1:
            msg = f"workers must be at least 1, got {self.workers}"
            raise ValueError(msg)

    @property
    def effective_max_depth(self) -> int | None:
        """Depth limit after applying the recursive flag."""
        if not self.recursive:
            return 0
        return self.max_depth


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """A single entry yielded by the directory walker.

    Attributes:
        path: Absolute path of the entry.
        name: Base name of the entry.
        kind: Entry kind, determined without following symlinks.
        depth: Number of directories below the root containing this entry.
    """

    path: str
    name: str
    kind: EntryKind
    depth: int


@dataclass(frozen=True, slots=True)
class DisposalResult:
    """Result of disposing a single candidate file.

    Attributes:
        path: Path that was operated on.
        outcome: What happened to the file.
        reason: Human-readable cause for skips and failures, None otherwise.
    """

    path: str
    outcome: DisposalOutcome
    reason: str | None = None


# Per-file events share the shape of disposal results.
ScanEvent = DisposalResult


@dataclass(frozen=True, slots=True)
class RunStatistics:
    """Consistent snapshot of the run counters.

    Attributes:
        found: Number of target files discovered.
        moved: Number of files moved to the trash.
        failed: Number of files whose disposal failed.
    """

    found: int = 0
    moved: int = 0
    failed: int = 0

    @property
    def skipped(self) -> int:
        """Files that were found but neither moved nor failed."""
        return self.found - self.moved - self.failed


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Final outcome of a cleanup run.

    Attributes:
        root: Resolved root directory that was scanned.
        dry_run: Whether the run was in preview mode.
        statistics: Final counter snapshot.
        state: Final orchestrator state.
        events: Per-file events, collected only for verbose runs.
    """

    root: Path
    dry_run: bool
    statistics: RunStatistics
    state: ScanState = ScanState.DONE
    events: tuple[ScanEvent, ...] = ()

    @property
    def has_failures(self) -> bool:
        """Whether any disposal failed."""
        return self.statistics.failed > 0
