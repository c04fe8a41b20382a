"""Tests for cleaner domain models."""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest
from dsclean.cleaner.models import (
    DirectoryEntry,
    DisposalOutcome,
    EntryKind,
    RunStatistics,
    ScanConfiguration,
    ScanResult,
    ScanState,
)


class TestScanConfiguration:
    """Tests for ScanConfiguration validation."""

    def test_defaults(self) -> None:
        """Defaults are unbounded, recursive, execution mode, sequential."""
        config = ScanConfiguration(root=Path("."))

        assert config.max_depth is None
        assert config.recursive is True
        assert config.skip_hidden is False
        assert config.dry_run is False
        assert config.verbose is False
        assert config.workers == 1

    def test_negative_max_depth_rejected(self) -> None:
        """A negative depth limit raises ValueError."""
        with pytest.raises(ValueError, match="max_depth"):
            ScanConfiguration(root=Path("."), max_depth=-1)

    def test_zero_workers_rejected(self) -> None:
        """At least one worker is required."""
        with pytest.raises(ValueError, match="workers"):
            ScanConfiguration(root=Path("."), workers=0)

    def test_frozen(self) -> None:
        """Configuration cannot be mutated after construction."""
        config = ScanConfiguration(root=Path("."))
        with pytest.raises(FrozenInstanceError):
            config.dry_run = True  # type: ignore[misc]

    def test_effective_max_depth(self) -> None:
        """Disabling recursion forces an effective depth of 0."""
        assert ScanConfiguration(root=Path("."), max_depth=5).effective_max_depth == 5
        assert ScanConfiguration(root=Path(".")).effective_max_depth is None
        config = ScanConfiguration(root=Path("."), max_depth=5, recursive=False)
        assert config.effective_max_depth == 0


class TestDisposalOutcome:
    """Tests for DisposalOutcome."""

    def test_outcome_values(self) -> None:
        """Outcomes serialize to stable string values."""
        assert DisposalOutcome.MOVED.value == "moved"
        assert DisposalOutcome.FAILED.value == "failed"


class TestRunStatistics:
    """Tests for RunStatistics."""

    def test_skipped(self) -> None:
        """skipped is what remains after moved and failed."""
        assert RunStatistics(found=5, moved=3, failed=1).skipped == 1


class TestScanResult:
    """Tests for ScanResult."""

    def test_has_failures(self) -> None:
        """has_failures is true only with a non-zero failed count."""
        ok = ScanResult(root=Path("/r"), dry_run=False, statistics=RunStatistics(2, 2, 0))
        bad = ScanResult(root=Path("/r"), dry_run=False, statistics=RunStatistics(2, 1, 1))

        assert ok.has_failures is False
        assert bad.has_failures is True
        assert ok.state == ScanState.DONE
        assert ok.events == ()


class TestDirectoryEntry:
    """Tests for DirectoryEntry."""

    def test_frozen(self) -> None:
        """Entries are immutable snapshots."""
        entry = DirectoryEntry(path="/r/a", name="a", kind=EntryKind.DIRECTORY, depth=0)
        with pytest.raises(FrozenInstanceError):
            entry.depth = 1  # type: ignore[misc]
