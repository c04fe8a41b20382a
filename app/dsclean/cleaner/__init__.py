"""Cleaner core: traversal, validation, disposal and statistics.

This module provides the scan-validate-act pipeline that finds
.DS_Store files under a directory and moves them to the system trash.
"""

from dsclean.cleaner.errors import CleanerError, ConfigurationError
from dsclean.cleaner.models import (
    DirectoryEntry,
    DisposalOutcome,
    DisposalResult,
    EntryKind,
    RunStatistics,
    ScanConfiguration,
    ScanEvent,
    ScanResult,
    ScanState,
)
from dsclean.cleaner.operator import TrashOperator
from dsclean.cleaner.orchestrator import ScanOrchestrator
from dsclean.cleaner.stats import StatisticsAggregator
from dsclean.cleaner.validator import TARGET_NAME, is_target, is_target_name
from dsclean.cleaner.walker import DirectoryWalker, walk

__all__ = [
    "TARGET_NAME",
    "CleanerError",
    "ConfigurationError",
    "DirectoryEntry",
    "DirectoryWalker",
    "DisposalOutcome",
    "DisposalResult",
    "EntryKind",
    "RunStatistics",
    "ScanConfiguration",
    "ScanEvent",
    "ScanOrchestrator",
    "ScanResult",
    "ScanState",
    "StatisticsAggregator",
    "TrashOperator",
    "is_target",
    "is_target_name",
    "walk",
]
