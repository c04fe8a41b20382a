"""Scan orchestration.

Drives the directory walker, validates each entry, hands matches to the
trash operator and records outcomes in the statistics aggregator.
Disposal runs sequentially by default or on a bounded thread pool.
"""

import logging
import threading
from collections.abc import Callable, Iterator
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, as_completed, wait
from pathlib import Path

from dsclean.cleaner.errors import ConfigurationError
from dsclean.cleaner.models import (
    ScanConfiguration,
    ScanEvent,
    ScanResult,
    ScanState,
)
from dsclean.cleaner.operator import TrashOperator
from dsclean.cleaner.stats import StatisticsAggregator
from dsclean.cleaner.validator import is_target
from dsclean.cleaner.walker import walk

logger = logging.getLogger(__name__)

# Queued disposals allowed per worker before traversal waits.
MAX_PENDING_PER_WORKER = 2

EventCallback = Callable[[ScanEvent], None]
StartCallback = Callable[[Path], None]


class ScanOrchestrator:
    """Runs a single cleanup scan.

    State transitions: INITIALIZING -> SCANNING -> REPORTING -> DONE.
    ABORTED is reached only from INITIALIZING when the root path is
    invalid. Everything that goes wrong while scanning is absorbed and
    counted; only configuration errors propagate.

    Args:
        config: Resolved scan configuration.
        operator: Disposal operator. Defaults to a TrashOperator.
        stats: Statistics aggregator. Defaults to a fresh one.
        on_start: Called with the resolved root once validation succeeds,
            before the first entry is visited.
        on_event: Called once per processed target file, as the scan
            proceeds. Calls are serialized even when disposal is parallel.
    """

    def __init__(
        self,
        config: ScanConfiguration,
        *,
        operator: TrashOperator | None = None,
        stats: StatisticsAggregator | None = None,
        on_start: StartCallback | None = None,
        on_event: EventCallback | None = None,
    ) -> None:
        self._config = config
        self._operator = operator if operator is not None else TrashOperator(dry_run=config.dry_run)
        self._stats = stats if stats is not None else StatisticsAggregator()
        self._on_start = on_start
        self._on_event = on_event
        self._events: list[ScanEvent] = []
        self._event_lock = threading.Lock()
        self._state = ScanState.INITIALIZING

    @property
    def state(self) -> ScanState:
        """Current lifecycle state."""
        return self._state

    @property
    def stats(self) -> StatisticsAggregator:
        """Statistics aggregator updated by this run."""
        return self._stats

    def run(self) -> ScanResult:
        """Execute the scan and return the final result.

        Returns:
            ScanResult with the final statistics snapshot.

        Raises:
            ConfigurationError: If the root path is missing or not a directory.
            RuntimeError: If the orchestrator has already been run.
        """
        if self._state != ScanState.INITIALIZING:
            msg = f"Scan already started (state: {self._state.value})"
            raise RuntimeError(msg)

        try:
            root = self._resolve_root()
        except ConfigurationError:
            self._state = ScanState.ABORTED
            raise

        self._state = ScanState.SCANNING
        if self._on_start is not None:
            self._on_start(root)
        logger.debug("Scanning %s (dry_run=%s)", root, self._config.dry_run)
        if self._config.workers > 1:
            self._scan_parallel(root)
        else:
            self._scan_sequential(root)

        self._state = ScanState.REPORTING
        result = ScanResult(
            root=root,
            dry_run=self._config.dry_run,
            statistics=self._stats.snapshot(),
            state=ScanState.DONE,
            events=tuple(self._events),
        )
        self._state = ScanState.DONE
        return result

    def _resolve_root(self) -> Path:
        """Validate the configured root and return it as an absolute path.

        Raises:
            ConfigurationError: If the root is missing or not a directory.
        """
        root = Path(self._config.root).expanduser()
        if not root.exists():
            msg = f"Path does not exist: {root}"
            raise ConfigurationError(msg)
        if not root.is_dir():
            msg = f"Path is not a directory: {root}"
            raise ConfigurationError(msg)
        try:
            return root.resolve()
        except OSError as e:
            msg = f"Cannot access the specified path: {root}: {e}"
            raise ConfigurationError(msg) from e

    def _candidates(self, root: Path) -> Iterator[str]:
        """Yield paths of target files under root, counting each as found."""
        entries = walk(
            root,
            max_depth=self._config.effective_max_depth,
            skip_hidden=self._config.skip_hidden,
        )
        for entry in entries:
            if not is_target(entry.path):
                continue
            self._stats.increment_found()
            yield entry.path

    def _scan_sequential(self, root: Path) -> None:
        for path in self._candidates(root):
            self._process(path)

    def _scan_parallel(self, root: Path) -> None:
        """Dispose of candidates on a thread pool, joining before return.

        At most ``workers * MAX_PENDING_PER_WORKER`` disposals are queued
        at once; traversal pauses until one of them completes.
        """
        limit = self._config.workers * MAX_PENDING_PER_WORKER
        pending: set[Future[None]] = set()

        with ThreadPoolExecutor(max_workers=self._config.workers) as executor:
            for path in self._candidates(root):
                if len(pending) >= limit:
                    done, pending = wait(pending, return_when=FIRST_COMPLETED)
                    for future in done:
                        future.result()
                pending.add(executor.submit(self._process, path))

            for future in as_completed(pending):
                future.result()

    def _process(self, path: str) -> None:
        """Dispose of one candidate and record the outcome."""
        result = self._operator.dispose(path, preview=self._config.dry_run)
        self._stats.record(result)
        self._emit(result)

    def _emit(self, event: ScanEvent) -> None:
        with self._event_lock:
            if self._config.verbose:
                self._events.append(event)
            if self._on_event is not None:
                self._on_event(event)
