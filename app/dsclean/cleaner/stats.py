"""Thread-safe run statistics."""

import threading

from dsclean.cleaner.models import DisposalOutcome, DisposalResult, RunStatistics


class StatisticsAggregator:
    """Monotonic found/moved/failed counters safe for concurrent updates.

    Counters only ever increase. The lock is held for the duration of a
    single increment or snapshot, never across I/O.
    """

    def __init__(self) -> None:
        self._found = 0
        self._moved = 0
        self._failed = 0
        self._lock = threading.Lock()

    def increment_found(self) -> None:
        """Count a discovered target file."""
        with self._lock:
            self._found += 1

    def increment_moved(self) -> None:
        """Count a file moved to the trash."""
        with self._lock:
            self._moved += 1

    def increment_failed(self) -> None:
        """Count a file whose disposal failed."""
        with self._lock:
            self._failed += 1

    def record(self, result: DisposalResult) -> None:
        """Route a disposal result to the matching counter.

        Previews and skips leave the counters unchanged.

        Args:
            result: Outcome of a disposal attempt.
        """
        if result.outcome == DisposalOutcome.MOVED:
            self.increment_moved()
        elif result.outcome == DisposalOutcome.FAILED:
            self.increment_failed()

    def snapshot(self) -> RunStatistics:
        """Read all three counters as one consistent triple."""
        with self._lock:
            return RunStatistics(found=self._found, moved=self._moved, failed=self._failed)
