"""Trash disposal operator.

Moves validated .DS_Store files to the operating system trash with
dry-run support. Every path is re-validated immediately before the
trash call, and failures are isolated per path.
"""

import logging
import os

from send2trash import send2trash

from dsclean.cleaner.models import DisposalOutcome, DisposalResult
from dsclean.cleaner.validator import TARGET_NAME, is_target

logger = logging.getLogger(__name__)


class TrashOperator:
    """Moves .DS_Store files to the system trash.

    Attributes:
        _dry_run: If True, simulate disposal without touching the filesystem.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the TrashOperator.

        Args:
            dry_run: Default preview mode for ``dispose`` calls.
        """
        self._dry_run = dry_run

    def dispose(self, path: str, preview: bool | None = None) -> DisposalResult:
        """Move a single file to the trash.

        The path is checked again against the target criteria before
        anything happens, so an entry that changed kind or vanished
        since discovery is skipped rather than trashed. This method
        never raises for filesystem errors.

        Args:
            path: Path of the candidate file.
            preview: Override the operator's dry-run mode for this call.

        Returns:
            DisposalResult describing the outcome.
        """
        if preview is None:
            preview = self._dry_run

        if not is_target(path):
            if not os.path.lexists(path):
                return DisposalResult(
                    path=path,
                    outcome=DisposalOutcome.SKIPPED_NOT_FOUND,
                    reason=f"File does not exist: {path}",
                )
            return DisposalResult(
                path=path,
                outcome=DisposalOutcome.SKIPPED_NOT_A_FILE,
                reason=f"Not a regular {TARGET_NAME} file: {path}",
            )

        if preview:
            logger.info("Dry-run: would move %s to trash", path)
            return DisposalResult(path=path, outcome=DisposalOutcome.PREVIEWED)

        if not os.path.lexists(path):
            return DisposalResult(
                path=path,
                outcome=DisposalOutcome.SKIPPED_NOT_FOUND,
                reason=f"File does not exist: {path}",
            )

        try:
            send2trash(path)
        except OSError as e:
            logger.debug("Failed to move %s to trash: %s", path, e)
            return DisposalResult(
                path=path,
                outcome=DisposalOutcome.FAILED,
                reason=f"Failed to move to trash: {e}",
            )

        logger.debug("Moved to trash: %s", path)
        return DisposalResult(path=path, outcome=DisposalOutcome.MOVED)
