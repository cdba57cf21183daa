"""Cancellation exception."""

from backup_exclude.domain.exceptions.base import BackupExcludeError


class MatchCancelledError(BackupExcludeError):
    """Matching run cancelled between pattern passes.

    Attributes:
        pattern: Pattern that was about to be processed
        processed: Number of patterns fully processed before cancellation
    """

    def __init__(self, pattern: str, processed: int) -> None:
        if not pattern:
            raise ValueError("pattern must not be empty")
        if processed < 0:
            raise ValueError(f"processed must be >= 0, got {processed}")

        self.pattern = pattern
        self.processed = processed
        super().__init__(f"Matching cancelled before pattern '{pattern}' ({processed} processed)")
