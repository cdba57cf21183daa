"""Exclude-file exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from backup_exclude.domain.exceptions.base import BackupExcludeError

if TYPE_CHECKING:
    from pathlib import Path


class PatternFileError(BackupExcludeError):
    """An --exclude-from file could not be read.

    Attributes:
        path: File that failed to load
        reason: Why loading failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read exclude file {path}: {reason}")
