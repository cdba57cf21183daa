"""Filesystem walk value objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from backup_exclude.domain.model.enums import EntryKind


@dataclass(frozen=True, slots=True)
class TreeEntry:
    """One entry discovered while walking a source tree.

    Attributes:
        path: Absolute path of the entry
        relative: Path relative to the walk root (posix separators)
        is_dir: True if the entry is a directory
    """

    path: Path
    relative: PurePosixPath
    is_dir: bool

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        if self.relative is None:
            raise TypeError("relative must not be None")

    @property
    def kind(self) -> EntryKind:
        """Entry kind derived from is_dir."""
        return EntryKind.DIRECTORY if self.is_dir else EntryKind.FILE

    @property
    def name(self) -> str:
        """Final path segment."""
        return self.path.name


@dataclass(frozen=True, slots=True)
class SkippedEntry:
    """Entry skipped because of a traversal error.

    Attributes:
        path: Path that could not be read
        error: Error type name (PermissionError, FileNotFoundError, ...)
        message: Error message
    """

    path: Path
    error: str
    message: str

    def __str__(self) -> str:
        """Format as path: error: message."""
        return f"{self.path}: {self.error}: {self.message}"
