"""Match and ownership value objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from backup_exclude.domain.model.enums import EntryKind
from backup_exclude.domain.model.pattern import Pattern


@dataclass(frozen=True, slots=True)
class Match:
    """Single path hit produced by the tree matcher.

    Attributes:
        path: Absolute path that matched
        kind: FILE or DIRECTORY
    """

    path: Path
    kind: EntryKind

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.path, Path):
            raise TypeError(f"path must be Path, got {type(self.path).__name__}")
        if not self.path.is_absolute():
            raise ValueError(f"path must be absolute, got {self.path}")
        if not isinstance(self.kind, EntryKind):
            raise TypeError(f"kind must be EntryKind, got {type(self.kind).__name__}")

    @property
    def is_dir(self) -> bool:
        """True if the matched path is a directory."""
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True, slots=True)
class PathEntry:
    """Excluded path with the single pattern responsible for it.

    Ownership moves only to a strictly higher ranked pattern.
    The resolver replaces the instance; entries themselves never change.

    Attributes:
        path: Absolute path
        kind: FILE or DIRECTORY
        owner: Pattern currently owning the path
    """

    path: Path
    kind: EntryKind
    owner: Pattern

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.path, Path):
            raise TypeError(f"path must be Path, got {type(self.path).__name__}")
        if not self.path.is_absolute():
            raise ValueError(f"path must be absolute, got {self.path}")
        if not isinstance(self.kind, EntryKind):
            raise TypeError(f"kind must be EntryKind, got {type(self.kind).__name__}")
        if not isinstance(self.owner, Pattern):
            raise TypeError(f"owner must be Pattern, got {type(self.owner).__name__}")

    @property
    def rank(self) -> int:
        """Rank of the owning pattern."""
        return self.owner.rank

    @property
    def is_dir(self) -> bool:
        """True if the entry is a directory."""
        return self.kind is EntryKind.DIRECTORY
