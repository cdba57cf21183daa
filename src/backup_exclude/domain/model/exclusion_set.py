"""Exclusion set aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from backup_exclude.domain.model.enums import EntryKind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from backup_exclude.domain.model.path_entry import PathEntry
    from backup_exclude.domain.model.pattern import Pattern


@dataclass(frozen=True, slots=True)
class ExclusionSet:
    """Final exclusion view of one matching run.

    Immutable aggregate built once from the resolver's ownership map.
    Every excluded path has exactly one owning pattern.

    Attributes:
        files: Absolute paths of excluded files
        directories: Absolute paths of excluded directories
        entries: Path -> PathEntry for every excluded path
        owned: Pattern text -> owned entries, sorted by path.
            Contains a key for every registered pattern, even unmatched ones.
        patterns: Registered patterns, sorted by text
    """

    files: frozenset[Path]
    directories: frozenset[Path]
    entries: Mapping[Path, PathEntry]
    owned: Mapping[str, tuple[PathEntry, ...]]
    patterns: tuple[Pattern, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        overlap = self.files & self.directories
        if overlap:
            raise ValueError(f"paths cannot be both file and directory: {sorted(overlap)}")
        if len(self.entries) != len(self.files) + len(self.directories):
            raise ValueError(
                f"entries ({len(self.entries)}) must cover files ({len(self.files)}) "
                f"and directories ({len(self.directories)})"
            )
        known = frozenset(p.text for p in self.patterns)
        unknown = frozenset(self.owned) - known
        if unknown:
            raise ValueError(f"owned contains unregistered patterns: {sorted(unknown)}")

    @property
    def file_count(self) -> int:
        """Number of excluded files."""
        return len(self.files)

    @property
    def directory_count(self) -> int:
        """Number of excluded directories."""
        return len(self.directories)

    @property
    def is_empty(self) -> bool:
        """True if nothing is excluded."""
        return not self.entries

    def owner_of(self, path: Path) -> Pattern | None:
        """Pattern owning path, None if path was not matched."""
        entry = self.entries.get(path)
        if entry is None:
            return None
        return entry.owner

    def files_for(self, pattern: str) -> tuple[Path, ...]:
        """Files owned by pattern (empty if unknown or unmatched)."""
        return tuple(e.path for e in self.owned.get(pattern, ()) if e.kind is EntryKind.FILE)

    def directories_for(self, pattern: str) -> tuple[Path, ...]:
        """Directories owned by pattern (empty if unknown or unmatched)."""
        return tuple(
            e.path for e in self.owned.get(pattern, ()) if e.kind is EntryKind.DIRECTORY
        )

    def match_counts(self) -> Mapping[str, int]:
        """Number of owned entries per pattern text."""
        return MappingProxyType({text: len(entries) for text, entries in self.owned.items()})

    def is_excluded(self, path: Path) -> bool:
        """Check if path is excluded directly or through an excluded directory.

        Args:
            path: Absolute path

        Returns:
            True if path or any ancestor is excluded
        """
        if path in self.entries:
            return True
        return any(parent in self.directories for parent in path.parents)

    def top_directories(self) -> tuple[Path, ...]:
        """Excluded directories that have no excluded ancestor, sorted."""
        return tuple(
            sorted(
                d for d in self.directories if not any(p in self.directories for p in d.parents)
            )
        )

    @classmethod
    def empty(cls, patterns: tuple[Pattern, ...] = ()) -> ExclusionSet:
        """Create exclusion set with nothing excluded."""
        return cls(
            files=frozenset(),
            directories=frozenset(),
            entries=MappingProxyType({}),
            owned=MappingProxyType({p.text: () for p in patterns}),
            patterns=patterns,
        )
