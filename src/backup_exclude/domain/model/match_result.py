"""Match result aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from backup_exclude.domain.model.exclusion_set import ExclusionSet
from backup_exclude.domain.model.filter_expression import FilterExpression
from backup_exclude.domain.model.match_stats import MatchStats
from backup_exclude.domain.model.pattern import Pattern
from backup_exclude.domain.model.tree_entry import SkippedEntry


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Result of one matching run.

    Immutable aggregate handed to the copy engine and to reporters.

    Attributes:
        root: Absolute source directory
        exclusion_set: Excluded files, directories and per-pattern ownership
        filter_expression: Predicate list for the copy engine
        stats: Run diagnostics
        skipped: Entries skipped because of traversal errors
    """

    root: Path
    exclusion_set: ExclusionSet
    filter_expression: FilterExpression
    stats: MatchStats
    skipped: tuple[SkippedEntry, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.root, Path):
            raise TypeError(f"root must be Path, got {type(self.root).__name__}")
        if not self.root.is_absolute():
            raise ValueError(f"root must be absolute, got {self.root}")
        if self.stats.entries_skipped != len(self.skipped):
            raise ValueError(
                f"stats.entries_skipped ({self.stats.entries_skipped}) must equal "
                f"len(skipped) ({len(self.skipped)})"
            )

    @property
    def excluded_files(self) -> tuple[Path, ...]:
        """Excluded files, sorted."""
        return tuple(sorted(self.exclusion_set.files))

    @property
    def excluded_directories(self) -> tuple[Path, ...]:
        """Excluded directories, sorted."""
        return tuple(sorted(self.exclusion_set.directories))

    @classmethod
    def empty(cls, root: Path, patterns: tuple[Pattern, ...] = ()) -> MatchResult:
        """Create result with nothing excluded."""
        return cls(
            root=root,
            exclusion_set=ExclusionSet.empty(patterns),
            filter_expression=FilterExpression.empty(),
            stats=MatchStats.empty(),
        )
