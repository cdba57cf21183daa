"""Statistics of a matching run."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MatchStats:
    """Diagnostics from one matching run.

    Immutable value object. entries_skipped is the only visibility into
    traversal errors the matcher swallows.

    Attributes:
        patterns_processed: Number of patterns whose tree pass completed
        paths_matched: Raw hits produced by the matcher, before arbitration
        entries_owned: Distinct excluded paths after arbitration
        ownership_overrides: Times a higher ranked pattern took over a path
        entries_skipped: Entries skipped because of traversal errors
        elapsed_ms: Total run time in milliseconds
    """

    patterns_processed: int
    paths_matched: int
    entries_owned: int
    ownership_overrides: int
    entries_skipped: int
    elapsed_ms: float

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.patterns_processed < 0:
            raise ValueError(f"patterns_processed must be >= 0, got {self.patterns_processed}")
        if self.paths_matched < 0:
            raise ValueError(f"paths_matched must be >= 0, got {self.paths_matched}")
        if self.entries_owned < 0:
            raise ValueError(f"entries_owned must be >= 0, got {self.entries_owned}")
        if self.ownership_overrides < 0:
            raise ValueError(f"ownership_overrides must be >= 0, got {self.ownership_overrides}")
        if self.entries_skipped < 0:
            raise ValueError(f"entries_skipped must be >= 0, got {self.entries_skipped}")
        if self.elapsed_ms < 0:
            raise ValueError(f"elapsed_ms must be >= 0, got {self.elapsed_ms}")
        if self.entries_owned > self.paths_matched:
            raise ValueError(
                f"entries_owned ({self.entries_owned}) cannot exceed "
                f"paths_matched ({self.paths_matched})"
            )

    @classmethod
    def empty(cls) -> MatchStats:
        """Create empty match stats."""
        return cls(
            patterns_processed=0,
            paths_matched=0,
            entries_owned=0,
            ownership_overrides=0,
            entries_skipped=0,
            elapsed_ms=0.0,
        )
