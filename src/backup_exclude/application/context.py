"""Per-run matching context."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from backup_exclude.application.registry import PatternRegistry
from backup_exclude.application.resolver import ExclusionResolver
from backup_exclude.infrastructure.walker import SkipRecorder


@dataclass(slots=True)
class MatchContext:
    """State owned by a single matching run.

    Replaces process-wide maps: each run gets a fresh context, so runs
    never share registry or ownership state and need no teardown.

    Attributes:
        root: Absolute source directory
        registry: Patterns of this run
        resolver: Path ownership of this run
        skips: Traversal errors swallowed during this run
    """

    root: Path
    registry: PatternRegistry = field(default_factory=PatternRegistry)
    resolver: ExclusionResolver = field(default_factory=ExclusionResolver)
    skips: SkipRecorder = field(default_factory=SkipRecorder)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.root, Path):
            raise TypeError(f"root must be Path, got {type(self.root).__name__}")
        if not self.root.is_absolute():
            raise ValueError(f"root must be absolute, got {self.root}")
