"""Matcher configuration.

None = feature disabled, value = feature enabled with that config.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MatcherConfig:
    """Configuration DTO for a matching run.

    Immutable; pass explicitly, None at call sites means defaults.

    Attributes:
        follow_symlinks: Descend into symlinked directories and report them
            as directories. False = symlinks are reported as files.
        should_cancel: Checked before each pattern pass; returning True
            aborts the run with MatchCancelledError. None = never cancel.
    """

    follow_symlinks: bool = False
    should_cancel: Callable[[], bool] | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.follow_symlinks, bool):
            raise TypeError(
                f"follow_symlinks must be bool, got {type(self.follow_symlinks).__name__}"
            )
        if self.should_cancel is not None and not callable(self.should_cancel):
            raise TypeError("should_cancel must be callable or None")

    def is_cancelled(self) -> bool:
        """Check the cancellation hook."""
        return self.should_cancel is not None and bool(self.should_cancel())
