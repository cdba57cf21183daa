"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from backup_exclude.domain.model.match_result import MatchResult


class ReporterProtocol(Protocol):
    """Protocol for match result reporters.

    Output is str, not print(). Caller decides destination.
    """

    def report(self, result: MatchResult) -> str:
        """Format match result as string.

        Args:
            result: Match result to format.

        Returns:
            Formatted string representation.
        """
        ...
