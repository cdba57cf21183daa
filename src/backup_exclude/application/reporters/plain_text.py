"""Plain text reporter.

Stdlib-only reporter for logs and non-interactive review.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from backup_exclude.domain.model.exclusion_set import ExclusionSet
    from backup_exclude.domain.model.match_result import MatchResult

_WIDTH = 70


class PlainTextReporter:
    """Plain text reporter: summary plus per-pattern review section."""

    def __init__(self, *, show_paths: bool = True) -> None:
        """Initialize reporter.

        Args:
            show_paths: List every owned path under its pattern.
        """
        self._show_paths = show_paths

    def report(self, result: MatchResult) -> str:
        """Format match result as plain text.

        Args:
            result: Match result to format.

        Returns:
            Multi-line text ending with a newline.
        """
        lines: list[str] = []
        self._report_header(lines)
        self._report_summary(lines, result)

        if result.exclusion_set.patterns:
            self._report_patterns(lines, result.exclusion_set)

        if result.skipped:
            self._report_skipped(lines, result)

        lines.append("")
        lines.append("=" * _WIDTH)
        return "\n".join(lines) + "\n"

    def _report_header(self, lines: list[str]) -> None:
        lines.append("=" * _WIDTH)
        lines.append("Exclude Pattern Review")
        lines.append("=" * _WIDTH)

    def _report_summary(self, lines: list[str], result: MatchResult) -> None:
        exclusion_set = result.exclusion_set
        lines.append("")
        lines.append(f"Source: {result.root}")
        lines.append("Summary:")
        lines.append(f"  Patterns: {len(exclusion_set.patterns)}")
        lines.append(f"  Files excluded: {exclusion_set.file_count}")
        lines.append(f"  Directories excluded: {exclusion_set.directory_count}")
        lines.append(f"  Filter clauses: {len(result.filter_expression)}")
        lines.append(f"  Skipped entries: {result.stats.entries_skipped}")

    def _report_patterns(self, lines: list[str], exclusion_set: ExclusionSet) -> None:
        lines.append("")
        lines.append("-" * _WIDTH)
        lines.append(f"Patterns ({len(exclusion_set.patterns)}):")
        lines.append("-" * _WIDTH)

        for i, pattern in enumerate(exclusion_set.patterns, start=1):
            files = exclusion_set.files_for(pattern.text)
            directories = exclusion_set.directories_for(pattern.text)
            lines.append("")
            lines.append(f"{i}. {pattern.text} [{pattern.kind.name}, rank {pattern.rank}]")
            lines.append(f"   Files: {len(files)}, Directories: {len(directories)}")
            if self._show_paths:
                lines.extend(f"   {d}/" for d in directories)
                lines.extend(f"   {f}" for f in files)

    def _report_skipped(self, lines: list[str], result: MatchResult) -> None:
        lines.append("")
        lines.append("-" * _WIDTH)
        lines.append(f"Skipped ({len(result.skipped)}):")
        lines.append("-" * _WIDTH)
        lines.extend(f"  {entry}" for entry in result.skipped)
