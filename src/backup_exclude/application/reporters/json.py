"""JSON reporter: MatchResult -> JSON string."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from backup_exclude.domain.model.exclusion_set import ExclusionSet
    from backup_exclude.domain.model.filter_expression import FilterClause
    from backup_exclude.domain.model.match_stats import MatchStats
    from backup_exclude.domain.model.match_result import MatchResult
    from backup_exclude.domain.model.pattern import Pattern
    from backup_exclude.domain.model.tree_entry import SkippedEntry


class JsonReporter:
    """JSON reporter: outputs machine-readable JSON.

    Paths are sorted and keys are fixed, so equal results produce
    identical documents.
    """

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation. None for compact output.
        """
        self._indent = indent

    def report(self, result: MatchResult) -> str:
        """Format match result as JSON string.

        Args:
            result: Match result to format.

        Returns:
            JSON string with patterns, exclusions, filter and stats.
        """
        exclusion_set = result.exclusion_set
        data = {
            "root": str(result.root),
            "patterns": [_pattern_to_dict(p, exclusion_set) for p in exclusion_set.patterns],
            "excluded_files": [str(p) for p in result.excluded_files],
            "excluded_directories": [str(p) for p in result.excluded_directories],
            "filter": [_clause_to_dict(c) for c in result.filter_expression],
            "find_args": list(result.filter_expression.to_find_args()),
            "stats": _stats_to_dict(result.stats),
            "skipped": [_skipped_to_dict(s) for s in result.skipped],
        }
        return json.dumps(data, indent=self._indent)


def _pattern_to_dict(pattern: Pattern, exclusion_set: ExclusionSet) -> dict[str, object]:
    """Convert Pattern with its owned paths to dict."""
    return {
        "pattern": pattern.text,
        "kind": pattern.kind.name,
        "rank": pattern.rank,
        "files": [str(p) for p in exclusion_set.files_for(pattern.text)],
        "directories": [str(p) for p in exclusion_set.directories_for(pattern.text)],
    }


def _clause_to_dict(clause: FilterClause) -> dict[str, object]:
    """Convert FilterClause to dict."""
    return {
        "kind": clause.kind.name,
        "value": clause.value,
    }


def _stats_to_dict(stats: MatchStats) -> dict[str, object]:
    """Convert MatchStats to dict. elapsed_ms left out to keep output stable."""
    return {
        "patterns_processed": stats.patterns_processed,
        "paths_matched": stats.paths_matched,
        "entries_owned": stats.entries_owned,
        "ownership_overrides": stats.ownership_overrides,
        "entries_skipped": stats.entries_skipped,
    }


def _skipped_to_dict(entry: SkippedEntry) -> dict[str, object]:
    """Convert SkippedEntry to dict."""
    return {
        "path": str(entry.path),
        "error": entry.error,
        "message": entry.message,
    }
