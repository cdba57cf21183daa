"""Domain model entities."""

from backup_exclude.domain.model.configuration import MatcherConfig
from backup_exclude.domain.model.enums import FALLBACK_RANK, ClauseKind, EntryKind, PatternKind
from backup_exclude.domain.model.exclusion_set import ExclusionSet
from backup_exclude.domain.model.filter_expression import FilterClause, FilterExpression
from backup_exclude.domain.model.match_result import MatchResult
from backup_exclude.domain.model.match_stats import MatchStats
from backup_exclude.domain.model.path_entry import Match, PathEntry
from backup_exclude.domain.model.pattern import Pattern
from backup_exclude.domain.model.tree_entry import SkippedEntry, TreeEntry

__all__ = [
    # Enums
    "PatternKind",
    "EntryKind",
    "ClauseKind",
    "FALLBACK_RANK",
    # Value objects
    "Pattern",
    "TreeEntry",
    "SkippedEntry",
    "Match",
    "PathEntry",
    "FilterClause",
    # Aggregates
    "ExclusionSet",
    "FilterExpression",
    "MatchStats",
    "MatchResult",
    # Configuration
    "MatcherConfig",
]
