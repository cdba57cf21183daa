"""Application layer: classification, matching, arbitration and reporting.

Pipeline:
    PatternRegistry -> TreeMatcher -> ExclusionResolver -> builder
Orchestrated by ExclusionEngine.
"""

from backup_exclude.application.builder import build_exclusion_set, build_filter_expression
from backup_exclude.application.classifier import classify_pattern, make_pattern, rank_for
from backup_exclude.application.context import MatchContext
from backup_exclude.application.engine import ExclusionEngine, generate_exclude_matches
from backup_exclude.application.matcher import TreeMatcher
from backup_exclude.application.preview import iter_included
from backup_exclude.application.registry import PatternRegistry
from backup_exclude.application.reporters import (
    ConsoleConfig,
    ConsoleReporter,
    JsonReporter,
    PlainTextReporter,
    ReporterProtocol,
)
from backup_exclude.application.resolver import ExclusionResolver
from backup_exclude.application.sources import (
    collect_patterns,
    load_exclude_file,
    parse_pattern_lines,
)

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "ExclusionEngine",
    "ExclusionResolver",
    "JsonReporter",
    "MatchContext",
    "PatternRegistry",
    "PlainTextReporter",
    "ReporterProtocol",
    "TreeMatcher",
    "build_exclusion_set",
    "build_filter_expression",
    "classify_pattern",
    "collect_patterns",
    "generate_exclude_matches",
    "iter_included",
    "load_exclude_file",
    "make_pattern",
    "parse_pattern_lines",
    "rank_for",
]
