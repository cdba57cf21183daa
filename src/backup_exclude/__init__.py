"""backup_exclude - exclude-pattern matching engine for btrfs backups."""

__version__ = "0.1.0"

from backup_exclude.application.engine import ExclusionEngine, generate_exclude_matches
from backup_exclude.application.sources import collect_patterns, load_exclude_file
from backup_exclude.domain.model.configuration import MatcherConfig
from backup_exclude.domain.model.match_result import MatchResult

__all__ = [
    "ExclusionEngine",
    "MatchResult",
    "MatcherConfig",
    "__version__",
    "collect_patterns",
    "generate_exclude_matches",
    "load_exclude_file",
]
