"""Domain exceptions."""

from backup_exclude.domain.exceptions.base import BackupExcludeError
from backup_exclude.domain.exceptions.cancelled import MatchCancelledError
from backup_exclude.domain.exceptions.pattern_file import PatternFileError

__all__ = [
    "BackupExcludeError",
    "MatchCancelledError",
    "PatternFileError",
]
