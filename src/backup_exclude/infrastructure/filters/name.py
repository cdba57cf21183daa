"""Name filters.

Filter files by final path segment using fnmatch.fnmatchcase
(case-sensitive on every platform). Directories always pass.
"""

from __future__ import annotations

import fnmatch
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from backup_exclude.domain.model.tree_entry import TreeEntry
    from backup_exclude.infrastructure.filters.types import Filter


def exclude_file_names(*patterns: str) -> Filter:
    """Create filter that excludes files whose name matches any pattern.

    Args:
        *patterns: Name globs (e.g., "*.log", "*.tar.gz").

    Returns:
        Filter that returns False for non-directories with a matching name.
    """

    def _filter(entry: TreeEntry) -> bool:
        if entry.is_dir:
            return True
        return not any(fnmatch.fnmatchcase(entry.name, p) for p in patterns)

    return _filter
