"""Path filters.

Filter entries by absolute path: exact paths and whole subtrees.
Paths are compared as paths, not globs.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from backup_exclude.domain.model.tree_entry import TreeEntry
    from backup_exclude.infrastructure.filters.types import Filter


def exclude_exact(*paths: Path | str) -> Filter:
    """Create filter that excludes the given paths only.

    Args:
        *paths: Absolute paths to exclude.

    Returns:
        Filter that returns False for entries at one of the paths.
    """
    path_set = frozenset(Path(p) for p in paths)

    def _filter(entry: TreeEntry) -> bool:
        return entry.path not in path_set

    return _filter


def exclude_subtrees(*directories: Path | str) -> Filter:
    """Create filter that excludes directories and everything beneath them.

    Args:
        *directories: Absolute directory paths.

    Returns:
        Filter that returns False for a listed directory or any descendant.
    """
    dir_set = frozenset(Path(d) for d in directories)

    def _filter(entry: TreeEntry) -> bool:
        if entry.path in dir_set:
            return False
        return not any(parent in dir_set for parent in entry.path.parents)

    return _filter
