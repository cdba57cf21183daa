"""Preview of what a copy would include.

Walks the source tree the way a traversal-based copy engine does,
evaluating only the filter expression (the matcher is not re-run).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from backup_exclude.infrastructure.filters.compile import compile_expression
from backup_exclude.infrastructure.walker import walk_tree

if TYPE_CHECKING:
    from collections.abc import Iterator

    from backup_exclude.domain.model.configuration import MatcherConfig
    from backup_exclude.domain.model.match_result import MatchResult
    from backup_exclude.domain.model.tree_entry import TreeEntry


def iter_included(result: MatchResult, config: MatcherConfig | None = None) -> Iterator[TreeEntry]:
    """Walk result.root yielding entries the filter expression keeps.

    Excluded directories are pruned, so their contents are never visited.

    Args:
        result: Result of a matching run
        config: Walk configuration (follow_symlinks). Defaults if None.

    Yields:
        Entries that would be copied
    """
    keep = compile_expression(result.filter_expression)
    follow = config.follow_symlinks if config is not None else False
    yield from walk_tree(result.root, follow_symlinks=follow, prune=keep)
