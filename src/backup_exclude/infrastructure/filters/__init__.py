"""Infrastructure layer: stateless entry filters.

Filters are pure functions: Filter = Callable[[TreeEntry], bool]
True = include entry, False = exclude entry.

Usage:
    from backup_exclude.infrastructure.filters import compile_expression

    keep = compile_expression(result.filter_expression)
    copied = [e for e in walk_tree(root) if keep(e)]

    # Single-purpose filters
    keep_sources = exclude_file_names("*.tmp")
"""

from backup_exclude.infrastructure.filters.compile import compile_expression
from backup_exclude.infrastructure.filters.name import exclude_file_names
from backup_exclude.infrastructure.filters.path import exclude_exact, exclude_subtrees
from backup_exclude.infrastructure.filters.types import Filter

__all__ = [
    "Filter",
    "compile_expression",
    "exclude_exact",
    "exclude_file_names",
    "exclude_subtrees",
]
