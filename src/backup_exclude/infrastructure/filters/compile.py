"""Compile a FilterExpression into a single include filter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from backup_exclude.domain.model.enums import ClauseKind
from backup_exclude.infrastructure.filters.name import exclude_file_names
from backup_exclude.infrastructure.filters.path import exclude_exact, exclude_subtrees

if TYPE_CHECKING:
    from backup_exclude.domain.model.filter_expression import FilterExpression
    from backup_exclude.domain.model.tree_entry import TreeEntry
    from backup_exclude.infrastructure.filters.types import Filter


def compile_expression(expression: FilterExpression) -> Filter:
    """Build an include filter equivalent to expression.

    Clauses are grouped by kind so each group is checked against one
    frozenset or glob list instead of clause by clause.

    Args:
        expression: Filter expression from a matching run.

    Returns:
        Filter returning True for entries the copy engine should keep.
        Empty expression = always True.
    """
    exact = [c.value for c in expression.of_kind(ClauseKind.EXACT_PATH)]
    subtrees = [c.value for c in expression.of_kind(ClauseKind.SUBTREE)]
    names = [c.value for c in expression.of_kind(ClauseKind.NAME_SUFFIX)]

    filters: list[Filter] = []
    if subtrees:
        filters.append(exclude_subtrees(*subtrees))
    if exact:
        filters.append(exclude_exact(*exact))
    if names:
        filters.append(exclude_file_names(*names))

    def _keep(entry: TreeEntry) -> bool:
        return all(f(entry) for f in filters)

    return _keep
