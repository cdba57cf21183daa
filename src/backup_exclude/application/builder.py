"""Exclusion set builder: resolver output -> ExclusionSet + FilterExpression."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from backup_exclude.domain.model.enums import ClauseKind, EntryKind, PatternKind
from backup_exclude.domain.model.exclusion_set import ExclusionSet
from backup_exclude.domain.model.filter_expression import FilterClause, FilterExpression

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from backup_exclude.domain.model.path_entry import PathEntry
    from backup_exclude.domain.model.pattern import Pattern


def build_exclusion_set(entries: Iterable[PathEntry], patterns: Iterable[Pattern]) -> ExclusionSet:
    """Aggregate resolved entries into the final exclusion view.

    Args:
        entries: One PathEntry per excluded path
        patterns: Every registered pattern (owners must be among them)

    Returns:
        ExclusionSet partitioned by kind, with per-pattern owned lists

    Raises:
        ValueError: If an entry is owned by an unregistered pattern
    """
    registered = tuple(sorted(patterns, key=lambda p: p.text))
    by_path = {e.path: e for e in sorted(entries, key=lambda e: e.path)}

    owned: dict[str, list[PathEntry]] = {p.text: [] for p in registered}
    for entry in by_path.values():
        bucket = owned.get(entry.owner.text)
        if bucket is None:
            raise ValueError(f"entry {entry.path} owned by unregistered pattern {entry.owner.text}")
        bucket.append(entry)

    return ExclusionSet(
        files=frozenset(p for p, e in by_path.items() if e.kind is EntryKind.FILE),
        directories=frozenset(p for p, e in by_path.items() if e.kind is EntryKind.DIRECTORY),
        entries=MappingProxyType(by_path),
        owned=MappingProxyType({text: tuple(items) for text, items in owned.items()}),
        patterns=registered,
    )


def build_filter_expression(exclusion_set: ExclusionSet) -> FilterExpression:
    """Derive the copy engine's filter expression.

    Clauses:
        - SUBTREE for each excluded directory with no excluded ancestor
        - NAME_SUFFIX for each extension pattern owning at least one entry
        - EXACT_PATH for each remaining excluded file not covered above

    Args:
        exclusion_set: Final exclusion view

    Returns:
        FilterExpression excluding exactly the paths of the set
    """
    tops = exclusion_set.top_directories()
    clauses = [FilterClause(kind=ClauseKind.SUBTREE, value=str(d)) for d in tops]

    suffix_owners: set[str] = set()
    for pattern in exclusion_set.patterns:
        if pattern.kind is PatternKind.FILE_EXTENSION and exclusion_set.owned.get(pattern.text):
            clauses.append(FilterClause(kind=ClauseKind.NAME_SUFFIX, value=pattern.target))
            suffix_owners.add(pattern.text)

    top_set = frozenset(tops)
    for path in sorted(exclusion_set.files):
        if _is_beneath(path, top_set):
            continue
        if exclusion_set.entries[path].owner.text in suffix_owners:
            continue
        clauses.append(FilterClause(kind=ClauseKind.EXACT_PATH, value=str(path)))

    return FilterExpression.from_clauses(clauses)


def _is_beneath(path: Path, directories: frozenset[Path]) -> bool:
    return any(parent in directories for parent in path.parents)
