"""Filter expression handed to the copy engine.

A flat list of exclusion predicates derived once from the final
ExclusionSet. The copy engine evaluates it per entry while walking the
tree itself, without re-running the matcher. Clause order carries no
meaning: ownership conflicts were already resolved.
"""

from __future__ import annotations

import fnmatch
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from backup_exclude.domain.model.enums import ClauseKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

# Characters find(1) -path treats as glob syntax
_FIND_GLOB_CHARS = ("\\", "*", "?", "[")


@dataclass(frozen=True, slots=True)
class FilterClause:
    """Single exclusion predicate.

    Attributes:
        kind: Predicate type
        value: Absolute path for EXACT_PATH/SUBTREE, name glob for NAME_SUFFIX
    """

    kind: ClauseKind
    value: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.kind, ClauseKind):
            raise TypeError(f"kind must be ClauseKind, got {type(self.kind).__name__}")
        if not self.value:
            raise ValueError("value must not be empty")
        if self.kind is not ClauseKind.NAME_SUFFIX and not PurePath(self.value).is_absolute():
            raise ValueError(f"{self.kind.name} clause requires absolute path, got {self.value}")

    def excludes(self, path: PurePath, is_dir: bool = False) -> bool:
        """Check if this clause excludes path.

        NAME_SUFFIX applies to non-directories only.

        Args:
            path: Absolute path of the entry
            is_dir: True if the entry is a directory

        Returns:
            True if the entry must be skipped
        """
        match self.kind:
            case ClauseKind.EXACT_PATH:
                return path == PurePath(self.value)
            case ClauseKind.SUBTREE:
                top = PurePath(self.value)
                return path == top or top in path.parents
            case ClauseKind.NAME_SUFFIX:
                return not is_dir and fnmatch.fnmatchcase(path.name, self.value)

    def to_find_args(self) -> tuple[str, ...]:
        """Render clause as find(1) negated tests."""
        match self.kind:
            case ClauseKind.EXACT_PATH:
                return ("-not", "-path", _escape_find_path(self.value))
            case ClauseKind.SUBTREE:
                escaped = _escape_find_path(self.value)
                return ("-not", "-path", escaped, "-not", "-path", f"{escaped}/*")
            case ClauseKind.NAME_SUFFIX:
                return ("-not", "(", "-not", "-type", "d", "-name", self.value, ")")

    def __str__(self) -> str:
        """Format as KIND value."""
        return f"{self.kind.name} {self.value}"


@dataclass(frozen=True, slots=True)
class FilterExpression:
    """Order-independent list of exclusion clauses.

    Clauses are unique and stored sorted by (kind, value), so equal
    exclusion sets always render identically.

    Attributes:
        clauses: Sorted, de-duplicated clauses
    """

    clauses: tuple[FilterClause, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(set(self.clauses)) != len(self.clauses):
            raise ValueError("clauses must be unique")
        if list(self.clauses) != sorted(self.clauses, key=_clause_sort_key):
            raise ValueError("clauses must be sorted, use FilterExpression.from_clauses()")

    @classmethod
    def from_clauses(cls, clauses: Iterable[FilterClause]) -> FilterExpression:
        """Create expression from clauses in any order, dropping duplicates."""
        return cls(clauses=tuple(sorted(set(clauses), key=_clause_sort_key)))

    @classmethod
    def empty(cls) -> FilterExpression:
        """Create expression that excludes nothing."""
        return cls(clauses=())

    @property
    def is_empty(self) -> bool:
        """True if the expression has no clauses."""
        return not self.clauses

    def of_kind(self, kind: ClauseKind) -> tuple[FilterClause, ...]:
        """Clauses of one predicate type."""
        return tuple(c for c in self.clauses if c.kind is kind)

    def excludes(self, path: PurePath | str, *, is_dir: bool = False) -> bool:
        """Check if any clause excludes path.

        Args:
            path: Absolute path of the entry
            is_dir: True if the entry is a directory

        Returns:
            True if the copy engine must skip the entry
        """
        candidate = Path(path)
        return any(c.excludes(candidate, is_dir) for c in self.clauses)

    def to_find_args(self) -> tuple[str, ...]:
        """Render expression as find(1) arguments.

        Append to `find SOURCE` to list what will be copied.
        """
        args: list[str] = []
        for clause in self.clauses:
            args.extend(clause.to_find_args())
        return tuple(args)

    def __len__(self) -> int:
        """Number of clauses."""
        return len(self.clauses)

    def __iter__(self) -> Iterator[FilterClause]:
        """Iterate clauses in sorted order."""
        return iter(self.clauses)


def _clause_sort_key(clause: FilterClause) -> tuple[int, str]:
    """Sort by kind declaration order, then value."""
    return (clause.kind.value, clause.value)


def _escape_find_path(path: str) -> str:
    """Escape glob metacharacters so find -path matches literally."""
    for char in _FIND_GLOB_CHARS:
        path = path.replace(char, f"\\{char}")
    return path
