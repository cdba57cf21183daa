"""Exclusion resolver: one owning pattern per matched path."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from backup_exclude.domain.model.path_entry import PathEntry

if TYPE_CHECKING:
    from pathlib import Path

    from backup_exclude.domain.model.path_entry import Match
    from backup_exclude.domain.model.pattern import Pattern

logger = logging.getLogger(__name__)


class ExclusionResolver:
    """Arbitrates ownership when several patterns match the same path.

    Rules:
        - first match of a path creates its PathEntry
        - a later pattern takes over only with a strictly higher rank
        - equal rank keeps the current owner (no replacement on tie)

    Keeps the per-path map and the per-pattern reverse index in sync.
    Mutable - one resolver per matching run.
    """

    __slots__ = ("_entries", "_offers", "_overrides", "_owned")

    def __init__(self) -> None:
        self._entries: dict[Path, PathEntry] = {}
        # pattern text -> owned paths; dict keeps insertion order
        self._owned: dict[str, dict[Path, None]] = {}
        self._offers = 0
        self._overrides = 0

    def offer(self, match: Match, pattern: Pattern) -> bool:
        """Offer a matched path to its candidate owner.

        Args:
            match: Path hit from the tree matcher
            pattern: Pattern that produced the hit

        Returns:
            True if pattern now owns the path
        """
        self._offers += 1
        current = self._entries.get(match.path)

        if current is None:
            entry = PathEntry(path=match.path, kind=match.kind, owner=pattern)
        elif pattern.rank > current.rank:
            logger.debug(
                f"Pattern override for {match.path}: {current.owner.text} -> {pattern.text}"
            )
            self._owned[current.owner.text].pop(match.path, None)
            self._overrides += 1
            entry = replace(current, owner=pattern)
        else:
            return False

        self._entries[match.path] = entry
        self._owned.setdefault(pattern.text, {})[match.path] = None
        return True

    def entries(self) -> tuple[PathEntry, ...]:
        """Current entries, in first-match order."""
        return tuple(self._entries.values())

    def get(self, path: Path) -> PathEntry | None:
        """Current entry of path."""
        return self._entries.get(path)

    def owned_by(self, text: str) -> tuple[Path, ...]:
        """Paths currently owned by the pattern with this text."""
        return tuple(self._owned.get(text, ()))

    @property
    def offers(self) -> int:
        """Number of offers received."""
        return self._offers

    @property
    def overrides(self) -> int:
        """Number of times a higher ranked pattern took over a path."""
        return self._overrides

    def __len__(self) -> int:
        return len(self._entries)
