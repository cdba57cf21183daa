"""Pattern registry for one matching run."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from backup_exclude.application.classifier import make_pattern

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from backup_exclude.domain.model.pattern import Pattern

logger = logging.getLogger(__name__)


class PatternRegistry:
    """Distinct patterns of one run, keyed by literal text.

    Mutable while patterns are added, read-only during matching.
    Enumeration is sorted by text: registration order never affects
    the result, and equal-rank ties always resolve the same way.
    """

    __slots__ = ("_patterns",)

    def __init__(self) -> None:
        self._patterns: dict[str, Pattern] = {}

    def add(self, raw: str) -> Pattern | None:
        """Register one raw pattern string.

        Surrounding whitespace is trimmed. Empty strings and # comments
        are skipped. Re-adding a known pattern is a no-op.

        Args:
            raw: Pattern as supplied by the user

        Returns:
            Registered Pattern, None if raw was skipped
        """
        text = raw.strip()
        if not text or text.startswith("#"):
            return None

        existing = self._patterns.get(text)
        if existing is not None:
            return existing

        pattern = make_pattern(text)
        self._patterns[text] = pattern
        logger.debug(f"Added pattern: {text} (type: {pattern.kind.name}, rank: {pattern.rank})")
        return pattern

    def add_all(self, raws: Iterable[str]) -> int:
        """Register several raw patterns.

        Returns:
            Number of patterns that were not registered before
        """
        before = len(self._patterns)
        for raw in raws:
            self.add(raw)
        return len(self._patterns) - before

    def get(self, text: str) -> Pattern | None:
        """Registered pattern by literal text."""
        return self._patterns.get(text)

    def patterns(self) -> tuple[Pattern, ...]:
        """All registered patterns, sorted by text."""
        return tuple(self._patterns[text] for text in sorted(self._patterns))

    def __len__(self) -> int:
        return len(self._patterns)

    def __contains__(self, text: object) -> bool:
        return text in self._patterns

    def __iter__(self) -> Iterator[Pattern]:
        return iter(self.patterns())
