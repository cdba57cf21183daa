"""Exclude pattern value object."""

from __future__ import annotations

from dataclasses import dataclass

from backup_exclude.domain.model.enums import PatternKind

_DOUBLE_ASTERISK_PREFIX = "**/"


@dataclass(frozen=True, slots=True)
class Pattern:
    """User-supplied exclusion rule with its derived kind.

    Patterns are unique by text within one matching run.
    Construct through the classifier (make_pattern or the registry)
    so that kind always agrees with the classification rules.

    Attributes:
        text: Literal pattern string (trimmed, non-empty, not a comment)
        kind: Structural category of the pattern
    """

    text: str
    kind: PatternKind

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.text, str):
            raise TypeError(f"text must be str, got {type(self.text).__name__}")
        if not self.text or self.text != self.text.strip():
            raise ValueError(f"text must be non-empty and trimmed, got {self.text!r}")
        if self.text.startswith("#"):
            raise ValueError(f"text must not be a comment, got {self.text!r}")
        if not isinstance(self.kind, PatternKind):
            raise TypeError(f"kind must be PatternKind, got {type(self.kind).__name__}")

    @property
    def rank(self) -> int:
        """Specificity rank of this pattern's kind."""
        return self.kind.rank

    @property
    def target(self) -> str:
        """Token the tree matcher searches for.

        - EXACT_PATH: path relative to the root (leading / dropped)
        - DIRECTORY_TRAILING_SLASH: directory name or path, slashes and **/ stripped
        - DOUBLE_ASTERISK: remainder after the **/ prefix
        - FILE_EXTENSION: name glob, always starting with *
        - REGULAR: the text itself
        """
        match self.kind:
            case PatternKind.EXACT_PATH:
                return self.text.lstrip("/")
            case PatternKind.DIRECTORY_TRAILING_SLASH:
                return self.text.strip("/").removeprefix(_DOUBLE_ASTERISK_PREFIX)
            case PatternKind.DOUBLE_ASTERISK:
                return self.text.removeprefix(_DOUBLE_ASTERISK_PREFIX)
            case PatternKind.FILE_EXTENSION:
                return "*" + self.text.lstrip("*")
            case PatternKind.REGULAR:
                return self.text

    def __str__(self) -> str:
        """Format as the literal pattern text."""
        return self.text
