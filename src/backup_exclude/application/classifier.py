"""Pattern classifier and specificity ranker.

Both are pure, total functions: every string classifies, every kind ranks.
"""

from __future__ import annotations

from backup_exclude.domain.model.enums import FALLBACK_RANK, PatternKind
from backup_exclude.domain.model.pattern import Pattern


def classify_pattern(text: str) -> PatternKind:
    """Classify a pattern string into its structural kind.

    Rules, first match wins:
        1. ends with /                      -> DIRECTORY_TRAILING_SLASH
        2. contains / and no *              -> EXACT_PATH
        3. starts with **/                  -> DOUBLE_ASTERISK
        4. contains . and no /              -> FILE_EXTENSION
        5. anything else                    -> REGULAR

    Rule 1 precedes rule 2, so "a/b/" is a directory pattern.

    Args:
        text: Trimmed, non-empty, non-comment pattern

    Returns:
        PatternKind of the pattern

    Example:
        >>> classify_pattern("*.log")
        <PatternKind.FILE_EXTENSION: 4>
    """
    if text.endswith("/"):
        return PatternKind.DIRECTORY_TRAILING_SLASH
    if "/" in text and "*" not in text:
        return PatternKind.EXACT_PATH
    if text.startswith("**/"):
        return PatternKind.DOUBLE_ASTERISK
    if "." in text and "/" not in text:
        return PatternKind.FILE_EXTENSION
    return PatternKind.REGULAR


def rank_for(kind: PatternKind | None) -> int:
    """Specificity rank of a kind, higher = more specific.

    Args:
        kind: Pattern kind, None when unclassifiable

    Returns:
        Rank from the kind table, FALLBACK_RANK for None
    """
    if kind is None:
        return FALLBACK_RANK
    return kind.rank


def make_pattern(text: str) -> Pattern:
    """Classify text and build the Pattern.

    Raises:
        ValueError: If text is empty, untrimmed or a comment (FAIL-FIRST)
    """
    return Pattern(text=text, kind=classify_pattern(text))
