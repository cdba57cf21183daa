"""Pattern sources: --exclude values and --exclude-from files.

Exclude-file format:
    - one pattern per line
    - surrounding whitespace is ignored
    - blank lines are skipped
    - lines starting with # are comments
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from backup_exclude.domain.exceptions import PatternFileError

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


def parse_pattern_lines(lines: Iterable[str]) -> tuple[str, ...]:
    """Extract patterns from exclude-file lines.

    Args:
        lines: Raw lines (newlines allowed)

    Returns:
        Trimmed patterns in input order, blanks and comments dropped
    """
    patterns: list[str] = []
    for line in lines:
        text = line.strip()
        if not text or text.startswith("#"):
            continue
        patterns.append(text)
    return tuple(patterns)


def load_exclude_file(path: Path) -> tuple[str, ...]:
    """Read patterns from an --exclude-from file.

    Args:
        path: Exclude file

    Returns:
        Patterns in file order

    Raises:
        PatternFileError: If the file does not exist or cannot be read
    """
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError as exc:
        logger.warning(f"Exclude file not found: {path}")
        raise PatternFileError(path, "file not found") from exc
    except OSError as exc:
        logger.warning(f"Error reading exclude file {path}: {exc}")
        raise PatternFileError(path, exc.strerror or str(exc)) from exc

    patterns = parse_pattern_lines(text.splitlines())
    logger.info(f"Loaded {len(patterns)} patterns from {path}")
    return patterns


def collect_patterns(
    excludes: Iterable[str] = (),
    exclude_from: Iterable[Path | str] = (),
) -> tuple[str, ...]:
    """Merge --exclude values and --exclude-from files.

    Flag values come first, then each file in order. Later duplicates
    are dropped.

    Args:
        excludes: Values of repeated --exclude flags
        exclude_from: Paths given with --exclude-from

    Returns:
        Distinct patterns in first-seen order

    Raises:
        PatternFileError: If any exclude file cannot be read
    """
    collected = list(parse_pattern_lines(excludes))
    for file_path in exclude_from:
        collected.extend(load_exclude_file(Path(file_path)))
    return tuple(dict.fromkeys(collected))
