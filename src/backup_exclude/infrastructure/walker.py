"""Recursive source tree walk.

Lazy, name-sorted, pre-order walk over os.scandir. Every call starts a
fresh generator, so a walk can be repeated on an unchanged tree.

Traversal errors never abort the walk: the failing entry is handed to the
SkipRecorder and the walk continues with its siblings. Entries created or
removed while a walk runs may or may not be reported.
"""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from backup_exclude.domain.model.tree_entry import SkippedEntry, TreeEntry

if TYPE_CHECKING:
    from collections.abc import Iterator

    from backup_exclude.infrastructure.filters.types import Filter

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SkipRecorder:
    """Collects entries skipped because of traversal errors.

    Mutable - one recorder per matching run.

    Attributes:
        _skipped: Recorded entries, in discovery order
    """

    _skipped: list[SkippedEntry] = field(default_factory=list)

    def record(self, path: Path, error: OSError) -> None:
        """Record a swallowed traversal error."""
        entry = SkippedEntry(
            path=path,
            error=type(error).__name__,
            message=error.strerror or str(error),
        )
        self._skipped.append(entry)
        logger.debug(f"Skipping {entry}")

    @property
    def skipped(self) -> tuple[SkippedEntry, ...]:
        """Recorded entries."""
        return tuple(self._skipped)

    def __len__(self) -> int:
        """Number of skipped entries."""
        return len(self._skipped)


def walk_tree(
    root: Path,
    *,
    follow_symlinks: bool = False,
    skips: SkipRecorder | None = None,
    prune: Filter | None = None,
) -> Iterator[TreeEntry]:
    """Walk every entry beneath root, root itself excluded.

    Directories are yielded before their contents. Siblings are sorted
    by name so equal trees always walk in the same order.

    Args:
        root: Directory to walk
        follow_symlinks: Descend into symlinked directories
        skips: Receives entries that could not be read. None = discard.
        prune: Include filter. Entries it rejects are neither yielded nor
            descended into. None = walk everything.

    Yields:
        TreeEntry for each file and directory
    """
    ancestors: frozenset[tuple[int, int]] = frozenset()
    if follow_symlinks:
        identity = _dir_identity(root)
        if identity is not None:
            ancestors = frozenset({identity})
    yield from _walk_dir(root, PurePosixPath(), follow_symlinks, skips, prune, ancestors)


def stat_entry(
    root: Path,
    relative: PurePosixPath,
    *,
    follow_symlinks: bool = False,
    skips: SkipRecorder | None = None,
) -> TreeEntry | None:
    """Look up a single entry by path relative to root.

    Args:
        root: Walk root
        relative: Path below root
        follow_symlinks: Report symlinks to directories as directories
        skips: Receives the entry if it exists but cannot be read

    Returns:
        TreeEntry, or None if the entry does not exist or cannot be read
    """
    path = root / relative
    try:
        st = path.lstat()
        if follow_symlinks and stat.S_ISLNK(st.st_mode):
            st = path.stat()
    except (FileNotFoundError, NotADirectoryError):
        return None
    except OSError as exc:
        if skips is not None:
            skips.record(path, exc)
        return None
    return TreeEntry(path=path, relative=relative, is_dir=stat.S_ISDIR(st.st_mode))


def _walk_dir(
    directory: Path,
    relative: PurePosixPath,
    follow_symlinks: bool,
    skips: SkipRecorder | None,
    prune: Filter | None,
    ancestors: frozenset[tuple[int, int]],
) -> Iterator[TreeEntry]:
    """Walk one directory level, recursing into subdirectories.

    ancestors holds the (device, inode) of every directory on the current
    descent path. Only those are refused, so a directory reached through
    several symlinks is walked under each path.
    """
    try:
        with os.scandir(directory) as it:
            children = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        if skips is not None:
            skips.record(directory, exc)
        return

    for child in children:
        try:
            is_dir = child.is_dir(follow_symlinks=follow_symlinks)
        except OSError as exc:
            if skips is not None:
                skips.record(Path(child.path), exc)
            continue

        entry = TreeEntry(path=Path(child.path), relative=relative / child.name, is_dir=is_dir)
        if prune is not None and not prune(entry):
            continue

        yield entry

        if not is_dir:
            continue
        child_ancestors = ancestors
        if follow_symlinks:
            # Symlink cycles: never re-enter a directory on the current path
            identity = _dir_identity(entry.path)
            if identity is None or identity in ancestors:
                continue
            child_ancestors = ancestors | {identity}
        yield from _walk_dir(
            entry.path, entry.relative, follow_symlinks, skips, prune, child_ancestors
        )


def _dir_identity(path: Path) -> tuple[int, int] | None:
    """Device and inode of a directory, None if it cannot be stat'ed."""
    try:
        st = path.stat()
    except OSError:
        return None
    return (st.st_dev, st.st_ino)
