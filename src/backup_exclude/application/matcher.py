"""Tree matcher: finds the paths one pattern matches.

One walk of the source tree per pattern. Every matched directory drags
in its whole subtree, so directory exclusion is always transitive.

Segment matching compares whole path segments with fnmatchcase:
"**/log" matches "log" and "a/b/log" but never "catalog".
"""

from __future__ import annotations

import fnmatch
import logging
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from backup_exclude.domain.model.configuration import MatcherConfig
from backup_exclude.domain.model.enums import PatternKind
from backup_exclude.domain.model.path_entry import Match
from backup_exclude.infrastructure.walker import SkipRecorder, stat_entry, walk_tree

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path

    from backup_exclude.domain.model.pattern import Pattern
    from backup_exclude.domain.model.tree_entry import TreeEntry

logger = logging.getLogger(__name__)


class TreeMatcher:
    """Per-kind search strategies over a source tree.

    Stateless apart from the injected config and skip recorder;
    one instance serves every pattern of a run.
    """

    __slots__ = ("_config", "_skips")

    def __init__(
        self,
        config: MatcherConfig | None = None,
        skips: SkipRecorder | None = None,
    ) -> None:
        """Initialize matcher.

        Args:
            config: Matcher configuration. Uses defaults if None.
            skips: Receives swallowed traversal errors. New recorder if None.
        """
        self._config = config or MatcherConfig()
        self._skips = skips if skips is not None else SkipRecorder()

    @property
    def skips(self) -> SkipRecorder:
        """Recorder of entries skipped so far."""
        return self._skips

    def match(self, root: Path, pattern: Pattern) -> tuple[Match, ...]:
        """Find every path under root that pattern matches.

        Args:
            root: Absolute source directory
            pattern: Registered pattern

        Returns:
            De-duplicated matches in walk order (directories before contents)

        Raises:
            ValueError: If root is not absolute (FAIL-FIRST)
        """
        if not root.is_absolute():
            raise ValueError(f"root must be absolute, got {root}")

        target = pattern.target
        match pattern.kind:
            case PatternKind.EXACT_PATH:
                entries = self._match_exact(root, target)
            case PatternKind.DIRECTORY_TRAILING_SLASH:
                entries = self._match_segments(root, target, directories_only=True)
            case PatternKind.DOUBLE_ASTERISK:
                entries = self._match_segments(root, target, directories_only=False)
            case PatternKind.FILE_EXTENSION:
                entries = self._match_file_names(root, target)
            case PatternKind.REGULAR:
                entries = self._match_regular(root, target)

        matches = tuple(dict.fromkeys(Match(path=e.path, kind=e.kind) for e in entries))
        logger.debug(f"Found {len(matches)} matches for pattern: {pattern.text}")
        return matches

    def _walk(self, root: Path) -> Iterator[TreeEntry]:
        return walk_tree(root, follow_symlinks=self._config.follow_symlinks, skips=self._skips)

    def _match_exact(self, root: Path, target: str) -> Iterator[TreeEntry]:
        """Existence check of root/target, plus contents if a directory."""
        relative = PurePosixPath(target)
        if not target or ".." in relative.parts:
            return
        entry = stat_entry(
            root,
            relative,
            follow_symlinks=self._config.follow_symlinks,
            skips=self._skips,
        )
        if entry is None:
            return
        yield from self._with_contents(entry)

    def _match_segments(
        self,
        root: Path,
        target: str,
        *,
        directories_only: bool,
    ) -> Iterator[TreeEntry]:
        """Entries whose trailing path segments match target's segments."""
        segments = tuple(s for s in target.split("/") if s)
        if not segments:
            return

        def _predicate(entry: TreeEntry) -> bool:
            if directories_only and not entry.is_dir:
                return False
            return _ends_with_segments(entry.relative, segments)

        yield from self._scan(root, _predicate)

    def _match_file_names(self, root: Path, name_glob: str) -> Iterator[TreeEntry]:
        """Non-directories whose name matches name_glob."""

        def _predicate(entry: TreeEntry) -> bool:
            return not entry.is_dir and fnmatch.fnmatchcase(entry.name, name_glob)

        yield from self._scan(root, _predicate)

    def _match_regular(self, root: Path, target: str) -> Iterator[TreeEntry]:
        """Directory root/target if it exists, otherwise a name glob search.

        Targets containing / are matched segment-wise like **/ patterns,
        since a single name can never contain a separator.
        """
        if "/" not in target:
            candidate = stat_entry(
                root,
                PurePosixPath(target),
                follow_symlinks=self._config.follow_symlinks,
                skips=self._skips,
            )
            if candidate is not None and candidate.is_dir:
                yield from self._with_contents(candidate)
                return
        else:
            yield from self._match_segments(root, target, directories_only=False)
            return

        name_glob = f"*{target}*"

        def _predicate(entry: TreeEntry) -> bool:
            return fnmatch.fnmatchcase(entry.name, name_glob)

        yield from self._scan(root, _predicate)

    def _scan(self, root: Path, predicate: Callable[[TreeEntry], bool]) -> Iterator[TreeEntry]:
        """Single walk yielding predicate hits and the contents of matched directories."""
        matched_dirs: set[PurePosixPath] = set()
        for entry in self._walk(root):
            inside = any(parent in matched_dirs for parent in entry.relative.parents)
            if inside or predicate(entry):
                yield entry
                if entry.is_dir and not inside:
                    matched_dirs.add(entry.relative)

    def _with_contents(self, entry: TreeEntry) -> Iterator[TreeEntry]:
        """Entry itself, then its whole subtree when it is a directory."""
        yield entry
        if entry.is_dir:
            yield from self._walk(entry.path)


def _ends_with_segments(relative: PurePosixPath, segments: tuple[str, ...]) -> bool:
    """Check that the last path segments match segments one by one."""
    parts = relative.parts
    if len(parts) < len(segments):
        return False
    tail = parts[len(parts) - len(segments) :]
    return all(fnmatch.fnmatchcase(part, seg) for part, seg in zip(tail, segments, strict=True))
