"""Engine: orchestrates one matching run.

raw patterns -> registry -> tree matcher (one pass per pattern)
-> resolver -> exclusion set + filter expression.
"""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path
from typing import TYPE_CHECKING

from backup_exclude.application.builder import build_exclusion_set, build_filter_expression
from backup_exclude.application.context import MatchContext
from backup_exclude.application.matcher import TreeMatcher
from backup_exclude.domain.exceptions import MatchCancelledError
from backup_exclude.domain.model.configuration import MatcherConfig
from backup_exclude.domain.model.match_result import MatchResult
from backup_exclude.domain.model.match_stats import MatchStats

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


class ExclusionEngine:
    """Runs the exclude-pattern matching pipeline.

    Single-threaded and synchronous. All run state lives in a fresh
    MatchContext, so one engine can serve any number of runs.

    Methods:
        run(): Match patterns against a source tree
    """

    def __init__(self, config: MatcherConfig | None = None) -> None:
        """Initialize engine.

        Args:
            config: Matcher configuration. Uses defaults if None.
        """
        self._config = config or MatcherConfig()

    @property
    def config(self) -> MatcherConfig:
        """Active configuration."""
        return self._config

    def run(self, root: Path | str, patterns: Iterable[str]) -> MatchResult:
        """Match patterns against the tree under root.

        No patterns and a missing source directory are valid inputs:
        both log at INFO and return an empty result.

        Args:
            root: Source directory (made absolute, symlinks kept)
            patterns: Raw pattern strings, comments and blanks allowed

        Returns:
            MatchResult with exclusion set, filter expression and stats

        Raises:
            MatchCancelledError: If config.should_cancel fires between passes
        """
        started = time.perf_counter()
        context = MatchContext(root=Path(os.path.abspath(root)))
        context.registry.add_all(patterns)
        registered = context.registry.patterns()

        if not registered:
            logger.info("No exclude patterns provided")
            return MatchResult.empty(context.root)
        if not context.root.is_dir():
            logger.info(f"Source directory not found, nothing to exclude: {context.root}")
            return MatchResult.empty(context.root, registered)

        logger.info(f"Matching {len(registered)} exclude patterns in {context.root}")
        paths_matched = self._match_all(context)

        exclusion_set = build_exclusion_set(context.resolver.entries(), registered)
        filter_expression = build_filter_expression(exclusion_set)
        stats = MatchStats(
            patterns_processed=len(registered),
            paths_matched=paths_matched,
            entries_owned=len(context.resolver),
            ownership_overrides=context.resolver.overrides,
            entries_skipped=len(context.skips),
            elapsed_ms=(time.perf_counter() - started) * 1000,
        )

        logger.info(
            f"Exclude pattern analysis complete: {exclusion_set.file_count} files, "
            f"{exclusion_set.directory_count} directories excluded"
        )
        if context.skips:
            logger.info(f"{len(context.skips)} entries skipped due to traversal errors")

        return MatchResult(
            root=context.root,
            exclusion_set=exclusion_set,
            filter_expression=filter_expression,
            stats=stats,
            skipped=context.skips.skipped,
        )

    def _match_all(self, context: MatchContext) -> int:
        """Run one tree pass per pattern, feeding the resolver.

        Returns:
            Total raw matches across all patterns
        """
        matcher = TreeMatcher(self._config, context.skips)
        registered = context.registry.patterns()
        paths_matched = 0

        for index, pattern in enumerate(registered, start=1):
            if self._config.is_cancelled():
                raise MatchCancelledError(pattern.text, index - 1)

            logger.debug(f"Processing pattern ({index}/{len(registered)}): {pattern.text}")
            matches = matcher.match(context.root, pattern)
            paths_matched += len(matches)
            for match in matches:
                context.resolver.offer(match, pattern)

        return paths_matched


def generate_exclude_matches(
    root: Path | str,
    patterns: Iterable[str],
    config: MatcherConfig | None = None,
) -> MatchResult:
    """Match patterns against root with a one-off engine.

    Args:
        root: Source directory
        patterns: Raw pattern strings
        config: Matcher configuration. Uses defaults if None.

    Returns:
        MatchResult of the run
    """
    return ExclusionEngine(config).run(root, patterns)
