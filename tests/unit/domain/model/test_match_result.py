"""Tests for domain/model/match_result.py."""

from pathlib import Path

import pytest

from backup_exclude.application.classifier import make_pattern
from backup_exclude.domain.model.exclusion_set import ExclusionSet
from backup_exclude.domain.model.filter_expression import FilterExpression
from backup_exclude.domain.model.match_result import MatchResult
from backup_exclude.domain.model.match_stats import MatchStats
from backup_exclude.domain.model.tree_entry import SkippedEntry
from tests.factories import make_path_entry, make_result


class TestMatchResultCreation:
    """Tests for MatchResult validation."""

    def test_empty(self) -> None:
        result = MatchResult.empty(Path("/src"))
        assert result.exclusion_set.is_empty is True
        assert result.filter_expression.is_empty is True
        assert result.skipped == ()

    def test_empty_keeps_patterns(self) -> None:
        result = MatchResult.empty(Path("/src"), (make_pattern("*.log"),))
        assert result.exclusion_set.match_counts() == {"*.log": 0}

    def test_relative_root_raises(self) -> None:
        with pytest.raises(ValueError, match="absolute"):
            MatchResult.empty(Path("src"))

    def test_str_root_raises(self) -> None:
        with pytest.raises(TypeError, match="Path"):
            MatchResult.empty("/src")  # type: ignore[arg-type]

    def test_skipped_must_match_stats(self) -> None:
        skipped = (SkippedEntry(path=Path("/src/x"), error="PermissionError", message="denied"),)
        with pytest.raises(ValueError, match="entries_skipped"):
            MatchResult(
                root=Path("/src"),
                exclusion_set=ExclusionSet.empty(),
                filter_expression=FilterExpression.empty(),
                stats=MatchStats.empty(),
                skipped=skipped,
            )


class TestMatchResultProperties:
    """Tests for MatchResult convenience properties."""

    def test_sorted_exclusions(self) -> None:
        result = make_result(
            (
                make_path_entry("/src/b.log", "*.log"),
                make_path_entry("/src/a.log", "*.log"),
                make_path_entry("/src/cache", "cache/", is_dir=True),
            )
        )
        assert result.excluded_files == (Path("/src/a.log"), Path("/src/b.log"))
        assert result.excluded_directories == (Path("/src/cache"),)
