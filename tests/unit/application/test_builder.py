"""Tests for application/builder.py."""

from pathlib import Path

import pytest

from backup_exclude.application.builder import build_exclusion_set, build_filter_expression
from backup_exclude.application.classifier import make_pattern
from backup_exclude.domain.model.enums import ClauseKind
from tests.factories import make_path_entry


class TestBuildExclusionSet:
    """Tests for build_exclusion_set."""

    def test_partitions_by_kind(self) -> None:
        entries = (
            make_path_entry("/src/cache", "cache/", is_dir=True),
            make_path_entry("/src/cache/a.bin", "cache/"),
        )
        exclusion_set = build_exclusion_set(entries, (make_pattern("cache/"),))
        assert exclusion_set.directories == frozenset({Path("/src/cache")})
        assert exclusion_set.files == frozenset({Path("/src/cache/a.bin")})

    def test_owned_sorted_and_complete(self) -> None:
        entries = (
            make_path_entry("/src/b.log", "*.log"),
            make_path_entry("/src/a.log", "*.log"),
        )
        patterns = (make_pattern("*.log"), make_pattern("*.tmp"))
        exclusion_set = build_exclusion_set(entries, patterns)
        assert [e.path for e in exclusion_set.owned["*.log"]] == [
            Path("/src/a.log"),
            Path("/src/b.log"),
        ]
        assert exclusion_set.owned["*.tmp"] == ()

    def test_unregistered_owner_raises(self) -> None:
        entries = (make_path_entry("/src/a.log", "*.log"),)
        with pytest.raises(ValueError, match="unregistered"):
            build_exclusion_set(entries, (make_pattern("*.tmp"),))


class TestBuildFilterExpression:
    """Tests for build_filter_expression."""

    def test_top_directories_become_subtrees(self) -> None:
        entries = (
            make_path_entry("/src/cache", "cache/", is_dir=True),
            make_path_entry("/src/cache/inner", "cache/", is_dir=True),
            make_path_entry("/src/cache/inner/a.bin", "cache/"),
        )
        exclusion_set = build_exclusion_set(entries, (make_pattern("cache/"),))
        expression = build_filter_expression(exclusion_set)
        assert [str(c) for c in expression] == ["SUBTREE /src/cache"]

    def test_extension_pattern_becomes_name_suffix(self) -> None:
        entries = (
            make_path_entry("/src/a.log", "*.log"),
            make_path_entry("/src/x/b.log", "*.log"),
        )
        exclusion_set = build_exclusion_set(entries, (make_pattern("*.log"), make_pattern(".bak")))
        expression = build_filter_expression(exclusion_set)
        assert [str(c) for c in expression] == ["NAME_SUFFIX *.log"]

    def test_other_files_become_exact_paths(self) -> None:
        entries = (
            make_path_entry("/src/dir1/file4.txt", "dir1/file4.txt"),
            make_path_entry("/src/core", "core"),
        )
        patterns = (make_pattern("dir1/file4.txt"), make_pattern("core"))
        expression = build_filter_expression(build_exclusion_set(entries, patterns))
        assert all(c.kind is ClauseKind.EXACT_PATH for c in expression)
        assert [c.value for c in expression] == ["/src/core", "/src/dir1/file4.txt"]

    def test_file_inside_excluded_directory_not_listed(self) -> None:
        entries = (
            make_path_entry("/src/logs", "logs/", is_dir=True),
            make_path_entry("/src/logs/keep.txt", "logs/keep.txt"),
        )
        patterns = (make_pattern("logs/"), make_pattern("logs/keep.txt"))
        expression = build_filter_expression(build_exclusion_set(entries, patterns))
        assert [str(c) for c in expression] == ["SUBTREE /src/logs"]

    def test_empty_set(self) -> None:
        exclusion_set = build_exclusion_set((), (make_pattern("*.log"),))
        assert build_filter_expression(exclusion_set).is_empty is True
