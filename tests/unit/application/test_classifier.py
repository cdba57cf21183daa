"""Tests for application/classifier.py."""

import pytest

from backup_exclude.application.classifier import classify_pattern, make_pattern, rank_for
from backup_exclude.domain.model.enums import FALLBACK_RANK, PatternKind


class TestClassifyPattern:
    """Tests for classify_pattern rules."""

    @pytest.mark.parametrize(
        ("text", "kind"),
        [
            ("cache/", PatternKind.DIRECTORY_TRAILING_SLASH),
            ("a/b/", PatternKind.DIRECTORY_TRAILING_SLASH),
            ("**/build/", PatternKind.DIRECTORY_TRAILING_SLASH),
            ("dir1/file4.txt", PatternKind.EXACT_PATH),
            ("/var/tmp", PatternKind.EXACT_PATH),
            ("**/log", PatternKind.DOUBLE_ASTERISK),
            ("**/subdir*", PatternKind.DOUBLE_ASTERISK),
            ("*.log", PatternKind.FILE_EXTENSION),
            (".bak", PatternKind.FILE_EXTENSION),
            ("file.tar.gz", PatternKind.FILE_EXTENSION),
            ("logs", PatternKind.REGULAR),
            ("test_dir", PatternKind.REGULAR),
            ("*", PatternKind.REGULAR),
            ("src/*/build", PatternKind.REGULAR),
        ],
    )
    def test_kind(self, text: str, kind: PatternKind) -> None:
        assert classify_pattern(text) is kind

    def test_trailing_slash_precedes_exact_path(self) -> None:
        """A pattern with / and no * but ending in / is a directory pattern."""
        assert classify_pattern("dir1/sub/") is PatternKind.DIRECTORY_TRAILING_SLASH

    def test_exact_path_precedes_extension(self) -> None:
        assert classify_pattern("docs/readme.md") is PatternKind.EXACT_PATH

    def test_deterministic(self) -> None:
        assert classify_pattern("*.log") is classify_pattern("*.log")


class TestRankFor:
    """Tests for rank_for."""

    def test_kind_rank(self) -> None:
        assert rank_for(PatternKind.EXACT_PATH) == 10
        assert rank_for(PatternKind.REGULAR) == 2

    def test_none_falls_back(self) -> None:
        assert rank_for(None) == FALLBACK_RANK


class TestMakePattern:
    """Tests for make_pattern."""

    def test_kind_agrees_with_classifier(self) -> None:
        pattern = make_pattern("**/log")
        assert pattern.kind is PatternKind.DOUBLE_ASTERISK
        assert pattern.target == "log"

    def test_invalid_text_raises(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            make_pattern("")
