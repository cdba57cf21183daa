"""Tests for domain/exceptions/pattern_file.py."""

from pathlib import Path

import pytest

from backup_exclude.domain.exceptions import BackupExcludeError, PatternFileError


class TestPatternFileError:
    """Tests for PatternFileError."""

    def test_attributes_and_message(self) -> None:
        err = PatternFileError(Path("/etc/excludes"), "file not found")
        assert err.path == Path("/etc/excludes")
        assert err.reason == "file not found"
        assert str(err) == "Cannot read exclude file /etc/excludes: file not found"

    def test_is_library_error(self) -> None:
        assert issubclass(PatternFileError, BackupExcludeError)

    def test_none_path_raises(self) -> None:
        with pytest.raises(TypeError, match="path"):
            PatternFileError(None, "reason")  # type: ignore[arg-type]

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason"):
            PatternFileError(Path("/x"), "")
