"""Tests for domain/model/tree_entry.py."""

from pathlib import Path, PurePosixPath

import pytest

from backup_exclude.domain.model.enums import EntryKind
from backup_exclude.domain.model.tree_entry import SkippedEntry, TreeEntry


class TestTreeEntry:
    """Tests for TreeEntry."""

    def test_file_entry(self) -> None:
        entry = TreeEntry(
            path=Path("/src/a/b.log"), relative=PurePosixPath("a/b.log"), is_dir=False
        )
        assert entry.kind is EntryKind.FILE
        assert entry.name == "b.log"

    def test_directory_entry(self) -> None:
        entry = TreeEntry(path=Path("/src/a"), relative=PurePosixPath("a"), is_dir=True)
        assert entry.kind is EntryKind.DIRECTORY

    def test_none_path_raises(self) -> None:
        with pytest.raises(TypeError, match="path"):
            TreeEntry(
                path=None,  # type: ignore[arg-type]
                relative=PurePosixPath("a"),
                is_dir=False,
            )


class TestSkippedEntry:
    """Tests for SkippedEntry."""

    def test_str_format(self) -> None:
        entry = SkippedEntry(path=Path("/src/secret"), error="PermissionError", message="denied")
        assert str(entry) == "/src/secret: PermissionError: denied"
