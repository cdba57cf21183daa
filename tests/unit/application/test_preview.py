"""Tests for application/preview.py."""

from pathlib import Path

from backup_exclude.application.engine import ExclusionEngine
from backup_exclude.application.preview import iter_included
from tests.factories import make_tree


class TestIterIncluded:
    """Tests for iter_included."""

    def test_complement_of_exclusions(self, tmp_path: Path) -> None:
        make_tree(
            tmp_path,
            "a.log",
            "cache/blob.bin",
            "cache/deep/x.bin",
            "dir1/file4.txt",
            "dir1/file5.txt",
            "keep.txt",
        )
        result = ExclusionEngine().run(tmp_path, ["*.log", "cache/", "dir1/file4.txt"])
        included = {e.relative.as_posix() for e in iter_included(result)}

        assert included == {"dir1", "dir1/file5.txt", "keep.txt"}

    def test_no_patterns_includes_everything(self, tmp_path: Path) -> None:
        make_tree(tmp_path, "a/b.txt", "c.txt")
        result = ExclusionEngine().run(tmp_path, [])
        included = {e.relative.as_posix() for e in iter_included(result)}

        assert included == {"a", "a/b.txt", "c.txt"}
