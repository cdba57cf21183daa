"""Tests for JsonReporter."""

import json

from backup_exclude.application.reporters.json import JsonReporter
from tests.factories import make_path_entry, make_result, make_skipped


def _result():
    return make_result(
        (
            make_path_entry("/src/cache", "cache/", is_dir=True),
            make_path_entry("/src/cache/blob.bin", "cache/"),
            make_path_entry("/src/a.log", "*.log"),
        ),
        ("*.tmp",),
    )


class TestJsonReporter:
    """Tests for JsonReporter."""

    def test_valid_json(self) -> None:
        data = json.loads(JsonReporter().report(_result()))
        assert set(data) == {
            "root",
            "patterns",
            "excluded_files",
            "excluded_directories",
            "filter",
            "find_args",
            "stats",
            "skipped",
        }
        assert data["root"] == "/src"

    def test_patterns(self) -> None:
        data = json.loads(JsonReporter().report(_result()))
        by_text = {p["pattern"]: p for p in data["patterns"]}
        assert by_text["cache/"] == {
            "pattern": "cache/",
            "kind": "DIRECTORY_TRAILING_SLASH",
            "rank": 8,
            "files": ["/src/cache/blob.bin"],
            "directories": ["/src/cache"],
        }
        assert by_text["*.tmp"]["files"] == []

    def test_exclusions_sorted(self) -> None:
        data = json.loads(JsonReporter().report(_result()))
        assert data["excluded_files"] == ["/src/a.log", "/src/cache/blob.bin"]
        assert data["excluded_directories"] == ["/src/cache"]

    def test_filter_and_find_args(self) -> None:
        data = json.loads(JsonReporter().report(_result()))
        assert data["filter"] == [
            {"kind": "NAME_SUFFIX", "value": "*.log"},
            {"kind": "SUBTREE", "value": "/src/cache"},
        ]
        assert data["find_args"][:3] == ["-not", "(", "-not"]

    def test_stats_without_timing(self) -> None:
        data = json.loads(JsonReporter().report(_result()))
        assert data["stats"]["entries_owned"] == 3
        assert "elapsed_ms" not in data["stats"]

    def test_skipped(self) -> None:
        skipped = (make_skipped(),)
        data = json.loads(JsonReporter().report(make_result(skipped=skipped)))
        assert data["skipped"] == [
            {"path": "/src/locked", "error": "PermissionError", "message": "denied"}
        ]

    def test_compact(self) -> None:
        output = JsonReporter(indent=None).report(make_result())
        assert "\n" not in output

    def test_deterministic(self) -> None:
        assert JsonReporter().report(_result()) == JsonReporter().report(_result())
