"""Tests for application/registry.py."""

from backup_exclude.application.registry import PatternRegistry
from backup_exclude.domain.model.enums import PatternKind


class TestPatternRegistryAdd:
    """Tests for PatternRegistry.add."""

    def test_add_classifies(self) -> None:
        registry = PatternRegistry()
        pattern = registry.add("*.log")
        assert pattern is not None
        assert pattern.kind is PatternKind.FILE_EXTENSION
        assert "*.log" in registry

    def test_trims_whitespace(self) -> None:
        registry = PatternRegistry()
        pattern = registry.add("  cache/  ")
        assert pattern is not None
        assert pattern.text == "cache/"

    def test_skips_blank_and_comments(self) -> None:
        registry = PatternRegistry()
        assert registry.add("") is None
        assert registry.add("   ") is None
        assert registry.add("# comment") is None
        assert registry.add("  # indented comment") is None
        assert len(registry) == 0

    def test_duplicate_is_noop(self) -> None:
        registry = PatternRegistry()
        first = registry.add("logs")
        second = registry.add(" logs")
        assert first is second
        assert len(registry) == 1


class TestPatternRegistryQueries:
    """Tests for PatternRegistry enumeration and lookup."""

    def test_add_all_counts_new(self) -> None:
        registry = PatternRegistry()
        assert registry.add_all(["a", "b", "a", "# c", ""]) == 2
        assert registry.add_all(["b", "c"]) == 1

    def test_patterns_sorted_by_text(self) -> None:
        registry = PatternRegistry()
        registry.add_all(["logs", "*.log", "cache/", "**/tmp"])
        assert [p.text for p in registry.patterns()] == ["**/tmp", "*.log", "cache/", "logs"]
        assert [p.text for p in registry] == ["**/tmp", "*.log", "cache/", "logs"]

    def test_order_independent(self) -> None:
        a = PatternRegistry()
        b = PatternRegistry()
        a.add_all(["x.txt", "logs/", "data"])
        b.add_all(["data", "x.txt", "logs/"])
        assert a.patterns() == b.patterns()

    def test_get(self) -> None:
        registry = PatternRegistry()
        registry.add("logs/")
        pattern = registry.get("logs/")
        assert pattern is not None
        assert pattern.kind is PatternKind.DIRECTORY_TRAILING_SLASH
        assert registry.get("missing") is None
