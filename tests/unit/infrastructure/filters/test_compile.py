"""Tests for compile_expression."""

from backup_exclude.domain.model.enums import ClauseKind
from backup_exclude.domain.model.filter_expression import FilterClause, FilterExpression
from backup_exclude.infrastructure.filters.compile import compile_expression
from tests.factories import make_entry


class TestCompileExpression:
    """Tests for compile_expression."""

    def test_empty_expression_keeps_everything(self) -> None:
        keep = compile_expression(FilterExpression.empty())

        assert keep(make_entry("anything")) is True

    def test_agrees_with_expression(self) -> None:
        expression = FilterExpression.from_clauses(
            [
                FilterClause(kind=ClauseKind.SUBTREE, value="/src/cache"),
                FilterClause(kind=ClauseKind.EXACT_PATH, value="/src/dir1/file4.txt"),
                FilterClause(kind=ClauseKind.NAME_SUFFIX, value="*.log"),
            ]
        )
        keep = compile_expression(expression)
        entries = [
            make_entry("cache", is_dir=True),
            make_entry("cache/x.bin"),
            make_entry("dir1/file4.txt"),
            make_entry("dir1/file5.txt"),
            make_entry("logs.log", is_dir=True),
            make_entry("deep/app.log"),
            make_entry("readme.txt"),
        ]

        for entry in entries:
            assert keep(entry) is not expression.excludes(entry.path, is_dir=entry.is_dir)
