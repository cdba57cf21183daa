"""Tests for domain/model/enums.py."""

from backup_exclude.domain.model.enums import FALLBACK_RANK, ClauseKind, EntryKind, PatternKind


class TestPatternKind:
    """Tests for PatternKind ranks."""

    def test_rank_table(self) -> None:
        assert PatternKind.EXACT_PATH.rank == 10
        assert PatternKind.DIRECTORY_TRAILING_SLASH.rank == 8
        assert PatternKind.DOUBLE_ASTERISK.rank == 6
        assert PatternKind.FILE_EXTENSION.rank == 4
        assert PatternKind.REGULAR.rank == 2

    def test_ranks_are_distinct(self) -> None:
        """Distinct ranks give a total order over kinds."""
        ranks = [k.rank for k in PatternKind]
        assert len(set(ranks)) == len(ranks)

    def test_fallback_below_every_kind(self) -> None:
        assert FALLBACK_RANK == 1
        assert all(k.rank > FALLBACK_RANK for k in PatternKind)

    def test_declared_most_specific_first(self) -> None:
        ranks = [k.rank for k in PatternKind]
        assert ranks == sorted(ranks, reverse=True)


class TestEntryAndClauseKind:
    """Tests for EntryKind and ClauseKind members."""

    def test_entry_kind_members(self) -> None:
        assert {k.name for k in EntryKind} == {"FILE", "DIRECTORY"}

    def test_clause_kind_members(self) -> None:
        assert {k.name for k in ClauseKind} == {"EXACT_PATH", "NAME_SUFFIX", "SUBTREE"}
