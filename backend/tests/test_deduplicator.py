"""Test suite for duplicate clause resolution."""
from lma_lens.schemas.clause import Clause, ClauseType
from lma_lens.services.deduplicator import deduplicate_clauses


def _clause(clause_id, section, text, parent=None):
    return Clause(id=clause_id, section=section, text=text, type=ClauseType.GENERAL, parent_section=parent)


class TestDeduplication:

    def test_first_occurrence_kept(self):
        first = _clause("clause_1", "A", "Corporate details of the Borrower", parent="2")
        second = _clause("clause_2", "A", "Corporate details of the Borrower", parent="1")

        assert deduplicate_clauses([first, second]) == [first]

    def test_self_referential_replaced_in_place(self):
        """Test: a self-referential first copy yields to a later well-parented copy."""
        before = _clause("clause_1", "1", "Definitions and interpretation")
        self_ref = _clause("clause_2", "A", "Corporate details of the Borrower", parent="A")
        after = _clause("clause_3", "2", "The facility is a term loan")
        proper = _clause("clause_4", "A", "Corporate details of the Borrower", parent="2")

        result = deduplicate_clauses([before, self_ref, after, proper])

        assert [c.id for c in result] == ["clause_1", "clause_4", "clause_3"]
        assert result[1].parent_section == "2"

    def test_self_referential_not_replaced_by_self_referential(self):
        first = _clause("clause_1", "(i)", "a first ranking charge", parent="(i)")
        second = _clause("clause_2", "(i)", "a first ranking charge", parent="(i)")

        assert deduplicate_clauses([first, second]) == [first]

    def test_same_section_different_text_both_kept(self):
        first = _clause("clause_1", "(a)", "first paragraph text here")
        second = _clause("clause_2", "(a)", "paragraph under two text")

        assert deduplicate_clauses([first, second]) == [first, second]

    def test_top_level_clause_is_not_self_referential(self):
        """Test: no parent is never treated as self-reference."""
        first = _clause("clause_1", "1", "Definitions and interpretation")
        second = _clause("clause_2", "1", "Definitions and interpretation", parent="CLAUSE 1")

        assert deduplicate_clauses([first, second]) == [first]

    def test_empty(self):
        assert deduplicate_clauses([]) == []
