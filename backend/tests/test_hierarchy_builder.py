"""
Test suite for hierarchy reconstruction.

Tests cover:
- Clause body slicing and header folding
- Noise filtering and truncation
- Level stack parent assignment (overwrite, never pop)
- Unstructured-document fallback
"""
from lma_lens.schemas.clause import ClauseType, MatchKind, PatternMatch
from lma_lens.services.hierarchy_builder import FULL_TEXT_SECTION, HierarchyBuilder, LevelStack
from lma_lens.services.pattern_matcher import PatternMatcher


def _build(text, **kwargs):
    return HierarchyBuilder(**kwargs).build(text, PatternMatcher().find_matches(text))


class TestClauseText:
    """Test header folding into the clause body."""

    def test_header_and_body_separated_by_blank_line(self):
        body = "\n1. DEFINITIONS\n\"Borrower\" means the company.\n"
        assert HierarchyBuilder.clause_text(body, "DEFINITIONS") == 'DEFINITIONS\n\n"Borrower" means the company.'

    def test_header_only(self):
        assert HierarchyBuilder.clause_text("\n1.1 Further provisions apply.", "Further provisions apply.") == (
            "Further provisions apply."
        )

    def test_empty_slice_gives_header(self):
        """Test: a match sharing its offset with the next one keeps only its header."""
        assert HierarchyBuilder.clause_text("", "a first ranking charge") == "a first ranking charge"

    def test_empty_header_gives_remaining_text(self):
        assert HierarchyBuilder.clause_text("\nSCHEDULE 1:\nThe Original Lenders", "") == "The Original Lenders"


class TestHierarchy:
    """Test parent assignment through the level stack."""

    def test_decimal_parent(self):
        clauses = _build("\n1. DEFINITIONS\n\"Borrower\" means the company.\n1.1 Further provisions apply.\n")

        assert [(c.section, c.parent_section) for c in clauses] == [("1", None), ("1.1", "1")]
        assert clauses[0].type == ClauseType.DEFINITION
        assert clauses[1].type == ClauseType.GENERAL

    def test_sibling_overwrites_without_clearing_deeper_levels(self):
        """Test: (a) under clause 2 still sees 1.1 in the level-2 slot."""
        text = (
            "\n1. General terms of this agreement\n"
            "1.1 First sub clause text here\n"
            "(a) first paragraph text here\n"
            "2. Second heading of agreement\n"
            "(a) paragraph under two text\n"
        )

        clauses = _build(text)

        assert [(c.section, c.parent_section) for c in clauses] == [
            ("1", None),
            ("1.1", "1"),
            ("(a)", "1.1"),
            ("2", None),
            ("(a)", "1.1"),
        ]

    def test_missing_intermediate_level_has_no_parent(self):
        """Test: a level-2 clause directly under a top-level unit finds an empty level-1 slot."""
        text = "\nCLAUSE 20 - REPRESENTATIONS\nEach Obligor makes the representations below.\n20.1 Status\nIt is duly incorporated.\n"

        clauses = _build(text)

        assert [(c.section, c.parent_section) for c in clauses] == [("CLAUSE 20", None), ("20.1", None)]

    def test_parent_heading_drives_inheritance(self):
        text = (
            "\n23. EVENTS OF DEFAULT\n"
            "23.1 Each of the following is an Event of Default.\n"
            "(a) An Obligor fails to pay any amount when due.\n"
            "(b) Any Financial Indebtedness of an Obligor is not paid.\n"
        )

        clauses = _build(text)

        assert [(c.section, c.parent_section, c.type) for c in clauses] == [
            ("23", None, ClauseType.DEFAULT),
            ("23.1", "23", ClauseType.DEFAULT),
            ("(a)", "23.1", ClauseType.DEFAULT),
            ("(b)", "23.1", ClauseType.DEFAULT),
        ]


class TestFiltering:

    def test_short_clause_dropped_and_not_stacked(self):
        """Test: a clause of 10 chars or less is noise; ids keep the match position."""
        text = "\n1. Obligations of the parties\n1.1 Tiny\n1.2 The Borrower shall pay all fees.\n"

        clauses = _build(text)

        assert [(c.id, c.section, c.parent_section) for c in clauses] == [
            ("clause_1", "1", None),
            ("clause_3", "1.2", "1"),
        ]

    def test_text_truncated(self):
        text = "\n1. Long clause heading\n" + "x" * 5000 + "\n"

        clauses = _build(text)

        assert len(clauses) == 1
        assert len(clauses[0].text) == 2000
        assert clauses[0].text.startswith("Long clause heading\n\nxxx")

    def test_custom_limit(self):
        clauses = _build("\n1. Long clause heading\n" + "y" * 500 + "\n", max_clause_chars=50)
        assert len(clauses[0].text) == 50


class TestOrdering:

    def test_same_offset_ties_keep_arrival_order(self):
        """Test: the sort is stable, so ties keep the order the matcher produced them in."""
        offset = 5
        matches = [
            PatternMatch("(i)", "roman reading of the marker", offset, 4, MatchKind.LOWER_ROMAN),
            PatternMatch("(i)", "letter reading of the marker", offset, 3, MatchKind.LETTER_PARAGRAPH),
        ]
        text = "xxxxx\n(i) something long enough\n"

        clauses = HierarchyBuilder().build(text, matches)

        assert clauses[0].text == "roman reading of the marker"
        assert clauses[1].text.startswith("letter reading of the marker")

    def test_document_order(self):
        text = "\n(a) paragraph first in text\n1. Heading second in text\n"

        clauses = _build(text)

        assert [c.section for c in clauses] == ["(a)", "1"]


class TestFallback:
    """Test unstructured and empty documents."""

    def test_unstructured_document(self):
        clauses = _build("This agreement has no numbered structure at all.")

        assert len(clauses) == 1
        assert clauses[0].section == FULL_TEXT_SECTION
        assert clauses[0].type == ClauseType.GENERAL
        assert clauses[0].parent_section is None
        assert clauses[0].id == "clause_1"

    def test_empty_and_tiny_documents(self):
        assert _build("") == []
        assert _build("   \n  ") == []
        assert _build("short") == []

    def test_fallback_truncated(self):
        clauses = _build("z" * 3000)
        assert len(clauses[0].text) == 2000


class TestLevelStack:

    def test_parent_of_top_level_is_none(self):
        stack = LevelStack()
        stack.set(0, "CLAUSE 1", "Definitions")
        assert stack.parent_of(0) is None

    def test_grows_for_deep_levels(self):
        stack = LevelStack()
        stack.set(4, "1.1.1.1", "")
        stack.set(5, "1.1.1.1.1", "")
        assert stack.parent_of(5) == ("1.1.1.1", "")
