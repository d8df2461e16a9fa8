"""
Clause Segmenter - Splits contract text into typed, hierarchical clauses

Pipeline:
1. Pattern matching over the whole document
2. Hierarchy reconstruction and per-clause type classification
3. Duplicate resolution
4. Extraction report (logged)

Each call works on its own match list and level stack, so one segmenter can
serve any number of documents.
"""

import logging
from collections import Counter
from typing import List, Optional

from lma_lens.core.exceptions import ClauseExtractionError
from lma_lens.schemas.clause import Clause, MatchKind, PatternMatch
from lma_lens.services.clause_validation import ClauseExtractionValidator
from lma_lens.services.deduplicator import deduplicate_clauses
from lma_lens.services.hierarchy_builder import HierarchyBuilder
from lma_lens.services.pattern_matcher import PatternMatcher

logger = logging.getLogger(__name__)


class ClauseSegmenter:
    """Regex-driven clause segmentation and classification."""

    def __init__(self, matcher: Optional[PatternMatcher] = None, builder: Optional[HierarchyBuilder] = None):
        self.matcher = matcher or PatternMatcher()
        self.builder = builder or HierarchyBuilder()

    def extract_clauses(self, text: str) -> List[Clause]:
        """
        Extract clauses from contract text.

        Handles 1., 1.1, (a), (i), (1), (I), A., CLAUSE, ARTICLE, SCHEDULE,
        APPENDIX and PART markers.

        Args:
            text: Already-extracted document text, newline-delimited

        Returns:
            Clauses in document order. An unstructured document yields a
            single "Full Text" clause; an empty one yields no clauses.

        Raises:
            ClauseExtractionError: If text is not a string
        """
        if not isinstance(text, str):
            raise ClauseExtractionError(f"Expected document text as str, got {type(text).__name__}")

        matches = self.matcher.find_matches(text)
        self._log_pattern_breakdown(matches)

        clauses = self.builder.build(text, matches)
        clauses = deduplicate_clauses(clauses)

        ClauseExtractionValidator.validate_extraction(clauses, text, self.builder.max_clause_chars)
        return clauses

    @staticmethod
    def _log_pattern_breakdown(matches: List[PatternMatch]) -> None:
        if not matches:
            return
        counts = Counter(match.kind for match in matches)
        logger.info("Pattern breakdown:")
        for kind in MatchKind:
            logger.info(f"  - {kind.value}: {counts.get(kind, 0)}")


def extract_clauses(text: str) -> List[Clause]:
    """Segment text with a default-configured segmenter."""
    return ClauseSegmenter().extract_clauses(text)
