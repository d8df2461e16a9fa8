"""
Hierarchy Builder - Turns positioned marker matches into clauses with parents

Key features:
1. Document-order slicing of clause bodies between consecutive markers
2. Header line folded into the clause text
3. Noise filtering of near-empty clauses
4. Parent reconstruction through a level-indexed label stack
5. Single "Full Text" clause for documents with no structure
"""

import logging
from typing import List, Optional, Tuple

from lma_lens.core.config import settings
from lma_lens.schemas.clause import Clause, ClauseType, PatternMatch
from lma_lens.services.clause_classifier import classify_clause_type

logger = logging.getLogger(__name__)

FULL_TEXT_SECTION = "Full Text"


class LevelStack:
    """
    Current (label, header) per hierarchy level.

    Slots are overwritten, never popped: a sibling replaces its own slot and
    leaves deeper slots in place for later parent lookups.
    """

    MIN_LEVELS = 5

    def __init__(self):
        self.slots: List[Optional[Tuple[str, str]]] = [None] * self.MIN_LEVELS

    def set(self, level: int, label: str, header: str) -> None:
        if level >= len(self.slots):
            self.slots.extend([None] * (level + 1 - len(self.slots)))
        self.slots[level] = (label, header)

    def parent_of(self, level: int) -> Optional[Tuple[str, str]]:
        if level <= 0:
            return None
        return self.slots[level - 1]


class HierarchyBuilder:
    """
    Builds the ordered clause list from the raw match list.
    """

    def __init__(self, max_clause_chars: Optional[int] = None, min_clause_chars: Optional[int] = None):
        self.max_clause_chars = max_clause_chars or settings.MAX_CLAUSE_CHARS
        self.min_clause_chars = min_clause_chars if min_clause_chars is not None else settings.MIN_CLAUSE_CHARS

    def build(self, text: str, matches: List[PatternMatch]) -> List[Clause]:
        """
        Build clauses with hierarchy from pattern matches.

        Args:
            text: Full document text the matches were found in
            matches: Unordered matches from the pattern matcher

        Returns:
            Clauses in document order, before duplicate resolution
        """
        if not matches:
            logger.info("No structured sections found - treating as single clause")
            return self.build_fallback(text)

        # Stable: same-offset matches keep catalog order
        ordered = sorted(matches, key=lambda m: m.start_offset)

        clauses: List[Clause] = []
        levels = LevelStack()
        skipped_short = 0

        for i, match in enumerate(ordered):
            end_offset = ordered[i + 1].start_offset if i + 1 < len(ordered) else len(text)
            clause_text = self.clause_text(text[match.start_offset:end_offset], match.header_text)

            if len(clause_text) <= self.min_clause_chars:
                logger.debug(f"  SKIP (too short): {match.section_label} - only {len(clause_text)} chars")
                skipped_short += 1
                continue

            levels.set(match.level, match.section_label, match.header_text)
            parent = levels.parent_of(match.level)
            parent_section = parent[0] if parent else None
            parent_header = (parent[1] or parent[0]) if parent else None

            clause = Clause(
                id=f"clause_{i + 1}",
                section=match.section_label,
                text=clause_text[:self.max_clause_chars],
                type=classify_clause_type(clause_text, parent_header),
                parent_section=parent_section,
            )
            logger.debug(
                f"  STORED: {clause.section} (level {match.level}, parent={parent_section}, type={clause.type.value})"
            )
            clauses.append(clause)

        logger.info(
            f"Extracted {len(clauses)} clauses "
            f"(filtered: length > {self.min_clause_chars} chars, {skipped_short} skipped)"
        )
        return clauses

    @staticmethod
    def clause_text(body: str, header: str) -> str:
        """
        Fold the marker's header into the clause body.

        The body's first line is the marker line itself; it is replaced by
        the header, separated from the rest by a blank line.
        """
        full_text = body.strip()
        first_line_end = full_text.find('\n')
        text_without_header = full_text[first_line_end + 1:].strip() if first_line_end != -1 else ''

        if not header:
            return text_without_header
        if text_without_header:
            return f"{header}\n\n{text_without_header}"
        return header

    def build_fallback(self, text: str) -> List[Clause]:
        """Single clause covering an unstructured document; none if it is noise."""
        full_text = text.strip()
        if len(full_text) <= self.min_clause_chars:
            logger.info("Document text is empty or too short - no clauses")
            return []

        return [Clause(
            id="clause_1",
            section=FULL_TEXT_SECTION,
            text=full_text[:self.max_clause_chars],
            type=ClauseType.GENERAL,
        )]
