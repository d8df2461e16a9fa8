"""
Pattern Matcher - Finds every structural marker in extracted contract text

Catalog (applied in this order, matches may overlap):
1. Top-level units: CLAUSE 1, ARTICLE I, SCHEDULE A, APPENDIX 2, PART B
2. Decimal numbering: 1., 1.1, 1.1.1 (table-of-contents lines rejected)
3. Letter paragraphs: (a), (aa)
4. Lowercase Roman numerals: (i) .. (xiii)
5. Parenthesized numbers: (1), (2)
6. Uppercase Roman numerals: (I) .. (XIII)
7. Capital-letter headers: A., B. (initials and abbreviations rejected)

Every pattern anchors on the preceding newline, so a match offset points at
that newline rather than at the marker itself.
"""

import re
import logging
from typing import Callable, Iterator, List, Tuple

from lma_lens.schemas.clause import MatchKind, PatternMatch

logger = logging.getLogger(__name__)


class PatternMatcher:
    """
    Scans document text with a fixed catalog of independent matchers.
    """

    TOP_LEVEL_PATTERN = re.compile(
        r'\n((?:CLAUSE|ARTICLE|SCHEDULE|APPENDIX|PART)\s+(?:[IVX]+|\d+|[A-Z]))\s*[:\n–-]\s*([^\n]*)',
        re.IGNORECASE
    )
    DECIMAL_PATTERN = re.compile(r'\n(\d+(?:\.\d+)*)\.?\s+([^\n]+?)(?=\n)')
    LETTER_PATTERN = re.compile(r'\n\s*\(([a-z]{1,2})\)\s+([^\n]+)')
    LOWER_ROMAN_PATTERN = re.compile(r'\n\s*\((i{1,3}|iv|v|vi{0,3}|ix|x|xi{1,3})\)\s+([^\n]+)')
    NUMBER_PATTERN = re.compile(r'\n\s*\((\d{1,2})\)\s+([^\n]+)')
    UPPER_ROMAN_PATTERN = re.compile(r'\n\s*\((I{1,3}|IV|V|VI{0,3}|IX|X|XI{1,3})\)\s+([^\n]+)')
    CAPITAL_LETTER_PATTERN = re.compile(r'\n([A-Z])\.\s+([^\n]+)')

    # Leader dots/dashes or "..  12" at the end mark a table-of-contents line
    TOC_LEADER_PATTERN = re.compile(r'[.\-]{3,}|\.{2,}\s*\d+$')

    CAPITAL_HEADER_MIN_CHARS = 15
    CAPITAL_HEADER_KEYWORDS = re.compile(
        r'^(Corporate|Financial|Legal|Borrower|Lender|Details|Information)',
        re.IGNORECASE
    )

    def __init__(self):
        self.catalog: List[Tuple[MatchKind, Callable[[str], Iterator[PatternMatch]]]] = [
            (MatchKind.TOP_LEVEL_UNIT, self._match_top_level_units),
            (MatchKind.DECIMAL_NUMBERING, self._match_decimal_numbering),
            (MatchKind.LETTER_PARAGRAPH, self._match_letter_paragraphs),
            (MatchKind.LOWER_ROMAN, self._match_lower_roman),
            (MatchKind.PARENTHESIZED_NUMBER, self._match_parenthesized_numbers),
            (MatchKind.UPPER_ROMAN, self._match_upper_roman),
            (MatchKind.CAPITAL_LETTER_HEADER, self._match_capital_letter_headers),
        ]

    def find_matches(self, text: str) -> List[PatternMatch]:
        """
        Run every matcher over the text and concatenate the results.

        The result is grouped by catalog order, not by document position;
        ordering by position is the hierarchy builder's job.
        """
        matches: List[PatternMatch] = []
        for kind, matcher in self.catalog:
            found = list(matcher(text))
            logger.debug(f"{kind.value}: {len(found)} matches")
            matches.extend(found)

        logger.info(f"Found {len(matches)} total matches across all patterns")
        return matches

    def _match_top_level_units(self, text: str) -> Iterator[PatternMatch]:
        for match in self.TOP_LEVEL_PATTERN.finditer(text):
            section = match.group(1).strip()
            yield PatternMatch(
                section_label=section,
                header_text=match.group(2).strip(),
                start_offset=match.start(),
                level=0,
                kind=MatchKind.TOP_LEVEL_UNIT,
                unit_keyword=section.split()[0].lower(),
            )

    def _match_decimal_numbering(self, text: str) -> Iterator[PatternMatch]:
        for match in self.DECIMAL_PATTERN.finditer(text):
            section = match.group(1)
            header = match.group(2).strip()

            if self.is_toc_entry(header):
                logger.debug(f"  SKIP (table of contents): {section} {header[:60]}")
                continue

            yield PatternMatch(
                section_label=section,
                header_text=header,
                start_offset=match.start(),
                level=section.count('.') + 1,
                kind=MatchKind.DECIMAL_NUMBERING,
            )

    def _match_letter_paragraphs(self, text: str) -> Iterator[PatternMatch]:
        yield from self._parenthesized(text, self.LETTER_PATTERN, 3, MatchKind.LETTER_PARAGRAPH)

    def _match_lower_roman(self, text: str) -> Iterator[PatternMatch]:
        yield from self._parenthesized(text, self.LOWER_ROMAN_PATTERN, 4, MatchKind.LOWER_ROMAN)

    def _match_parenthesized_numbers(self, text: str) -> Iterator[PatternMatch]:
        # Same tier as (a), (b): the alternate numbering used in UK facilities
        yield from self._parenthesized(text, self.NUMBER_PATTERN, 3, MatchKind.PARENTHESIZED_NUMBER)

    def _match_upper_roman(self, text: str) -> Iterator[PatternMatch]:
        yield from self._parenthesized(text, self.UPPER_ROMAN_PATTERN, 2, MatchKind.UPPER_ROMAN)

    def _match_capital_letter_headers(self, text: str) -> Iterator[PatternMatch]:
        for match in self.CAPITAL_LETTER_PATTERN.finditer(text):
            header = match.group(2).strip()

            if not self.is_substantial_capital_header(header):
                logger.debug(f"  SKIP (initial or abbreviation): {match.group(1)}. {header}")
                continue

            yield PatternMatch(
                section_label=match.group(1),
                header_text=header,
                start_offset=match.start(),
                level=2,
                kind=MatchKind.CAPITAL_LETTER_HEADER,
            )

    @staticmethod
    def _parenthesized(text: str, pattern: re.Pattern, level: int, kind: MatchKind) -> Iterator[PatternMatch]:
        for match in pattern.finditer(text):
            yield PatternMatch(
                section_label=f"({match.group(1)})",
                header_text=match.group(2).strip(),
                start_offset=match.start(),
                level=level,
                kind=kind,
            )

    def is_toc_entry(self, header: str) -> bool:
        """True for headers like 'DEFINITIONS........ 5' or 'FEES --- 3'."""
        return bool(self.TOC_LEADER_PATTERN.search(header))

    def is_substantial_capital_header(self, header: str) -> bool:
        """A lone capital letter is only a heading if real heading text follows it."""
        return (
            len(header) >= self.CAPITAL_HEADER_MIN_CHARS
            or bool(self.CAPITAL_HEADER_KEYWORDS.match(header))
        )
