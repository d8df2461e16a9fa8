"""
Clause filtering and shaping utilities for downstream issue detection.

Provides:
- Compact previews that cut prompt size while keeping clause identity
- High-risk filtering (MAC, financial covenants, defaults, representations)
- Grouping by clause type for type-specific analysis
- Document size statistics
"""
import math
import logging
from typing import Dict, List, Optional

from lma_lens.core.config import settings
from lma_lens.schemas.clause import HIGH_RISK_TYPES, Clause, ClauseType, CompactClause, DocumentStats

logger = logging.getLogger(__name__)


def compact_clauses_for_ai(clauses: List[Clause], preview_chars: Optional[int] = None) -> List[CompactClause]:
    """
    Create compact representation of clauses for prompt batching.

    The preview is the clause's first line, then " | " and the first
    characters of the remaining lines joined with spaces. The full text is
    recoverable through full_text_id.
    """
    limit = preview_chars or settings.COMPACT_PREVIEW_CHARS
    compact = []

    for clause in clauses:
        lines = clause.text.split('\n')
        header = lines[0].strip()
        content = ' '.join(lines[1:]).strip()
        preview = content[:limit] + '...' if len(content) > limit else content

        compact.append(CompactClause(
            section=clause.section,
            type=clause.type,
            preview=header + (' | ' + preview if preview else ''),
            parent_section=clause.parent_section,
            full_text_id=clause.id,
        ))

    return compact


def filter_high_risk_clauses(clauses: List[Clause]) -> List[Clause]:
    """Keep only the clause types that issue detection analyzes in depth."""
    high_risk = [c for c in clauses if c.type in HIGH_RISK_TYPES]
    logger.debug(f"High-risk filter kept {len(high_risk)}/{len(clauses)} clauses")
    return high_risk


def group_clauses_by_type(clauses: List[Clause]) -> Dict[ClauseType, List[Clause]]:
    """Group clauses by type; every type is present, possibly with no clauses."""
    grouped: Dict[ClauseType, List[Clause]] = {clause_type: [] for clause_type in ClauseType}
    for clause in clauses:
        grouped[clause.type].append(clause)
    return grouped


def get_document_stats(text: str, words_per_page: Optional[int] = None) -> DocumentStats:
    """Length, word count and a page estimate for a document."""
    per_page = words_per_page or settings.WORDS_PER_PAGE
    word_count = len(text.split())

    return DocumentStats(
        total_length=len(text),
        word_count=word_count,
        page_estimate=math.ceil(word_count / per_page),
    )
