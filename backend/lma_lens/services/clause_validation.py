"""
Clause Extraction Validation Module

Summarizes a segmentation result and flags structural problems: dangling
parent labels, self-referential clauses and oversized clause text.
"""

import logging
from collections import Counter
from typing import Any, Dict, List, Optional

from lma_lens.core.config import settings
from lma_lens.schemas.clause import Clause, ClauseType

logger = logging.getLogger(__name__)


def hierarchy_depth(clauses: List[Clause]) -> int:
    """
    Longest chain of parent links, following labels to the first clause
    carrying each label.
    """
    first_by_section: Dict[str, Clause] = {}
    for clause in clauses:
        first_by_section.setdefault(clause.section, clause)

    max_depth = 0
    for clause in clauses:
        depth = 0
        visited = {clause.section}
        parent = clause.parent_section
        while parent:
            depth += 1
            if parent in visited:
                break
            visited.add(parent)
            parent_clause = first_by_section.get(parent)
            parent = parent_clause.parent_section if parent_clause else None
        max_depth = max(max_depth, depth)

    return max_depth


class ClauseExtractionValidator:
    """Validates clause extraction output and reports its shape."""

    @staticmethod
    def validate_extraction(clauses: List[Clause], original_text: str,
                            max_clause_chars: Optional[int] = None) -> Dict[str, Any]:
        """
        Validate extraction output and return a report.

        Args:
            clauses: Clauses returned by the segmenter
            original_text: Document text the clauses came from
            max_clause_chars: Text length ceiling, defaults to settings

        Returns:
            Dict with counts, type distribution, hierarchy depth and warnings
        """
        max_chars = max_clause_chars or settings.MAX_CLAUSE_CHARS
        warnings = []
        seen_sections = set()

        for clause in clauses:
            if clause.is_self_referential:
                warnings.append({
                    'type': 'self_referential_parent',
                    'severity': 'WARNING',
                    'clause_id': clause.id,
                    'message': f"Clause {clause.id} ({clause.section}) names itself as parent",
                })
            elif clause.parent_section and clause.parent_section not in seen_sections:
                warnings.append({
                    'type': 'dangling_parent',
                    'severity': 'WARNING',
                    'clause_id': clause.id,
                    'message': (
                        f"Clause {clause.id} ({clause.section}) has parent {clause.parent_section} "
                        f"that does not appear earlier in the output"
                    ),
                })
            if len(clause.text) > max_chars:
                warnings.append({
                    'type': 'oversized_text',
                    'severity': 'WARNING',
                    'clause_id': clause.id,
                    'message': f"Clause {clause.id} text is {len(clause.text)} chars (limit {max_chars})",
                })
            seen_sections.add(clause.section)

        for warning in warnings:
            logger.warning(warning['message'])

        type_counts = Counter(clause.type.value for clause in clauses)
        report = {
            'passed': len(warnings) == 0,
            'clause_count': len(clauses),
            'document_length': len(original_text),
            'type_counts': {t.value: type_counts.get(t.value, 0) for t in ClauseType},
            'hierarchy_depth': hierarchy_depth(clauses),
            'warnings': warnings,
        }

        logger.info(f"Clause types: {report['type_counts']}")
        logger.info(f"Hierarchy depth: {report['hierarchy_depth']}")
        return report
