"""Duplicate clause resolution for overlapping marker matches."""
import logging
from typing import Dict, List, Tuple

from lma_lens.schemas.clause import Clause

logger = logging.getLogger(__name__)


def deduplicate_clauses(clauses: List[Clause]) -> List[Clause]:
    """
    Remove clauses with the same section and text.

    The first occurrence wins, unless it points at itself as parent (two
    matchers firing on one span from opposite ends of the hierarchy) and the
    later one does not; the later one then takes its place.
    """
    kept: List[Clause] = []
    seen: Dict[Tuple[str, str], int] = {}  # (section, text) -> index in kept

    for clause in clauses:
        key = (clause.section, clause.text)
        index = seen.get(key)

        if index is None:
            seen[key] = len(kept)
            kept.append(clause)
        elif kept[index].is_self_referential and not clause.is_self_referential:
            logger.debug(f"Replacing self-referential duplicate {clause.section} with {clause.id}")
            kept[index] = clause

    removed = len(clauses) - len(kept)
    if removed > 0:
        logger.info(f"Removed {removed} duplicate clauses")

    return kept
