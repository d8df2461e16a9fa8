"""
Clause Type Classification.

Assigns each clause one of the six semantic categories consumed by issue
detection. Parent-context inheritance runs before the clause's own keywords,
so list items under "Events of Default" classify as defaults.
"""

import re
from typing import Optional

from lma_lens.schemas.clause import ClauseType

MAC_KEYWORDS = (
    "material adverse",
    "mac clause",
    "material adverse change",
    "material adverse effect",
)

FINANCIAL_COVENANT_KEYWORDS = (
    "financial covenant",
    "ebitda",
    "debt to equity",
    "leverage ratio",
    "leverage",
    "interest cover",
    "interest service",
    "debt service",
    "cash flow cover",
    "financial ratio",
    "covenant ratio",
)

REPRESENTATION_KEYWORDS = (
    "represent",
    "warranty",
    "warrants that",
)

DEFAULT_KEYWORDS = (
    "event of default",
    "events of default",
    "default provisions",
    "non-payment",
    "cross default",
    "cross-default",
    "insolvency",
    "acceleration",
)

DEFINITION_KEYWORDS = (
    "definitions",
    "defined terms",
    "interpretation",
)

DEFINITION_PHRASE = re.compile(r'means|shall mean|is defined as')


def _contains_any(text: str, keywords) -> bool:
    return any(keyword in text for keyword in keywords)


def classify_from_parent(parent_header: str) -> Optional[ClauseType]:
    """
    Category a child inherits from its parent's heading, if any.

    Args:
        parent_header: Header text of the enclosing clause

    Returns:
        Inherited ClauseType, or None when the heading carries no signal
    """
    parent_lower = parent_header.lower()

    if "event" in parent_lower and "default" in parent_lower:
        return ClauseType.DEFAULT

    if ("financial covenant" in parent_lower or
            ("covenant" in parent_lower and "negative" not in parent_lower)):
        return ClauseType.FINANCIAL_COVENANT

    if ("representation" in parent_lower or
            "warrant" in parent_lower or
            "warranties" in parent_lower):
        return ClauseType.REPRESENTATION

    if "material adverse" in parent_lower:
        return ClauseType.MAC

    return None


def classify_from_text(text: str) -> ClauseType:
    """Keyword classification of a clause's own header and body."""
    text_lower = text.lower()

    if _contains_any(text_lower, MAC_KEYWORDS):
        return ClauseType.MAC

    if _contains_any(text_lower, FINANCIAL_COVENANT_KEYWORDS):
        return ClauseType.FINANCIAL_COVENANT

    if (_contains_any(text_lower, REPRESENTATION_KEYWORDS) or
            ("status" in text_lower and ("duly" in text_lower or "validly" in text_lower))):
        return ClauseType.REPRESENTATION

    if (_contains_any(text_lower, DEFAULT_KEYWORDS) or
            ("misrepresentation" in text_lower and "default" in text_lower)):
        return ClauseType.DEFAULT

    if (_contains_any(text_lower, DEFINITION_KEYWORDS) or
            DEFINITION_PHRASE.search(text_lower)):
        return ClauseType.DEFINITION

    return ClauseType.GENERAL


def classify_clause_type(text: str, parent_header: Optional[str] = None) -> ClauseType:
    """
    Classify a clause using deterministic keyword rules, first match wins.

    Args:
        text: Clause header and body
        parent_header: Optional header of the parent clause

    Returns:
        ClauseType for the clause
    """
    if parent_header:
        inherited = classify_from_parent(parent_header)
        if inherited is not None:
            return inherited

    return classify_from_text(text)
