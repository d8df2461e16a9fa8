"""Pydantic schemas package."""
from lma_lens.schemas.clause import (
    HIGH_RISK_TYPES,
    Clause,
    ClauseCompactRequest,
    ClauseCompactResponse,
    ClauseExtractionRequest,
    ClauseExtractionResponse,
    ClauseType,
    CompactClause,
    DocumentStats,
    MatchKind,
    PatternMatch,
)

__all__ = [
    "HIGH_RISK_TYPES",
    "Clause",
    "ClauseCompactRequest",
    "ClauseCompactResponse",
    "ClauseExtractionRequest",
    "ClauseExtractionResponse",
    "ClauseType",
    "CompactClause",
    "DocumentStats",
    "MatchKind",
    "PatternMatch",
]
