"""
Clause segmentation endpoints.

Thin HTTP wrapper over the segmentation core; nothing here is persisted.
"""
import logging

from fastapi import APIRouter, HTTPException

from lma_lens.core.exceptions import ClauseExtractionError
from lma_lens.schemas.clause import (
    ClauseCompactRequest,
    ClauseCompactResponse,
    ClauseExtractionRequest,
    ClauseExtractionResponse,
)
from lma_lens.services.clause_filters import (
    compact_clauses_for_ai,
    filter_high_risk_clauses,
    get_document_stats,
)
from lma_lens.services.clause_segmenter import ClauseSegmenter

logger = logging.getLogger(__name__)

router = APIRouter()

segmenter = ClauseSegmenter()


@router.post("/extract", response_model=ClauseExtractionResponse)
def extract_clauses(request: ClauseExtractionRequest) -> ClauseExtractionResponse:
    """
    Segment contract text into typed clauses.

    Returns every clause in document order together with document statistics.
    """
    logger.info(f"Extracting clauses from {len(request.text)} chars")
    try:
        clauses = segmenter.extract_clauses(request.text)
    except ClauseExtractionError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return ClauseExtractionResponse(clauses=clauses, stats=get_document_stats(request.text))


@router.post("/compact", response_model=ClauseCompactResponse)
def compact_clauses(request: ClauseCompactRequest) -> ClauseCompactResponse:
    """Segment text and return compact previews, optionally high-risk clauses only."""
    try:
        clauses = segmenter.extract_clauses(request.text)
    except ClauseExtractionError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    if request.high_risk_only:
        clauses = filter_high_risk_clauses(clauses)

    return ClauseCompactResponse(clauses=compact_clauses_for_ai(clauses))
