"""LMA Lens clause segmentation and classification engine."""
from lma_lens.services.clause_segmenter import ClauseSegmenter, extract_clauses

__all__ = ["ClauseSegmenter", "extract_clauses"]
