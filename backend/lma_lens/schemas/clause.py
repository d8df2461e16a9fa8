from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ClauseType(str, Enum):
    """Semantic clause categories used to route clauses to issue detection."""
    MAC = "MAC"
    FINANCIAL_COVENANT = "financial_covenant"
    REPRESENTATION = "representation"
    DEFAULT = "default"
    DEFINITION = "definition"
    GENERAL = "general"


HIGH_RISK_TYPES = (
    ClauseType.FINANCIAL_COVENANT,
    ClauseType.MAC,
    ClauseType.DEFAULT,
    ClauseType.REPRESENTATION,
)


class MatchKind(str, Enum):
    """Structural marker families, declared in catalog order."""
    TOP_LEVEL_UNIT = "TopLevelUnit"
    DECIMAL_NUMBERING = "DecimalNumbering"
    LETTER_PARAGRAPH = "LetterParagraph"
    LOWER_ROMAN = "LowerRoman"
    PARENTHESIZED_NUMBER = "ParenthesizedNumber"
    UPPER_ROMAN = "UpperRoman"
    CAPITAL_LETTER_HEADER = "CapitalLetterHeader"


@dataclass(frozen=True)
class PatternMatch:
    section_label: str
    header_text: str
    start_offset: int
    level: int
    kind: MatchKind
    unit_keyword: str | None = None  # clause/article/schedule/appendix/part


class Clause(BaseModel):
    id: str
    section: str
    text: str
    type: ClauseType
    parent_section: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_self_referential(self) -> bool:
        return self.parent_section is not None and self.parent_section == self.section


class CompactClause(BaseModel):
    """Token-light view of a clause for prompt batching."""
    section: str
    type: ClauseType
    preview: str
    parent_section: str | None = None
    full_text_id: str


class DocumentStats(BaseModel):
    total_length: int
    word_count: int
    page_estimate: int


class ClauseExtractionRequest(BaseModel):
    text: str = Field(..., description="Extracted contract text, newline-delimited")


class ClauseCompactRequest(ClauseExtractionRequest):
    high_risk_only: bool = Field(False, description="Keep only MAC, covenant, default and representation clauses")


class ClauseExtractionResponse(BaseModel):
    clauses: list[Clause]
    stats: DocumentStats


class ClauseCompactResponse(BaseModel):
    clauses: list[CompactClause]
