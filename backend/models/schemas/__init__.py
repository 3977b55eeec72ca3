"""Pydantic contracts shared by the keyword engine services."""

from models.schemas.keyword_match import (
    ExtractedKeywords,
    KeywordCategory,
    KeywordMatchClassification,
    KeywordMatchDebug,
    KeywordValidationResult,
    SemanticMatchResult,
)
from models.schemas.keyword_plan import (
    EvidenceMatch,
    JdMetadata,
    JdSection,
    JdSections,
    KeywordCandidate,
    KeywordLists,
    KeywordPlan,
    KeywordSnippet,
    KeywordSnippetText,
    KeywordType,
    Placement,
    Priority,
    TermStats,
)

__all__ = [
    "EvidenceMatch",
    "ExtractedKeywords",
    "JdMetadata",
    "JdSection",
    "JdSections",
    "KeywordCandidate",
    "KeywordCategory",
    "KeywordLists",
    "KeywordMatchClassification",
    "KeywordMatchDebug",
    "KeywordPlan",
    "KeywordSnippet",
    "KeywordSnippetText",
    "KeywordType",
    "KeywordValidationResult",
    "Placement",
    "Priority",
    "SemanticMatchResult",
    "TermStats",
]
