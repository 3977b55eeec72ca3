"""Keyword validation and semantic matching contracts."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class KeywordCategory(str, Enum):
    """Coarse grouping used for UI sections and remediation advice."""
    EXPERIENCE = "experience"
    TECHNICAL = "technical"
    TOOLS = "tools"
    SOFT = "soft"
    DOMAIN = "domain"


class KeywordValidationResult(BaseModel):
    valid: list[str] = []
    invalid: list[str] = []
    warnings: list[str] = []


class KeywordMatchDebug(BaseModel):
    keyword: str
    found: bool
    strategy: Literal["exact-phrase", "token"]
    details: str


class KeywordMatchClassification(BaseModel):
    """Raw answer of a keyword-match classifier (LLM or fallback)."""
    model_config = ConfigDict(frozen=True)

    matched: list[str] = []
    missed: list[str] = []
    reasoning: dict[str, str] = {}


class SemanticMatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    matched_keywords: list[str] = []
    missed_keywords: list[str] = []
    match_score: int = Field(default=0, ge=0, le=100)
    method: Literal["semantic", "substring_fallback"] = "semantic"


class ExtractedKeywords(BaseModel):
    """Output of LLM keyword extraction after literal-substring validation."""
    keywords: list[str] = Field(default_factory=list, max_length=30)
    primary: list[str] = Field(default_factory=list, max_length=5)  # must-haves
    source: Literal["llm", "deterministic"] = "llm"
    warnings: list[str] = []
