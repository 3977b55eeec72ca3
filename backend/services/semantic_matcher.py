"""Semantic keyword matching with a deterministic substring fallback.

The primary classifier asks Gemini whether the resume demonstrates each
keyword conceptually. If that call fails in any way (no API key, timeout,
non-JSON or schema-mismatched output), the adapter falls back to literal
substring matching, and callers never see an exception. At most one network
attempt is made per call.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ValidationError

from models.schemas.keyword_match import KeywordMatchClassification, SemanticMatchResult
from services import gemini_client, prompt_builder

logger = logging.getLogger(__name__)


class KeywordClassificationError(RuntimeError):
    """The keyword-match classifier could not produce a usable answer."""


class BaseKeywordClassifier(ABC):
    """Decides, per keyword, whether a resume satisfies it."""

    @abstractmethod
    async def classify(
        self, keywords: list[str], resume_text: str
    ) -> KeywordMatchClassification:
        """Return matched/missed keywords. Raise KeywordClassificationError on failure."""


class GeminiKeywordClassifier(BaseKeywordClassifier):
    async def classify(
        self, keywords: list[str], resume_text: str
    ) -> KeywordMatchClassification:
        prompt = prompt_builder.build_keyword_match_prompt(keywords, resume_text)
        data = await gemini_client.generate_json(prompt)
        if data is None:
            raise KeywordClassificationError("Gemini returned no usable response")
        try:
            return KeywordMatchClassification.model_validate(data)
        except ValidationError as e:
            raise KeywordClassificationError(f"Unexpected response shape: {e}") from e


class SubstringKeywordClassifier(BaseKeywordClassifier):
    """Case-insensitive literal containment over the flattened resume."""

    async def classify(
        self, keywords: list[str], resume_text: str
    ) -> KeywordMatchClassification:
        return substring_classify(keywords, resume_text)


def substring_classify(keywords: list[str], resume_text: str) -> KeywordMatchClassification:
    resume_lower = resume_text.lower()
    matched = [kw for kw in keywords if kw.lower() in resume_lower]
    missed = [kw for kw in keywords if kw.lower() not in resume_lower]
    return KeywordMatchClassification(matched=matched, missed=missed)


def flatten_resume(resume: Any) -> str:
    """Serialize any resume representation to a single string."""
    if resume is None:
        return ""
    if isinstance(resume, str):
        return resume
    if isinstance(resume, BaseModel):
        return resume.model_dump_json()
    return json.dumps(resume, ensure_ascii=False, default=str)


def _dedupe(keywords: list[str]) -> list[str]:
    seen: set[str] = set()
    unique: list[str] = []
    for kw in keywords:
        if kw not in seen:
            seen.add(kw)
            unique.append(kw)
    return unique


def compute_match_score(matched: int, total: int) -> int:
    if total == 0:
        return 0
    # halves round up (12.5 -> 13), unlike round()
    return int(100 * matched / total + 0.5)


def _to_result(
    keywords: list[str], classification: KeywordMatchClassification, method: str
) -> SemanticMatchResult:
    """Partition the input keywords exactly, in input order."""
    matched_set = {kw.lower() for kw in classification.matched}
    matched = [kw for kw in keywords if kw.lower() in matched_set]
    missed = [kw for kw in keywords if kw.lower() not in matched_set]
    return SemanticMatchResult(
        matched_keywords=matched,
        missed_keywords=missed,
        match_score=compute_match_score(len(matched), len(keywords)),
        method=method,
    )


async def semantic_keyword_match(
    keywords: list[str],
    resume: Any,
    classifier: BaseKeywordClassifier | None = None,
    fallback: BaseKeywordClassifier | None = None,
) -> SemanticMatchResult:
    """Score how many keywords a resume satisfies; never raises for classifier failures."""
    keywords = _dedupe([kw for kw in keywords if kw and kw.strip()])
    if not keywords:
        return SemanticMatchResult(method="substring_fallback")

    resume_text = flatten_resume(resume)
    classifier = classifier or GeminiKeywordClassifier()
    fallback = fallback or SubstringKeywordClassifier()

    logger.info("Semantic matching %d keywords", len(keywords))
    try:
        classification = await classifier.classify(keywords, resume_text)
        result = _to_result(keywords, classification, "semantic")
    except Exception as e:
        logger.warning("Semantic matching failed (%s), falling back to substring matching", e)
        classification = await fallback.classify(keywords, resume_text)
        return _to_result(keywords, classification, "substring_fallback")

    for kw, reason in list(classification.reasoning.items())[:3]:
        logger.debug("  - %s: %s", kw, reason)
    logger.info(
        "Semantic matching results: matched=%d missed=%d score=%d",
        len(result.matched_keywords), len(result.missed_keywords), result.match_score,
    )
    return result
