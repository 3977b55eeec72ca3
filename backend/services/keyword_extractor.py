"""ATS keyword extraction from job descriptions.

Gemini proposes 15-30 exact phrases plus a handful of must-haves. Every
proposed keyword is validated against the JD text, and anything that is not
a literal substring is dropped. Without Gemini (no key, API failure, empty
answer) the deterministic parser/ranker supplies the keywords instead.
"""

import logging

from models.schemas.keyword_match import ExtractedKeywords
from models.schemas.keyword_plan import Priority
from services import gemini_client, prompt_builder
from services.keyword_validation import validate_extracted_keywords
from services.keywords.plan import rank_job_terms

logger = logging.getLogger(__name__)

MAX_KEYWORDS = 30
MAX_PRIMARY = 5


def _string_list(value: object) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(v).strip() for v in value if isinstance(v, (str, int, float)) and str(v).strip()]


def _unique(items: list[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for item in items:
        key = item.lower()
        if key not in seen:
            seen.add(key)
            out.append(item)
    return out


def extract_keywords_deterministic(
    job_description: str, job_title: str | None = None
) -> ExtractedKeywords:
    """Fallback: top ranked JD terms; requirements-section terms become primary."""
    candidates = rank_job_terms(job_description, "", job_title or "")
    keywords = [c.term for c in candidates][:MAX_KEYWORDS]
    primary = [c.term for c in candidates if c.priority == Priority.CRITICAL][:MAX_PRIMARY]
    return ExtractedKeywords(keywords=keywords, primary=primary, source="deterministic")


async def extract_keywords_from_job_description(
    job_description: str, job_title: str | None = None
) -> ExtractedKeywords:
    """Extract validated ATS keywords, preferring Gemini when it is available."""
    if not job_description or not job_description.strip():
        return ExtractedKeywords(source="deterministic")

    prompt = prompt_builder.build_keyword_extraction_prompt(job_description, job_title)
    data = await gemini_client.generate_json(prompt)
    if data is None:
        logger.warning("Gemini keyword extraction unavailable, using deterministic ranking")
        return extract_keywords_deterministic(job_description, job_title)

    proposed = _unique(_string_list(data.get("keywords")))
    if not proposed:
        logger.warning("Gemini returned no keywords, using deterministic ranking")
        return extract_keywords_deterministic(job_description, job_title)

    validation = validate_extracted_keywords(proposed, job_description)

    keywords = validation.valid[:MAX_KEYWORDS]
    if not keywords:
        logger.warning("No Gemini keyword occurs in the JD, using deterministic ranking")
        return extract_keywords_deterministic(job_description, job_title)

    kept = {kw.lower(): kw for kw in keywords}
    primary = [
        kept[kw.lower()] for kw in _unique(_string_list(data.get("primary")))
        if kw.lower() in kept
    ][:MAX_PRIMARY]

    logger.info("Extracted %d valid keywords (%d primary)", len(keywords), len(primary))
    return ExtractedKeywords(
        keywords=keywords,
        primary=primary,
        source="llm",
        warnings=validation.warnings,
    )
