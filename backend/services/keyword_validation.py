"""Keyword validation, categorization and presence checks.

Validation confirms that every keyword shown to the user literally occurs in
the job description. Categorization is a light heuristic used for grouping
and remediation copy. It is independent of the ranker's keyword type.
"""

import logging
import re

from models.schemas.keyword_match import (
    KeywordCategory,
    KeywordMatchDebug,
    KeywordValidationResult,
)

logger = logging.getLogger(__name__)

_EXPERIENCE_RE = re.compile(r"\d+\+?\s*(?:years?|yrs?)", re.IGNORECASE)
_ACRONYM_RE = re.compile(r"^[A-Z]{2,}$")
_TECHNICAL_RE = re.compile(r"\b(?:api|sdk|cli|ui|ux)s?\b", re.IGNORECASE)
_TOOLS_RE = re.compile(
    r"docker|kubernetes|jira|hubspot|salesforce|\baws\b|azure|\bgcp\b|react|"
    r"python|javascript|typescript|node\.?js|figma|tableau|excel|sql",
    re.IGNORECASE,
)
_SOFT_RE = re.compile(
    r"leadership|communication|agile|remote|team|collaborat|scrum|kanban|"
    r"mentor|stakeholder|problem.solving|ownership",
    re.IGNORECASE,
)

_SUGGESTIONS: dict[KeywordCategory, str] = {
    KeywordCategory.EXPERIENCE: (
        'Add "{kw}" to your job descriptions or summary to show you meet '
        "the experience requirement."
    ),
    KeywordCategory.TECHNICAL: (
        'Add "{kw}" to your skills section or mention it in relevant '
        "experience bullet points."
    ),
    KeywordCategory.TOOLS: (
        'Add "{kw}" to your skills section or describe projects where you '
        "used this tool."
    ),
    KeywordCategory.SOFT: (
        'Demonstrate "{kw}" through specific examples in your experience descriptions.'
    ),
    KeywordCategory.DOMAIN: (
        'Show "{kw}" expertise by mentioning relevant projects, industries, '
        "or technologies in your experience."
    ),
}


def validate_extracted_keywords(
    keywords: list[str], job_description: str
) -> KeywordValidationResult:
    """Split keywords into those found / not found in the JD (case-insensitive)."""
    jd_lower = (job_description or "").lower()
    result = KeywordValidationResult()

    for kw in keywords:
        if kw and kw.lower() in jd_lower:
            result.valid.append(kw)
        else:
            result.invalid.append(kw)
            result.warnings.append(f'Keyword "{kw}" not found in job description')
            logger.warning("Keyword %r not found in job description", kw)

    if result.invalid:
        logger.info(
            "Found %d invalid keywords out of %d total",
            len(result.invalid), len(keywords),
        )
    return result


def categorize_keyword(keyword: str) -> KeywordCategory:
    if _EXPERIENCE_RE.search(keyword):
        return KeywordCategory.EXPERIENCE
    if _ACRONYM_RE.match(keyword) or _TECHNICAL_RE.search(keyword):
        return KeywordCategory.TECHNICAL
    if _TOOLS_RE.search(keyword):
        return KeywordCategory.TOOLS
    if _SOFT_RE.search(keyword):
        return KeywordCategory.SOFT
    return KeywordCategory.DOMAIN


def get_suggestion_for_keyword(keyword: str) -> str:
    """Canned remediation sentence for a missing keyword."""
    return _SUGGESTIONS[categorize_keyword(keyword)].format(kw=keyword)


def is_keyword_present(keyword: str, resume_text: str, resume_tokens: set[str]) -> bool:
    """Phrases: substring of the resume. Single words: token-set membership."""
    kw_lower = keyword.lower()
    if " " in kw_lower:
        return kw_lower in (resume_text or "").lower()
    return kw_lower in resume_tokens


def debug_keyword_match(
    keyword: str, resume_text: str, resume_tokens: set[str]
) -> KeywordMatchDebug:
    found = is_keyword_present(keyword, resume_text, resume_tokens)
    if " " in keyword:
        details = (
            f'Found exact phrase "{keyword}" in resume'
            if found
            else f'Phrase "{keyword}" not found. Resume may have partial matches only.'
        )
        return KeywordMatchDebug(keyword=keyword, found=found, strategy="exact-phrase", details=details)

    details = (
        f'Found token "{keyword}" in resume'
        if found
        else f'Token "{keyword}" not found. Check for variations or synonyms.'
    )
    return KeywordMatchDebug(keyword=keyword, found=found, strategy="token", details=details)
