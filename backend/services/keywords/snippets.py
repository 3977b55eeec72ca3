"""Placement-specific text for ranked keywords.

Each candidate gets a skills entry, a summary line and an XYZ bullet draft
("Achieved X by doing Y using Z"), according to its placements. Bullets use
placeholders like [X%/value] instead of invented numbers. Unsupported terms
also get a suggestion for how to earn the claim truthfully.
"""

import re

from models.schemas.keyword_plan import (
    KeywordCandidate,
    KeywordSnippet,
    KeywordSnippetText,
    KeywordType,
    Placement,
)

SUMMARY_MAX_CHARS = 140
BULLET_MAX_CHARS = 200
ELLIPSIS = "…"

_SUMMARY_TEMPLATES: dict[KeywordType, str] = {
    KeywordType.DOMAIN: "{prefix}{term} experience and rapid, results-driven execution.",
    KeywordType.METHOD: "{prefix}hands-on {term} with data-driven iteration.",
    KeywordType.TOOL: "{prefix}practical {term} usage to analyze, automate, and ship improvements.",
    KeywordType.METRIC: "{prefix}focus on tracking and improving {term} through experimentation and ops.",
    KeywordType.SOFT: "{prefix}strength in {term} applied to cross-functional delivery.",
}

_BULLET_TEMPLATES: dict[KeywordType, str] = {
    KeywordType.METRIC: (
        "Increased {term} by [X%/value] by prioritizing targeted initiatives "
        "and process improvements informed by data."
    ),
    KeywordType.METHOD: (
        "Drove [result/metric] by applying {term} to priority flows "
        "and iterating on findings on a regular cadence."
    ),
    KeywordType.TOOL: (
        "Delivered [result/metric] by building/automating in {term} "
        "and shipping changes tied to those insights."
    ),
    KeywordType.DOMAIN: (
        "Delivered [result] in {term} by launching targeted improvements "
        "and validating outcomes with before/after metrics."
    ),
    KeywordType.SOFT: (
        "Achieved [result] by leveraging {term} across stakeholders "
        "and unblocking delivery with clear priorities."
    ),
}

_PROOF_TEMPLATES: dict[KeywordType, str] = {
    KeywordType.METHOD: "Run a small {term} pilot and record one measurable change.",
    KeywordType.TOOL: "Create a mini demo or analysis using {term} and cite the outcome.",
    KeywordType.DOMAIN: (
        "Add a brief project/course tied to {term} and summarize what you built or learned."
    ),
    KeywordType.METRIC: "Document a before/after for {term} on a scoped change.",
    KeywordType.SOFT: "Add a concrete example demonstrating {term} with a measurable result.",
}

# Known phrase variants; at most two alternatives each
_SYNONYMS: list[tuple[re.Pattern, list[str]]] = [
    (re.compile(r"lead nurture", re.IGNORECASE), ["nurture sequences"]),
    (re.compile(r"consumer conversion", re.IGNORECASE), ["funnel optimization"]),
    (re.compile(r"\ba/b test", re.IGNORECASE), ["split testing", "experimentation"]),
    (re.compile(r"\bci/cd\b", re.IGNORECASE), ["continuous integration", "continuous delivery"]),
    (re.compile(r"stakeholder management", re.IGNORECASE), ["cross-functional alignment"]),
    (re.compile(r"user research", re.IGNORECASE), ["customer interviews", "usability testing"]),
]


def clamp(text: str, limit: int) -> str:
    """Truncate to ``limit - 1`` chars plus an ellipsis when over ``limit``."""
    if len(text) > limit:
        return text[:limit - 1] + ELLIPSIS
    return text


def suggest_synonyms(term: str) -> list[str]:
    for pattern, synonyms in _SYNONYMS:
        if pattern.search(term):
            return synonyms[:2]
    return []


def summary_line(candidate: KeywordCandidate, role_title: str | None = None) -> str:
    prefix = f"{role_title} with " if role_title else ""
    template = _SUMMARY_TEMPLATES[candidate.type]
    return clamp(template.format(prefix=prefix, term=candidate.term), SUMMARY_MAX_CHARS)


def bullet_line(candidate: KeywordCandidate) -> str:
    template = _BULLET_TEMPLATES[candidate.type]
    return clamp(template.format(term=candidate.term), BULLET_MAX_CHARS)


def proof_suggestion(candidate: KeywordCandidate) -> str:
    return _PROOF_TEMPLATES[candidate.type].format(term=candidate.term)


def to_snippet(candidate: KeywordCandidate, role_title: str | None = None) -> KeywordSnippet:
    supported = bool(candidate.evidence and candidate.evidence.supported)
    where = candidate.where
    return KeywordSnippet(
        term=candidate.term,
        priority=candidate.priority,
        where=where,
        supported=supported,
        proof=candidate.evidence.excerpt if supported else None,
        proof_suggestion=None if supported else proof_suggestion(candidate),
        synonyms=candidate.synonyms or suggest_synonyms(candidate.term),
        snippets=KeywordSnippetText(
            skills=candidate.term if Placement.SKILLS in where else None,
            summary=summary_line(candidate, role_title) if Placement.SUMMARY in where else None,
            bullet=bullet_line(candidate) if Placement.BULLET in where else None,
        ),
    )


def to_snippets(
    candidates: list[KeywordCandidate], role_title: str | None = None
) -> list[KeywordSnippet]:
    return [to_snippet(c, role_title) for c in candidates]
