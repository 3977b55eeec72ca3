"""Deterministic keyword candidate ranking.

score = 5*section + 3*jd_tf + 2*type + 2*present - 3*(present ? 0.3 : 0)

Terms from the requirements section and tool names rank highest. Terms the
resume already mentions get a small net bonus (+1.1), so near-misses stay
visible next to fully missing critical terms.
"""

import re
from collections.abc import Callable, Iterable

from pydantic import BaseModel, ConfigDict

from models.schemas.keyword_plan import (
    JdSection,
    KeywordCandidate,
    KeywordType,
    Placement,
    Priority,
)
from services.keywords.snippets import suggest_synonyms
from services.text_normalizer import count_terms

TypeClassifier = Callable[[str], KeywordType]


class ScoringWeights(BaseModel):
    """Ranking constants. Defaults are the product-tuned values."""
    model_config = ConfigDict(frozen=True)

    section: float = 5.0
    frequency: float = 3.0
    type: float = 2.0
    present_bonus: float = 2.0
    present_penalty: float = 3.0
    present_discount: float = 0.3
    section_weights: dict[JdSection, float] = {
        JdSection.REQUIREMENTS: 3,
        JdSection.RESPONSIBILITIES: 2,
        JdSection.PREFERRED: 1,
        JdSection.OTHER: 0,
    }
    type_weights: dict[KeywordType, float] = {
        KeywordType.TOOL: 2,
        KeywordType.METHOD: 1.5,
        KeywordType.DOMAIN: 1.5,
        KeywordType.METRIC: 1,
        KeywordType.SOFT: 0.5,
    }


DEFAULT_WEIGHTS = ScoringWeights()

# ---------------------------------------------------------------------------
# Default type heuristic: checked in order, first hit wins
# ---------------------------------------------------------------------------
_TYPE_PATTERNS: list[tuple[KeywordType, re.Pattern]] = [
    (KeywordType.TOOL, re.compile(
        r"sql|python|excel|tableau|looker|power ?bi|hubspot|salesforce|segment|"
        r"mixpanel|amplitude|figma|jira|confluence|aws|azure|gcp|docker|"
        r"kubernetes|terraform|react|javascript|typescript|java\b|c\+\+|c#|"
        r"golang|\bgit\b|github|snowflake|dbt|airflow|spark|kafka|pandas",
        re.IGNORECASE,
    )),
    (KeywordType.METHOD, re.compile(
        r"\ba/?b\b|experimentation|nurture|roadmap|research|funnels?|onboarding|"
        r"agile|scrum|kanban|ci/cd|prototyp|user testing|segmentation|forecast",
        re.IGNORECASE,
    )),
    (KeywordType.DOMAIN, re.compile(
        r"real.?estate|fintech|health|insur|e-?commerce|saas|b2b|b2c|"
        r"payments|logistics|edtech|banking",
        re.IGNORECASE,
    )),
    (KeywordType.METRIC, re.compile(
        r"\bnps\b|conversion|\bmau\b|\bdau\b|\barr\b|\bmrr\b|retention|churn|"
        r"\bltv\b|\bcac\b|revenue|engagement",
        re.IGNORECASE,
    )),
]

_PRIORITIES: dict[JdSection, Priority] = {
    JdSection.REQUIREMENTS: Priority.CRITICAL,
    JdSection.RESPONSIBILITIES: Priority.IMPORTANT,
    JdSection.PREFERRED: Priority.NICE,
    JdSection.OTHER: Priority.NICE,
}

_PLACEMENTS: dict[KeywordType, list[Placement]] = {
    KeywordType.TOOL: [Placement.SKILLS, Placement.BULLET],
    KeywordType.METHOD: [Placement.SUMMARY, Placement.BULLET],
    KeywordType.DOMAIN: [Placement.SUMMARY, Placement.BULLET],
    KeywordType.METRIC: [Placement.BULLET],
    KeywordType.SOFT: [Placement.BULLET],
}


def classify_term(term: str) -> KeywordType:
    """Default regex heuristic for a term's keyword type."""
    for keyword_type, pattern in _TYPE_PATTERNS:
        if pattern.search(term):
            return keyword_type
    return KeywordType.SOFT


def priority_for(section: JdSection) -> Priority:
    """Fixed section -> priority mapping; scoring weights never change it."""
    return _PRIORITIES[section]


def placement_for(keyword_type: KeywordType) -> list[Placement]:
    return list(_PLACEMENTS[keyword_type])


def compute_score(
    jd_section: JdSection,
    jd_tf: int,
    keyword_type: KeywordType,
    resume_present: bool,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> float:
    """Pure scoring function; monotone in jd_tf and section weight."""
    present = 1 if resume_present else 0
    return (
        weights.section * weights.section_weights[jd_section]
        + weights.frequency * jd_tf
        + weights.type * weights.type_weights[keyword_type]
        + weights.present_bonus * present
        - weights.present_penalty * (weights.present_discount if resume_present else 0)
    )


def rank_candidates(
    jd_terms: Iterable[str],
    resume_terms: Iterable[str],
    section_index: dict[str, JdSection] | None = None,
    type_classifier: TypeClassifier | None = None,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> list[KeywordCandidate]:
    """Score every distinct JD term and return candidates, best first.

    ``jd_terms`` / ``resume_terms`` are term streams (repeats count).
    """
    jd_counts = count_terms(jd_terms)
    resume_counts = count_terms(resume_terms)
    section_index = section_index or {}
    classify = type_classifier or classify_term

    candidates: list[KeywordCandidate] = []
    for term, jd_tf in jd_counts.items():
        resume_freq = resume_counts.get(term, 0)
        jd_section = section_index.get(term, JdSection.OTHER)
        keyword_type = classify(term)
        candidates.append(KeywordCandidate(
            term=term,
            jd_tf=jd_tf,
            jd_section=jd_section,
            type=keyword_type,
            resume_present=resume_freq > 0,
            resume_freq=resume_freq,
            score=compute_score(jd_section, jd_tf, keyword_type, resume_freq > 0, weights),
            priority=priority_for(jd_section),
            synonyms=suggest_synonyms(term),
            where=placement_for(keyword_type),
        ))

    # sorted() is stable: equal scores keep first-occurrence order
    return sorted(candidates, key=lambda c: -c.score)
