"""Keyword plan assembly.

Pipeline:
1. Structural parse of the JD (sections + term frequency)
2. Keep the top-N frequent terms (in-scope candidates)
3. Rank candidates against the resume term stream
4. Attach literal resume evidence
5. Synthesize placement snippets
6. Drop anything that is not a literal JD substring, keep the top entries
"""

import logging
from collections import Counter

from config import settings
from models.schemas.keyword_plan import KeywordCandidate, KeywordLists, KeywordPlan
from services.jd_parser import build_section_index, parse_job_description
from services.keyword_validation import validate_extracted_keywords
from services.keywords.evidence import attach_evidence
from services.keywords.rank import TypeClassifier, rank_candidates
from services.keywords.snippets import to_snippets
from services.text_normalizer import ngrams, tokenize

logger = logging.getLogger(__name__)

MAX_PLAN_SIZE = 10
LEGACY_LIST_SIZE = 40
LEGACY_MISSING_SIZE = 25


def rank_job_terms(
    job_description: str,
    resume_text: str,
    job_title: str = "",
    type_classifier: TypeClassifier | None = None,
) -> list[KeywordCandidate]:
    """Parse, rank and attach evidence; returns every in-scope candidate."""
    metadata = parse_job_description(job_description, job_title)
    in_scope = metadata.top_terms(settings.jd_term_limit)
    if len(metadata.term_frequency) > len(in_scope):
        logger.debug(
            "Truncated %d frequent JD terms to %d",
            len(metadata.term_frequency), len(in_scope),
        )

    jd_stream = [t for t in ngrams(tokenize(job_description)) if t in in_scope]
    resume_stream = list(ngrams(tokenize(resume_text)))

    ranked = rank_candidates(
        jd_stream,
        resume_stream,
        section_index=build_section_index(in_scope),
        type_classifier=type_classifier,
    )
    return attach_evidence(ranked, resume_text or "")


def extract_keyword_lists(resume_text: str, job_description: str) -> KeywordLists:
    """Legacy {jd, resume, missing} view: most frequent unigrams per side."""
    resume_top = [t for t, _ in Counter(tokenize(resume_text)).most_common(LEGACY_LIST_SIZE)]
    jd_top = [t for t, _ in Counter(tokenize(job_description)).most_common(LEGACY_LIST_SIZE)]
    resume_set = set(resume_top)
    missing = [t for t in jd_top if t not in resume_set][:LEGACY_MISSING_SIZE]
    return KeywordLists(jd=jd_top, resume=resume_top, missing=missing)


def build_keyword_plan(
    job_description: str,
    resume_text: str,
    job_title: str | None = None,
    type_classifier: TypeClassifier | None = None,
) -> KeywordPlan:
    """Build the ranked, evidence-backed top-10 keyword plan."""
    candidates = rank_job_terms(job_description, resume_text, job_title or "", type_classifier)
    snippets = to_snippets(candidates, role_title=job_title or None)

    validation = validate_extracted_keywords([s.term for s in snippets], job_description)
    if validation.invalid:
        logger.warning("Dropping %d keywords not found in JD", len(validation.invalid))
    valid = set(validation.valid)

    size = min(settings.keyword_plan_size, MAX_PLAN_SIZE)
    top = [s for s in snippets if s.term in valid][:size]
    logger.info(
        "Keyword plan built: %d candidates, %d in plan, %d supported",
        len(candidates), len(top), sum(1 for s in top if s.supported),
    )
    return KeywordPlan(
        top10=top,
        keywords=extract_keyword_lists(resume_text, job_description),
    )
