"""Literal whole-word evidence search for keyword candidates in resume text."""

import re

from models.schemas.keyword_plan import EvidenceMatch, KeywordCandidate

CONTEXT_CHARS = 60

_WHITESPACE_RE = re.compile(r"\s+")


def build_search_pattern(term: str) -> re.Pattern:
    """Whole-word, case-insensitive pattern for ``term``.

    Term text is escaped; word edges use lookarounds so terms ending in
    symbols ("c++", "c#") still match as whole words. Context is sliced
    from the match offsets, not captured, so a miss stays a linear scan.
    """
    words = [re.escape(w) for w in term.split()]
    body = r"\s+".join(words)
    return re.compile(rf"(?<!\w){body}(?!\w)", re.IGNORECASE)


def find_evidence(term: str, resume_text: str, context: int = CONTEXT_CHARS) -> EvidenceMatch:
    if not term.strip() or not resume_text:
        return EvidenceMatch(supported=False)
    match = build_search_pattern(term).search(resume_text)
    if match is None:
        return EvidenceMatch(supported=False)
    window = resume_text[max(0, match.start() - context):match.end() + context]
    excerpt = _WHITESPACE_RE.sub(" ", window).strip()
    return EvidenceMatch(supported=True, excerpt=excerpt)


def attach_evidence(
    candidates: list[KeywordCandidate], resume_text: str
) -> list[KeywordCandidate]:
    """Return copies of ``candidates`` with ``evidence`` populated."""
    return [
        c.model_copy(update={"evidence": find_evidence(c.term, resume_text)})
        for c in candidates
    ]
