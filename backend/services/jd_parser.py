"""Job description segmentation and section-aware term frequency.

Splits a raw JD into responsibilities / required / preferred / other using
known header phrases, then counts 1-3 word n-grams and records which
sections each frequent term appears in.
"""

import logging
import re
from dataclasses import dataclass

from models.schemas.keyword_plan import (
    SECTION_ORDER,
    JdMetadata,
    JdSection,
    JdSections,
    TermStats,
)
from services.text_normalizer import count_terms, ngrams, tokenize

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Header phrases per target section (compared lowercase, exact phrase)
# ---------------------------------------------------------------------------
SECTION_HEADERS: dict[JdSection, list[str]] = {
    JdSection.REQUIREMENTS: [
        "requirements",
        "required qualifications",
        "minimum qualifications",
        "basic qualifications",
        "qualifications",
        "requirements and qualifications",
        "minimum requirements",
        "basic requirements",
        "job requirements",
        "key requirements",
        "required skills",
        "skills and experience",
        "skills & experience",
        "skills and qualifications",
        "skills & qualifications",
        "qualifications and skills",
        "qualifications & skills",
        "what you'll need",
        "what you need",
        "what you bring",
        "what we're looking for",
        "what we are looking for",
        "who you are",
        "must have",
        "must haves",
        "must-haves",
    ],
    JdSection.PREFERRED: [
        "preferred qualifications",
        "preferred skills",
        "preferred",
        "desired qualifications",
        "nice to have",
        "nice to haves",
        "nice-to-have",
        "nice-to-haves",
        "good to have",
        "bonus points",
        "bonus",
        "pluses",
    ],
    JdSection.RESPONSIBILITIES: [
        "responsibilities",
        "key responsibilities",
        "job responsibilities",
        "roles and responsibilities",
        "roles & responsibilities",
        "role and responsibilities",
        "role & responsibilities",
        "duties and responsibilities",
        "duties & responsibilities",
        "duties",
        "what you'll do",
        "what you will do",
        "day to day",
        "in this role",
        "your role",
        "the role",
    ],
}

# Longest phrase first so "preferred qualifications" wins over "preferred"
_HEADER_PHRASES: list[tuple[str, JdSection]] = sorted(
    (
        (phrase, section)
        for section, phrases in SECTION_HEADERS.items()
        for phrase in phrases
    ),
    key=lambda item: len(item[0]),
    reverse=True,
)

_MARKDOWN_PREFIX = "#*>-•·_ \t"
_LABEL_DELIMITERS = ":-–—"  # colon or dash after a header phrase
_EMPHASIS = "*_"
# Sentence boundaries inside a line where an inline "Label:" may start
_SENTENCE_BREAK_RE = re.compile(r"[.!?;]\s+")

# Weight used to pick a term's dominant section
_SECTION_RANK: dict[JdSection, int] = {
    JdSection.REQUIREMENTS: 3,
    JdSection.RESPONSIBILITIES: 2,
    JdSection.PREFERRED: 1,
    JdSection.OTHER: 0,
}


@dataclass(frozen=True)
class HeaderMatch:
    start: int
    end: int
    section: JdSection


def _fold(text: str) -> str:
    """Lowercase and unify typographic apostrophes (same length as input)."""
    return text.lower().replace("’", "'")


def _match_label(line: str, pos: int, at_line_start: bool) -> tuple[int, JdSection] | None:
    """Try to read a header phrase at ``pos``; return (end offset, section).

    Accepts "Phrase:" / "Phrase -" anywhere a sentence starts. A bare
    "Phrase" with nothing after it only counts when it fills the whole line.
    """
    folded = _fold(line)
    i = pos
    if at_line_start:
        while i < len(line) and line[i] in _MARKDOWN_PREFIX:
            i += 1

    for phrase, section in _HEADER_PHRASES:
        if not folded.startswith(phrase, i):
            continue
        j = i + len(phrase)
        if j < len(line) and (line[j].isalnum() or line[j] == "'"):
            continue  # phrase is a prefix of a longer word
        k = j
        while k < len(line) and line[k] in _EMPHASIS:
            k += 1
        while k < len(line) and line[k] in " \t":
            k += 1
        if k < len(line) and line[k] in _LABEL_DELIMITERS:
            # a dash only delimits when spaced: "Requirements-driven" is prose
            if line[k] != ":" and k + 1 < len(line) and not line[k + 1].isspace():
                continue
            k += 1
            while k < len(line) and line[k] in _EMPHASIS:
                k += 1
            return k, section
        if at_line_start and not line[k:].strip(" \t\r\n" + _EMPHASIS):
            return len(line.rstrip("\r\n")), section
    return None


def find_headers(text: str) -> list[HeaderMatch]:
    """Scan line by line for section headers, in document order."""
    headers: list[HeaderMatch] = []
    offset = 0
    for line in text.splitlines(keepends=True):
        starts = [0] + [m.end() for m in _SENTENCE_BREAK_RE.finditer(line)]
        for start in starts:
            # Skip indentation before the candidate label
            pos = start
            while pos < len(line) and line[pos] in " \t":
                pos += 1
            found = _match_label(line, pos, at_line_start=(start == 0))
            if found is None:
                continue
            end, section = found
            headers.append(HeaderMatch(offset + start, offset + end, section))
            if start == 0 and end >= len(line.rstrip("\r\n")):
                break  # whole line is a header
        offset += len(line)
    return headers


def split_sections(raw_jd: str) -> JdSections:
    """Segment a JD into sections; headerless text all lands in ``other``."""
    text = raw_jd or ""
    headers = find_headers(text)
    if not headers:
        return JdSections(other=text.strip())

    chunks: dict[JdSection, list[str]] = {s: [] for s in SECTION_ORDER}
    preamble = text[:headers[0].start].strip()
    if preamble:
        chunks[JdSection.OTHER].append(preamble)

    for idx, header in enumerate(headers):
        stop = headers[idx + 1].start if idx + 1 < len(headers) else len(text)
        body = text[header.end:stop].strip()
        if body:
            chunks[header.section].append(body)

    return JdSections(
        responsibilities="\n".join(chunks[JdSection.RESPONSIBILITIES]),
        required_qualifications="\n".join(chunks[JdSection.REQUIREMENTS]),
        preferred_qualifications="\n".join(chunks[JdSection.PREFERRED]),
        other="\n".join(chunks[JdSection.OTHER]),
    )


def compute_term_frequency(raw_jd: str, sections: JdSections) -> dict[str, TermStats]:
    """Count n-grams over the whole JD, keep literal terms seen at least twice."""
    text_lower = (raw_jd or "").lower()
    counts = count_terms(ngrams(tokenize(raw_jd)))
    section_text = {s: sections.text_for(s).lower() for s in SECTION_ORDER}

    table: dict[str, TermStats] = {}
    for term, count in counts.items():
        if count < 2 or term not in text_lower:
            continue
        appears_in = [s for s in SECTION_ORDER if term in section_text[s]]
        table[term] = TermStats(count=count, appears_in=appears_in)
    return table


def parse_job_description(raw_jd: str, job_title: str = "") -> JdMetadata:
    """Parse a raw JD into sections plus section-annotated term frequency."""
    sections = split_sections(raw_jd)
    term_frequency = compute_term_frequency(raw_jd, sections)
    logger.debug(
        "Parsed JD: %d frequent terms, sections=%s",
        len(term_frequency),
        [s.value for s in SECTION_ORDER if sections.text_for(s)],
    )
    return JdMetadata(
        job_title=job_title or "",
        sections=sections,
        term_frequency=term_frequency,
    )


def dominant_section(stats: TermStats) -> JdSection:
    """Highest-weighted section a term appears in (``other`` if none)."""
    if not stats.appears_in:
        return JdSection.OTHER
    return max(stats.appears_in, key=lambda s: _SECTION_RANK[s])


def build_section_index(term_frequency: dict[str, TermStats]) -> dict[str, JdSection]:
    return {term: dominant_section(stats) for term, stats in term_frequency.items()}
