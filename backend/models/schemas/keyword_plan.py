"""Keyword plan contracts: JD parse output, ranked candidates, snippets."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class JdSection(str, Enum):
    """Dominant JD section a term belongs to."""
    REQUIREMENTS = "requirements"
    RESPONSIBILITIES = "responsibilities"
    PREFERRED = "preferred"
    OTHER = "other"


class KeywordType(str, Enum):
    TOOL = "tool"
    METHOD = "method"
    DOMAIN = "domain"
    METRIC = "metric"
    SOFT = "soft"


class Priority(str, Enum):
    CRITICAL = "critical"
    IMPORTANT = "important"
    NICE = "nice"


class Placement(str, Enum):
    """Where in a resume a recommended term should go."""
    SKILLS = "skills"
    SUMMARY = "summary"
    BULLET = "bullet"


# Fixed order used whenever a set of sections is serialized
SECTION_ORDER: tuple[JdSection, ...] = (
    JdSection.REQUIREMENTS,
    JdSection.RESPONSIBILITIES,
    JdSection.PREFERRED,
    JdSection.OTHER,
)


class JdSections(BaseModel):
    """Non-overlapping slices of the JD, header lines removed."""
    model_config = ConfigDict(frozen=True)

    responsibilities: str = ""
    required_qualifications: str = ""
    preferred_qualifications: str = ""
    other: str = ""

    def text_for(self, section: JdSection) -> str:
        return {
            JdSection.REQUIREMENTS: self.required_qualifications,
            JdSection.RESPONSIBILITIES: self.responsibilities,
            JdSection.PREFERRED: self.preferred_qualifications,
            JdSection.OTHER: self.other,
        }[section]


class TermStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int
    appears_in: list[JdSection] = []


class JdMetadata(BaseModel):
    """Structural parse of a job description (Structural Parser output)."""
    model_config = ConfigDict(frozen=True)

    job_title: str = ""
    sections: JdSections = JdSections()
    term_frequency: dict[str, TermStats] = {}  # only terms seen >= 2 times

    def top_terms(self, limit: int = 30) -> dict[str, TermStats]:
        """Most frequent terms first; ties keep first-occurrence order."""
        ranked = sorted(self.term_frequency.items(), key=lambda kv: -kv[1].count)
        return dict(ranked[:limit])


class EvidenceMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    supported: bool
    excerpt: str | None = None


class KeywordCandidate(BaseModel):
    """A JD term considered for recommendation."""
    model_config = ConfigDict(frozen=True)

    term: str
    jd_tf: int
    jd_section: JdSection = JdSection.OTHER
    type: KeywordType = KeywordType.SOFT
    resume_present: bool = False
    resume_freq: int = 0
    evidence: EvidenceMatch | None = None
    synonyms: list[str] = Field(default_factory=list, max_length=2)
    score: float = 0.0
    priority: Priority = Priority.NICE
    where: list[Placement] = []


class KeywordSnippetText(BaseModel):
    model_config = ConfigDict(frozen=True)

    skills: str | None = None
    summary: str | None = Field(default=None, max_length=140)
    bullet: str | None = Field(default=None, max_length=200)


class KeywordSnippet(BaseModel):
    """Presentation-ready form of a candidate."""
    model_config = ConfigDict(frozen=True)

    term: str
    priority: Priority
    where: list[Placement]
    supported: bool
    proof: str | None = None  # resume excerpt if supported
    proof_suggestion: str | None = None  # if not supported
    synonyms: list[str] = Field(default_factory=list, max_length=2)
    snippets: KeywordSnippetText = KeywordSnippetText()


class KeywordLists(BaseModel):
    """Legacy flat keyword view: {jd, resume, missing}."""
    model_config = ConfigDict(frozen=True)

    jd: list[str] = []
    resume: list[str] = []
    missing: list[str] = []


class KeywordPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    top10: list[KeywordSnippet] = Field(default_factory=list, max_length=10)
    keywords: KeywordLists | None = None
