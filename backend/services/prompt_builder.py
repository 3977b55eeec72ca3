"""All prompt templates for Gemini API calls."""


def build_keyword_match_prompt(keywords: list[str], resume_text: str) -> str:
    """Semantic keyword matching: did the candidate clearly do this work?"""
    keyword_list = "\n".join(f"{i}. {kw}" for i, kw in enumerate(keywords, start=1))

    return f"""You are a resume keyword matching expert.

CORE STANDARD: if the candidate clearly DID the work, it is a MATCH, even when
the resume uses different words. Judge the concept, not the exact phrase.

KEYWORDS TO MATCH:
{keyword_list}

RESUME CONTENT:
---
{resume_text}
---

MATCHING PATTERNS (apply to any domain or role):
1. Tools imply usage: "SQL" in the resume implies data analysis, reporting and dashboards;
   "Salesforce" implies CRM and pipeline work; "Epic" implies clinical documentation.
2. Outcomes imply methods: "increased sales 30%" implies sales strategy and pipeline
   management; "reduced costs 20%" implies cost optimization.
3. Roles imply standard responsibilities: an "Account Executive" prospects, demos and
   closes; a "Registered Nurse" charts and administers medication.
4. Metrics prove capability: reporting a metric means they tracked and analyzed it.
5. Synonyms count: "experiments" = "A/B tests" = "experimentation";
   "partnered with" = "cross-functional"; "streamlined" = "optimized".

EXAMPLES:
- Keyword "experimentation frameworks", resume "Conducted 12 A/B tests on pricing" -> MATCH
- Keyword "dashboard", resume "Built SQL queries to track key metrics" -> MATCH
- Keyword "pipeline management", resume "Managed 50+ opportunities in Salesforce" -> MATCH
- Keyword "wireframing", resume "Created low-fidelity mockups in Figma" -> MATCH
- Keyword "clinical decision support", resume "Built consumer SaaS for job seekers" -> NO MATCH

NO MATCH only when the domain is unrelated, there is no evidence of that type of
work, or matching would require inventing experience the candidate does not have.

Every keyword must appear in exactly one of "matched" or "missed", spelled exactly
as listed above.

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "matched": [<keywords the resume demonstrates>],
  "missed": [<keywords with no evidence>],
  "reasoning": {{"<keyword>": "<one-sentence reason for match or no-match>"}}
}}"""


def build_keyword_extraction_prompt(job_description: str, job_title: str | None = None) -> str:
    """ATS keyword extraction: exact JD phrases plus 3-5 must-haves."""
    title_line = f"JOB TITLE: {job_title}\n" if job_title else ""

    return f"""Extract the most important keywords and phrases from this job description
for ATS matching.

EXTRACTION RULES:
1. Preserve exact multi-word phrases: "machine learning", "5+ years experience",
   "bachelor's degree", "REST API", "CI/CD". Do not split them.
2. Prioritize hard skills, tools and frameworks, certifications, experience levels,
   domain knowledge, and soft skills only when the JD emphasizes them.
3. Keep acronyms uppercase (AWS, API, SDK) and proper nouns capitalized (Python, React).
4. Extract 20-30 keywords for technical roles, 15-20 for product/business roles and
   10-15 for executive roles.
5. Also list the 3-5 "primary" keywords a candidate must have.

CRITICAL: every keyword must appear verbatim in the job description. Do not invent,
generalize or paraphrase terms.

{title_line}JOB DESCRIPTION:
---
{job_description}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "keywords": [<keyword strings copied from the job description>],
  "primary": [<3-5 of the keywords above that are must-haves>]
}}"""
