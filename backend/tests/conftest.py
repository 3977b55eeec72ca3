"""Shared test configuration and fixtures."""

import pytest

from config import settings
from services import gemini_client


@pytest.fixture(autouse=True)
def _gemini_disabled(monkeypatch):
    """Never reach the real Gemini API from tests."""
    monkeypatch.setattr(settings, "gemini_api_key", "")
    monkeypatch.setattr(gemini_client, "_client", None)


@pytest.fixture
def markdown_jd() -> str:
    return """Acme Analytics
We build reporting tools for retail teams.

## Responsibilities
- Build dashboards with SQL and Looker
- Partner with product on experimentation
- Own data quality for SQL pipelines

Requirements:
- 3+ years SQL experience
- Python for data pipelines
- Clear communication with stakeholders

**Preferred Qualifications**
- dbt experience
- Experience with A/B testing
"""


@pytest.fixture
def sample_resume() -> str:
    return """Jane Doe
Data Analyst | Retail Co | 2020 - Present
- Built SQL queries to track metrics for 40 stores
- Automated weekly reporting in Python, saving 6 hours per week
- Ran A/B testing on onboarding emails with the growth team
"""
