import pytest

from models.schemas.keyword_match import KeywordCategory
from services.keyword_validation import (
    categorize_keyword,
    debug_keyword_match,
    get_suggestion_for_keyword,
    is_keyword_present,
    validate_extracted_keywords,
)
from services.text_normalizer import token_set

RESUME = "Built data pipelines in Python and Airflow for the finance team."


def test_validate_splits_valid_and_invalid():
    result = validate_extracted_keywords(["SQL", "Kubernetes", "daily"], "We use sql daily")
    assert result.valid == ["SQL", "daily"]
    assert result.invalid == ["Kubernetes"]
    assert result.warnings == ['Keyword "Kubernetes" not found in job description']


def test_validate_empty_keyword_is_invalid():
    result = validate_extracted_keywords([""], "anything")
    assert result.valid == []
    assert result.invalid == [""]


def test_validate_empty_jd():
    result = validate_extracted_keywords(["sql"], "")
    assert result.invalid == ["sql"]


@pytest.mark.parametrize("keyword,expected", [
    ("5+ years", KeywordCategory.EXPERIENCE),
    ("3 yrs of management", KeywordCategory.EXPERIENCE),
    ("AWS", KeywordCategory.TECHNICAL),
    ("REST API", KeywordCategory.TECHNICAL),
    ("Docker", KeywordCategory.TOOLS),
    ("Python", KeywordCategory.TOOLS),
    ("leadership", KeywordCategory.SOFT),
    ("stakeholder management", KeywordCategory.SOFT),
    ("supply chain", KeywordCategory.DOMAIN),
    ("building", KeywordCategory.DOMAIN),
])
def test_categorize_keyword(keyword, expected):
    assert categorize_keyword(keyword) == expected


def test_suggestion_matches_category():
    assert get_suggestion_for_keyword("docker") == (
        'Add "docker" to your skills section or describe projects where you used this tool.'
    )
    assert get_suggestion_for_keyword("leadership").startswith('Demonstrate "leadership"')


class TestPresence:
    tokens = token_set(RESUME)

    def test_phrase_uses_substring(self):
        assert is_keyword_present("Data Pipelines", RESUME, self.tokens) is True
        assert is_keyword_present("machine learning", RESUME, self.tokens) is False

    def test_single_word_uses_tokens(self):
        assert is_keyword_present("python", RESUME, self.tokens) is True
        # substring of "pipelines" but not a token
        assert is_keyword_present("pipe", RESUME, self.tokens) is False

    def test_debug_phrase(self):
        debug = debug_keyword_match("data pipelines", RESUME, self.tokens)
        assert debug.found is True
        assert debug.strategy == "exact-phrase"
        assert debug.details == 'Found exact phrase "data pipelines" in resume'

    def test_debug_token_miss(self):
        debug = debug_keyword_match("kafka", RESUME, self.tokens)
        assert debug.found is False
        assert debug.strategy == "token"
        assert "Check for variations or synonyms" in debug.details
