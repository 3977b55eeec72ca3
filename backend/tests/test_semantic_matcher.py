from unittest.mock import AsyncMock, patch

import pytest
from pydantic import BaseModel

from models.schemas.keyword_match import KeywordMatchClassification
from services.semantic_matcher import (
    BaseKeywordClassifier,
    GeminiKeywordClassifier,
    KeywordClassificationError,
    compute_match_score,
    flatten_resume,
    semantic_keyword_match,
    substring_classify,
)

KEYWORDS = ["SQL", "dashboards", "Kubernetes"]
RESUME = "Built SQL dashboards for the sales team."


class StubClassifier(BaseKeywordClassifier):
    def __init__(self, result: KeywordMatchClassification):
        self.result = result
        self.calls = 0

    async def classify(self, keywords, resume_text):
        self.calls += 1
        return self.result


class FailingClassifier(BaseKeywordClassifier):
    async def classify(self, keywords, resume_text):
        raise RuntimeError("model unavailable")


class TestFallback:
    @pytest.mark.asyncio
    async def test_failure_equals_substring_result(self):
        result = await semantic_keyword_match(KEYWORDS, RESUME, classifier=FailingClassifier())
        expected = substring_classify(KEYWORDS, RESUME)
        assert result.method == "substring_fallback"
        assert result.matched_keywords == expected.matched == ["SQL", "dashboards"]
        assert result.missed_keywords == expected.missed == ["Kubernetes"]
        assert result.match_score == 67

    @pytest.mark.asyncio
    async def test_half_score_rounds_up(self):
        keywords = ["sql"] + [f"missing{i}" for i in range(7)]
        result = await semantic_keyword_match(keywords, "Built SQL queries", classifier=FailingClassifier())
        assert result.matched_keywords == ["sql"]
        assert result.match_score == 13

    @pytest.mark.asyncio
    async def test_no_api_key_falls_back(self):
        result = await semantic_keyword_match(KEYWORDS, RESUME)
        assert result.method == "substring_fallback"
        assert result.matched_keywords == ["SQL", "dashboards"]

    @pytest.mark.asyncio
    async def test_gemini_none_falls_back(self):
        with patch("services.gemini_client.generate_json", new=AsyncMock(return_value=None)) as mock:
            result = await semantic_keyword_match(KEYWORDS, RESUME)
        mock.assert_awaited_once()
        assert result.method == "substring_fallback"


class TestSemantic:
    @pytest.mark.asyncio
    async def test_result_is_exact_partition_in_input_order(self):
        stub = StubClassifier(KeywordMatchClassification(
            matched=["kubernetes", "sql", "invented"], missed=[],
        ))
        result = await semantic_keyword_match(KEYWORDS, RESUME, classifier=stub)
        assert result.method == "semantic"
        assert result.matched_keywords == ["SQL", "Kubernetes"]
        assert result.missed_keywords == ["dashboards"]
        assert result.match_score == 67

    @pytest.mark.asyncio
    async def test_gemini_response_is_used(self):
        data = {
            "matched": ["SQL", "dashboards"],
            "missed": ["Kubernetes"],
            "reasoning": {"dashboards": "Built SQL dashboards"},
        }
        with patch("services.gemini_client.generate_json", new=AsyncMock(return_value=data)):
            result = await semantic_keyword_match(KEYWORDS, RESUME)
        assert result.method == "semantic"
        assert result.matched_keywords == ["SQL", "dashboards"]
        assert result.missed_keywords == ["Kubernetes"]

    @pytest.mark.asyncio
    async def test_duplicates_are_collapsed(self):
        result = await semantic_keyword_match(["SQL", "SQL", " "], RESUME, classifier=FailingClassifier())
        assert result.matched_keywords == ["SQL"]
        assert result.match_score == 100

    @pytest.mark.asyncio
    async def test_empty_keywords_skip_classifier(self):
        stub = StubClassifier(KeywordMatchClassification())
        result = await semantic_keyword_match([], RESUME, classifier=stub)
        assert stub.calls == 0
        assert result.match_score == 0
        assert result.matched_keywords == []
        assert result.missed_keywords == []

    @pytest.mark.asyncio
    async def test_structured_resume(self):
        resume = {"skills": ["SQL", "Tableau"], "experience": [{"title": "Analyst"}]}
        result = await semantic_keyword_match(["tableau", "python"], resume, classifier=FailingClassifier())
        assert result.matched_keywords == ["tableau"]
        assert result.missed_keywords == ["python"]


class TestGeminiClassifier:
    @pytest.mark.asyncio
    async def test_schema_mismatch_raises(self):
        with patch("services.gemini_client.generate_json", new=AsyncMock(return_value={"matched": "oops"})):
            with pytest.raises(KeywordClassificationError):
                await GeminiKeywordClassifier().classify(KEYWORDS, RESUME)

    @pytest.mark.asyncio
    async def test_no_response_raises(self):
        with patch("services.gemini_client.generate_json", new=AsyncMock(return_value=None)):
            with pytest.raises(KeywordClassificationError):
                await GeminiKeywordClassifier().classify(KEYWORDS, RESUME)


class _Resume(BaseModel):
    name: str
    skills: list[str]


def test_flatten_resume():
    assert flatten_resume("plain text") == "plain text"
    assert flatten_resume(None) == ""
    assert "Tableau" in flatten_resume({"skills": ["Tableau"]})
    assert "Looker" in flatten_resume(_Resume(name="Jane", skills=["Looker"]))


@pytest.mark.parametrize("matched,total,expected", [
    (0, 0, 0),
    (0, 4, 0),
    (1, 3, 33),
    (1, 8, 13),
    (5, 8, 63),
    (2, 3, 67),
    (5, 5, 100),
])
def test_compute_match_score(matched, total, expected):
    assert compute_match_score(matched, total) == expected
