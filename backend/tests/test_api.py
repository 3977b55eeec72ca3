from fastapi.testclient import TestClient

from api.dependencies import get_keyword_classifier
from main import app
from models.schemas.keyword_match import KeywordMatchClassification
from services.semantic_matcher import BaseKeywordClassifier

client = TestClient(app)

SCENARIO_JD = "Requirements: 3+ years SQL. Responsibilities: Build dashboards with SQL."


class _AllMatched(BaseKeywordClassifier):
    async def classify(self, keywords, resume_text):
        return KeywordMatchClassification(matched=list(keywords))


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["gemini_configured"] is False


def test_keyword_plan():
    response = client.post(
        "/keywords/plan",
        json={
            "job_description": SCENARIO_JD,
            "resume_text": "Built SQL queries to track metrics.",
            "job_title": "Data Analyst",
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert len(data["top10"]) == 1
    sql = data["top10"][0]
    assert sql["term"] == "sql"
    assert sql["priority"] == "critical"
    assert sql["where"] == ["skills", "bullet"]
    assert sql["supported"] is True
    assert "keywords" in data


def test_keyword_plan_large_resume():
    jd = "Requirements:\n" + (" ".join(f"skill{i}" for i in range(30)) + "\n") * 2
    resume = ("Led reporting for retail teams. " * 1600)[:50000]
    response = client.post("/keywords/plan", json={"job_description": jd, "resume_text": resume})
    assert response.status_code == 200
    data = response.json()
    assert len(data["top10"]) == 10
    assert all(entry["supported"] is False for entry in data["top10"])


def test_keyword_plan_rejects_oversized_jd():
    response = client.post("/keywords/plan", json={"job_description": "x" * 10001})
    assert response.status_code == 422


def test_keyword_plan_requires_jd():
    response = client.post("/keywords/plan", json={"resume_text": "hello"})
    assert response.status_code == 422


def test_keyword_match_falls_back_without_gemini():
    response = client.post(
        "/keywords/match",
        json={"keywords": ["SQL", "Kubernetes"], "resume": "Built SQL dashboards"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["method"] == "substring_fallback"
    assert data["matched_keywords"] == ["SQL"]
    assert data["missed_keywords"] == ["Kubernetes"]
    assert data["match_score"] == 50


def test_keyword_match_with_classifier_override():
    app.dependency_overrides[get_keyword_classifier] = _AllMatched
    try:
        response = client.post(
            "/keywords/match",
            json={"keywords": ["SQL", "Kubernetes"], "resume": {"skills": ["SQL"]}},
        )
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 200
    data = response.json()
    assert data["method"] == "semantic"
    assert data["match_score"] == 100


def test_keyword_extract_deterministic():
    response = client.post("/keywords/extract", json={"job_description": SCENARIO_JD})
    assert response.status_code == 200
    data = response.json()
    assert data["source"] == "deterministic"
    assert data["keywords"] == ["sql"]


def test_keyword_validate():
    response = client.post(
        "/keywords/validate",
        json={"keywords": ["SQL", "Rust"], "job_description": SCENARIO_JD},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["valid"] == ["SQL"]
    assert data["invalid"] == ["Rust"]
