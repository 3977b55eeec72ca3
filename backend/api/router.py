from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_keyword_classifier
from config import settings
from models.requests import (
    ExtractKeywordsRequest,
    KeywordPlanRequest,
    SemanticMatchRequest,
    ValidateKeywordsRequest,
)
from models.responses import HealthResponse
from models.schemas.keyword_match import (
    ExtractedKeywords,
    KeywordValidationResult,
    SemanticMatchResult,
)
from models.schemas.keyword_plan import KeywordPlan
from services import keyword_extractor, keyword_validation, semantic_matcher
from services.keywords import plan
from services.semantic_matcher import BaseKeywordClassifier

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok", gemini_configured=bool(settings.gemini_api_key))


@router.post("/keywords/plan", response_model=KeywordPlan)
@limiter.limit(settings.rate_limit)
def keyword_plan(request: Request, body: KeywordPlanRequest):
    return plan.build_keyword_plan(body.job_description, body.resume_text, body.job_title)


@router.post("/keywords/match", response_model=SemanticMatchResult)
@limiter.limit(settings.rate_limit)
async def keyword_match(
    request: Request,
    body: SemanticMatchRequest,
    classifier: BaseKeywordClassifier = Depends(get_keyword_classifier),
):
    return await semantic_matcher.semantic_keyword_match(
        body.keywords, body.resume, classifier=classifier
    )


@router.post("/keywords/extract", response_model=ExtractedKeywords)
@limiter.limit(settings.rate_limit)
async def extract_keywords(request: Request, body: ExtractKeywordsRequest):
    return await keyword_extractor.extract_keywords_from_job_description(
        body.job_description, body.job_title
    )


@router.post("/keywords/validate", response_model=KeywordValidationResult)
@limiter.limit(settings.rate_limit)
def validate_keywords(request: Request, body: ValidateKeywordsRequest):
    return keyword_validation.validate_extracted_keywords(body.keywords, body.job_description)
