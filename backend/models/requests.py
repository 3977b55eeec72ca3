from typing import Any

from pydantic import BaseModel, Field


class KeywordPlanRequest(BaseModel):
    job_description: str = Field(..., max_length=10000, description="Raw job description text")
    resume_text: str = Field("", max_length=50000, description="Plain text resume content")
    job_title: str | None = Field(None, max_length=200, description="Optional role title")


class SemanticMatchRequest(BaseModel):
    keywords: list[str] = Field(..., max_length=100, description="Keywords to check")
    resume: str | dict[str, Any] | list[Any] = Field(
        ..., description="Resume as plain text or a structured JSON object"
    )


class ExtractKeywordsRequest(BaseModel):
    job_description: str = Field(..., max_length=10000, description="Job description text")
    job_title: str | None = Field(None, max_length=200)


class ValidateKeywordsRequest(BaseModel):
    keywords: list[str] = Field(..., max_length=100)
    job_description: str = Field(..., max_length=10000)
