"""Shared dependencies for API routes."""

from services.semantic_matcher import BaseKeywordClassifier, GeminiKeywordClassifier


def get_keyword_classifier() -> BaseKeywordClassifier:
    return GeminiKeywordClassifier()
