"""Data models for tfidf_intent_matcher."""

from tfidf_intent_matcher.models.types import IntentCatalog, IntentDefinition, MatchResult

__all__ = ["IntentCatalog", "IntentDefinition", "MatchResult"]
