"""TF-IDF intent matching with canned responses."""

from tfidf_intent_matcher.config import MatcherConfig
from tfidf_intent_matcher.exceptions import (
    CatalogLoadError,
    ConfigurationError,
    IntentMatcherError,
    ValidationError,
)
from tfidf_intent_matcher.intent import IntentIndex, Matcher
from tfidf_intent_matcher.loader import load_catalog, parse_catalog
from tfidf_intent_matcher.manager import MatchingModel, build, choose_response
from tfidf_intent_matcher.models import IntentCatalog, IntentDefinition, MatchResult
from tfidf_intent_matcher.text import tokenize
from tfidf_intent_matcher.vectors import VectorSpace, Vocabulary, VocabularyBuilder

__version__ = "0.1.0"

__all__ = [
    "CatalogLoadError",
    "ConfigurationError",
    "IntentCatalog",
    "IntentDefinition",
    "IntentIndex",
    "IntentMatcherError",
    "MatchResult",
    "Matcher",
    "MatcherConfig",
    "MatchingModel",
    "ValidationError",
    "VectorSpace",
    "Vocabulary",
    "VocabularyBuilder",
    "build",
    "choose_response",
    "load_catalog",
    "parse_catalog",
    "tokenize",
]
