"""Main model class for tfidf_intent_matcher."""

import logging
import random
import threading
from collections.abc import Iterable, Sequence
from typing import Any

import numpy as np

from tfidf_intent_matcher.config import MatcherConfig
from tfidf_intent_matcher.intent import IntentIndex, Matcher
from tfidf_intent_matcher.models import IntentCatalog, IntentDefinition, MatchResult
from tfidf_intent_matcher.text import tokenize
from tfidf_intent_matcher.vectors import VectorSpace, Vocabulary, VocabularyBuilder

logger = logging.getLogger(__name__)

REPLY_FORMAT = "{response} (matched: {name}, score={score:.3f})"


def choose_response(responses: Sequence[str], rng: random.Random) -> str:
    """Pick one response uniformly at random.
    
    Raises:
        ValueError: If there are no responses
    """
    if not responses:
        raise ValueError("responses cannot be empty")
    return responses[rng.randrange(len(responses))]


class MatchingModel:
    """Built TF-IDF model answering free-text input with canned responses."""
    
    def __init__(
        self,
        catalog: IntentCatalog,
        config: MatcherConfig,
        vocabulary: Vocabulary,
        index: IntentIndex,
        rng: random.Random | None = None
    ):
        """Initialize MatchingModel.
        
        Use ``build`` rather than calling this directly.
        
        Args:
            catalog: Source intents
            config: Matcher configuration
            vocabulary: Frozen vocabulary and IDF weights
            index: Intent centroids
            rng: Random source for response selection
        """
        self.catalog = catalog
        self.config = config
        self.vocabulary = vocabulary
        self.space = VectorSpace(vocabulary)
        self.index = index
        self.matcher = Matcher(index, threshold=config.threshold)
        self._rng = rng or random.Random()
        self._rng_lock = threading.Lock()
    
    def vectorize(self, text: str | None) -> np.ndarray | None:
        """Tokenize and project text, returning None if nothing is recognized."""
        return self.space.vectorize(tokenize(text, self.config.stopwords))
    
    def classify(self, text: str | None) -> MatchResult | None:
        """Best-matching intent for text without picking a response."""
        if text is None or not text.strip():
            return None
        return self.matcher.match(self.vectorize(text))
    
    def rank(self, text: str | None, limit: int | None = None) -> list[MatchResult]:
        """Intents with a positive similarity to text, best first."""
        if text is None or not text.strip():
            return []
        return self.matcher.rank(self.vectorize(text), limit=limit)
    
    def reply(self, user_input: str | None) -> str:
        """Answer user input with a matched or fallback response.
        
        Args:
            user_input: Raw user text
            
        Returns:
            Matched response annotated with intent name and score, or a
            fallback message
        """
        if user_input is None or not user_input.strip():
            return self.config.empty_input_response
        
        query_vector = self.vectorize(user_input)
        if query_vector is None:
            logger.debug("No known terms in input")
            return self.fallback_response()
        
        result = self.matcher.match(query_vector)
        if result is None:
            return self.fallback_response()
        
        logger.debug("Matched intent %r with score %.3f", result.name, result.score)
        return REPLY_FORMAT.format(
            response=self._choose(result.intent.responses),
            name=result.name or "?",
            score=result.score,
        )
    
    def fallback_response(self) -> str:
        """Response from the fallback intent, or the default apology."""
        fallback = self._find_fallback()
        if fallback is None:
            return self.config.default_fallback_response
        return self._choose(fallback.responses)
    
    def _find_fallback(self) -> IntentDefinition | None:
        return self.catalog.find(self.config.fallback_intent_name, with_responses=True)
    
    def _choose(self, responses: Sequence[str]) -> str:
        with self._rng_lock:
            return choose_response(responses, self._rng)
    
    def get_stats(self) -> dict[str, Any]:
        """Get statistics about the built model."""
        return {
            "intent_count": len(self.catalog),
            "pattern_count": self.catalog.pattern_count,
            "document_count": self.vocabulary.document_count,
            "vocabulary_size": self.vocabulary.size,
            "threshold": self.matcher.threshold,
            "has_fallback_intent": self._find_fallback() is not None,
        }


def build(
    catalog: IntentCatalog | Iterable[IntentDefinition],
    config: MatcherConfig | None = None,
    rng: random.Random | None = None
) -> MatchingModel:
    """Build a matching model from a catalog.
    
    Patterns that tokenize to nothing are skipped. The vocabulary, IDF
    weights and centroids are fixed once this returns.
    
    Args:
        catalog: Intents in catalog order
        config: Matcher configuration (uses defaults if None)
        rng: Random source for response selection
        
    Returns:
        Built MatchingModel
    """
    config = config or MatcherConfig()
    logger.debug("Building matching model with config %s", config.to_dict())
    if not isinstance(catalog, IntentCatalog):
        catalog = IntentCatalog(list(catalog))
    
    builder = VocabularyBuilder()
    documents: list[tuple[IntentDefinition, list[str]]] = []
    for intent in catalog:
        for pattern in intent.patterns:
            tokens = tokenize(pattern, config.stopwords)
            if builder.add_document(tokens):
                documents.append((intent, tokens))
    
    vocabulary = builder.build()
    space = VectorSpace(vocabulary)
    pattern_vectors = [(intent, space.transform_document(tokens)) for intent, tokens in documents]
    index = IntentIndex.build(catalog, pattern_vectors, space)
    
    for intent in catalog:
        if not intent.has_responses and not intent.is_named(config.fallback_intent_name):
            logger.warning("Intent %r has no responses and can never be selected", intent.name)
    
    model = MatchingModel(catalog, config, vocabulary, index, rng=rng)
    if not model.get_stats()["has_fallback_intent"]:
        logger.warning(
            "No %r intent with responses; using the default fallback message",
            config.fallback_intent_name
        )
    
    logger.info(
        "Built matching model: %d intents, %d documents, %d terms",
        len(catalog), vocabulary.document_count, vocabulary.size
    )
    return model
