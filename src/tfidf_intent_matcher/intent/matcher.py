"""Cosine-similarity matching of query vectors against intent centroids."""

import logging

import numpy as np

from ..config import DEFAULT_THRESHOLD
from ..models import MatchResult
from ..vectors import cosine_similarity
from .index import IntentIndex

logger = logging.getLogger(__name__)


class Matcher:
    """Selects the best intent for a query vector."""
    
    def __init__(self, index: IntentIndex, threshold: float = DEFAULT_THRESHOLD):
        self.index = index
        self.threshold = threshold
    
    def scores(self, query_vector: np.ndarray) -> list[tuple[int, float]]:
        """Similarity of the query to every intent centroid, in catalog order."""
        return [
            (position, cosine_similarity(query_vector, entry.centroid))
            for position, entry in enumerate(self.index)
            if entry.centroid is not None
        ]
    
    def match(self, query_vector: np.ndarray | None) -> MatchResult | None:
        """Find the best-matching intent.
        
        Only strictly positive scores can win and ties keep the earlier
        intent.
        
        Args:
            query_vector: Normalized query vector
            
        Returns:
            MatchResult, or None when nothing reaches the threshold or the
            winning intent has no responses
        """
        if query_vector is None:
            return None
        
        entries = list(self.index)
        best = None
        best_score = 0.0
        for position, score in self.scores(query_vector):
            if score > best_score:
                best_score = score
                best = entries[position]
        
        if best is None:
            logger.debug("No intent scored above zero")
            return None
        
        if best_score < self.threshold:
            logger.debug(
                "Best intent %r scored %.3f, below threshold %.3f",
                best.name, best_score, self.threshold
            )
            return None
        
        if not best.responses:
            logger.debug("Best intent %r has no responses", best.name)
            return None
        
        return MatchResult(intent=best.definition, score=best_score)
    
    def rank(self, query_vector: np.ndarray | None, limit: int | None = None) -> list[MatchResult]:
        """All intents with a positive score, best first.
        
        Args:
            query_vector: Normalized query vector
            limit: Maximum number of results
            
        Returns:
            Results sorted by descending score, ties in catalog order
        """
        if query_vector is None:
            return []
        if limit is not None and limit < 1:
            raise ValueError("limit must be at least 1")
        
        entries = list(self.index)
        ranked = sorted(
            ((position, score) for position, score in self.scores(query_vector) if score > 0),
            key=lambda item: (-item[1], item[0])
        )
        if limit is not None:
            ranked = ranked[:limit]
        
        return [
            MatchResult(intent=entries[position].definition, score=score)
            for position, score in ranked
        ]
