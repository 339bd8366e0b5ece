"""Intent indexing and matching for tfidf_intent_matcher."""

from tfidf_intent_matcher.intent.index import IndexedIntent, IntentIndex, compute_centroid
from tfidf_intent_matcher.intent.matcher import Matcher

__all__ = ["IndexedIntent", "IntentIndex", "Matcher", "compute_centroid"]
