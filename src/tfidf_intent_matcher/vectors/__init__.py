"""TF-IDF vectorization for tfidf_intent_matcher."""

from tfidf_intent_matcher.vectors.space import VectorSpace, cosine_similarity, l2_normalize
from tfidf_intent_matcher.vectors.vocabulary import Vocabulary, VocabularyBuilder, smoothed_idf

__all__ = [
    "VectorSpace",
    "Vocabulary",
    "VocabularyBuilder",
    "cosine_similarity",
    "l2_normalize",
    "smoothed_idf",
]
