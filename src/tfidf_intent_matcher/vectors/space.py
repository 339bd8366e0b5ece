"""TF-IDF vector space over a frozen vocabulary."""

from collections import Counter
from collections.abc import Sequence

import numpy as np

from .vocabulary import Vocabulary


def l2_normalize(vector: np.ndarray) -> np.ndarray:
    """Return a unit-length copy of the vector (zero vectors stay zero)."""
    norm = np.linalg.norm(vector)
    if norm == 0:
        return vector.astype(np.float64, copy=True)
    return vector / norm


def cosine_similarity(a: np.ndarray, b: np.ndarray) -> float:
    """Cosine similarity of two vectors.
    
    Returns 0.0 when either vector has zero norm or the lengths differ.
    """
    if a is None or b is None or a.shape != b.shape:
        return 0.0
    norm_a = np.linalg.norm(a)
    norm_b = np.linalg.norm(b)
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return float(np.dot(a, b) / (norm_a * norm_b))


class VectorSpace:
    """Projects token sequences onto the vocabulary as TF-IDF vectors."""
    
    def __init__(self, vocabulary: Vocabulary):
        self.vocabulary = vocabulary
    
    @property
    def dimension(self) -> int:
        """Length of every vector in this space."""
        return self.vocabulary.size
    
    def zeros(self) -> np.ndarray:
        """The zero vector of this space."""
        return np.zeros(self.dimension, dtype=np.float64)
    
    def vectorize(self, tokens: Sequence[str] | None) -> np.ndarray | None:
        """Build a normalized TF-IDF vector for a query.
        
        Term frequency is scaled by the count of the most frequent known
        term. Tokens outside the vocabulary are ignored entirely.
        
        Args:
            tokens: Tokenized query
            
        Returns:
            Unit-length vector, or None if no token is in the vocabulary
        """
        if not tokens or self.dimension == 0:
            return None
        
        counts = Counter(t for t in tokens if t in self.vocabulary)
        if not counts:
            return None
        
        max_count = max(counts.values())
        vector = self.zeros()
        for term, count in counts.items():
            position = self.vocabulary.position(term)
            vector[position] = (count / max_count) * self.vocabulary.idf[position]
        
        return l2_normalize(vector)
    
    def transform_document(self, tokens: Sequence[str]) -> np.ndarray:
        """Vectorize a pattern document, yielding the zero vector when nothing is known."""
        vector = self.vectorize(tokens)
        return self.zeros() if vector is None else vector
