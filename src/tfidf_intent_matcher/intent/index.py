"""Per-intent centroid vectors."""

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np

from ..models import IntentCatalog, IntentDefinition
from ..vectors import VectorSpace, l2_normalize

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class IndexedIntent:
    """An intent together with its centroid in the vector space."""
    definition: IntentDefinition
    centroid: np.ndarray
    pattern_count: int = 0
    
    @property
    def name(self) -> str:
        """Intent name."""
        return self.definition.name
    
    @property
    def responses(self) -> list[str]:
        """Candidate replies."""
        return self.definition.responses


def compute_centroid(vectors: Sequence[np.ndarray], dimension: int) -> np.ndarray:
    """Renormalized mean of pattern vectors, or the zero vector if there are none."""
    if not vectors:
        return np.zeros(dimension, dtype=np.float64)
    return l2_normalize(np.mean(np.vstack(vectors), axis=0))


class IntentIndex:
    """Holds one centroid per intent, in catalog order."""
    
    def __init__(self, entries: Sequence[IndexedIntent], dimension: int):
        self._entries = tuple(entries)
        self.dimension = dimension
    
    @classmethod
    def build(
        cls,
        catalog: IntentCatalog,
        pattern_vectors: Sequence[tuple[IntentDefinition, np.ndarray]],
        space: VectorSpace
    ) -> "IntentIndex":
        """Aggregate pattern vectors into intent centroids.
        
        Args:
            catalog: Intents in catalog order
            pattern_vectors: Pairs of (owning intent, pattern vector)
            space: Vector space the pattern vectors belong to
            
        Returns:
            Built IntentIndex
        """
        grouped: dict[int, list[np.ndarray]] = {id(intent): [] for intent in catalog}
        for intent, vector in pattern_vectors:
            grouped[id(intent)].append(vector)
        
        entries = []
        for intent in catalog:
            vectors = grouped[id(intent)]
            if not vectors:
                logger.debug("Intent %r has no usable patterns", intent.name)
            entries.append(IndexedIntent(
                definition=intent,
                centroid=compute_centroid(vectors, space.dimension),
                pattern_count=len(vectors),
            ))
        
        return cls(entries, space.dimension)
    
    def __iter__(self) -> Iterator[IndexedIntent]:
        return iter(self._entries)
    
    def __len__(self) -> int:
        return len(self._entries)
