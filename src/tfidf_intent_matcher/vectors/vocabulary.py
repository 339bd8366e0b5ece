"""Vocabulary and inverse-document-frequency construction."""

import logging
import math
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

import numpy as np

logger = logging.getLogger(__name__)


def smoothed_idf(total_documents: int, document_frequency: int) -> float:
    """Smoothed IDF weight, always positive."""
    return math.log((total_documents + 1) / (document_frequency + 1)) + 1.0


@dataclass(frozen=True, eq=False)
class Vocabulary:
    """Frozen term index with index-aligned IDF weights."""
    terms: tuple[str, ...]
    index: Mapping[str, int]
    idf: np.ndarray
    document_frequency: Mapping[str, int]
    document_count: int
    
    @property
    def size(self) -> int:
        """Number of distinct terms (V)."""
        return len(self.terms)
    
    def __len__(self) -> int:
        return len(self.terms)
    
    def __contains__(self, term: object) -> bool:
        return term in self.index
    
    def position(self, term: str) -> int | None:
        """Index of a term, or None if it was not seen at build time."""
        return self.index.get(term)


class VocabularyBuilder:
    """Collects pattern documents and derives the vocabulary from them."""
    
    def __init__(self):
        self._documents: list[list[str]] = []
    
    @property
    def document_count(self) -> int:
        """Number of non-empty documents added so far."""
        return len(self._documents)
    
    def add_document(self, tokens: Sequence[str]) -> bool:
        """Add one tokenized pattern.
        
        Empty documents are ignored.
        
        Returns:
            True if the document was kept
        """
        if not tokens:
            return False
        self._documents.append(list(tokens))
        return True
    
    def add_documents(self, documents: Iterable[Sequence[str]]) -> int:
        """Add several documents, returning how many were kept."""
        return sum(1 for tokens in documents if self.add_document(tokens))
    
    def build(self) -> Vocabulary:
        """Compute term indices and IDF weights.
        
        Terms are indexed in sorted order. Document frequency counts each
        term at most once per document.
        
        Returns:
            Immutable Vocabulary
        """
        total = len(self._documents)
        df: Counter[str] = Counter()
        for tokens in self._documents:
            df.update(set(tokens))
        
        terms = tuple(sorted(df))
        index = {term: i for i, term in enumerate(terms)}
        
        idf = np.zeros(len(terms), dtype=np.float64)
        for term, frequency in df.items():
            idf[index[term]] = smoothed_idf(total, frequency)
        idf.setflags(write=False)
        
        logger.debug("Built vocabulary: %d terms from %d documents", len(terms), total)
        
        return Vocabulary(
            terms=terms,
            index=MappingProxyType(index),
            idf=idf,
            document_frequency=MappingProxyType(dict(df)),
            document_count=total,
        )
