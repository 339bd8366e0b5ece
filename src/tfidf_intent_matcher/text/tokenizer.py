"""Text normalization and tokenization."""

import re
from collections.abc import Collection

from ..config import DEFAULT_STOPWORDS

_NON_TOKEN_CHARS = re.compile(r"[^a-z0-9\s]")


def tokenize(text: str | None, stopwords: Collection[str] = DEFAULT_STOPWORDS) -> list[str]:
    """Split raw text into lowercase alphanumeric tokens.
    
    Punctuation acts as a separator, so ``"what's"`` becomes ``["what", "s"]``.
    
    Args:
        text: Raw input text (``None`` is treated as empty)
        stopwords: Tokens to drop from the output
        
    Returns:
        Ordered list of tokens
    """
    if text is None:
        return []
    
    clean = _NON_TOKEN_CHARS.sub(" ", text.lower())
    return [token for token in clean.split() if token not in stopwords]
