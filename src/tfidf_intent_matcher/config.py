"""Configuration management for tfidf_intent_matcher."""

import os
import re
from dataclasses import dataclass, field

from .exceptions import ConfigurationError

DEFAULT_THRESHOLD = 0.15

DEFAULT_STOPWORDS = frozenset({
    "a", "an", "the", "is", "are", "was", "were", "in", "on", "at",
    "for", "to", "and", "or", "of", "i", "you", "me", "my", "your",
})

_STOPWORD_RE = re.compile(r"^[a-z0-9]+$")


def _threshold_from_env() -> float:
    raw = os.getenv("INTENT_MATCH_THRESHOLD")
    if raw is None:
        return DEFAULT_THRESHOLD
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"INTENT_MATCH_THRESHOLD must be a number, got {raw!r}") from e


def _stopwords_from_env() -> frozenset[str]:
    raw = os.getenv("INTENT_STOPWORDS")
    if raw is None:
        return DEFAULT_STOPWORDS
    return frozenset(word.strip().lower() for word in raw.split(",") if word.strip())


@dataclass
class MatcherConfig:
    """Configuration for building and querying a matching model."""
    
    # Matching
    threshold: float = field(default_factory=_threshold_from_env)
    stopwords: frozenset[str] = field(default_factory=_stopwords_from_env)
    
    # Fallback handling
    fallback_intent_name: str = field(
        default_factory=lambda: os.getenv("INTENT_FALLBACK_NAME", "Fallback")
    )
    default_fallback_response: str = "Sorry, I didn't understand that. Could you rephrase?"
    empty_input_response: str = "Please type something."
    
    # Catalog source
    intents_path: str = field(
        default_factory=lambda: os.getenv("INTENTS_PATH", "data/intents.txt")
    )
    
    def __post_init__(self):
        """Validate configuration after initialization."""
        self.stopwords = frozenset(self.stopwords)
        self._validate()
    
    def _validate(self):
        """Validate configuration values."""
        if not 0.0 <= self.threshold <= 1.0:
            raise ConfigurationError("threshold must be between 0.0 and 1.0")
        
        if not self.fallback_intent_name:
            raise ConfigurationError("fallback_intent_name cannot be empty")
        
        if not self.default_fallback_response:
            raise ConfigurationError("default_fallback_response cannot be empty")
        
        if not self.empty_input_response:
            raise ConfigurationError("empty_input_response cannot be empty")
        
        if not self.intents_path:
            raise ConfigurationError("intents_path cannot be empty")
        
        invalid = sorted(w for w in self.stopwords if not _STOPWORD_RE.match(w))
        if invalid:
            raise ConfigurationError(
                f"stopwords must be lowercase alphanumeric words, got {invalid}"
            )
    
    def to_dict(self) -> dict:
        """Return a loggable summary of the configuration."""
        return {
            "threshold": self.threshold,
            "stopword_count": len(self.stopwords),
            "fallback_intent_name": self.fallback_intent_name,
            "intents_path": self.intents_path,
        }
