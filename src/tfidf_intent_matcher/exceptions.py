"""Custom exceptions for tfidf_intent_matcher."""



class IntentMatcherError(Exception):
    """Base exception for all tfidf_intent_matcher exceptions."""


class ConfigurationError(IntentMatcherError):
    """Raised when configuration is invalid."""


class ValidationError(IntentMatcherError):
    """Raised when catalog data validation fails."""


class CatalogLoadError(IntentMatcherError):
    """Raised when an intent catalog cannot be read."""
    
    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path
