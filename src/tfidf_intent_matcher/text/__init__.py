"""Text processing for tfidf_intent_matcher."""

from tfidf_intent_matcher.text.tokenizer import tokenize

__all__ = ["tokenize"]
