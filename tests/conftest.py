"""Shared fixtures for tfidf_intent_matcher tests."""

import random
from pathlib import Path

import pytest

from tfidf_intent_matcher import IntentCatalog, IntentDefinition, MatcherConfig, build

SAMPLE_CATALOG = """\
#Greeting
patterns: hello | hi there
responses: Hi!

#Goodbye
patterns: bye | goodbye | see you later
responses: Goodbye! | See you soon.

#Fallback
responses: Sorry?
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep matcher environment variables from leaking into tests."""
    for name in (
        "INTENT_MATCH_THRESHOLD",
        "INTENT_STOPWORDS",
        "INTENT_FALLBACK_NAME",
        "INTENTS_PATH",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def greeting_catalog() -> IntentCatalog:
    """Catalog with a Greeting intent and a Fallback intent."""
    return IntentCatalog([
        IntentDefinition("Greeting", patterns=["hello", "hi there"], responses=["Hi!"]),
        IntentDefinition("Fallback", patterns=[], responses=["Sorry?"]),
    ])


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(42)


@pytest.fixture
def greeting_model(greeting_catalog, rng):
    """Model built from the greeting catalog."""
    return build(greeting_catalog, config=MatcherConfig(), rng=rng)


@pytest.fixture
def catalog_file(tmp_path) -> Path:
    """Sample catalog written to disk."""
    path = tmp_path / "intents.txt"
    path.write_text(SAMPLE_CATALOG, encoding="utf-8")
    return path
