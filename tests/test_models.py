"""Tests for catalog data models."""

import pytest

from tfidf_intent_matcher import IntentCatalog, IntentDefinition, MatchResult, ValidationError


class TestIntentDefinition:
    """Test cases for IntentDefinition model."""
    
    def test_create_minimal(self):
        """Test creating IntentDefinition with only a name."""
        intent = IntentDefinition("Greeting")
        
        assert intent.name == "Greeting"
        assert intent.patterns == []
        assert intent.responses == []
        assert intent.has_responses is False
    
    def test_create_full(self):
        """Test creating IntentDefinition with all fields."""
        intent = IntentDefinition(
            name="Greeting",
            patterns=("hello", "hi there"),
            responses=["Hi!"],
        )
        
        assert intent.patterns == ["hello", "hi there"]
        assert isinstance(intent.patterns, list)
        assert intent.responses == ["Hi!"]
        assert intent.has_responses is True
    
    def test_copies_input_lists(self):
        """Test that the definition does not alias caller lists."""
        patterns = ["hello"]
        intent = IntentDefinition("Greeting", patterns=patterns)
        patterns.append("hi")
        
        assert intent.patterns == ["hello"]
    
    def test_validation(self):
        """Test field type validation."""
        with pytest.raises(ValidationError, match="name must be a string"):
            IntentDefinition(None)
        
        with pytest.raises(ValidationError, match="patterns must be a list of strings"):
            IntentDefinition("Greeting", patterns="hello")
        
        with pytest.raises(ValidationError, match="responses must be a list of strings"):
            IntentDefinition("Greeting", responses=["Hi!", 3])
        
        with pytest.raises(ValidationError, match="patterns must be a list of strings"):
            IntentDefinition("Greeting", patterns=None)
        
        with pytest.raises(ValidationError, match="responses must be a list of strings"):
            IntentDefinition("Greeting", responses=42)
    
    def test_accepts_any_iterable(self):
        """Test that tuples and generators are materialized into lists."""
        intent = IntentDefinition("Greeting", patterns=(p for p in ["hello", "hi"]))
        
        assert intent.patterns == ["hello", "hi"]
    
    def test_empty_name_is_allowed(self):
        """Test that an unnamed intent is valid, as produced by a bare header line."""
        intent = IntentDefinition("", patterns=["hello"], responses=["Hi"])
        
        assert intent.name == ""
        assert intent.is_named("")
    
    def test_is_named(self):
        """Test case-insensitive name comparison."""
        intent = IntentDefinition("Fallback")
        
        assert intent.is_named("fallback")
        assert intent.is_named("FALLBACK")
        assert not intent.is_named("fallbacks")


class TestIntentCatalog:
    """Test cases for IntentCatalog model."""
    
    def test_empty_catalog(self):
        """Test empty catalog behavior."""
        catalog = IntentCatalog()
        
        assert len(catalog) == 0
        assert list(catalog) == []
        assert catalog.pattern_count == 0
        assert catalog.find("Fallback") is None
    
    def test_order_and_lookup(self):
        """Test catalog keeps insertion order and finds by name."""
        catalog = IntentCatalog()
        greeting = IntentDefinition("Greeting", patterns=["hello", "hi"])
        fallback = IntentDefinition("Fallback", responses=["Sorry?"])
        catalog.add(greeting)
        catalog.add(fallback)
        
        assert [intent.name for intent in catalog] == ["Greeting", "Fallback"]
        assert catalog[0] is greeting
        assert catalog.find("FALLBACK") is fallback
        assert catalog.pattern_count == 2
    
    def test_find_returns_first_match(self):
        """Test that duplicate names resolve to the earliest intent."""
        first = IntentDefinition("Fallback")
        second = IntentDefinition("fallback", responses=["Sorry?"])
        catalog = IntentCatalog([first, second])
        
        assert catalog.find("fallback") is first
    
    def test_find_with_responses(self):
        """Test skipping matching intents that cannot reply."""
        first = IntentDefinition("Fallback")
        second = IntentDefinition("fallback", responses=["Sorry?"])
        catalog = IntentCatalog([first, second])
        
        assert catalog.find("FALLBACK", with_responses=True) is second
        assert IntentCatalog([first]).find("Fallback", with_responses=True) is None


class TestMatchResult:
    """Test cases for MatchResult model."""
    
    def test_name(self):
        """Test that the result exposes the intent name."""
        intent = IntentDefinition("Greeting", responses=["Hi!"])
        result = MatchResult(intent=intent, score=0.5)
        
        assert result.name == "Greeting"
        assert result.score == 0.5
        assert result.intent is intent
