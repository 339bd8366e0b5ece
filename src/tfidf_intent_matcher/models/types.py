"""Type definitions for tfidf_intent_matcher."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from ..exceptions import ValidationError


@dataclass
class IntentDefinition:
    """A named intent with example phrasings and candidate replies."""
    name: str
    patterns: list[str] = field(default_factory=list)
    responses: list[str] = field(default_factory=list)
    
    def __post_init__(self):
        """Validate field types."""
        if not isinstance(self.name, str):
            raise ValidationError(f"Intent name must be a string, got {type(self.name).__name__}")
        for label in ("patterns", "responses"):
            values = getattr(self, label)
            if isinstance(values, str) or not isinstance(values, Iterable):
                raise ValidationError(f"Intent {self.name!r} {label} must be a list of strings")
            values = list(values)
            if not all(isinstance(v, str) for v in values):
                raise ValidationError(f"Intent {self.name!r} {label} must be a list of strings")
            setattr(self, label, values)
    
    @property
    def has_responses(self) -> bool:
        """Check if the intent can produce a reply."""
        return bool(self.responses)
    
    def is_named(self, name: str) -> bool:
        """Case-insensitive name comparison."""
        return self.name.lower() == name.lower()


@dataclass
class IntentCatalog:
    """Ordered collection of intent definitions."""
    intents: list[IntentDefinition] = field(default_factory=list)
    
    def add(self, intent: IntentDefinition) -> None:
        """Append an intent, keeping catalog order."""
        self.intents.append(intent)
    
    def find(self, name: str, with_responses: bool = False) -> IntentDefinition | None:
        """Return the first intent whose name matches case-insensitively.
        
        Args:
            name: Intent name
            with_responses: Skip intents that have no responses
        """
        for intent in self.intents:
            if intent.is_named(name) and (intent.has_responses or not with_responses):
                return intent
        return None
    
    @property
    def pattern_count(self) -> int:
        """Total number of raw patterns across all intents."""
        return sum(len(intent.patterns) for intent in self.intents)
    
    def __iter__(self) -> Iterator[IntentDefinition]:
        return iter(self.intents)
    
    def __len__(self) -> int:
        return len(self.intents)
    
    def __getitem__(self, index: int) -> IntentDefinition:
        return self.intents[index]


@dataclass
class MatchResult:
    """Best-matching intent for a query along with its similarity score."""
    intent: IntentDefinition
    score: float
    
    @property
    def name(self) -> str:
        """Name of the matched intent."""
        return self.intent.name
