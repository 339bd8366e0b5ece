"""Example usage of tfidf_intent_matcher.

This example builds a model from an in-memory catalog and from the bundled
catalog file, then shows replies, ranking and model statistics.
"""

import random
from pathlib import Path

from tfidf_intent_matcher import IntentCatalog, IntentDefinition, MatcherConfig, build, load_catalog

DATA_FILE = Path(__file__).parent.parent / "data" / "intents.txt"


def example_basic_usage():
    """Basic usage example."""
    print("=== Basic Usage Example ===")
    
    catalog = IntentCatalog([
        IntentDefinition("Greeting", patterns=["hello", "hi there"], responses=["Hi!"]),
        IntentDefinition("Fallback", responses=["Sorry?"]),
    ])
    model = build(catalog, rng=random.Random(7))
    
    for text in ["hello", "hi!", "xyz completely unknown", "   "]:
        print(f"{text!r:28} -> {model.reply(text)}")


def example_catalog_file():
    """Example of loading a catalog file and ranking intents."""
    print("\n=== Catalog File Example ===")
    
    model = build(load_catalog(DATA_FILE), config=MatcherConfig(threshold=0.2))
    
    for result in model.rank("thank you, see you later", limit=3):
        print(f"  - {result.name}: {result.score:.3f}")
    
    stats = model.get_stats()
    print(f"Intents: {stats['intent_count']}")
    print(f"Vocabulary size: {stats['vocabulary_size']}")
    print(f"Pattern documents: {stats['document_count']}")


def main():
    """Run all examples."""
    example_basic_usage()
    example_catalog_file()


if __name__ == "__main__":
    main()
