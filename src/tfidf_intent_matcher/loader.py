"""Reading intent catalogs from their text format.

A catalog is a sequence of blocks separated by blank lines::

    #Greeting
    patterns: hello | hi there
    responses: Hi! | Hello!

Lines outside a block and unrecognized lines are ignored.
"""

import logging
from pathlib import Path

from .exceptions import CatalogLoadError
from .models import IntentCatalog, IntentDefinition

logger = logging.getLogger(__name__)

PATTERNS_PREFIX = "patterns:"
RESPONSES_PREFIX = "responses:"


def _split_items(value: str) -> list[str]:
    return [part.strip() for part in value.split("|") if part.strip()]


def parse_catalog(text: str) -> IntentCatalog:
    """Parse catalog text into an IntentCatalog.
    
    Args:
        text: Catalog contents
        
    Returns:
        Intents in the order they appear
    """
    catalog = IntentCatalog()
    current: IntentDefinition | None = None
    
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            if current is not None:
                catalog.add(current)
            current = None
            continue
        
        if line.startswith("#"):
            if current is not None:
                catalog.add(current)
            current = IntentDefinition(name=line[1:].strip())
            continue
        
        if current is None:
            continue
        
        if line.startswith(PATTERNS_PREFIX):
            current.patterns.extend(_split_items(line[len(PATTERNS_PREFIX):]))
        elif line.startswith(RESPONSES_PREFIX):
            current.responses.extend(_split_items(line[len(RESPONSES_PREFIX):]))
    
    if current is not None:
        catalog.add(current)
    
    return catalog


def load_catalog(path: str | Path) -> IntentCatalog:
    """Read and parse a catalog file.
    
    Raises:
        CatalogLoadError: If the file cannot be read or decoded
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        error_msg = f"Failed to read intent catalog {path}: {e}"
        logger.error(error_msg)
        raise CatalogLoadError(error_msg, path=str(path)) from e
    
    catalog = parse_catalog(text)
    logger.info(
        "Loaded %d intents with %d patterns from %s",
        len(catalog), catalog.pattern_count, path
    )
    return catalog
