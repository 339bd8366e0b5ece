"""Run the chat loop with ``python -m tfidf_intent_matcher``."""

import sys

from tfidf_intent_matcher.cli import main

if __name__ == "__main__":
    sys.exit(main())
