"""Interactive command-line chat loop."""

import argparse
import logging
import random
import sys
from collections.abc import Sequence
from dataclasses import replace
from typing import TextIO

from tfidf_intent_matcher.config import MatcherConfig
from tfidf_intent_matcher.exceptions import CatalogLoadError, ConfigurationError
from tfidf_intent_matcher.loader import load_catalog
from tfidf_intent_matcher.manager import MatchingModel, build

EXIT_COMMANDS = ("exit", "quit")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="TF-IDF intent matching chatbot")
    parser.add_argument("intents_path", nargs="?", default=None,
                        help="Intent catalog file (default: INTENTS_PATH or data/intents.txt)")
    parser.add_argument("--threshold", "-t", type=float, default=None,
                        help="Minimum similarity for a match")
    parser.add_argument("--seed", "-s", type=int, default=None,
                        help="Seed for response selection")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    return parser.parse_args(argv)


def chat_loop(model: MatchingModel, stdin: TextIO, stdout: TextIO) -> None:
    """Read lines until EOF or an exit command, printing a reply for each."""
    print("TF-IDF Chatbot ready! Type 'exit' to quit.", file=stdout)
    while True:
        stdout.write("> ")
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        line = line.strip()
        if line.lower() in EXIT_COMMANDS:
            print("Goodbye!", file=stdout)
            break
        print(f"Bot: {model.reply(line)}", file=stdout)


def main(argv: Sequence[str] | None = None, stdin: TextIO | None = None,
         stdout: TextIO | None = None) -> int:
    args = parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    
    try:
        config = MatcherConfig()
        if args.threshold is not None:
            config = replace(config, threshold=args.threshold)
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2
    
    intents_path = args.intents_path or config.intents_path
    try:
        catalog = load_catalog(intents_path)
    except CatalogLoadError as e:
        print(f"Failed to load intents: {e}", file=sys.stderr)
        return 1
    
    rng = random.Random(args.seed) if args.seed is not None else None
    model = build(catalog, config=config, rng=rng)
    chat_loop(model, stdin, stdout)
    return 0
