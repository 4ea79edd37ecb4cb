#!/usr/bin/env python3
"""
Interactive CLI demo for vocab matcher.

Loads a vocabulary (from VOCAB_MATCHER_VOCABULARY_CSV, or a small built-in
list of cities) and resolves whatever you type against it.
"""
import logging
import sys

from vocab_matcher import (
    ConfigurationError,
    VocabularyBuilder,
    VocabularyError,
    VocabularyResolver,
    load_config_from_env,
)

DEFAULT_VOCABULARY = [
    "San Francisco",
    "Santa Fe",
    "Sacramento",
    "San Diego",
    "Los Angeles",
    "Boston",
    "Austin",
    "Denver",
]


def print_banner(resolver):
    """Print welcome banner."""
    print("\n" + "=" * 60)
    print("  Vocab Matcher - Interactive CLI Demo")
    print("=" * 60)
    print(f"\nVocabulary: {len(resolver.terms)} terms, "
          f"confidence threshold {resolver.confidence_threshold}")
    print("\nType 'quit' or 'exit' to end the session.")
    print("-" * 60 + "\n")


def print_result(query, result, threshold):
    """Print formatted result."""
    verdict = "accepted" if result.is_confident(threshold) else "below threshold"
    print(f"Query: {query!r}")
    print(f"Match: {result.match!r} ({result.similarity}%, {verdict})")
    print("-" * 60)


def setup_resolver():
    """Build a resolver from the environment, falling back to the built-in list."""
    config = load_config_from_env()

    if config.vocabulary_csv_path:
        return VocabularyResolver.from_config(config)

    return VocabularyResolver(VocabularyBuilder(DEFAULT_VOCABULARY), config)


def main():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    try:
        resolver = setup_resolver()
    except (ConfigurationError, VocabularyError) as e:
        print(f"Configuration problem: {e}", file=sys.stderr)
        return 1

    print_banner(resolver)

    while True:
        try:
            query = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if query.strip().lower() in {"quit", "exit"}:
            break

        result = resolver.resolve(query)
        print_result(query, result, resolver.confidence_threshold)

    return 0


if __name__ == "__main__":
    sys.exit(main())
