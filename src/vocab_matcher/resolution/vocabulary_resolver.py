"""
Resolver bound to a controlled vocabulary.

Combines a VocabularyBuilder, a distance backend and a confidence
threshold into a single object that callers keep around.
"""
import logging
from typing import List, Optional

from ..config import MatcherConfig
from ..models import MatchResult
from .best_match import find_best_match
from .edit_distance import get_distance_function
from .vocabulary_builder import VocabularyBuilder

logger = logging.getLogger(__name__)


class VocabularyResolver:
    """
    Resolves free-text values against a fixed vocabulary.

    Usage:
        resolver = VocabularyResolver(VocabularyBuilder(["Boston", "Austin"]))
        result = resolver.resolve("bostn")
        if result.is_confident(resolver.confidence_threshold):
            city = result.match  # "Boston"
    """

    def __init__(
        self,
        vocabulary: VocabularyBuilder,
        config: Optional[MatcherConfig] = None,
    ):
        """
        Initialize vocabulary resolver.

        :param vocabulary: VocabularyBuilder holding the canonical terms
        :param config: MatcherConfig; defaults are used when omitted
        """
        config = config or MatcherConfig()

        if not 0 <= config.confidence_threshold <= 100:
            raise ValueError(
                f"Confidence threshold must be between 0 and 100, got {config.confidence_threshold}"
            )

        self._terms = vocabulary.get_terms()
        self._distance = get_distance_function(config.distance_backend)
        self._max_workers = config.max_workers
        self.confidence_threshold = config.confidence_threshold

    @classmethod
    def from_config(cls, config: MatcherConfig) -> "VocabularyResolver":
        """
        Build a resolver whose vocabulary comes from the configured CSV file.

        :raises ValueError: If no vocabulary CSV path is configured
        """
        if not config.vocabulary_csv_path:
            raise ValueError("vocabulary_csv_path must be set to build a resolver from config")

        vocabulary = VocabularyBuilder.from_csv(
            config.vocabulary_csv_path,
            config.vocabulary_column,
        )
        return cls(vocabulary, config)

    @property
    def terms(self) -> List[str]:
        return list(self._terms)

    def resolve(self, query: str) -> MatchResult:
        """
        Resolve a query to its best vocabulary term.

        :param query: Free-text value
        :return: MatchResult, possibly below the confidence threshold
        """
        result = find_best_match(
            query,
            self._terms,
            distance=self._distance,
            max_workers=self._max_workers,
        )
        logger.debug(f"Resolved '{query}' -> '{result.match}' ({result.similarity})")
        return result

    def resolve_confident(self, query: str) -> Optional[MatchResult]:
        """Resolve a query, returning None when below the confidence threshold."""
        result = self.resolve(query)
        if result and result.is_confident(self.confidence_threshold):
            return result
        return None

    def resolve_multiple(self, queries: List[str]) -> List[MatchResult]:
        """
        Resolve multiple queries in batch.

        :param queries: List of queries to resolve
        :return: List of MatchResults in the same order
        """
        return [self.resolve(query) for query in queries]
