"""
Approximate matching of free-text values against a controlled vocabulary.

Key components:
- edit_distance: Levenshtein distance with pluggable backends
- similarity: distance normalized to a 0-100 score
- find_best_match: exact match first, then scored candidates with a containment bonus
- VocabularyBuilder / VocabularyResolver: reusable vocabulary-bound resolution
- ColumnMapper: header-to-field mapping for list imports
"""
from .normalization import normalize
from .edit_distance import DISTANCE_BACKENDS, edit_distance, get_distance_function
from .similarity import similarity
from .best_match import CONTAINS_BONUS, find_best_match, find_exact_match, score_candidate
from .vocabulary_builder import VocabularyBuilder
from .vocabulary_resolver import VocabularyResolver
from .column_mapper import ColumnMapper

__all__ = [
    "normalize",
    "DISTANCE_BACKENDS",
    "edit_distance",
    "get_distance_function",
    "similarity",
    "CONTAINS_BONUS",
    "find_best_match",
    "find_exact_match",
    "score_candidate",
    "VocabularyBuilder",
    "VocabularyResolver",
    "ColumnMapper",
]
