from .config import MatcherConfig
from .config_loader import load_config_from_env
from .exceptions import ConfigurationError, VocabMatcherError, VocabularyError
from .models import ColumnMapping, MatchResult
from .resolution import (
    ColumnMapper,
    VocabularyBuilder,
    VocabularyResolver,
    edit_distance,
    find_best_match,
    normalize,
    similarity,
)

__version__ = "0.1.0"

__all__ = [
    "MatcherConfig",
    "load_config_from_env",
    "ConfigurationError",
    "VocabMatcherError",
    "VocabularyError",
    "ColumnMapping",
    "MatchResult",
    "ColumnMapper",
    "VocabularyBuilder",
    "VocabularyResolver",
    "edit_distance",
    "find_best_match",
    "normalize",
    "similarity",
]
