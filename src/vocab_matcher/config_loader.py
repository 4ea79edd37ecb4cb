"""
Configuration loader with validation.
"""
from dotenv import find_dotenv, load_dotenv

from .config import MatcherConfig
from .config_validator import get_int_env, get_optional_env, validate_path
from .exceptions import ConfigurationError
from .resolution.edit_distance import DISTANCE_BACKENDS


def load_config_from_env() -> MatcherConfig:
    """
    Load configuration from environment variables with validation.

    Usage:
        config = load_config_from_env()
        resolver = VocabularyResolver.from_config(config)

    :return: Validated MatcherConfig instance
    :raises: ConfigurationError if values are invalid
    """
    # Load .env from the working directory if it exists (for local development)
    load_dotenv(find_dotenv(usecwd=True))

    backend = get_optional_env("VOCAB_MATCHER_DISTANCE_BACKEND", default="levenshtein")
    if backend not in DISTANCE_BACKENDS:
        raise ConfigurationError(
            f"VOCAB_MATCHER_DISTANCE_BACKEND must be one of "
            f"{sorted(DISTANCE_BACKENDS)}, got {backend!r}."
        )

    config = MatcherConfig(
        distance_backend=backend,
        confidence_threshold=get_int_env(
            "VOCAB_MATCHER_CONFIDENCE_THRESHOLD", default=70, min_value=0, max_value=100
        ),
        max_workers=get_int_env("VOCAB_MATCHER_MAX_WORKERS", min_value=1),
        vocabulary_csv_path=get_optional_env("VOCAB_MATCHER_VOCABULARY_CSV"),
        vocabulary_column=get_optional_env("VOCAB_MATCHER_VOCABULARY_COLUMN", default="name"),
    )

    if config.vocabulary_csv_path:
        validate_path(
            config.vocabulary_csv_path,
            "VOCAB_MATCHER_VOCABULARY_CSV",
            must_exist=True
        )

    return config
