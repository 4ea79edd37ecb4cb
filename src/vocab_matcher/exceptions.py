class VocabMatcherError(Exception):
    """Base exception for vocab matcher."""


class ConfigurationError(VocabMatcherError):
    """Raised when configuration values are missing or invalid."""


class VocabularyError(VocabMatcherError):
    """Raised when a vocabulary source cannot be read."""
