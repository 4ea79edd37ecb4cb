from dataclasses import dataclass
from typing import Optional


@dataclass
class MatcherConfig:
    # Matching
    distance_backend: str = "levenshtein"
    confidence_threshold: int = 70

    # Performance
    max_workers: Optional[int] = None

    # Vocabulary source
    vocabulary_csv_path: Optional[str] = None
    vocabulary_column: str = "name"
