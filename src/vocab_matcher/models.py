from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MatchResult:
    """
    Best candidate for a query and its bonus-adjusted similarity.

    Attributes:
        match: The candidate verbatim, or "" when there were no candidates
        similarity: Confidence between 0 and 100
    """
    match: str
    similarity: int

    def __post_init__(self):
        """Validate similarity score."""
        if not 0 <= self.similarity <= 100:
            raise ValueError(f"Similarity must be between 0 and 100, got {self.similarity}")

    def __bool__(self) -> bool:
        return bool(self.match)

    def is_confident(self, threshold: int = 70) -> bool:
        """Check if similarity meets threshold."""
        return self.similarity >= threshold

    def to_dict(self) -> dict:
        return {"match": self.match, "similarity": self.similarity}


@dataclass(frozen=True)
class ColumnMapping:
    """
    Where an uploaded column header ends up.

    field_id is None when the header should be ignored.
    """
    header: str
    field_id: Optional[str]
    confidence: int

    @property
    def ignored(self) -> bool:
        return self.field_id is None
