"""
Vocabulary builder for resolution.

Builds the ordered list of canonical terms that queries are matched against.
"""
import csv
import logging
from typing import Iterable, List, Optional

from ..exceptions import VocabularyError

logger = logging.getLogger(__name__)


class VocabularyBuilder:
    """
    Builds an ordered, de-duplicated vocabulary of canonical terms.

    Order is preserved because it decides ties during matching. Blank
    entries are dropped and only the first occurrence of a term is kept.
    """

    def __init__(self, terms: Iterable[Optional[str]] = (), strip: bool = False):
        """
        Initialize vocabulary builder with terms.

        :param terms: Candidate terms in priority order
        :param strip: Store terms without surrounding whitespace
        """
        self._strip = strip
        self._terms: List[str] = []
        self._seen = set()

        self.add_terms(terms)

    def add_terms(self, terms: Iterable[Optional[str]]) -> "VocabularyBuilder":
        """Append terms, skipping blanks and duplicates."""
        for term in terms:
            if term is None or not term.strip():
                continue
            if self._strip:
                term = term.strip()
            if term in self._seen:
                continue
            self._seen.add(term)
            self._terms.append(term)
        return self

    @classmethod
    def from_csv(cls, csv_path: str, column: str, strip: bool = True) -> "VocabularyBuilder":
        """
        Build vocabulary from one column of a CSV file.

        :param csv_path: Path to a UTF-8 CSV file with a header row
        :param column: Header of the column holding the terms
        :param strip: Store terms without surrounding whitespace
        :raises VocabularyError: If the file cannot be read or lacks the column
        """
        try:
            with open(csv_path, newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                if reader.fieldnames is None or column not in reader.fieldnames:
                    raise VocabularyError(
                        f"Column '{column}' not found in {csv_path}. "
                        f"Available columns: {reader.fieldnames or []}"
                    )
                builder = cls((row.get(column) for row in reader), strip=strip)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise VocabularyError(f"Could not read vocabulary file {csv_path}: {e}") from e

        logger.info(f"Loaded {len(builder)} terms from {csv_path} (column '{column}')")
        return builder

    def get_terms(self) -> List[str]:
        """Get the ordered list of terms."""
        return list(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __contains__(self, term: object) -> bool:
        return term in self._seen
