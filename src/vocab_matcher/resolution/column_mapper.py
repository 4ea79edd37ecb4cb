"""
Column header mapping for list imports.

Uploaded spreadsheets name their columns freely ("E-mail", "zip", "First");
each header is matched to one of a fixed set of fields or ignored.
"""
import logging
from typing import Dict, Iterable, Mapping

from ..models import ColumnMapping
from .best_match import find_best_match
from .edit_distance import DistanceFunction, edit_distance

logger = logging.getLogger(__name__)


class ColumnMapper:
    """
    Maps column headers onto predefined fields by label similarity.

    A header is mapped when its best label scores at least ``threshold``;
    otherwise it is ignored. The score is kept as the mapping confidence
    in both cases.
    """

    def __init__(
        self,
        fields: Mapping[str, str],
        threshold: int = 70,
        distance: DistanceFunction = edit_distance,
    ):
        """
        Initialize column mapper.

        :param fields: Field id -> display label, in priority order
        :param threshold: Minimum similarity (0-100) to accept a mapping
        :param distance: Edit distance function to use
        """
        if not 0 <= threshold <= 100:
            raise ValueError(f"Threshold must be between 0 and 100, got {threshold}")

        self.threshold = threshold
        self._distance = distance
        self._labels = list(fields.values())
        # First field wins when two fields share a label
        self._field_by_label: Dict[str, str] = {}
        for field_id, label in fields.items():
            self._field_by_label.setdefault(label, field_id)

    def map_header(self, header: str) -> ColumnMapping:
        """Map a single header to a field id, or None to ignore it."""
        result = find_best_match(header, self._labels, distance=self._distance)
        field_id = self._field_by_label.get(result.match)

        if field_id is None or result.similarity < self.threshold:
            logger.debug(f"Ignoring column '{header}' (best '{result.match}', {result.similarity})")
            field_id = None

        return ColumnMapping(header=header, field_id=field_id, confidence=result.similarity)

    def map_headers(self, headers: Iterable[str]) -> Dict[str, ColumnMapping]:
        """
        Map every header, keeping input order.

        :param headers: Column headers from the uploaded file
        :return: header -> ColumnMapping
        """
        return {header: self.map_header(header) for header in headers}
