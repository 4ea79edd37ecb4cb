"""
Similarity score derived from edit distance.
"""
import math

from .edit_distance import DistanceFunction, edit_distance
from .normalization import normalize


def similarity(a: str, b: str, distance: DistanceFunction = edit_distance) -> int:
    """
    Score how alike two strings are, from 0 (unrelated) to 100 (identical).

    Comparison ignores case and surrounding whitespace. An empty input
    always scores 0, even against another empty string.

    :param a: First string
    :param b: Second string
    :param distance: Edit distance function to use
    :return: Integer percentage, rounded half up
    """
    if not a or not b:
        return 0

    norm_a = normalize(a)
    norm_b = normalize(b)

    max_len = max(len(norm_a), len(norm_b))
    if max_len == 0:
        # Whitespace-only on both sides
        return 0

    raw = (max_len - distance(norm_a, norm_b)) / max_len * 100

    return math.floor(raw + 0.5)
