"""
Levenshtein edit distance.

Counts the single-character insertions, deletions and substitutions
(unit cost each) needed to turn one string into another.
"""
from typing import Callable, Dict

from rapidfuzz.distance import Levenshtein


DistanceFunction = Callable[[str, str], int]


def edit_distance(a: str, b: str) -> int:
    """
    Compute the edit distance between ``a`` and ``b``.

    Works over a (len(b) + 1) x (len(a) + 1) matrix, keeping only the
    previous row. Row 0 is 0..len(a); column 0 is 0..len(b).

    :param a: Source string
    :param b: Target string
    :return: Minimum number of unit-cost edits
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    previous = list(range(len(a) + 1))

    for i in range(1, len(b) + 1):
        current = [i] + [0] * len(a)
        for j in range(1, len(a) + 1):
            cost = 0 if a[j - 1] == b[i - 1] else 1
            current[j] = min(
                previous[j] + 1,  # deletion
                current[j - 1] + 1,  # insertion
                previous[j - 1] + cost,  # substitution
            )
        previous = current

    return previous[len(a)]


def _rapidfuzz_distance(a: str, b: str) -> int:
    return Levenshtein.distance(a, b)


# Both backends compute the same unit-cost metric
DISTANCE_BACKENDS: Dict[str, DistanceFunction] = {
    "levenshtein": edit_distance,
    "rapidfuzz": _rapidfuzz_distance,
}


def get_distance_function(name: str) -> DistanceFunction:
    """
    Look up a distance backend by name.

    :param name: "levenshtein" (pure Python) or "rapidfuzz" (C extension)
    :return: Callable taking two strings and returning an int
    :raises ValueError: If the backend is unknown
    """
    try:
        return DISTANCE_BACKENDS[name]
    except KeyError:
        raise ValueError(
            f"Unknown distance backend '{name}'. "
            f"Must be one of: {list(DISTANCE_BACKENDS.keys())}"
        ) from None
