"""
Best-match resolution over an ordered candidate list.

Escalation: exact match (case-insensitive) → similarity scoring with a
containment bonus. Ties always go to the earliest candidate.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Tuple

from ..models import MatchResult
from .edit_distance import DistanceFunction, edit_distance
from .normalization import normalize
from .similarity import similarity

logger = logging.getLogger(__name__)

CONTAINS_BONUS = 10
MAX_SIMILARITY = 100


def score_candidate(
    query: str,
    candidate: str,
    distance: DistanceFunction = edit_distance,
) -> int:
    """
    Bonus-adjusted similarity of one candidate, clamped to 100.

    :param query: Raw query string
    :param candidate: Raw candidate string
    :param distance: Edit distance function to use
    :return: Score between 0 and 100
    """
    base = similarity(query, candidate, distance=distance)

    norm_query = normalize(query)
    norm_candidate = normalize(candidate)
    contains = norm_query in norm_candidate or norm_candidate in norm_query
    bonus = CONTAINS_BONUS if contains else 0

    return min(base + bonus, MAX_SIMILARITY)


def find_exact_match(query: str, candidates: List[str]) -> Optional[str]:
    """Return the first candidate equal to the query ignoring case and padding."""
    norm_query = normalize(query)

    for candidate in candidates:
        if normalize(candidate) == norm_query:
            return candidate

    return None


def find_best_match(
    query: str,
    candidates: Iterable[str],
    distance: DistanceFunction = edit_distance,
    max_workers: Optional[int] = None,
) -> MatchResult:
    """
    Find the candidate most similar to ``query``.

    Usage:
        result = find_best_match("appel", ["apple", "banana"])
        result.match        # "apple"
        result.similarity   # 60

    :param query: Free-text input, may be empty
    :param candidates: Ordered candidates; duplicates allowed
    :param distance: Edit distance function to use
    :param max_workers: Score candidates on this many threads when > 1
    :return: MatchResult with the candidate verbatim, or ("", 0) if none
    """
    candidates = list(candidates)

    if not candidates:
        return MatchResult(match="", similarity=0)

    exact = find_exact_match(query, candidates)
    if exact is not None:
        logger.debug(f"Exact match for '{query}': '{exact}'")
        return MatchResult(match=exact, similarity=MAX_SIMILARITY)

    if max_workers is not None and max_workers > 1 and len(candidates) > 1:
        best_index, best_score = _scan_parallel(query, candidates, distance, max_workers)
    else:
        best_index, best_score = _scan_sequential(query, candidates, distance)

    logger.debug(
        f"Best match for '{query}': '{candidates[best_index]}' "
        f"(score={best_score}, candidates={len(candidates)})"
    )
    return MatchResult(match=candidates[best_index], similarity=best_score)


def _scan_sequential(
    query: str,
    candidates: List[str],
    distance: DistanceFunction,
) -> Tuple[int, int]:
    best_index = 0
    best_score = -1

    for index, candidate in enumerate(candidates):
        score = score_candidate(query, candidate, distance=distance)
        # Strictly greater: earlier candidates keep ties
        if score > best_score:
            best_index = index
            best_score = score

    return best_index, best_score


def _scan_parallel(
    query: str,
    candidates: List[str],
    distance: DistanceFunction,
    max_workers: int,
) -> Tuple[int, int]:
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        scores = list(executor.map(
            lambda candidate: score_candidate(query, candidate, distance=distance),
            candidates,
        ))

    # Reduce on (score, -index) so arrival order never matters
    best_score, neg_index = max((score, -index) for index, score in enumerate(scores))
    return -neg_index, best_score
