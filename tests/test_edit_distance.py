"""
Tests for edit distance and its backends.
"""
import itertools

import pytest
from rapidfuzz.distance import Levenshtein

from vocab_matcher.resolution import DISTANCE_BACKENDS, edit_distance, get_distance_function


SAMPLE_STRINGS = [
    "",
    "a",
    "ab",
    "abc",
    "apple",
    "appel",
    "Apple",
    "banana",
    "kitten",
    "sitting",
    "San Francisco",
    "café",
    "naïve résumé",
    "東京",
]

SAMPLE_PAIRS = list(itertools.combinations(SAMPLE_STRINGS, 2))


class TestEditDistance:
    """Tests for the pure Python edit distance."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("kitten", "sitting", 3),
            ("flaw", "lawn", 2),
            ("appel", "apple", 2),
            ("abc", "abc", 0),
            ("abc", "abd", 1),
            ("abc", "", 3),
            ("", "abcd", 4),
            ("", "", 0),
            ("café", "cafe", 1),
            ("Apple", "apple", 1),
        ],
    )
    def test_known_distances(self, a, b, expected):
        """Test distances for well-known pairs."""
        assert edit_distance(a, b) == expected

    @pytest.mark.parametrize("s", SAMPLE_STRINGS)
    def test_identity_is_zero(self, s):
        """Test that a string is at distance 0 from itself."""
        assert edit_distance(s, s) == 0

    @pytest.mark.parametrize("a, b", SAMPLE_PAIRS)
    def test_symmetric(self, a, b):
        """Test that distance does not depend on argument order."""
        assert edit_distance(a, b) == edit_distance(b, a)

    @pytest.mark.parametrize("a, b", SAMPLE_PAIRS)
    def test_bounds(self, a, b):
        """Test that distance lies between the length gap and the longer length."""
        d = edit_distance(a, b)
        assert abs(len(a) - len(b)) <= d <= max(len(a), len(b))

    @pytest.mark.parametrize("a, b", SAMPLE_PAIRS)
    def test_agrees_with_rapidfuzz(self, a, b):
        """Test that the pure Python distance matches rapidfuzz."""
        assert edit_distance(a, b) == Levenshtein.distance(a, b)

    def test_long_strings(self):
        """Test a pair longer than typical vocabulary terms."""
        a = "abcdefghij" * 20
        b = "abcdefghiX" * 20
        assert edit_distance(a, b) == 20


class TestDistanceBackends:
    """Tests for backend lookup."""

    def test_known_backends(self):
        """Test that both backends are registered."""
        assert set(DISTANCE_BACKENDS) == {"levenshtein", "rapidfuzz"}
        assert get_distance_function("levenshtein") is edit_distance

    @pytest.mark.parametrize("a, b", SAMPLE_PAIRS)
    def test_backends_agree(self, a, b):
        """Test that every backend computes the same metric."""
        results = {name: fn(a, b) for name, fn in DISTANCE_BACKENDS.items()}
        assert len(set(results.values())) == 1

    def test_unknown_backend(self):
        """Test that unknown backend names are rejected."""
        with pytest.raises(ValueError, match="Unknown distance backend"):
            get_distance_function("hamming")
