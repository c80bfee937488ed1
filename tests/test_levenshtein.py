import pytest

from textkit import SCORER_REGISTRY
from textkit.errors import InvalidArgument
from textkit.scorers.levenshtein import distance_matrix, edit_distance, similarity

try:
    from rapidfuzz.distance import Levenshtein as RFLevenshtein
    RAPIDFUZZ_OK = True
except Exception:  # pragma: no cover - environment without rapidfuzz
    RAPIDFUZZ_OK = False

PAIRS = [
    ("", ""),
    ("", "abc"),
    ("kitten", "sitting"),
    ("flaw", "lawn"),
    ("abc", "abd"),
    ("intention", "execution"),
    ("café", "cafe"),
    ("ünïcödé", "unicode"),
    ("a\U0001F600b", "ab"),
    ("json formatter", "formatter json"),
]


def test_known_distances():
    assert edit_distance("kitten", "sitting") == 3
    assert edit_distance("flaw", "lawn") == 2
    assert edit_distance("", "abc") == 3
    assert edit_distance("abc", "") == 3
    assert edit_distance("same", "same") == 0


def test_empty_inputs():
    assert similarity("", "") == 1.0
    assert similarity("", "abc") == 0.0
    assert similarity("abc", "") == 0.0


def test_one_substitution_in_three():
    assert similarity("abc", "abc") == 1.0
    assert similarity("abc", "abd") == pytest.approx(2 / 3)


def test_astral_character_counts_as_one_unit():
    # U+1F600 is a single code point, not a surrogate pair
    assert edit_distance("a\U0001F600b", "ab") == 1
    assert similarity("\U0001F600", "\U0001F601") == 0.0


@pytest.mark.parametrize("a,b", PAIRS)
def test_symmetry_and_range(a, b):
    assert edit_distance(a, b) == edit_distance(b, a)
    assert similarity(a, b) == similarity(b, a)
    assert 0.0 <= similarity(a, b) <= 1.0
    assert edit_distance(a, b) <= max(len(a), len(b))


@pytest.mark.parametrize("a", ["", "x", "kitten", "ünïcödé"])
def test_reflexive(a):
    assert similarity(a, a) == 1.0


@pytest.mark.parametrize("a,b", PAIRS)
def test_matrix_agrees_with_rolling_rows(a, b):
    matrix = distance_matrix(a, b)
    assert len(matrix) == len(a) + 1
    assert all(len(row) == len(b) + 1 for row in matrix)
    assert matrix[len(a)][len(b)] == edit_distance(a, b)


def test_matrix_base_cases():
    matrix = distance_matrix("ab", "xyz")
    assert [row[0] for row in matrix] == [0, 1, 2]
    assert matrix[0] == [0, 1, 2, 3]


@pytest.mark.skipif(not RAPIDFUZZ_OK, reason="rapidfuzz not installed")
@pytest.mark.parametrize("a,b", PAIRS)
def test_matches_rapidfuzz(a, b):
    assert edit_distance(a, b) == RFLevenshtein.distance(a, b)


@pytest.mark.parametrize("bad", [None, b"abc", 3, ["a"]])
def test_non_text_is_invalid_argument(bad):
    with pytest.raises(InvalidArgument):
        edit_distance(bad, "abc")
    with pytest.raises(InvalidArgument):
        similarity("abc", bad)
    with pytest.raises(InvalidArgument):
        distance_matrix(bad, "abc")


def test_invalid_argument_is_a_type_error():
    with pytest.raises(TypeError):
        similarity(None, None)


def test_inputs_are_not_mutated():
    a, b = "kitten", "sitting"
    similarity(a, b)
    assert (a, b) == ("kitten", "sitting")


def test_registered():
    f = SCORER_REGISTRY["levenshtein"]
    assert f("flaw", "lawn") == pytest.approx(0.5)
