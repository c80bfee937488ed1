"""
Levenshtein edit distance and the similarity score derived from it.

Summary:
- Classic dynamic-programming edit distance with unit cost for insertion,
  deletion and substitution. Similarity is the distance normalized by the
  longer input: `(max(m, n) - distance) / max(m, n)`.

Units:
- Inputs are compared code point by code point (Python `str` iteration), so a
  character outside the BMP such as an emoji counts as one unit, never as two
  surrogate halves.

Performance:
- `edit_distance` keeps two rolling rows sized to the shorter input:
  O(m*n) time, O(min(m, n)) memory. There is no length cap.
- `distance_matrix` materializes the whole (m+1)x(n+1) grid and is meant for
  inspection of short inputs.

Score range:
- Returns a float in [0.0, 1.0]. Both empty -> 1.0; exactly one empty -> 0.0.
  Non-str input raises `InvalidArgument`.
"""

from __future__ import annotations

from typing import List

from ..errors import ensure_text
from ..logger import get_logger
from .registry import register

logger = get_logger(__name__)


def distance_matrix(a: str, b: str) -> List[List[int]]:
    """Return the full Levenshtein matrix D for `a` (rows) and `b` (columns).

    `D[i][j]` is the distance between `a[:i]` and `b[:j]`; `D[len(a)][len(b)]`
    is the edit distance. Allocates (len(a)+1) * (len(b)+1) ints.
    """
    a = ensure_text(a, "a")
    b = ensure_text(b, "b")
    m, n = len(a), len(b)

    matrix = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        matrix[i][0] = i
    for j in range(n + 1):
        matrix[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,  # deletion
                matrix[i][j - 1] + 1,  # insertion
                matrix[i - 1][j - 1] + cost,  # substitution
            )
    return matrix


def edit_distance(a: str, b: str) -> int:
    """Minimum number of single code point edits turning `a` into `b`."""
    a = ensure_text(a, "a")
    b = ensure_text(b, "b")

    if a == b:
        return 0
    # Keep b as the shorter string so the rows stay small
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + (char_a != char_b),
            ))
        previous = current
    return previous[-1]


def similarity(a: str, b: str) -> float:
    """Normalized edit-distance similarity in [0.0, 1.0].

    Both empty -> 1.0; exactly one empty -> 0.0.
    """
    a = ensure_text(a, "a")
    b = ensure_text(b, "b")

    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    distance = edit_distance(a, b)
    score = (longest - distance) / longest
    logger.debug("levenshtein distance=%d longest=%d score=%.4f", distance, longest, score)
    return score


def score_levenshtein(text_a: str, text_b: str) -> float:
    return similarity(text_a, text_b)


# Register in global registry
register("levenshtein", score_levenshtein)
