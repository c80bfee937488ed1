"""
TF-IDF character n-gram cosine similarity.

Summary:
- Builds TF-IDF vectors over character n-grams with L2 normalization and
  returns the cosine similarity between the two input strings. The default
  n-gram range comes from `textkit.config` (3-5 unless overridden).

Compared with `levenshtein`:
- Tolerates reordered fragments, which plain edit distance punishes heavily.
- Surface-form only, like edit distance; no semantics.

Score range:
- Returns a float in [0.0, 1.0]. Both empty -> 1.0; exactly one empty -> 0.0.
"""

from __future__ import annotations

from typing import Optional, cast

from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity

from .. import config
from ..errors import InvalidArgument, ensure_text
from .registry import register


def score_tfidf_char_cosine(
    text_a: str,
    text_b: str,
    ngram_low: Optional[int] = None,
    ngram_high: Optional[int] = None,
) -> float:
    """Cosine similarity over TF-IDF character n-grams.

    Both strings are stripped and lowercased before vectorizing. Raises
    `InvalidArgument` for non-str input or an empty/inverted n-gram range.
    """
    low = config.TFIDF_NGRAM_LOW if ngram_low is None else ngram_low
    high = config.TFIDF_NGRAM_HIGH if ngram_high is None else ngram_high
    if low < 1 or low > high:
        raise InvalidArgument(f"invalid n-gram range ({low}, {high})")

    a = ensure_text(text_a, "text_a").strip().lower()
    b = ensure_text(text_b, "text_b").strip().lower()
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0

    vec = TfidfVectorizer(analyzer="char", ngram_range=(low, high), lowercase=True, norm="l2")
    try:
        X = vec.fit_transform([a, b])
    except ValueError:
        # Both inputs shorter than the smallest n-gram: empty vocabulary
        return 1.0 if a == b else 0.0
    sim = cosine_similarity(X[0], X[1])[0, 0]
    return float(max(0.0, min(1.0, cast(float, sim))))


register("tfidf_char_cosine", score_tfidf_char_cosine)
