"""
Token Set Ratio scorer (RapidFuzz).

Summary:
- Order-insensitive token matching with duplicate handling. Uses
  `rapidfuzz.fuzz.token_set_ratio` and normalizes the percentage to [0, 1].

When to use:
- Useful when token order differs ("json formatter online" vs. "online json
  formatter") and where repeated tokens should not inflate scores.

Score range:
- Returns a float in [0.0, 1.0]. Both empty -> 1.0; exactly one empty -> 0.0.
"""

from ..errors import ensure_text
from .registry import register


def score_token_set_ratio(text_a: str, text_b: str) -> float:
    try:
        from rapidfuzz import fuzz
    except ImportError as e:  # pragma: no cover - environment without dependency
        raise ImportError(
            "rapidfuzz is required for 'token_set_ratio'. Install with: pip install rapidfuzz"
        ) from e

    a = ensure_text(text_a, "text_a").strip()
    b = ensure_text(text_b, "text_b").strip()
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    return fuzz.token_set_ratio(a, b) / 100.0


register("token_set_ratio", score_token_set_ratio)
