"""
Global scorer registry.

Exposes `SCORER_REGISTRY`: a mapping from a string key to a callable of the
form `(text_a: str, text_b: str) -> float` that returns a similarity score in
the range [0.0, 1.0].
"""

from typing import Callable, Dict

from ..errors import UnknownScorer

Scorer = Callable[[str, str], float]

SCORER_REGISTRY: Dict[str, Scorer] = {}


def register(name: str, fn: Scorer) -> Scorer:
    SCORER_REGISTRY[name] = fn
    return fn


def get_scorer(name: str) -> Scorer:
    """Look up a scorer by key, raising UnknownScorer with the available keys."""
    try:
        return SCORER_REGISTRY[name]
    except KeyError:
        raise UnknownScorer(name, SCORER_REGISTRY.keys()) from None
