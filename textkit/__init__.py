"""
textkit: string similarity scoring plus text and JSON helpers.

Scorers live in `textkit.scorers` and register themselves into
`SCORER_REGISTRY` on import. Tabular batch comparison lives in
`textkit.compare`; standalone helpers in `textkit.text_utils` and
`textkit.json_formatter`.
"""

from .errors import InvalidArgument, TextkitError  # noqa: F401
from .logger import configure_logging  # noqa: F401
from .scorers import SCORER_REGISTRY, get_scorer  # noqa: F401
from .scorers.levenshtein import distance_matrix, edit_distance, similarity  # noqa: F401

__version__ = "0.1.0"
