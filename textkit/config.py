"""Configuration constants for textkit.

Defaults can be overridden through environment variables (or a `.env` file in
the working directory, loaded with python-dotenv on import).
"""

import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("TEXTKIT_LOG_LEVEL", "WARNING").upper()

DEFAULT_SCORER = os.getenv("TEXTKIT_DEFAULT_SCORER", "levenshtein")

# Two scores closer than this are reported as a tie
TIE_EPSILON = float(os.getenv("TEXTKIT_TIE_EPSILON", "1e-9"))

TFIDF_NGRAM_LOW = int(os.getenv("TEXTKIT_TFIDF_NGRAM_LOW", "3"))
TFIDF_NGRAM_HIGH = int(os.getenv("TEXTKIT_TFIDF_NGRAM_HIGH", "5"))

# Table formats accepted by textkit.compare.read_table
SUPPORTED_TABLE_FORMATS = [".csv", ".xlsx", ".xls"]


def get_default_config():
    """Return default configuration dict."""
    return {
        "log_level": LOG_LEVEL,
        "default_scorer": DEFAULT_SCORER,
        "tie_epsilon": TIE_EPSILON,
        "tfidf_ngram_range": (TFIDF_NGRAM_LOW, TFIDF_NGRAM_HIGH),
        "table_formats": SUPPORTED_TABLE_FORMATS,
    }
