"""
Pytest configuration and shared fixtures.
"""

import pandas as pd
import pytest


@pytest.fixture
def requests_df() -> pd.DataFrame:
    """Client requests next to a manual proposal and two suggested alternatives."""
    return pd.DataFrame(
        {
            "request": ["json formatter", "Text Utilities", None, "base64 encode"],
            "manual": ["json formater", "text utils", "anything", None],
            "suggest_1": ["xml formatter", "text utilities", "", "base64 encoder"],
            "suggest_2": ["json formatter", "utilities", None, "url encode"],
        }
    )
