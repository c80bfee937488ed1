"""
Batch comparison of text columns in a table.

Scores each row of one column against another (or against the best of several
candidate columns) with any registered scorer, decides a per-row winner, and
summarizes win counts per scorer.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from . import config
from .errors import MissingColumn, UnsupportedFormat
from .logger import get_logger
from .scorers import get_scorer

logger = get_logger(__name__)

TIE = "TIE"

# Scorers that already failed once in this process; warn only the first time
_warned_scorers = set()


def read_table(path, sheet=None, header_row: int = 0) -> pd.DataFrame:
    """Read a CSV or Excel file into a DataFrame.

    `sheet` selects the Excel sheet (first sheet when None); ignored for CSV.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in config.SUPPORTED_TABLE_FORMATS:
        raise UnsupportedFormat(
            f"Cannot read {path.name!r}; supported: {', '.join(config.SUPPORTED_TABLE_FORMATS)}"
        )
    if suffix == ".csv":
        return pd.read_csv(path, header=header_row)
    return pd.read_excel(
        path, sheet_name=0 if sheet is None else sheet, header=header_row, engine="openpyxl"
    )


def normalize_cell(value) -> str:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    return str(value).strip().lower()


def score_cells(a, b, scorer: Optional[str] = None) -> Optional[float]:
    """Score two table cells; None when the scorer backend fails."""
    name = scorer or config.DEFAULT_SCORER
    fn = get_scorer(name)

    a2, b2 = normalize_cell(a), normalize_cell(b)
    if not a2 and not b2:
        return 1.0
    if not a2 or not b2:
        return 0.0
    try:
        return float(fn(a2, b2))
    except Exception as e:
        if name not in _warned_scorers:
            logger.warning("Scorer %r failed; its scores will be empty. Detail: %s", name, e)
            _warned_scorers.add(name)
        return None


def _require_columns(df: pd.DataFrame, columns: Iterable[str]) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise MissingColumn(f"Columns not found: {', '.join(map(str, missing))}")


def _scorer_names(scorers: Optional[Sequence[str]]) -> List[str]:
    return list(scorers) if scorers else [config.DEFAULT_SCORER]


def score_columns(
    df: pd.DataFrame,
    col_a: str,
    col_b: str,
    scorers: Optional[Sequence[str]] = None,
) -> pd.DataFrame:
    """Return a copy of `df` with one `score_<scorer>` column per scorer.

    Cells that the scorer could not handle are NA.
    """
    _require_columns(df, [col_a, col_b])
    df_out = df.copy()
    for name in _scorer_names(scorers):
        get_scorer(name)  # fail fast on unknown keys
        scores = [score_cells(a, b, name) for a, b in zip(df_out[col_a], df_out[col_b])]
        df_out[f"score_{name}"] = pd.to_numeric(pd.Series(scores, index=df_out.index), errors="coerce")
        logger.info("Scored %d rows of %r vs %r with %s", len(df_out), col_a, col_b, name)
    return df_out


def best_candidate(
    df: pd.DataFrame,
    ref_col: str,
    candidate_cols: Sequence[str],
    scorer: Optional[str] = None,
) -> pd.DataFrame:
    """For each row, find the candidate column whose text best matches `ref_col`.

    Adds `best_score_<scorer>` and `best_col_<scorer>`. Failed scores are
    ignored when taking the max; rows with no usable score get NA in both.
    """
    name = scorer or config.DEFAULT_SCORER
    get_scorer(name)
    _require_columns(df, [ref_col, *candidate_cols])

    best_scores: List[Optional[float]] = []
    best_cols: List[Optional[str]] = []
    for _, row in df.iterrows():
        scored: List[Tuple[float, str]] = []
        for c in candidate_cols:
            s = score_cells(row[ref_col], row[c], name)
            if s is not None:
                scored.append((s, c))
        if scored:
            # max() keeps the first candidate on equal scores
            sc, bc = max(scored, key=lambda t: t[0])
        else:
            sc, bc = None, pd.NA
        best_scores.append(sc)
        best_cols.append(bc)

    df_out = df.copy()
    df_out[f"best_score_{name}"] = pd.to_numeric(pd.Series(best_scores, index=df_out.index), errors="coerce")
    df_out[f"best_col_{name}"] = best_cols
    return df_out


def winner_series(
    s_a: pd.Series,
    s_b: pd.Series,
    label_a: str = "A",
    label_b: str = "B",
    eps: Optional[float] = None,
) -> list:
    """Per-row winner label between two score series.

    TIE when both are present and within `eps`; the only present side wins
    when the other is NA; NA when both are missing.
    """
    eps = config.TIE_EPSILON if eps is None else eps
    out = []
    for a, b in zip(s_a, s_b):
        a_na = pd.isna(a)
        b_na = pd.isna(b)
        if not a_na and not b_na:
            da = float(a)
            db = float(b)
            if abs(da - db) <= eps:
                out.append(TIE)
            elif da > db:
                out.append(label_a)
            else:
                out.append(label_b)
        elif not a_na:
            out.append(label_a)
        elif not b_na:
            out.append(label_b)
        else:
            out.append(pd.NA)
    return out


def count_wins(df: pd.DataFrame, col_a: str, col_b: str, eps: Optional[float] = None) -> Dict[str, int]:
    """Count rows where `col_a` wins, `col_b` wins, or they tie.

    Only rows where both scores are present are counted.
    """
    _require_columns(df, [col_a, col_b])
    eps = config.TIE_EPSILON if eps is None else eps
    s_a = pd.to_numeric(df[col_a], errors="coerce")
    s_b = pd.to_numeric(df[col_b], errors="coerce")
    valid = s_a.notna() & s_b.notna()
    tie = valid & ((s_a - s_b).abs() <= eps)
    a_wins = valid & ~tie & (s_a > s_b)
    b_wins = valid & ~tie & (s_b > s_a)
    return {
        "a_wins": int(a_wins.sum()),
        "b_wins": int(b_wins.sum()),
        "ties": int(tie.sum()),
    }


def summarize(
    df: pd.DataFrame,
    pairs: Dict[str, Tuple[str, str]],
    eps: Optional[float] = None,
) -> pd.DataFrame:
    """One row of win counts per method.

    `pairs` maps a method label to the `(col_a, col_b)` score columns to
    compare; labels whose columns are absent are skipped.
    """
    rows = []
    for method, (col_a, col_b) in pairs.items():
        if col_a not in df.columns or col_b not in df.columns:
            logger.debug("Skipping %s: score columns missing", method)
            continue
        counts = count_wins(df, col_a, col_b, eps)
        rows.append({"method": method, **counts})
    return pd.DataFrame(rows, columns=["method", "a_wins", "b_wins", "ties"])
