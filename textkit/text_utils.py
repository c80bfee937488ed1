"""
Text cleanup, extraction and small formatting helpers.

Every function takes a `str` and raises `InvalidArgument` otherwise. Nothing
here mutates state; all helpers are plain single-pass transformations.
"""

from __future__ import annotations

import csv
import io
import random
import re
import string
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from .errors import InvalidArgument, ensure_text

ALPHANUMERIC = string.ascii_letters + string.digits

_URL_RE = re.compile(
    r"https?://(?:www\.)?[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b[-a-zA-Z0-9()@:%_+.~#?&/=]*"
)
_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_NUMBER_RE = re.compile(r"\b\d+(?:\.\d+)?\b")
_TAG_RE = re.compile(r"<[^>]*>")

_ZERO_WIDTH_RE = re.compile("[\u200b-\u200d\ufeff]")
_ODD_SPACES_RE = re.compile("[\u00a0\u2000-\u200a\u202f\u205f\u3000]")
_QUOTES = str.maketrans({
    "\u2014": "-",  # em dash
    "\u2013": "-",  # en dash
    "\u201c": "\"",
    "\u201d": "\"",
    "\u2018": "'",
    "\u2019": "'",
})


@dataclass(frozen=True)
class CodeBlock:
    code: str
    line: int
    language: Optional[str] = None


@dataclass(frozen=True)
class TextCounts:
    words: int
    characters: int
    characters_no_spaces: int
    lines: int


def clean(
    text: str,
    trim_whitespace: bool = True,
    normalize_line_endings: bool = True,
    remove_empty_lines: bool = False,
    max_line_length: Optional[int] = None,
) -> str:
    """Trim, normalize line endings to LF, optionally drop blank lines and wrap."""
    cleaned = ensure_text(text)

    if trim_whitespace:
        cleaned = cleaned.strip()
    if normalize_line_endings:
        cleaned = re.sub(r"\r\n|\r", "\n", cleaned)
    if remove_empty_lines:
        cleaned = "\n".join(line for line in cleaned.split("\n") if line.strip())
    if max_line_length:
        cleaned = wrap_lines(cleaned, max_line_length)
    return cleaned


def extract_code_blocks(text: str) -> List[CodeBlock]:
    """Collect fenced (```) code blocks.

    `line` is the 1-based line of the opening fence. An unclosed block at the
    end of the text is still returned when it has content.
    """
    blocks: List[CodeBlock] = []
    in_block = False
    current: List[str] = []
    language = ""
    start_line = 0

    for i, line in enumerate(ensure_text(text).split("\n")):
        if line.strip().startswith("```"):
            if not in_block:
                in_block = True
                language = line.strip()[3:].strip()
                current = []
                start_line = i + 1
            else:
                in_block = False
                blocks.append(CodeBlock("\n".join(current).strip(), start_line, language or None))
        elif in_block:
            current.append(line)

    if in_block and "\n".join(current).strip():
        blocks.append(CodeBlock("\n".join(current).strip(), start_line, language or None))
    return blocks


def slugify(text: str) -> str:
    slug = ensure_text(text).lower().strip()
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"[^\w-]+", "", slug)
    slug = re.sub(r"-{2,}", "-", slug)
    return slug.strip("-")


def count(text: str) -> TextCounts:
    text = ensure_text(text)
    return TextCounts(
        words=len(text.split()),
        characters=len(text),
        characters_no_spaces=len(re.sub(r"\s", "", text)),
        lines=len(text.split("\n")),
    )


def truncate(text: str, max_length: int, suffix: str = "...") -> str:
    text = ensure_text(text)
    if max_length < 0:
        raise InvalidArgument(f"max_length must be >= 0, got {max_length}")
    if len(text) <= max_length:
        return text
    if max_length <= len(suffix):
        # No room for any text; the suffix itself is cut to fit
        return suffix[:max_length]
    return text[:max_length - len(suffix)] + suffix


def wrap_lines(text: str, max_length: int) -> str:
    """Greedy wrap on single spaces; a word longer than the limit stays whole."""
    if max_length < 1:
        raise InvalidArgument(f"max_length must be >= 1, got {max_length}")
    lines: List[str] = []
    current = ""
    for word in ensure_text(text).split(" "):
        if len(current) + len(word) + 1 <= max_length:
            current += (" " if current else "") + word
        else:
            if current:
                lines.append(current)
            current = word
    if current:
        lines.append(current)
    return "\n".join(lines)


def strip_html(html: str) -> str:
    return _TAG_RE.sub("", ensure_text(html, "html"))


def extract_urls(text: str) -> List[str]:
    return _URL_RE.findall(ensure_text(text))


def extract_emails(text: str) -> List[str]:
    return _EMAIL_RE.findall(ensure_text(text))


def extract_numbers(text: str) -> List[str]:
    return _NUMBER_RE.findall(ensure_text(text))


def highlight(text: str, terms: Sequence[str], css_class: str = "highlight") -> str:
    """Wrap every case-insensitive occurrence of `terms` in a span.

    Terms are matched literally, not as patterns.
    """
    text = ensure_text(text)
    terms = [t for t in terms if t]
    if not terms:
        return text
    pattern = re.compile("(" + "|".join(re.escape(t) for t in terms) + ")", re.IGNORECASE)
    return pattern.sub(lambda m: f'<span class="{css_class}">{m.group(1)}</span>', text)


def random_string(length: int, charset: str = ALPHANUMERIC) -> str:
    if length < 0:
        raise InvalidArgument(f"length must be >= 0, got {length}")
    if not ensure_text(charset, "charset"):
        raise InvalidArgument("charset must not be empty")
    return "".join(random.choices(charset, k=length))


def parse_csv(text: str, delimiter: str = ",") -> List[List[str]]:
    """Parse CSV text into rows of stripped fields, skipping blank lines.

    With a single-character delimiter quoted fields may contain the
    delimiter. Longer delimiters are split on literally, without quoting.
    """
    text = ensure_text(text)
    _check_delimiter(delimiter)
    if len(delimiter) == 1:
        rows = csv.reader(io.StringIO(text), delimiter=delimiter)
    else:
        rows = (line.split(delimiter) for line in text.splitlines())
    return [[field.strip() for field in row] for row in rows if any(f.strip() for f in row)]


def to_csv(rows: Iterable[Sequence[str]], delimiter: str = ",") -> str:
    """Join rows into CSV text; fields are quoted where `parse_csv` needs it."""
    _check_delimiter(delimiter)
    if len(delimiter) > 1:
        return "\n".join(delimiter.join(row) for row in rows)
    buf = io.StringIO()
    csv.writer(buf, delimiter=delimiter, lineterminator="\n").writerows(rows)
    return buf.getvalue().rstrip("\n")


def _check_delimiter(delimiter: str) -> None:
    if not ensure_text(delimiter, "delimiter"):
        raise InvalidArgument("delimiter must not be empty")


def reverse(text: str) -> str:
    return ensure_text(text)[::-1]


def remove_spaces(text: str) -> str:
    return re.sub(r"\s+", "", ensure_text(text))


def trim_whitespace(text: str) -> str:
    return ensure_text(text).strip()


def remove_extra_spaces(text: str) -> str:
    return re.sub(r"\s+", " ", ensure_text(text)).strip()


def remove_line_breaks(text: str) -> str:
    return re.sub(r"\r\n|\r|\n", " ", ensure_text(text))


def clean_ai_text(text: str) -> str:
    """Normalize typographic characters pasted from generated or rich text.

    Drops zero-width characters, maps dashes and curly quotes to ASCII,
    replaces unusual spaces, collapses whitespace and trims.
    """
    cleaned = _ZERO_WIDTH_RE.sub("", ensure_text(text))
    cleaned = cleaned.translate(_QUOTES)
    cleaned = _ODD_SPACES_RE.sub(" ", cleaned)
    return re.sub(r"\s+", " ", cleaned).strip()
