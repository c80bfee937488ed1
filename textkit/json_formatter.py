"""
JSON formatting, validation and restructuring helpers.

Formatting functions take already-parsed data (dicts, lists, scalars) and
raise `JsonFormatError` when it cannot be serialized. `validate_json` is the
only entry point that takes raw text; it reports problems in its result
instead of raising.
"""

from __future__ import annotations

import copy
import json
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import JsonFormatError, ensure_text
from .logger import get_logger

logger = get_logger(__name__)

# A `"key": value` line of pretty-printed JSON whose value is a scalar
_SCALAR_LINE_RE = re.compile(
    r'^(?P<head>\s*".*?": )'
    r'(?P<value>"(?:[^"\\]|\\.)*"|-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?|true|false|null)'
    r'(?P<comma>,?)$'
)


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    data: Any = None
    error: Optional[str] = None


def format_json(
    data: Any,
    indent: int = 2,
    max_depth: int = 10,
    sort_keys: bool = False,
    include_comments: bool = False,
) -> str:
    """Pretty-print `data`.

    Args:
        data: Parsed JSON value
        indent: Spaces per level; 0 produces compact output
        max_depth: How many levels `sort_keys` descends into
        sort_keys: Sort object keys recursively
        include_comments: Append `// <type>` to scalar member lines

    Raises:
        JsonFormatError: if `data` holds values JSON cannot represent
            (including NaN/Infinity and circular references)
    """
    processed = _sort_object_keys(data, max_depth) if sort_keys else data
    try:
        if indent:
            formatted = json.dumps(processed, indent=indent, ensure_ascii=False, allow_nan=False)
        else:
            formatted = json.dumps(processed, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise JsonFormatError(f"JSON formatting failed: {e}") from e

    if include_comments:
        return _add_type_comments(formatted)
    return formatted


def minify_json(data: Any) -> str:
    try:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise JsonFormatError(f"JSON minification failed: {e}") from e


def validate_json(text: str) -> ValidationResult:
    """Parse `text`, returning the data or the parser's error message.

    `NaN`, `Infinity` and `-Infinity` are rejected, as `format_json` would
    refuse to write them back.
    """
    try:
        data = json.loads(ensure_text(text), parse_constant=_reject_constant)
    except ValueError as e:
        logger.debug("Invalid JSON: %s", e)
        return ValidationResult(is_valid=False, data=None, error=str(e))
    return ValidationResult(is_valid=True, data=data)


def flatten(obj: Dict[str, Any], prefix: str = "", delimiter: str = ".") -> Dict[str, Any]:
    """Collapse nested objects into delimiter-joined keys.

    Lists and scalars are leaves; an empty nested object disappears.
    """
    result: Dict[str, Any] = {}
    for key, value in obj.items():
        new_key = f"{prefix}{delimiter}{key}" if prefix else str(key)
        if isinstance(value, dict):
            result.update(flatten(value, new_key, delimiter))
        else:
            result[new_key] = value
    return result


def unflatten(flat: Dict[str, Any], delimiter: str = ".") -> Dict[str, Any]:
    """Rebuild nested objects from delimiter-joined keys.

    Raises JsonFormatError when a key needs to nest under a path that already
    holds a non-object value (e.g. both "a" and "a.b").
    """
    result: Dict[str, Any] = {}
    for key, value in flat.items():
        parts = key.split(delimiter)
        current = result
        for i, part in enumerate(parts[:-1]):
            current = current.setdefault(part, {})
            if not isinstance(current, dict):
                path = delimiter.join(parts[: i + 1])
                raise JsonFormatError(f"Key {key!r} conflicts with non-object value at {path!r}")
        if isinstance(current.get(parts[-1]), dict) and not isinstance(value, dict):
            raise JsonFormatError(f"Key {key!r} would overwrite a nested object")
        current[parts[-1]] = value
    return result


def merge(*objects: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge objects left to right; later scalars and lists win.

    The inputs are not modified.
    """
    result: Dict[str, Any] = {}
    for obj in objects:
        _deep_merge(result, obj)
    return result


def extract_schema(data: Any) -> Dict[str, Any]:
    """Infer a minimal `{"type": ...}` schema; arrays use their first item."""
    if data is None:
        return {"type": "null"}
    # bool before number: bool is an int subclass
    if isinstance(data, bool):
        return {"type": "boolean"}
    if isinstance(data, (int, float)):
        return {"type": "number"}
    if isinstance(data, str):
        return {"type": "string"}
    if isinstance(data, (list, tuple)):
        return {
            "type": "array",
            "items": extract_schema(data[0]) if data else {"type": "unknown"},
        }
    if isinstance(data, dict):
        return {
            "type": "object",
            "properties": {str(k): extract_schema(v) for k, v in data.items()},
        }
    raise JsonFormatError(f"Not a JSON value: {type(data).__name__}")


def _sort_object_keys(obj: Any, max_depth: int, depth: int = 0) -> Any:
    if depth >= max_depth:
        return obj
    if isinstance(obj, list):
        return [_sort_object_keys(item, max_depth, depth + 1) for item in obj]
    if isinstance(obj, dict):
        return {k: _sort_object_keys(obj[k], max_depth, depth + 1) for k in sorted(obj, key=str)}
    return obj


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def _value_type(value: str) -> str:
    if value.startswith('"'):
        return "string"
    if value in ("true", "false"):
        return "boolean"
    if value == "null":
        return "null"
    return "number"


def _add_type_comments(formatted: str) -> str:
    lines = []
    for line in formatted.split("\n"):
        m = _SCALAR_LINE_RE.match(line)
        if m:
            line = f"{line} // {_value_type(m.group('value'))}"
        lines.append(line)
    return "\n".join(lines)


def _deep_merge(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for key, value in source.items():
        if isinstance(value, dict):
            if not isinstance(target.get(key), dict):
                target[key] = {}
            _deep_merge(target[key], value)
        else:
            target[key] = copy.deepcopy(value)
