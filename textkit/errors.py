"""
Exception types raised by textkit.

All errors derive from `TextkitError`. Each also subclasses the builtin a
caller would naturally catch (`TypeError` for bad input, `KeyError` for
lookups, `ValueError` for bad content).
"""


class TextkitError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgument(TextkitError, TypeError):
    """An argument is not valid text, or a parameter is out of range."""


class UnknownScorer(TextkitError, KeyError):
    """No scorer is registered under the requested key."""

    def __init__(self, name: str, available):
        self.name = name
        self.available = sorted(available)
        super().__init__(f"Unknown scorer {name!r}. Available: {', '.join(self.available)}")

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return str(self.args[0])


class MissingColumn(TextkitError, KeyError):
    """A DataFrame column named by the caller does not exist."""

    def __str__(self) -> str:
        return str(self.args[0])


class UnsupportedFormat(TextkitError, ValueError):
    """A table file has an extension we cannot read."""


class JsonFormatError(TextkitError, ValueError):
    """Data could not be serialized to JSON."""


def ensure_text(value, name: str = "text") -> str:
    """Return `value` unchanged if it is a `str`, else raise InvalidArgument."""
    if not isinstance(value, str):
        raise InvalidArgument(f"{name} must be str, got {type(value).__name__}")
    return value
