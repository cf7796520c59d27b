"""
Core exception types raised by field coercion, strict patching, and settings.

Provides typed exceptions for contest-model failures:
- CodecError for malformed field values (wrong JSON shape or type).
- UnknownFieldError when a caller opts into strict patching.
- ConfigError for invalid runtime settings.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - Invalid entity *state* (missing citation, dangling team reference) is never
      raised; it is reported by ``ContestObject.validate`` as a list of strings.
    - Entities do not catch or wrap CodecError; it reaches the feed step that
      applied the patch.

Examples:
    Catch a malformed array value.

    >>> from contest.core.errors import CodecError
    >>> from contest.core.serde import parse_string_array
    >>> try:
    ...     parse_string_array(42)
    ... except CodecError as e:
    ...     msg = str(e)
    >>> "array" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "ContestError",
    "CodecError",
    "UnknownFieldError",
    "ConfigError",
]


class ContestError(Exception):
    """Base class for contest-model errors."""


class CodecError(ContestError, ValueError):
    """Field value could not be coerced to the expected JSON shape or type."""


class UnknownFieldError(ContestError, KeyError):
    """
    Patch field name not recognized by the target entity kind.

    Attributes:
        kind (str): Entity kind value (e.g., "award").
        name (str): Unhandled field name.
    """

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"unknown {kind} field {name!r}")
        self.kind = kind
        self.name = name

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class ConfigError(ContestError, ValueError):
    """Invalid or unsupported runtime setting."""
