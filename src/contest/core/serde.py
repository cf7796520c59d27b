"""
Primitive JSON coercion and emission helpers for feed fields.

Provides the small codec surface entities rely on:
- ``parse_string_array`` / ``parse_boolean`` / ``coerce_string`` turn raw feed
  values (already-decoded JSON or JSON text) into typed field values.
- ``encode_string_array`` produces the bracketed literal used for array fields.
- ``JsonEncoder`` writes one JSON object body via key/value emission.

Notes:
    - Coercion failures raise ``contest.core.errors.CodecError``; callers do not
      wrap them.
    - Array-valued fields are emitted pre-joined (``["a","b"]`` or ``[]``) and
      written through ``JsonEncoder.encode_primitive`` so the literal is copied
      into the body unquoted.
    - Zero-IO, stdlib only.

Examples:
    >>> from contest.core.serde import JsonEncoder, encode_string_array
    >>> enc = JsonEncoder()
    >>> enc.encode("id", "winner")
    >>> enc.encode_primitive("team_ids", encode_string_array(["t1", "t2"]))
    >>> enc.to_json()
    '{"id":"winner","team_ids":["t1","t2"]}'
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from .errors import CodecError

__all__ = [
    "parse_string_array",
    "parse_boolean",
    "coerce_string",
    "encode_string_array",
    "JsonEncoder",
]


def parse_string_array(value: Any) -> list[str]:
    """
    Coerce a feed value into a list of strings.

    Args:
        value (Any): A decoded JSON array (list/tuple) or the JSON text of one.

    Returns:
        list[str]: A new list; the input is never aliased.

    Raises:
        CodecError: If value is not an array (or array text), or an element is
            not a string.

    Examples:
        >>> parse_string_array('["t1","t2"]')
        ['t1', 't2']
        >>> parse_string_array(("t1",))
        ['t1']
        >>> parse_string_array("[]")
        []
    """
    items: Any = value
    if isinstance(value, str):
        try:
            items = json.loads(value)
        except json.JSONDecodeError as exc:
            raise CodecError(f"expected a JSON array, got {value!r}") from exc
    if not isinstance(items, (list, tuple)):
        raise CodecError(f"expected a JSON array, got {type(items).__name__}: {value!r}")
    out: list[str] = []
    for item in items:
        if not isinstance(item, str):
            raise CodecError(f"expected array of strings, got element {item!r}")
        out.append(item)
    return out


def parse_boolean(value: Any) -> bool:
    """
    Coerce a feed value into a boolean.

    Args:
        value (Any): A bool, or text compared case-insensitively to "true".

    Returns:
        bool: True for ``True`` or "true" (any case); False for anything else,
        including None.

    Examples:
        >>> parse_boolean("TRUE"), parse_boolean("no"), parse_boolean(None)
        (True, False, False)
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


def coerce_string(value: Any) -> str | None:
    """
    Check that a feed value is a string (or null) and return it verbatim.

    Raises:
        CodecError: If value is neither None nor a str.
    """
    if value is None or isinstance(value, str):
        return value
    raise CodecError(f"expected a string, got {type(value).__name__}: {value!r}")


def encode_string_array(values: Sequence[str]) -> str:
    """
    Join strings into the bracketed, quoted array literal used on the wire.

    Args:
        values (Sequence[str]): Items to join. Items are written without
            escaping, so they are expected to be identifiers.

    Returns:
        str: ``[]`` for an empty sequence, else ``["a","b",...]``.
    """
    if not values:
        return "[]"
    return '["' + '","'.join(values) + '"]'


class JsonEncoder:
    """
    Key/value emitter for a single JSON object body.

    Notes:
        - ``encode`` JSON-encodes the value (strings quoted, None as null).
        - ``encode_primitive`` copies already-encoded text verbatim.
        - Keys keep insertion order.
    """

    def __init__(self) -> None:
        self._parts: list[str] = []

    def encode(self, name: str, value: Any) -> None:
        self._parts.append(f"{json.dumps(name)}:{json.dumps(value, ensure_ascii=False)}")

    def encode_primitive(self, name: str, raw: str) -> None:
        self._parts.append(f"{json.dumps(name)}:{raw}")

    def to_json(self) -> str:
        return "{" + ",".join(self._parts) + "}"
