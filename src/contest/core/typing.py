"""
Lightweight typing aliases used across the contest model.

Provides minimal NewTypes and aliases to improve readability and static checks.
This module contains no runtime logic and is zero-IO.

Examples:
    >>> from contest.core.typing import TeamId, FieldPairs
    >>> def first_team(ids: list[TeamId]) -> TeamId:
    ...     return ids[0]
    >>> first_team([TeamId("t1")])
    't1'
    >>> pairs: FieldPairs = [("citation", "Winner")]
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, NewType, Union

__all__ = [
    "EntityId",
    "TeamId",
    "JsonDict",
    "FieldPairs",
]

# NewType wrappers for semantic clarity in entity fields.
EntityId = NewType("EntityId", str)
TeamId = NewType("TeamId", str)

# Convenient JSON-like mapping alias. Kept intentionally broad for serde boundaries.
JsonDict = dict[str, Any]

# A patch: either a mapping of field name to value or an ordered stream of pairs.
FieldPairs = Union[Mapping[str, Any], Iterable[tuple[str, Any]]]
