"""
Canonical contest-model grammar and helpers.

Defines entity kinds, award display modes, and the identifier alphabet shared by
every entity in the feed. Includes zero-IO validators/helpers used across the
stack.

Responsibilities
- Define enums whose serialized values appear on the wire.
- Provide lookup helpers that map wire strings back to enum members.
- Validate identifier well-formedness.

Design principles
-----------------
1) One naming standard:
   - Enum classes: PascalCase
   - Enum member names: UPPER_SNAKE (Python constants)
   - Enum serialized values (wire): lower_snake
   - Feed field names: lower_snake

2) Lookups are case-sensitive. ``"Pause"`` is not a display mode; callers
   decide whether an unrecognized value is an error or a no-op.

Downstream usage
----------------
- ``contest.model.award`` uses ``parse_display_mode`` when patching and
  ``display_mode_value`` when exporting.
- ``contest.model.entity`` uses ``is_valid_id`` for the base identity check.
- Tests use ``ensure_all_enum_values_lower_snake`` to enforce naming invariants.

Examples
--------
>>> from contest.core.grammar import DisplayMode, parse_display_mode, is_valid_id
>>> parse_display_mode("pause") == DisplayMode.PAUSE
True
>>> parse_display_mode("PAUSE") is None
True
>>> is_valid_id("group-winner-north")
True
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum
from typing import Any, Final

__all__ = [
    "ContestType",
    "DisplayMode",
    "ID_PATTERN",
    # helpers/validators
    "is_lower_snake",
    "assert_lower_snake",
    "is_valid_id",
    "contest_type_from_value",
    "display_mode_value",
    "parse_display_mode",
    "ensure_all_enum_values_lower_snake",
]


# ============================================================================
# ENTITY KINDS
# ============================================================================


class ContestType(Enum):
    """
    Entity kinds carried by the contest feed.

    Serialized values appear in:
      - feed event ``type`` fields
      - ``Contest`` registry keys
    """

    TEAM = "team"
    AWARD = "award"


# ============================================================================
# AWARD DISPLAY MODES
# ============================================================================


class DisplayMode(Enum):
    """
    How a presentation client should show an award.

    Notes:
      An unset mode reads as DETAIL. DETAIL is the default and is never
      written by exporters, so an explicit DETAIL and an absent mode look the
      same on the wire.
    """

    DETAIL = "detail"
    PAUSE = "pause"
    LIST = "list"
    IGNORE = "ignore"


# ============================================================================
# Helpers & Validators (zero I/O)
# ============================================================================

_LOWER_SNAKE_RE: Final[re.Pattern[str]] = re.compile(r"^[a-z0-9]+(?:_[a-z0-9]+)*$")

# Identifier alphabet for feed objects.
ID_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_.\-]+")


def is_lower_snake(value: str) -> bool:
    """
    Check whether a string is lower_snake.

    Args:
      value (str): Candidate string to validate.

    Returns:
      bool: True if value matches lower_snake (e.g., "display_mode"), False otherwise.

    Examples:
      >>> is_lower_snake("team_ids")
      True
      >>> is_lower_snake("teamIds")
      False
    """
    return bool(_LOWER_SNAKE_RE.match(value or ""))


def assert_lower_snake(value: str, what: str = "value") -> None:
    """
    Validate that a string is lower_snake.

    Args:
      value (str): Candidate string to validate.
      what (str): Human-friendly label used in the error message.

    Raises:
      ValueError: If value is not lower_snake.
    """
    if not is_lower_snake(value):
        raise ValueError(f"{what} must be lower_snake (got: {value!r})")


def is_valid_id(value: str | None) -> bool:
    """
    Check whether an identifier is non-empty and uses only ``[A-Za-z0-9_.-]``.

    Args:
      value (str | None): Candidate identifier.

    Returns:
      bool: True for a well-formed identifier.

    Examples:
      >>> is_valid_id("first-to-solve-A")
      True
      >>> is_valid_id("team 7")
      False
      >>> is_valid_id(None)
      False
    """
    if not value:
        return False
    return ID_PATTERN.fullmatch(value) is not None


def contest_type_from_value(s: str) -> ContestType:
    """
    Parse a lower_snake kind string into a ContestType.

    Args:
      s (str): Lower_snake kind string (e.g., "award").

    Returns:
      ContestType: Parsed kind.

    Raises:
      ValueError: If s is not lower_snake or is not a known kind.
    """
    assert_lower_snake(s, "type")
    return ContestType(s)


def display_mode_value(mode: DisplayMode) -> str:
    """
    Get the serialized (lowercase) value for a DisplayMode.

    Args:
      mode (DisplayMode): Display mode enum.

    Returns:
      str: Wire value (e.g., "pause").
    """
    return mode.value


def parse_display_mode(value: Any) -> DisplayMode | None:
    """
    Map a wire string to a DisplayMode, case-sensitively.

    Args:
      value (Any): Candidate wire value.

    Returns:
      DisplayMode | None: The matching mode, or None when value is not exactly
      one of {"detail","pause","list","ignore"}.

    Examples:
      >>> parse_display_mode("list")
      <DisplayMode.LIST: 'list'>
      >>> parse_display_mode("List") is None
      True
    """
    for mode in DisplayMode:
        if value == mode.value:
            return mode
    return None


def ensure_all_enum_values_lower_snake(enums: Iterable[type[Enum]]) -> None:
    """
    Assert that every enum member's value is lower_snake.

    Args:
      enums (Iterable[type[Enum]]): Iterable of Enum classes to inspect.

    Raises:
      AssertionError: If any enum member has a non-lower_snake value.

    Examples:
      >>> ensure_all_enum_values_lower_snake([ContestType, DisplayMode])
    """
    for E in enums:
        for m in E:
            if not is_lower_snake(m.value):
                raise AssertionError(
                    f"{E.__name__}.{m.name} has non-lower_snake value: {m.value!r}"
                )
