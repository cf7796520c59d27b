"""
Identifier-pattern classification for entities whose sub-kind lives in their id.

An award's semantic category ("winner", "first to solve problem A", "gold
medal", ...) is not stored on the award; it is recovered from the id by trying
an ordered list of templates. Each template holds at most one ``*``
placeholder, so building an id from a template and matching it back are exact
inverses.

Responsibilities
- Define ``IdPattern`` (template, build, match, extract placeholder).
- Define ``IdClassifier`` (ordered first-match classification with a fallback).
- Publish the known award types and their priority order.

Notes:
    - Classification is a pure function of the id and is never cached.
    - An id that matches nothing classifies as the fallback (``OTHER``); this is
      not an error.
    - Zero-IO, stdlib only.

Examples:
    >>> from contest.core.classify import FIRST_TO_SOLVE, award_id, award_type_of
    >>> award_id(FIRST_TO_SOLVE, "A")
    'first-to-solve-A'
    >>> award_type_of("first-to-solve-A") is FIRST_TO_SOLVE
    True
    >>> award_type_of("best-t-shirt").name
    'other'
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Final

__all__ = [
    "PLACEHOLDER",
    "IdPattern",
    "IdClassifier",
    "AwardType",
    "WINNER",
    "RANK",
    "MEDAL",
    "GROUP",
    "FIRST_TO_SOLVE",
    "TOP",
    "HONORS",
    "ORGANIZATION",
    "GROUP_HIGHLIGHT",
    "SOLVED",
    "EXPECTED_TO_ADVANCE",
    "OTHER",
    "KNOWN_AWARD_TYPES",
    "AWARD_CLASSIFIER",
    "award_type_of",
    "award_id",
]

PLACEHOLDER: Final[str] = "*"


@dataclass(slots=True, frozen=True)
class IdPattern:
    """
    Named id template with an optional embedded identifier.

    Attributes:
        name (str): Lower_snake sub-kind name (e.g., "first_to_solve").
        template (str): Id template; ``*`` marks where the identifier goes.
        label (str): Human-friendly name for dashboards and logs.

    Raises:
        ValueError: If the template holds more than one placeholder.

    Examples:
        >>> p = IdPattern("rank", "rank-*", "Rank")
        >>> p.build("3")
        'rank-3'
        >>> p.matches("rank-3"), p.identifier_of("rank-3")
        (True, '3')
    """

    name: str
    template: str
    label: str = ""
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.template.count(PLACEHOLDER) > 1:
            raise ValueError(
                f"id template may hold at most one {PLACEHOLDER!r} (got {self.template!r})"
            )
        head, sep, tail = self.template.partition(PLACEHOLDER)
        source = re.escape(head) + ("(.*)" if sep else "") + re.escape(tail)
        object.__setattr__(self, "_regex", re.compile(source, re.DOTALL))

    @property
    def has_placeholder(self) -> bool:
        return PLACEHOLDER in self.template

    def build(self, identifier: str = "") -> str:
        """Substitute identifier into the template (templates without ``*`` ignore it)."""
        return self.template.replace(PLACEHOLDER, identifier)

    def matches(self, value: str | None) -> bool:
        """Return True if the whole of value fits the template."""
        if value is None:
            return False
        return self._regex.fullmatch(value) is not None

    def identifier_of(self, value: str) -> str | None:
        """
        Recover the placeholder text from an id built with this template.

        Returns:
            str | None: The embedded identifier, "" for templates without a
            placeholder, or None when value does not match.
        """
        m = self._regex.fullmatch(value)
        if m is None:
            return None
        return m.group(1) if self.has_placeholder else ""


# Award sub-kinds are plain IdPatterns.
AwardType = IdPattern


@dataclass(slots=True, frozen=True)
class IdClassifier:
    """
    Ordered first-match classifier over id templates.

    Attributes:
        patterns (tuple[IdPattern, ...]): Known templates in priority order.
        fallback (IdPattern): Result when no known template matches.
    """

    patterns: tuple[IdPattern, ...]
    fallback: IdPattern

    def classify(self, value: str | None) -> IdPattern:
        for pattern in self.patterns:
            if pattern.matches(value):
                return pattern
        return self.fallback

    def by_name(self, name: str) -> IdPattern:
        """
        Look up a known pattern (or the fallback) by its lower_snake name.

        Raises:
            KeyError: If no pattern carries that name.
        """
        for pattern in self._all():
            if pattern.name == name:
                return pattern
        raise KeyError(f"Unknown id pattern: {name}")

    def _all(self) -> Iterable[IdPattern]:
        yield from self.patterns
        yield self.fallback


# ============================================================================
# AWARD TYPES (priority order matters: first match wins)
# ============================================================================

WINNER: Final = AwardType("winner", "winner", "Contest Winner")
RANK: Final = AwardType("rank", "rank-*", "Rank")
MEDAL: Final = AwardType("medal", "*-medal", "Medal")
GROUP: Final = AwardType("group", "group-winner-*", "Group Winner")
FIRST_TO_SOLVE: Final = AwardType("first_to_solve", "first-to-solve-*", "First to Solve")
TOP: Final = AwardType("top", "top-*", "Top")
HONORS: Final = AwardType("honors", "honors-*", "Honors")
ORGANIZATION: Final = AwardType("organization", "organization-winner-*", "Organization Winner")
GROUP_HIGHLIGHT: Final = AwardType("group_highlight", "group-highlight-*", "Group Highlight")
SOLVED: Final = AwardType("solved", "solved-*", "Solved")
EXPECTED_TO_ADVANCE: Final = AwardType(
    "expected_to_advance", "expected-to-advance", "Expected to Advance"
)
OTHER: Final = AwardType("other", "*", "Other")

KNOWN_AWARD_TYPES: Final[tuple[AwardType, ...]] = (
    WINNER,
    RANK,
    MEDAL,
    GROUP,
    FIRST_TO_SOLVE,
    TOP,
    HONORS,
    ORGANIZATION,
    GROUP_HIGHLIGHT,
    SOLVED,
    EXPECTED_TO_ADVANCE,
)

AWARD_CLASSIFIER: Final = IdClassifier(patterns=KNOWN_AWARD_TYPES, fallback=OTHER)


def award_type_of(award_id: str | None) -> AwardType:
    """
    Classify an award id into its award type.

    Args:
        award_id (str | None): Award identifier.

    Returns:
        AwardType: First matching known type, or OTHER.
    """
    return AWARD_CLASSIFIER.classify(award_id)


def award_id(award_type: AwardType, identifier: str = "") -> str:
    """
    Build the id for an award type, embedding identifier where the template has ``*``.

    Args:
        award_type (AwardType): Target award type.
        identifier (str): Text substituted for the placeholder.

    Returns:
        str: Award id such that ``award_type_of(result)`` is award_type.

    Raises:
        ValueError: If the built id classifies as a different award type, e.g.
            ``award_id(MEDAL, "rank")`` gives ``"rank-medal"``, which is a RANK id.
    """
    result = award_type.build(identifier)
    actual = award_type_of(result)
    if actual is not award_type:
        raise ValueError(
            f"{award_type.name} id {result!r} would classify as {actual.name}; "
            f"choose another identifier"
        )
    return result
