"""
Award entity: citation, awarded teams, display mode, and a free-form parameter.

Patch vocabulary
----------------
| Field          | Value                          | Effect
|----------------|--------------------------------|---------------------------------------------
| citation       | string or null                 | replaced verbatim
| team_ids       | string array, array text, null | replaced atomically; null / "null" clears
| show           | boolean (legacy)               | true -> DETAIL, false -> PAUSE; never stored
| display_mode   | "detail"/"pause"/"list"/"ignore"| set mode; any other value leaves it unchanged
| parameter      | string or null                 | replaced verbatim

Export rules
------------
- ``id`` and ``citation`` always (citation even when None).
- ``team_ids`` only when not None, as the literal text ``[]`` or ``["a","b"]``.
- ``display_mode`` only when set and not DETAIL.
- ``parameter`` only when not None.

Notes
-----
- ``team_ids`` is tri-state: None (not yet assigned), ``[]`` (assigned to no
  one), or a populated list. The two empty states are kept distinct.
- ``display_mode`` accepts unrecognized strings as "no change". Treat that as a
  documented tolerance; see tests/model/test_award_patch.py.
- The award type is derived from the id (``contest.core.classify``) on every
  access.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from contest.core.classify import AwardType, award_id, award_type_of
from contest.core.grammar import ContestType, DisplayMode, display_mode_value, parse_display_mode
from contest.core.serde import (
    JsonEncoder,
    coerce_string,
    encode_string_array,
    parse_boolean,
    parse_string_array,
)

from .entity import ID, ContestObject, TeamLookup

__all__ = [
    "CITATION",
    "TEAM_IDS",
    "SHOW",
    "DISPLAY_MODE",
    "PARAMETER",
    "Award",
]

CITATION = "citation"
TEAM_IDS = "team_ids"
SHOW = "show"
DISPLAY_MODE = "display_mode"
PARAMETER = "parameter"


class Award(ContestObject):
    """
    One award in the contest dataset.

    Attributes:
        id (str | None): Award id; usually built from an AwardType template.
        team_ids (list[str] | None): Awarded team ids; None means not yet assigned.
        citation (str | None): Human-readable citation; required for validity.
        display_mode (DisplayMode | None): Presentation mode; None reads as DETAIL.
        parameter (str | None): Kind-specific auxiliary data.

    Examples:
        >>> from contest.core.classify import FIRST_TO_SOLVE
        >>> a = Award.of_type(FIRST_TO_SOLVE, "A", team_ids=["t7"], citation="First to solve A")
        >>> a.id, a.award_type.name
        ('first-to-solve-A', 'first_to_solve')
        >>> a.add("show", False)
        True
        >>> a.properties()
        {'id': 'first-to-solve-A', 'citation': 'First to solve A', 'team_ids': '["t7"]', 'display_mode': 'pause'}
    """

    kind: ClassVar[ContestType] = ContestType.AWARD

    team_ids: list[str] | None = None
    citation: str | None = None
    display_mode: DisplayMode | None = None
    parameter: str | None = None

    @classmethod
    def of_type(
        cls,
        award_type: AwardType,
        identifier: str = "",
        *,
        team_ids: list[str] | None = None,
        team_id: str | None = None,
        citation: str | None = None,
        display_mode: DisplayMode | None = None,
    ) -> Award:
        """
        Build an award whose id comes from an award type template.

        Args:
            award_type (AwardType): Template owner (e.g., FIRST_TO_SOLVE).
            identifier (str): Text substituted for the template placeholder.
            team_ids (list[str] | None): Awarded team ids.
            team_id (str | None): Shorthand for a single awarded team; ignored
                when team_ids is given.
            citation (str | None): Citation text.
            display_mode (DisplayMode | None): Optional display mode.

        Returns:
            Award: New award with ``award_type_of(id)`` equal to award_type.

        Raises:
            ValueError: If the built id would classify as another award type.
        """
        if team_ids is None and team_id is not None:
            team_ids = [team_id]
        return cls(
            id=award_id(award_type, identifier),
            team_ids=team_ids,
            citation=citation,
            display_mode=display_mode,
        )

    # ------------------------------------------------------------------
    # Derived reads
    # ------------------------------------------------------------------

    @property
    def award_type(self) -> AwardType:
        return award_type_of(self.id)

    @property
    def has_display_mode(self) -> bool:
        return self.display_mode is not None

    @property
    def effective_display_mode(self) -> DisplayMode:
        if self.display_mode is None:
            return DisplayMode.DETAIL
        return self.display_mode

    # ------------------------------------------------------------------
    # Contract hooks
    # ------------------------------------------------------------------

    def _add(self, name: str, value: Any) -> bool:
        if name == TEAM_IDS:
            if value is None or value == "null":
                self.team_ids = None
            else:
                self.team_ids = parse_string_array(value)
            return True
        elif name == CITATION:
            self.citation = coerce_string(value)
            return True
        elif name == SHOW:
            self.display_mode = DisplayMode.DETAIL if parse_boolean(value) else DisplayMode.PAUSE
            return True
        elif name == DISPLAY_MODE:
            mode = parse_display_mode(value)
            if mode is not None:
                self.display_mode = mode
            return True
        elif name == PARAMETER:
            self.parameter = coerce_string(value)
            return True

        return False

    def _exported_mode(self) -> str | None:
        if self.display_mode is None or self.display_mode is DisplayMode.DETAIL:
            return None
        return display_mode_value(self.display_mode)

    def _properties(self, props: dict[str, Any]) -> None:
        super()._properties(props)
        props[CITATION] = self.citation
        if self.team_ids is not None:
            props[TEAM_IDS] = encode_string_array(self.team_ids)
        mode = self._exported_mode()
        if mode is not None:
            props[DISPLAY_MODE] = mode
        if self.parameter is not None:
            props[PARAMETER] = self.parameter

    def _removed_value(self, name: str) -> Any:
        # A null display_mode is "no change" when patched, so send the default.
        if name == DISPLAY_MODE:
            return display_mode_value(DisplayMode.DETAIL)
        return super()._removed_value(name)

    def write_body(self, encoder: JsonEncoder) -> None:
        encoder.encode(ID, self.id)
        if self.citation is not None:
            encoder.encode(CITATION, self.citation)
        if self.team_ids is not None:
            encoder.encode_primitive(TEAM_IDS, encode_string_array(self.team_ids))
        mode = self._exported_mode()
        if mode is not None:
            encoder.encode(DISPLAY_MODE, mode)
        if self.parameter is not None:
            encoder.encode(PARAMETER, self.parameter)

    def _validate(self, contest: TeamLookup) -> list[str]:
        errors = super()._validate(contest)

        if not self.citation:
            errors.append("Citation missing")

        if self.team_ids:
            for team_id in self.team_ids:
                if contest.get_team_by_id(team_id) is None:
                    errors.append(f"Invalid team {team_id}")

        return errors
