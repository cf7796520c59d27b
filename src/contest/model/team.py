"""Team entity: the target of award references."""

from __future__ import annotations

from typing import Any, ClassVar

from contest.core.grammar import ContestType
from contest.core.serde import (
    JsonEncoder,
    coerce_string,
    encode_string_array,
    parse_boolean,
    parse_string_array,
)

from .entity import ID, ContestObject, TeamLookup

__all__ = [
    "NAME",
    "DISPLAY_NAME",
    "ORGANIZATION_ID",
    "GROUP_IDS",
    "HIDDEN",
    "Team",
]

NAME = "name"
DISPLAY_NAME = "display_name"
ORGANIZATION_ID = "organization_id"
GROUP_IDS = "group_ids"
HIDDEN = "hidden"


class Team(ContestObject):
    """
    One competing team.

    Attributes:
        name (str | None): Team name; required for validity.
        display_name (str | None): Optional presentation name.
        organization_id (str | None): Owning organization id.
        group_ids (list[str] | None): Group memberships; None means unknown.
        hidden (bool): Hidden teams are omitted from public views. Exported only when True.

    Examples:
        >>> t = Team(id="t1", name="Byte Me")
        >>> t.add("hidden", "true")
        True
        >>> t.properties()
        {'id': 't1', 'name': 'Byte Me', 'hidden': True}
    """

    kind: ClassVar[ContestType] = ContestType.TEAM

    name: str | None = None
    display_name: str | None = None
    organization_id: str | None = None
    group_ids: list[str] | None = None
    hidden: bool = False

    def _add(self, name: str, value: Any) -> bool:
        if name == NAME:
            self.name = coerce_string(value)
            return True
        elif name == DISPLAY_NAME:
            self.display_name = coerce_string(value)
            return True
        elif name == ORGANIZATION_ID:
            self.organization_id = coerce_string(value)
            return True
        elif name == GROUP_IDS:
            if value is None or value == "null":
                self.group_ids = None
            else:
                self.group_ids = parse_string_array(value)
            return True
        elif name == HIDDEN:
            self.hidden = parse_boolean(value)
            return True

        return False

    def _properties(self, props: dict[str, Any]) -> None:
        super()._properties(props)
        if self.name is not None:
            props[NAME] = self.name
        if self.display_name is not None:
            props[DISPLAY_NAME] = self.display_name
        if self.organization_id is not None:
            props[ORGANIZATION_ID] = self.organization_id
        if self.group_ids is not None:
            props[GROUP_IDS] = encode_string_array(self.group_ids)
        if self.hidden:
            props[HIDDEN] = True

    def write_body(self, encoder: JsonEncoder) -> None:
        super().write_body(encoder)
        for key, value in self.properties().items():
            if key == GROUP_IDS:
                encoder.encode_primitive(key, value)
            elif key != ID:
                encoder.encode(key, value)

    def _validate(self, contest: TeamLookup) -> list[str]:
        errors = super()._validate(contest)
        if not self.name:
            errors.append("Name missing")
        return errors
