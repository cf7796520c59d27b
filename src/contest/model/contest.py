"""
In-memory aggregate that owns entities and resolves id references.

Applies feed events (create, patch, delete) to entities through the shared
patch contract and answers the lookups validation needs.

Notes
- Not synchronized; one writer at a time.
- Codec errors from a malformed event are logged and re-raised so the feed
  step can reject the event. The entity may be partially patched at that point.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from loguru import logger

from contest.core.errors import CodecError
from contest.core.grammar import ContestType, contest_type_from_value
from contest.core.typing import EntityId, TeamId

from .award import Award
from .config import ModelSettings
from .entity import ID, ContestObject, apply_patch
from .team import Team

__all__ = [
    "ENTITY_TYPES",
    "Contest",
]

ENTITY_TYPES: dict[ContestType, type[ContestObject]] = {
    ContestType.TEAM: Team,
    ContestType.AWARD: Award,
}


class Contest:
    """
    Registry of contest entities keyed by kind then id.

    Args:
        settings (ModelSettings | None): Strictness and validate-on-apply flags.

    Examples:
        >>> c = Contest()
        >>> _ = c.apply_event("team", "t1", {"name": "Byte Me"})
        >>> c.apply_event("award", "winner", {"citation": "Winner", "team_ids": ["t1"]})
        {'id': 'winner', 'citation': 'Winner', 'team_ids': '["t1"]'}
        >>> c.validate()
        {}
    """

    def __init__(self, settings: ModelSettings | None = None) -> None:
        self.settings = settings or ModelSettings()
        self._objects: dict[ContestType, dict[str, ContestObject]] = {
            kind: {} for kind in ENTITY_TYPES
        }

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def add(self, obj: ContestObject) -> None:
        """Insert or replace an entity under its kind and id."""
        if obj.id is None:
            raise ValueError(f"cannot register a {obj.kind.value} without an id")
        self._objects[obj.kind][obj.id] = obj

    def remove(self, kind: ContestType | str, obj_id: str) -> ContestObject | None:
        return self._objects[_kind(kind)].pop(obj_id, None)

    def get(self, kind: ContestType | str, obj_id: str) -> ContestObject | None:
        return self._objects[_kind(kind)].get(obj_id)

    def get_team_by_id(self, team_id: TeamId | str) -> Team | None:
        return self._objects[ContestType.TEAM].get(team_id)  # type: ignore[return-value]

    def get_award_by_id(self, award_id: str) -> Award | None:
        return self._objects[ContestType.AWARD].get(award_id)  # type: ignore[return-value]

    @property
    def teams(self) -> list[Team]:
        return list(self._objects[ContestType.TEAM].values())  # type: ignore[arg-type]

    @property
    def awards(self) -> list[Award]:
        return list(self._objects[ContestType.AWARD].values())  # type: ignore[arg-type]

    def __len__(self) -> int:
        return sum(len(objs) for objs in self._objects.values())

    # ------------------------------------------------------------------
    # Feed events
    # ------------------------------------------------------------------

    def apply_event(
        self,
        kind: ContestType | str,
        obj_id: EntityId | str,
        data: Mapping[str, Any] | None,
    ) -> dict[str, Any] | None:
        """
        Apply one feed event for an entity.

        Args:
            kind (ContestType | str): Entity kind (enum or lower_snake value).
            obj_id (EntityId | str): Entity id from the event envelope.
            data (Mapping[str, Any] | None): Field values to patch, or None to
                delete the entity. A contained ``id`` must equal obj_id.

        Returns:
            dict[str, Any] | None: The change diff of the entity (its full
            properties when created), or None for a deletion.

        Raises:
            CodecError: If a field value is malformed or the data id disagrees
                with obj_id.
            UnknownFieldError: If settings.strict_fields and a field is unknown.
        """
        k = _kind(kind)
        if data is None:
            removed = self.remove(k, obj_id)
            logger.debug("deleted {} {!r} (present={})", k.value, obj_id, removed is not None)
            return None

        fields = dict(data)
        data_id = fields.pop(ID, obj_id)
        if data_id != obj_id:
            raise CodecError(f"{k.value} event id {obj_id!r} does not match data id {data_id!r}")

        current = self.get(k, obj_id)
        previous = current.model_copy(deep=True) if current is not None else None
        obj = current if current is not None else ENTITY_TYPES[k](id=obj_id)

        try:
            unhandled = apply_patch(obj, fields, strict=self.settings.strict_fields)
        except CodecError as exc:
            logger.warning("rejected {} {!r} event: {}", k.value, obj_id, exc)
            raise
        if unhandled:
            logger.debug("{} {!r}: unhandled fields {}", k.value, obj_id, unhandled)

        self.add(obj)

        if self.settings.validate_on_apply:
            errors = obj.validate(self)
            if errors is not None:
                logger.warning("{} {!r} invalid: {}", k.value, obj_id, "; ".join(errors))

        return obj.diff(previous)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self) -> dict[str, list[str]]:
        """
        Validate every entity.

        Returns:
            dict[str, list[str]]: ``"<kind>/<id>"`` to errors, for invalid entities only.
        """
        problems: dict[str, list[str]] = {}
        for kind, objs in self._objects.items():
            for obj_id, obj in objs.items():
                errors = obj.validate(self)
                if errors is not None:
                    problems[f"{kind.value}/{obj_id}"] = errors
        return problems


def _kind(kind: ContestType | str) -> ContestType:
    return kind if isinstance(kind, ContestType) else contest_type_from_value(kind)
