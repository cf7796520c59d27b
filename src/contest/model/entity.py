"""
Base contract shared by every contest entity kind.

Each entity supports three operations uniformly:
- ``add(name, value)`` applies one named field from a feed patch and reports
  whether the kind recognized it.
- ``properties()`` exports the current state as a minimal mapping (fields equal
  to their documented default are omitted; ``id`` is always present). The same
  mapping drives change diffs and full serialization, so anything exported can
  be fed back through ``add``.
- ``validate(contest)`` returns None when the entity is consistent, otherwise a
  non-empty list of human-readable errors.

Responsibilities
- Hold the immutable identity (``id``) and dispatch patches to kind hooks.
- Provide the export, JSON body, diff, and validation skeletons.
- Offer ``apply_patch`` for call sites that apply a whole event.

Notes
- Kinds override the ``_add``, ``_properties``, ``_removed_value``, ``write_body`` and
  ``_validate`` hooks and call ``super()`` first where the base contributes.
- Unknown field names are not errors here; callers choose strictness.
- Invalid state is never raised, only reported by ``validate``.
- No locking: concurrent patches to one entity must be serialized by the caller.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, Protocol

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from contest.core.errors import UnknownFieldError
from contest.core.grammar import ContestType, is_valid_id
from contest.core.serde import JsonEncoder
from contest.core.typing import FieldPairs

__all__ = [
    "ID",
    "TeamLookup",
    "ContestObject",
    "apply_patch",
]

ID = "id"


class TeamLookup(Protocol):
    """Aggregate surface consulted by validation to resolve team references."""

    def get_team_by_id(self, team_id: str) -> Any | None: ...


class ContestObject(BaseModel):
    """
    Identity plus the patch/export/validate skeleton.

    Attributes:
        id (str | None): Identifier assigned by the creator; frozen after
            construction. None only for an empty object awaiting its feed data.
        kind (ClassVar[ContestType]): Entity kind, fixed per subclass.

    Examples:
        >>> from contest.model.award import Award
        >>> a = Award(id="winner")
        >>> a.add("citation", "Contest Winner")
        True
        >>> a.add("colour", "blue")
        False
        >>> a.properties()
        {'id': 'winner', 'citation': 'Contest Winner'}
    """

    model_config = ConfigDict(extra="forbid")

    kind: ClassVar[ContestType]

    id: str | None = Field(default=None, frozen=True)

    # ------------------------------------------------------------------
    # Patch
    # ------------------------------------------------------------------

    def add(self, name: str, value: Any) -> bool:
        """
        Apply one named field.

        Args:
            name (str): Feed field name.
            value (Any): Raw feed value (decoded JSON scalar/array, JSON text, or None).

        Returns:
            bool: True if this kind consumed the field; False if it was ignored.

        Raises:
            contest.core.errors.CodecError: If the value cannot be coerced for a
                recognized field. Raised from the coercion helper unchanged.
        """
        handled = self._add(name, value)
        if not handled:
            logger.debug("{} {!r}: ignored field {!r}", self.kind.value, self.id, name)
        return handled

    def _add(self, name: str, value: Any) -> bool:
        # The base recognizes nothing; id is construction-only.
        return False

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def properties(self) -> dict[str, Any]:
        """Return the minimal property mapping, ``id`` first."""
        props: dict[str, Any] = {ID: self.id}
        self._properties(props)
        return props

    def _properties(self, props: dict[str, Any]) -> None:
        pass

    def write_body(self, encoder: JsonEncoder) -> None:
        """Emit this entity's JSON object body through the key/value encoder."""
        encoder.encode(ID, self.id)

    def to_json(self) -> str:
        encoder = JsonEncoder()
        self.write_body(encoder)
        return encoder.to_json()

    def diff(self, previous: ContestObject | None) -> dict[str, Any]:
        """
        Compute the change set between an earlier snapshot and this entity.

        Args:
            previous (ContestObject | None): Earlier state of the same entity,
                or None when the entity is new.

        Returns:
            dict[str, Any]: ``id`` plus every exported property whose value
            changed; properties no longer exported map to ``_removed_value(name)``.
            A new entity yields its full ``properties()``.
        """
        current = self.properties()
        if previous is None:
            return current
        before = previous.properties()
        changes: dict[str, Any] = {ID: self.id}
        for name, value in current.items():
            if name not in before or before[name] != value:
                changes[name] = value
        for name in before:
            if name not in current:
                changes[name] = self._removed_value(name)
        return changes

    def _removed_value(self, name: str) -> Any:
        # Wire value that restores a property's default when patched back in.
        return None

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self, contest: TeamLookup) -> list[str] | None:  # type: ignore[override]
        """
        Check identity and kind-specific consistency against the aggregate.

        Args:
            contest (TeamLookup): Owning aggregate used for reference checks.

        Returns:
            list[str] | None: None when there are no errors, otherwise the
            errors in check order.
        """
        errors = self._validate(contest)
        if not errors:
            return None
        return errors

    def _validate(self, contest: TeamLookup) -> list[str]:
        errors: list[str] = []
        if not self.id:
            errors.append("Missing id")
        elif not is_valid_id(self.id):
            errors.append(f"Invalid id {self.id}")
        return errors


def apply_patch(obj: ContestObject, fields: FieldPairs, *, strict: bool = False) -> list[str]:
    """
    Apply a patch to an entity one field at a time, in order.

    Args:
        obj (ContestObject): Target entity (mutated in place).
        fields (FieldPairs): Mapping or ordered (name, value) pairs.
        strict (bool): Raise on the first field the kind does not recognize.

    Returns:
        list[str]: Names of unhandled fields, in input order.

    Raises:
        UnknownFieldError: If strict and a field is not recognized. Fields
            before it have already been applied.
        contest.core.errors.CodecError: If a recognized field's value is malformed.

    Examples:
        >>> from contest.model.award import Award
        >>> a = Award(id="rank-1")
        >>> apply_patch(a, {"citation": "First place", "team_ids": ["t1"], "extra": 1})
        ['extra']
    """
    pairs = fields.items() if isinstance(fields, Mapping) else fields
    unhandled: list[str] = []
    for name, value in pairs:
        if obj.add(name, value):
            continue
        if strict:
            raise UnknownFieldError(obj.kind.value, name)
        unhandled.append(name)
    return unhandled
