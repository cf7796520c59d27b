"""Base contract shared by entity kinds (`contest.model.entity`)."""

from typing import Any

import pytest
from pydantic import ValidationError

from contest.core.errors import CodecError, UnknownFieldError
from contest.core.grammar import ContestType, DisplayMode
from contest.model.award import Award
from contest.model.entity import ContestObject, apply_patch
from contest.model.team import Team


@pytest.mark.parametrize("cls,kind", [(Award, ContestType.AWARD), (Team, ContestType.TEAM)])
def test_kind_is_fixed_per_class(cls: type, kind: ContestType) -> None:
    assert cls.kind is kind
    assert "kind" not in cls().model_dump()


def test_id_is_frozen_after_construction() -> None:
    a = Award(id="winner")
    with pytest.raises(ValidationError):
        a.id = "rank-1"  # type: ignore[misc]
    assert a.id == "winner"


def test_id_is_not_patchable() -> None:
    a = Award(id="winner")
    assert a.add("id", "rank-1") is False
    assert a.id == "winner"


def test_apply_patch_accepts_mapping_and_pairs() -> None:
    a = Award(id="winner")
    assert apply_patch(a, {"citation": "Winner", "colour": "red"}) == ["colour"]
    b = Award(id="winner")
    assert apply_patch(b, [("show", "false"), ("x", 1), ("y", 2)]) == ["x", "y"]
    assert b.display_mode is DisplayMode.PAUSE


def test_apply_patch_applies_in_order() -> None:
    a = Award(id="winner")
    apply_patch(a, [("display_mode", "list"), ("show", True)])
    assert a.display_mode is DisplayMode.DETAIL


def test_apply_patch_strict_raises_on_unknown_field() -> None:
    a = Award(id="winner")
    with pytest.raises(UnknownFieldError) as ei:
        apply_patch(a, [("citation", "Winner"), ("colour", "red"), ("parameter", "p")], strict=True)
    assert ei.value.kind == "award"
    assert ei.value.name == "colour"
    assert str(ei.value) == "unknown award field 'colour'"
    # fields before the unknown one were applied
    assert a.citation == "Winner"
    assert a.parameter is None


def test_apply_patch_propagates_codec_errors() -> None:
    with pytest.raises(CodecError):
        apply_patch(Award(id="winner"), {"team_ids": 5})


def test_diff_of_new_entity_is_full_export() -> None:
    a = Award(id="winner", citation="Winner")
    assert a.diff(None) == a.properties()


def test_diff_reports_changed_and_removed_properties() -> None:
    a = Award(id="winner", citation="Winner", team_ids=["t1"], parameter="p")
    before = a.model_copy(deep=True)
    a.add("team_ids", ["t2"])
    a.add("parameter", None)
    a.add("display_mode", "pause")
    assert a.diff(before) == {
        "id": "winner",
        "team_ids": '["t2"]',
        "display_mode": "pause",
        "parameter": None,
    }


def _replay(before: ContestObject, changes: dict[str, Any]) -> ContestObject:
    target = before.model_copy(deep=True)
    apply_patch(target, {k: v for k, v in changes.items() if k != "id"})
    return target


def test_diff_resets_display_mode_to_detail() -> None:
    a = Award(id="winner", citation="Winner", display_mode=DisplayMode.PAUSE)
    before = a.model_copy(deep=True)
    a.add("show", True)
    changes = a.diff(before)
    assert changes == {"id": "winner", "display_mode": "detail"}
    replayed = _replay(before, changes)
    assert isinstance(replayed, Award)
    assert replayed.effective_display_mode is DisplayMode.DETAIL
    assert replayed.properties() == a.properties()


@pytest.mark.parametrize(
    "start,patch",
    [
        ({"display_mode": "ignore"}, [("display_mode", "detail"), ("parameter", None)]),
        ({"display_mode": "list"}, [("team_ids", None), ("citation", None)]),
        ({}, [("show", False), ("team_ids", "[]")]),
        ({"show": False}, [("team_ids", ["t2", "t3"]), ("show", "true")]),
    ],
)
def test_diff_replayed_on_previous_state_reproduces_award(
    start: dict[str, Any], patch: list[tuple[str, Any]]
) -> None:
    a = Award(id="rank-1", citation="First", team_ids=["t1"], parameter="p")
    apply_patch(a, start)
    before = a.model_copy(deep=True)
    apply_patch(a, patch)
    replayed = _replay(before, a.diff(before))
    assert replayed.properties() == a.properties()
    assert replayed.to_json() == a.to_json()


def test_diff_replayed_on_previous_state_reproduces_team() -> None:
    t = Team(id="t1", name="Byte Me", group_ids=["g1"], hidden=True)
    before = t.model_copy(deep=True)
    apply_patch(t, [("hidden", False), ("group_ids", None), ("display_name", "BM")])
    replayed = _replay(before, t.diff(before))
    assert replayed.properties() == t.properties()


def test_diff_without_changes_only_carries_id() -> None:
    a = Award(id="winner", citation="Winner")
    assert a.diff(a.model_copy(deep=True)) == {"id": "winner"}


def test_model_copy_does_not_share_team_list() -> None:
    a = Award(id="winner", team_ids=["t1"])
    b = a.model_copy(deep=True)
    assert a.team_ids is not None and b.team_ids is not None
    a.team_ids.append("t2")
    assert b.team_ids == ["t1"]


def test_unknown_constructor_fields_rejected() -> None:
    with pytest.raises(ValidationError):
        Award(id="winner", show=False)  # type: ignore[call-arg]
