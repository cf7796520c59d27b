"""Feed event application on the in-memory `Contest` aggregate."""

import pytest
from loguru import logger

from contest.core.errors import CodecError, UnknownFieldError
from contest.core.grammar import ContestType
from contest.model.award import Award
from contest.model.config import ModelSettings
from contest.model.contest import Contest
from contest.model.team import Team


def test_create_patch_and_delete() -> None:
    c = Contest()
    created = c.apply_event("award", "winner", {"id": "winner", "citation": "Winner"})
    assert created == {"id": "winner", "citation": "Winner"}
    award = c.get_award_by_id("winner")
    assert isinstance(award, Award)

    changed = c.apply_event(ContestType.AWARD, "winner", {"team_ids": ["t1"]})
    assert changed == {"id": "winner", "team_ids": '["t1"]'}
    assert c.get_award_by_id("winner") is award

    assert c.apply_event("award", "winner", None) is None
    assert c.get_award_by_id("winner") is None
    assert len(c) == 0


def test_delete_of_unknown_entity_is_a_no_op() -> None:
    assert Contest().apply_event("team", "ghost", None) is None


def test_data_id_must_match_event_id() -> None:
    with pytest.raises(CodecError):
        Contest().apply_event("award", "winner", {"id": "rank-1"})


def test_unknown_kind_raises() -> None:
    with pytest.raises(ValueError):
        Contest().apply_event("problem", "A", {})


def test_malformed_event_is_rejected_and_new_entity_not_stored() -> None:
    c = Contest()
    with pytest.raises(CodecError):
        c.apply_event("award", "winner", {"citation": "Winner", "team_ids": 7})
    assert c.get_award_by_id("winner") is None


def test_unknown_fields_ignored_unless_strict() -> None:
    lenient = Contest()
    lenient.apply_event("award", "winner", {"citation": "Winner", "future_field": 1})
    assert lenient.get_award_by_id("winner") is not None

    strict = Contest(ModelSettings(strict_fields=True))
    with pytest.raises(UnknownFieldError):
        strict.apply_event("award", "winner", {"citation": "Winner", "future_field": 1})
    assert strict.get_award_by_id("winner") is None


def test_validate_reports_only_invalid_entities() -> None:
    c = Contest()
    c.add(Team(id="t1", name="A"))
    c.add(Award(id="winner", citation="Winner", team_ids=["t1"]))
    c.add(Award(id="rank-2", team_ids=["t1", "t9"]))
    assert c.validate() == {"award/rank-2": ["Citation missing", "Invalid team t9"]}


def test_validate_on_apply_logs_but_does_not_reject() -> None:
    messages: list[str] = []
    logger.enable("contest")
    handler_id = logger.add(lambda m: messages.append(str(m)), level="WARNING", format="{message}")
    try:
        c = Contest(ModelSettings(validate_on_apply=True))
        c.apply_event("award", "winner", {"team_ids": ["t9"]})
    finally:
        logger.remove(handler_id)
        logger.disable("contest")
    assert c.get_award_by_id("winner") is not None
    assert any("Citation missing; Invalid team t9" in m for m in messages)


def test_registry_accessors() -> None:
    c = Contest()
    c.add(Team(id="t1", name="A"))
    c.add(Team(id="t2", name="B"))
    c.add(Award(id="winner", citation="W"))
    assert [t.id for t in c.teams] == ["t1", "t2"]
    assert [a.id for a in c.awards] == ["winner"]
    assert c.get("team", "t2") is c.get_team_by_id("t2")
    assert isinstance(c.remove(ContestType.TEAM, "t2"), Team)
    assert c.get_team_by_id("t2") is None


def test_add_requires_id() -> None:
    with pytest.raises(ValueError):
        Contest().add(Award())
