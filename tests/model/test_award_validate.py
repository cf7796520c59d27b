"""Validation for `contest.model.award.Award` against an aggregate."""

import pytest

from contest.model.award import Award
from contest.model.contest import Contest
from contest.model.team import Team


def make_contest(*team_ids: str) -> Contest:
    contest = Contest()
    for team_id in team_ids:
        contest.add(Team(id=team_id, name=f"Team {team_id}"))
    return contest


def test_clean_award_validates_to_none() -> None:
    result = Award(id="winner", citation="Winner", team_ids=["t1"]).validate(make_contest("t1"))
    assert result is None


def test_missing_team_reported_once_in_order() -> None:
    award = Award(id="winner", citation="Winner", team_ids=["t1", "t9", "t2"])
    assert award.validate(make_contest("t1", "t2")) == ["Invalid team t9"]


def test_all_unresolved_teams_accumulate_in_list_order() -> None:
    award = Award(id="winner", citation="Winner", team_ids=["t8", "t1", "t9"])
    assert award.validate(make_contest("t1")) == ["Invalid team t8", "Invalid team t9"]


@pytest.mark.parametrize("citation", [None, ""])
def test_missing_citation(citation: str | None) -> None:
    assert Award(id="winner", citation=citation).validate(make_contest()) == ["Citation missing"]


def test_citation_error_precedes_team_errors() -> None:
    award = Award(id="winner", team_ids=["t9"])
    assert award.validate(make_contest()) == ["Citation missing", "Invalid team t9"]


@pytest.mark.parametrize("team_ids", [None, []])
def test_absent_or_empty_team_list_has_no_reference_errors(team_ids: list[str] | None) -> None:
    assert Award(id="winner", citation="Winner", team_ids=team_ids).validate(make_contest()) is None


def test_identity_errors_come_first() -> None:
    assert Award().validate(make_contest()) == ["Missing id", "Citation missing"]
    assert Award(id="bad id", citation="x").validate(make_contest()) == ["Invalid id bad id"]


def test_validation_does_not_mutate() -> None:
    award = Award(id="winner", team_ids=["t9"])
    before = award.model_copy(deep=True)
    award.validate(make_contest())
    assert award == before


class _Lookup:
    def __init__(self, known: set[str]) -> None:
        self.known = known
        self.calls: list[str] = []

    def get_team_by_id(self, team_id: str) -> object | None:
        self.calls.append(team_id)
        return object() if team_id in self.known else None


def test_any_team_lookup_works() -> None:
    lookup = _Lookup({"a"})
    award = Award(id="winner", citation="Winner", team_ids=["a", "b"])
    assert award.validate(lookup) == ["Invalid team b"]
    assert lookup.calls == ["a", "b"]
