import json

import pytest

from contest.core.errors import CodecError
from contest.core.serde import (
    JsonEncoder,
    coerce_string,
    encode_string_array,
    parse_boolean,
    parse_string_array,
)


def test_parse_string_array_accepts_lists_tuples_and_text() -> None:
    assert parse_string_array(["a", "b"]) == ["a", "b"]
    assert parse_string_array(("a",)) == ["a"]
    assert parse_string_array('["a","b"]') == ["a", "b"]
    assert parse_string_array("[]") == []


def test_parse_string_array_copies_input() -> None:
    src = ["a"]
    out = parse_string_array(src)
    src.append("b")
    assert out == ["a"]


@pytest.mark.parametrize("value", [42, {"a": 1}, "not json", '"t1"', [1, 2], ["a", None]])
def test_parse_string_array_rejects_malformed(value: object) -> None:
    with pytest.raises(CodecError):
        parse_string_array(value)


@pytest.mark.parametrize(
    "value,expected",
    [(True, True), (False, False), ("true", True), ("TRUE", True), ("false", False), ("yes", False), (None, False), (1, False)],
)
def test_parse_boolean(value: object, expected: bool) -> None:
    assert parse_boolean(value) is expected


def test_coerce_string() -> None:
    assert coerce_string("x") == "x"
    assert coerce_string(None) is None
    with pytest.raises(CodecError):
        coerce_string(3)


def test_encode_string_array_literal() -> None:
    assert encode_string_array([]) == "[]"
    assert encode_string_array(["t1"]) == '["t1"]'
    assert encode_string_array(["t1", "t2"]) == '["t1","t2"]'
    assert parse_string_array(encode_string_array(["t1", "t2"])) == ["t1", "t2"]


def test_json_encoder_writes_primitives_unquoted() -> None:
    enc = JsonEncoder()
    enc.encode("id", "award-1")
    enc.encode("citation", "Ünïcode")
    enc.encode_primitive("team_ids", '["t1"]')
    text = enc.to_json()
    assert text == '{"id":"award-1","citation":"Ünïcode","team_ids":["t1"]}'
    assert json.loads(text)["team_ids"] == ["t1"]


def test_json_encoder_empty_body() -> None:
    assert JsonEncoder().to_json() == "{}"
