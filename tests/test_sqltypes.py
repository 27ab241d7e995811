from datetime import datetime

import pytest

from anttools.sqltypes import JsonValue, NullableTime


def test_json_null_forms():
    assert JsonValue(None).is_null()
    assert JsonValue(b"").is_null()
    assert JsonValue(b"null").is_null()
    assert not JsonValue(b"{}").is_null()


def test_json_null_stores_as_none():
    assert JsonValue(b"null").to_db() is None
    assert JsonValue(None).to_db() is None


def test_json_db_round_trip():
    value = JsonValue.from_db(b'{"a": [1, 2]}')
    assert value.to_db() == '{"a": [1, 2]}'
    assert JsonValue.from_db(value.to_db()) == value


def test_json_from_db_none():
    assert JsonValue.from_db(None) == JsonValue(None)


def test_json_from_db_rejects_other_types():
    with pytest.raises(TypeError):
        JsonValue.from_db(42)


def test_json_marshal_nil_is_null_literal():
    assert JsonValue(None).to_json() == b"null"


def test_json_json_round_trip():
    text = b'[1,"two",{"three":3}]'
    assert JsonValue.from_json(text).to_json() == text
    assert JsonValue.from_json(text.decode()) == JsonValue(text)


def test_json_equality():
    assert JsonValue(b"[1]") == JsonValue.from_json(b"[1]")
    assert not JsonValue(b"[1]") == JsonValue(b"[2]")


def test_time_zero_marshals_to_empty_string():
    assert NullableTime().to_json() == b'""'
    assert NullableTime(datetime(1, 1, 1)).to_json() == b'""'


def test_time_json_round_trip():
    data = b'"2020-10-24 12:00:00"'
    parsed = NullableTime.from_json(data)
    assert parsed.time == datetime(2020, 10, 24, 12, 0, 0)
    assert parsed.to_json() == data


def test_time_from_empty_json_is_zero():
    assert NullableTime.from_json(b'""').is_zero
    assert NullableTime.from_json('""').to_db() is None


def test_time_from_bad_json_raises():
    with pytest.raises(ValueError):
        NullableTime.from_json(b'"24/10/2020"')


def test_time_db_round_trip():
    moment = datetime(2020, 10, 24, 12, 0, 0)
    stored = NullableTime.from_db(moment).to_db()
    assert stored == "2020-10-24 12:00:00"
    assert NullableTime.from_json(f'"{stored}"').time == moment


def test_time_zero_stores_as_none():
    assert NullableTime.from_db(datetime(1, 1, 1)).to_db() is None


def test_time_from_db_rejects_non_datetime():
    with pytest.raises(TypeError, match="can not convert"):
        NullableTime.from_db("2020-10-24")