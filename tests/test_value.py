from datetime import datetime, timedelta, timezone

import pytest

from envbind.value import ZERO_TIME, Value, parse_duration, parse_time


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("30m", timedelta(minutes=30)),
        ("1h", timedelta(hours=1)),
        ("2h", timedelta(hours=2)),
        ("1d", timedelta(hours=24)),
        ("3d", timedelta(hours=3 * 24)),
        ("1w2d2h30m", timedelta(hours=9 * 24 + 2, minutes=30)),
    ],
)
def test_as_duration(raw, expected):
    assert Value(raw).as_duration() == expected


def test_as_duration_one_second():
    assert Value("1s").as_duration() == timedelta(seconds=1)


def test_as_duration_invalid_is_zero():
    assert Value("soon").as_duration() == timedelta(0)


def test_parse_duration_rejects_unknown_unit():
    with pytest.raises(ValueError):
        parse_duration("5x")


@pytest.mark.parametrize(
    "raw, delimiter, expected",
    [
        ("A,B,C", ",", ["A", "B", "C"]),
        ("A B C", " ", ["A", "B", "C"]),
        ("A;B;C", ";", ["A", "B", "C"]),
        ("X;Y;Z", ";", ["X", "Y", "Z"]),
        ("foo,bar", ",", ["foo", "bar"]),
    ],
)
def test_as_string_slice(raw, delimiter, expected):
    assert Value(raw).as_string_slice(delimiter) == expected


def test_as_string_slice_empty():
    assert Value("").as_string_slice(";") == []


def test_is_zero():
    assert Value("  ").is_zero()
    assert not Value("x").is_zero()


def test_integers():
    assert Value("42").as_int() == 42
    assert Value("-5").as_int8() == -5
    assert Value("128").as_int8() == 0
    assert Value("abc").as_int() == 0
    assert Value("-1").as_uint() == 0
    assert Value("255").as_uint8() == 255
    assert Value("256").as_uint8() == 0


def test_floats_and_bools():
    assert Value("1.5").as_float64() == 1.5
    assert Value("1.5").as_float32() == 1.5
    assert Value("nope").as_float64() == 0.0
    assert Value("true").as_bool() is True
    assert Value("T").as_bool() is True
    assert Value("yes").as_bool() is False


def test_as_string():
    assert Value("bar").as_string() == "bar"


def test_as_time_with_layout():
    expected = datetime(2021, 12, 24, 17, 4, 5, tzinfo=timezone.utc)
    assert Value("2021-12-24T17:04:05").as_time("2006-01-02T15:04:05") == expected


def test_parse_time_with_zone():
    parsed = parse_time("2006-01-02T15:04:05Z07:00", "2021-12-24T17:04:05+02:00")
    assert parsed.utcoffset() == timedelta(hours=2)
    assert parsed.hour == 17


def test_as_time_invalid_is_zero():
    assert Value("garbage").as_time("2006-01-02") == ZERO_TIME