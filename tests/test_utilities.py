import pytest

from trafficctl.utilities import parse_hex_u32, parse_u32, valid_iso8601


def test_valid_iso8601_example():
    assert valid_iso8601("2020-06-25T15:29:37") is True


def test_valid_iso8601_leap_day():
    assert valid_iso8601("2024-02-29T00:00:00") is True


@pytest.mark.parametrize(
    "text",
    [
        "2020-06-25T15:29:3",
        "2020-06-25T15:29:370",
        "2020/06/25T15:29:37",
        "2020-06-25 15:29:37",
        "2020-06-25T15-29:37",
        "20a0-06-25T15:29:37",
        "2020-02-30T00:00:00",
        "2020-13-01T00:00:00",
        "2020-06-25T24:00:00",
        "2020-06-25T12:60:00",
        "2020-06-25T12:00:60",
        "2000-01-01T00:00:00",
    ],
)
def test_valid_iso8601_rejects(text):
    assert valid_iso8601(text) is False


def test_parse_hex_max():
    assert parse_hex_u32("FFFFFFFF") == 0xFFFFFFFF


def test_parse_hex_case_insensitive():
    assert parse_hex_u32("ab12") == parse_hex_u32("AB12")


@pytest.mark.parametrize("value", [0, 1, 0x3F, 0xFFF, 0x0FFFFFFF])
def test_parse_hex_round_trip(value):
    assert parse_hex_u32(format(value, "X")) == value


@pytest.mark.parametrize("text", ["", "123456789", "G1", "0x10", "-1", " 1"])
def test_parse_hex_rejects(text):
    with pytest.raises(ValueError):
        parse_hex_u32(text)


def test_parse_u32_max():
    assert parse_u32("4294967295") == 0xFFFFFFFF


@pytest.mark.parametrize("value", [0, 7, 1320, 20241206])
def test_parse_u32_round_trip(value):
    assert parse_u32(str(value)) == value


@pytest.mark.parametrize(
    "text", ["", "4294967296", "12a", "-1", "00000000001", "9999999999", " 5"]
)
def test_parse_u32_rejects(text):
    with pytest.raises(ValueError):
        parse_u32(text)