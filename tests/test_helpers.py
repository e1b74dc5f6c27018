"""Testes das funções auxiliares"""
import pytest
from football_stats.api.helpers import parse_number
from football_stats.schemas.team_season import INT32_MAX, INT32_MIN


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("5", 5),
        (" 12 ", 12),
        ("4.5", 4.5),
        ("2005.0", 2005),
        ("-1", -1),
    ],
)
def test_parse_number(raw, expected):
    value = parse_number(raw)
    assert value == expected
    assert type(value) is type(expected)


@pytest.mark.parametrize("raw", [None, "", "  ", "abc", "NaN", "inf", "5 goals"])
def test_parse_number_rejects(raw):
    assert parse_number(raw) is None


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1e30", INT32_MAX),
        ("-1e30", INT32_MIN),
        (str(10**20), INT32_MAX),
        ("2147483647", INT32_MAX),
    ],
)
def test_parse_number_clamps_to_int4(raw, expected):
    value = parse_number(raw)
    assert value == expected
    assert type(value) is int
