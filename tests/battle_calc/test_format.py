import pytest

from src.battle_calc.enums import Stat
from src.battle_calc.schema.iv_range import IVRange, NatureIVRanges
from src.battle_calc.utils.format import (
    capitalize,
    format_damage_range,
    format_iv_range,
    format_iv_range_set,
    format_stat_name,
    format_stat_range,
)


def rolls(*groups: tuple[int, int]) -> list[int]:
    """Build a sorted roll list from (value, count) pairs"""
    return [value for value, count in groups for _ in range(count)]


@pytest.mark.parametrize(
    "values, expected",
    [
        (rolls((1, 1), (2, 16)), "(1) / 2"),
        (rolls((2, 16), (3, 1)), "2 / (3)"),
        (rolls((1, 1), (2, 15), (3, 1)), "(1) / 2 / (3)"),
        (rolls((2, 15), (3, 2)), "2–3"),
        (rolls((1, 1), (2, 14), (3, 2)), "(1) / 2–3"),
        (rolls((2, 14), (3, 2), (4, 1)), "2–3 / (4)"),
        (rolls((1, 1), (2, 13), (3, 2), (4, 1)), "(1) / 2–3 / (4)"),
        (rolls((5, 16)), "5"),
        (rolls((0, 1), (1, 15)), "(0) / 1"),
    ],
)
def test_format_damage_range(values, expected):
    assert format_damage_range(values) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (IVRange(low=0, high=31), "0+"),
        (IVRange(low=0, high=0), "0"),
        (IVRange(low=0, high=10), "10-"),
        (IVRange(low=31, high=31), "31"),
        (IVRange(low=10, high=31), "10+"),
        (IVRange(low=10, high=10), "10"),
        (IVRange(low=10, high=20), "10–20"),
        (None, "x"),
    ],
)
def test_format_iv_range(value, expected):
    assert format_iv_range(value) == expected


def test_format_iv_range_set():
    values = NatureIVRanges(
        negative=IVRange(low=30, high=31),
        neutral=IVRange(low=6, high=21),
        positive=IVRange(low=0, high=5),
    )
    assert format_iv_range_set(values) == "30+ / 6–21 / 5-"
    assert format_iv_range_set(NatureIVRanges(neutral=IVRange.full())) == "x / 0+ / x"


def test_format_stat_range():
    assert format_stat_range(5, 5) == "5"
    assert format_stat_range(0, 5) == "0–5"


def test_format_stat_name():
    assert format_stat_name(Stat.SP_ATTACK) == "Sp. Attack"
    assert format_stat_name(Stat.SP_ATTACK, short_form=True) == "SP ATK"
    assert format_stat_name(Stat.HP, short_form=True) == "HP"


def test_capitalize():
    assert capitalize("torrent") == "Torrent"
    assert capitalize("") == ""
