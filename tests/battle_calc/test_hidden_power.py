import pytest

from src.battle_calc.enums import Stat, Type
from src.battle_calc.hidden_power import (
    calculate_hidden_power_base_power,
    calculate_hidden_power_base_power_from_ivs,
    calculate_hidden_power_type,
    calculate_hidden_power_type_from_ivs,
)
from src.battle_calc.schema.iv_range import ConfirmedNature, IVRange, IVRangeSet

VECTORS = [
    ((0, 0, 0, 0, 0, 0), Type.FIGHTING, 30),
    ((0, 1, 2, 3, 4, 5), Type.GHOST, 42),
    ((31, 31, 31, 31, 31, 31), Type.DARK, 70),
]

ORDER = (Stat.HP, Stat.ATTACK, Stat.DEFENSE, Stat.SP_ATTACK, Stat.SP_DEFENSE, Stat.SPEED)


def make_exact_ranges(ivs) -> dict:
    """Neutral-only ranges holding one IV per stat"""
    return {stat: IVRangeSet.from_variants(None, IVRange.single(iv), None) for stat, iv in zip(ORDER, ivs)}


@pytest.mark.parametrize("ivs, hidden_power_type, _", VECTORS)
def test_type_from_ivs(ivs, hidden_power_type, _):
    assert calculate_hidden_power_type_from_ivs(ivs) == hidden_power_type


@pytest.mark.parametrize("ivs, _, power", VECTORS)
def test_base_power_from_ivs(ivs, _, power):
    assert calculate_hidden_power_base_power_from_ivs(ivs) == power


@pytest.mark.parametrize("ivs, hidden_power_type, power", VECTORS)
def test_from_single_value_ranges(ivs, hidden_power_type, power):
    ranges = make_exact_ranges(ivs)

    assert calculate_hidden_power_type(ranges, ConfirmedNature()) == hidden_power_type
    assert calculate_hidden_power_base_power(ranges, ConfirmedNature()) == power


def test_confirmed_neutral_nature_uses_neutral_range():
    ranges = make_exact_ranges((31, 31, 31, 31, 31, 31))
    ranges[Stat.ATTACK] = IVRangeSet.from_variants(IVRange.single(0), IVRange.single(31), None)

    confirmed = ConfirmedNature(reduced=Stat.ATTACK, boosted=Stat.ATTACK)

    assert calculate_hidden_power_type(ranges, confirmed) == Type.DARK


def test_no_feasible_ivs():
    ranges = {stat: IVRangeSet.from_variants(None, None, None) for stat in ORDER}

    assert calculate_hidden_power_type(ranges, ConfirmedNature()) is None
    assert calculate_hidden_power_base_power(ranges, ConfirmedNature()) is None
