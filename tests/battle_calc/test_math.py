import pytest

from src.battle_calc.enums import Generation
from src.battle_calc.utils.math import (
    gamefreak_power_of_two_point_five,
    integer_multiply,
    multiply_all_for_generation,
    multiply_for_generation,
    to_4096_numerator,
    to_float32,
)


def test_integer_multiply_floors_each_step():
    assert integer_multiply(3, 2.5) == 7
    assert integer_multiply(3, 2.5, 1.5) == 10


@pytest.mark.parametrize(
    "generation, expected",
    [
        (Generation.GEN_4, 67),
        (Generation.GEN_5, 68),
        (Generation.GEN_6, 67),
        (Generation.GEN_7, 68),
        (Generation.LGPE, 68),
    ],
)
def test_multiply_for_generation(generation, expected):
    assert multiply_for_generation(50, 1.35, generation) == expected


def test_multiply_all_applies_in_sequence():
    assert multiply_all_for_generation(50, [1.35, 1], Generation.GEN_5) == 68
    assert multiply_all_for_generation(50, [], Generation.GEN_5) == 50


def test_to_4096_numerator_rounds_half_up():
    assert to_4096_numerator(1.35) == 5530
    assert to_4096_numerator(1.5) == 6144


def test_float32_rounding():
    assert to_float32(0.1) != 0.1
    assert to_float32(0.5) == 0.5


def test_gamefreak_power_of_two_point_five():
    assert gamefreak_power_of_two_point_five(15) == 871.4212646484375
    assert gamefreak_power_of_two_point_five(1) == 1
