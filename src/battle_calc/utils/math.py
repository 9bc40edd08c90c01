"""
Arithmetic the games do in fixed point or single precision.
"""

import math
import struct
from typing import Iterable

from src.battle_calc.enums import Generation


def to_float32(value: float) -> float:
    """Round a double to the nearest single-precision value"""
    return struct.unpack("f", struct.pack("f", value))[0]


def integer_multiply(*values: float) -> int:
    """Multiply starting from 1, flooring after every step"""
    result = 1
    for value in values:
        result = math.floor(result * value)
    return result


def to_4096_numerator(value: float) -> int:
    """Multiplier expressed in 4096ths, rounded half up"""
    return math.floor(value * 4096 + 0.5)


def multiply_for_generation(value: float, multiplier: float, generation: Generation) -> float:
    """
    Apply one multiplier the way the generation does.

    Gen 5, 7, 8 and LGPE multiply by the 4096ths numerator and round half
    down; everything else floors.
    """
    if generation.uses_4096_rounding():
        preliminary = int(value) * to_4096_numerator(multiplier)
        requires_adjustment = (preliminary & 4095) > 2048
        preliminary >>= 12

        return to_float32(preliminary + 1 if requires_adjustment else preliminary)

    return to_float32(math.floor(value * multiplier))


def multiply_all_for_generation(value: float, multipliers: Iterable[float], generation: Generation) -> float:
    for multiplier in multipliers:
        value = multiply_for_generation(value, multiplier, generation)
    return value


def gamefreak_power_of_two_point_five(value: float) -> float:
    """x ** 2.5 as x * x * sqrt(x), every step in single precision"""
    rounded = to_float32(value)
    return to_float32(to_float32(rounded * rounded) * to_float32(math.sqrt(rounded)))
