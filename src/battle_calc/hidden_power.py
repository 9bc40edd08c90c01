"""
Hidden Power type and base power (gen 3-5 formulas).

The type comes from the lowest bit of each IV and the power from the second
lowest. When only IV ranges are known, each of the 64 bit combinations gets
the probability that uniformly distributed feasible IVs produce it, and the
most probable combination wins.
"""

import itertools
from typing import Callable, Mapping, Optional, Sequence

from src.battle_calc.constants import HIDDEN_POWER_MIN_POWER
from src.battle_calc.enums import Stat, Type
from src.battle_calc.nature import determine_possible_nature_types_for_stat
from src.battle_calc.schema.iv_range import ConfirmedNature, IVRangeSet

HIDDEN_POWER_TYPES = [
    Type.FIGHTING,
    Type.FLYING,
    Type.POISON,
    Type.GROUND,
    Type.ROCK,
    Type.BUG,
    Type.GHOST,
    Type.STEEL,
    Type.FIRE,
    Type.WATER,
    Type.GRASS,
    Type.ELECTRIC,
    Type.PSYCHIC,
    Type.ICE,
    Type.DRAGON,
    Type.DARK,
]

# IVs are given in hp/atk/def/spA/spD/spe order
IV_ORDER = (Stat.HP, Stat.ATTACK, Stat.DEFENSE, Stat.SP_ATTACK, Stat.SP_DEFENSE, Stat.SPEED)

BitPredicate = Callable[[int], bool]


def _type_bit(iv: int) -> bool:
    return iv & 1 == 1


def _power_bit(iv: int) -> bool:
    return iv & 2 == 2


def _weighted_sum(bits: Sequence[bool]) -> int:
    hp, attack, defense, sp_attack, sp_defense, speed = (1 if bit else 0 for bit in bits)
    return hp + 2 * attack + 4 * defense + 8 * speed + 16 * sp_attack + 32 * sp_defense


def _type_from_bits(bits: Sequence[bool]) -> Type:
    return HIDDEN_POWER_TYPES[(_weighted_sum(bits) * 15) // 63]


def _power_from_bits(bits: Sequence[bool]) -> int:
    return (_weighted_sum(bits) * 40) // 63 + HIDDEN_POWER_MIN_POWER


def calculate_hidden_power_type_from_ivs(ivs: Sequence[int]) -> Type:
    """Hidden Power type for exact IVs in hp/atk/def/spA/spD/spe order"""
    return _type_from_bits([_type_bit(iv) for iv in ivs])


def calculate_hidden_power_base_power_from_ivs(ivs: Sequence[int]) -> int:
    """Hidden Power base power (30-70) for exact IVs in hp/atk/def/spA/spD/spe order"""
    return _power_from_bits([_power_bit(iv) for iv in ivs])


def _feasible_ivs(range_set: IVRangeSet, stat: Stat, confirmed_nature: ConfirmedNature) -> list[int]:
    ivs: set[int] = set()
    for variant in determine_possible_nature_types_for_stat(stat, confirmed_nature):
        iv_range = range_set[variant]
        if iv_range is not None:
            ivs.update(iv_range.ivs())
    return sorted(ivs)


def _bit_probability(ivs: list[int], predicate: BitPredicate, expected: bool) -> float:
    if not ivs:
        return 0
    return sum(1 for iv in ivs if predicate(iv) == expected) / len(ivs)


def _most_probable_bits(
    iv_ranges: Mapping[Stat, IVRangeSet],
    confirmed_nature: ConfirmedNature,
    predicate: BitPredicate,
) -> Optional[tuple[bool, ...]]:
    feasible = [_feasible_ivs(iv_ranges[stat], stat, confirmed_nature) for stat in IV_ORDER]

    best, best_probability = None, 0.0
    for bits in itertools.product((False, True), repeat=len(IV_ORDER)):
        probability = 1.0
        for ivs, expected in zip(feasible, bits):
            probability *= _bit_probability(ivs, predicate, expected)

        if probability > best_probability:
            best, best_probability = bits, probability

    return best


def calculate_hidden_power_type(
    iv_ranges: Mapping[Stat, IVRangeSet],
    confirmed_nature: ConfirmedNature,
) -> Optional[Type]:
    """
    Most probable Hidden Power type given inferred IV ranges.

    Returns ``None`` when some stat has no feasible IV at all.
    """
    bits = _most_probable_bits(iv_ranges, confirmed_nature, _type_bit)
    if bits is None:
        return None
    return _type_from_bits(bits)


def calculate_hidden_power_base_power(
    iv_ranges: Mapping[Stat, IVRangeSet],
    confirmed_nature: ConfirmedNature,
) -> Optional[int]:
    bits = _most_probable_bits(iv_ranges, confirmed_nature, _power_bit)
    if bits is None:
        return None
    return _power_from_bits(bits)
