"""
Stat formulas for every supported generation.

All intermediate values are non-negative, so flooring and truncation agree.
Nature multipliers are applied as floats (0.9 / 1.0 / 1.1) and floored
afterwards, the way the games' own results come out.
"""

import math
from typing import Optional

from pydantic import BaseModel, Field

from src.battle_calc.constants import MAX_COMBAT_STAGE, MAX_FRIENDSHIP, MIN_COMBAT_STAGE
from src.battle_calc.enums import Generation, Stat
from src.battle_calc.errors import MissingConfigurationError, UnsupportedValueError


class StatLine(BaseModel):
    """One value per stat"""

    hp: int = Field(ge=0)
    attack: int = Field(ge=0)
    defense: int = Field(ge=0)
    spAttack: int = Field(ge=0)
    spDefense: int = Field(ge=0)
    speed: int = Field(ge=0)

    def __getitem__(self, stat: Stat) -> int:
        return (self.hp, self.attack, self.defense, self.spAttack, self.spDefense, self.speed)[stat]


def create_stat_line(hp: int, attack: int, defense: int, sp_attack: int, sp_defense: int, speed: int) -> StatLine:
    """Build a stat line from values in hp/atk/def/spA/spD/spe order"""
    return StatLine(hp=hp, attack=attack, defense=defense, spAttack=sp_attack, spDefense=sp_defense, speed=speed)


def _gen1_stat_experience_term(ev: int) -> int:
    return math.ceil(math.sqrt(ev)) // 4


def calculate_gen1_stat(level: int, base: int, dv: int, ev: int) -> int:
    """
    Gen 1-2 stat formula. DVs are added to the base before doubling and stat
    experience contributes ceil(sqrt(ev)) / 4. Natures do not exist yet.
    """
    return ((2 * (base + dv) + _gen1_stat_experience_term(ev)) * level) // 100 + 5


def calculate_stat(level: int, base: int, iv: int, ev: int, modifier: float) -> int:
    """
    Gen 3+ stat formula.

    Args:
        level: Current level
        base: Species base stat
        iv: Individual value (0-31)
        ev: Effort value (0-255)
        modifier: Nature multiplier (0.9, 1.0 or 1.1)
    """
    return math.floor((((2 * base + iv + ev // 4) * level) // 100 + 5) * modifier)


def calculate_lgpe_stat(level: int, base: int, iv: int, av: int, modifier: float, friendship: int) -> int:
    """
    Let's Go stat formula: no EV term, a friendship bonus of up to 10% after
    the nature step, and awakening values added untouched at the end.
    """
    friendship_modifier = 1 + math.floor(10 * (friendship / MAX_FRIENDSHIP)) / 100
    with_nature = math.floor((((2 * base + iv) * level) // 100 + 5) * modifier)

    return math.floor(with_nature * friendship_modifier) + av


def calculate_hp(level: int, base: int, iv: int, ev: int, generation: Generation) -> int:
    """HP formula: adds level + 10 instead of 5 and is never affected by nature"""
    if generation.uses_gen1_formula():
        return ((2 * (base + iv) + _gen1_stat_experience_term(ev)) * level) // 100 + level + 10

    if generation.is_lgpe():
        return ((2 * base + iv) * level) // 100 + level + 10 + ev

    return ((2 * base + iv + ev // 4) * level) // 100 + level + 10


def calculate_stat_for_generation(
    stat: Stat,
    level: int,
    base: int,
    iv: int,
    ev: int,
    modifier: float,
    generation: Generation,
    friendship: Optional[int] = None,
) -> int:
    """Dispatch to the formula the generation uses for this stat"""
    if not isinstance(generation, Generation):
        raise UnsupportedValueError("generation", generation)

    if stat == Stat.HP:
        return calculate_hp(level, base, iv, ev, generation)

    return calculate_non_hp_stat(level, base, iv, ev, modifier, generation, friendship)


def calculate_non_hp_stat(
    level: int,
    base: int,
    iv: int,
    ev: int,
    modifier: float,
    generation: Generation,
    friendship: Optional[int] = None,
) -> int:
    """Any stat but HP, with the nature multiplier where the generation has natures"""
    if not isinstance(generation, Generation):
        raise UnsupportedValueError("generation", generation)

    if generation.uses_gen1_formula():
        return calculate_gen1_stat(level, base, iv, ev)

    if generation.is_lgpe():
        if friendship is None:
            raise MissingConfigurationError("friendship", "when generation is lgpe")
        return calculate_lgpe_stat(level, base, iv, ev, modifier, friendship)

    return calculate_stat(level, base, iv, ev, modifier)


def apply_combat_stages(stat: int, combat_stages: int) -> int:
    """
    Apply in-battle stat stages.

    +n multiplies by (n + 2) / 2 and -n by 2 / (n + 2), flooring the product.
    """
    if not MIN_COMBAT_STAGE <= combat_stages <= MAX_COMBAT_STAGE:
        raise ValueError("Combat stages must be -6 to 6")

    if combat_stages == 0:
        return stat

    if combat_stages > 0:
        return math.floor(stat * ((combat_stages + 2) / 2))

    return math.floor(stat * (2 / (abs(combat_stages) + 2)))
