"""
Experience curves and experience gained from a knockout.
"""

import math
from typing import Optional

from pydantic import BaseModel, Field

from src.battle_calc.constants import (
    AFFECTION_EXP_MULTIPLIER,
    DOMESTIC_TRADE_EXP_MULTIPLIER,
    INTERNATIONAL_TRADE_EXP_MULTIPLIER,
    INTERNATIONAL_TRADE_EXP_MULTIPLIER_GEN5,
    INTERNATIONAL_TRADE_EXP_MULTIPLIER_LEGACY,
    LUCKY_EGG_EXP_MULTIPLIER,
    MAX_LEVEL,
    PAST_EVOLUTION_EXP_MULTIPLIER,
    TRAINER_BATTLE_EXP_MULTIPLIER,
)
from src.battle_calc.enums import Generation, GrowthRate
from src.battle_calc.errors import UnsupportedValueError
from src.battle_calc.utils.math import (
    gamefreak_power_of_two_point_five,
    integer_multiply,
    multiply_all_for_generation,
    multiply_for_generation,
    to_float32,
)


def calculate_experience_required_for_level(level: int, growth_rate: GrowthRate) -> int:
    """
    Total experience needed to reach ``level``.

    Returns 0 at or below level 1 and -1 above level 100.
    """
    if level <= 1:
        return 0
    if level > MAX_LEVEL:
        return -1

    cube = level**3

    if growth_rate == GrowthRate.FAST:
        return math.floor(cube * 0.8)

    if growth_rate == GrowthRate.MEDIUM_FAST:
        return cube

    if growth_rate == GrowthRate.MEDIUM_SLOW:
        return math.floor(1.2 * cube - 15 * level**2 + 100 * level - 140)

    if growth_rate == GrowthRate.SLOW:
        return math.floor(1.25 * cube)

    if growth_rate == GrowthRate.ERRATIC:
        if level < 50:
            return math.floor(cube * (100 - level) / 50)
        if level < 68:
            return math.floor(cube * (150 - level) / 100)
        if level < 98:
            return math.floor(cube * ((1911 - 10 * level) // 3) / 500)
        return math.floor(cube * (160 - level) / 100)

    if growth_rate == GrowthRate.FLUCTUATING:
        if level < 15:
            return math.floor(cube * ((((level + 1) // 3) + 24) / 50))
        if level < 36:
            return math.floor(cube * ((level + 14) / 50))
        return math.floor(cube * (((level // 2) + 32) / 50))

    raise UnsupportedValueError("growth rate", growth_rate)


class ExperienceGainOptions(BaseModel):
    """Circumstances of the knockout that scale the experience gained"""

    expShareEnabled: bool = False
    participated: bool = True
    otherParticipantCount: int = Field(default=0, ge=0)  # other un-fainted participants
    otherPokemonHoldingExperienceShare: int = Field(default=0, ge=0)
    partySize: int = Field(default=1, ge=1, le=6)
    isDomesticTrade: bool = False
    isInternationalTrade: bool = False
    hasLuckyEgg: bool = False
    hasAffectionBoost: bool = False
    isWild: bool = False
    isPastEvolutionPoint: bool = False


def _experience_share_divisor(generation: Generation, options: ExperienceGainOptions) -> int:
    participant_count = options.otherParticipantCount + 1
    exp_share_count = options.otherPokemonHoldingExperienceShare + (1 if options.expShareEnabled else 0)

    if generation == Generation.GEN_1:
        if not options.expShareEnabled:
            return participant_count
        if options.participated:
            return 2 * participant_count
        return 2 * participant_count * options.partySize

    if generation in (Generation.GEN_2, Generation.GEN_3, Generation.GEN_4, Generation.GEN_5):
        if exp_share_count == 0:
            return participant_count
        if options.participated:
            return 2 * participant_count
        return 2 * exp_share_count

    # Gen 6+, LGPE and BDSP
    if options.expShareEnabled or generation == Generation.LGPE:
        return 2
    return 1


def _international_trade_multiplier(generation: Generation) -> float:
    if generation in (Generation.GEN_1, Generation.GEN_2, Generation.GEN_3):
        return INTERNATIONAL_TRADE_EXP_MULTIPLIER_LEGACY
    if generation == Generation.GEN_5:
        return INTERNATIONAL_TRADE_EXP_MULTIPLIER_GEN5
    return INTERNATIONAL_TRADE_EXP_MULTIPLIER


def _level_scaling(level: int, opponent_level: int) -> float:
    return gamefreak_power_of_two_point_five(
        (to_float32(2.0) * opponent_level + to_float32(10.0)) / (opponent_level + level + to_float32(10.0))
    )


def calculate_experience_gain(
    generation: Generation,
    base_experience: int,
    level: int,
    opponent_level: int,
    options: Optional[ExperienceGainOptions] = None,
) -> int:
    """
    Experience earned for defeating a Pokemon.

    Args:
        generation: Formula family
        base_experience: Base experience yield of the defeated species
        level: Level of the Pokemon receiving experience
        opponent_level: Level of the defeated Pokemon
        options: Trade, held item, Exp. Share and battle circumstances

    Returns:
        Experience points gained. The BDSP formula is a best guess built from
        the gen 7 one and has not been checked against the game.
    """
    if options is None:
        options = ExperienceGainOptions()

    wild = 1 if options.isWild else TRAINER_BATTLE_EXP_MULTIPLIER
    lucky_egg = LUCKY_EGG_EXP_MULTIPLIER if options.hasLuckyEgg else 1
    affection = AFFECTION_EXP_MULTIPLIER if options.hasAffectionBoost else 1
    share_divisor = _experience_share_divisor(generation, options)

    if options.isInternationalTrade:
        trade = _international_trade_multiplier(generation)
    elif options.isDomesticTrade:
        trade = DOMESTIC_TRADE_EXP_MULTIPLIER
    else:
        trade = 1

    past_evolution_applies = generation in (Generation.GEN_6, Generation.GEN_7, Generation.GEN_8)
    evolution = PAST_EVOLUTION_EXP_MULTIPLIER if past_evolution_applies and options.isPastEvolutionPoint else 1

    if generation == Generation.GEN_5:
        scaled = multiply_for_generation(base_experience * opponent_level, wild, generation) / (to_float32(5.0) * share_divisor)
        gain = math.floor(scaled * _level_scaling(level, opponent_level)) + 1
        return int(multiply_all_for_generation(gain, [trade, lucky_egg], generation))

    if generation in (Generation.GEN_7, Generation.GEN_8, Generation.BDSP):
        scaled = math.floor(
            multiply_all_for_generation(base_experience * opponent_level, [evolution], generation) / (to_float32(5.0) * share_divisor)
        )
        gain = math.floor(scaled * _level_scaling(level, opponent_level))
        if generation == Generation.BDSP:
            gain += 1
        return int(multiply_all_for_generation(gain, [trade, lucky_egg, affection], generation))

    if generation == Generation.LGPE:
        return math.floor(
            multiply_all_for_generation(
                math.floor(base_experience * opponent_level) + 1,
                [1 / 15, wild, trade, lucky_egg, affection, evolution],
                generation,
            )
        )

    # Gen 1-4 and 6
    gained = integer_multiply(math.floor(base_experience * opponent_level), wild, trade, lucky_egg, affection, evolution)
    return math.floor(gained / (7 * share_divisor))
