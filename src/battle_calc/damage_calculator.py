"""
Damage roll calculation.

Every multiplier is applied as its own step and the running value is
truncated after each one. Batching multipliers into a single product gives
different results, so the order in which a generation applies them is part of
the formula. That order lives in MODIFIER_ORDER, one explicit row per
generation, and a single routine folds whatever the row says.
"""

import math
from typing import Iterable, Sequence

from src.battle_calc.constants import (
    BASE_DAMAGE_CONSTANT,
    BASE_DAMAGE_DIVISOR,
    DAMAGE_RANDOM_MIN,
    DAMAGE_RANDOM_RANGE,
    SCREEN_MULTIPLIER_MULTI,
    SCREEN_MULTIPLIER_SINGLE,
    STAB_MULTIPLIER,
    TORRENT_MULTIPLIER,
    WEATHER_BOOST_MULTIPLIER,
    WEATHER_REDUCTION_MULTIPLIER,
)
from src.battle_calc.enums import DamageModifier, Generation, ModifierPhase
from src.battle_calc.errors import UnsupportedValueError
from src.battle_calc.schema.damage import DamageRollSet
from src.battle_calc.schema.damage_parameters import DamageRangeParameters
from src.battle_calc.stats import apply_combat_stages

M = DamageModifier
P = ModifierPhase

_GEN_1_2_ORDER = (
    (M.TORRENT, P.MOVE_POWER),
    (M.OTHER_POWER, P.BASE_POWER),
    (M.CRITICAL_HIT, P.PRE_RANDOM),
    (M.STAB, P.POST_RANDOM),
    (M.TYPE_EFFECTIVENESS, P.POST_RANDOM),
    (M.OTHER, P.POST_RANDOM),
)

# Gen 3 applies STAB and type effectiveness before the random roll
_GEN_3_ORDER = (
    (M.TORRENT, P.MOVE_POWER),
    (M.OTHER_POWER, P.BASE_POWER),
    (M.CRITICAL_HIT, P.PRE_RANDOM),
    (M.STAB, P.PRE_RANDOM),
    (M.TYPE_EFFECTIVENESS, P.PRE_RANDOM),
    (M.OTHER, P.POST_RANDOM),
)

# Gen 4 folds screens, spread and weather into the base power
_GEN_4_ORDER = (
    (M.TORRENT, P.MOVE_POWER),
    (M.SCREEN, P.BASE_POWER),
    (M.MULTI_TARGET, P.BASE_POWER),
    (M.WEATHER_BOOST, P.BASE_POWER),
    (M.WEATHER_REDUCTION, P.BASE_POWER),
    (M.OTHER_POWER, P.BASE_POWER),
    (M.CRITICAL_HIT, P.PRE_RANDOM),
    (M.STAB, P.POST_RANDOM),
    (M.TYPE_EFFECTIVENESS, P.POST_RANDOM),
    (M.OTHER, P.POST_RANDOM),
)

# Gen 5+ moves spread and weather before the roll, screens after it,
# and the torrent family boosts the attacking stat instead of the power
_GEN_5_PLUS_ORDER = (
    (M.TORRENT, P.OFFENSIVE_STAT),
    (M.OTHER_POWER, P.BASE_POWER),
    (M.MULTI_TARGET, P.PRE_RANDOM),
    (M.WEATHER_BOOST, P.PRE_RANDOM),
    (M.WEATHER_REDUCTION, P.PRE_RANDOM),
    (M.CRITICAL_HIT, P.PRE_RANDOM),
    (M.STAB, P.POST_RANDOM),
    (M.TYPE_EFFECTIVENESS, P.POST_RANDOM),
    (M.SCREEN, P.POST_RANDOM),
    (M.OTHER, P.POST_RANDOM),
)

# Let's Go has no abilities and no screen step
_LGPE_ORDER = (
    (M.OTHER_POWER, P.BASE_POWER),
    (M.MULTI_TARGET, P.PRE_RANDOM),
    (M.WEATHER_BOOST, P.PRE_RANDOM),
    (M.WEATHER_REDUCTION, P.PRE_RANDOM),
    (M.CRITICAL_HIT, P.PRE_RANDOM),
    (M.STAB, P.POST_RANDOM),
    (M.TYPE_EFFECTIVENESS, P.POST_RANDOM),
    (M.OTHER, P.POST_RANDOM),
)

MODIFIER_ORDER: dict[Generation, tuple[tuple[DamageModifier, ModifierPhase], ...]] = {
    Generation.GEN_1: _GEN_1_2_ORDER,
    Generation.GEN_2: _GEN_1_2_ORDER,
    Generation.GEN_3: _GEN_3_ORDER,
    Generation.GEN_4: _GEN_4_ORDER,
    Generation.GEN_5: _GEN_5_PLUS_ORDER,
    Generation.GEN_6: _GEN_5_PLUS_ORDER,
    Generation.GEN_7: _GEN_5_PLUS_ORDER,
    Generation.GEN_8: _GEN_5_PLUS_ORDER,
    Generation.LGPE: _LGPE_ORDER,
}


def get_modifier_order(generation: Generation) -> tuple[tuple[DamageModifier, ModifierPhase], ...]:
    try:
        return MODIFIER_ORDER[generation]
    except KeyError:
        raise UnsupportedValueError("generation", generation) from None


def calculate_damage_values(
    level: int,
    power: float,
    attack: float,
    defense: int,
    base_power_modifiers: Sequence[float],
    pre_random_modifiers: Sequence[float],
    post_random_modifiers: Sequence[float],
) -> DamageRollSet:
    """
    Calculate the sixteen possible damage values of a move.

    Args:
        level: Level of the attacker
        power: Base power of the move
        attack: Relevant offensive stat of the attacker
        defense: Relevant defensive stat of the defender
        base_power_modifiers: Multipliers folded into the power, floored after each
        pre_random_modifiers: Multipliers applied to the base damage before the random factor
        post_random_modifiers: Multipliers applied after the random factor

    Returns:
        One damage value per random factor 85%..100%, in increasing factor order
    """
    level_modifier = (2 * level) // 5 + 2

    adjusted_power = power
    for modifier in base_power_modifiers:
        adjusted_power = math.trunc(adjusted_power * modifier)

    base_damage = math.floor(level_modifier * adjusted_power * attack / defense) // BASE_DAMAGE_DIVISOR + BASE_DAMAGE_CONSTANT

    rolls = []
    for random_value in range(DAMAGE_RANDOM_RANGE):
        damage = base_damage
        for modifier in (*pre_random_modifiers, (DAMAGE_RANDOM_MIN + random_value) / 100, *post_random_modifiers):
            damage = math.trunc(damage * modifier)
        rolls.append(damage)

    return tuple(rolls)


def resolve_modifier_values(params: DamageRangeParameters) -> dict[DamageModifier, float]:
    """Numeric value of every modifier for this configuration; inactive ones are 1"""
    generation = params.generation

    if params.screen and not params.criticalHit:
        screen = SCREEN_MULTIPLIER_MULTI if params.multiTarget else SCREEN_MULTIPLIER_SINGLE
    else:
        screen = 1

    return {
        M.TORRENT: TORRENT_MULTIPLIER if params.torrent else 1,
        M.SCREEN: screen,
        M.MULTI_TARGET: generation.multi_target_multiplier if params.multiTarget else 1,
        M.WEATHER_BOOST: WEATHER_BOOST_MULTIPLIER if params.weatherBoosted else 1,
        M.WEATHER_REDUCTION: WEATHER_REDUCTION_MULTIPLIER if params.weatherReduced else 1,
        M.OTHER_POWER: params.otherPowerModifier,
        M.CRITICAL_HIT: generation.crit_multiplier if params.criticalHit else 1.0,
        M.STAB: STAB_MULTIPLIER if params.stab else 1,
        M.TYPE_EFFECTIVENESS: params.typeEffectiveness,
        M.OTHER: params.otherModifier,
    }


def _product(value: float, modifiers: Iterable[float]) -> float:
    for modifier in modifiers:
        value = value * modifier
    return value


class DamageCalculator:
    """
    Damage rolls for one battle configuration, evaluated for any value of the
    owned Pokemon's stat.

    The modifier phases are resolved once from the generation's row of
    MODIFIER_ORDER; each call then only varies the stat.
    """

    def __init__(self, params: DamageRangeParameters):
        params.check_required()
        self.params = params

        values = resolve_modifier_values(params)
        self.phases: dict[ModifierPhase, list[float]] = {phase: [] for phase in ModifierPhase}
        for modifier, phase in get_modifier_order(params.generation):
            self.phases[phase].append(values[modifier])

        self.opponent_stat = apply_combat_stages(params.opponentStat, params.opponentCombatStages)

    def calculate_damage_for_stat(self, stat: int) -> DamageRollSet:
        """Damage rolls when the owned Pokemon's relevant stat (before stages) is ``stat``"""
        params = self.params
        player_stat = apply_combat_stages(stat, params.combatStages)

        if params.offensiveMode:
            level, offensive_stat, defensive_stat = params.level, player_stat, self.opponent_stat
        else:
            level, offensive_stat, defensive_stat = params.opponentLevel, self.opponent_stat, player_stat

        return calculate_damage_values(
            level,
            _product(params.movePower, self.phases[ModifierPhase.MOVE_POWER]),
            _product(offensive_stat, self.phases[ModifierPhase.OFFENSIVE_STAT]),
            defensive_stat,
            self.phases[ModifierPhase.BASE_POWER],
            self.phases[ModifierPhase.PRE_RANDOM],
            self.phases[ModifierPhase.POST_RANDOM],
        )


def calculate_segment_damage(params: DamageRangeParameters, stat_value: int) -> DamageRollSet:
    """One-off damage rolls for a single stat value"""
    return DamageCalculator(params).calculate_damage_for_stat(stat_value)
