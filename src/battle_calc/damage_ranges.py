"""
Damage ranges over every IV.

For each nature variant the 32 possible IVs are turned into runs of identical
stat values, and each run gets its damage rolls. The results can then be
compacted across variants (identical rolls are merged) and grouped by how many
rolls knock out a target.
"""

from src.battle_calc.constants import NUM_IVS
from src.battle_calc.damage_calculator import DamageCalculator
from src.battle_calc.enums import NatureVariant
from src.battle_calc.nature import ALL_VARIANTS
from src.battle_calc.schema.damage import (
    CompactRange,
    DamageRollSet,
    NatureDamageRanges,
    OneShotResult,
    RangeResult,
)
from src.battle_calc.schema.damage_parameters import DamageRangeParameters
from src.battle_calc.schema.iv_range import StatRange, merge_iv_ranges
from src.battle_calc.stats import calculate_non_hp_stat

_VARIANT_FIELDS = {
    NatureVariant.NEGATIVE: "negative",
    NatureVariant.NEUTRAL: "neutral",
    NatureVariant.POSITIVE: "positive",
}


def build_stat_segments(params: DamageRangeParameters, variant: NatureVariant) -> list[StatRange]:
    """Runs of consecutive IVs that give the same stat value, in IV order"""
    params.check_required()

    segments: list[StatRange] = []
    for iv in range(NUM_IVS):
        stat = calculate_non_hp_stat(
            params.level,
            params.baseStat,
            iv,
            params.evs,
            variant.multiplier,
            params.generation,
            params.friendship,
        )

        if segments and segments[-1].stat == stat:
            segments[-1] = StatRange(stat=stat, low=segments[-1].low, high=iv)
        else:
            segments.append(StatRange(stat=stat, low=iv, high=iv))

    return segments


def calculate_damage_ranges(params: DamageRangeParameters) -> list[NatureDamageRanges]:
    """
    Damage rolls for every IV, for each nature variant.

    Args:
        params: Battle configuration; required fields are checked first

    Returns:
        One entry per variant in (negative, neutral, positive) order, each with
        its stat segments and their sixteen damage rolls
    """
    calculator = DamageCalculator(params)

    results = []
    for variant in ALL_VARIANTS:
        segments = [
            RangeResult(
                stat=segment.stat,
                low=segment.low,
                high=segment.high,
                damageValues=calculator.calculate_damage_for_stat(segment.stat),
            )
            for segment in build_stat_segments(params, variant)
        ]
        results.append(NatureDamageRanges(variant=variant, rangeSegments=segments))

    return results


def combine_identical_lines(results: list[NatureDamageRanges]) -> list[CompactRange]:
    """
    Merge segments from all variants that produce exactly the same rolls.

    Per-variant IV ranges of merged segments are unioned and the stat bounds
    widened. The output is sorted by its lowest stat value.
    """
    groups: dict[DamageRollSet, dict] = {}

    for result in results:
        field = _VARIANT_FIELDS[result.variant]

        for segment in result.rangeSegments:
            group = groups.get(segment.damageValues)
            if group is None:
                group = groups[segment.damageValues] = {
                    "damageValues": segment.damageValues,
                    "statFrom": segment.stat,
                    "statTo": segment.stat,
                }

            group["statFrom"] = min(group["statFrom"], segment.stat)
            group["statTo"] = max(group["statTo"], segment.stat)
            group[field] = merge_iv_ranges(group.get(field), segment.iv_range)

    compact = [CompactRange(**group) for group in groups.values()]

    return sorted(compact, key=lambda value: value.statFrom)


def calculate_kill_ranges(results: list[NatureDamageRanges], health_threshold: int) -> dict[int, OneShotResult]:
    """
    Group compact ranges by how many of their rolls reach ``health_threshold``.

    Keys are success counts (0-16) in order of first appearance. A variant that
    is absent from a compact range leaves the group's range for that variant
    untouched.
    """
    groups: dict[int, dict] = {}

    for compact in combine_identical_lines(results):
        successes = compact.count_successes(health_threshold)

        group = groups.get(successes)
        if group is None:
            group = groups[successes] = {
                "successes": successes,
                "statFrom": compact.statFrom,
                "statTo": compact.statTo,
                "componentResults": [],
            }

        group["statFrom"] = min(group["statFrom"], compact.statFrom)
        group["statTo"] = max(group["statTo"], compact.statTo)
        for field in _VARIANT_FIELDS.values():
            group[field] = merge_iv_ranges(group.get(field), getattr(compact, field))
        group["componentResults"].append(compact)

    return {successes: OneShotResult(**group) for successes, group in groups.items()}
