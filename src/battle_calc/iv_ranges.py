"""
IV range inference from observed stat values.

Every observation (a stat value seen at a level, for one evolution stage)
narrows the IVs still consistent with it, separately for each nature variant.
A variant whose range becomes empty stays empty: later observations cannot
bring it back.
"""

import logging
from typing import Mapping, Optional, Sequence, TypeVar

from src.battle_calc.constants import MAX_IV, MIN_IV
from src.battle_calc.enums import Generation, NatureVariant, Stat
from src.battle_calc.nature import (
    ALL_VARIANTS,
    determine_possible_nature_types_for_stat,
    get_possible_nature_adjustments_for_stat,
)
from src.battle_calc.schema.iv_range import (
    ConfirmedNature,
    IVRange,
    IVRangeSet,
    NatureIVRanges,
    StatValuePossibilitySet,
)
from src.battle_calc.stats import calculate_stat_for_generation

logger = logging.getLogger(__name__)

K = TypeVar("K")
T = TypeVar("T", bound=NatureIVRanges)


def _narrow_range(
    iv_range: Optional[IVRange],
    stat: Stat,
    level: int,
    base_stat: int,
    value: int,
    ev: int,
    variant: NatureVariant,
    generation: Generation,
    friendship: Optional[int],
) -> Optional[IVRange]:
    if iv_range is None:
        return None

    matching = [
        iv
        for iv in iv_range.ivs()
        if calculate_stat_for_generation(stat, level, base_stat, iv, ev, variant.multiplier, generation, friendship) == value
    ]

    if not matching:
        logger.debug(
            "%s range for %s emptied by value %d at level %d",
            stat.name,
            variant.display_name,
            value,
            level,
        )
        return None

    return IVRange(low=min(matching), high=max(matching))


def calculate_possible_iv_range(
    stat: Stat,
    base_stat_values: Sequence[int],
    values_at_previous_levels: Sequence[Mapping[int, int]],
    evs_by_level: Mapping[int, int],
    generation: Generation,
    *,
    positive_nature_stat: Optional[Stat] = None,
    negative_nature_stat: Optional[Stat] = None,
    static_iv: Optional[int] = None,
    friendship: Optional[int] = None,
) -> IVRangeSet:
    """
    Determine the IVs consistent with every observed value of a stat.

    Args:
        stat: Stat being inferred
        base_stat_values: Base stat for each evolution stage
        values_at_previous_levels: For each evolution stage, observed stat value by level
        evs_by_level: Effort values of the stat at each level (0 when absent)
        generation: Formula family to evaluate
        positive_nature_stat: Known raised stat
        negative_nature_stat: Known lowered stat
        static_iv: Known IV (fixed-IV encounters); skips inference entirely
        friendship: Friendship used by the LGPE formula

    Returns:
        The feasible range per nature variant, ``None`` where no IV fits, and
        the bounds of all of them as ``combined``
    """
    if static_iv is not None:
        fixed = IVRange.single(static_iv)
        confirmed = ConfirmedNature(reduced=negative_nature_stat, boosted=positive_nature_stat)
        possible = determine_possible_nature_types_for_stat(stat, confirmed)

        return IVRangeSet(
            negative=fixed if NatureVariant.NEGATIVE in possible else None,
            neutral=fixed if NatureVariant.NEUTRAL in possible else None,
            positive=fixed if NatureVariant.POSITIVE in possible else None,
            combined=fixed,
        )

    ranges: dict[NatureVariant, Optional[IVRange]] = {}
    for variant in ALL_VARIANTS:
        iv_range: Optional[IVRange] = IVRange.full()

        for base_stat, observations in zip(base_stat_values, values_at_previous_levels):
            for raw_level, value in observations.items():
                level = int(raw_level)
                iv_range = _narrow_range(
                    iv_range,
                    stat,
                    level,
                    base_stat,
                    value,
                    evs_by_level.get(level, 0),
                    variant,
                    generation,
                    friendship,
                )

        ranges[variant] = iv_range

    return IVRangeSet.from_variants(
        ranges[NatureVariant.NEGATIVE],
        ranges[NatureVariant.NEUTRAL],
        ranges[NatureVariant.POSITIVE],
    )


def _unique(values) -> list[int]:
    return list(dict.fromkeys(values))


def calculate_all_possible_stat_values(
    stat: Stat,
    level: int,
    iv_ranges: IVRangeSet,
    confirmed_nature: ConfirmedNature,
    base_stat: int,
    evs: int,
    generation: Generation,
    friendship: Optional[int] = None,
) -> StatValuePossibilitySet:
    """
    Stat values at ``level``: every value some IV could give (``possible``) and
    the values the still-feasible IVs give (``valid``), over the nature
    variants the stat can have. HP only uses the neutral formula.
    """
    variants = [NatureVariant.NEUTRAL] if stat == Stat.HP else list(ALL_VARIANTS)
    allowed = determine_possible_nature_types_for_stat(stat, confirmed_nature)

    possible: list[int] = []
    valid: list[int] = []

    for variant in variants:
        iv_range = iv_ranges[variant]
        if variant not in allowed or iv_range is None:
            continue

        def value_for(iv: int) -> int:
            return calculate_stat_for_generation(stat, level, base_stat, iv, evs, variant.multiplier, generation, friendship)

        possible.extend(_unique(value_for(iv) for iv in range(MIN_IV, MAX_IV + 1)))
        valid.extend(_unique(value_for(iv) for iv in iv_range.ivs()))

    return StatValuePossibilitySet(possible=_unique(possible), valid=_unique(valid))


def _overlaps(result_range: Optional[IVRange], inferred: Optional[IVRange]) -> bool:
    return result_range is not None and result_range.overlaps(inferred)


def _is_within_range(result: NatureIVRanges, confirmed_nature: ConfirmedNature, stat: Stat, iv_ranges: IVRangeSet) -> bool:
    reduced, boosted = confirmed_nature.reduced, confirmed_nature.boosted

    if reduced == stat and boosted != stat:
        return _overlaps(result.negative, iv_ranges.negative)

    if boosted == stat and reduced != stat:
        return _overlaps(result.positive, iv_ranges.positive)

    adjustments = get_possible_nature_adjustments_for_stat(iv_ranges, stat, confirmed_nature)

    return any(
        _overlaps(result[variant], iv_ranges[variant])
        for variant, possible in zip(ALL_VARIANTS, adjustments)
        if possible
    )


def filter_to_stat_range(
    results: Mapping[K, T],
    confirmed_nature: ConfirmedNature,
    stat: Stat,
    iv_ranges: IVRangeSet,
) -> dict[K, T]:
    """
    Keep the results whose IV ranges overlap the inferred ranges for a variant
    the stat can still have. Works on compact ranges or kill-range groups.
    """
    return {
        key: value
        for key, value in results.items()
        if _is_within_range(value, confirmed_nature, stat, iv_ranges)
    }

