"""
Nature reasoning over inferred IV ranges.

A nature raises one stat by 10% and lowers one by 10% (the same stat for the
five neutral natures). Given the IV ranges that remain feasible for each
nature variant of each stat, these helpers work out which stats are known to
be raised or lowered and which variants a stat can still have.
"""

import logging
from typing import Mapping, Optional, Sequence, TypeVar

from src.battle_calc.enums import Nature, NatureVariant, Stat
from src.battle_calc.schema.iv_range import ConfirmedNature, IVRangeSet

logger = logging.getLogger(__name__)

T = TypeVar("T")

ALL_VARIANTS = (NatureVariant.NEGATIVE, NatureVariant.NEUTRAL, NatureVariant.POSITIVE)


def determine_possible_nature_types_for_stat(stat: Stat, confirmed_nature: ConfirmedNature) -> list[NatureVariant]:
    """
    Nature variants a stat can still have given the confirmed nature.

    A stat confirmed as raised (or lowered) can only be positive (or negative);
    one confirmed as both belongs to a neutral nature. Once another stat is
    confirmed as lowered, this stat can no longer be negative, and likewise for
    raised.
    """
    negative, positive = confirmed_nature.reduced, confirmed_nature.boosted

    if positive == stat and negative != stat:
        return [NatureVariant.POSITIVE]
    if negative == stat and positive != stat:
        return [NatureVariant.NEGATIVE]
    if negative == stat and positive == stat:
        return [NatureVariant.NEUTRAL]

    relevant = list(ALL_VARIANTS)

    if negative is not None and negative != stat:
        relevant.remove(NatureVariant.NEGATIVE)

    if positive is not None and positive != stat:
        relevant.remove(NatureVariant.POSITIVE)

    return relevant


def _single_candidate(candidates: list[Stat], role: str) -> Optional[Stat]:
    if len(candidates) == 1:
        return candidates[0]
    if len(candidates) > 1:
        logger.debug("Several stats can only be %s by nature: %s", role, [stat.name for stat in candidates])
    return None


def calculate_possible_nature(
    iv_ranges: Mapping[Stat, IVRangeSet],
    positive_nature_stat: Optional[Stat] = None,
    negative_nature_stat: Optional[Stat] = None,
) -> ConfirmedNature:
    """
    Determine which stats must be lowered and raised by nature.

    Args:
        iv_ranges: Inferred IV ranges for each stat
        positive_nature_stat: Known raised stat, overrides inference
        negative_nature_stat: Known lowered stat, overrides inference

    Returns:
        The confirmed nature. When no stat can be lowered, or no stat can be
        raised, the ranges contradict each other and the result is flagged
        ``indeterminate`` with nothing confirmed.
    """
    nature_stats = [(stat, iv_ranges[stat]) for stat in Stat.nature_stats() if stat in iv_ranges]

    possible_negatives = [stat for stat, value in nature_stats if value.negative is not None]
    possible_positives = [stat for stat, value in nature_stats if value.positive is not None]

    if not possible_negatives or not possible_positives:
        logger.warning(
            "Nature is indeterminate: no stat can be %s",
            "lowered" if not possible_negatives else "raised",
        )
        return ConfirmedNature(indeterminate=True)

    confirmed_negative = negative_nature_stat
    if confirmed_negative is None:
        confirmed_negative = _single_candidate(
            [
                stat
                for stat, value in nature_stats
                if value.negative is not None and value.positive is None and value.neutral is None
            ],
            "lowered",
        )

    confirmed_positive = positive_nature_stat
    if confirmed_positive is None:
        confirmed_positive = _single_candidate(
            [
                stat
                for stat, value in nature_stats
                if value.positive is not None and value.negative is None and value.neutral is None
            ],
            "raised",
        )

    # Once one side is known, a lone remaining candidate for the other side is confirmed too
    if confirmed_negative is None and confirmed_positive is not None and len(possible_negatives) == 1:
        confirmed_negative = possible_negatives[0]

    if confirmed_positive is None and confirmed_negative is not None and len(possible_positives) == 1:
        confirmed_positive = possible_positives[0]

    return ConfirmedNature(reduced=confirmed_negative, boosted=confirmed_positive)


def get_possible_nature_adjustments_for_stat(
    range_set: IVRangeSet,
    stat: Stat,
    confirmed_nature: ConfirmedNature,
) -> tuple[bool, bool, bool]:
    """Whether the stat can still be lowered, unaffected or raised, in that order"""
    confirmed_negative, confirmed_positive = confirmed_nature.reduced, confirmed_nature.boosted

    if confirmed_positive == stat and confirmed_negative != stat:
        return False, False, True
    if confirmed_negative == stat and confirmed_positive != stat:
        return True, False, False

    return (
        range_set.negative is not None and confirmed_negative is None,
        range_set.neutral is not None,
        range_set.positive is not None and confirmed_positive is None,
    )


def filter_by_possible_nature_adjustments_for_stat(
    range_set: IVRangeSet,
    stat: Stat,
    confirmed_nature: ConfirmedNature,
    values: Sequence[T],
) -> list[T]:
    """Keep the entries of a (negative, neutral, positive) triple that are still possible"""
    if len(values) != 3:
        raise ValueError("Expected one value per nature variant")

    adjustments = get_possible_nature_adjustments_for_stat(range_set, stat, confirmed_nature)

    return [value for value, possible in zip(values, adjustments) if possible]


def get_nature_multiplier(stat: Stat, nature: Nature) -> float:
    """Multiplier a nature applies to a stat"""
    return get_nature_variant(stat, nature).multiplier


def get_nature_variant(stat: Stat, nature: Nature) -> NatureVariant:
    if nature.boosted == stat and nature.reduced != stat:
        return NatureVariant.POSITIVE
    if nature.reduced == stat and nature.boosted != stat:
        return NatureVariant.NEGATIVE
    return NatureVariant.NEUTRAL


def natures_matching(confirmed_nature: ConfirmedNature) -> list[Nature]:
    """Natures consistent with the confirmed raised/lowered stats"""
    if confirmed_nature.indeterminate:
        return list(Nature)

    return [
        nature
        for nature in Nature
        if (confirmed_nature.boosted is None or nature.boosted == confirmed_nature.boosted)
        and (confirmed_nature.reduced is None or nature.reduced == confirmed_nature.reduced)
    ]
