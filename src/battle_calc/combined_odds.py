"""
Knockout odds over several hits.

Each hit rolls one of its damage values uniformly and may independently be a
critical hit. For every number of crits k the result counts, over every
choice of which k hits crit, the roll combinations whose total reaches the
HP threshold. Counting is done per crit placement by convolving per-hit
damage distributions, which gives the same totals as walking every roll
combination.
"""

import itertools
import logging
import math
from collections import Counter
from typing import Optional, Sequence

from src.battle_calc.constants import CRIT_CHANCE_DENOMINATOR_LEGACY, CRIT_MULTIPLIER_MODERN, MAX_COMBINED_HITS
from src.battle_calc.schema.damage import CombinedDamageOdds

logger = logging.getLogger(__name__)


def _convolve(totals: Counter, hit: Counter) -> Counter:
    combined: Counter = Counter()
    for total, total_count in totals.items():
        for damage, damage_count in hit.items():
            combined[total + damage] += total_count * damage_count
    return combined


def _count_at_least(distributions: Sequence[Counter], threshold: int) -> int:
    totals = Counter({0: 1})
    for distribution in distributions:
        totals = _convolve(totals, distribution)
    return sum(count for total, count in totals.items() if total >= threshold)


def calculate_combined_damage(
    roll_sets: Sequence[Sequence[int]],
    hp_threshold: int,
    *,
    crit_adjusted_values: Optional[Sequence[Optional[Sequence[int]]]] = None,
    crit_multiplier: float = CRIT_MULTIPLIER_MODERN,
    crit_chance_denominator: int = CRIT_CHANCE_DENOMINATOR_LEGACY,
) -> list[CombinedDamageOdds]:
    """
    Count the roll combinations that reach ``hp_threshold`` for each number of crits.

    Args:
        roll_sets: Possible damage values of each hit; every set is cut to the
            length of the first
        hp_threshold: HP the combined damage must reach
        crit_adjusted_values: Optional per-hit rolls to use on a crit instead of
            the normal ones (crits ignore unfavourable stat stages)
        crit_multiplier: Damage multiplier of a critical hit
        crit_chance_denominator: 16 up to gen 6, 24 from gen 7

    Returns:
        One entry per crit count 0..N, each with the probability of one specific
        crit placement, the number of placements and the summed success count
    """
    hit_count = len(roll_sets)
    if hit_count > MAX_COMBINED_HITS:
        raise ValueError(f"At most {MAX_COMBINED_HITS} hits can be combined, got {hit_count}")

    roll_count = len(roll_sets[0]) if roll_sets else 0
    rolls = [list(roll_set[:roll_count]) for roll_set in roll_sets]

    normal_hits = [Counter(hit_rolls) for hit_rolls in rolls]
    crit_hits = []
    for index, hit_rolls in enumerate(rolls):
        adjusted = crit_adjusted_values[index] if crit_adjusted_values and index < len(crit_adjusted_values) else None
        crit_rolls = []
        for sub_index, value in enumerate(hit_rolls):
            override = adjusted[sub_index] if adjusted is not None and sub_index < len(adjusted) else None
            crit_rolls.append(math.trunc((override or value) * crit_multiplier))
        crit_hits.append(Counter(crit_rolls))

    logger.debug(
        "Combining %d hits of %d rolls: %d crit placements, %d roll combinations each",
        hit_count,
        roll_count,
        2**hit_count,
        roll_count**hit_count,
    )

    crit_chance = 1 / crit_chance_denominator
    results = []
    for crit_count in range(hit_count + 1):
        successes = 0
        for crit_indices in itertools.combinations(range(hit_count), crit_count):
            distributions = [
                crit_hits[index] if index in crit_indices else normal_hits[index]
                for index in range(hit_count)
            ]
            successes += _count_at_least(distributions, hp_threshold)

        results.append(
            CombinedDamageOdds(
                critCount=crit_count,
                odds=crit_chance**crit_count * (1 - crit_chance) ** (hit_count - crit_count),
                binomialCoefficient=math.comb(hit_count, crit_count),
                successes=successes,
            )
        )

    return results


def calculate_kill_probability(odds: Sequence[CombinedDamageOdds], roll_set_size: int) -> float:
    """Overall chance of reaching the threshold, crits included"""
    hit_count = len(odds) - 1
    total_combinations = roll_set_size**hit_count

    return sum(entry.odds * entry.successes for entry in odds) / total_combinations
