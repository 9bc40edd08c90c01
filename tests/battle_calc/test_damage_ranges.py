import pytest
from pydantic import ValidationError

from src.battle_calc.damage_ranges import (
    build_stat_segments,
    calculate_damage_ranges,
    calculate_kill_ranges,
    combine_identical_lines,
)
from src.battle_calc.enums import Generation, NatureVariant
from src.battle_calc.errors import MissingConfigurationError
from src.battle_calc.schema.damage_parameters import DamageRangeParameters
from src.battle_calc.schema.iv_range import IVRange


def make_prinplup_params(**overrides) -> DamageRangeParameters:
    """Level 25 Prinplup using Bubble Beam (16 Sp. Atk EVs) into 62 Sp. Def"""
    values = dict(
        level=25,
        baseStat=81,
        evs=16,
        combatStages=0,
        stab=True,
        typeEffectiveness=1,
        offensiveMode=True,
        movePower=65,
        opponentStat=62,
        generation=Generation.GEN_4,
    )
    values.update(overrides)
    return DamageRangeParameters(**values)


def iv(low: int, high: int) -> IVRange:
    return IVRange(low=low, high=high)


def compact_rows(params: DamageRangeParameters):
    return [
        (row.statFrom, row.statTo, row.negative, row.neutral, row.positive, row.damageValues)
        for row in combine_identical_lines(calculate_damage_ranges(params))
    ]


BASE_ROWS = [
    (41, 43, iv(0, 9), None, None, (15, 15, 15, 15, 15, 15, 15, 16, 16, 16, 16, 16, 16, 16, 16, 18)),
    (44, 47, iv(10, 29), iv(0, 5), None, (16, 16, 16, 16, 16, 16, 16, 16, 18, 18, 18, 18, 18, 18, 18, 19)),
    (48, 51, iv(30, 31), iv(6, 21), iv(0, 5), (16, 18, 18, 18, 18, 18, 18, 18, 19, 19, 19, 19, 19, 19, 19, 21)),
    (52, 55, None, iv(22, 31), iv(6, 17), (18, 18, 19, 19, 19, 19, 19, 19, 19, 21, 21, 21, 21, 21, 21, 22)),
    (56, 59, None, None, iv(18, 31), (19, 19, 19, 21, 21, 21, 21, 21, 21, 22, 22, 22, 22, 22, 22, 24)),
]

PLUS_ONE_ROWS = [
    (41, 42, iv(0, 5), None, None, (21, 21, 21, 21, 22, 22, 22, 22, 22, 22, 24, 24, 24, 24, 24, 25)),
    (43, 45, iv(6, 21), None, None, (22, 22, 22, 22, 24, 24, 24, 24, 24, 24, 25, 25, 25, 25, 25, 27)),
    (46, 47, iv(22, 29), iv(0, 5), None, (24, 24, 24, 24, 24, 25, 25, 25, 25, 25, 27, 27, 27, 27, 27, 28)),
    (48, 50, iv(30, 31), iv(6, 17), iv(0, 1), (25, 25, 25, 25, 25, 27, 27, 27, 27, 27, 28, 28, 28, 28, 28, 30)),
    (51, 53, None, iv(18, 29), iv(2, 13), (25, 27, 27, 27, 27, 27, 28, 28, 28, 28, 28, 30, 30, 30, 30, 31)),
    (54, 55, None, iv(30, 31), iv(14, 17), (27, 27, 28, 28, 28, 28, 30, 30, 30, 30, 30, 31, 31, 31, 31, 33)),
    (56, 58, None, None, iv(18, 29), (28, 28, 30, 30, 30, 30, 30, 31, 31, 31, 31, 33, 33, 33, 33, 34)),
    (59, 59, None, None, iv(30, 31), (30, 30, 30, 31, 31, 31, 31, 33, 33, 33, 33, 34, 34, 34, 34, 36)),
]

MINUS_ONE_ROWS = [
    (41, 41, iv(0, 1), None, None, (9, 9, 9, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 12)),
    (42, 47, iv(2, 29), iv(0, 5), None, (10, 10, 10, 10, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12, 13)),
    (48, 53, iv(30, 31), iv(6, 29), iv(0, 13), (12, 12, 12, 12, 12, 13, 13, 13, 13, 13, 13, 13, 13, 13, 13, 15)),
    (54, 59, None, iv(30, 31), iv(14, 31), (13, 13, 13, 13, 13, 13, 15, 15, 15, 15, 15, 15, 15, 15, 15, 16)),
]


def test_gen4_prinplup_compact_ranges():
    assert compact_rows(make_prinplup_params()) == BASE_ROWS


def test_gen4_prinplup_plus_one_combat_stage():
    assert compact_rows(make_prinplup_params(combatStages=1)) == PLUS_ONE_ROWS


def test_gen4_prinplup_minus_one_combat_stage():
    assert compact_rows(make_prinplup_params(combatStages=-1)) == MINUS_ONE_ROWS


def test_opponent_plus_one_matches_own_minus_one():
    assert compact_rows(make_prinplup_params(opponentCombatStages=1)) == MINUS_ONE_ROWS


def test_gen4_prinplup_opponent_minus_one_combat_stage():
    assert compact_rows(make_prinplup_params(opponentCombatStages=-1)) == [
        (41, 42, iv(0, 5), None, None, (21, 21, 21, 21, 22, 22, 22, 22, 22, 22, 24, 24, 24, 24, 24, 25)),
        (43, 44, iv(6, 13), None, None, (22, 22, 22, 22, 24, 24, 24, 24, 24, 24, 25, 25, 25, 25, 25, 27)),
        (45, 47, iv(14, 29), iv(0, 5), None, (24, 24, 24, 24, 24, 25, 25, 25, 25, 25, 27, 27, 27, 27, 27, 28)),
        (48, 49, iv(30, 31), iv(6, 13), None, (25, 25, 25, 25, 25, 27, 27, 27, 27, 27, 28, 28, 28, 28, 28, 30)),
        (50, 52, None, iv(14, 25), iv(0, 9), (25, 27, 27, 27, 27, 27, 28, 28, 28, 28, 28, 30, 30, 30, 30, 31)),
        (53, 55, None, iv(26, 31), iv(10, 17), (27, 27, 28, 28, 28, 28, 30, 30, 30, 30, 30, 31, 31, 31, 31, 33)),
        (56, 57, None, None, iv(18, 25), (28, 28, 30, 30, 30, 30, 30, 31, 31, 31, 31, 33, 33, 33, 33, 34)),
        (58, 59, None, None, iv(26, 31), (30, 30, 30, 31, 31, 31, 31, 33, 33, 33, 33, 34, 34, 34, 34, 36)),
    ]


def test_gen4_prinplup_super_effective():
    assert compact_rows(make_prinplup_params(typeEffectiveness=2)) == [
        (41, 43, iv(0, 9), None, None, (30, 30, 30, 30, 30, 30, 30, 32, 32, 32, 32, 32, 32, 32, 32, 36)),
        (44, 47, iv(10, 29), iv(0, 5), None, (32, 32, 32, 32, 32, 32, 32, 32, 36, 36, 36, 36, 36, 36, 36, 38)),
        (48, 51, iv(30, 31), iv(6, 21), iv(0, 5), (32, 36, 36, 36, 36, 36, 36, 36, 38, 38, 38, 38, 38, 38, 38, 42)),
        (52, 55, None, iv(22, 31), iv(6, 17), (36, 36, 38, 38, 38, 38, 38, 38, 38, 42, 42, 42, 42, 42, 42, 44)),
        (56, 59, None, None, iv(18, 31), (38, 38, 38, 42, 42, 42, 42, 42, 42, 44, 44, 44, 44, 44, 44, 48)),
    ]


def test_gen4_prinplup_quad_effective():
    assert compact_rows(make_prinplup_params(typeEffectiveness=4)) == [
        (41, 43, iv(0, 9), None, None, (60, 60, 60, 60, 60, 60, 60, 64, 64, 64, 64, 64, 64, 64, 64, 72)),
        (44, 47, iv(10, 29), iv(0, 5), None, (64, 64, 64, 64, 64, 64, 64, 64, 72, 72, 72, 72, 72, 72, 72, 76)),
        (48, 51, iv(30, 31), iv(6, 21), iv(0, 5), (64, 72, 72, 72, 72, 72, 72, 72, 76, 76, 76, 76, 76, 76, 76, 84)),
        (52, 55, None, iv(22, 31), iv(6, 17), (72, 72, 76, 76, 76, 76, 76, 76, 76, 84, 84, 84, 84, 84, 84, 88)),
        (56, 59, None, None, iv(18, 31), (76, 76, 76, 84, 84, 84, 84, 84, 84, 88, 88, 88, 88, 88, 88, 96)),
    ]


def test_stat_segments_are_runs_of_equal_stats():
    segments = build_stat_segments(make_prinplup_params(), NatureVariant.NEUTRAL)

    assert (segments[0].stat, segments[0].low, segments[0].high) == (46, 0, 1)
    assert (segments[-1].stat, segments[-1].high) == (54, 31)
    assert sum(segment.high - segment.low + 1 for segment in segments) == 32
    for previous, current in zip(segments, segments[1:]):
        assert current.low == previous.high + 1
        assert current.stat > previous.stat


def test_damage_ranges_cover_every_variant_in_order():
    results = calculate_damage_ranges(make_prinplup_params())

    assert [result.variant for result in results] == [NatureVariant.NEGATIVE, NatureVariant.NEUTRAL, NatureVariant.POSITIVE]
    assert results[0].name == "Negative Nature"
    for result in results:
        for segment in result.rangeSegments:
            assert len(segment.damageValues) == 16
            assert segment.minDamage == segment.damageValues[0]
            assert segment.maxDamage == segment.damageValues[-1]


def test_kill_ranges_group_by_success_count():
    kill_ranges = calculate_kill_ranges(calculate_damage_ranges(make_prinplup_params()), 19)

    assert list(kill_ranges) == [0, 1, 8, 14, 16]
    assert kill_ranges[1].statFrom == 44
    assert kill_ranges[1].statTo == 47
    assert kill_ranges[16].positive == iv(18, 31)
    assert kill_ranges[16].negative is None


def test_kill_ranges_merge_without_inventing_bounds():
    kill_ranges = calculate_kill_ranges(calculate_damage_ranges(make_prinplup_params()), 16)

    assert list(kill_ranges) == [9, 16]

    partial = kill_ranges[9]
    assert (partial.negative, partial.neutral, partial.positive) == (iv(0, 9), None, None)

    certain = kill_ranges[16]
    assert (certain.statFrom, certain.statTo) == (44, 59)
    assert certain.negative == iv(10, 31)
    assert certain.neutral == iv(0, 31)
    assert certain.positive == iv(0, 31)
    assert len(certain.componentResults) == 4


def test_missing_configuration_is_reported_before_calculating():
    with pytest.raises(MissingConfigurationError) as excinfo:
        calculate_damage_ranges(make_prinplup_params(baseStat=None))
    assert excinfo.value.field == "baseStat"


def test_zero_evs_are_accepted():
    results = calculate_damage_ranges(make_prinplup_params(evs=0))
    assert len(results) == 3


def test_lgpe_requires_friendship():
    with pytest.raises(MissingConfigurationError, match="friendship"):
        calculate_damage_ranges(make_prinplup_params(generation=Generation.LGPE))


def test_lgpe_with_friendship():
    results = calculate_damage_ranges(make_prinplup_params(generation=Generation.LGPE, friendship=0, evs=0))
    neutral = results[1].rangeSegments
    # Without EVs or friendship the LGPE stat matches the gen 3+ formula with 0 EVs
    assert neutral[0].stat == 45


@pytest.mark.parametrize(
    "params",
    [
        DamageRangeParameters(
            level=50,
            baseStat=100,
            evs=252,
            movePower=90,
            opponentStat=120,
            stab=True,
            weatherBoosted=True,
            generation=Generation.GEN_7,
        ),
        DamageRangeParameters(
            level=30,
            baseStat=65,
            evs=40,
            movePower=80,
            opponentStat=70,
            opponentLevel=32,
            offensiveMode=False,
            combatStages=1,
            generation=Generation.GEN_3,
        ),
    ],
)
def test_compact_ranges_tile_every_iv_once(params):
    rows = combine_identical_lines(calculate_damage_ranges(params))

    for field in ("negative", "neutral", "positive"):
        intervals = sorted((getattr(row, field) for row in rows if getattr(row, field) is not None), key=lambda value: value.low)

        assert intervals[0].low == 0
        assert intervals[-1].high == 31
        for previous, current in zip(intervals, intervals[1:]):
            assert current.low == previous.high + 1


@pytest.mark.parametrize(
    "overrides",
    [
        dict(level=0),
        dict(level=101),
        dict(evs=256),
        dict(combatStages=7),
        dict(combatStages=-7),
        dict(friendship=256),
        dict(opponentLevel=101),
    ],
)
def test_out_of_bounds_parameters_are_rejected(overrides):
    with pytest.raises(ValidationError):
        make_prinplup_params(**overrides)


def test_range_endpoints_are_bounded_by_iv_limits():
    with pytest.raises(ValidationError):
        IVRange(low=0, high=32)

    assert IVRange(low=0, high=31).high == 31
