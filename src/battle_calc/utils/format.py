"""
Display strings for damage rolls, IV ranges and stats.
"""

from typing import Optional, Sequence

from src.battle_calc.constants import MAX_IV, MIN_IV
from src.battle_calc.enums import Stat
from src.battle_calc.schema.iv_range import IVRange, NatureIVRanges

STAT_NAMES = {
    Stat.HP: ("HP", "HP"),
    Stat.ATTACK: ("Attack", "ATK"),
    Stat.DEFENSE: ("Defense", "DEF"),
    Stat.SP_ATTACK: ("Sp. Attack", "SP ATK"),
    Stat.SP_DEFENSE: ("Sp. Defense", "SP DEF"),
    Stat.SPEED: ("Speed", "SPE"),
}


def format_damage_range(values: Sequence[int]) -> str:
    """
    Summarise sorted damage rolls, e.g. ``(1) / 2–3 / (4)``.

    A lowest or highest roll that occurs only once is shown in parentheses
    beside the range of the remaining rolls.
    """
    first, second = values[0], values[1]
    second_to_last, last = values[-2], values[-1]

    if first == last:
        return f"{first}"

    low_extreme = first if first != second else None
    high_extreme = last if second_to_last != last else None

    middle = f"{second}" if second == second_to_last else f"{second}–{second_to_last}"

    prefix = f"({low_extreme}) / " if low_extreme is not None else ""
    suffix = f" / ({high_extreme})" if high_extreme is not None else ""

    return f"{prefix}{middle}{suffix}"


def format_iv_range(value: Optional[IVRange]) -> str:
    if value is None:
        return "x"
    if value.low == MIN_IV and value.high == MAX_IV:
        return "0+"
    if value.low == MIN_IV:
        return f"{value.high}" if value.high == MIN_IV else f"{value.high}-"
    if value.high == MAX_IV:
        return f"{value.low}" if value.low == MAX_IV else f"{value.low}+"
    if value.low == value.high:
        return f"{value.low}"
    return f"{value.low}–{value.high}"


def format_iv_range_set(values: NatureIVRanges) -> str:
    """Negative / neutral / positive ranges, ``x`` where a variant is impossible"""
    return " / ".join(format_iv_range(value) for value in values.as_tuple())


def format_stat_range(low: int, high: int) -> str:
    return f"{low}" if low == high else f"{low}–{high}"


def format_stat_name(stat: Stat, short_form: bool = False) -> str:
    full, short = STAT_NAMES[stat]
    return short if short_form else full


def capitalize(value: str) -> str:
    return value[:1].upper() + value[1:]
