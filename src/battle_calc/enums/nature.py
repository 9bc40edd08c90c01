from enum import IntEnum

from src.battle_calc.constants import NATURE_MULTIPLIER_NEGATIVE, NATURE_MULTIPLIER_NEUTRAL, NATURE_MULTIPLIER_POSITIVE
from src.battle_calc.enums.stat import Stat


class NatureVariant(IntEnum):
    """How a nature can affect a single stat.

    Per-variant data is always stored in this order (negative, neutral, positive).
    """

    NEGATIVE = 0
    NEUTRAL = 1
    POSITIVE = 2

    @property
    def multiplier(self) -> float:
        return _VARIANT_MULTIPLIERS[self]

    @property
    def display_name(self) -> str:
        return f"{self.name.capitalize()} Nature"


_VARIANT_MULTIPLIERS = {
    NatureVariant.NEGATIVE: NATURE_MULTIPLIER_NEGATIVE,
    NatureVariant.NEUTRAL: NATURE_MULTIPLIER_NEUTRAL,
    NatureVariant.POSITIVE: NATURE_MULTIPLIER_POSITIVE,
}


class Nature(IntEnum):
    """Natures in game index order (personality % 25)"""

    HARDY = 0
    LONELY = 1
    BRAVE = 2
    ADAMANT = 3
    NAUGHTY = 4
    BOLD = 5
    DOCILE = 6
    RELAXED = 7
    IMPISH = 8
    LAX = 9
    TIMID = 10
    HASTY = 11
    SERIOUS = 12
    JOLLY = 13
    NAIVE = 14
    MODEST = 15
    MILD = 16
    QUIET = 17
    BASHFUL = 18
    RASH = 19
    CALM = 20
    GENTLE = 21
    SASSY = 22
    CAREFUL = 23
    QUIRKY = 24

    @property
    def boosted(self) -> Stat:
        return NATURE_STAT_CHANGES[self][0]

    @property
    def reduced(self) -> Stat:
        return NATURE_STAT_CHANGES[self][1]

    def is_neutral(self) -> bool:
        """Hardy, Docile, Serious, Bashful and Quirky raise and lower the same stat"""
        return self.boosted == self.reduced

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


# (boosted stat, reduced stat)
NATURE_STAT_CHANGES: dict[Nature, tuple[Stat, Stat]] = {
    Nature.HARDY: (Stat.ATTACK, Stat.ATTACK),
    Nature.LONELY: (Stat.ATTACK, Stat.DEFENSE),
    Nature.BRAVE: (Stat.ATTACK, Stat.SPEED),
    Nature.ADAMANT: (Stat.ATTACK, Stat.SP_ATTACK),
    Nature.NAUGHTY: (Stat.ATTACK, Stat.SP_DEFENSE),
    Nature.BOLD: (Stat.DEFENSE, Stat.ATTACK),
    Nature.DOCILE: (Stat.DEFENSE, Stat.DEFENSE),
    Nature.RELAXED: (Stat.DEFENSE, Stat.SPEED),
    Nature.IMPISH: (Stat.DEFENSE, Stat.SP_ATTACK),
    Nature.LAX: (Stat.DEFENSE, Stat.SP_DEFENSE),
    Nature.TIMID: (Stat.SPEED, Stat.ATTACK),
    Nature.HASTY: (Stat.SPEED, Stat.DEFENSE),
    Nature.SERIOUS: (Stat.SPEED, Stat.SPEED),
    Nature.JOLLY: (Stat.SPEED, Stat.SP_ATTACK),
    Nature.NAIVE: (Stat.SPEED, Stat.SP_DEFENSE),
    Nature.MODEST: (Stat.SP_ATTACK, Stat.ATTACK),
    Nature.MILD: (Stat.SP_ATTACK, Stat.DEFENSE),
    Nature.QUIET: (Stat.SP_ATTACK, Stat.SPEED),
    Nature.BASHFUL: (Stat.SP_ATTACK, Stat.SP_ATTACK),
    Nature.RASH: (Stat.SP_ATTACK, Stat.SP_DEFENSE),
    Nature.CALM: (Stat.SP_DEFENSE, Stat.ATTACK),
    Nature.GENTLE: (Stat.SP_DEFENSE, Stat.DEFENSE),
    Nature.SASSY: (Stat.SP_DEFENSE, Stat.SPEED),
    Nature.CAREFUL: (Stat.SP_DEFENSE, Stat.SP_ATTACK),
    Nature.QUIRKY: (Stat.SP_DEFENSE, Stat.SP_DEFENSE),
}
