from enum import IntEnum

from src.battle_calc.constants import (
    CRIT_MULTIPLIER_LEGACY,
    CRIT_MULTIPLIER_MODERN,
    MULTI_TARGET_MULTIPLIER,
    MULTI_TARGET_MULTIPLIER_GEN3,
)


class Generation(IntEnum):
    """Formula families.

    LGPE (Let's Go Pikachu/Eevee) and BDSP (Brilliant Diamond/Shining Pearl)
    are not ordered relative to the numbered generations; never compare
    members with < or >, use the predicates below.
    """

    GEN_1 = 1
    GEN_2 = 2
    GEN_3 = 3
    GEN_4 = 4
    GEN_5 = 5
    GEN_6 = 6
    GEN_7 = 7
    GEN_8 = 8
    LGPE = 0x10
    BDSP = 0x11

    def uses_gen1_formula(self) -> bool:
        """Gen 1-2 stats: DVs doubled with the base, sqrt-based stat experience, no nature"""
        return self in (Generation.GEN_1, Generation.GEN_2)

    def is_lgpe(self) -> bool:
        return self == Generation.LGPE

    def uses_4096_rounding(self) -> bool:
        """Generations that multiply by 4096ths and round half down instead of flooring"""
        return self in (Generation.GEN_5, Generation.GEN_7, Generation.GEN_8, Generation.LGPE)

    @property
    def crit_multiplier(self) -> float:
        if self in (Generation.GEN_1, Generation.GEN_2, Generation.GEN_3, Generation.GEN_4, Generation.GEN_5):
            return CRIT_MULTIPLIER_LEGACY
        return CRIT_MULTIPLIER_MODERN

    @property
    def multi_target_multiplier(self) -> float:
        if self == Generation.GEN_3:
            return MULTI_TARGET_MULTIPLIER_GEN3
        return MULTI_TARGET_MULTIPLIER
