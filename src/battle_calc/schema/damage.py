from pydantic import BaseModel, ConfigDict, Field, computed_field

from src.battle_calc.enums import NatureVariant
from src.battle_calc.schema.iv_range import NatureIVRanges, StatRange

# Sixteen damage values, one per random factor 85..100
DamageRollSet = tuple[int, ...]


class RangeResult(StatRange):
    """A stat segment together with the damage rolls it produces"""

    model_config = ConfigDict(frozen=True)

    damageValues: DamageRollSet = Field(min_length=16, max_length=16)

    @computed_field
    @property
    def minDamage(self) -> int:
        return min(self.damageValues)

    @computed_field
    @property
    def maxDamage(self) -> int:
        return max(self.damageValues)


class NatureDamageRanges(BaseModel):
    """Damage results for every stat segment of one nature variant"""

    model_config = ConfigDict(frozen=True)

    variant: NatureVariant
    rangeSegments: list[RangeResult]

    @property
    def name(self) -> str:
        return self.variant.display_name


class StatIVDefinition(NatureIVRanges):
    """Per-variant IV ranges plus the stat values they span"""

    statFrom: int = Field(ge=0)
    statTo: int = Field(ge=0)


class CompactRange(StatIVDefinition):
    """Segments of all three nature variants that share identical damage rolls"""

    damageValues: DamageRollSet = Field(min_length=16, max_length=16)

    @computed_field
    @property
    def minDamage(self) -> int:
        return min(self.damageValues)

    @computed_field
    @property
    def maxDamage(self) -> int:
        return max(self.damageValues)

    def count_successes(self, health_threshold: int) -> int:
        """Number of rolls that reach the threshold"""
        return sum(1 for value in self.damageValues if value >= health_threshold)


class OneShotResult(StatIVDefinition):
    """Compact ranges sharing the same number of one-hit knockout rolls"""

    successes: int = Field(ge=0, le=16)
    componentResults: list[CompactRange] = Field(default_factory=list)


class CombinedDamageOdds(BaseModel):
    """Outcome of a multi-hit sequence for one number of critical hits.

    ``successes`` counts (roll combination, crit placement) pairs that reach the
    threshold, summed over all ``binomialCoefficient`` placements. ``odds`` is
    the probability of one particular placement.
    """

    model_config = ConfigDict(frozen=True)

    critCount: int = Field(ge=0)
    odds: float = Field(ge=0, le=1)
    binomialCoefficient: int = Field(ge=1)
    successes: int = Field(ge=0)
