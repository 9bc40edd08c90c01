from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.battle_calc.constants import MAX_IV, MIN_IV
from src.battle_calc.enums import NatureVariant, Stat


class IVRange(BaseModel):
    """Inclusive range of individual values.

    An empty range is never an IVRange: it is represented by ``None`` wherever
    an ``Optional[IVRange]`` is expected.
    """

    model_config = ConfigDict(frozen=True)

    low: int = Field(ge=MIN_IV, le=MAX_IV)
    high: int = Field(ge=MIN_IV, le=MAX_IV)

    @model_validator(mode="after")
    def _check_order(self) -> "IVRange":
        if self.low > self.high:
            raise ValueError(f"IV range low ({self.low}) must not exceed high ({self.high})")
        return self

    @classmethod
    def single(cls, iv: int) -> "IVRange":
        return cls(low=iv, high=iv)

    @classmethod
    def full(cls) -> "IVRange":
        return cls(low=0, high=31)

    def ivs(self) -> range:
        return range(self.low, self.high + 1)

    def contains(self, iv: int) -> bool:
        return self.low <= iv <= self.high

    def overlaps(self, other: Optional["IVRange"]) -> bool:
        if other is None:
            return False
        return max(self.low, other.low) <= min(self.high, other.high)

    def union(self, other: Optional["IVRange"]) -> "IVRange":
        """Bounding range of both; an empty ``other`` contributes nothing"""
        if other is None:
            return self
        return IVRange(low=min(self.low, other.low), high=max(self.high, other.high))


def merge_iv_ranges(a: Optional[IVRange], b: Optional[IVRange]) -> Optional[IVRange]:
    """Union of two possibly-empty ranges"""
    if a is None:
        return b
    return a.union(b)


class NatureIVRanges(BaseModel):
    """One optional IV range per nature variant"""

    model_config = ConfigDict(frozen=True)

    negative: Optional[IVRange] = None
    neutral: Optional[IVRange] = None
    positive: Optional[IVRange] = None

    def __getitem__(self, variant: NatureVariant) -> Optional[IVRange]:
        if variant == NatureVariant.NEGATIVE:
            return self.negative
        if variant == NatureVariant.NEUTRAL:
            return self.neutral
        return self.positive

    def as_tuple(self) -> tuple[Optional[IVRange], Optional[IVRange], Optional[IVRange]]:
        return self.negative, self.neutral, self.positive


class IVRangeSet(NatureIVRanges):
    """Feasible IV ranges for one stat, per nature variant, plus their combined bounds"""

    combined: Optional[IVRange] = None

    @classmethod
    def from_variants(
        cls,
        negative: Optional[IVRange],
        neutral: Optional[IVRange],
        positive: Optional[IVRange],
    ) -> "IVRangeSet":
        combined = None
        for value in (negative, neutral, positive):
            combined = merge_iv_ranges(combined, value)
        return cls(negative=negative, neutral=neutral, positive=positive, combined=combined)


class StatRange(BaseModel):
    """A maximal run of consecutive IVs that all produce the same stat value"""

    stat: int = Field(ge=0)
    low: int = Field(ge=MIN_IV, le=MAX_IV)
    high: int = Field(ge=MIN_IV, le=MAX_IV)

    @property
    def iv_range(self) -> IVRange:
        return IVRange(low=self.low, high=self.high)


class ConfirmedNature(BaseModel):
    """Stats known to be lowered and raised by nature.

    ``reduced == boosted`` describes a neutral nature. ``indeterminate`` marks a
    result derived from contradictory IV ranges; such a result confirms nothing.
    """

    model_config = ConfigDict(frozen=True)

    reduced: Optional[Stat] = None
    boosted: Optional[Stat] = None
    indeterminate: bool = False

    @model_validator(mode="after")
    def _check_stats(self) -> "ConfirmedNature":
        if self.reduced == Stat.HP or self.boosted == Stat.HP:
            raise ValueError("HP cannot be affected by nature")
        return self


class StatValuePossibilitySet(BaseModel):
    """Stat values reachable over all IVs (possible) and over the feasible IVs (valid)"""

    possible: list[int] = Field(default_factory=list)
    valid: list[int] = Field(default_factory=list)
