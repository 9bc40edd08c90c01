from typing import Optional

from pydantic import BaseModel, Field

from src.battle_calc.constants import (
    DEFAULT_COMBAT_STAGE,
    MAX_COMBAT_STAGE,
    MAX_FRIENDSHIP,
    MAX_LEVEL,
    MAX_PER_STAT_EVS,
    MIN_COMBAT_STAGE,
    MIN_LEVEL,
)
from src.battle_calc.enums import Generation
from src.battle_calc.errors import MissingConfigurationError


class DamageRangeParameters(BaseModel):
    """Configuration for a damage range calculation over every IV.

    The "owned" Pokemon is the one whose IVs are unknown. In offensive mode it
    is attacking; otherwise the opponent attacks it.
    """

    # Owned Pokemon
    level: Optional[int] = Field(default=None, ge=MIN_LEVEL, le=MAX_LEVEL)
    baseStat: Optional[int] = Field(default=None, ge=1, le=255)
    evs: Optional[int] = Field(default=None, ge=0, le=MAX_PER_STAT_EVS)  # awakening values for LGPE
    combatStages: int = Field(default=DEFAULT_COMBAT_STAGE, ge=MIN_COMBAT_STAGE, le=MAX_COMBAT_STAGE)
    friendship: Optional[int] = Field(default=None, ge=0, le=MAX_FRIENDSHIP)  # LGPE only

    # Move
    movePower: Optional[int] = Field(default=None, ge=1)
    stab: bool = False
    typeEffectiveness: float = Field(default=1, ge=0)
    criticalHit: bool = False
    torrent: bool = False  # Torrent, Overgrow, Blaze or Swarm is active
    multiTarget: bool = False  # spread move in a double or triple battle
    weatherBoosted: bool = False
    weatherReduced: bool = False
    screen: bool = False  # defender behind Reflect / Light Screen
    otherModifier: float = Field(default=1, ge=0)
    otherPowerModifier: float = Field(default=1, ge=0)

    # Opponent
    offensiveMode: bool = True
    opponentLevel: Optional[int] = Field(default=None, ge=MIN_LEVEL, le=MAX_LEVEL)
    opponentStat: Optional[int] = Field(default=None, ge=1)
    opponentCombatStages: int = Field(default=DEFAULT_COMBAT_STAGE, ge=MIN_COMBAT_STAGE, le=MAX_COMBAT_STAGE)

    generation: Optional[Generation] = None

    def check_required(self) -> None:
        """Raise MissingConfigurationError for the first mandatory field left unset"""
        for field in ("level", "baseStat", "evs", "opponentStat", "generation", "movePower"):
            if getattr(self, field) is None:
                raise MissingConfigurationError(field)

        if not self.offensiveMode and self.opponentLevel is None:
            raise MissingConfigurationError("opponentLevel", "when offensiveMode is false")

        if self.generation == Generation.LGPE and self.friendship is None:
            raise MissingConfigurationError("friendship", "when generation is lgpe")
