from pydantic import BaseModel, Field

from src.battle_calc.enums import Type


class DefensiveEffectivenesses(BaseModel):
    """Attacking types grouped by the multiplier they deal to a defender"""

    x4: list[Type] = Field(default_factory=list)
    x2: list[Type] = Field(default_factory=list)
    x0: list[Type] = Field(default_factory=list)
    half: list[Type] = Field(default_factory=list)
    fourth: list[Type] = Field(default_factory=list)
