from src.battle_calc.enums.stat import Stat
from src.battle_calc.enums.nature import Nature, NatureVariant, NATURE_STAT_CHANGES
from src.battle_calc.enums.generation import Generation
from src.battle_calc.enums.type import Type
from src.battle_calc.enums.other import GrowthRate
from src.battle_calc.enums.modifier import DamageModifier, ModifierPhase
