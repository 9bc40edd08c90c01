from enum import IntEnum


class ModifierPhase(IntEnum):
    """Where in the damage formula a multiplier is folded in"""

    MOVE_POWER = 0  # multiplies the move's power, not floored on its own
    OFFENSIVE_STAT = 1  # multiplies the attacking stat, not floored on its own
    BASE_POWER = 2  # folded into the power, floored after each step
    PRE_RANDOM = 3  # applied to base damage before the 85-100% roll
    POST_RANDOM = 4  # applied after the roll


class DamageModifier(IntEnum):
    TORRENT = 0  # Torrent / Overgrow / Blaze / Swarm at low HP
    SCREEN = 1
    MULTI_TARGET = 2
    WEATHER_BOOST = 3
    WEATHER_REDUCTION = 4
    OTHER_POWER = 5
    CRITICAL_HIT = 6
    STAB = 7
    TYPE_EFFECTIVENESS = 8
    OTHER = 9
