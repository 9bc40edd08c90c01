from enum import IntEnum


class GrowthRate(IntEnum):
    """Experience growth rates - values follow the games' internal ids"""

    MEDIUM_FAST = 0
    ERRATIC = 1
    FLUCTUATING = 2
    MEDIUM_SLOW = 3
    FAST = 4
    SLOW = 5
