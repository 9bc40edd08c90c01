from enum import IntEnum


class Stat(IntEnum):
    """The six permanent stats, in the order stat lines and IV vectors use"""

    HP = 0
    ATTACK = 1
    DEFENSE = 2
    SP_ATTACK = 3
    SP_DEFENSE = 4
    SPEED = 5

    @classmethod
    def nature_stats(cls) -> list["Stat"]:
        """Stats that a nature can raise or lower"""
        return [stat for stat in cls if stat != cls.HP]
