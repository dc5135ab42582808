from enum import IntEnum


class Type(IntEnum):
    """Elemental types, in type-effectiveness table order"""

    NORMAL = 0
    FIRE = 1
    WATER = 2
    ELECTRIC = 3
    GRASS = 4
    ICE = 5
    FIGHTING = 6
    POISON = 7
    GROUND = 8
    FLYING = 9
    PSYCHIC = 10
    BUG = 11
    ROCK = 12
    GHOST = 13
    DRAGON = 14
    DARK = 15
    STEEL = 16
    FAIRY = 17

    @property
    def display_name(self) -> str:
        return self.name.capitalize()
