from enum import IntEnum


class ActionKind(IntEnum):
    NONE = 0
    FAST_MOVE = 1
    CHARGE_MOVE = 2
    SWITCH = 3


class PhaseKind(IntEnum):
    NEUTRAL = 0
    TIME_OVER = 1
    GAME_OVER = 2


class Outcome(IntEnum):
    """Result carried by a terminal phase"""

    PLAYER0_WINS = 0
    PLAYER1_WINS = 1
    DRAW = 2
