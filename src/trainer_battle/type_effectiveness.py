from typing import Iterable, Optional

from src.trainer_battle.enums.type import Type
from src.trainer_battle.constants import (
    MAX_TYPE_EFFECT_SUM,
    MIN_TYPE_EFFECT_SUM,
    MSG_NOT_VERY_EFFECTIVE,
    MSG_SUPER_EFFECTIVE,
    TYPE_EFFECT_MULTIPLIERS,
)

# Rows: attacking type, columns: defending type, both in Type order.
# 1 = super effective, -1 = not very effective, -2 = double resisted
TYPE_EFFECT_CHART: list[list[int]] = [
    # NOR FIR WAT ELE GRA ICE FIG POI GRO FLY PSY BUG ROC GHO DRA DAR STE FAI
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, -1, -2, 0, 0, -1, 0],  # Normal
    [0, -1, -1, 0, 1, 1, 0, 0, 0, 0, 0, 1, -1, 0, -1, 0, 1, 0],  # Fire
    [0, 1, -1, 0, -1, 0, 0, 0, 1, 0, 0, 0, 1, 0, -1, 0, 0, 0],  # Water
    [0, 0, 1, -1, -1, 0, 0, 0, -2, 1, 0, 0, 0, 0, -1, 0, 0, 0],  # Electric
    [0, -1, 1, 0, -1, 0, 0, -1, 1, -1, 0, -1, 1, 0, -1, 0, -1, 0],  # Grass
    [0, -1, -1, 0, 1, -1, 0, 0, 1, 1, 0, 0, 0, 0, 1, 0, -1, 0],  # Ice
    [1, 0, 0, 0, 0, 1, 0, -1, 0, -1, -1, -1, 1, -2, 0, 1, 1, -1],  # Fighting
    [0, 0, 0, 0, 1, 0, 0, -1, -1, 0, 0, 0, -1, -1, 0, 0, -2, 1],  # Poison
    [0, 1, 0, 1, -1, 0, 0, 1, 0, -2, 0, -1, 1, 0, 0, 0, 1, 0],  # Ground
    [0, 0, 0, -1, 1, 0, 1, 0, 0, 0, 0, 1, -1, 0, 0, 0, -1, 0],  # Flying
    [0, 0, 0, 0, 0, 0, 1, 1, 0, 0, -1, 0, 0, 0, 0, -2, -1, 0],  # Psychic
    [0, -1, 0, 0, 1, 0, -1, -1, 0, -1, 1, 0, 0, -1, 0, 1, -1, -1],  # Bug
    [0, 1, 0, 0, 0, 1, -1, 0, -1, 1, 0, 1, 0, 0, 0, 0, -1, 0],  # Rock
    [-2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1, 0, -1, 0, 0],  # Ghost
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, -1, -2],  # Dragon
    [0, 0, 0, 0, 0, 0, -1, 0, 0, 0, 1, 0, 0, 1, 0, -1, 0, -1],  # Dark
    [0, -1, -1, -1, 0, 1, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, -1, 1],  # Steel
    [0, -1, 0, 0, 0, 0, 1, -1, 0, 0, 0, 0, 0, 0, 1, 1, -1, 0],  # Fairy
]


def type_effect_sum(attacking_type: Type, defender_types: Iterable[Type]) -> int:
    """Sum the chart entries for one attacking type against each defending type, clamped to [-3, 2]"""
    total = sum(TYPE_EFFECT_CHART[attacking_type][defender_type] for defender_type in defender_types)
    return max(MIN_TYPE_EFFECT_SUM, min(MAX_TYPE_EFFECT_SUM, total))


def type_effect_bonus(attacking_type: Type, defender_types: Iterable[Type]) -> float:
    """
    Damage multiplier for a move of `attacking_type` hitting a creature of `defender_types`.

    Dual types add their chart entries before the lookup, so a double weakness is 1.6**2
    and a weakness plus a resistance cancels out to 1.0.
    """
    return TYPE_EFFECT_MULTIPLIERS[type_effect_sum(attacking_type, defender_types) - MIN_TYPE_EFFECT_SUM]


def effectiveness_message(multiplier: float) -> Optional[str]:
    if multiplier > 1.0:
        return MSG_SUPER_EFFECTIVE
    if multiplier < 1.0:
        return MSG_NOT_VERY_EFFECTIVE
    return None


def format_effect_table(second_type: Optional[Type] = None) -> str:
    """
    Render the chart as text, one row per attacking type.

    With `second_type` each column is the combined defender (column type + second_type),
    so the cells show the clamped sums used for dual-typed creatures.
    """
    header = "         " + " ".join(f"{t.display_name[:3]:>3}" for t in Type)
    lines = [header]
    for attacking_type in Type:
        cells = []
        for defending_type in Type:
            defenders = [defending_type] if second_type is None else [defending_type, second_type]
            cells.append(f"{type_effect_sum(attacking_type, defenders):>3}")
        lines.append(f"{attacking_type.display_name:<8} " + " ".join(cells))
    return "\n".join(lines)
