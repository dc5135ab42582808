"""
Stat and index calculator

Pure functions from (base stats, level, IVs) to derived stats and the three
power indices:

- CP:  attack * sqrt(defense * stamina) / 10
- SCP: (attack * defense * floor(stamina)) ** (2/3) / 10
- DCP: (attack * defense**2 * stamina**2) ** (2/5) / 10

All indices are floored and never drop below 10. IV range checks live in the
IVs model, not here.
"""

import math
from typing import Optional

from src.trainer_battle.constants import MAX_IV, MAX_LEVEL, MAX_TABLE_LEVEL, MIN_CP, MIN_IV, MIN_LEVEL
from src.trainer_battle.data.cp_multiplier import POKEMON_LEVELS, PokemonLevel
from src.trainer_battle.schema.species_info import BaseStats
from src.trainer_battle.schema.stats import IVs, Stats


def level_index(level: float) -> int:
    if not MIN_LEVEL <= level <= MAX_TABLE_LEVEL:
        raise ValueError(f"Level must be between {MIN_LEVEL} and {MAX_TABLE_LEVEL}, got {level}")
    index = (level - 1.0) * 2
    if index != int(index):
        raise ValueError(f"Level must be a multiple of 0.5, got {level}")
    return int(index)


def get_pokemon_level(level: float) -> PokemonLevel:
    return POKEMON_LEVELS[level_index(level)]


def level_multiplier(level: float) -> float:
    """CP multiplier for a half level in [1.0, 51.0]"""
    return get_pokemon_level(level).cpm


def powerup_cost(level: float) -> tuple[int, int]:
    """Stardust and candies needed to power up from `level` to the next half level"""
    row = get_pokemon_level(level)
    return row.powerup_stardust, row.powerup_candies


def calc_stats(base: BaseStats, level: float, ivs: IVs) -> Stats:
    cpm = level_multiplier(level)
    return Stats(
        attack=(base.attack + ivs.attack) * cpm,
        defense=(base.defense + ivs.defense) * cpm,
        stamina=(base.stamina + ivs.stamina) * cpm,
    )


def calc_cp(stats: Stats) -> int:
    cp = math.floor(stats.attack * math.sqrt(stats.defense * stats.stamina) / 10.0)
    return max(cp, MIN_CP)


def calc_scp(stats: Stats, floor_stamina: bool = True) -> int:
    """
    Stat product index.

    Args:
        stats: Derived stats
        floor_stamina: Floor stamina to whole HP before multiplying. Pass False for
            the older variant that uses the raw stamina value.
    """
    stamina = math.floor(stats.stamina) if floor_stamina else stats.stamina
    scp = math.floor((stats.attack * stats.defense * stamina) ** (2.0 / 3.0) / 10.0)
    return max(scp, MIN_CP)


def calc_dcp(stats: Stats) -> int:
    dcp = math.floor((stats.attack * stats.defense**2 * stats.stamina**2) ** (2.0 / 5.0) / 10.0)
    return max(dcp, MIN_CP)


def calc_cp_at(base: BaseStats, level: float, ivs: IVs) -> int:
    return calc_cp(calc_stats(base, level, ivs))


def level_from_cp(base: BaseStats, cp: int, ivs: IVs) -> Optional[float]:
    """
    Inverse CP lookup.

    Scans the half levels 1.0..50.0 and returns the first whose CP equals `cp`
    exactly, or None when no level reproduces it.
    """
    for row in POKEMON_LEVELS:
        if row.level > MAX_LEVEL:
            break
        if calc_cp_at(base, row.level, ivs) == cp:
            return row.level
    return None


def search_near_ivs(base: BaseStats, cp: int, ivs: IVs) -> list[IVs]:
    """IV triples within one step of `ivs` on each axis that do reproduce `cp`"""
    found: list[IVs] = []
    for d_attack in (-1, 0, 1):
        for d_defense in (-1, 0, 1):
            for d_stamina in (-1, 0, 1):
                if d_attack == d_defense == d_stamina == 0:
                    continue
                candidate = (ivs.attack + d_attack, ivs.defense + d_defense, ivs.stamina + d_stamina)
                if not all(MIN_IV <= v <= MAX_IV for v in candidate):
                    continue
                near = IVs(attack=candidate[0], defense=candidate[1], stamina=candidate[2])
                if level_from_cp(base, cp, near) is not None:
                    found.append(near)
    return found
