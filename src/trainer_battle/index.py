"""
IV / level search under CP caps and power-per-turn estimation.

Used by ranking tools; none of this is part of the battle engine itself.
"""

import heapq
import logging
from typing import Iterator, Optional

from src.trainer_battle.constants import MAX_LEVEL, MIN_LEVEL
from src.trainer_battle.damage_calculator import apply_charge_move, apply_fast_move
from src.trainer_battle.schema.battle_pokemon import BattlePokemon
from src.trainer_battle.schema.pokemon import Pokemon
from src.trainer_battle.schema.species_info import BaseStats
from src.trainer_battle.schema.stats import IVs
from src.trainer_battle.stat_calculator import calc_cp_at, calc_scp, calc_stats
from src.trainer_battle.utils.rng import make_rng

logger = logging.getLogger(__name__)

NUM_IV_COMBINATIONS = 16 * 16 * 16


def iter_ivs() -> Iterator[IVs]:
    """All 4096 IV triples, attack-major"""
    for i in range(NUM_IV_COMBINATIONS):
        yield IVs.from_index(i)


def level_limited_by_cp(base: BaseStats, ivs: IVs, limit_cp: int, limit_level: float = MAX_LEVEL) -> Optional[float]:
    """
    Highest half level up to `limit_level` whose CP does not exceed `limit_cp`.

    Returns:
        The level, `limit_level` when the cap is never hit, or None when even
        level 1.0 is over the cap
    """
    level = MIN_LEVEL
    while level <= limit_level:
        if calc_cp_at(base, level, ivs) > limit_cp:
            if level == MIN_LEVEL:
                return None
            return level - 0.5
        level += 0.5
    return limit_level


def top_scp_ivs_limited_by_cp(base: BaseStats, limit_cp: int, limit_level: float = MAX_LEVEL, count: int = 1) -> list[tuple[int, float, IVs]]:
    """
    Best `count` IV triples by SCP when each is powered up as far as the cap allows.

    Returns:
        (scp, level, ivs) tuples, best first. Ties keep the earlier IV triple.
    """
    candidates = []
    for order, ivs in enumerate(iter_ivs()):
        level = level_limited_by_cp(base, ivs, limit_cp, limit_level)
        if level is None:
            continue
        scp = calc_scp(calc_stats(base, level, ivs))
        candidates.append((scp, -order, level, ivs))

    best = heapq.nlargest(count, candidates, key=lambda c: (c[0], c[1]))
    return [(scp, level, ivs) for scp, _, level, ivs in best]


def max_scp_ivs_limited_by_cp(base: BaseStats, limit_cp: int, limit_level: float = MAX_LEVEL) -> Optional[tuple[int, float, IVs]]:
    best = top_scp_ivs_limited_by_cp(base, limit_cp, limit_level, count=1)
    return best[0] if best else None


def estimate_power_per_turn(attacker: Pokemon, defender: Pokemon, num_turns: int = 1000, seed: int = 0, disable_type_effect: bool = False) -> float:
    """
    Average damage per tick dealt by `attacker` over `num_turns` ticks.

    The attacker uses its fast move back to back and fires its first charge move
    as soon as it can afford it. The defender's HP is refilled after every hit so
    the loop never ends early. Charge moves take no time here.
    """
    if num_turns <= 0:
        raise ValueError("num_turns must be positive")

    rng = make_rng(seed)
    you = BattlePokemon.from_pokemon(attacker)
    target = BattlePokemon.from_pokemon(defender)
    if disable_type_effect:
        you.disable_type_effect()

    total_damage = 0
    turns = 0
    while turns < num_turns:
        turns += attacker.fastMove.turns
        total_damage += apply_fast_move(you, target)
        target.hp = defender.hp

        if you.can_charge_move(0):
            result = apply_charge_move(0, you, target, rng)
            if result is not None:
                total_damage += result[0]
            target.hp = defender.hp

    ppt = total_damage / turns
    logger.debug("%s vs %s: %.3f damage per turn over %d turns", attacker.name, defender.name, ppt, turns)
    return ppt
