"""
Damage calculation for trainer battles

    damage = floor(0.5 * power * (attack / defense) * type_effect * stab * 1.3) + 1

attack and defense are the current stats with the stat stage multipliers of
the attacker and defender applied. A shielded charge move always deals 1.
"""

import logging
import math
import random
from typing import Optional

from src.trainer_battle.constants import SHIELDED_DAMAGE, TRAINER_BATTLE_BONUS
from src.trainer_battle.data.moves import real_power
from src.trainer_battle.schema.battle_move import ChargeMove, FastMove
from src.trainer_battle.schema.battle_pokemon import BattlePokemon
from src.trainer_battle.type_effectiveness import type_effect_bonus
from src.trainer_battle.utils.rng import roll_percent

logger = logging.getLogger(__name__)


def calc_damage(power: float, attack: float, defense: float, modifier: float = 1.0) -> int:
    """
    Core damage formula.

    Args:
        power: Move power, same-type bonus already applied
        attack: Attacker's effective attack
        defense: Defender's effective defense
        modifier: Type effectiveness (and any other multiplier)

    Returns:
        Damage, at least 1
    """
    return math.floor(0.5 * power * (attack / defense) * modifier * TRAINER_BATTLE_BONUS) + 1


def move_type_effect(move: FastMove | ChargeMove, attacker: BattlePokemon, defender: BattlePokemon) -> float:
    if attacker.isDisableTypeEffect:
        return 1.0
    return type_effect_bonus(move.type, defender.pokemon.types)


def move_damage(move: FastMove | ChargeMove, attacker: BattlePokemon, defender: BattlePokemon) -> int:
    power = real_power(move, attacker.pokemon.types)
    type_effect = move_type_effect(move, attacker, defender)
    damage = calc_damage(power, attacker.effective_attack, defender.effective_defense, type_effect)
    logger.debug(
        "%s -> %s: power=%.1f attack=%.1f defense=%.1f type_effect=%.3f damage=%d",
        move.name, defender.name, power, attacker.effective_attack, defender.effective_defense, type_effect, damage,
    )
    return damage


def apply_fast_move(attacker: BattlePokemon, defender: BattlePokemon) -> int:
    """
    Land the attacker's fast move: damage the defender and add the move's energy.

    A fainted defender takes no further damage. A fainted attacker deals no damage
    but its energy is still credited.

    Returns:
        Damage dealt
    """
    move = attacker.pokemon.fastMove
    damage = 0
    if not attacker.is_fainted() and not defender.is_fainted():
        damage = defender.take_damage(move_damage(move, attacker, defender))
    attacker.gain_energy(move.energy)
    return damage


def roll_stat_change(move: ChargeMove, attacker: BattlePokemon, defender: BattlePokemon, rng: random.Random) -> bool:
    """Apply the move's stat change if the roll in [0, 100) is under its chance"""
    if move.statChange is None:
        return False
    if not roll_percent(rng, move.statChangeChance):
        return False
    change = move.statChange
    attacker.add_buff(change.selfAttack, change.selfDefense)
    defender.add_buff(change.opponentAttack, change.opponentDefense)
    return True


def apply_charge_move(
    slot: int,
    attacker: BattlePokemon,
    defender: BattlePokemon,
    rng: random.Random,
    shielded: bool = False,
) -> Optional[tuple[int, bool]]:
    """
    Fire the charge move in `slot`.

    Damage is computed with the stat stages in effect before the move's own stat change.

    Returns:
        (damage, stat_changed), or None when the slot is empty or energy is short
    """
    move = attacker.get_charge_move(slot)
    if move is None or attacker.energy < move.energy:
        return None

    damage = SHIELDED_DAMAGE if shielded else move_damage(move, attacker, defender)
    stat_changed = roll_stat_change(move, attacker, defender, rng)
    attacker.spend_energy(move.energy)
    return defender.take_damage(damage), stat_changed
