"""
Decision functions that drive a player during auto-play.

Each function only sees the acting player's own state:

- strategy(player) -> Action
- shield(player) -> bool, asked only while the player still has shields
- switch(player) -> int, roster index to send in after a faint
"""

from typing import Callable, Iterable

from pydantic import BaseModel

from src.trainer_battle.schema.battle_state import Action, Player

StrategyFn = Callable[[Player], Action]
ShieldFn = Callable[[Player], bool]
SwitchFn = Callable[[Player], int]


# =============================================================================
# STRATEGIES
# =============================================================================


def fast_move_only(player: Player) -> Action:
    return Action.fast_move()


def do_nothing(player: Player) -> Action:
    return Action.none()


def charge_when_ready(player: Player) -> Action:
    """Fire the strongest affordable charge move, otherwise keep using the fast move"""
    poke = player.poke
    best_slot = None
    best_power = -1
    for slot, move in enumerate(poke.pokemon.charge_moves()):
        if poke.can_charge_move(slot) and move.power > best_power:
            best_slot = slot
            best_power = move.power
    if best_slot is not None:
        return Action.charge_move(best_slot)
    return Action.fast_move()


def scripted(actions: Iterable[Action]) -> StrategyFn:
    """Replay a fixed sequence of actions, then do nothing"""
    queue = list(actions)

    def strategy(player: Player) -> Action:
        if queue:
            return queue.pop(0)
        return Action.none()

    return strategy


# =============================================================================
# SHIELD DECISIONS
# =============================================================================


def never_shield(player: Player) -> bool:
    return False


def shield_while_available(player: Player) -> bool:
    return player.num_shields > 0


# =============================================================================
# SWITCH DECISIONS
# =============================================================================


def first_available_switch(player: Player) -> int:
    """First living roster slot other than the active one; the active index if there is none"""
    for i in range(len(player.pokemons)):
        if player.can_switch_to(i):
            return i
    return player.cur_poke


class PlayerAI(BaseModel):
    """The three injected decision functions for one player"""

    strategy: StrategyFn = charge_when_ready
    shield: ShieldFn = shield_while_available
    switch: SwitchFn = first_available_switch
