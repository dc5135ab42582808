"""
Trainer battle engine

A discrete-time state machine. Each call to Battle.do_action resolves one tick
(500 ms of in-game time) for both players:

1. action intake (fast move / charge move / switch / nothing, with buffering
   while a fast move is still running)
2. fast moves whose lockout has run out land
3. forced switches for fainted creatures, then switches requested while a fast
   move was landing
4. charge moves, higher effective attack first, with shields and cut-in; a
   charge move aimed at a fainted creature is dropped
5. a second fast move pass and forced switch pass
6. game over and time over checks, then the clock advances

Every tick works on a clone of the previous State; earlier states are never
touched again, so `states` is a complete replayable history.
"""

import logging
import random
from typing import Optional, Sequence

from src.trainer_battle.config import BattleConfig
from src.trainer_battle.constants import MS_PER_TURN
from src.trainer_battle.damage_calculator import apply_charge_move, apply_fast_move, move_type_effect
from src.trainer_battle.enums import ActionKind, Outcome
from src.trainer_battle.errors import ForcedSwitchError
from src.trainer_battle.schema.battle_move import ChargeMove, FastMove
from src.trainer_battle.schema.battle_pokemon import BattlePokemon
from src.trainer_battle.schema.battle_state import Action, Phase, Player, State
from src.trainer_battle.schema.pokemon import Pokemon
from src.trainer_battle.strategies import PlayerAI
from src.trainer_battle.type_effectiveness import effectiveness_message
from src.trainer_battle.utils.rng import coin_flip, make_rng

logger = logging.getLogger(__name__)


def merge_pending(pending: Optional[Action], action: Optional[Action]) -> Optional[Action]:
    """
    Combine a buffered request with a new one.

    A switch always wins. Otherwise a buffered action is kept and the new one dropped.
    """
    if action is not None and action.kind == ActionKind.SWITCH:
        return action
    if pending is not None:
        return pending
    if action is not None and action.kind == ActionKind.CHARGE_MOVE:
        return action
    return None


class Battle:
    """Two players, an append-only history of states and the actions that produced them"""

    def __init__(
        self,
        name0: str,
        team0: Sequence[Pokemon],
        name1: str,
        team1: Sequence[Pokemon],
        ai0: Optional[PlayerAI] = None,
        ai1: Optional[PlayerAI] = None,
        config: Optional[BattleConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        if not team0 or not team1:
            raise ValueError("Both teams need at least one creature")

        self.config = config or BattleConfig()
        self.rng = rng or make_rng(self.config.seed)
        self.ais: tuple[PlayerAI, PlayerAI] = (ai0 or PlayerAI(), ai1 or PlayerAI())

        start = State(player0=self._new_player(name0, team0), player1=self._new_player(name1, team1))
        self.states: list[State] = [start]
        self.actions: list[tuple[Action, Action]] = []

    def _new_player(self, name: str, team: Sequence[Pokemon]) -> Player:
        return Player(
            name=name,
            pokemons=[BattlePokemon.from_pokemon(pokemon) for pokemon in team],
            num_shields=self.config.num_shields,
        )

    # =========================================================================
    # INSPECTION
    # =========================================================================

    @property
    def state(self) -> State:
        """Latest snapshot"""
        return self.states[-1]

    def is_ended(self) -> bool:
        return self.state.phase.is_terminal()

    def winner(self) -> Optional[Outcome]:
        return self.state.phase.outcome

    # =========================================================================
    # AUTO PLAY
    # =========================================================================

    def start(self) -> Phase:
        """Let both players' AIs play until the battle ends or the iteration ceiling is hit"""
        for _ in range(self.config.max_iterations):
            actions = (self._ask_strategy(0), self._ask_strategy(1))
            if not self.do_action(actions):
                break
        else:
            logger.warning("Stopped after %d ticks without a result", self.config.max_iterations)
        return self.state.phase

    def _ask_strategy(self, i: int) -> Action:
        player = self.state.player(i)
        action = self.ais[i].strategy(player.clone())
        if not isinstance(action, Action):
            logger.warning("Strategy for %s returned %r, treating it as no action", player.name, action)
            return Action.none()
        return action

    # =========================================================================
    # TICK RESOLUTION
    # =========================================================================

    def do_action(self, actions: Sequence[Optional[Action]]) -> bool:
        """
        Resolve one tick.

        Args:
            actions: One action per player; None means no action

        Returns:
            True while the battle goes on, False once the phase is terminal
        """
        if self.state.phase.is_terminal():
            logger.debug("do_action called after the battle ended (%s)", self.state.phase.kind.name)
            return False

        state = self.state.clone()
        extra_turns = 0
        charge_intents: dict[int, int] = {}
        landing_switches: dict[int, int] = {}

        logger.debug("turn %d start: actions = [%s, %s]", state.turn, actions[0], actions[1])

        # Action intake
        for i, player in enumerate(state.players):
            extra_turns += self._intake(state, player, actions[i], i, charge_intents, landing_switches)

        # Fast moves whose lockout ran out
        self._resolve_fast_moves(state)
        for i in self._force_switches(state):
            charge_intents.pop(i, None)
            landing_switches.pop(i, None)

        # Switches requested while the fast move was landing
        for i, index in landing_switches.items():
            extra_turns += self._voluntary_switch(state, state.player(i), index)

        # Charge moves
        extra_turns += self._resolve_charge_moves(state, charge_intents)

        # Fast moves unlocked by a cut-in
        self._resolve_fast_moves(state)
        self._force_switches(state)

        self._check_game_over(state)
        self._advance(state, extra_turns)

        self.states.append(state)
        self.actions.append((actions[0] or Action.none(), actions[1] or Action.none()))
        return not state.phase.is_terminal()

    def _intake(
        self,
        state: State,
        player: Player,
        action: Optional[Action],
        i: int,
        charge_intents: dict[int, int],
        landing_switches: dict[int, int],
    ) -> int:
        """Apply or buffer one player's request. Returns extra ticks spent."""
        if player.is_locked():
            if action is None or action.kind in (ActionKind.NONE, ActionKind.FAST_MOVE):
                return 0
            player.pending_action = merge_pending(player.pending_action, action)
            logger.debug("%s is locked, buffering %s", player.name, player.pending_action)
            return 0

        if player.pending_action is not None:
            action = merge_pending(player.pending_action, action)
            player.pending_action = None

        if action is None or action.kind == ActionKind.NONE:
            return 0

        if action.kind == ActionKind.FAST_MOVE:
            if not player.in_fast_move:
                move = player.poke.pokemon.fastMove
                player.in_fast_move = True
                player.dur_turns = move.turns - 1
                state.log(f"{player.poke_name} used {move.name}")
            return 0

        if action.kind == ActionKind.SWITCH:
            if player.in_fast_move:
                # The running fast move lands this tick; switch right after it
                landing_switches[i] = action.index
                return 0
            return self._voluntary_switch(state, player, action.index)

        # Charge move
        move = player.poke.get_charge_move(action.index)
        if move is None:
            self._reject(state, f"[{player.name}] charge move slot {action.index} does not exist")
        elif not player.poke.can_charge_move(action.index):
            self._reject(state, f"[{player.name}] not enough energy for {move.name}")
        else:
            charge_intents[i] = action.index
        return 0

    @staticmethod
    def _reject(state: State, msg: str) -> None:
        """Invalid requests are ignored, never raised"""
        logger.debug("turn %d: %s", state.turn, msg)
        state.log(msg)

    def _voluntary_switch(self, state: State, player: Player, index: int) -> int:
        if player.switch_turns > 0:
            self._reject(state, f"[{player.name}] cannot switch for another {player.switch_turns} turns")
            return 0
        if not player.can_switch_to(index):
            self._reject(state, f"[{player.name}] cannot switch to slot {index}")
            return 0

        player.poke.reset_buff()
        player.cur_poke = index
        player.switch_turns = self.config.switch_cooldown_turns
        player.clear_fast_move()
        player.pending_action = None
        state.log(f"{player.name} sent out {player.poke_name}")
        return self.config.switch_extra_turns

    def _resolve_fast_moves(self, state: State) -> None:
        ready = [i for i, p in enumerate(state.players) if p.in_fast_move and p.dur_turns == 0]
        if len(ready) == 2 and not coin_flip(self.rng):
            ready.reverse()

        for i in ready:
            player = state.player(i)
            opponent = state.player(1 - i)
            attacker = player.poke
            move = attacker.pokemon.fastMove
            damage = apply_fast_move(attacker, opponent.poke)
            player.in_fast_move = False
            state.log(f"{attacker.name}'s {move.name} dealt {damage} damage to {opponent.poke_name}")
            if damage > 0:
                self._log_effectiveness(state, move, attacker, opponent.poke)

    @staticmethod
    def _log_effectiveness(state: State, move: FastMove | ChargeMove, attacker: BattlePokemon, defender: BattlePokemon) -> None:
        msg = effectiveness_message(move_type_effect(move, attacker, defender))
        if msg is not None:
            state.log(msg)

    def _force_switches(self, state: State) -> list[int]:
        """Replace fainted active creatures. Returns the indices of players that switched."""
        switched = []
        for i, player in enumerate(state.players):
            if not player.poke.is_fainted() or player.num_remains() == 0:
                continue

            choice = self.ais[i].switch(player.clone())
            if not (isinstance(choice, int) and player.can_switch_to(choice) and player.switch_turns == 0):
                choice = self._fallback_switch_target(player)

            fainted = player.poke_name
            player.cur_poke = choice
            player.clear_fast_move()
            player.pending_action = None
            state.log(f"{fainted} fainted, {player.name} sent out {player.poke_name}")
            switched.append(i)
        return switched

    @staticmethod
    def _fallback_switch_target(player: Player) -> int:
        # 1, 2, ..., n-1, then 0
        order = list(range(1, len(player.pokemons))) + [0]
        for i in order:
            if player.can_switch_to(i):
                return i
        raise ForcedSwitchError(player.name)

    def _resolve_charge_moves(self, state: State, charge_intents: dict[int, int]) -> int:
        """Returns extra ticks spent on charge moves"""
        intents = {
            i: slot
            for i, slot in charge_intents.items()
            if not state.player(i).poke.is_fainted() and not state.player(1 - i).poke.is_fainted()
        }
        if not intents:
            return 0

        order = list(intents)
        if len(order) == 2:
            attack0 = state.player0.poke.effective_attack
            attack1 = state.player1.poke.effective_attack
            if attack1 > attack0 or (attack1 == attack0 and coin_flip(self.rng)):
                order = [1, 0]
            else:
                order = [0, 1]

        extra_turns = 0
        for i in order:
            player = state.player(i)
            opponent = state.player(1 - i)
            attacker = player.poke
            defender = opponent.poke
            move = attacker.get_charge_move(intents[i])

            shielded = opponent.num_shields > 0 and bool(self.ais[1 - i].shield(opponent.clone()))
            result = apply_charge_move(intents[i], attacker, defender, self.rng, shielded=shielded)
            if result is None:
                self._reject(state, f"[{player.name}] could not use charge move slot {intents[i]}")
                continue

            damage, stat_changed = result
            extra_turns += self.config.charge_move_turns
            if shielded:
                opponent.num_shields -= 1
                state.log(f"{opponent.name} shielded {attacker.name}'s {move.name} ({damage} damage)")
            else:
                state.log(f"{attacker.name}'s {move.name} dealt {damage} damage to {defender.name}")
                self._log_effectiveness(state, move, attacker, defender)
            if stat_changed:
                state.log(f"Stats changed: {attacker.name} {attacker.buff}, {defender.name} {defender.buff}")

            # Cut-in: the victim's running fast move may land right away
            opponent.dur_turns = 0

            if defender.is_fainted():
                self._force_switches(state)
                break
        return extra_turns

    def _check_game_over(self, state: State) -> None:
        ended0 = state.player0.is_ended()
        ended1 = state.player1.is_ended()
        if ended0 and ended1:
            state.phase = Phase.game_over(Outcome.DRAW)
        elif ended1:
            state.phase = Phase.game_over(Outcome.PLAYER0_WINS)
        elif ended0:
            state.phase = Phase.game_over(Outcome.PLAYER1_WINS)
        else:
            return
        state.log(f"Game over: {state.phase.outcome.name}")

    def _advance(self, state: State, extra_turns: int) -> None:
        elapsed = 1 + extra_turns
        for player in state.players:
            player.dur_turns = max(player.dur_turns - elapsed, 0)
            player.switch_turns = max(player.switch_turns - elapsed, 0)

        state.turn += elapsed
        state.elapsed_ms = state.turn * MS_PER_TURN

        if state.turn > self.config.turn_limit and not state.phase.is_terminal():
            hp0 = state.player0.total_hp()
            hp1 = state.player1.total_hp()
            if hp0 > hp1:
                outcome = Outcome.PLAYER0_WINS
            elif hp1 > hp0:
                outcome = Outcome.PLAYER1_WINS
            else:
                outcome = Outcome.DRAW
            state.phase = Phase.time_over(outcome)
            state.log(f"Time over: {outcome.name} (HP {hp0} vs {hp1})")
