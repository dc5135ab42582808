import pytest

from src.trainer_battle.battle_engine import Battle, merge_pending
from src.trainer_battle.config import BattleConfig
from src.trainer_battle.constants import MSG_NOT_VERY_EFFECTIVE, MSG_SUPER_EFFECTIVE
from src.trainer_battle.damage_calculator import calc_damage, move_damage
from src.trainer_battle.enums import Outcome, PhaseKind
from src.trainer_battle.errors import ForcedSwitchError
from src.trainer_battle.schema.battle_pokemon import BattlePokemon
from src.trainer_battle.schema.battle_state import Action, Phase, Player
from src.trainer_battle.strategies import PlayerAI, charge_when_ready, never_shield, shield_while_available
from src.trainer_battle.utils.mon_factory import create_pokemon

FAST = Action.fast_move()
NONE = Action.none()


def make_mon(name: str, fast: str, charge: str, charge2: str | None = None, level: float = 20.0):
    return create_pokemon(name, fast, charge, charge2, level=level, attack_iv=10, defense_iv=14, stamina_iv=14)


def hydreigon(fast: str = "Bite", charge: str = "Dark Pulse"):
    return make_mon("Hydreigon", fast, charge, level=22.5)


def cresselia():
    return make_mon("Cresselia", "Psycho Cut", "Moonblast")


def swoobat(fast: str = "Air Slash", charge: str = "Aerial Ace"):
    return make_mon("Swoobat", fast, charge)


def passive_ai():
    return PlayerAI(shield=never_shield)


def make_battle(team0, team1, ai0=None, ai1=None, config=None, seed=1):
    return Battle("P1", team0, "P2", team1, ai0=ai0 or passive_ai(), ai1=ai1 or passive_ai(), config=config or BattleConfig(seed=seed))


# =============================================================================
# DAMAGE
# =============================================================================


def test_damage_formula_fixture():
    # floor(0.5 * 1.3 * 3 * 130 / 97) + 1
    assert calc_damage(3, 130.0, 97.0) == 3


def test_damage_is_at_least_one():
    assert calc_damage(0, 100.0, 100.0) == 1


# =============================================================================
# CONSTRUCTION / TERMINAL PHASES
# =============================================================================


def test_empty_team_is_rejected():
    with pytest.raises(ValueError):
        Battle("P1", [], "P2", [cresselia()])


def test_initial_state():
    battle = make_battle([hydreigon()], [cresselia(), swoobat()])
    state = battle.state
    assert len(battle.states) == 1
    assert battle.actions == []
    assert state.phase.kind == PhaseKind.NEUTRAL
    assert state.turn == 0
    assert state.player1.num_shields == 2
    assert state.player1.poke.hp == cresselia().hp
    assert state.player1.poke.pokemon == cresselia()


def test_game_over_and_terminal_idempotence():
    battle = make_battle([hydreigon()], [cresselia()])
    battle.state.player1.poke.hp = 1

    assert battle.do_action([FAST, NONE]) is False
    assert battle.state.phase.kind == PhaseKind.GAME_OVER
    assert battle.winner() == Outcome.PLAYER0_WINS
    assert battle.is_ended()

    num_states = len(battle.states)
    assert battle.do_action([FAST, FAST]) is False
    assert len(battle.states) == num_states
    assert len(battle.actions) == num_states - 1


def test_time_over_winner_by_remaining_hp():
    battle = make_battle([cresselia()], [cresselia()], config=BattleConfig(seed=1, turn_limit=5))
    battle.state.player1.poke.hp -= 10

    for _ in range(5):
        assert battle.do_action([NONE, NONE]) is True
    assert battle.do_action([NONE, NONE]) is False
    assert battle.state.turn == 6
    assert battle.state.phase.kind == PhaseKind.TIME_OVER
    assert battle.winner() == Outcome.PLAYER0_WINS


def test_time_over_draw():
    battle = make_battle([cresselia()], [cresselia()], config=BattleConfig(seed=1, turn_limit=2))
    while battle.do_action([NONE, NONE]):
        pass
    assert battle.state.phase.kind == PhaseKind.TIME_OVER
    assert battle.winner() == Outcome.DRAW


def test_default_turn_limit_is_four_and_a_half_minutes():
    assert BattleConfig().turn_limit == 540


# =============================================================================
# FAST MOVES
# =============================================================================


def test_one_turn_fast_move_lands_immediately():
    battle = make_battle([hydreigon()], [cresselia()])
    expected = move_damage(hydreigon().fastMove, battle.state.player0.poke, battle.state.player1.poke)

    battle.do_action([FAST, NONE])
    state = battle.state
    assert state.player1.poke.hp == cresselia().hp - expected
    assert state.player0.poke.energy == 2
    assert state.turn == 1
    assert state.elapsed_ms == 500
    assert not state.player0.in_fast_move


def test_fast_move_lands_when_lockout_ends():
    # Air Slash takes 3 ticks
    battle = make_battle([swoobat()], [cresselia()])
    full_hp = cresselia().hp

    battle.do_action([FAST, NONE])
    assert battle.state.player0.in_fast_move
    assert battle.state.player0.dur_turns == 1
    battle.do_action([FAST, NONE])
    assert battle.state.player1.poke.hp == full_hp
    battle.do_action([NONE, NONE])
    assert battle.state.player1.poke.hp < full_hp
    assert battle.state.player0.poke.energy == 9
    assert not battle.state.player0.in_fast_move


def test_energy_is_capped():
    battle = make_battle([make_mon("Swoobat", "Splash", "Psychic")], [make_mon("Blissey", "Pound", "Psychic")])
    for _ in range(60):
        battle.do_action([FAST, NONE])
        assert 0 <= battle.state.player0.poke.energy <= 100
    assert battle.state.player0.poke.energy == 100


def test_simultaneous_fast_move_knockout_skips_damage_but_keeps_energy():
    battle = make_battle([hydreigon()], [hydreigon()], seed=5)
    battle.state.player0.poke.hp = 1
    battle.state.player1.poke.hp = 1

    battle.do_action([FAST, FAST])
    state = battle.state
    # Only the first resolved move deals damage; the fainted attacker still gains energy
    fainted = [p.poke.is_fainted() for p in state.players]
    assert fainted.count(True) == 1
    assert state.player0.poke.energy == 2
    assert state.player1.poke.energy == 2
    assert state.phase.kind == PhaseKind.GAME_OVER
    assert state.phase.outcome in (Outcome.PLAYER0_WINS, Outcome.PLAYER1_WINS)


# =============================================================================
# CHARGE MOVES
# =============================================================================


def test_charge_move_without_energy_is_rejected():
    battle = make_battle([hydreigon()], [cresselia()])
    assert battle.do_action([Action.charge_move(0), NONE]) is True
    state = battle.state
    assert state.player1.poke.hp == cresselia().hp
    assert state.turn == 1
    assert any("not enough energy" in msg for msg in state.msgs)


def test_charge_move_missing_slot_is_rejected():
    battle = make_battle([hydreigon()], [cresselia()])
    battle.state.player0.poke.energy = 100
    battle.do_action([Action.charge_move(1), NONE])
    assert battle.state.player0.poke.energy == 100
    assert any("does not exist" in msg for msg in battle.state.msgs)


def test_charge_move_damage_and_timing():
    battle = make_battle([hydreigon()], [cresselia()])
    battle.state.player0.poke.energy = 100
    move = hydreigon().chargeMove1
    expected = move_damage(move, battle.state.player0.poke, battle.state.player1.poke)

    battle.do_action([Action.charge_move(0), NONE])
    state = battle.state
    assert state.player1.poke.hp == max(cresselia().hp - expected, 0)
    assert state.player0.poke.energy == 100 - move.energy
    assert state.turn == 21
    assert state.player1.num_shields == 2


def test_shield_takes_one_damage_and_is_consumed():
    battle = make_battle([hydreigon()], [cresselia()], ai1=PlayerAI(shield=shield_while_available))
    battle.state.player0.poke.energy = 100
    battle.state.player1.num_shields = 1

    battle.do_action([Action.charge_move(0), NONE])
    state = battle.state
    assert state.player1.poke.hp == cresselia().hp - 1
    assert state.player1.num_shields == 0

    # No shields left: the shield decision is not consulted and full damage lands
    battle.state.player0.poke.energy = 100
    battle.do_action([Action.charge_move(0), NONE])
    assert battle.state.player1.poke.hp < cresselia().hp - 1
    assert battle.state.player1.num_shields == 0


def test_higher_attack_charge_move_resolves_first():
    battle = make_battle([hydreigon()], [cresselia()])
    battle.state.player0.poke.energy = 100
    battle.state.player1.poke.energy = 100

    battle.do_action([Action.charge_move(0), Action.charge_move(0)])
    damage_msgs = [msg for msg in battle.state.msgs if "dealt" in msg]
    assert damage_msgs[0].startswith("Hydreigon's Dark Pulse")


def test_attack_stage_changes_charge_move_priority():
    battle = make_battle([hydreigon()], [cresselia()])
    battle.state.player0.poke.energy = 100
    battle.state.player1.poke.energy = 100
    battle.state.player1.poke.attackStage = 4

    battle.do_action([Action.charge_move(0), Action.charge_move(0)])
    damage_msgs = [msg for msg in battle.state.msgs if "dealt" in msg]
    assert damage_msgs[0].startswith("Cresselia's Moonblast")


def test_charge_move_cuts_in_on_running_fast_move():
    # Confusion locks Hydreigon for 4 ticks; Swoobat's charge move resets the lockout
    battle = make_battle([swoobat()], [hydreigon(fast="Confusion")])
    battle.state.player0.poke.energy = 100

    battle.do_action([Action.charge_move(0), FAST])
    state = battle.state
    assert state.player0.poke.hp < swoobat().hp
    assert not state.player1.in_fast_move
    assert state.player1.dur_turns == 0
    assert state.player1.poke.energy == 12


def test_charge_move_at_knocked_out_last_creature_is_dropped():
    battle = make_battle([swoobat()], [cresselia()], ai1=PlayerAI(shield=shield_while_available))
    battle.state.player0.poke.energy = 100
    battle.state.player1.poke.hp = 1

    battle.do_action([FAST, NONE])
    battle.do_action([NONE, NONE])
    # Air Slash lands and knocks Cresselia out before Aerial Ace could fire
    assert battle.do_action([Action.charge_move(0), NONE]) is False
    state = battle.state
    assert state.phase == Phase.game_over(Outcome.PLAYER0_WINS)
    assert state.player1.num_shields == 2
    assert state.player0.poke.energy == 100
    assert state.turn == 3
    assert not any("Aerial Ace" in msg for msg in state.msgs)


def test_charge_move_hits_the_replacement_after_a_fast_move_knockout():
    team1 = [cresselia(), make_mon("Umbreon", "Snarl", "Foul Play")]
    battle = make_battle([swoobat()], team1)
    battle.state.player0.poke.energy = 100
    battle.state.player1.poke.hp = 1

    battle.do_action([FAST, NONE])
    battle.do_action([NONE, NONE])
    battle.do_action([Action.charge_move(0), NONE])
    state = battle.state
    assert state.player1.cur_poke == 1
    assert state.player1.poke.hp < team1[1].hp
    assert state.player0.poke.energy == 100 - swoobat().chargeMove1.energy
    assert state.turn == 3 + 20


def test_effectiveness_is_logged_after_a_hit():
    battle = make_battle([hydreigon()], [cresselia()])
    battle.do_action([FAST, NONE])
    # Dark against Psychic
    assert MSG_SUPER_EFFECTIVE in battle.state.msgs

    battle = make_battle([swoobat()], [hydreigon(fast="Confusion")])
    battle.do_action([NONE, FAST])
    for _ in range(3):
        battle.do_action([NONE, NONE])
    # Psychic against Psychic/Flying
    assert MSG_NOT_VERY_EFFECTIVE in battle.state.msgs


def test_stat_change_is_applied_after_damage():
    # Psychic Fangs always lowers the target's defense by one stage
    battle = make_battle([swoobat(charge="Psychic Fangs")], [cresselia()])
    battle.state.player0.poke.energy = 100
    expected = move_damage(swoobat(charge="Psychic Fangs").chargeMove1, battle.state.player0.poke, battle.state.player1.poke)

    battle.do_action([Action.charge_move(0), NONE])
    assert battle.state.player1.poke.defenseStage == -1
    assert battle.state.player1.poke.hp == cresselia().hp - expected


# =============================================================================
# SWITCHING
# =============================================================================


def test_voluntary_switch_resets_buffs_and_starts_cooldown():
    battle = make_battle([swoobat(), cresselia()], [hydreigon()])
    battle.state.player0.poke.attackStage = 2

    battle.do_action([Action.switch(1), NONE])
    state = battle.state
    assert state.player0.cur_poke == 1
    assert state.player0.pokemons[0].buff == (0, 0)
    assert state.turn == 2
    assert state.player0.switch_turns == 120 - 2

    # Switching straight back is blocked by the cooldown
    battle.do_action([Action.switch(0), NONE])
    assert battle.state.player0.cur_poke == 1
    assert any("cannot switch" in msg for msg in battle.state.msgs)


def test_switch_requested_during_fast_move_happens_once_it_lands():
    battle = make_battle([swoobat(), cresselia()], [hydreigon()])
    full_hp = hydreigon().hp

    battle.do_action([FAST, NONE])
    battle.do_action([Action.switch(1), NONE])
    assert battle.state.player0.cur_poke == 0
    assert battle.state.player0.pending_action == Action.switch(1)

    # Air Slash lands first, then the buffered switch goes through in the same tick
    battle.do_action([NONE, NONE])
    state = battle.state
    assert state.player1.poke.hp < full_hp
    assert state.player0.cur_poke == 1
    assert state.player0.pending_action is None
    assert not state.player0.in_fast_move
    assert state.player0.dur_turns == 0
    assert state.turn == 4
    assert state.player0.switch_turns == 120 - 2

    dealt = next(i for i, msg in enumerate(state.msgs) if "Air Slash dealt" in msg)
    sent_out = next(i for i, msg in enumerate(state.msgs) if "sent out Cresselia" in msg)
    assert dealt < sent_out


def test_switch_on_landing_tick_is_dropped_when_forced_out():
    battle = make_battle([swoobat(), cresselia(), make_mon("Umbreon", "Snarl", "Foul Play")], [hydreigon()])
    battle.state.player0.poke.hp = 1

    battle.do_action([FAST, NONE])
    battle.do_action([NONE, NONE])
    # Hydreigon's Bite knocks Swoobat out on the tick its own Air Slash lands
    battle.do_action([Action.switch(2), FAST])
    state = battle.state
    assert state.player0.pokemons[0].is_fainted()
    assert state.player0.cur_poke == 1
    assert state.player0.switch_turns == 0
    assert state.turn == 3


@pytest.mark.parametrize("index", [0, 5, -1])
def test_invalid_switch_targets_are_ignored(index):
    battle = make_battle([swoobat(), cresselia()], [hydreigon()])
    battle.do_action([Action.switch(index), NONE])
    assert battle.state.player0.cur_poke == 0
    assert battle.state.player0.switch_turns == 0
    assert battle.state.turn == 1


def test_switch_to_fainted_creature_is_ignored():
    battle = make_battle([swoobat(), cresselia()], [hydreigon()])
    battle.state.player0.pokemons[1].hp = 0
    battle.do_action([Action.switch(1), NONE])
    assert battle.state.player0.cur_poke == 0


# =============================================================================
# PENDING ACTIONS
# =============================================================================


def test_merge_pending_priorities():
    charge = Action.charge_move(0)
    switch = Action.switch(1)
    assert merge_pending(None, charge) == charge
    assert merge_pending(charge, switch) == switch
    assert merge_pending(switch, charge) == switch
    assert merge_pending(charge, Action.charge_move(1)) == charge
    assert merge_pending(charge, FAST) == charge
    assert merge_pending(None, FAST) is None


def test_charge_move_buffered_during_lockout():
    battle = make_battle([swoobat()], [cresselia()])
    battle.state.player0.poke.energy = 95
    move = swoobat().chargeMove1

    battle.do_action([FAST, NONE])
    battle.do_action([Action.charge_move(0), NONE])
    assert battle.state.player0.pending_action == Action.charge_move(0)
    assert battle.state.player0.poke.energy == 95

    # Lockout over: Air Slash lands first (+9, capped), then the buffered charge move fires
    battle.do_action([NONE, NONE])
    state = battle.state
    assert state.player0.pending_action is None
    assert state.player0.poke.energy == 100 - move.energy


def test_switch_overrides_buffered_charge_move():
    battle = make_battle([swoobat(), cresselia()], [hydreigon()])
    battle.state.player0.poke.energy = 100

    battle.do_action([FAST, NONE])
    battle.do_action([Action.charge_move(0), NONE])
    # The switch replaces the buffered charge move and goes through once Air Slash lands
    battle.do_action([Action.switch(1), NONE])
    state = battle.state
    assert state.player0.cur_poke == 1
    assert state.player0.pending_action is None
    assert state.player0.pokemons[0].energy == 100


def test_fast_move_request_during_lockout_is_dropped():
    battle = make_battle([swoobat()], [cresselia()])
    battle.do_action([FAST, NONE])
    battle.do_action([FAST, NONE])
    assert battle.state.player0.pending_action is None


# =============================================================================
# FORCED SWITCHES
# =============================================================================


def test_forced_switch_uses_switch_decision():
    team1 = [cresselia(), make_mon("Umbreon", "Snarl", "Foul Play"), make_mon("Whiscash", "Mud Shot", "Mud Bomb")]
    battle = make_battle([hydreigon()], team1, ai1=PlayerAI(shield=never_shield, switch=lambda player: 2))
    battle.state.player1.poke.hp = 1

    assert battle.do_action([FAST, NONE]) is True
    state = battle.state
    assert state.player1.cur_poke == 2
    assert state.player1.switch_turns == 0
    assert state.turn == 1
    assert any("fainted" in msg for msg in state.msgs)


def test_forced_switch_fallback_order():
    team1 = [cresselia(), make_mon("Umbreon", "Snarl", "Foul Play"), make_mon("Whiscash", "Mud Shot", "Mud Bomb")]
    battle = make_battle([hydreigon()], team1, ai1=PlayerAI(shield=never_shield, switch=lambda player: 99))

    # Slot 0 faints while slot 1 is already down: slot 2 comes in
    battle.state.player1.pokemons[1].hp = 0
    battle.state.player1.poke.hp = 1
    battle.do_action([FAST, NONE])
    assert battle.state.player1.cur_poke == 2

    # Revive slot 0 for the test; when slot 2 faints the scan wraps round to it
    battle.state.player1.pokemons[0].hp = 50
    battle.state.player1.poke.hp = 1
    battle.do_action([FAST, NONE])
    assert battle.state.player1.cur_poke == 0


def test_forced_switch_without_candidates_raises():
    mon = BattlePokemon.from_pokemon(cresselia())
    down = BattlePokemon.from_pokemon(cresselia())
    down.hp = 0
    player = Player(name="P2", pokemons=[mon, down])
    with pytest.raises(ForcedSwitchError):
        Battle._fallback_switch_target(player)


def test_forced_switch_drops_charge_intent():
    team1 = [cresselia(), make_mon("Umbreon", "Snarl", "Foul Play")]
    battle = make_battle([hydreigon()], team1)
    battle.state.player1.poke.hp = 1
    battle.state.player1.poke.energy = 100

    battle.do_action([FAST, Action.charge_move(0)])
    state = battle.state
    assert state.player1.cur_poke == 1
    assert state.player0.poke.hp == hydreigon().hp
    assert state.turn == 1


# =============================================================================
# STAT STAGES
# =============================================================================


def test_add_buff_clamps_and_reports_applied_change():
    poke = BattlePokemon.from_pokemon(cresselia())
    assert poke.add_buff(3, 0) == (3, 0)
    assert poke.add_buff(3, -5) == (1, -4)
    assert poke.buff == (4, -4)
    assert poke.add_buff(1, -1) == (0, 0)
    assert poke.effective_attack == pytest.approx(cresselia().attack * 2)
    assert poke.effective_defense == pytest.approx(cresselia().defense * 0.5)


# =============================================================================
# AUTO PLAY
# =============================================================================


def full_battle(seed: int) -> Battle:
    team0 = [hydreigon(), swoobat(charge="Psychic Fangs"), make_mon("Umbreon", "Snarl", "Foul Play", "Last Resort")]
    team1 = [cresselia(), make_mon("Lucario", "Counter", "Power-Up Punch", "Shadow Ball"), make_mon("Whiscash", "Mud Shot", "Mud Bomb")]
    battle = Battle("P1", team0, "P2", team1, ai0=PlayerAI(strategy=charge_when_ready), ai1=PlayerAI(strategy=charge_when_ready), config=BattleConfig(seed=seed))
    battle.start()
    return battle


def test_auto_play_finishes():
    battle = full_battle(seed=11)
    assert battle.is_ended()
    assert battle.state.phase.outcome in tuple(Outcome)
    assert len(battle.states) == len(battle.actions) + 1


def test_replay_is_deterministic_with_a_seed():
    first = full_battle(seed=42)
    second = full_battle(seed=42)
    assert [s.model_dump() for s in first.states] == [s.model_dump() for s in second.states]
    assert first.actions == second.actions


def test_history_invariants():
    battle = full_battle(seed=7)
    for prev, cur in zip(battle.states, battle.states[1:]):
        for p_prev, p_cur in zip(prev.players, cur.players):
            for poke_prev, poke_cur in zip(p_prev.pokemons, p_cur.pokemons):
                assert 0 <= poke_cur.hp <= poke_prev.hp
        assert cur.turn > prev.turn
    for state in battle.states:
        for player in state.players:
            assert 0 <= player.num_shields <= 2
            for poke in player.pokemons:
                assert 0 <= poke.energy <= 100
                assert -4 <= poke.attackStage <= 4
                assert -4 <= poke.defenseStage <= 4


def test_prior_states_are_not_mutated():
    battle = make_battle([hydreigon()], [cresselia()])
    first = battle.states[0].model_dump()
    battle.do_action([FAST, NONE])
    battle.do_action([FAST, NONE])
    assert battle.states[0].model_dump() == first
    assert battle.states[0].player0.poke.pokemon is battle.state.player0.poke.pokemon


def test_bad_strategy_output_is_treated_as_no_action():
    ai = PlayerAI(strategy=lambda player: "attack!", shield=never_shield)
    battle = make_battle([hydreigon()], [cresselia()], ai0=ai, ai1=ai, config=BattleConfig(seed=1, max_iterations=5))
    phase = battle.start()
    assert phase.kind == PhaseKind.NEUTRAL
    assert len(battle.states) == 6
    assert all(actions == (NONE, NONE) for actions in battle.actions)
