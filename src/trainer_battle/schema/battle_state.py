from typing import Optional

from pydantic import BaseModel, Field

from src.trainer_battle.constants import NUM_SHIELDS
from src.trainer_battle.enums import ActionKind, Outcome, PhaseKind
from src.trainer_battle.schema.battle_pokemon import BattlePokemon


class Action(BaseModel):
    """One player's request for a tick"""

    kind: ActionKind = ActionKind.NONE
    index: int = 0  # charge move slot or roster index to switch to

    class Config:
        frozen = True

    @classmethod
    def none(cls) -> "Action":
        return cls(kind=ActionKind.NONE)

    @classmethod
    def fast_move(cls) -> "Action":
        return cls(kind=ActionKind.FAST_MOVE)

    @classmethod
    def charge_move(cls, slot: int) -> "Action":
        return cls(kind=ActionKind.CHARGE_MOVE, index=slot)

    @classmethod
    def switch(cls, index: int) -> "Action":
        return cls(kind=ActionKind.SWITCH, index=index)

    def __str__(self) -> str:
        if self.kind == ActionKind.CHARGE_MOVE:
            return f"ChargeMove({self.index})"
        if self.kind == ActionKind.SWITCH:
            return f"Switch({self.index})"
        return self.kind.name.title().replace("_", "")


class Phase(BaseModel):
    kind: PhaseKind = PhaseKind.NEUTRAL
    outcome: Optional[Outcome] = None

    class Config:
        frozen = True

    @classmethod
    def neutral(cls) -> "Phase":
        return cls(kind=PhaseKind.NEUTRAL)

    @classmethod
    def game_over(cls, outcome: Outcome) -> "Phase":
        return cls(kind=PhaseKind.GAME_OVER, outcome=outcome)

    @classmethod
    def time_over(cls, outcome: Outcome) -> "Phase":
        return cls(kind=PhaseKind.TIME_OVER, outcome=outcome)

    def is_terminal(self) -> bool:
        return self.kind != PhaseKind.NEUTRAL


class Player(BaseModel):
    """One side of the battle"""

    name: str
    pokemons: list[BattlePokemon] = Field(min_length=1)
    cur_poke: int = Field(ge=0, default=0)
    num_shields: int = Field(ge=0, default=NUM_SHIELDS)

    # Ticks until a voluntary switch is allowed again
    switch_turns: int = Field(ge=0, default=0)

    # Fast move lockout: the active creature is executing a fast move that lands when dur_turns hits 0
    in_fast_move: bool = False
    dur_turns: int = Field(ge=0, default=0)

    # Request buffered while locked out; only CHARGE_MOVE or SWITCH
    pending_action: Optional[Action] = None

    @property
    def poke(self) -> BattlePokemon:
        return self.pokemons[self.cur_poke]

    @property
    def poke_name(self) -> str:
        return self.poke.name

    def is_locked(self) -> bool:
        return self.in_fast_move and self.dur_turns > 0

    def num_remains(self) -> int:
        return sum(1 for p in self.pokemons if not p.is_fainted())

    def is_ended(self) -> bool:
        return all(p.is_fainted() for p in self.pokemons)

    def total_hp(self) -> int:
        return sum(p.hp for p in self.pokemons)

    def can_switch_to(self, index: int) -> bool:
        """Whether roster slot `index` may take the field (cooldown not included)"""
        return 0 <= index < len(self.pokemons) and index != self.cur_poke and not self.pokemons[index].is_fainted()

    def clear_fast_move(self) -> None:
        self.in_fast_move = False
        self.dur_turns = 0

    def clone(self) -> "Player":
        """Copy with fresh battle creatures; the configured creatures stay shared"""
        return self.model_copy(update={"pokemons": [p.model_copy() for p in self.pokemons]})


class State(BaseModel):
    """Snapshot of the battle after one resolved tick"""

    player0: Player
    player1: Player
    phase: Phase = Field(default_factory=Phase.neutral)
    turn: int = Field(ge=0, default=0)
    elapsed_ms: int = Field(ge=0, default=0)

    # Headless event log for this tick
    msgs: list[str] = Field(default_factory=list)

    @property
    def players(self) -> tuple[Player, Player]:
        return (self.player0, self.player1)

    def player(self, i: int) -> Player:
        return self.player0 if i == 0 else self.player1

    def clone(self) -> "State":
        """Working copy for the next tick, with an empty message log"""
        return State(
            player0=self.player0.clone(),
            player1=self.player1.clone(),
            phase=self.phase,
            turn=self.turn,
            elapsed_ms=self.elapsed_ms,
            msgs=[],
        )

    def log(self, msg: str) -> None:
        self.msgs.append(msg)

