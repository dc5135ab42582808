from typing import Optional

from pydantic import BaseModel, Field

from src.trainer_battle.constants import DEFAULT_STAT_STAGE, MAX_ENERGY, MAX_STAT_STAGE, MIN_STAT_STAGE, STAT_STAGE_MULTIPLIERS
from src.trainer_battle.schema.battle_move import ChargeMove
from src.trainer_battle.schema.pokemon import Pokemon


def stage_multiplier(stage: int) -> float:
    """Stat stage -4..4 to its multiplier"""
    return STAT_STAGE_MULTIPLIERS[stage - MIN_STAT_STAGE]


class BattlePokemon(BaseModel):
    """Battle-scoped state of one roster slot. The configured creature is shared, never copied."""

    pokemon: Pokemon
    hp: int = Field(ge=0)
    energy: int = Field(ge=0, le=MAX_ENERGY, default=0)

    # Stat stages (-4 to +4)
    attackStage: int = Field(ge=MIN_STAT_STAGE, le=MAX_STAT_STAGE, default=DEFAULT_STAT_STAGE)
    defenseStage: int = Field(ge=MIN_STAT_STAGE, le=MAX_STAT_STAGE, default=DEFAULT_STAT_STAGE)

    # Ignore type effectiveness; only used when estimating power per turn
    isDisableTypeEffect: bool = False

    @classmethod
    def from_pokemon(cls, pokemon: Pokemon) -> "BattlePokemon":
        return cls(pokemon=pokemon, hp=pokemon.hp)

    @property
    def name(self) -> str:
        return self.pokemon.name

    @property
    def buff(self) -> tuple[int, int]:
        return (self.attackStage, self.defenseStage)

    @property
    def effective_attack(self) -> float:
        return self.pokemon.attack * stage_multiplier(self.attackStage)

    @property
    def effective_defense(self) -> float:
        return self.pokemon.defense * stage_multiplier(self.defenseStage)

    def is_fainted(self) -> bool:
        return self.hp <= 0

    def disable_type_effect(self) -> None:
        self.isDisableTypeEffect = True

    # =========================================================================
    # STAT STAGES
    # =========================================================================

    def add_buff(self, attack_delta: int, defense_delta: int) -> tuple[int, int]:
        """Add to both stages, clamping to [-4, 4]. Returns the change actually applied."""
        new_attack = max(MIN_STAT_STAGE, min(MAX_STAT_STAGE, self.attackStage + attack_delta))
        new_defense = max(MIN_STAT_STAGE, min(MAX_STAT_STAGE, self.defenseStage + defense_delta))
        applied = (new_attack - self.attackStage, new_defense - self.defenseStage)
        self.attackStage = new_attack
        self.defenseStage = new_defense
        return applied

    def reset_buff(self) -> None:
        self.attackStage = DEFAULT_STAT_STAGE
        self.defenseStage = DEFAULT_STAT_STAGE

    # =========================================================================
    # ENERGY / HP
    # =========================================================================

    def gain_energy(self, amount: int) -> int:
        before = self.energy
        self.energy = min(self.energy + amount, MAX_ENERGY)
        return self.energy - before

    def spend_energy(self, amount: int) -> None:
        self.energy = max(self.energy - amount, 0)

    def take_damage(self, damage: int) -> int:
        """Reduce HP, never below 0. Returns the HP actually lost."""
        before = self.hp
        self.hp = max(self.hp - damage, 0)
        return before - self.hp

    # =========================================================================
    # CHARGE MOVES
    # =========================================================================

    def get_charge_move(self, slot: int) -> Optional[ChargeMove]:
        return self.pokemon.charge_move(slot)

    def can_charge_move(self, slot: int) -> bool:
        move = self.get_charge_move(slot)
        return move is not None and self.energy >= move.energy
