from typing import Optional

from pydantic import BaseModel, Field

from src.trainer_battle.constants import MAX_LEVEL, MIN_LEVEL
from src.trainer_battle.enums import Type
from src.trainer_battle.schema.battle_move import ChargeMove, FastMove
from src.trainer_battle.schema.species_info import SpeciesInfo
from src.trainer_battle.schema.stats import IVs, Stats
from src.trainer_battle.stat_calculator import calc_cp, calc_dcp, calc_scp, calc_stats, level_multiplier


class Pokemon(BaseModel):
    """
    Configured creature - species + level + IVs + moves.

    Everything else (stats, CP, HP, ...) is derived on demand. Instances are
    immutable and shared by every battle they take part in.
    """

    species: SpeciesInfo
    level: float = Field(ge=MIN_LEVEL, le=MAX_LEVEL, multiple_of=0.5)
    ivs: IVs
    fastMove: FastMove
    chargeMove1: ChargeMove
    chargeMove2: Optional[ChargeMove] = None

    class Config:
        frozen = True

    # =========================================================================
    # DERIVED STATS
    # =========================================================================

    @property
    def name(self) -> str:
        return self.species.name

    @property
    def types(self) -> list[Type]:
        return self.species.types

    @property
    def cpm(self) -> float:
        return level_multiplier(self.level)

    @property
    def stats(self) -> Stats:
        return calc_stats(self.species.baseStats, self.level, self.ivs)

    @property
    def attack(self) -> float:
        return self.stats.attack

    @property
    def defense(self) -> float:
        return self.stats.defense

    @property
    def stamina(self) -> float:
        return self.stats.stamina

    @property
    def hp(self) -> int:
        return self.stats.hp

    @property
    def cp(self) -> int:
        return calc_cp(self.stats)

    @property
    def scp(self) -> int:
        return calc_scp(self.stats)

    @property
    def dcp(self) -> int:
        return calc_dcp(self.stats)

    # =========================================================================
    # MOVES
    # =========================================================================

    def charge_moves(self) -> list[ChargeMove]:
        moves = [self.chargeMove1]
        if self.chargeMove2 is not None:
            moves.append(self.chargeMove2)
        return moves

    def charge_move(self, slot: int) -> Optional[ChargeMove]:
        """Charge move in slot 0 or 1, None for an empty or unknown slot"""
        moves = self.charge_moves()
        if 0 <= slot < len(moves):
            return moves[slot]
        return None

    @property
    def is_stab_fast_move(self) -> bool:
        return self.fastMove.type in self.types

    def is_stab_charge_move(self, slot: int) -> bool:
        move = self.charge_move(slot)
        return move is not None and move.type in self.types

    def power_per_turn(self, opponent: "Pokemon", num_turns: int = 1000, seed: int = 0, disable_type_effect: bool = False) -> float:
        """Average damage per tick against `opponent` over a seeded fast/charge loop"""
        from src.trainer_battle.index import estimate_power_per_turn

        return estimate_power_per_turn(self, opponent, num_turns=num_turns, seed=seed, disable_type_effect=disable_type_effect)

    def __str__(self) -> str:
        moves = "/".join(move.name for move in [self.fastMove, *self.charge_moves()])
        return f"{self.name} CP{self.cp} Lv{self.level} IV({self.ivs.attack},{self.ivs.defense},{self.ivs.stamina}) {moves}"
