"""Battle configuration."""

import os
from typing import Optional

from pydantic import BaseModel, Field

from src.trainer_battle.constants import (
    CHARGE_MOVE_TURNS,
    MAX_ITERATIONS,
    NUM_SHIELDS,
    SWITCH_COOLDOWN_TURNS,
    SWITCH_EXTRA_TURNS,
    TURN_LIMIT,
)


class BattleConfig(BaseModel):
    """Rules a battle is played under. Defaults follow the trainer battle rules."""

    num_shields: int = Field(ge=0, default=NUM_SHIELDS)
    turn_limit: int = Field(ge=1, default=TURN_LIMIT)
    switch_cooldown_turns: int = Field(ge=0, default=SWITCH_COOLDOWN_TURNS)
    charge_move_turns: int = Field(ge=0, default=CHARGE_MOVE_TURNS)
    switch_extra_turns: int = Field(ge=0, default=SWITCH_EXTRA_TURNS)
    max_iterations: int = Field(ge=1, default=MAX_ITERATIONS)

    # Random seed; None draws from system entropy
    seed: Optional[int] = None

    class Config:
        frozen = True

    @classmethod
    def from_env(cls) -> "BattleConfig":
        """Build a config, overriding the seed and loop ceiling from the environment."""
        values: dict = {}
        seed = os.getenv("TRAINER_BATTLE_SEED")
        if seed:
            values["seed"] = int(seed)
        max_iterations = os.getenv("TRAINER_BATTLE_MAX_ITERATIONS")
        if max_iterations:
            values["max_iterations"] = int(max_iterations)
        return cls(**values)
