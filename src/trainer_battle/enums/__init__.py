from src.trainer_battle.enums.type import Type
from src.trainer_battle.enums.other import ActionKind, PhaseKind, Outcome
