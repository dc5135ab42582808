from typing import Optional

from pydantic import BaseModel, Field

from src.trainer_battle.enums import Type


class StatChange(BaseModel):
    """Stat stage deltas a charge move may inflict (self and opponent)"""

    selfAttack: int = Field(ge=-4, le=4, default=0)
    selfDefense: int = Field(ge=-4, le=4, default=0)
    opponentAttack: int = Field(ge=-4, le=4, default=0)
    opponentDefense: int = Field(ge=-4, le=4, default=0)

    class Config:
        frozen = True


class FastMove(BaseModel):
    """Fast move - usable at will, generates energy, locks the user for `turns` ticks"""

    no: int = Field(ge=0)
    name: str
    type: Type
    power: int = Field(ge=0)
    energy: int = Field(ge=0, le=100)  # energy gained per use
    turns: int = Field(ge=1)  # duration in ticks
    dummy: bool = False  # clone without a public pokedex slot, resolvable by number only

    class Config:
        frozen = True


class ChargeMove(BaseModel):
    """Charge move - spends energy, may roll a stat stage change"""

    no: int = Field(ge=0)
    name: str
    type: Type
    power: int = Field(ge=0)
    energy: int = Field(ge=0, le=100)  # energy cost
    statChange: Optional[StatChange] = None
    statChangeChance: float = Field(ge=0.0, le=100.0, default=0.0)  # percent
    dummy: bool = False

    class Config:
        frozen = True
