import math

from pydantic import BaseModel, Field

from src.trainer_battle.constants import MAX_IV, MIN_IV


class IVs(BaseModel):
    """Individual values, 0-15 per axis"""

    attack: int = Field(ge=MIN_IV, le=MAX_IV)
    defense: int = Field(ge=MIN_IV, le=MAX_IV)
    stamina: int = Field(ge=MIN_IV, le=MAX_IV)

    class Config:
        frozen = True

    @classmethod
    def from_index(cls, i: int) -> "IVs":
        """Decode 0..4095 as three 4 bit fields: attack, defense, stamina"""
        return cls(attack=(i & 0xF00) >> 8, defense=(i & 0xF0) >> 4, stamina=i & 0xF)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.attack, self.defense, self.stamina)


class Stats(BaseModel):
    """Derived stats: (base + iv) * cpm"""

    attack: float
    defense: float
    stamina: float

    class Config:
        frozen = True

    @property
    def hp(self) -> int:
        return math.floor(self.stamina)
