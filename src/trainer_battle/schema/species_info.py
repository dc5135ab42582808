from pydantic import BaseModel, Field

from src.trainer_battle.enums import Type


class BaseStats(BaseModel):
    """Species base stats"""

    attack: int = Field(ge=1)
    defense: int = Field(ge=1)
    stamina: int = Field(ge=1)

    class Config:
        frozen = True


class SpeciesInfo(BaseModel):
    """Species descriptor - one entry of the species catalog"""

    no: str = Field(min_length=1)  # zero padded pokedex id, e.g. "0488"
    name: str = Field(min_length=1)
    types: list[Type] = Field(min_length=1, max_length=2)
    baseStats: BaseStats

    # Learnable moves by move number, most common first
    fastMoves: list[int] = Field(min_length=1)
    chargeMoves: list[int] = Field(min_length=1)

    class Config:
        frozen = True
