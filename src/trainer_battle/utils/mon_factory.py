from typing import Optional, Union

from pydantic import ValidationError

from src.trainer_battle.data.moves import find_charge_move, find_fast_move
from src.trainer_battle.data.species import find_species
from src.trainer_battle.errors import PokemonConstructionError
from src.trainer_battle.schema.battle_move import ChargeMove, FastMove
from src.trainer_battle.schema.pokemon import Pokemon
from src.trainer_battle.schema.species_info import SpeciesInfo
from src.trainer_battle.schema.stats import IVs
from src.trainer_battle.stat_calculator import level_from_cp, search_near_ivs


def create_pokemon(
    species: Union[int, str, SpeciesInfo],
    fast_move: Union[int, str, FastMove],
    charge_move1: Union[int, str, ChargeMove],
    charge_move2: Union[int, str, ChargeMove, None] = None,
    cp: Optional[int] = None,
    level: Optional[float] = None,
    attack_iv: int = 0,
    defense_iv: int = 0,
    stamina_iv: int = 0,
) -> Pokemon:
    """
    Build a configured creature from names or numbers.

    Exactly one of `cp` and `level` must be given. With `cp` the level is recovered
    from the CP; when no half level reproduces it the error lists nearby IV triples
    that would.

    Raises:
        PokemonConstructionError: bad IVs, impossible CP or a bad level
        UnknownSpeciesError / UnknownMoveError: unknown names or numbers
    """
    if (cp is None) == (level is None):
        raise PokemonConstructionError("Give exactly one of cp and level")

    info = find_species(species)
    fast = find_fast_move(fast_move)
    charge1 = find_charge_move(charge_move1)
    charge2 = find_charge_move(charge_move2) if charge_move2 is not None else None

    try:
        ivs = IVs(attack=attack_iv, defense=defense_iv, stamina=stamina_iv)
    except ValidationError as e:
        raise PokemonConstructionError(f"IVs must be between 0 and 15, got ({attack_iv}, {defense_iv}, {stamina_iv})") from e

    if cp is not None:
        level = level_from_cp(info.baseStats, cp, ivs)
        if level is None:
            raise PokemonConstructionError(
                f"No level of {info.name} has CP {cp} with IVs ({attack_iv}, {defense_iv}, {stamina_iv})",
                suggestions=search_near_ivs(info.baseStats, cp, ivs),
            )

    try:
        return Pokemon(species=info, level=level, ivs=ivs, fastMove=fast, chargeMove1=charge1, chargeMove2=charge2)
    except ValidationError as e:
        raise PokemonConstructionError(f"Invalid {info.name}: {e}") from e
