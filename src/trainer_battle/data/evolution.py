from functools import lru_cache

from src.trainer_battle.data.species import find_species
from src.trainer_battle.schema.species_info import SpeciesInfo

# (from, to) pokedex ids
EVOLUTIONS = [
    ("0001", "0002"),
    ("0002", "0003"),
    ("0004", "0005"),
    ("0005", "0006"),
    ("0007", "0008"),
    ("0008", "0009"),
    ("0025", "0026"),
    ("0035", "0036"),
    ("0066", "0067"),
    ("0067", "0068"),
    ("0092", "0093"),
    ("0093", "0094"),
    ("0113", "0242"),
    ("0183", "0184"),
    ("0307", "0308"),
    ("0333", "0334"),
    ("0339", "0340"),
    ("0527", "0528"),
    ("0633", "0634"),
    ("0634", "0635"),
]


@lru_cache(maxsize=None)
def _evolution_map() -> dict[str, tuple[SpeciesInfo, ...]]:
    mapping: dict[str, list[SpeciesInfo]] = {}
    for src, dst in EVOLUTIONS:
        mapping.setdefault(src, []).append(find_species(dst))
    return {no: tuple(targets) for no, targets in mapping.items()}


@lru_cache(maxsize=None)
def _rev_evolution_map() -> dict[str, tuple[SpeciesInfo, ...]]:
    mapping: dict[str, list[SpeciesInfo]] = {}
    for src, dst in EVOLUTIONS:
        mapping.setdefault(dst, []).append(find_species(src))
    return {no: tuple(sources) for no, sources in mapping.items()}


def evolutions(no: str) -> list[SpeciesInfo]:
    """Species `no` evolves into (empty when fully evolved)"""
    return list(_evolution_map().get(no, ()))


def rev_evolutions(no: str) -> list[SpeciesInfo]:
    """Species that evolve into `no`"""
    return list(_rev_evolution_map().get(no, ()))
