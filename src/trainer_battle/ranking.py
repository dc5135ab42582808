import logging
from typing import Iterable, Optional

from src.trainer_battle.constants import MAX_LEVEL
from src.trainer_battle.data.moves import get_charge_move_by_no, get_fast_move_by_no
from src.trainer_battle.data.species import SPECIES_INFOS
from src.trainer_battle.index import max_scp_ivs_limited_by_cp
from src.trainer_battle.schema.pokemon import Pokemon
from src.trainer_battle.schema.species_info import SpeciesInfo

logger = logging.getLogger(__name__)


def scp_ranking(limit_cp: int, limit_level: float = MAX_LEVEL, species: Optional[Iterable[SpeciesInfo]] = None) -> list[Pokemon]:
    """
    Every species at its best SCP configuration under the CP cap, best first.

    Each entry uses the species' first fast move and first charge move. Species
    that cannot get under the cap at level 1.0 are left out.
    """
    ranking = []
    for info in species if species is not None else SPECIES_INFOS:
        best = max_scp_ivs_limited_by_cp(info.baseStats, limit_cp, limit_level)
        if best is None:
            logger.debug("%s cannot fit under CP %d", info.name, limit_cp)
            continue
        _, level, ivs = best
        ranking.append(
            Pokemon(
                species=info,
                level=level,
                ivs=ivs,
                fastMove=get_fast_move_by_no(info.fastMoves[0]),
                chargeMove1=get_charge_move_by_no(info.chargeMoves[0]),
            )
        )

    ranking.sort(key=lambda p: p.scp, reverse=True)
    return ranking
