import pytest

from src.trainer_battle.data.evolution import evolutions, rev_evolutions
from src.trainer_battle.data.species import find_species, get_species_by_no
from src.trainer_battle.errors import PokemonConstructionError, UnknownMoveError, UnknownSpeciesError
from src.trainer_battle.schema.stats import IVs
from src.trainer_battle.utils.mon_factory import create_pokemon


def make_swoobat():
    return create_pokemon("Swoobat", "Air Slash", "Psychic Fangs", cp=1489, attack_iv=10, defense_iv=9, stamina_iv=12)


def test_create_from_cp():
    swoobat = make_swoobat()
    assert swoobat.level == 34.5
    assert swoobat.cp == 1489
    assert swoobat.hp == 135
    assert swoobat.attack == pytest.approx(129.7257933042)
    assert swoobat.is_stab_fast_move
    assert swoobat.is_stab_charge_move(0)
    assert swoobat.charge_move(1) is None
    assert swoobat.scp >= 10 and swoobat.dcp >= 10


def test_create_from_level():
    cresselia = create_pokemon("Cresselia", "Psycho Cut", "Moonblast", "Grass Knot", level=20.0, attack_iv=2, defense_iv=15, stamina_iv=13)
    assert cresselia.cp == 1500
    assert [m.name for m in cresselia.charge_moves()] == ["Moonblast", "Grass Knot"]


def test_create_by_numbers():
    cresselia = create_pokemon(488, 226, 87, level=20.0, attack_iv=2, defense_iv=15, stamina_iv=13)
    assert cresselia.name == "Cresselia"
    assert cresselia.fastMove.name == "Psycho Cut"


def test_impossible_cp_lists_nearby_ivs():
    with pytest.raises(PokemonConstructionError) as excinfo:
        create_pokemon("Cresselia", "Psycho Cut", "Moonblast", cp=1500, attack_iv=2, defense_iv=15, stamina_iv=12)
    err = excinfo.value
    assert IVs(attack=2, defense=15, stamina=13) in err.suggestions
    assert "did you mean" in str(err)


def test_hydreigon_cp_off_by_one_fails():
    with pytest.raises(PokemonConstructionError):
        create_pokemon("Hydreigon", "Bite", "Brutal Swing", cp=2277, attack_iv=10, defense_iv=14, stamina_iv=14)


def test_unknown_names():
    with pytest.raises(UnknownSpeciesError):
        create_pokemon("Missingno", "Bite", "Crunch", level=20.0)
    with pytest.raises(UnknownMoveError):
        create_pokemon("Deino", "Hyper Bite", "Crunch", level=20.0)
    # Both are construction errors
    with pytest.raises(PokemonConstructionError):
        create_pokemon("Deino", "Bite", "Hyper Crunch", level=20.0)


def test_bad_ivs_and_level():
    with pytest.raises(PokemonConstructionError):
        create_pokemon("Deino", "Bite", "Crunch", level=20.0, attack_iv=16)
    with pytest.raises(PokemonConstructionError):
        create_pokemon("Deino", "Bite", "Crunch", level=20.25)
    with pytest.raises(PokemonConstructionError):
        create_pokemon("Deino", "Bite", "Crunch", cp=500, level=20.0)
    with pytest.raises(PokemonConstructionError):
        create_pokemon("Deino", "Bite", "Crunch")


@pytest.mark.parametrize("level", [50.5, 51.0, 0.5])
def test_level_outside_creature_range(level):
    with pytest.raises(PokemonConstructionError):
        create_pokemon("Deino", "Bite", "Crunch", level=level)


def test_max_level_creature():
    assert create_pokemon("Deino", "Bite", "Crunch", level=50.0).level == 50.0


def test_species_lookup():
    assert find_species(488).name == "Cresselia"
    assert find_species("0488").name == "Cresselia"
    assert find_species("cresselia").no == "0488"
    assert find_species(" 488 ").name == "Cresselia"
    assert find_species(" 0488 ").name == "Cresselia"
    assert get_species_by_no(9999) is None


def test_evolutions():
    assert [p.name for p in evolutions("0001")] == ["Ivysaur"]
    assert [p.name for p in rev_evolutions("0003")] == ["Ivysaur"]
    assert [p.name for p in rev_evolutions("0242")] == ["Chansey"]
    assert evolutions("0150") == []


def test_power_per_turn_is_seeded():
    swoobat = make_swoobat()
    machamp = create_pokemon("Machamp", "Counter", "Cross Chop", level=20.0, attack_iv=15, defense_iv=15, stamina_iv=15)

    ppt = swoobat.power_per_turn(machamp, num_turns=300, seed=3)
    assert ppt > 0
    assert ppt == swoobat.power_per_turn(machamp, num_turns=300, seed=3)

    # Flying and Psychic both hit Fighting hard, so ignoring types lowers the estimate
    assert swoobat.power_per_turn(machamp, num_turns=300, seed=3, disable_type_effect=True) < ppt
