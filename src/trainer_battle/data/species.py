from functools import lru_cache
from typing import Optional, Union

from src.trainer_battle.data.moves import find_charge_move, find_fast_move
from src.trainer_battle.enums import Type
from src.trainer_battle.errors import UnknownSpeciesError
from src.trainer_battle.schema.species_info import BaseStats, SpeciesInfo

T = Type

# (no, name, types, (attack, defense, stamina), fast moves, charge moves)
_SPECIES_ROWS = [
    ("0001", "Bulbasaur", [T.GRASS, T.POISON], (118, 111, 128), ["Vine Whip", "Tackle"], ["Sludge Bomb", "Seed Bomb", "Power Whip"]),
    ("0002", "Ivysaur", [T.GRASS, T.POISON], (151, 143, 155), ["Vine Whip", "Razor Leaf"], ["Sludge Bomb", "Solar Beam", "Power Whip"]),
    ("0003", "Venusaur", [T.GRASS, T.POISON], (198, 189, 190), ["Vine Whip", "Razor Leaf"], ["Frenzy Plant", "Sludge Bomb", "Petal Blizzard", "Solar Beam"]),
    ("0004", "Charmander", [T.FIRE], (116, 93, 118), ["Ember", "Scratch"], ["Flamethrower", "Flame Charge", "Flame Burst"]),
    ("0005", "Charmeleon", [T.FIRE], (158, 126, 151), ["Ember", "Fire Fang", "Scratch"], ["Flamethrower", "Flame Burst", "Fire Punch"]),
    ("0006", "Charizard", [T.FIRE, T.FLYING], (223, 173, 186), ["Fire Spin", "Air Slash", "Wing Attack", "Dragon Breath", "Ember"], ["Blast Burn", "Dragon Claw", "Flamethrower", "Overheat", "Fire Blast"]),
    ("0007", "Squirtle", [T.WATER], (94, 121, 127), ["Bubble", "Tackle"], ["Aqua Jet", "Aqua Tail", "Water Pulse"]),
    ("0008", "Wartortle", [T.WATER], (126, 155, 153), ["Water Gun", "Bite"], ["Aqua Jet", "Ice Beam", "Hydro Pump"]),
    ("0009", "Blastoise", [T.WATER], (171, 207, 188), ["Water Gun", "Bite"], ["Hydro Cannon", "Ice Beam", "Skull Bash", "Flash Cannon"]),
    ("0025", "Pikachu", [T.ELECTRIC], (112, 96, 111), ["Thunder Shock", "Quick Attack"], ["Discharge", "Thunderbolt", "Wild Charge"]),
    ("0026", "Raichu", [T.ELECTRIC], (193, 151, 155), ["Volt Switch", "Thunder Shock", "Spark"], ["Wild Charge", "Thunder Punch", "Brick Break"]),
    ("0035", "Clefairy", [T.FAIRY], (107, 108, 172), ["Pound", "Zen Headbutt"], ["Disarming Voice", "Body Slam", "Moonblast"]),
    ("0036", "Clefable", [T.FAIRY], (178, 162, 216), ["Charge Beam", "Zen Headbutt", "Fairy Wind"], ["Moonblast", "Meteor Mash", "Psychic", "Dazzling Gleam"]),
    ("0066", "Machop", [T.FIGHTING], (137, 82, 172), ["Rock Smash", "Karate Chop", "Low Kick"], ["Cross Chop", "Brick Break", "Low Sweep"]),
    ("0067", "Machoke", [T.FIGHTING], (177, 125, 190), ["Low Kick", "Karate Chop"], ["Submission", "Brick Break", "Dynamic Punch", "Cross Chop"]),
    ("0068", "Machamp", [T.FIGHTING], (234, 159, 207), ["Counter", "Karate Chop", "Bullet Punch"], ["Cross Chop", "Rock Slide", "Close Combat", "Dynamic Punch"]),
    ("0092", "Gastly", [T.GHOST, T.POISON], (186, 67, 102), ["Lick", "Astonish"], ["Night Shade", "Dark Pulse", "Sludge Bomb", "Ominous Wind"]),
    ("0093", "Haunter", [T.GHOST, T.POISON], (223, 107, 128), ["Shadow Claw", "Astonish", "Lick"], ["Shadow Punch", "Shadow Ball", "Sludge Bomb", "Dark Pulse"]),
    ("0094", "Gengar", [T.GHOST, T.POISON], (261, 149, 155), ["Shadow Claw", "Hex", "Lick"], ["Shadow Punch", "Shadow Ball", "Sludge Bomb", "Focus Blast"]),
    ("0113", "Chansey", [T.NORMAL], (60, 128, 487), ["Pound", "Zen Headbutt"], ["Dazzling Gleam", "Psychic", "Hyper Beam"]),
    ("0143", "Snorlax", [T.NORMAL], (190, 169, 330), ["Lick", "Zen Headbutt"], ["Body Slam", "Superpower", "Earthquake", "Hyper Beam"]),
    ("0149", "Dragonite", [T.DRAGON, T.FLYING], (263, 198, 209), ["Dragon Breath", "Dragon Tail", "Steel Wing"], ["Dragon Claw", "Hurricane", "Superpower", "Outrage"]),
    ("0150", "Mewtwo", [T.PSYCHIC], (300, 182, 214), ["Psycho Cut", "Confusion"], ["Psystrike", "Shadow Ball", "Ice Beam", "Focus Blast"]),
    ("0151", "Mew", [T.PSYCHIC], (210, 210, 225), ["Shadow Claw", "Volt Switch", "Snarl", "Poison Jab"], ["Surf", "Wild Charge", "Rock Slide", "Psyshock", "Flame Charge"]),
    ("0171", "Lanturn", [T.WATER, T.ELECTRIC], (146, 137, 268), ["Water Gun", "Spark", "Charge Beam"], ["Surf", "Thunderbolt", "Hydro Pump", "Thunder"]),
    ("0182", "Bellossom", [T.GRASS], (169, 186, 181), ["Acid", "Bullet Seed", "Magical Leaf"], ["Leaf Blade", "Petal Blizzard", "Dazzling Gleam"]),
    ("0183", "Marill", [T.WATER, T.FAIRY], (37, 93, 172), ["Tackle", "Bubble"], ["Bubble Beam", "Aqua Tail", "Body Slam"]),
    ("0184", "Azumarill", [T.WATER, T.FAIRY], (112, 152, 225), ["Bubble", "Rock Smash"], ["Ice Beam", "Hydro Pump", "Play Rough", "Hydro Cannon"]),
    ("0197", "Umbreon", [T.DARK], (126, 240, 216), ["Snarl", "Feint Attack"], ["Foul Play", "Last Resort", "Dark Pulse", "Psychic"]),
    ("0227", "Skarmory", [T.STEEL, T.FLYING], (148, 226, 163), ["Air Slash", "Steel Wing"], ["Brave Bird", "Sky Attack", "Flash Cannon"]),
    ("0242", "Blissey", [T.NORMAL], (129, 169, 496), ["Pound", "Zen Headbutt"], ["Psychic", "Hyper Beam", "Dazzling Gleam"]),
    ("0302", "Sableye", [T.DARK, T.GHOST], (141, 136, 137), ["Shadow Claw", "Feint Attack"], ["Foul Play", "Power Gem", "Return"]),
    ("0307", "Meditite", [T.FIGHTING, T.PSYCHIC], (78, 107, 102), ["Confusion", "Rock Smash"], ["Ice Punch", "Psyshock", "Low Sweep"]),
    ("0308", "Medicham", [T.FIGHTING, T.PSYCHIC], (121, 152, 155), ["Psycho Cut", "Counter"], ["Ice Punch", "Psychic", "Dynamic Punch", "Power-Up Punch"]),
    ("0333", "Swablu", [T.NORMAL, T.FLYING], (76, 132, 128), ["Peck", "Astonish"], ["Disarming Voice", "Aerial Ace", "Ice Beam"]),
    ("0334", "Altaria", [T.DRAGON, T.FLYING], (141, 201, 181), ["Dragon Breath", "Peck"], ["Sky Attack", "Dazzling Gleam", "Dragon Pulse", "Moonblast"]),
    ("0339", "Barboach", [T.WATER, T.GROUND], (93, 82, 137), ["Water Gun", "Mud Shot"], ["Aqua Tail", "Ice Beam", "Mud Bomb"]),
    ("0340", "Whiscash", [T.WATER, T.GROUND], (151, 141, 242), ["Water Gun", "Mud Shot"], ["Mud Bomb", "Blizzard", "Water Pulse"]),
    ("0379", "Registeel", [T.STEEL], (143, 285, 190), ["Lock-On", "Metal Claw"], ["Flash Cannon", "Hyper Beam", "Focus Blast", "Zap Cannon"]),
    ("0411", "Bastiodon", [T.ROCK, T.STEEL], (94, 286, 155), ["Smack Down", "Iron Tail"], ["Stone Edge", "Flamethrower", "Flash Cannon"]),
    ("0448", "Lucario", [T.FIGHTING, T.STEEL], (236, 144, 172), ["Counter", "Bullet Punch"], ["Aura Sphere", "Shadow Ball", "Power-Up Punch", "Close Combat"]),
    ("0468", "Togekiss", [T.FAIRY, T.FLYING], (225, 217, 198), ["Air Slash", "Charm", "Hidden Power"], ["Ancient Power", "Dazzling Gleam", "Aerial Ace", "Flamethrower"]),
    ("0487", "Giratina-Altered", [T.GHOST, T.DRAGON], (187, 225, 284), ["Shadow Claw", "Dragon Breath"], ["Dragon Claw", "Ancient Power", "Shadow Sneak"]),
    ("0488", "Cresselia", [T.PSYCHIC], (152, 258, 260), ["Psycho Cut", "Confusion"], ["Grass Knot", "Moonblast", "Future Sight"]),
    ("0527", "Woobat", [T.PSYCHIC, T.FLYING], (107, 85, 163), ["Confusion", "Air Slash"], ["Psychic", "Aerial Ace", "Air Cutter"]),
    ("0528", "Swoobat", [T.PSYCHIC, T.FLYING], (161, 119, 167), ["Confusion", "Air Slash"], ["Psychic Fangs", "Psychic", "Aerial Ace", "Fly", "Future Sight"]),
    ("0596", "Galvantula", [T.BUG, T.ELECTRIC], (201, 128, 155), ["Volt Switch", "Fury Cutter"], ["Discharge", "Lunge", "Energy Ball", "Bug Buzz"]),
    ("0618", "Stunfisk", [T.GROUND, T.ELECTRIC], (144, 171, 240), ["Mud Shot", "Thunder Shock"], ["Mud Bomb", "Discharge", "Muddy Water"]),
    ("0633", "Deino", [T.DARK, T.DRAGON], (116, 93, 141), ["Dragon Breath", "Tackle"], ["Crunch", "Body Slam", "Dragon Pulse"]),
    ("0634", "Zweilous", [T.DARK, T.DRAGON], (159, 135, 176), ["Dragon Breath", "Bite"], ["Dark Pulse", "Body Slam", "Dragon Pulse"]),
    ("0635", "Hydreigon", [T.DARK, T.DRAGON], (256, 188, 211), ["Bite", "Dragon Breath"], ["Brutal Swing", "Dark Pulse", "Flash Cannon", "Dragon Pulse"]),
    ("0709", "Trevenant", [T.GHOST, T.GRASS], (201, 154, 198), ["Shadow Claw", "Sucker Punch"], ["Shadow Ball", "Seed Bomb", "Foul Play"]),
]


def _species(row: tuple) -> SpeciesInfo:
    no, name, types, (attack, defense, stamina), fast_moves, charge_moves = row
    return SpeciesInfo(
        no=no,
        name=name,
        types=types,
        baseStats=BaseStats(attack=attack, defense=defense, stamina=stamina),
        fastMoves=[find_fast_move(move).no for move in fast_moves],
        chargeMoves=[find_charge_move(move).no for move in charge_moves],
    )


SPECIES_INFOS: list[SpeciesInfo] = [_species(row) for row in _SPECIES_ROWS]


@lru_cache(maxsize=None)
def _species_by_no() -> dict[str, SpeciesInfo]:
    return {info.no: info for info in SPECIES_INFOS}


@lru_cache(maxsize=None)
def _species_by_name() -> dict[str, SpeciesInfo]:
    return {info.name.lower(): info for info in SPECIES_INFOS}


def _normalize_no(no: Union[int, str]) -> str:
    if isinstance(no, int) or no.strip().isdigit():
        return f"{int(no):04d}"
    return no.strip()


def get_species_by_no(no: Union[int, str]) -> Optional[SpeciesInfo]:
    return _species_by_no().get(_normalize_no(no))


def get_species_by_name(name: str) -> Optional[SpeciesInfo]:
    return _species_by_name().get(name.strip().lower())


def find_species(key: Union[int, str, SpeciesInfo]) -> SpeciesInfo:
    """Resolve a species by pokedex number, zero padded id or name. Raises UnknownSpeciesError."""
    if isinstance(key, SpeciesInfo):
        return key
    if isinstance(key, int) or key.strip().isdigit():
        info = get_species_by_no(key)
    else:
        info = get_species_by_name(key)
    if info is None:
        raise UnknownSpeciesError(key)
    return info
