"""
Fast and charge move catalogs (trainer battle values).

Dummy entries are clones of a base move that have no public pokedex slot of
their own. They resolve by number only and never appear in the name maps.
"""

from functools import lru_cache
from typing import Iterable, Optional, Union

from src.trainer_battle.constants import STAB_MULTIPLIER
from src.trainer_battle.enums import Type
from src.trainer_battle.errors import UnknownMoveError
from src.trainer_battle.schema.battle_move import ChargeMove, FastMove, StatChange

T = Type

# (no, name, type, power, energy, turns)
_FAST_MOVE_ROWS = [
    (200, "Fury Cutter", T.BUG, 2, 4, 1),
    (201, "Bug Bite", T.BUG, 3, 3, 1),
    (202, "Bite", T.DARK, 4, 2, 1),
    (203, "Sucker Punch", T.DARK, 5, 7, 2),
    (204, "Dragon Breath", T.DRAGON, 4, 3, 1),
    (205, "Thunder Shock", T.ELECTRIC, 3, 9, 2),
    (206, "Spark", T.ELECTRIC, 6, 7, 2),
    (207, "Low Kick", T.FIGHTING, 4, 5, 2),
    (208, "Karate Chop", T.FIGHTING, 5, 8, 2),
    (209, "Ember", T.FIRE, 7, 6, 2),
    (210, "Wing Attack", T.FLYING, 5, 8, 2),
    (211, "Peck", T.FLYING, 6, 5, 2),
    (212, "Lick", T.GHOST, 3, 3, 1),
    (213, "Shadow Claw", T.GHOST, 6, 8, 2),
    (214, "Vine Whip", T.GRASS, 5, 8, 2),
    (215, "Razor Leaf", T.GRASS, 10, 4, 2),
    (216, "Mud Shot", T.GROUND, 3, 9, 2),
    (217, "Ice Shard", T.ICE, 9, 10, 3),
    (218, "Frost Breath", T.ICE, 7, 5, 2),
    (219, "Quick Attack", T.NORMAL, 5, 8, 2),
    (220, "Scratch", T.NORMAL, 4, 2, 1),
    (221, "Tackle", T.NORMAL, 3, 3, 1),
    (222, "Pound", T.NORMAL, 4, 4, 2),
    (223, "Cut", T.NORMAL, 3, 2, 1),
    (224, "Poison Jab", T.POISON, 7, 7, 2),
    (225, "Acid", T.POISON, 6, 5, 2),
    (226, "Psycho Cut", T.PSYCHIC, 3, 9, 2),
    (227, "Rock Throw", T.ROCK, 8, 5, 2),
    (228, "Metal Claw", T.STEEL, 5, 6, 2),
    (229, "Bullet Punch", T.STEEL, 6, 7, 2),
    (230, "Water Gun", T.WATER, 3, 3, 1),
    (231, "Splash", T.WATER, 0, 12, 4),
    (233, "Mud-Slap", T.GROUND, 11, 8, 3),
    (234, "Zen Headbutt", T.PSYCHIC, 8, 6, 3),
    (235, "Confusion", T.PSYCHIC, 16, 12, 4),
    (236, "Poison Sting", T.POISON, 3, 9, 2),
    (237, "Bubble", T.WATER, 7, 11, 3),
    (238, "Feint Attack", T.DARK, 6, 6, 2),
    (239, "Steel Wing", T.STEEL, 7, 5, 2),
    (240, "Fire Fang", T.FIRE, 8, 5, 2),
    (241, "Rock Smash", T.FIGHTING, 9, 7, 3),
    (242, "Transform", T.NORMAL, 0, 0, 3),
    (243, "Counter", T.FIGHTING, 8, 7, 2),
    (244, "Powder Snow", T.ICE, 5, 8, 2),
    (249, "Charge Beam", T.ELECTRIC, 5, 11, 3),
    (250, "Volt Switch", T.ELECTRIC, 12, 16, 4),
    (253, "Dragon Tail", T.DRAGON, 13, 9, 3),
    (255, "Air Slash", T.FLYING, 9, 9, 3),
    (260, "Infestation", T.BUG, 6, 12, 3),
    (261, "Struggle Bug", T.BUG, 9, 8, 3),
    (263, "Astonish", T.GHOST, 5, 10, 3),
    (264, "Hex", T.GHOST, 6, 12, 3),
    (266, "Iron Tail", T.STEEL, 9, 6, 3),
    (269, "Fire Spin", T.FIRE, 9, 10, 3),
    (271, "Bullet Seed", T.GRASS, 5, 13, 3),
    (274, "Extrasensory", T.PSYCHIC, 8, 10, 3),
    (278, "Snarl", T.DARK, 5, 13, 3),
    (281, "Hidden Power", T.NORMAL, 9, 8, 3),
    (282, "Take Down", T.NORMAL, 5, 8, 3),
    (283, "Waterfall", T.WATER, 12, 8, 3),
    (287, "Yawn", T.NORMAL, 0, 12, 4),
    (291, "Present", T.NORMAL, 3, 12, 3),
    (297, "Smack Down", T.ROCK, 12, 8, 3),
    (320, "Charm", T.FAIRY, 15, 6, 3),
    (325, "Lock-On", T.NORMAL, 1, 5, 1),
    (326, "Thunder Fang", T.ELECTRIC, 8, 5, 2),
    (327, "Ice Fang", T.ICE, 8, 5, 2),
    (345, "Gust", T.FLYING, 16, 12, 4),
    (346, "Incinerate", T.FIRE, 15, 20, 5),
    (350, "Fairy Wind", T.FAIRY, 3, 9, 2),
    (356, "Double Kick", T.FIGHTING, 8, 12, 3),
    (357, "Magical Leaf", T.GRASS, 10, 10, 3),
    (368, "Rollout", T.ROCK, 5, 13, 3),
    (373, "Water Shuriken", T.WATER, 6, 14, 3),
    (385, "Leafage", T.GRASS, 6, 7, 2),
    (387, "Geomancy", T.FAIRY, 4, 13, 3),
]

_DUMMY_FAST_MOVE_ROWS = [
    (232, "Water Gun (Blastoise)", T.WATER, 6, 4, 2),
]

# (no, name, type, power, energy, (selfAtk, selfDef, oppAtk, oppDef) | None, chance %)
_CHARGE_MOVE_ROWS = [
    (13, "Wrap", T.NORMAL, 60, 45, None, 0),
    (14, "Hyper Beam", T.NORMAL, 150, 80, None, 0),
    (16, "Dark Pulse", T.DARK, 80, 50, None, 0),
    (18, "Sludge", T.POISON, 50, 40, None, 0),
    (20, "Vice Grip", T.NORMAL, 40, 40, None, 0),
    (21, "Flame Wheel", T.FIRE, 60, 55, None, 0),
    (22, "Megahorn", T.BUG, 110, 55, None, 0),
    (24, "Flamethrower", T.FIRE, 90, 55, None, 0),
    (26, "Dig", T.GROUND, 80, 50, None, 0),
    (28, "Cross Chop", T.FIGHTING, 50, 35, None, 0),
    (30, "Psybeam", T.PSYCHIC, 70, 60, None, 0),
    (31, "Earthquake", T.GROUND, 110, 65, None, 0),
    (32, "Stone Edge", T.ROCK, 100, 55, None, 0),
    (33, "Ice Punch", T.ICE, 55, 40, None, 0),
    (34, "Heart Stamp", T.PSYCHIC, 40, 40, None, 0),
    (35, "Discharge", T.ELECTRIC, 65, 45, None, 0),
    (36, "Flash Cannon", T.STEEL, 110, 70, None, 0),
    (38, "Drill Peck", T.FLYING, 65, 40, None, 0),
    (39, "Ice Beam", T.ICE, 90, 55, None, 0),
    (40, "Blizzard", T.ICE, 140, 75, None, 0),
    (42, "Heat Wave", T.FIRE, 95, 75, None, 0),
    (45, "Aerial Ace", T.FLYING, 55, 40, None, 0),
    (46, "Drill Run", T.GROUND, 80, 45, None, 0),
    (47, "Petal Blizzard", T.GRASS, 110, 65, None, 0),
    (48, "Mega Drain", T.GRASS, 25, 55, None, 0),
    (49, "Bug Buzz", T.BUG, 100, 60, (0, 0, 0, -1), 30),
    (50, "Poison Fang", T.POISON, 45, 40, (0, 0, 0, -1), 100),
    (51, "Night Slash", T.DARK, 50, 35, (2, 0, 0, 0), 12.5),
    (53, "Bubble Beam", T.WATER, 25, 40, (0, 0, -1, 0), 100),
    (54, "Submission", T.FIGHTING, 60, 50, None, 0),
    (56, "Low Sweep", T.FIGHTING, 40, 40, None, 0),
    (57, "Aqua Jet", T.WATER, 45, 45, None, 0),
    (58, "Aqua Tail", T.WATER, 50, 35, None, 0),
    (59, "Seed Bomb", T.GRASS, 60, 45, None, 0),
    (60, "Psyshock", T.PSYCHIC, 70, 45, None, 0),
    (62, "Ancient Power", T.ROCK, 60, 45, (1, 1, 0, 0), 10),
    (63, "Rock Tomb", T.ROCK, 70, 60, (0, 0, -1, 0), 100),
    (64, "Rock Slide", T.ROCK, 75, 45, None, 0),
    (65, "Power Gem", T.ROCK, 80, 60, None, 0),
    (66, "Shadow Sneak", T.GHOST, 50, 45, None, 0),
    (67, "Shadow Punch", T.GHOST, 40, 35, None, 0),
    (69, "Ominous Wind", T.GHOST, 45, 45, (1, 1, 0, 0), 10),
    (70, "Shadow Ball", T.GHOST, 100, 55, None, 0),
    (72, "Magnet Bomb", T.STEEL, 70, 45, None, 0),
    (74, "Iron Head", T.STEEL, 70, 50, None, 0),
    (75, "Parabolic Charge", T.ELECTRIC, 65, 55, None, 0),
    (77, "Thunder Punch", T.ELECTRIC, 55, 40, None, 0),
    (78, "Thunder", T.ELECTRIC, 100, 60, None, 0),
    (79, "Thunderbolt", T.ELECTRIC, 90, 55, None, 0),
    (80, "Twister", T.DRAGON, 45, 45, None, 0),
    (82, "Dragon Pulse", T.DRAGON, 90, 60, None, 0),
    (83, "Dragon Claw", T.DRAGON, 50, 35, None, 0),
    (84, "Disarming Voice", T.FAIRY, 70, 45, None, 0),
    (85, "Draining Kiss", T.FAIRY, 60, 55, None, 0),
    (86, "Dazzling Gleam", T.FAIRY, 110, 70, None, 0),
    (87, "Moonblast", T.FAIRY, 110, 60, (0, 0, -1, 0), 10),
    (88, "Play Rough", T.FAIRY, 90, 60, None, 0),
    (89, "Cross Poison", T.POISON, 50, 35, (2, 0, 0, 0), 12.5),
    (90, "Sludge Bomb", T.POISON, 80, 50, None, 0),
    (91, "Sludge Wave", T.POISON, 110, 65, None, 0),
    (92, "Gunk Shot", T.POISON, 130, 75, None, 0),
    (94, "Bone Club", T.GROUND, 40, 35, None, 0),
    (95, "Bulldoze", T.GROUND, 80, 60, None, 0),
    (96, "Mud Bomb", T.GROUND, 60, 40, None, 0),
    (99, "Signal Beam", T.BUG, 75, 55, (0, 0, -1, -1), 20),
    (100, "X-Scissor", T.BUG, 65, 40, None, 0),
    (101, "Flame Charge", T.FIRE, 65, 50, (1, 0, 0, 0), 100),
    (102, "Flame Burst", T.FIRE, 70, 55, None, 0),
    (103, "Fire Blast", T.FIRE, 140, 80, None, 0),
    (104, "Brine", T.WATER, 60, 50, None, 0),
    (105, "Water Pulse", T.WATER, 70, 60, None, 0),
    (106, "Scald", T.WATER, 80, 50, (0, 0, 0, -1), 30),
    (107, "Hydro Pump", T.WATER, 130, 75, None, 0),
    (108, "Psychic", T.PSYCHIC, 85, 55, (0, 0, 0, -1), 10),
    (109, "Psystrike", T.PSYCHIC, 90, 45, None, 0),
    (111, "Icy Wind", T.ICE, 60, 45, (0, 0, -1, 0), 100),
    (114, "Giga Drain", T.GRASS, 50, 80, None, 0),
    (115, "Fire Punch", T.FIRE, 55, 40, None, 0),
    (116, "Solar Beam", T.GRASS, 150, 80, None, 0),
    (117, "Leaf Blade", T.GRASS, 70, 35, None, 0),
    (118, "Power Whip", T.GRASS, 90, 50, None, 0),
    (121, "Air Cutter", T.FLYING, 60, 55, None, 0),
    (122, "Hurricane", T.FLYING, 110, 65, None, 0),
    (123, "Brick Break", T.FIGHTING, 40, 35, None, 0),
    (125, "Swift", T.NORMAL, 60, 55, None, 0),
    (126, "Horn Attack", T.NORMAL, 40, 35, None, 0),
    (127, "Stomp", T.NORMAL, 55, 40, None, 0),
    (129, "Hyper Fang", T.NORMAL, 80, 50, None, 0),
    (131, "Body Slam", T.NORMAL, 60, 35, None, 0),
    (133, "Struggle", T.NORMAL, 35, 100, None, 0),
    (245, "Close Combat", T.FIGHTING, 100, 45, (0, -2, 0, 0), 100),
    (246, "Dynamic Punch", T.FIGHTING, 90, 50, None, 0),
    (247, "Focus Blast", T.FIGHTING, 150, 75, None, 0),
    (248, "Aurora Beam", T.ICE, 80, 60, None, 0),
    (251, "Wild Charge", T.ELECTRIC, 100, 45, (0, -2, 0, 0), 100),
    (252, "Zap Cannon", T.ELECTRIC, 150, 80, (0, 0, -1, 0), 66),
    (254, "Avalanche", T.ICE, 90, 45, None, 0),
    (256, "Brave Bird", T.FLYING, 130, 55, (0, -3, 0, 0), 100),
    (257, "Sky Attack", T.FLYING, 75, 50, None, 0),
    (258, "Sand Tomb", T.GROUND, 25, 40, (0, 0, 0, -1), 100),
    (259, "Rock Blast", T.ROCK, 50, 40, None, 0),
    (262, "Silver Wind", T.BUG, 60, 45, (1, 1, 0, 0), 10),
    (265, "Night Shade", T.GHOST, 60, 55, None, 0),
    (267, "Gyro Ball", T.STEEL, 80, 60, None, 0),
    (268, "Heavy Slam", T.STEEL, 70, 50, None, 0),
    (270, "Overheat", T.FIRE, 130, 55, (-2, 0, 0, 0), 100),
    (272, "Grass Knot", T.GRASS, 90, 50, None, 0),
    (273, "Energy Ball", T.GRASS, 90, 55, (0, 0, 0, -1), 10),
    (275, "Future Sight", T.PSYCHIC, 120, 65, None, 0),
    (276, "Mirror Coat", T.PSYCHIC, 60, 55, None, 0),
    (277, "Outrage", T.DRAGON, 110, 60, None, 0),
    (279, "Crunch", T.DARK, 70, 45, (0, 0, 0, -1), 30),
    (280, "Foul Play", T.DARK, 70, 45, None, 0),
    (284, "Surf", T.WATER, 65, 40, None, 0),
    (285, "Draco Meteor", T.DRAGON, 150, 65, (-2, 0, 0, 0), 100),
    (286, "Doom Desire", T.STEEL, 75, 40, None, 0),
    (288, "Psycho Boost", T.PSYCHIC, 70, 35, (-2, 0, 0, 0), 100),
    (296, "Frenzy Plant", T.GRASS, 100, 45, None, 0),
    (298, "Blast Burn", T.FIRE, 110, 50, None, 0),
    (299, "Hydro Cannon", T.WATER, 80, 40, None, 0),
    (300, "Last Resort", T.NORMAL, 90, 55, None, 0),
    (301, "Meteor Mash", T.STEEL, 100, 50, None, 0),
    (302, "Skull Bash", T.NORMAL, 130, 75, (0, 1, 0, 0), 100),
    (303, "Acid Spray", T.POISON, 20, 45, (0, 0, 0, -2), 100),
    (304, "Earth Power", T.GROUND, 90, 55, (0, 0, 0, -1), 10),
    (305, "Crabhammer", T.WATER, 85, 50, (2, 0, 0, 0), 12.5),
    (306, "Lunge", T.BUG, 60, 45, (0, 0, -1, 0), 100),
    (308, "Octazooka", T.WATER, 50, 50, (0, 0, -2, 0), 50),
    (309, "Mirror Shot", T.STEEL, 35, 35, (0, 0, -1, 0), 30),
    (310, "Superpower", T.FIGHTING, 85, 40, (-1, -1, 0, 0), 100),
    (311, "Fell Stinger", T.BUG, 20, 35, (1, 0, 0, 0), 100),
    (312, "Leaf Tornado", T.GRASS, 45, 40, (0, 0, -2, 0), 50),
    (314, "Drain Punch", T.FIGHTING, 20, 40, (0, 1, 0, 0), 100),
    (315, "Shadow Bone", T.GHOST, 75, 45, (0, 0, 0, -1), 20),
    (316, "Muddy Water", T.WATER, 35, 35, (0, 0, -1, 0), 30),
    (317, "Blaze Kick", T.FIRE, 55, 40, None, 0),
    (318, "Razor Shell", T.WATER, 35, 35, (0, 0, 0, -1), 50),
    (319, "Power-Up Punch", T.FIGHTING, 20, 35, (1, 0, 0, 0), 100),
    (321, "Giga Impact", T.NORMAL, 150, 80, None, 0),
    (322, "Frustration", T.NORMAL, 10, 70, None, 0),
    (323, "Return", T.NORMAL, 130, 70, None, 0),
    (324, "Synchronoise", T.PSYCHIC, 80, 50, None, 0),
    (330, "Sacred Sword", T.FIGHTING, 60, 35, None, 0),
    (331, "Flying Press", T.FIGHTING, 90, 40, None, 0),
    (332, "Aura Sphere", T.FIGHTING, 100, 55, None, 0),
    (333, "Payback", T.DARK, 110, 60, None, 0),
    (334, "Rock Wrecker", T.ROCK, 110, 50, None, 0),
    (335, "Aeroblast", T.FLYING, 170, 75, (2, 0, 0, 0), 12.5),
    (341, "Fly", T.FLYING, 80, 45, None, 0),
    (342, "V-create", T.FIRE, 95, 40, (0, -3, 0, 0), 100),
    (343, "Leaf Storm", T.GRASS, 130, 55, (-2, 0, 0, 0), 100),
    (344, "Tri Attack", T.NORMAL, 65, 50, (0, 0, -1, -1), 50),
    (348, "Feather Dance", T.FLYING, 35, 50, (0, 0, -2, 0), 100),
    (353, "Psychic Fangs", T.PSYCHIC, 40, 35, (0, 0, 0, -1), 100),
    (358, "Sacred Fire", T.FIRE, 130, 65, (0, 0, -1, 0), 50),
    (359, "Icicle Spear", T.ICE, 65, 40, None, 0),
    (364, "Acrobatics", T.FLYING, 110, 60, None, 0),
    (365, "Luster Purge", T.PSYCHIC, 120, 60, (0, 0, 0, -1), 50),
    (366, "Mist Ball", T.PSYCHIC, 120, 60, (0, 0, -1, 0), 50),
    (367, "Brutal Swing", T.DARK, 65, 40, None, 0),
    (369, "Seed Flare", T.GRASS, 130, 75, (0, 0, 0, -2), 40),
    (370, "Obstruct", T.DARK, 15, 40, (0, 1, 0, -1), 100),
    (372, "Meteor Beam", T.ROCK, 120, 60, (1, 0, 0, 0), 100),
    (374, "Fusion Bolt", T.ELECTRIC, 90, 45, None, 0),
    (375, "Fusion Flare", T.FIRE, 90, 45, None, 0),
    (376, "Poltergeist", T.GHOST, 150, 75, None, 0),
    (377, "High Horsepower", T.GROUND, 100, 60, None, 0),
    (378, "Glaciate", T.ICE, 60, 40, (0, 0, -1, 0), 100),
    (379, "Breaking Swipe", T.DRAGON, 50, 35, (0, 0, -1, 0), 100),
    (380, "Boomburst", T.NORMAL, 150, 70, None, 0),
    (381, "Double Iron Bash", T.STEEL, 50, 35, None, 0),
    (382, "Mystical Fire", T.FIRE, 60, 45, (0, 0, -1, 0), 100),
    (383, "Liquidation", T.WATER, 70, 45, (0, 0, 0, -1), 30),
    (384, "Dragon Ascent", T.FLYING, 150, 70, (0, -1, 0, 0), 100),
    (386, "Magma Storm", T.FIRE, 65, 40, None, 0),
    (389, "Oblivion Wing", T.FLYING, 85, 50, None, 0),
    (391, "Triple Axel", T.ICE, 60, 45, (1, 0, 0, 0), 100),
    (392, "Trailblaze", T.GRASS, 65, 50, (1, 0, 0, 0), 100),
    (393, "Scorching Sands", T.GROUND, 80, 50, (0, 0, -1, 0), 30),
]

_DUMMY_CHARGE_MOVE_ROWS = [
    (134, "Scald (Blastoise)", T.WATER, 50, 80, None, 0),
    (135, "Hydro Pump (Blastoise)", T.WATER, 90, 80, None, 0),
    (136, "Wrap (green)", T.NORMAL, 25, 45, None, 0),
    (137, "Wrap (pink)", T.NORMAL, 25, 45, None, 0),
]


def _fast_move(row: tuple, dummy: bool = False) -> FastMove:
    no, name, type_, power, energy, turns = row
    return FastMove(no=no, name=name, type=type_, power=power, energy=energy, turns=turns, dummy=dummy)


def _charge_move(row: tuple, dummy: bool = False) -> ChargeMove:
    no, name, type_, power, energy, buff, chance = row
    stat_change = None
    if buff is not None:
        self_attack, self_defense, opponent_attack, opponent_defense = buff
        stat_change = StatChange(selfAttack=self_attack, selfDefense=self_defense, opponentAttack=opponent_attack, opponentDefense=opponent_defense)
    return ChargeMove(no=no, name=name, type=type_, power=power, energy=energy, statChange=stat_change, statChangeChance=chance, dummy=dummy)


FAST_MOVES: list[FastMove] = [_fast_move(row) for row in _FAST_MOVE_ROWS] + [_fast_move(row, dummy=True) for row in _DUMMY_FAST_MOVE_ROWS]
CHARGE_MOVES: list[ChargeMove] = [_charge_move(row) for row in _CHARGE_MOVE_ROWS] + [_charge_move(row, dummy=True) for row in _DUMMY_CHARGE_MOVE_ROWS]


def _normalize(name: str) -> str:
    return name.strip().lower()


@lru_cache(maxsize=None)
def _fast_moves_by_no() -> dict[int, FastMove]:
    return {move.no: move for move in FAST_MOVES}


@lru_cache(maxsize=None)
def _fast_moves_by_name() -> dict[str, FastMove]:
    return {_normalize(move.name): move for move in FAST_MOVES if not move.dummy}


@lru_cache(maxsize=None)
def _charge_moves_by_no() -> dict[int, ChargeMove]:
    return {move.no: move for move in CHARGE_MOVES}


@lru_cache(maxsize=None)
def _charge_moves_by_name() -> dict[str, ChargeMove]:
    return {_normalize(move.name): move for move in CHARGE_MOVES if not move.dummy}


def get_fast_move_by_no(no: int) -> Optional[FastMove]:
    return _fast_moves_by_no().get(no)


def get_fast_move_by_name(name: str) -> Optional[FastMove]:
    return _fast_moves_by_name().get(_normalize(name))


def get_charge_move_by_no(no: int) -> Optional[ChargeMove]:
    return _charge_moves_by_no().get(no)


def get_charge_move_by_name(name: str) -> Optional[ChargeMove]:
    return _charge_moves_by_name().get(_normalize(name))


def _is_number(key: Union[int, str]) -> bool:
    return isinstance(key, int) or key.strip().isdigit()


def find_fast_move(key: Union[int, str, FastMove]) -> FastMove:
    """Resolve a fast move by number, name or instance. Raises UnknownMoveError."""
    if isinstance(key, FastMove):
        return key
    move = get_fast_move_by_no(int(key)) if _is_number(key) else get_fast_move_by_name(key)
    if move is None:
        raise UnknownMoveError(key, kind="fast move")
    return move


def find_charge_move(key: Union[int, str, ChargeMove]) -> ChargeMove:
    """Resolve a charge move by number, name or instance. Raises UnknownMoveError."""
    if isinstance(key, ChargeMove):
        return key
    move = get_charge_move_by_no(int(key)) if _is_number(key) else get_charge_move_by_name(key)
    if move is None:
        raise UnknownMoveError(key, kind="charge move")
    return move


def is_stab(move: Union[FastMove, ChargeMove], self_types: Iterable[Type]) -> bool:
    return move.type in self_types


def real_power(move: Union[FastMove, ChargeMove], self_types: Iterable[Type]) -> float:
    """Move power with the same-type attack bonus applied"""
    if is_stab(move, self_types):
        return move.power * STAB_MULTIPLIER
    return float(move.power)
