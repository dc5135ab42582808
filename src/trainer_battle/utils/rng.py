import random
from typing import Optional


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Random source for one battle. A fixed seed makes every roll reproducible."""
    return random.Random(seed)


def coin_flip(rng: random.Random) -> bool:
    """Fair coin used to order simultaneous events"""
    return rng.random() < 0.5


def roll_percent(rng: random.Random, chance: float) -> bool:
    """True when a uniform draw in [0, 100) falls under `chance`"""
    return rng.random() * 100.0 < chance
