"""Deterministic random number generation.

Every random draw is made from a fresh ``random.Random`` seeded by the world
seed, the current turn and integer salts (a purpose tag and an enemy id).
Replaying the same inputs on a world with the same seed therefore reproduces
the same spawns and random walks, independent of enemy update order.

Salts are integers because ``hash`` of ints is stable across processes while
``hash`` of strings is not.
"""

import random

from grid_chase.state import World

SPAWN_SALT = 0
DECISION_SALT = 1


def world_rng(world: World, *salt: int) -> random.Random:
    """Return an RNG for this world, turn and salt."""
    base_seed = hash((world.seed if world.seed is not None else 0, world.turn, salt))
    return random.Random(base_seed)
