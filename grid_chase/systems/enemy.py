"""Autonomous enemy system.

Each idle enemy counts its cooldown down once per tick. When it reaches zero
the enemy picks a direction with its policy, attempts the move and resets the
cooldown to ``cooldown_max``. A move refused at the grid edge still costs the
full cooldown, so blocked enemies do not retry immediately.

Policies are pure ``DirectionFn`` callables registered per
:class:`grid_chase.types.MovementType`; :func:`choose_direction` dispatches on
the enemy's tag.
"""

import random
from dataclasses import replace
from typing import Dict, List

from pyrsistent import pvector

from grid_chase.components import Enemy, Position
from grid_chase.grid import GridSpec
from grid_chase.state import World
from grid_chase.systems.motion import advance, request_move, set_direction
from grid_chase.types import Direction, DirectionFn, MovementType
from grid_chase.utils.rng import DECISION_SALT, world_rng

# Up, down, left, right.
CARDINAL_DIRECTIONS: List[Direction] = [(0, -1), (0, 1), (-1, 0), (1, 0)]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def random_direction(enemy: Enemy, target: Position, rng: random.Random) -> Direction:
    """Uniform choice among the four cardinal directions."""
    return rng.choice(CARDINAL_DIRECTIONS)


def chase_direction(enemy: Enemy, target: Position, rng: random.Random) -> Direction:
    """Step along the axis with the larger distance to ``target``.

    Equal distances go to the row axis. An enemy already on ``target`` gets
    ``(0, 0)``.
    """
    pos = enemy.motion.position
    d_col = target.x - pos.x
    d_row = target.y - pos.y
    if abs(d_col) > abs(d_row):
        return (_sign(d_col), 0)
    return (0, _sign(d_row))


DIRECTION_FN_REGISTRY: Dict[MovementType, DirectionFn] = {
    MovementType.RANDOM: random_direction,
    MovementType.CHASE: chase_direction,
}


def choose_direction(enemy: Enemy, target: Position, rng: random.Random) -> Direction:
    """Pick the next direction for ``enemy`` according to its movement type.

    Raises:
        ValueError: If the movement type has no registered policy.
    """
    direction_fn = DIRECTION_FN_REGISTRY.get(enemy.movement_type)
    if direction_fn is None:
        raise ValueError(f"Unknown movement type: {enemy.movement_type}")
    return direction_fn(enemy, target, rng)


def update_enemy(
    enemy: Enemy, grid: GridSpec, target: Position, rng: random.Random
) -> Enemy:
    """Advance one enemy by one tick, deciding a new move when due."""
    motion = advance(enemy.motion)
    if motion.moving:
        return replace(enemy, motion=motion)

    if enemy.cooldown > 0:
        return replace(enemy, motion=motion, cooldown=enemy.cooldown - 1)

    direction = choose_direction(replace(enemy, motion=motion), target, rng)
    motion = request_move(set_direction(motion, direction), direction, grid)
    return replace(enemy, motion=motion, cooldown=enemy.cooldown_max)


def enemy_system(world: World) -> World:
    """Update every enemy in spawn order, chasing the player's settled cell."""
    if not world.enemies:
        return world
    target = world.player.motion.position
    enemies = [
        update_enemy(
            enemy,
            world.grid,
            target,
            world_rng(world, DECISION_SALT, enemy.entity_id),
        )
        for enemy in world.enemies
    ]
    return replace(world, enemies=pvector(enemies))
