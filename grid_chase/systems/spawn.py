"""Enemy spawn, despawn and mode switching.

Spawn cells are drawn uniformly over the whole grid. Cells held by the
player or other enemies are not excluded, so entities may overlap.
"""

import logging
from dataclasses import replace

from pyrsistent import pvector

from grid_chase.components import Enemy, Motion, Position
from grid_chase.state import World
from grid_chase.types import MovementType
from grid_chase.utils.rng import SPAWN_SALT, world_rng

logger = logging.getLogger(__name__)


def random_cell(world: World) -> Position:
    """Uniformly random cell for the next spawned entity."""
    rng = world_rng(world, SPAWN_SALT, world.next_entity_id)
    return Position(rng.randrange(world.grid.cols), rng.randrange(world.grid.rows))


def add_enemy(world: World, movement_type: MovementType = MovementType.RANDOM) -> World:
    """Append a new enemy at a random cell.

    The enemy uses the world's ``move_speed`` and ``enemy_cooldown`` and
    starts with an expired cooldown, so it decides on its first tick.
    """
    entity_id = world.next_entity_id
    enemy = Enemy(
        entity_id=entity_id,
        motion=Motion(position=random_cell(world), speed=world.move_speed),
        movement_type=MovementType(movement_type),
        cooldown_max=world.enemy_cooldown,
    )
    logger.debug("Spawned enemy %d at %s", entity_id, enemy.motion.position)
    return replace(
        world,
        enemies=world.enemies.append(enemy),
        next_entity_id=entity_id + 1,
    )


def remove_enemy(world: World) -> World:
    """Remove the most recently added enemy; no-op when there is none."""
    if not world.enemies:
        logger.debug("No enemy to remove")
        return world
    removed = world.enemies[-1]
    logger.debug("Removed enemy %d", removed.entity_id)
    return replace(world, enemies=world.enemies.delete(len(world.enemies) - 1))


def set_movement_type(world: World, movement_type: MovementType) -> World:
    """Switch every current enemy to ``movement_type``.

    Enemies spawned afterwards keep the type they are spawned with.

    Raises:
        ValueError: If ``movement_type`` is not a known movement type.
    """
    movement_type = MovementType(movement_type)
    enemies = [replace(enemy, movement_type=movement_type) for enemy in world.enemies]
    logger.debug("Switched %d enemies to %s", len(enemies), movement_type)
    return replace(world, enemies=pvector(enemies))
