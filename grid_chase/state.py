"""Core immutable ``World`` dataclass.

This module defines the frozen :class:`World` object that represents the
whole game at a single tick. Systems are pure functions that take a previous
``World`` and return a *new* one; nothing is mutated in place. This keeps
ticks deterministic for a given seed and makes every rule testable in
isolation.

Design notes:

* The enemy collection is a persistent vector (``pyrsistent.PVector``) kept
  in spawn order. The last element is the most recently spawned enemy and the
  first one removed.
* ``turn`` counts completed ticks and, together with ``seed`` and an enemy's
  id, salts every random draw (see :mod:`grid_chase.utils.rng`).
* ``next_entity_id`` is the world's own id counter; ids are never recycled.
* ``move_speed`` and ``enemy_cooldown`` are the settings given to enemies
  spawned into this world.

See :mod:`grid_chase.step` for how ``tick`` orchestrates the systems.
"""

import random
from dataclasses import dataclass
from typing import Optional

from pyrsistent import pvector
from pyrsistent.typing import PVector

from grid_chase.components import Enemy, Health, Motion, Player, Position
from grid_chase.components.enemy import DEFAULT_COOLDOWN_MAX
from grid_chase.components.motion import DEFAULT_MOVE_SPEED
from grid_chase.components.player import DEFAULT_PLAYER_HEALTH
from grid_chase.grid import GridSpec
from grid_chase.types import EntityID


@dataclass(frozen=True)
class World:
    """Immutable game state.

    Attributes:
        grid (GridSpec): Geometry shared by all entities.
        player (Player): The input-driven entity.
        enemies (PVector[Enemy]): Enemies in spawn order.
        turn (int): Ticks elapsed (0-based).
        seed (int | None): Base RNG seed for spawns and random walks.
        next_entity_id (EntityID): Id handed to the next spawned enemy.
        move_speed (float): Move speed of newly spawned enemies.
        enemy_cooldown (int): Cooldown of newly spawned enemies, in ticks.
    """

    grid: GridSpec
    player: Player
    enemies: PVector[Enemy] = pvector()
    turn: int = 0
    seed: Optional[int] = None
    next_entity_id: EntityID = 0
    move_speed: float = DEFAULT_MOVE_SPEED
    enemy_cooldown: int = DEFAULT_COOLDOWN_MAX


def create_world(
    grid: GridSpec,
    seed: Optional[int] = None,
    move_speed: float = DEFAULT_MOVE_SPEED,
    enemy_cooldown: int = DEFAULT_COOLDOWN_MAX,
    player_health: int = DEFAULT_PLAYER_HEALTH,
) -> World:
    """Create a world with the player on the middle cell and no enemies.

    Args:
        grid (GridSpec): Playable grid.
        seed (int | None): Base RNG seed. A fresh one is drawn when omitted.
        move_speed (float): Per-tick progress of every entity's moves.
        enemy_cooldown (int): Idle ticks enemies wait between decisions.
        player_health (int): Starting and maximum player health.

    Returns:
        World: Fresh world at turn 0.

    Raises:
        ValueError: If the grid has no cell to place the player on, or the
            cooldown is negative.
    """
    if grid.cell_count == 0:
        raise ValueError(
            f"Grid {grid.cols}x{grid.rows} has no cell to place the player on"
        )
    if enemy_cooldown < 0:
        raise ValueError(f"Enemy cooldown must be non-negative, got {enemy_cooldown}")
    if seed is None:
        seed = random.randrange(2**31 - 1)
    start = Position(grid.cols // 2, grid.rows // 2)
    player = Player(
        motion=Motion(position=start, speed=move_speed),
        health=Health(health=player_health, max_health=player_health),
    )
    return World(
        grid=grid,
        player=player,
        seed=seed,
        move_speed=move_speed,
        enemy_cooldown=enemy_cooldown,
    )
