"""Game configuration.

``GameConfig`` gathers every tunable of a game session. The defaults
reproduce the classic layout: a 1000x700 surface with 50 px cells, a 250 px
side panel and a 75 px top bar, which leaves a 15x12 grid.
"""

from dataclasses import dataclass
from typing import Optional

from grid_chase.components.enemy import DEFAULT_COOLDOWN_MAX
from grid_chase.components.motion import DEFAULT_MOVE_SPEED
from grid_chase.components.player import DEFAULT_PLAYER_HEALTH
from grid_chase.grid import (
    DEFAULT_GRID_SIZE,
    DEFAULT_MARGIN_RIGHT,
    DEFAULT_MARGIN_TOP,
    GridSpec,
)
from grid_chase.state import World, create_world
from grid_chase.systems.spawn import add_enemy
from grid_chase.types import MovementType

DEFAULT_CANVAS_WIDTH = 1000
DEFAULT_CANVAS_HEIGHT = 700


@dataclass(frozen=True)
class GameConfig:
    width: int = DEFAULT_CANVAS_WIDTH
    height: int = DEFAULT_CANVAS_HEIGHT
    grid_size: int = DEFAULT_GRID_SIZE
    margin_right: int = DEFAULT_MARGIN_RIGHT
    margin_top: int = DEFAULT_MARGIN_TOP
    move_speed: float = DEFAULT_MOVE_SPEED
    enemy_cooldown: int = DEFAULT_COOLDOWN_MAX
    movement_type: MovementType = MovementType.RANDOM
    num_enemies: int = 0
    player_health: int = DEFAULT_PLAYER_HEALTH
    seed: Optional[int] = None

    def grid(self) -> GridSpec:
        return GridSpec.from_surface(
            self.width,
            self.height,
            grid_size=self.grid_size,
            margin_right=self.margin_right,
            margin_top=self.margin_top,
        )


def generate(config: GameConfig) -> World:
    """Build the initial world for ``config``, spawning its enemies."""
    world = create_world(
        config.grid(),
        seed=config.seed,
        move_speed=config.move_speed,
        enemy_cooldown=config.enemy_cooldown,
        player_health=config.player_health,
    )
    for _ in range(config.num_enemies):
        world = add_enemy(world, movement_type=config.movement_type)
    return world
