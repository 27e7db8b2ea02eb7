from dataclasses import dataclass

from grid_chase.components.health import Health
from grid_chase.components.motion import Motion

DEFAULT_PLAYER_HEALTH = 5


@dataclass(frozen=True)
class Player:
    """The input-driven entity.

    Attributes:
        motion: Movement record; direction is set from external input.
        health: Hit points.
        score: Accumulated score.
    """

    motion: Motion
    health: Health = Health(
        health=DEFAULT_PLAYER_HEALTH, max_health=DEFAULT_PLAYER_HEALTH
    )
    score: int = 0
