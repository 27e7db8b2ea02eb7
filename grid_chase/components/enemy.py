"""Enemy component.

Enemies pick their own directions. After every decision (whether or not the
move could start) they wait ``cooldown_max`` idle ticks before deciding again.
"""

from dataclasses import dataclass

from grid_chase.components.motion import Motion
from grid_chase.types import EntityID, MovementType

DEFAULT_COOLDOWN_MAX = 60


@dataclass(frozen=True)
class Enemy:
    """Autonomous entity.

    Attributes:
        entity_id: Stable id, unique within a world; salts the enemy's RNG.
        motion: Movement record.
        movement_type: Direction policy (random walk or chase).
        cooldown: Remaining idle ticks before the next decision.
        cooldown_max: Value ``cooldown`` is reset to after each decision.
    """

    entity_id: EntityID
    motion: Motion
    movement_type: MovementType = MovementType.RANDOM
    cooldown: int = 0
    cooldown_max: int = DEFAULT_COOLDOWN_MAX
