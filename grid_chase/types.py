"""Common type aliases and enumerations.

``DirectionFn`` is the extension point used by the enemy system to plug in
movement policies (see :mod:`grid_chase.systems.enemy`).
"""

import random
from enum import StrEnum, auto
from typing import Callable, Tuple, TYPE_CHECKING


# Forward declaration for DirectionFn typing to avoid circular imports:
if TYPE_CHECKING:
    from grid_chase.components import Enemy, Position

EntityID = int

# (dx, dy) with each component in {-1, 0, 1}; y grows downward.
Direction = Tuple[int, int]

NO_DIRECTION: Direction = (0, 0)

DirectionFn = Callable[["Enemy", "Position", random.Random], Direction]


class MovementType(StrEnum):
    """Enemy direction-selection policy."""

    RANDOM = auto()
    CHASE = auto()
