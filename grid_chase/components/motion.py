"""Movement component.

``Motion`` is the movement record shared by the player and every enemy. An
entity is *idle* when ``transition`` is ``None`` and *moving* otherwise. The
settled ``position`` only changes when a transition completes; see
:mod:`grid_chase.systems.motion` for the functions that drive it.
"""

from dataclasses import dataclass
from typing import Optional

from grid_chase.components.position import Position
from grid_chase.types import Direction, NO_DIRECTION

DEFAULT_MOVE_SPEED = 0.1


@dataclass(frozen=True)
class Transition:
    """An in-flight move between two adjacent cells.

    Attributes:
        source: Cell the move started from.
        target: Cell the move ends on.
        progress: Fraction of the crossing done, in ``[0, 1]``.
    """

    source: Position
    target: Position
    progress: float = 0.0


@dataclass(frozen=True)
class Motion:
    """Discrete cell movement with interpolated transitions.

    Attributes:
        position: Current settled cell.
        direction: Requested but not yet committed direction ``(dx, dy)``.
        transition: In-flight move, ``None`` while idle.
        speed: Progress added per tick (fraction of a cell crossed).
    """

    position: Position
    direction: Direction = NO_DIRECTION
    transition: Optional[Transition] = None
    speed: float = DEFAULT_MOVE_SPEED

    def __post_init__(self) -> None:
        if self.speed <= 0:
            raise ValueError(f"Move speed must be positive, got {self.speed}")

    @property
    def moving(self) -> bool:
        return self.transition is not None
