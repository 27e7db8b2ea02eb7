"""Position component.

Immutable integer grid coordinates. Every entity's settled cell is a
``Position``; in-flight moves keep their endpoints as ``Position`` values in
:class:`grid_chase.components.motion.Transition`.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int
