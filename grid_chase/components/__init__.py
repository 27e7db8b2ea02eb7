"""grid_chase.components
=======================

Aggregate import surface for the immutable dataclasses describing entities.

``Motion`` is the movement record embedded by both :class:`Player` and
:class:`Enemy`; the two entity kinds are separate records rather than
subclasses. Components carry no behavior beyond trivial derived properties;
see the ``systems`` package for transformation logic::

    from grid_chase.components import Motion, Position
"""

from .enemy import Enemy
from .health import Health
from .motion import Motion, Transition
from .player import Player
from .position import Position

__all__ = [
    "Enemy",
    "Health",
    "Motion",
    "Player",
    "Position",
    "Transition",
]
