"""Discrete movement with interpolated transitions.

Pure functions over :class:`grid_chase.components.Motion`. Each takes a
``Motion`` and returns a new one; nothing is mutated in place.

State machine:

* ``request_move`` turns an idle record into a moving one when the target
  cell exists. Requests while moving, toward ``(0, 0)`` or off the grid are
  dropped silently.
* ``advance`` adds ``speed`` to the progress of the in-flight transition and
  commits the target cell once progress reaches 1.
* ``stop`` only clears the pending direction; a started move always
  completes, so entities never snap between cells.
"""

import logging
from dataclasses import replace
from typing import Tuple

from grid_chase.components import Motion, Position, Transition
from grid_chase.grid import GridSpec
from grid_chase.types import Direction, NO_DIRECTION

logger = logging.getLogger(__name__)

# Float accumulation of speed (e.g. ten additions of 0.1) lands just short of
# 1.0; anything within EPS counts as arrived.
EPS = 1e-9


def validate_direction(direction: Direction) -> Direction:
    """Return ``direction`` as an ``(int, int)`` tuple or raise ``ValueError``."""
    dx, dy = direction
    if dx not in (-1, 0, 1) or dy not in (-1, 0, 1):
        raise ValueError(f"Invalid direction: {direction}")
    return (int(dx), int(dy))


def set_direction(motion: Motion, direction: Direction) -> Motion:
    """Store a pending direction without starting a move."""
    return replace(motion, direction=validate_direction(direction))


def stop(motion: Motion) -> Motion:
    """Clear the pending direction. An in-flight transition is untouched."""
    return replace(motion, direction=NO_DIRECTION)


def request_move(motion: Motion, direction: Direction, grid: GridSpec) -> Motion:
    """Start a transition toward ``position + direction`` if allowed.

    Args:
        motion (Motion): Current movement record.
        direction (Direction): Step to take, each component in ``{-1, 0, 1}``.
        grid (GridSpec): Bounds the target cell must lie in.

    Returns:
        Motion: A moving record on success, otherwise ``motion`` unchanged.

    Raises:
        ValueError: If a direction component is outside ``{-1, 0, 1}``.
    """
    dx, dy = validate_direction(direction)
    if motion.moving:
        return motion
    if (dx, dy) == NO_DIRECTION:
        return motion

    target = Position(motion.position.x + dx, motion.position.y + dy)
    if not grid.is_in_bounds(target):
        logger.debug("Move from %s to %s is out of bounds", motion.position, target)
        return motion

    return replace(
        motion,
        transition=Transition(source=motion.position, target=target, progress=0.0),
    )


def advance(motion: Motion) -> Motion:
    """Advance the in-flight transition by one tick."""
    transition = motion.transition
    if transition is None:
        return motion

    progress = transition.progress + motion.speed
    if progress >= 1.0 - EPS:
        return replace(motion, position=transition.target, transition=None)
    return replace(motion, transition=replace(transition, progress=progress))


def progress_of(motion: Motion) -> float:
    """Progress of the current transition; 0 while idle."""
    return motion.transition.progress if motion.transition is not None else 0.0


def cell_position(motion: Motion) -> Tuple[float, float]:
    """Fractional ``(col, row)`` linearly interpolated along the transition."""
    transition = motion.transition
    if transition is None:
        return float(motion.position.x), float(motion.position.y)
    t = transition.progress
    source, target = transition.source, transition.target
    return (
        source.x + (target.x - source.x) * t,
        source.y + (target.y - source.y) * t,
    )


def pixel_position(motion: Motion, grid: GridSpec) -> Tuple[float, float]:
    """Pixel center the entity should be drawn at this tick."""
    col, row = cell_position(motion)
    return grid.cell_center(col, row)
