"""World invariant predicates."""

from grid_chase.components import Motion
from grid_chase.grid import GridSpec
from grid_chase.state import World


def is_valid_motion(motion: Motion, grid: GridSpec) -> bool:
    """Settled cell in bounds and transition (if any) well formed."""
    if not grid.is_in_bounds(motion.position):
        return False
    transition = motion.transition
    if transition is None:
        return True
    return (
        0.0 <= transition.progress <= 1.0
        and transition.source == motion.position
        and grid.is_in_bounds(transition.target)
    )


def is_valid_world(world: World) -> bool:
    """Return True if every entity satisfies the movement invariants."""
    motions = [world.player.motion] + [enemy.motion for enemy in world.enemies]
    return all(is_valid_motion(motion, world.grid) for motion in motions)
