"""Player input and movement system.

Direction and move commit are separate operations so that they can be
driven by different input events: a key press sets the direction and then
attempts the move, a key release only clears the direction.
"""

from dataclasses import replace

from grid_chase.state import World
from grid_chase.systems.motion import advance, request_move, set_direction, stop
from grid_chase.types import Direction


def set_player_direction(world: World, direction: Direction) -> World:
    """Store the player's pending direction."""
    player = world.player
    motion = set_direction(player.motion, direction)
    return replace(world, player=replace(player, motion=motion))


def start_player_move(world: World) -> World:
    """Attempt a move in the pending direction (no-op if moving or blocked)."""
    player = world.player
    motion = request_move(player.motion, player.motion.direction, world.grid)
    if motion is player.motion:
        return world
    return replace(world, player=replace(player, motion=motion))


def stop_player(world: World) -> World:
    """Clear the pending direction; a move already underway still completes."""
    player = world.player
    return replace(world, player=replace(player, motion=stop(player.motion)))


def player_system(world: World) -> World:
    """Advance the player's transition by one tick."""
    player = world.player
    motion = advance(player.motion)
    if motion is player.motion:
        return world
    return replace(world, player=replace(player, motion=motion))
