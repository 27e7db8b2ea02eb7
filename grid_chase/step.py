"""World reducer and tick orchestration.

Two entry points drive a game:

* :func:`apply_action` folds one discrete input event into the world. It
  never advances time.
* :func:`tick` advances time by one frame: the player's transition first,
  then every enemy in spawn order, then the turn counter.

Both are pure and return a *new* :class:`grid_chase.state.World`. The caller
owns the frame loop; nothing here schedules or sleeps.
"""

from dataclasses import replace

from grid_chase.actions import ACTION_DIRECTIONS, MOVE_ACTIONS, Action
from grid_chase.state import World
from grid_chase.systems.enemy import enemy_system
from grid_chase.systems.player import (
    player_system,
    set_player_direction,
    start_player_move,
    stop_player,
)
from grid_chase.systems.spawn import add_enemy, remove_enemy, set_movement_type
from grid_chase.types import MovementType


def tick(world: World) -> World:
    """Advance the world by one frame.

    Enemies chase the player's settled cell as it stands after the player's
    own advance this tick.
    """
    world = player_system(world)
    world = enemy_system(world)
    return replace(world, turn=world.turn + 1)


def apply_action(world: World, action: Action) -> World:
    """Apply one input event.

    A direction pressed while the player is mid-move is ignored entirely, so
    the pending direction of a move underway is never overwritten.

    Args:
        world (World): Current world.
        action (Action): Input event.

    Returns:
        World: Updated world (possibly the same object for no-op events).

    Raises:
        ValueError: If the action is not recognized.
    """
    if action in MOVE_ACTIONS:
        return _step_move(world, action)
    if action == Action.STOP:
        return stop_player(world)
    if action == Action.ADD_ENEMY:
        return add_enemy(world)
    if action == Action.REMOVE_ENEMY:
        return remove_enemy(world)
    if action == Action.CHASE:
        return set_movement_type(world, MovementType.CHASE)
    if action == Action.RANDOM:
        return set_movement_type(world, MovementType.RANDOM)
    if action == Action.WAIT:
        return world
    raise ValueError(f"Action is not valid: {action}")


def step(world: World, action: Action) -> World:
    """Apply ``action`` then advance one tick."""
    return tick(apply_action(world, action))


def _step_move(world: World, action: Action) -> World:
    """Set the player's direction and immediately attempt the move."""
    if world.player.motion.moving:
        return world
    world = set_player_direction(world, ACTION_DIRECTIONS[action])
    return start_player_move(world)
