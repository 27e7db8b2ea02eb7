"""Action enumerations.

Defines the discrete input vocabulary (:class:`Action`), a stable integer
mapping for Gymnasium (:class:`GymAction`) and the keyboard bindings of the
game.

``MOVE_ACTIONS`` lists the four direction presses, in the same order as
``ACTION_DIRECTIONS`` maps them to unit steps on the grid.
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict, Optional

from grid_chase.types import Direction


class Action(StrEnum):
    """String enum of input events.

    Members:
        UP, DOWN, LEFT, RIGHT: Set the player's direction and attempt a move.
        STOP: Direction released; clears the pending direction only.
        ADD_ENEMY: Spawn one enemy at a random cell.
        REMOVE_ENEMY: Remove the most recently spawned enemy.
        CHASE: Switch all current enemies to the chase policy.
        RANDOM: Switch all current enemies to the random walk.
        WAIT: No input this tick.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    STOP = auto()
    ADD_ENEMY = auto()
    REMOVE_ENEMY = auto()
    CHASE = auto()
    RANDOM = auto()
    WAIT = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]

ACTION_DIRECTIONS: Dict[Action, Direction] = {
    Action.UP: (0, -1),
    Action.DOWN: (0, 1),
    Action.LEFT: (-1, 0),
    Action.RIGHT: (1, 0),
}


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    UP = 0
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    STOP = auto()
    ADD_ENEMY = auto()
    REMOVE_ENEMY = auto()
    CHASE = auto()
    RANDOM = auto()
    WAIT = auto()


# "+" shares a key with "=" on many layouts.
KEY_BINDINGS: Dict[str, Action] = {
    "ArrowUp": Action.UP,
    "ArrowDown": Action.DOWN,
    "ArrowLeft": Action.LEFT,
    "ArrowRight": Action.RIGHT,
    "w": Action.UP,
    "s": Action.DOWN,
    "a": Action.LEFT,
    "d": Action.RIGHT,
    "+": Action.ADD_ENEMY,
    "=": Action.ADD_ENEMY,
    "-": Action.REMOVE_ENEMY,
    "c": Action.CHASE,
    "r": Action.RANDOM,
}


def key_to_action(key: str) -> Optional[Action]:
    """Map a key name (as reported by a keydown event) to an ``Action``."""
    return KEY_BINDINGS.get(key)
