from grid_chase.components import Position
from grid_chase.systems.player import (
    player_system,
    set_player_direction,
    start_player_move,
    stop_player,
)
from tests.test_utils import make_world


def test_set_direction_does_not_start_move() -> None:
    world = set_player_direction(make_world(player_pos=(5, 5)), (0, -1))
    assert world.player.motion.direction == (0, -1)
    assert not world.player.motion.moving


def test_start_move_uses_pending_direction() -> None:
    world = set_player_direction(make_world(player_pos=(5, 5)), (0, -1))
    world = start_player_move(world)
    transition = world.player.motion.transition
    assert transition is not None
    assert transition.target == Position(5, 4)


def test_start_move_without_direction_is_noop() -> None:
    world = make_world(player_pos=(5, 5))
    assert start_player_move(world) is world


def test_start_move_against_edge_is_noop() -> None:
    world = set_player_direction(make_world(player_pos=(0, 3)), (-1, 0))
    assert start_player_move(world) is world


def test_stop_keeps_move_underway() -> None:
    world = set_player_direction(make_world(player_pos=(5, 5)), (1, 0))
    world = start_player_move(world)
    world = player_system(world)
    world = stop_player(world)
    assert world.player.motion.direction == (0, 0)
    assert world.player.motion.moving

    for _ in range(9):
        world = player_system(world)
    assert not world.player.motion.moving
    assert world.player.motion.position == Position(6, 5)


def test_player_system_idle_returns_same_world() -> None:
    world = make_world()
    assert player_system(world) is world


def test_player_defaults() -> None:
    player = make_world().player
    assert player.health.health == player.health.max_health == 5
    assert player.score == 0
