import pytest

from grid_chase.components import Motion, Position, Transition
from grid_chase.systems.motion import (
    advance,
    cell_position,
    pixel_position,
    progress_of,
    request_move,
    set_direction,
    stop,
)
from tests.test_utils import advance_n, make_grid, make_motion


def test_full_move_completes_after_ten_ticks() -> None:
    grid = make_grid()
    motion = request_move(make_motion((5, 5), speed=0.1), (1, 0), grid)
    assert motion.moving

    motion = advance_n(motion, 9)
    assert motion.moving
    assert motion.position == Position(5, 5)

    motion = advance(motion)
    assert not motion.moving
    assert motion.transition is None
    assert motion.position == Position(6, 5)


@pytest.mark.parametrize(
    "speed, ticks",
    [
        (1.0, 1),
        (0.5, 2),
        (0.3, 4),
        (0.25, 4),
        (0.1, 10),
    ],
)
def test_move_takes_ceil_inverse_speed_ticks(speed: float, ticks: int) -> None:
    grid = make_grid()
    motion = request_move(make_motion((5, 5), speed=speed), (0, 1), grid)
    motion = advance_n(motion, ticks - 1)
    assert motion.moving
    motion = advance(motion)
    assert not motion.moving
    assert motion.position == Position(5, 6)


def test_pixel_position_interpolates_between_cell_centers() -> None:
    grid = make_grid(grid_size=50)
    motion = make_motion((5, 5), speed=0.1)
    assert pixel_position(motion, grid) == (275.0, 275.0)

    motion = request_move(motion, (1, 0), grid)
    assert pixel_position(motion, grid) == (275.0, 275.0)

    motion = advance_n(motion, 5)
    assert progress_of(motion) == pytest.approx(0.5)
    x, y = pixel_position(motion, grid)
    assert x == pytest.approx(300.0)
    assert y == pytest.approx(275.0)

    motion = advance_n(motion, 5)
    assert pixel_position(motion, grid) == (325.0, 275.0)


def test_pixel_position_uses_grid_origin() -> None:
    grid = make_grid(grid_size=50, top_left=(0, 75))
    assert pixel_position(make_motion((0, 0)), grid) == (25.0, 100.0)


def test_cell_position_idle_is_settled_cell() -> None:
    assert cell_position(make_motion((3, 4))) == (3.0, 4.0)
    assert progress_of(make_motion((3, 4))) == 0.0


@pytest.mark.parametrize(
    "start, direction",
    [
        ((0, 0), (-1, 0)),
        ((0, 0), (0, -1)),
        ((19, 19), (1, 0)),
        ((19, 19), (0, 1)),
        ((19, 0), (1, -1)),
    ],
)
def test_out_of_bounds_request_is_dropped(
    start: tuple[int, int], direction: tuple[int, int]
) -> None:
    grid = make_grid(cols=20, rows=20)
    motion = make_motion(start)
    moved = request_move(motion, direction, grid)
    assert moved == motion
    assert not moved.moving
    assert moved.position == Position(*start)


def test_zero_direction_does_not_move() -> None:
    grid = make_grid()
    motion = make_motion((5, 5))
    assert request_move(motion, (0, 0), grid) == motion


def test_request_while_moving_keeps_transition() -> None:
    grid = make_grid()
    motion = advance_n(request_move(make_motion((5, 5)), (1, 0), grid), 3)
    transition = motion.transition

    again = request_move(motion, (0, 1), grid)
    assert again.transition == transition
    assert again.transition == Transition(
        source=Position(5, 5), target=Position(6, 5), progress=transition.progress
    )


def test_stop_clears_direction_but_not_transition() -> None:
    grid = make_grid()
    motion = set_direction(make_motion((5, 5)), (1, 0))
    motion = request_move(motion, motion.direction, grid)
    motion = advance_n(motion, 4)
    transition = motion.transition

    stopped = stop(motion)
    assert stopped.direction == (0, 0)
    assert stopped.transition == transition

    stopped = advance_n(stopped, 6)
    assert not stopped.moving
    assert stopped.position == Position(6, 5)


def test_advance_idle_is_noop() -> None:
    motion = make_motion((2, 2))
    assert advance(motion) is motion


def test_diagonal_move_is_allowed() -> None:
    grid = make_grid()
    motion = advance_n(request_move(make_motion((5, 5), speed=0.5), (1, 1), grid), 2)
    assert motion.position == Position(6, 6)


@pytest.mark.parametrize("direction", [(2, 0), (0, -2), (1, 5)])
def test_invalid_direction_raises(direction: tuple[int, int]) -> None:
    grid = make_grid()
    with pytest.raises(ValueError):
        request_move(make_motion((5, 5)), direction, grid)
    with pytest.raises(ValueError):
        set_direction(make_motion((5, 5)), direction)


@pytest.mark.parametrize("speed", [0.0, -0.1])
def test_non_positive_speed_raises(speed: float) -> None:
    with pytest.raises(ValueError):
        Motion(position=Position(0, 0), speed=speed)


def test_progress_stays_in_unit_interval() -> None:
    grid = make_grid()
    motion = request_move(make_motion((5, 5), speed=0.3), (-1, 0), grid)
    for _ in range(5):
        assert 0.0 <= progress_of(motion) <= 1.0
        motion = advance(motion)
