import pytest

from grid_chase.components import Position
from grid_chase.grid import GridSpec, cell_label


def test_from_surface_defaults_match_classic_layout() -> None:
    grid = GridSpec.from_surface(1000, 700)
    assert grid == GridSpec(grid_size=50, cols=15, rows=12, top_left_x=0, top_left_y=75)


def test_from_surface_floors_partial_cells() -> None:
    grid = GridSpec.from_surface(
        340, 130, grid_size=30, margin_right=100, margin_top=10
    )
    assert (grid.cols, grid.rows) == (8, 4)
    assert (grid.top_left_x, grid.top_left_y) == (0, 10)


def test_from_surface_smaller_than_margins_is_empty() -> None:
    grid = GridSpec.from_surface(200, 50)
    assert grid.cell_count == 0


@pytest.mark.parametrize(
    "pos, inside",
    [
        ((0, 0), True),
        ((14, 11), True),
        ((15, 0), False),
        ((0, 12), False),
        ((-1, 3), False),
        ((3, -1), False),
    ],
)
def test_is_in_bounds(pos: tuple[int, int], inside: bool) -> None:
    grid = GridSpec(grid_size=50, cols=15, rows=12)
    assert grid.is_in_bounds(Position(*pos)) is inside


def test_cell_geometry() -> None:
    grid = GridSpec(grid_size=50, cols=15, rows=12, top_left_x=10, top_left_y=75)
    assert grid.cell_origin(Position(2, 1)) == (110, 125)
    assert grid.cell_center(2, 1) == (135.0, 150.0)
    assert grid.cell_center(2.5, 1) == (160.0, 150.0)


@pytest.mark.parametrize(
    "pos, label",
    [
        ((0, 0), "A1"),
        ((2, 1), "B3"),
        ((14, 11), "L15"),
    ],
)
def test_cell_label(pos: tuple[int, int], label: str) -> None:
    assert cell_label(Position(*pos)) == label


@pytest.mark.parametrize(
    "grid_size, cols, rows",
    [
        (0, 5, 5),
        (-10, 5, 5),
        (50, -1, 5),
        (50, 5, -1),
    ],
)
def test_invalid_grid_raises(grid_size: int, cols: int, rows: int) -> None:
    with pytest.raises(ValueError):
        GridSpec(grid_size=grid_size, cols=cols, rows=rows)


def test_empty_grid_is_allowed() -> None:
    assert GridSpec(grid_size=50, cols=0, rows=0).cell_count == 0
