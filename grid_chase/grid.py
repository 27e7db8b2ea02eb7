"""Grid geometry.

``GridSpec`` maps cells to pixels. A cell ``(x, y)`` occupies the square
whose top-left corner is ``origin + (x, y) * grid_size``; entities are drawn
at cell centers. Fractional cell coordinates (from interpolated moves) map
linearly, which is what makes transitions look smooth.
"""

from dataclasses import dataclass
from typing import Tuple

from grid_chase.components import Position

DEFAULT_GRID_SIZE = 50
DEFAULT_MARGIN_RIGHT = 250
DEFAULT_MARGIN_TOP = 75


@dataclass(frozen=True)
class GridSpec:
    """Immutable grid geometry shared by every entity.

    Attributes:
        grid_size: Size of one square cell in pixels.
        cols: Number of columns in the playable region.
        rows: Number of rows in the playable region.
        top_left_x: X pixel offset where the region starts.
        top_left_y: Y pixel offset where the region starts.
    """

    grid_size: int
    cols: int
    rows: int
    top_left_x: int = 0
    top_left_y: int = 0

    def __post_init__(self) -> None:
        if self.grid_size <= 0:
            raise ValueError(f"Grid size must be positive, got {self.grid_size}")
        if self.cols < 0 or self.rows < 0:
            raise ValueError(
                f"Grid dimensions must be non-negative, got {self.cols}x{self.rows}"
            )

    @classmethod
    def from_surface(
        cls,
        width: int,
        height: int,
        grid_size: int = DEFAULT_GRID_SIZE,
        margin_right: int = DEFAULT_MARGIN_RIGHT,
        margin_top: int = DEFAULT_MARGIN_TOP,
    ) -> "GridSpec":
        """Fit as many whole cells as possible into a drawing surface.

        The region right of ``width - margin_right`` and above ``margin_top``
        is reserved for panels, so the grid starts at ``(0, margin_top)``.
        """
        region_width = max(0, width - margin_right)
        region_height = max(0, height - margin_top)
        return cls(
            grid_size=grid_size,
            cols=region_width // grid_size,
            rows=region_height // grid_size,
            top_left_x=0,
            top_left_y=margin_top,
        )

    @property
    def cell_count(self) -> int:
        return self.cols * self.rows

    def is_in_bounds(self, pos: Position) -> bool:
        """Return True if ``pos`` lies within the grid rectangle."""
        return 0 <= pos.x < self.cols and 0 <= pos.y < self.rows

    def cell_origin(self, pos: Position) -> Tuple[int, int]:
        """Top-left pixel of a cell."""
        return (
            self.top_left_x + pos.x * self.grid_size,
            self.top_left_y + pos.y * self.grid_size,
        )

    def cell_center(self, col: float, row: float) -> Tuple[float, float]:
        """Pixel center of a (possibly fractional) cell coordinate."""
        return (
            self.top_left_x + (col + 0.5) * self.grid_size,
            self.top_left_y + (row + 0.5) * self.grid_size,
        )


def cell_label(pos: Position) -> str:
    """Spreadsheet-style cell name: row letter then 1-based column (``A1``)."""
    return f"{chr(ord('A') + pos.y)}{pos.x + 1}"
