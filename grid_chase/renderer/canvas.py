from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from grid_chase.components import Position
from grid_chase.config import DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH
from grid_chase.grid import GridSpec, cell_label
from grid_chase.state import World
from grid_chase.systems.motion import pixel_position

Color = Tuple[int, int, int, int]

BACKGROUND_COLOR: Color = (0, 0, 0, 255)
GRID_COLOR: Color = (255, 0, 0, 255)
LABEL_COLOR: Color = (255, 255, 255, 255)
PLAYER_COLOR: Color = (0, 0, 255, 255)
ENEMY_COLOR: Color = (0, 128, 0, 255)

DEFAULT_ENTITY_RADIUS = 15
DEFAULT_FONT_SIZE = 16


@dataclass(frozen=True)
class Palette:
    background: Color = BACKGROUND_COLOR
    grid: Color = GRID_COLOR
    label: Color = LABEL_COLOR
    player: Color = PLAYER_COLOR
    enemy: Color = ENEMY_COLOR


DEFAULT_PALETTE = Palette()


@lru_cache(maxsize=16)
def load_font(size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    return ImageFont.load_default(size=size)


def draw_grid(
    draw: ImageDraw.ImageDraw,
    grid: GridSpec,
    palette: Palette,
    font: Optional[ImageFont.ImageFont | ImageFont.FreeTypeFont],
) -> None:
    """Stroke every cell and write its label at the cell center."""
    size = grid.grid_size
    for row in range(grid.rows):
        for col in range(grid.cols):
            x0, y0 = grid.cell_origin(Position(col, row))
            draw.rectangle((x0, y0, x0 + size, y0 + size), outline=palette.grid, width=1)
            if font is None:
                continue
            label = cell_label(Position(col, row))
            left, top, right, bottom = font.getbbox(label)
            text_x = x0 + size / 2 - (left + right) / 2
            text_y = y0 + size / 2 - (top + bottom) / 2
            draw.text((text_x, text_y), label, fill=palette.label, font=font)


def draw_circle(
    draw: ImageDraw.ImageDraw, center: Tuple[float, float], radius: int, color: Color
) -> None:
    x, y = center
    draw.ellipse((x - radius, y - radius, x + radius, y + radius), fill=color)


def render(
    world: World,
    width: int = DEFAULT_CANVAS_WIDTH,
    height: int = DEFAULT_CANVAS_HEIGHT,
    radius: int = DEFAULT_ENTITY_RADIUS,
    font_size: int = DEFAULT_FONT_SIZE,
    palette: Palette = DEFAULT_PALETTE,
    show_labels: bool = True,
) -> Image.Image:
    """
    Renders the world as a PIL Image: grid, cell labels, then the player and
    every enemy at their interpolated positions (enemies on top, in spawn order).
    """
    img = Image.new("RGBA", (width, height), palette.background)
    draw = ImageDraw.Draw(img)

    font = load_font(font_size) if show_labels else None
    draw_grid(draw, world.grid, palette, font)

    draw_circle(
        draw, pixel_position(world.player.motion, world.grid), radius, palette.player
    )
    for enemy in world.enemies:
        draw_circle(draw, pixel_position(enemy.motion, world.grid), radius, palette.enemy)

    return img


class CanvasRenderer:
    width: int
    height: int
    radius: int
    font_size: int
    palette: Palette
    show_labels: bool

    def __init__(
        self,
        width: int = DEFAULT_CANVAS_WIDTH,
        height: int = DEFAULT_CANVAS_HEIGHT,
        radius: int = DEFAULT_ENTITY_RADIUS,
        font_size: int = DEFAULT_FONT_SIZE,
        palette: Optional[Palette] = None,
        show_labels: bool = True,
    ):
        self.width = width
        self.height = height
        self.radius = radius
        self.font_size = font_size
        self.palette = palette or DEFAULT_PALETTE
        self.show_labels = show_labels

    def render(self, world: World) -> Image.Image:
        return render(
            world,
            width=self.width,
            height=self.height,
            radius=self.radius,
            font_size=self.font_size,
            palette=self.palette,
            show_labels=self.show_labels,
        )
