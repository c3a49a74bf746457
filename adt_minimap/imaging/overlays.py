"""Diagnostic overlays painted onto minimap tiles.

All overlays are drawn onto a transparent RGBA layer of the target region
and alpha-composited onto the tile, so several of them can stack.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple
import logging

from PIL import Image, ImageDraw

from ..constants import SUBTILE_GRID_SIZE, TILE_SIZE

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int, int]
Box = Tuple[int, int, int, int]


class HatchStyle(Enum):
    """Line patterns for hatched fills."""
    SOLID = 'solid'
    DIAGONAL_CROSS = 'diagonal_cross'
    GRID = 'grid'
    FORWARD_DIAGONAL = 'forward_diagonal'


@dataclass(frozen=True)
class Hatch:
    """A hatched fill: pattern lines in ``fore`` over a ``back`` fill."""
    style: HatchStyle
    fore: Color
    back: Color = (0, 0, 0, 0)
    spacing: int = 4

    def render(self, width: int, height: int) -> Image.Image:
        if self.style is HatchStyle.SOLID:
            return Image.new('RGBA', (width, height), self.fore)

        layer = Image.new('RGBA', (width, height), self.back)
        draw = ImageDraw.Draw(layer)
        span = width + height
        # line origins on the top row, always including x = 0
        origins = [i * self.spacing for i in range(-(span // self.spacing) - 1, span // self.spacing + 2)]

        if self.style in (HatchStyle.DIAGONAL_CROSS, HatchStyle.FORWARD_DIAGONAL):
            for k in origins:
                draw.line([(k, 0), (k + span, span)], fill=self.fore)
        if self.style is HatchStyle.DIAGONAL_CROSS:
            for k in origins:
                draw.line([(k, 0), (k - span, span)], fill=self.fore)
        if self.style is HatchStyle.GRID:
            for x in range(0, width, self.spacing):
                draw.line([(x, 0), (x, height - 1)], fill=self.fore)
            for y in range(0, height, self.spacing):
                draw.line([(0, y), (width - 1, y)], fill=self.fore)

        return layer


class Edge(Enum):
    """Tile edges with the offset of the neighbouring tile across them."""
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    TOP = (0, -1)
    BOTTOM = (0, 1)

    @property
    def offset(self) -> Tuple[int, int]:
        return self.value

    def box(self, side: int, width: int) -> Box:
        """Pixel box of a ``width`` thick band along this edge."""
        if self is Edge.LEFT:
            return (0, 0, width, side)
        if self is Edge.RIGHT:
            return (side - width, 0, side, side)
        if self is Edge.TOP:
            return (0, 0, side, width)
        return (0, side - width, side, side)


IMPASSABLE_HATCH = Hatch(HatchStyle.DIAGONAL_CROSS, fore=(255, 255, 0, 127), back=(255, 0, 0, 127))
UNKNOWN_AREA_HATCH = Hatch(HatchStyle.GRID, fore=(0, 255, 255, 160), back=(0, 0, 255, 64), spacing=3)
MISSING_TERRAIN_HATCH = Hatch(HatchStyle.FORWARD_DIAGONAL, fore=(255, 0, 255, 200), back=(64, 0, 64, 96))
UNREFERENCED_FILL = Hatch(HatchStyle.SOLID, fore=(255, 128, 0, 96))
BOUNDARY_COLOR: Color = (255, 255, 255, 255)


@dataclass(frozen=True)
class RenderOptions:
    """Tile size and overlay appearance."""
    tile_size: int = TILE_SIZE
    boundary_width: int = 4
    frame_width: int = 16
    boundary_color: Color = BOUNDARY_COLOR
    impassable: Hatch = field(default=IMPASSABLE_HATCH)
    unknown_area: Hatch = field(default=UNKNOWN_AREA_HATCH)
    missing_terrain: Hatch = field(default=MISSING_TERRAIN_HATCH)
    unreferenced: Hatch = field(default=UNREFERENCED_FILL)


def fill_box(tile: Image.Image, box: Box, hatch: Hatch) -> None:
    """Composite a hatched fill over ``box`` of the tile, in place."""
    left, top, right, bottom = box
    if right <= left or bottom <= top:
        return
    tile.alpha_composite(hatch.render(right - left, bottom - top), dest=(left, top))


def subtile_box(side: int, sub_x: int, sub_y: int) -> Box:
    """Pixel box of MCNK (sub_x, sub_y) in a tile of ``side`` pixels."""
    return (
        sub_x * side // SUBTILE_GRID_SIZE,
        sub_y * side // SUBTILE_GRID_SIZE,
        (sub_x + 1) * side // SUBTILE_GRID_SIZE,
        (sub_y + 1) * side // SUBTILE_GRID_SIZE,
    )


def fill_subtile(tile: Image.Image, sub_x: int, sub_y: int, hatch: Hatch) -> bool:
    """Hatch one MCNK region. Returns False for indices outside the 16x16 grid."""
    if not (0 <= sub_x < SUBTILE_GRID_SIZE and 0 <= sub_y < SUBTILE_GRID_SIZE):
        logger.warning(f"MCNK index ({sub_x}, {sub_y}) outside of tile, not drawn")
        return False
    fill_box(tile, subtile_box(tile.width, sub_x, sub_y), hatch)
    return True


def frame_tile(tile: Image.Image, hatch: Hatch, width: int) -> None:
    """Hatch a band of ``width`` pixels around the whole tile."""
    side = tile.width
    for edge in Edge:
        # left and right bands skip the corners the top and bottom bands cover
        left, top, right, bottom = edge.box(side, width)
        if edge in (Edge.LEFT, Edge.RIGHT):
            top, bottom = width, side - width
        fill_box(tile, (left, top, right, bottom), hatch)


def draw_edge(tile: Image.Image, edge: Edge, color: Color, width: int) -> None:
    """Draw a solid line of ``width`` pixels along one tile edge."""
    left, top, right, bottom = edge.box(tile.width, width)
    ImageDraw.Draw(tile).rectangle([left, top, right - 1, bottom - 1], fill=color)
