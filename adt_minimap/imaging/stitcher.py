"""Stitches annotated tiles into one overview image."""
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Tuple
import logging

import numpy as np
from PIL import Image

from ..constants import TILE_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bounds:
    """Bounding box of present tiles; max values are exclusive."""
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y


def compute_bounds(presence: np.ndarray) -> Optional[Bounds]:
    """Bounds of all True cells of a ``presence[x, y]`` grid, or None if empty."""
    coords = np.argwhere(presence)
    if coords.size == 0:
        return None
    min_x, min_y = coords.min(axis=0)
    max_x, max_y = coords.max(axis=0) + 1
    return Bounds(int(min_x), int(min_y), int(max_x), int(max_y))


class MapStitcher:
    """Assembles tile rasters on a canvas covering the present tiles."""

    def __init__(self, tile_size: int = TILE_SIZE):
        self.tile_size = tile_size

    def canvas_size(self, bounds: Bounds) -> Tuple[int, int]:
        return bounds.width * self.tile_size, bounds.height * self.tile_size

    def stitch(self, tiles: Dict[Tuple[int, int], Image.Image],
               presence: np.ndarray) -> Optional[Image.Image]:
        """Paste every present tile at its offset within the bounding box.

        Returns:
            The composite image, or None if no tile is present
        """
        bounds = compute_bounds(presence)
        if bounds is None:
            return None

        canvas = Image.new('RGBA', self.canvas_size(bounds), (0, 0, 0, 0))
        logger.debug(f"Canvas {canvas.width}x{canvas.height} for bounds {bounds}")

        for x in range(bounds.min_x, bounds.max_x):
            for y in range(bounds.min_y, bounds.max_y):
                if not presence[x, y]:
                    continue
                offset = ((x - bounds.min_x) * self.tile_size, (y - bounds.min_y) * self.tile_size)
                canvas.paste(tiles[(x, y)], offset)

        return canvas

    def save(self, canvas: Image.Image, output_file: Path) -> Path:
        """Write the canvas as PNG, replacing an existing file."""
        output_file = Path(output_file)
        if output_file.exists():
            output_file.unlink()
        canvas.save(output_file, 'PNG')
        logger.info(f"Wrote {output_file}")
        return output_file
