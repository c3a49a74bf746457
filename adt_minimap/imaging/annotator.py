"""Per-tile annotation.

For every tile coordinate the annotator cross-checks three sources: the
WDT tile table, the ADT file and the minimap image. Disagreements between
them are painted onto the tile.
"""
from dataclasses import dataclass
from typing import List, Optional
import logging

from PIL import Image

from ..errors import TileProcessingError
from ..parser import AdtFileParser, SubtileAnnotation, WorldDescriptor
from ..storage import Storage
from .overlays import Edge, RenderOptions, draw_edge, fill_box, fill_subtile, frame_tile
from .tile_provider import TileImageProvider

logger = logging.getLogger(__name__)


@dataclass
class TileResult:
    """Annotated raster of one tile plus what was found for it.

    ``raster`` is None for tiles that are not present.
    """
    x: int
    y: int
    raster: Optional[Image.Image]
    has_minimap: bool = False
    has_terrain: bool = False
    claimed: bool = False
    impassable_subtiles: int = 0
    unknown_area_subtiles: int = 0
    boundary_edges: int = 0
    failed: bool = False

    @property
    def present(self) -> bool:
        return self.has_minimap or self.has_terrain

    @property
    def unreferenced(self) -> bool:
        return self.present and not self.claimed

    @property
    def missing_terrain(self) -> bool:
        return self.claimed and not self.has_terrain


class TileAnnotator:
    """Builds the annotated raster for single tiles of one map.

    The world descriptor is shared read-only; every call owns the raster
    it creates, so calls for different tiles may run concurrently.
    """

    def __init__(self, storage: Storage, descriptor: WorldDescriptor,
                 options: Optional[RenderOptions] = None):
        self.descriptor = descriptor
        self.options = options or RenderOptions()
        self.images = TileImageProvider(storage, self.options.tile_size)
        self.storage = storage
        self.adt_parser = AdtFileParser()

    def annotate(self, map_name: str, x: int, y: int) -> TileResult:
        result = TileResult(x=x, y=y, raster=None, claimed=self.descriptor.claims(x, y))

        try:
            result.raster, result.has_minimap = self.images.load(map_name, x, y)
        except TileProcessingError as e:
            logger.error(f"Tile ({x}, {y}): {e}")
            result.raster = self.images.blank()
            result.failed = True

        terrain_failed = False
        try:
            annotations = self.adt_parser.load(self.storage, map_name, x, y)
        except TileProcessingError as e:
            logger.error(f"Tile ({x}, {y}): {e}")
            annotations = None
            terrain_failed = True
            result.failed = True

        if annotations is not None:
            result.has_terrain = True
            self._paint_subtiles(result, annotations)
        elif result.claimed and not terrain_failed:
            frame_tile(result.raster, self.options.missing_terrain, self.options.frame_width)

        if result.claimed:
            self._paint_boundary(result)
        elif result.present:
            fill_box(result.raster, (0, 0, result.raster.width, result.raster.height),
                     self.options.unreferenced)

        if not result.present:
            # never stitched
            result.raster = None

        return result

    def _paint_subtiles(self, result: TileResult, annotations: List[SubtileAnnotation]) -> None:
        for annotation in annotations:
            if annotation.impassable and fill_subtile(
                    result.raster, annotation.sub_x, annotation.sub_y, self.options.impassable):
                result.impassable_subtiles += 1
            if annotation.unknown_area and fill_subtile(
                    result.raster, annotation.sub_x, annotation.sub_y, self.options.unknown_area):
                result.unknown_area_subtiles += 1

    def _paint_boundary(self, result: TileResult) -> None:
        """Outline edges facing tiles the descriptor does not claim."""
        for edge in Edge:
            dx, dy = edge.offset
            if not self.descriptor.claims(result.x + dx, result.y + dy):
                draw_edge(result.raster, edge, self.options.boundary_color,
                          self.options.boundary_width)
                result.boundary_edges += 1
