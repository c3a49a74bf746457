"""Minimap tile images."""
from typing import Tuple
import logging

from PIL import Image

from ..constants import TILE_SIZE
from ..errors import NonSquareMinimapError, TileDecodeError
from ..storage import Storage, StorageFileNotFound, minimap_path

logger = logging.getLogger(__name__)


class TileImageProvider:
    """Loads minimap BLPs as square RGBA tiles of a fixed size."""

    def __init__(self, storage: Storage, tile_size: int = TILE_SIZE):
        self.storage = storage
        self.tile_size = tile_size

    def blank(self) -> Image.Image:
        """Transparent placeholder tile."""
        return Image.new('RGBA', (self.tile_size, self.tile_size), (0, 0, 0, 0))

    def load(self, map_name: str, x: int, y: int) -> Tuple[Image.Image, bool]:
        """Return the tile raster and whether it was decoded from storage.

        A missing minimap yields a blank tile. Square minimaps of another
        size are scaled to the tile size.

        Raises:
            NonSquareMinimapError: If the decoded image is not square
            TileDecodeError: If the image could not be decoded
        """
        path = minimap_path(map_name, x, y)
        try:
            stream = self.storage.open(path)
        except StorageFileNotFound:
            logger.debug(f"No minimap at {path}")
            return self.blank(), False
        except OSError as e:
            raise TileDecodeError(f"Failed to read {path}: {e}", x, y) from e

        with stream:
            try:
                with Image.open(stream) as image:
                    raster = image.convert('RGBA')
            except Exception as e:
                raise TileDecodeError(f"Failed to decode {path}: {e}", x, y) from e

        if raster.width != raster.height:
            raise NonSquareMinimapError(
                f"non-square minimap {path}: {raster.width}x{raster.height}", x, y
            )

        if raster.width != self.tile_size:
            logger.debug(f"Scaling {path} from {raster.width} to {self.tile_size} pixels")
            raster = raster.resize((self.tile_size, self.tile_size))

        return raster, True
