"""WDT (world descriptor) parser."""
from dataclasses import dataclass, field
from typing import BinaryIO
import logging

import numpy as np

from ..chunks import ChunkParsingError, MainChunk, MphdChunk, MphdFlags, iter_chunks, magic
from ..constants import MAP_GRID_SIZE
from ..errors import MalformedWorldDescriptorError, WmoOnlyMapError, WorldDescriptorNotFoundError
from ..storage import Storage, StorageFileNotFound, wdt_path

logger = logging.getLogger(__name__)

MPHD = magic('MPHD')
MAIN = magic('MAIN')


def empty_grid() -> np.ndarray:
    return np.zeros((MAP_GRID_SIZE, MAP_GRID_SIZE), dtype=bool)


@dataclass
class WorldDescriptor:
    """Tile existence grid of a map, indexed ``grid[x, y]``."""
    grid: np.ndarray = field(default_factory=empty_grid)
    flags: MphdFlags = MphdFlags(0)

    @property
    def has_terrain(self) -> bool:
        return not self.flags & MphdFlags.WMO_ONLY

    @property
    def claimed_tiles(self) -> int:
        return int(self.grid.sum())

    def claims(self, x: int, y: int) -> bool:
        """Whether the descriptor claims tile (x, y); False outside the grid."""
        if not (0 <= x < MAP_GRID_SIZE and 0 <= y < MAP_GRID_SIZE):
            return False
        return bool(self.grid[x, y])


class WdtFileParser:
    """Parser for WDT files."""

    def parse_stream(self, stream: BinaryIO, map_name: str = '') -> WorldDescriptor:
        """Parse a WDT stream into a read-only world descriptor.

        Raises:
            WmoOnlyMapError: If MPHD marks the map as WMO only
            MalformedWorldDescriptorError: If the chunk sequence is corrupt
        """
        descriptor = WorldDescriptor()

        try:
            for header in iter_chunks(stream):
                if header.tag == MPHD:
                    descriptor.flags = MphdChunk.read(stream)
                    logger.debug(f"{map_name}: MPHD flags {int(descriptor.flags):#x}")
                    if not descriptor.has_terrain:
                        raise WmoOnlyMapError(f"{map_name} is a WMO-only map without terrain")
                elif header.tag == MAIN:
                    claimed = MainChunk.read(stream, descriptor.grid)
                    logger.debug(f"{map_name}: MAIN claims {claimed} tiles")
        except ChunkParsingError as e:
            raise MalformedWorldDescriptorError(f"Malformed WDT for {map_name}: {e}") from e

        descriptor.grid.setflags(write=False)
        return descriptor

    def load(self, storage: Storage, map_name: str) -> WorldDescriptor:
        """Open and parse the WDT of a map.

        Raises:
            WorldDescriptorNotFoundError: If the WDT is not in storage
        """
        path = wdt_path(map_name)
        try:
            stream = storage.open(path)
        except StorageFileNotFound as e:
            raise WorldDescriptorNotFoundError(f"{path} does not exist") from e

        with stream:
            return self.parse_stream(stream, map_name)
