"""ADT (terrain tile) parser.

Only MCNK headers are read; everything else in the file is skipped by the
chunk decoder.
"""
from dataclasses import dataclass
from typing import BinaryIO, List, Optional
import logging

from ..chunks import ChunkParsingError, McnkHeader, iter_chunks, magic
from ..errors import MalformedTerrainTileError
from ..storage import Storage, StorageFileNotFound, adt_path

logger = logging.getLogger(__name__)

MCNK = magic('MCNK')


@dataclass(frozen=True)
class SubtileAnnotation:
    """Diagnostic flags of one MCNK within its tile."""
    sub_x: int
    sub_y: int
    impassable: bool
    unknown_area: bool
    area_id: int = 0


class AdtFileParser:
    """Parser for ADT files."""

    def parse_stream(self, stream: BinaryIO) -> List[SubtileAnnotation]:
        """Return one annotation per MCNK chunk in file order.

        Raises:
            ChunkParsingError: If the chunk sequence is corrupt
        """
        annotations = []
        for header in iter_chunks(stream):
            if header.tag != MCNK:
                continue
            mcnk = McnkHeader.read(stream)
            annotations.append(SubtileAnnotation(
                sub_x=mcnk.idx_x,
                sub_y=mcnk.idx_y,
                impassable=mcnk.impassable,
                unknown_area=mcnk.unknown_area,
                area_id=mcnk.area_id,
            ))
        return annotations

    def load(self, storage: Storage, map_name: str, x: int, y: int) -> Optional[List[SubtileAnnotation]]:
        """Open and parse the ADT at (x, y).

        Returns:
            The annotations, or None if the tile has no terrain file

        Raises:
            MalformedTerrainTileError: If the file is corrupt
        """
        path = adt_path(map_name, x, y)
        try:
            stream = storage.open(path)
        except StorageFileNotFound:
            logger.debug(f"No terrain data at {path}")
            return None
        except OSError as e:
            raise MalformedTerrainTileError(f"Failed to read {path}: {e}", x, y) from e

        with stream:
            try:
                return self.parse_stream(stream)
            except ChunkParsingError as e:
                raise MalformedTerrainTileError(f"Failed to decode {path}: {e}", x, y) from e
