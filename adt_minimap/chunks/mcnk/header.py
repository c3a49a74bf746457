"""MCNK (Map Chunk) header."""
from dataclasses import dataclass
from enum import IntFlag
from typing import BinaryIO
import struct

from ..base import read_struct


class McnkFlags(IntFlag):
    """MCNK flags from header"""
    HAS_MCSH = 1 << 0         # Shadow map present
    IMPASSABLE = 1 << 1       # Impassable terrain
    LQ_RIVER = 1 << 2         # River in terrain
    LQ_OCEAN = 1 << 3         # Ocean in terrain
    LQ_MAGMA = 1 << 4         # Magma in terrain
    LQ_SLIME = 1 << 5         # Slime in terrain
    HAS_MCCV = 1 << 6         # Vertex colors present
    UNK80 = 1 << 7
    DO_NOT_FIX_ALPHA_MAP = 1 << 15
    HIGH_RES_HOLES = 1 << 16


# Leading fields of the retail header, read in this order from the payload start
_LEADING = struct.Struct('<IIIII')
_HOLES = struct.Struct('<Q')
_OFFSETS = struct.Struct('<IIIIIII')


@dataclass
class McnkHeader:
    """MCNK chunk header (the part needed for diagnostics)"""
    flags: McnkFlags
    idx_x: int
    idx_y: int
    n_layers: int
    n_doodad_refs: int
    holes_high_res: int
    offset_mcly: int          # Relative to chunk start
    offset_mcrf: int
    offset_mcal: int
    size_mcal: int
    offset_mcsh: int
    size_mcsh: int
    area_id: int

    SIZE = _LEADING.size + _HOLES.size + _OFFSETS.size

    @property
    def impassable(self) -> bool:
        return bool(self.flags & McnkFlags.IMPASSABLE)

    @property
    def unknown_area(self) -> bool:
        return self.area_id == 0

    @classmethod
    def read(cls, stream: BinaryIO) -> 'McnkHeader':
        """Read the header fields sequentially from the current position.

        Raises:
            ChunkParsingError: If the stream ends inside the header
        """
        flags, idx_x, idx_y, n_layers, n_doodad_refs = read_struct(stream, _LEADING)
        (holes_high_res,) = read_struct(stream, _HOLES)
        (offset_mcly, offset_mcrf, offset_mcal, size_mcal,
         offset_mcsh, size_mcsh, area_id) = read_struct(stream, _OFFSETS)

        return cls(
            flags=McnkFlags(flags),
            idx_x=idx_x,
            idx_y=idx_y,
            n_layers=n_layers,
            n_doodad_refs=n_doodad_refs,
            holes_high_res=holes_high_res,
            offset_mcly=offset_mcly,
            offset_mcrf=offset_mcrf,
            offset_mcal=offset_mcal,
            size_mcal=size_mcal,
            offset_mcsh=offset_mcsh,
            size_mcsh=size_mcsh,
            area_id=area_id,
        )
