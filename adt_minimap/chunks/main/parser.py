"""MAIN chunk parser.

The tile table holds 64x64 entries of two uint32 words. Entries are stored
row by row (outer index is the tile's y coordinate), while the rest of the
tool addresses tiles as ``grid[x, y]`` like the ADT file names do. The
entry read at (outer=a, inner=b) therefore lands in ``grid[b, a]``.
"""
from enum import IntFlag
from typing import BinaryIO
import struct

import numpy as np

from ..base import read_struct
from ...constants import MAP_GRID_SIZE

_ENTRY = struct.Struct('<II')


class MainEntryFlags(IntFlag):
    """Flags of a MAIN entry."""
    HAS_ADT = 1 << 0
    LOADED = 1 << 1


class MainChunk:
    """Map tile table."""

    @staticmethod
    def read(stream: BinaryIO, grid: np.ndarray) -> int:
        """Fill ``grid`` in place and return the number of claimed tiles."""
        claimed = 0
        for outer in range(MAP_GRID_SIZE):
            for inner in range(MAP_GRID_SIZE):
                flags, _reserved = read_struct(stream, _ENTRY)
                exists = bool(flags & MainEntryFlags.HAS_ADT)
                grid[inner, outer] = exists
                claimed += exists
        return claimed
