# adt_minimap/chunks/__init__.py
"""WDT/ADT chunk decoders."""
from .base import ChunkHeader, ChunkParsingError, iter_chunks, magic, read_struct
from .mphd import MphdChunk, MphdFlags
from .main import MainChunk, MainEntryFlags
from .mcnk import McnkFlags, McnkHeader

__all__ = [
    'ChunkHeader',
    'ChunkParsingError',
    'iter_chunks',
    'magic',
    'read_struct',
    'MphdChunk',
    'MphdFlags',
    'MainChunk',
    'MainEntryFlags',
    'McnkFlags',
    'McnkHeader',
]
