"""Chunk stream decoder shared by the WDT and ADT parsers.

Both formats are a flat sequence of chunks, each an 8 byte header
(4 byte tag, 4 byte little-endian size) followed by ``size`` payload bytes.
Tags are stored reversed on disk, so reading them as a little-endian
integer yields the mnemonic's characters in big-endian order.
"""
from dataclasses import dataclass
from typing import BinaryIO, Iterator
import io
import logging
import struct

logger = logging.getLogger(__name__)

CHUNK_HEADER = struct.Struct('<II')


class ChunkParsingError(Exception):
    """Raised when chunk parsing fails."""
    pass


def magic(name: str) -> int:
    """Return the integer tag a chunk mnemonic is stored as.

    >>> hex(magic('MAIN'))
    '0x4d41494e'
    """
    if len(name) != 4:
        raise ValueError(f"Chunk mnemonic must be 4 characters: {name!r}")
    return int.from_bytes(name.encode('ascii'), 'big')


@dataclass(frozen=True)
class ChunkHeader:
    """Chunk header information"""
    tag: int
    size: int
    offset: int

    @property
    def data_offset(self) -> int:
        return self.offset + CHUNK_HEADER.size

    @property
    def end_offset(self) -> int:
        return self.data_offset + self.size

    @property
    def name(self) -> str:
        return self.tag.to_bytes(4, 'big').decode('ascii', 'replace')


def _stream_length(stream: BinaryIO) -> int:
    pos = stream.tell()
    length = stream.seek(0, io.SEEK_END)
    stream.seek(pos)
    return length


def iter_chunks(stream: BinaryIO) -> Iterator[ChunkHeader]:
    """Iterate over the chunks of a seekable stream.

    Each header is yielded with the stream positioned at the start of the
    chunk payload. When control comes back the stream is moved to the end
    of the declared payload, no matter how much of it the caller read.

    Raises:
        ChunkParsingError: If a header would extend past the end of the stream
    """
    length = _stream_length(stream)
    pos = stream.tell()

    while pos != length:
        if pos + CHUNK_HEADER.size > length:
            raise ChunkParsingError(
                f"Truncated chunk header at offset {pos} (stream length {length})"
            )

        stream.seek(pos)
        tag, size = CHUNK_HEADER.unpack(stream.read(CHUNK_HEADER.size))
        header = ChunkHeader(tag=tag, size=size, offset=pos)

        yield header

        pos = header.end_offset
        stream.seek(pos)


def read_struct(stream: BinaryIO, fmt: struct.Struct) -> tuple:
    """Read and unpack one fixed-width record from the stream."""
    data = stream.read(fmt.size)
    if len(data) < fmt.size:
        raise ChunkParsingError(
            f"Unexpected end of data: needed {fmt.size} bytes, got {len(data)}"
        )
    return fmt.unpack(data)
