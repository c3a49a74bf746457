"""MPHD chunk parser."""
from typing import BinaryIO
import struct

from ..base import read_struct
from .flags import MphdFlags

_FLAGS = struct.Struct('<I')


class MphdChunk:
    """Map header. Only the leading flags word is used."""

    @staticmethod
    def read(stream: BinaryIO) -> MphdFlags:
        (flags,) = read_struct(stream, _FLAGS)
        return MphdFlags(flags)
