"""
Shared helpers for building synthetic WDT/ADT data
"""
import io
import struct
from typing import Dict, Iterable, Tuple

import pytest
from PIL import Image

from adt_minimap.storage import Storage, StorageFileNotFound, adt_path, minimap_path, wdt_path


def create_test_chunk(name: bytes, data: bytes) -> bytes:
    """Create a chunk the way it is stored on disk (tag bytes reversed)"""
    return name[::-1] + struct.pack('<I', len(data)) + data


def create_main_data(entries: Dict[Tuple[int, int], int]) -> bytes:
    """MAIN payload; ``entries`` maps (outer, inner) to the entry's flags word"""
    data = bytearray()
    for outer in range(64):
        for inner in range(64):
            data += struct.pack('<II', entries.get((outer, inner), 0), 0xDEADBEEF)
    return bytes(data)


def create_wdt(tiles: Iterable[Tuple[int, int]] = (), flags: int = 0) -> bytes:
    """WDT claiming the given (x, y) tiles; MAIN is stored row by row (outer = y)"""
    entries = {(y, x): 1 for x, y in tiles}
    return (
        create_test_chunk(b'MVER', struct.pack('<I', 18))
        + create_test_chunk(b'MPHD', struct.pack('<8I', flags, 0, 0, 0, 0, 0, 0, 0))
        + create_test_chunk(b'MAIN', create_main_data(entries))
    )


def create_mcnk_header(flags: int, x: int, y: int, area_id: int,
                       n_layers: int = 1, n_doodad_refs: int = 0) -> bytes:
    """Retail MCNK header fields up to and including the area id"""
    return (
        struct.pack('<IIIII', flags, x, y, n_layers, n_doodad_refs)
        + struct.pack('<Q', 0)
        + struct.pack('<IIIIIII', 0x88, 0x98, 0xA0, 0x800, 0, 0, area_id)
    )


def create_mcnk_chunk(flags: int, x: int, y: int, area_id: int) -> bytes:
    """MCNK with a header and an MCVT subchunk the parser has to skip"""
    header = create_mcnk_header(flags, x, y, area_id) + b'\x00' * 76
    mcvt = create_test_chunk(b'MCVT', struct.pack('<145f', *([0.0] * 145)))
    return create_test_chunk(b'MCNK', header + mcvt)


def create_adt(mcnks: Iterable[Tuple[int, int, int, int]] = ()) -> bytes:
    """ADT with the given (flags, x, y, area_id) MCNKs after a few root chunks"""
    data = create_test_chunk(b'MVER', struct.pack('<I', 18))
    data += create_test_chunk(b'MHDR', b'\x00' * 64)
    data += create_test_chunk(b'MTEX', b'tileset\\grass.blp\x00')
    for flags, x, y, area_id in mcnks:
        data += create_mcnk_chunk(flags, x, y, area_id)
    return data


def create_image_bytes(width: int, height: int, color=(10, 20, 30, 255)) -> bytes:
    """Minimap stand-in; the decoder detects the format from the content"""
    buffer = io.BytesIO()
    Image.new('RGBA', (width, height), color).save(buffer, 'PNG')
    return buffer.getvalue()


class DictStorage(Storage):
    """In-memory storage keyed by exact virtual path"""

    def __init__(self, files: Dict[str, bytes] = None):
        self.files = dict(files or {})

    def open(self, virtual_path: str):
        if virtual_path not in self.files:
            raise StorageFileNotFound(virtual_path)
        return io.BytesIO(self.files[virtual_path])

    def add_wdt(self, map_name: str, data: bytes) -> None:
        self.files[wdt_path(map_name)] = data

    def add_adt(self, map_name: str, x: int, y: int, data: bytes) -> None:
        self.files[adt_path(map_name, x, y)] = data

    def add_minimap(self, map_name: str, x: int, y: int, data: bytes) -> None:
        self.files[minimap_path(map_name, x, y)] = data


class FailingStorage(DictStorage):
    """Raises a plain OSError for selected paths, like an unreadable file"""

    def __init__(self, failing, files: Dict[str, bytes] = None):
        super().__init__(files)
        self.failing = set(failing)

    def open(self, virtual_path: str):
        if virtual_path in self.failing:
            raise OSError(f"I/O error: {virtual_path}")
        return super().open(virtual_path)


@pytest.fixture
def storage():
    return DictStorage()
