"""
Tests for the WDT parser
"""
import io
import struct

import numpy as np
import pytest

from adt_minimap.chunks import MphdFlags
from adt_minimap.errors import MalformedWorldDescriptorError, WmoOnlyMapError, WorldDescriptorNotFoundError
from adt_minimap.parser import WdtFileParser

from .conftest import create_main_data, create_test_chunk, create_wdt


def parse(data: bytes):
    return WdtFileParser().parse_stream(io.BytesIO(data), 'Test')


def test_main_entry_is_stored_with_axes_swapped():
    data = create_test_chunk(b'MAIN', create_main_data({(5, 9): 1}))
    grid = parse(data).grid

    assert grid[9, 5]
    assert not grid[5, 9]
    assert grid.sum() == 1


@pytest.mark.parametrize('outer,inner', [(0, 0), (0, 63), (63, 0), (17, 42)])
def test_axis_swap_pinned(outer, inner):
    grid = parse(create_test_chunk(b'MAIN', create_main_data({(outer, inner): 1}))).grid
    assert list(zip(*np.nonzero(grid))) == [(inner, outer)]


def test_axis_swap_is_involutive_under_relabeling():
    entries = {(1, 2): 1, (3, 60): 1, (40, 7): 1}
    grid = parse(create_test_chunk(b'MAIN', create_main_data(entries))).grid
    relabeled = {(b, a): 1 for (a, b) in entries}
    grid_of_relabeled = parse(create_test_chunk(b'MAIN', create_main_data(relabeled))).grid

    assert np.array_equal(grid, grid_of_relabeled.T)


def test_parse_is_idempotent():
    data = create_wdt([(3, 3), (10, 20)])
    assert np.array_equal(parse(data).grid, parse(data).grid)


def test_only_low_bit_of_first_word_counts():
    data = create_test_chunk(b'MAIN', create_main_data({(0, 0): 0x2, (0, 1): 0x3}))
    grid = parse(data).grid

    assert not grid[0, 0]
    assert grid[1, 0]


def test_create_wdt_claims_x_y():
    descriptor = parse(create_wdt([(3, 7)]))

    assert descriptor.claims(3, 7)
    assert not descriptor.claims(7, 3)
    assert descriptor.claimed_tiles == 1
    assert not descriptor.claims(-1, 7)
    assert not descriptor.claims(3, 64)


def test_unknown_chunks_are_skipped():
    data = (create_test_chunk(b'MVER', struct.pack('<I', 18))
            + create_test_chunk(b'MWMO', b'world\\wmo\\foo.wmo\x00')
            + create_wdt([(1, 1)]))
    assert parse(data).claims(1, 1)


def test_grid_is_read_only():
    descriptor = parse(create_wdt([(1, 1)]))
    with pytest.raises(ValueError):
        descriptor.grid[0, 0] = True


def test_wmo_only_map_is_fatal():
    with pytest.raises(WmoOnlyMapError):
        parse(create_wdt([(3, 3)], flags=MphdFlags.WMO_ONLY))


def test_other_mphd_flags_are_fine():
    descriptor = parse(create_wdt([(3, 3)], flags=MphdFlags.ADT_HAS_MCCV | MphdFlags.ADT_HAS_BIG_ALPHA))
    assert descriptor.has_terrain
    assert descriptor.flags & MphdFlags.ADT_HAS_BIG_ALPHA


def test_truncated_wdt_is_malformed():
    data = create_wdt([(3, 3)])[:-10]
    with pytest.raises(MalformedWorldDescriptorError):
        parse(data)


def test_load_missing_wdt(storage):
    with pytest.raises(WorldDescriptorNotFoundError):
        WdtFileParser().load(storage, 'Nowhere')


def test_load_from_storage(storage):
    storage.add_wdt('Azeroth', create_wdt([(32, 48)]))
    assert WdtFileParser().load(storage, 'Azeroth').claims(32, 48)
