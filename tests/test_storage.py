"""
Tests for offline storage and virtual paths
"""
import pytest

from adt_minimap.storage import (
    LocalStorage, StorageFileNotFound, StorageOpenError, adt_path, minimap_path, open_storage, wdt_path,
)


def test_virtual_paths():
    assert wdt_path('Azeroth') == 'world/maps/Azeroth/Azeroth.wdt'
    assert minimap_path('Azeroth', 3, 14) == 'world/minimaps/Azeroth/map03_14.blp'
    assert adt_path('Azeroth', 3, 14) == 'World/Maps/Azeroth/Azeroth_3_14.adt'


def test_case_insensitive_lookup(tmp_path):
    target = tmp_path / 'WORLD' / 'Maps' / 'azeroth'
    target.mkdir(parents=True)
    (target / 'AZEROTH.WDT').write_bytes(b'data')

    storage = LocalStorage(tmp_path)

    with storage.open('world/maps/Azeroth/Azeroth.wdt') as stream:
        assert stream.read() == b'data'
    with storage.open('World\\Maps\\Azeroth\\azeroth.wdt') as stream:
        assert stream.read() == b'data'


def test_missing_file(tmp_path):
    (tmp_path / 'world').mkdir()
    storage = LocalStorage(tmp_path)

    with pytest.raises(StorageFileNotFound) as excinfo:
        storage.open('world/maps/Nowhere/Nowhere.wdt')

    assert isinstance(excinfo.value, FileNotFoundError)
    assert excinfo.value.virtual_path == 'world/maps/Nowhere/Nowhere.wdt'
    with pytest.raises(StorageFileNotFound):
        storage.open('world')


def test_storage_root_must_exist(tmp_path):
    with pytest.raises(StorageOpenError):
        LocalStorage(tmp_path / 'missing')


def test_open_storage_requires_path():
    with pytest.raises(StorageOpenError, match='StoragePath required'):
        open_storage(None, use_online=False)


def test_online_storage_is_rejected(tmp_path):
    with pytest.raises(StorageOpenError, match='eu'):
        open_storage(str(tmp_path), use_online=True, online_region='eu')


def test_open_storage_local(tmp_path):
    assert isinstance(open_storage(str(tmp_path), use_online=False), LocalStorage)
