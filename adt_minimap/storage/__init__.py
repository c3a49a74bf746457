# adt_minimap/storage/__init__.py
"""Client file storage."""
from .base import Storage, StorageFileNotFound, StorageOpenError
from .local import LocalStorage, open_storage
from .paths import wdt_path, minimap_path, adt_path

__all__ = [
    'Storage',
    'StorageFileNotFound',
    'StorageOpenError',
    'LocalStorage',
    'open_storage',
    'wdt_path',
    'minimap_path',
    'adt_path',
]
