"""Offline storage backed by an extracted client directory."""
from pathlib import Path
from typing import BinaryIO, Dict, Optional
import io
import logging
import threading

from .base import Storage, StorageFileNotFound, StorageOpenError

logger = logging.getLogger(__name__)


class LocalStorage(Storage):
    """Resolves virtual paths against a directory tree.

    Client paths are case-insensitive, so each path component is matched
    against a lowercased listing of its parent directory.
    """

    def __init__(self, root: Path):
        self.root = Path(root)
        if not self.root.is_dir():
            raise StorageOpenError(f"Storage path is not a directory: {self.root}")
        self._listings: Dict[Path, Dict[str, str]] = {}
        self._lock = threading.Lock()
        logger.info(f"Opened local storage at {self.root}")

    def _listing(self, directory: Path) -> Dict[str, str]:
        with self._lock:
            listing = self._listings.get(directory)
            if listing is None:
                listing = {entry.name.lower(): entry.name for entry in directory.iterdir()}
                self._listings[directory] = listing
            return listing

    def resolve(self, virtual_path: str) -> Optional[Path]:
        """Return the on-disk path for a virtual path, or None."""
        current = self.root
        for part in virtual_path.replace('\\', '/').split('/'):
            if not part:
                continue
            if not current.is_dir():
                return None
            actual = self._listing(current).get(part.lower())
            if actual is None:
                return None
            current = current / actual
        return current if current.is_file() else None

    def open(self, virtual_path: str) -> BinaryIO:
        path = self.resolve(virtual_path)
        if path is None:
            raise StorageFileNotFound(virtual_path)
        return io.BytesIO(path.read_bytes())


def open_storage(storage_path: Optional[str], use_online: bool,
                 online_region: str = 'eu', online_product: str = 'wow') -> Storage:
    """Open the storage selected on the command line.

    Raises:
        StorageOpenError: If no usable storage was selected
    """
    if use_online:
        raise StorageOpenError(
            f"Online storage ({online_product}/{online_region}) is not supported; "
            "extract the client files and pass --storage-path"
        )
    if storage_path is None:
        raise StorageOpenError("StoragePath required if not using online mode!")
    return LocalStorage(Path(storage_path))
