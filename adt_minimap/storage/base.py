"""Storage interface used by the map processor."""
from typing import BinaryIO


class StorageFileNotFound(FileNotFoundError):
    """The requested virtual path does not exist in storage."""

    def __init__(self, virtual_path: str):
        super().__init__(f"File not found in storage: {virtual_path}")
        self.virtual_path = virtual_path


class StorageOpenError(Exception):
    """Storage could not be opened."""
    pass


class Storage:
    """Read-only access to client files by virtual path.

    Implementations must be safe for concurrent reads.
    """

    def open(self, virtual_path: str) -> BinaryIO:
        """Open a virtual path as a seekable binary stream.

        Raises:
            StorageFileNotFound: If the path does not exist
        """
        raise NotImplementedError("Subclasses must implement open()")
