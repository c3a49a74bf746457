"""Error types raised while building map overviews.

Map level errors abort a single map, tile level errors abort the decode
step of a single tile. Neither stops the surrounding loop.
"""


class MapProcessingError(Exception):
    """Raised when a whole map has to be skipped."""
    pass


class WorldDescriptorNotFoundError(MapProcessingError):
    """The map's WDT file does not exist in storage."""
    pass


class WmoOnlyMapError(MapProcessingError):
    """The WDT marks the map as a global WMO without terrain."""
    pass


class MalformedWorldDescriptorError(MapProcessingError):
    """The WDT chunk sequence could not be decoded."""
    pass


class TileProcessingError(Exception):
    """Raised when one tile's data could not be decoded."""

    def __init__(self, message: str, x: int = -1, y: int = -1):
        super().__init__(message)
        self.x = x
        self.y = y


class NonSquareMinimapError(TileProcessingError):
    """A decoded minimap image has differing width and height."""
    pass


class TileDecodeError(TileProcessingError):
    """A minimap image could not be decoded."""
    pass


class MalformedTerrainTileError(TileProcessingError):
    """An ADT chunk sequence could not be decoded."""
    pass
