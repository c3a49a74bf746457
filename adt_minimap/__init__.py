# adt_minimap/__init__.py
"""Annotated minimap overview builder for WDT/ADT map data."""
from .chunks import ChunkParsingError
from .parser import WdtFileParser, AdtFileParser
from .processor import MapProcessor

__version__ = '0.1.0'

__all__ = [
    'ChunkParsingError',
    'WdtFileParser',
    'AdtFileParser',
    'MapProcessor',
]
