# adt_minimap/parser/__init__.py
"""WDT/ADT file parsers."""
from .wdt_parser import WdtFileParser, WorldDescriptor
from .adt_parser import AdtFileParser, SubtileAnnotation

__all__ = [
    'WdtFileParser',
    'WorldDescriptor',
    'AdtFileParser',
    'SubtileAnnotation',
]
