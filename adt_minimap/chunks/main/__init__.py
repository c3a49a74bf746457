# adt_minimap/chunks/main/__init__.py
"""MAIN (map tile table) chunk."""
from .parser import MainChunk, MainEntryFlags

__all__ = ['MainChunk', 'MainEntryFlags']
