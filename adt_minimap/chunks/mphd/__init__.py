# adt_minimap/chunks/mphd/__init__.py
"""MPHD (map header) chunk."""
from .flags import MphdFlags
from .parser import MphdChunk

__all__ = ['MphdFlags', 'MphdChunk']
