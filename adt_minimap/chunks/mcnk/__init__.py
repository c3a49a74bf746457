# adt_minimap/chunks/mcnk/__init__.py
"""MCNK (map chunk) header."""
from .header import McnkFlags, McnkHeader

__all__ = ['McnkFlags', 'McnkHeader']
