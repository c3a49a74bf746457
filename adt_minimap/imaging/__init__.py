# adt_minimap/imaging/__init__.py
"""Tile images, overlays and stitching."""
from .overlays import Edge, Hatch, HatchStyle, RenderOptions
from .tile_provider import TileImageProvider
from .annotator import TileAnnotator, TileResult
from .stitcher import Bounds, MapStitcher, compute_bounds

__all__ = [
    'Edge',
    'Hatch',
    'HatchStyle',
    'RenderOptions',
    'TileImageProvider',
    'TileAnnotator',
    'TileResult',
    'Bounds',
    'MapStitcher',
    'compute_bounds',
]
