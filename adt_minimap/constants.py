# adt_minimap/constants.py
"""Grid geometry shared by the parsers and the imaging code."""

# Tiles per map side (WDT MAIN table, ADT file coordinates)
MAP_GRID_SIZE = 64

# MCNKs per tile side
SUBTILE_GRID_SIZE = 16

# Minimap tile side in pixels
TILE_SIZE = 256
