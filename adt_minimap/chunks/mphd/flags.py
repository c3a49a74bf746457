# adt_minimap/chunks/mphd/flags.py
from enum import IntFlag


class MphdFlags(IntFlag):
    """Flags used in the MPHD chunk."""
    WMO_ONLY = 1 << 0              # Global WMO map, no terrain tiles
    ADT_HAS_MCCV = 1 << 1          # Vertex colours in ADTs
    ADT_HAS_BIG_ALPHA = 1 << 2
    ADT_HAS_DOODADREFS_SORTED = 1 << 3
    ADT_HAS_LIGHTING_VERTICES = 1 << 4
    ADT_HAS_UPSIDE_DOWN_GROUND = 1 << 5
    UNK_FIRELANDS = 1 << 6
    ADT_HAS_HEIGHT_TEXTURING = 1 << 7
