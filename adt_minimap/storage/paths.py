"""Virtual file paths of the map files inside client storage.

The casing differs between the paths on purpose; storage lookups must see
them exactly as built here.
"""


def wdt_path(map_name: str) -> str:
    return f"world/maps/{map_name}/{map_name}.wdt"


def minimap_path(map_name: str, x: int, y: int) -> str:
    return f"world/minimaps/{map_name}/map{x:02d}_{y:02d}.blp"


def adt_path(map_name: str, x: int, y: int) -> str:
    return f"World/Maps/{map_name}/{map_name}_{x}_{y}.adt"
