# adt_minimap/processor.py
"""Builds the annotated overview image of a map."""
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple
import json
import logging

import numpy as np
from PIL import Image
from tqdm import tqdm

from .constants import MAP_GRID_SIZE
from .imaging import Bounds, MapStitcher, RenderOptions, TileAnnotator, TileResult, compute_bounds
from .parser import WdtFileParser
from .storage import Storage

logger = logging.getLogger(__name__)


@dataclass
class MapReport:
    """Tile statistics of one processed map."""
    map_name: str
    claimed_tiles: int = 0
    present_tiles: int = 0
    minimap_tiles: int = 0
    terrain_tiles: int = 0
    unreferenced_tiles: List[Tuple[int, int]] = field(default_factory=list)
    missing_terrain_tiles: List[Tuple[int, int]] = field(default_factory=list)
    failed_tiles: List[Tuple[int, int]] = field(default_factory=list)
    impassable_subtiles: int = 0
    unknown_area_subtiles: int = 0
    bounds: Optional[Bounds] = None
    output_file: Optional[str] = None

    def add(self, result: TileResult) -> None:
        self.present_tiles += result.present
        self.minimap_tiles += result.has_minimap
        self.terrain_tiles += result.has_terrain
        self.impassable_subtiles += result.impassable_subtiles
        self.unknown_area_subtiles += result.unknown_area_subtiles
        if result.unreferenced:
            self.unreferenced_tiles.append((result.x, result.y))
        if result.missing_terrain:
            self.missing_terrain_tiles.append((result.x, result.y))
        if result.failed:
            self.failed_tiles.append((result.x, result.y))

    def to_dict(self) -> Dict:
        data = asdict(self)
        for key in ('unreferenced_tiles', 'missing_terrain_tiles', 'failed_tiles'):
            data[key] = [list(coord) for coord in data[key]]
        return data


def grid_coordinates() -> Iterable[Tuple[int, int]]:
    for x in range(MAP_GRID_SIZE):
        for y in range(MAP_GRID_SIZE):
            yield x, y


class MapProcessor:
    """Runs WDT parsing, per-tile annotation and stitching for maps.

    Args:
        storage: Client file storage
        output_dir: Directory receiving ``<map>.png`` (and ``<map>.json``)
        options: Tile size and overlay appearance
        workers: Worker threads for the per-tile loop; 1 runs it inline
        write_report: Also write the tile statistics as JSON
    """

    def __init__(self, storage: Storage, output_dir: Path,
                 options: Optional[RenderOptions] = None,
                 workers: int = 1, write_report: bool = False):
        self.storage = storage
        self.output_dir = Path(output_dir)
        self.options = options or RenderOptions()
        self.workers = max(1, workers)
        self.write_report = write_report
        self.wdt_parser = WdtFileParser()
        self.stitcher = MapStitcher(self.options.tile_size)

    def annotate_tiles(self, map_name: str, annotator: TileAnnotator) -> Iterator[TileResult]:
        """Annotate all 64x64 tiles, yielding results in grid order."""
        coords = list(grid_coordinates())
        progress = tqdm(total=len(coords), desc=f"Annotating {map_name}", unit="tile",
                        dynamic_ncols=True, disable=None)
        with progress:
            if self.workers == 1:
                for x, y in coords:
                    yield annotator.annotate(map_name, x, y)
                    progress.update()
                return

            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                for result in executor.map(lambda c: annotator.annotate(map_name, *c), coords):
                    yield result
                    progress.update()

    def render(self, map_name: str) -> Tuple[Optional[Image.Image], MapReport]:
        """Build the overview image of a map without saving it.

        Raises:
            MapProcessingError: If the map has to be skipped
        """
        descriptor = self.wdt_parser.load(self.storage, map_name)
        report = MapReport(map_name=map_name, claimed_tiles=descriptor.claimed_tiles)
        logger.info(f"{map_name}: WDT claims {report.claimed_tiles} tiles")

        annotator = TileAnnotator(self.storage, descriptor, self.options)
        presence = np.zeros((MAP_GRID_SIZE, MAP_GRID_SIZE), dtype=bool)
        tiles = {}
        for result in self.annotate_tiles(map_name, annotator):
            report.add(result)
            presence[result.x, result.y] = result.present
            if result.present:
                tiles[(result.x, result.y)] = result.raster

        report.bounds = compute_bounds(presence)
        return self.stitcher.stitch(tiles, presence), report

    def process_map(self, map_name: str) -> MapReport:
        """Render a map and write ``<map>.png`` to the output directory.

        Raises:
            MapProcessingError: If the map has to be skipped
        """
        logger.info(f"-- processing {map_name}")
        canvas, report = self.render(map_name)

        if canvas is None:
            logger.warning(f"{map_name}: empty map, nothing to save")
        else:
            output_file = self.stitcher.save(canvas, self.output_dir / f"{map_name}.png")
            report.output_file = str(output_file)

        self._log_report(report)
        if self.write_report:
            report_file = self.output_dir / f"{map_name}.json"
            with open(report_file, 'w', encoding='utf-8') as f:
                json.dump(report.to_dict(), f, indent=2)
            logger.info(f"Report written to {report_file}")

        return report

    def _log_report(self, report: MapReport) -> None:
        logger.info(
            f"{report.map_name}: {report.present_tiles} tiles present "
            f"({report.minimap_tiles} minimaps, {report.terrain_tiles} ADTs), "
            f"{report.impassable_subtiles} impassable and "
            f"{report.unknown_area_subtiles} unknown-area MCNKs"
        )
        if report.unreferenced_tiles:
            logger.warning(
                f"{report.map_name}: {len(report.unreferenced_tiles)} tiles have data "
                f"but are not in the WDT: {report.unreferenced_tiles}"
            )
        if report.missing_terrain_tiles:
            logger.warning(
                f"{report.map_name}: {len(report.missing_terrain_tiles)} WDT tiles "
                f"have no ADT: {report.missing_terrain_tiles}"
            )
        if report.failed_tiles:
            logger.error(f"{report.map_name}: failed tiles {report.failed_tiles}")
