# main.py
import argparse
import logging
from pathlib import Path
import sys
from typing import List, Optional

from adt_minimap.errors import MapProcessingError
from adt_minimap.processor import MapProcessor
from adt_minimap.storage import StorageOpenError, open_storage
from adt_minimap.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Build annotated minimap overviews of WDT maps'
    )
    parser.add_argument('--maps',
                        nargs='+',
                        required=True,
                        help='Maps to extract')
    parser.add_argument('--output-path',
                        required=True,
                        help='Path for output files')
    parser.add_argument('--storage-path',
                        help='Path for offline storage (extracted client files)')
    parser.add_argument('--online-region',
                        default='eu',
                        help='Region to use for online storage')
    parser.add_argument('--online-product',
                        default='wow',
                        help='Product to use for online storage')
    parser.add_argument('--use-online',
                        action='store_true',
                        help='Use online storage')
    parser.add_argument('--workers',
                        type=int,
                        default=1,
                        help='Worker threads for the per-tile loop')
    parser.add_argument('--report',
                        action='store_true',
                        help='Also write <map>.json tile statistics')
    parser.add_argument('--log-dir',
                        default='logs',
                        help='Log directory')
    parser.add_argument('--verbose', '-v',
                        action='store_true',
                        help='Enable verbose logging')
    return parser


def process_maps(processor: MapProcessor, maps: List[str]) -> int:
    """Process maps one at a time; returns how many produced an image."""
    written = 0
    for map_name in maps:
        try:
            report = processor.process_map(map_name)
            if report.output_file:
                written += 1
        except MapProcessingError as e:
            logger.warning(f"--- skipping {map_name}: {e}")
        except Exception as e:
            logger.error(f"Failed to process {map_name}: {e}")
    return written


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    log_file = setup_logging(args.log_dir, log_level)
    logger.info(f"Log file: {log_file}")

    output_dir = Path(args.output_path)
    output_dir.mkdir(parents=True, exist_ok=True)

    try:
        storage = open_storage(
            args.storage_path,
            args.use_online,
            args.online_region,
            args.online_product,
        )
    except StorageOpenError as e:
        logger.error(f"Failed to open storage: {e}")
        return 1

    processor = MapProcessor(
        storage,
        output_dir,
        workers=args.workers,
        write_report=args.report,
    )
    written = process_maps(processor, args.maps)
    logger.info(f"Processing complete: {written}/{len(args.maps)} maps written")
    return 0


if __name__ == "__main__":
    sys.exit(main())
