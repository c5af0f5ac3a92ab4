# main.py
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .chunks import DecodeError
from .parser import PudFileParser
from .render import RenderOptions, render
from .stats import summarize
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = {
    'png': ('.png',),
    'jpeg': ('.jpg',),
    'both': ('.png', '.jpg'),
}


def collect_pud_files(path: Path) -> List[Path]:
    """Return `path` itself, or every .pud file in the directory, sorted."""
    if path.is_file():
        return [path]
    return sorted(p for p in path.iterdir() if p.is_file() and p.suffix.lower() == '.pud')


def process_pud_file(
    pud_file: Path,
    output_dir: Path,
    options: RenderOptions,
    image_format: str = 'png',
    write_stats: bool = False,
    write_dump: bool = False,
    parser: Optional[PudFileParser] = None
) -> List[Path]:
    """Decode, render and export a single PUD file.

    Returns:
        Paths of the files written

    Raises:
        DecodeError: If the file is not a valid PUD map
    """
    parser = parser or PudFileParser()
    map_description = parser.parse_file(pud_file)
    logger.info(
        f"{pud_file.name}: {map_description.dimensions} {map_description.era_name}, "
        f"{len(map_description.units)} units"
    )

    pixels = render(map_description, options)
    written = [
        pixels.save(output_dir / f"{pud_file.stem}{suffix}")
        for suffix in IMAGE_SUFFIXES[image_format]
    ]

    if write_stats:
        stats_path = output_dir / f"{pud_file.stem}_stats.json"
        with open(stats_path, 'w', encoding='utf-8') as f:
            json.dump(summarize(map_description).to_dict(), f, indent=2)
        logger.info(f"Stats written to {stats_path}")
        written.append(stats_path)

    if write_dump:
        dump_path = output_dir / f"{pud_file.stem}_map.json"
        with open(dump_path, 'w', encoding='utf-8') as f:
            json.dump(map_description.to_dict(), f, indent=2)
        logger.info(f"Map description written to {dump_path}")
        written.append(dump_path)

    return written


def process_pud_files(
    pud_files: Sequence[Path],
    output_dir: Path,
    options: RenderOptions,
    image_format: str = 'png',
    write_stats: bool = False,
    write_dump: bool = False
) -> int:
    """Process each file, continuing past failures.

    Returns:
        Number of files that failed
    """
    parser = PudFileParser()
    output_dir.mkdir(parents=True, exist_ok=True)

    failures = 0
    for pud_file in pud_files:
        try:
            logger.info(f"Processing {pud_file}")
            process_pud_file(
                pud_file, output_dir, options, image_format, write_stats, write_dump, parser
            )
        except DecodeError as e:
            logger.error(f"{pud_file} is not a recognized map file: {e}")
            failures += 1
        except (OSError, ValueError) as e:
            logger.error(f"Failed to process {pud_file}: {e}")
            failures += 1
        except MemoryError:
            logger.error(f"Out of memory processing {pud_file}")
            failures += 1

    return failures


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Decode Warcraft II PUD maps and render preview images'
    )
    parser.add_argument('path',
                        help='PUD file or directory containing PUD files')
    parser.add_argument('--output',
                        default='output',
                        help='Output directory for images and stats')
    parser.add_argument('--format',
                        choices=sorted(IMAGE_SUFFIXES),
                        default='png',
                        help='Image format to export')
    parser.add_argument('--tile-size',
                        type=int,
                        default=RenderOptions.tile_pixel_size,
                        help='Pixels per map tile')
    parser.add_argument('--no-resources',
                        action='store_true',
                        help='Do not draw gold mines and oil patches')
    parser.add_argument('--no-start-locations',
                        action='store_true',
                        help='Do not draw player start locations')
    parser.add_argument('--stats',
                        action='store_true',
                        help='Write a JSON stats file next to each image')
    parser.add_argument('--dump',
                        action='store_true',
                        help='Write the full decoded map (tiles and units) as JSON')
    parser.add_argument('--log-dir',
                        help='Directory for log files (console only if omitted)')
    parser.add_argument('--verbose', '-v',
                        action='store_true',
                        help='Enable verbose logging')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(args.log_dir, log_level)

    try:
        options = RenderOptions(
            tile_pixel_size=args.tile_size,
            show_resources=not args.no_resources,
            show_start_locations=not args.no_start_locations,
        )
    except ValueError as e:
        logger.error(f"Invalid render options: {e}")
        return 1

    path = Path(args.path)
    if not path.exists():
        logger.error(f"Path not found: {path}")
        return 1

    pud_files = collect_pud_files(path)
    if not pud_files:
        logger.warning(f"No PUD files found in {path}")
        return 0

    failures = process_pud_files(
        pud_files, Path(args.output), options, args.format, args.stats, args.dump
    )
    logger.info(f"Processing complete: {len(pud_files) - failures}/{len(pud_files)} succeeded")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
