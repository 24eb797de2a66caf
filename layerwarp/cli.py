# -*- coding: utf-8 -*-
"""
Layerwarp CLI - Convert a multi-layer product from the command line.

Usage:
  layerwarp MOD13Q1.hdf --prefix ndvi
  layerwarp MOD13Q1.hdf --prefix ndvi --epsg 4326 --resolution 0.0025
  layerwarp MOD13Q1.hdf --wkt "$(cat albers.wkt)" --resampling bilinear
  layerwarp MOD13Q1.hdf --subset 1,0,0,1 --format HFA
  layerwarp MOD13Q1.hdf --list
  python -m layerwarp --help

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-16

Modified
--------
2026-10-16
"""

# Standard library
import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

# layerwarp internal
from layerwarp.IO.container import list_subrasters
from layerwarp.IO.writer import DEFAULT_FORMAT
from layerwarp.converter import ConversionJob, LayerConverter
from layerwarp.exceptions import LayerwarpError
from layerwarp.srs import DEFAULT_EPSG
from layerwarp.warp.resampling import DEFAULT_RESAMPLING

logger = logging.getLogger(__name__)

_TRUE = {'1', 'true', 't', 'yes', 'y'}
_FALSE = {'0', 'false', 'f', 'no', 'n'}


def parse_subset(text: str) -> List[bool]:
    """Parse a comma-separated selection mask such as ``1,0,1``.

    Raises
    ------
    argparse.ArgumentTypeError
        If an entry is not a recognizable boolean.
    """
    mask = []
    for item in text.split(','):
        token = item.strip().lower()
        if token in _TRUE:
            mask.append(True)
        elif token in _FALSE:
            mask.append(False)
        else:
            raise argparse.ArgumentTypeError(
                f"Invalid subset entry {item!r}; use 1/0 or true/false."
            )
    return mask


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog='layerwarp',
        description=(
            "Reproject every sub-raster of a multi-layer product "
            "(HDF4-EOS, HDF5, netCDF) onto one shared destination grid, "
            "writing one single-band raster per layer."
        ),
    )
    parser.add_argument(
        "source",
        type=Path,
        help="Path to the multi-layer source container.",
    )
    parser.add_argument(
        "--prefix",
        default=None,
        help="Output file name prefix; files are named PREFIX_LAYER.EXT.",
    )
    srs = parser.add_mutually_exclusive_group()
    srs.add_argument(
        "--epsg",
        type=int,
        default=None,
        help=f"Destination EPSG code (default: {DEFAULT_EPSG}).",
    )
    srs.add_argument(
        "--wkt",
        default=None,
        help="Destination spatial reference as a WKT string.",
    )
    parser.add_argument(
        "--resolution",
        type=float,
        default=None,
        help="Output pixel size in destination units (default: natural).",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        default=DEFAULT_FORMAT,
        help=f"GDAL output driver short name (default: {DEFAULT_FORMAT}).",
    )
    parser.add_argument(
        "--resampling",
        default=DEFAULT_RESAMPLING,
        help=(
            "Resampling method: AVERAGE, BILINEAR, LANCZOS, MODE, CUBIC, "
            "CUBIC_SPLINE; anything else is nearest neighbour."
        ),
    )
    parser.add_argument(
        "--subset",
        type=parse_subset,
        default=None,
        help="Comma-separated layer mask in enumeration order, e.g. 1,0,1.",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the sub-rasters of SOURCE and exit.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a conversion. Returns the process exit code."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.list:
            for ref in list_subrasters(args.source):
                print(f"{ref.index:3d}  {ref.name}  {ref.identifier}")
            return 0

        job = ConversionJob.create(
            args.source,
            args.prefix,
            subset=args.subset,
            resolution=args.resolution,
            output_format=args.output_format,
            epsg=args.epsg,
            wkt=args.wkt,
            resampling=args.resampling,
        )
        written = LayerConverter(job).run()
    except LayerwarpError as e:
        logger.error("%s", e)
        return 1

    logger.info("Wrote %d file(s)", len(written))
    return 0
