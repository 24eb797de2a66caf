# -*- coding: utf-8 -*-
"""
Warp Sub-module - Destination grid derivation and per-layer reprojection.

Key Functions
-------------
resolve_resampling
    Case-insensitive, total mapping from method names to
    ``rasterio.enums.Resampling``; unknown names give nearest-neighbour.
bounding_box
    Ground envelope of a pixel grid from its four corners.
build_destination_grid
    Natural warp grid of a reference sub-raster in the destination CRS,
    optionally regridded at an explicit resolution over the same extent.
reproject_layer
    Warp one sub-raster onto a ``DestinationGrid`` and write it.

Dependencies
------------
rasterio

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

from layerwarp.warp.resampling import DEFAULT_RESAMPLING, resolve_resampling
from layerwarp.warp.grid import (
    ERROR_THRESHOLD,
    DestinationGrid,
    bounding_box,
    build_destination_grid,
    grid_for_resolution,
)
from layerwarp.warp.reproject import output_path, reproject_layer

__all__ = [
    'DEFAULT_RESAMPLING',
    'resolve_resampling',
    'ERROR_THRESHOLD',
    'DestinationGrid',
    'bounding_box',
    'build_destination_grid',
    'grid_for_resolution',
    'output_path',
    'reproject_layer',
]
