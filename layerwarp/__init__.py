# -*- coding: utf-8 -*-
"""
Layerwarp - Reproject multi-layer raster products onto one shared grid.

Converts a multi-layer scientific raster product (MODIS HDF4-EOS, HDF5,
netCDF, ...) into one single-band raster per selected sub-raster, all
reprojected into a target spatial reference on a common destination
grid.

Dependencies
------------
numpy
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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from layerwarp.exceptions import (
    LayerwarpError,
    ConfigurationError,
    RasterIOError,
    ResamplingError,
)
from layerwarp.srs import EpsgCode, WktSrs, destination_srs
from layerwarp.warp import (
    DestinationGrid,
    bounding_box,
    build_destination_grid,
    reproject_layer,
    resolve_resampling,
)
from layerwarp.converter import ConversionJob, LayerConverter, convert

__all__ = [
    'LayerwarpError',
    'ConfigurationError',
    'RasterIOError',
    'ResamplingError',
    'EpsgCode',
    'WktSrs',
    'destination_srs',
    'DestinationGrid',
    'bounding_box',
    'build_destination_grid',
    'reproject_layer',
    'resolve_resampling',
    'ConversionJob',
    'LayerConverter',
    'convert',
]
