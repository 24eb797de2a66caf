# -*- coding: utf-8 -*-
"""
IO Module - Raster access for multi-layer conversions.

Opens source containers and their sub-rasters, and creates single-band
destination rasters through rasterio (GDAL). Every handle is a context
manager.

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

from layerwarp.IO.base import RasterReader, RasterWriter
from layerwarp.IO.container import (
    ContainerReader,
    SubrasterReference,
    list_subrasters,
)
from layerwarp.IO.subraster import SubrasterReader, resolve_nodata
from layerwarp.IO.writer import (
    DEFAULT_FORMAT,
    LayerWriter,
    driver_extension,
    resolve_driver,
)

__all__ = [
    'RasterReader',
    'RasterWriter',
    'ContainerReader',
    'SubrasterReference',
    'list_subrasters',
    'SubrasterReader',
    'resolve_nodata',
    'DEFAULT_FORMAT',
    'LayerWriter',
    'driver_extension',
    'resolve_driver',
]
