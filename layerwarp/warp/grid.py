# -*- coding: utf-8 -*-
"""
Destination Grid - Shared pixel grid for all converted layers.

Derives one destination grid (size in pixels and affine geotransform)
from a reference sub-raster and a target CRS. The natural grid comes
from a warped virtual view of the reference (GDAL's suggested warp
output). An explicit resolution keeps the ground extent of that natural
grid and recomputes the pixel count, rather than scaling the pixel
count, so rotated or skewed source projections do not drift.

Geotransforms use GDAL coefficient order throughout::

    (origin_x, pixel_size_x, row_rotation,
     origin_y, column_rotation, pixel_size_y)

with ``pixel_size_y`` negative for north-up rasters.

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

# Standard library
import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

# Third-party
import rasterio
from rasterio.crs import CRS
from rasterio.enums import Resampling
from rasterio.errors import RasterioIOError
from rasterio.transform import Affine
from rasterio.vrt import WarpedVRT

# layerwarp internal
from layerwarp.exceptions import (
    ConfigurationError,
    RasterIOError,
    ResamplingError,
)

logger = logging.getLogger(__name__)

# Maximum approximation error, in pixels, for the warp transformer
ERROR_THRESHOLD = 0.125

GeoTransform = Tuple[float, float, float, float, float, float]


def bounding_box(
    width: int,
    height: int,
    geotransform: Sequence[float],
) -> Tuple[float, float, float, float]:
    """Ground-coordinate envelope of a raster grid.

    Maps the four pixel-space corners (0, 0), (0, height), (width, 0)
    and (width, height) through the geotransform and takes the
    componentwise min and max. Valid for rotated grids as well as
    axis-aligned ones.

    Parameters
    ----------
    width : int
        Grid width in pixels.
    height : int
        Grid height in pixels.
    geotransform : Sequence[float]
        Six GDAL-order coefficients.

    Returns
    -------
    Tuple[float, float, float, float]
        ``(min_x, min_y, max_x, max_y)``.
    """
    gt = geotransform
    corners = ((0, 0), (0, height), (width, 0), (width, height))
    xs = [gt[0] + gt[1] * col + gt[2] * row for col, row in corners]
    ys = [gt[3] + gt[4] * col + gt[5] * row for col, row in corners]
    return min(xs), min(ys), max(xs), max(ys)


@dataclass(frozen=True)
class DestinationGrid:
    """Pixel grid shared by every converted layer.

    Attributes
    ----------
    width : int
        Number of columns. Must be positive.
    height : int
        Number of rows. Must be positive.
    geotransform : GeoTransform
        Six GDAL-order coefficients.

    Raises
    ------
    ConfigurationError
        If either dimension is not positive.
    """

    width: int
    height: int
    geotransform: GeoTransform

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ConfigurationError(
                f"Destination grid X size is {self.width} pixels; the "
                f"requested `resolution` does not fit the extent."
            )
        if self.height <= 0:
            raise ConfigurationError(
                f"Destination grid Y size is {self.height} pixels; the "
                f"requested `resolution` does not fit the extent."
            )
        object.__setattr__(
            self, 'geotransform', tuple(float(c) for c in self.geotransform)
        )

    @classmethod
    def from_affine(
        cls, width: int, height: int, transform: Affine
    ) -> 'DestinationGrid':
        """Create a grid from a rasterio ``Affine`` transform."""
        return cls(width, height, transform.to_gdal())

    @property
    def affine(self) -> Affine:
        """Geotransform as a rasterio ``Affine``."""
        return Affine.from_gdal(*self.geotransform)

    @property
    def pixel_size(self) -> Tuple[float, float]:
        """``(pixel_size_x, pixel_size_y)``; Y is negative when north-up."""
        return self.geotransform[1], self.geotransform[5]

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """``(min_x, min_y, max_x, max_y)`` of the grid."""
        return bounding_box(self.width, self.height, self.geotransform)

    def __repr__(self) -> str:
        return (
            f"DestinationGrid(width={self.width}, height={self.height}, "
            f"geotransform={self.geotransform})"
        )


def _pixel_count(minimum: float, maximum: float, resolution: float) -> int:
    """Round a ground span to whole pixels, halves rounding up."""
    return int(math.floor((maximum - minimum) / resolution + 0.5))


def grid_for_resolution(
    width: int,
    height: int,
    geotransform: Sequence[float],
    resolution: float,
) -> DestinationGrid:
    """Regrid an extent at an explicit square pixel size.

    Parameters
    ----------
    width, height : int
        Size of the natural grid in pixels.
    geotransform : Sequence[float]
        Geotransform of the natural grid.
    resolution : float
        Requested pixel size in destination CRS units. Positive.

    Returns
    -------
    DestinationGrid
        Origin at the top-left of the natural grid's envelope, pixel
        size ``(resolution, -resolution)``.

    Raises
    ------
    ConfigurationError
        If the resolution rounds either dimension to zero pixels. The
        X dimension is checked first.
    """
    min_x, min_y, max_x, max_y = bounding_box(width, height, geotransform)
    x_size = _pixel_count(min_x, max_x, resolution)
    y_size = _pixel_count(min_y, max_y, resolution)
    if x_size == 0:
        raise ConfigurationError(
            f"X size of 0 pixels is invalid: resolution {resolution} is "
            f"larger than the X extent {max_x - min_x}."
        )
    if y_size == 0:
        raise ConfigurationError(
            f"Y size of 0 pixels is invalid: resolution {resolution} is "
            f"larger than the Y extent {max_y - min_y}."
        )
    return DestinationGrid(
        x_size, y_size,
        (min_x, resolution, 0.0, max_y, 0.0, -resolution),
    )


def build_destination_grid(
    reference: str,
    dst_crs: CRS,
    resampling: Resampling = Resampling.nearest,
    resolution: Optional[float] = None,
    error_threshold: float = ERROR_THRESHOLD,
) -> DestinationGrid:
    """Derive the destination grid from a reference sub-raster.

    Parameters
    ----------
    reference : str
        Identifier of the reference sub-raster.
    dst_crs : CRS
        Destination spatial reference.
    resampling : Resampling
        Mode for the warped virtual view.
    resolution : float, optional
        Requested pixel size in ``dst_crs`` units. None or 0 adopts the
        natural grid unchanged.
    error_threshold : float
        Approximation tolerance of the warp transformer, in pixels.

    Returns
    -------
    DestinationGrid

    Raises
    ------
    RasterIOError
        If the reference cannot be opened.
    ResamplingError
        If the warp engine cannot build a warped view of it.
    ConfigurationError
        If ``resolution`` yields a zero-sized dimension.
    """
    try:
        src = rasterio.open(reference)
    except RasterioIOError as e:
        raise RasterIOError(
            f"Failed to open reference sub-raster {reference}: {e}"
        ) from e

    with src:
        try:
            vrt = WarpedVRT(
                src,
                crs=dst_crs,
                resampling=resampling,
                tolerance=error_threshold,
            )
        except Exception as e:
            raise ResamplingError(
                f"Not possible to warp reference sub-raster {reference} "
                f"to {dst_crs}: {e}"
            ) from e
        with vrt:
            width, height = vrt.width, vrt.height
            geotransform = vrt.transform.to_gdal()

    logger.debug(
        "Warped view of %s: %dx%d, geotransform %s",
        reference, width, height, geotransform,
    )

    if not resolution:
        return DestinationGrid(width, height, geotransform)
    return grid_for_resolution(width, height, geotransform, resolution)
