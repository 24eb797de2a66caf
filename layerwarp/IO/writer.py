# -*- coding: utf-8 -*-
"""
Layer Writer - Create single-band destination rasters.

Creates one single-band raster per converted layer through any GDAL
output driver available to rasterio, selected by its short name
(``GTiff``, ``HFA``, ``netCDF``, ...). The destination CRS, geotransform
and no-data value are fixed at creation time.

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
from pathlib import Path
from typing import Any, Dict, Optional, Union

# Third-party
import numpy as np
import rasterio
from rasterio.crs import CRS
from rasterio.drivers import raster_driver_extensions
from rasterio.transform import Affine

# layerwarp internal
from layerwarp.IO.base import RasterWriter
from layerwarp.exceptions import ConfigurationError, RasterIOError

DEFAULT_FORMAT = 'GTiff'


def resolve_driver(name: Optional[str] = None) -> str:
    """Map an output format name to an available GDAL driver.

    Parameters
    ----------
    name : str, optional
        Driver short name, matched case-insensitively. None or empty
        selects ``'GTiff'``.

    Returns
    -------
    str
        Canonical driver short name.

    Raises
    ------
    ConfigurationError
        If no registered driver has that name.
    """
    if name is None or name.strip() == '':
        name = DEFAULT_FORMAT
    with rasterio.Env() as env:
        drivers = env.drivers()
    for driver in drivers:
        if driver.lower() == name.strip().lower():
            return driver
    raise ConfigurationError(
        f"Output format '{name}' is not supported by the available "
        f"GDAL drivers. Check the GDAL installation or the spelling "
        f"of `output_format`."
    )


def driver_extension(driver: str) -> str:
    """File extension (without dot) for a driver's output files.

    ``GTiff`` maps to ``tif``. Drivers without a registered extension
    fall back to the lower-cased driver name.

    Parameters
    ----------
    driver : str
        Driver short name.

    Returns
    -------
    str
    """
    extensions = sorted(
        ext for ext, drv in raster_driver_extensions().items()
        if drv == driver
    )
    if extensions:
        return extensions[0]
    return driver.lower()


class LayerWriter(RasterWriter):
    """Create and write a single-band destination raster.

    The dataset is created on construction, so a creation failure
    surfaces before any resampling work starts.

    Parameters
    ----------
    filepath : str or Path
        Output file path.
    driver : str
        GDAL driver short name.
    width : int
        Raster width in pixels.
    height : int
        Raster height in pixels.
    dtype : str or np.dtype
        Pixel type of the single band.
    crs : rasterio.crs.CRS
        Destination spatial reference.
    transform : Affine
        Destination geotransform.
    nodata : float, optional
        No-data value of the band. None leaves it unset.
    metadata : Dict[str, Any], optional
        Metadata tags written on close.

    Raises
    ------
    RasterIOError
        If the destination raster cannot be created.

    Examples
    --------
    >>> with LayerWriter('out.tif', 'GTiff', 500, 400, 'int16', crs,
    ...                  transform, nodata=-3000) as writer:
    ...     buffer = writer.blank()
    ...     writer.write(buffer)
    """

    def __init__(
        self,
        filepath: Union[str, Path],
        driver: str,
        width: int,
        height: int,
        dtype: Union[str, np.dtype],
        crs: CRS,
        transform: Affine,
        nodata: Optional[float] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(filepath, metadata)
        self.nodata = nodata
        self.dtype = np.dtype(dtype)
        try:
            self.dataset = rasterio.open(
                str(self.filepath), 'w',
                driver=driver,
                width=width,
                height=height,
                count=1,
                dtype=self.dtype.name,
                crs=crs,
                transform=transform,
                nodata=nodata,
            )
        except Exception as e:
            raise RasterIOError(
                f"Failed to create dataset {self.filepath}: {e}"
            ) from e

    def blank(self) -> np.ndarray:
        """Destination-sized buffer pre-filled with the no-data value.

        Pixels the warp never touches keep the no-data value instead of
        reading as valid zeros. Without a no-data value the buffer is
        zero-filled.

        Returns
        -------
        np.ndarray
            Shape ``(height, width)``, dtype of the band.
        """
        shape = (self.dataset.height, self.dataset.width)
        if self.nodata is None:
            return np.zeros(shape, dtype=self.dtype)
        return np.full(shape, self.nodata, dtype=self.dtype)

    def write(self, data: np.ndarray) -> None:
        """Write the full band.

        Parameters
        ----------
        data : np.ndarray
            Array with shape ``(height, width)``.

        Raises
        ------
        RasterIOError
            If the array shape does not match or GDAL fails to write.
        """
        expected = (self.dataset.height, self.dataset.width)
        if data.shape != expected:
            raise RasterIOError(
                f"Data shape {data.shape} does not match destination "
                f"{self.filepath} shape {expected}"
            )
        try:
            self.dataset.write(data.astype(self.dtype, copy=False), 1)
        except Exception as e:
            raise RasterIOError(
                f"Failed to write {self.filepath}: {e}"
            ) from e

    def update_tags(self, tags: Dict[str, Any]) -> None:
        """Queue metadata tags for the destination dataset."""
        self.metadata.update(tags)

    def close(self) -> None:
        """Write queued tags, flush and close the dataset."""
        if getattr(self, 'dataset', None) is None:
            return
        try:
            if self.metadata:
                self.dataset.update_tags(
                    **{str(k): str(v) for k, v in self.metadata.items()}
                )
        finally:
            self.dataset.close()
            self.dataset = None
