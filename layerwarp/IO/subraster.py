# -*- coding: utf-8 -*-
"""
Sub-raster Reader - Open one layer of a multi-layer container.

Opens a single sub-raster by its GDAL identifier and exposes what the
reprojection step needs: band 1 pixel type, native CRS and transform,
metadata tags, and the resolved no-data value.

The no-data value comes from the ``_FillValue`` metadata item when the
product carries one (HDF-EOS and netCDF conventions), otherwise from
band 1's own no-data attribute. Neither being present is not an error.

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
from typing import Dict, Optional

# Third-party
import numpy as np
import rasterio
from rasterio.errors import RasterioIOError

# layerwarp internal
from layerwarp.IO.base import RasterReader
from layerwarp.exceptions import RasterIOError

logger = logging.getLogger(__name__)

FILL_VALUE_TAG = '_FillValue'


def resolve_nodata(
    tags: Dict[str, str],
    band_nodata: Optional[float],
) -> Optional[float]:
    """Pick the no-data value for a sub-raster.

    Parameters
    ----------
    tags : Dict[str, str]
        Dataset metadata in the default namespace.
    band_nodata : float, optional
        Band 1's intrinsic no-data value.

    Returns
    -------
    Optional[float]
        ``_FillValue`` parsed as float if present and numeric, else
        ``band_nodata``, else None.
    """
    fill_value = tags.get(FILL_VALUE_TAG)
    if fill_value is not None and fill_value.strip() != '':
        try:
            return float(fill_value)
        except ValueError:
            logger.warning(
                "Ignoring non-numeric %s %r", FILL_VALUE_TAG, fill_value
            )
    if band_nodata is None:
        return None
    return float(band_nodata)


class SubrasterReader(RasterReader):
    """Read-only handle on a single sub-raster.

    Parameters
    ----------
    identifier : str or Path
        GDAL subdataset identifier or plain file path.

    Attributes
    ----------
    metadata : Dict[str, Any]
        ``rows``, ``cols``, ``dtype``, ``crs``, ``transform``,
        ``nodata`` (resolved) and ``tags``.

    Raises
    ------
    RasterIOError
        If the sub-raster cannot be opened.
    """

    def _load_metadata(self) -> None:
        """Open the sub-raster with rasterio."""
        try:
            self.dataset = rasterio.open(self.identifier)
        except RasterioIOError as e:
            raise RasterIOError(
                f"Failed to open sub-raster {self.identifier}: {e}"
            ) from e

        tags = self.dataset.tags()
        self.metadata = {
            'rows': self.dataset.height,
            'cols': self.dataset.width,
            'dtype': self.dataset.dtypes[0],
            'crs': self.dataset.crs,
            'transform': self.dataset.transform,
            'nodata': resolve_nodata(tags, self.dataset.nodatavals[0]),
            'tags': tags,
        }

    @property
    def nodata(self) -> Optional[float]:
        """Resolved no-data value, or None."""
        return self.metadata['nodata']

    @property
    def tags(self) -> Dict[str, str]:
        """Source metadata key/value pairs (default namespace)."""
        return self.metadata['tags']

    def get_dtype(self) -> np.dtype:
        """Pixel type of band 1.

        Returns
        -------
        np.dtype
        """
        return np.dtype(self.metadata['dtype'])

    def band(self, bidx: int = 1) -> 'rasterio.Band':
        """Band view for ``rasterio.warp.reproject``.

        Parameters
        ----------
        bidx : int
            1-based band index.
        """
        return rasterio.band(self.dataset, bidx)
