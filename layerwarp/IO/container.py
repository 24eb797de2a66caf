# -*- coding: utf-8 -*-
"""
Container Reader - Enumerate the sub-rasters of a multi-layer product.

Opens a multi-subdataset container (HDF4-EOS, HDF5, netCDF, ...) and
lists its sub-rasters in GDAL's enumeration order. A file with no
subdatasets (a plain GeoTIFF, for instance) is treated as a container
holding itself as the only layer.

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
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

# Third-party
import rasterio
from rasterio.errors import RasterioIOError

# layerwarp internal
from layerwarp.IO.base import RasterReader
from layerwarp.exceptions import RasterIOError

# GDAL virtual file systems, e.g. /vsizip/, /vsicurl/, /vsis3/
VSI_PREFIX = "/vsi"


@dataclass(frozen=True)
class SubrasterReference:
    """One addressable layer inside a source container.

    Attributes
    ----------
    identifier : str
        GDAL dataset identifier as produced by the container's
        enumeration, e.g.
        ``HDF4_EOS:EOS_GRID:"MOD13Q1.hdf":MODIS_Grid_16DAY_250m_500m_VI:250m 16 days NDVI``.
        Can be opened on its own.
    index : int
        Ordinal position in the enumeration. The subset mask indexes
        by this position only.
    label : str, optional
        Explicit layer name. Set when the container itself is the only
        layer; otherwise the name comes from the identifier.
    """

    identifier: str
    index: int
    label: Optional[str] = None

    @property
    def name(self) -> str:
        """Human-readable layer name used for output file naming.

        The final colon-delimited component of the identifier, without
        surrounding quotes. HDF5 internal paths keep their group names
        joined with underscores so the name stays a single file name.
        """
        if self.label is not None:
            return self.label
        name = self.identifier.split(':')[-1].strip().strip('"')
        return name.strip('/').replace('/', '_')


class ContainerReader(RasterReader):
    """Open a source container and enumerate its sub-rasters.

    Parameters
    ----------
    filepath : str or Path
        Path to the container file.

    Attributes
    ----------
    subrasters : List[SubrasterReference]
        Sub-raster references in enumeration order.

    Raises
    ------
    RasterIOError
        If the file does not exist or cannot be opened.

    Examples
    --------
    >>> with ContainerReader('MOD13Q1.A2020001.h10v05.006.hdf') as reader:
    ...     for ref in reader.subrasters:
    ...         print(ref.index, ref.name)
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        self.filepath = Path(filepath)
        if (not str(filepath).startswith(VSI_PREFIX)
                and not self.filepath.exists()):
            raise RasterIOError(f"File not found: {self.filepath}")
        self.subrasters: List[SubrasterReference] = []
        super().__init__(filepath)

    def _load_metadata(self) -> None:
        """Open the container and read its subdataset list."""
        try:
            self.dataset = rasterio.open(self.identifier)
        except RasterioIOError as e:
            raise RasterIOError(
                f"Failed to open source container {self.identifier}: {e}"
            ) from e

        names = list(self.dataset.subdatasets)
        if names:
            self.subrasters = [
                SubrasterReference(identifier=name, index=i)
                for i, name in enumerate(names)
            ]
        else:
            self.subrasters = [
                SubrasterReference(
                    identifier=self.identifier,
                    index=0,
                    label=self.filepath.stem,
                )
            ]

        self.metadata = {
            'driver': self.dataset.driver,
            'subdatasets': len(names),
            'tags': self.dataset.tags(),
        }


def list_subrasters(filepath: Union[str, Path]) -> List[SubrasterReference]:
    """Enumerate the sub-rasters of a container.

    Parameters
    ----------
    filepath : str or Path
        Path to the container file.

    Returns
    -------
    List[SubrasterReference]
        References in enumeration order; never empty.
    """
    with ContainerReader(filepath) as reader:
        return list(reader.subrasters)
