# -*- coding: utf-8 -*-
"""
Destination Spatial Reference - EPSG code or WKT string, exactly one.

The destination SRS of a conversion is either a numeric EPSG code or a
raw well-known-text string. Each variant is its own frozen dataclass, so
a ``DestinationSRS`` value can never carry both or neither. Use
``destination_srs()`` at the boundary where the two come in as separate
optional options (CLI flags, keyword arguments).

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
from typing import Optional, Union

# Third-party
from rasterio.crs import CRS
from rasterio.errors import CRSError

# layerwarp internal
from layerwarp.exceptions import ConfigurationError

DEFAULT_EPSG = 3857


@dataclass(frozen=True)
class EpsgCode:
    """Destination SRS given as an EPSG code.

    Attributes
    ----------
    code : int
        EPSG identifier, e.g. ``3857``.
    """

    code: int

    def to_crs(self) -> CRS:
        """Build the rasterio CRS.

        Raises
        ------
        ConfigurationError
            If the code is not known to the PROJ database.
        """
        try:
            return CRS.from_epsg(self.code)
        except CRSError as e:
            raise ConfigurationError(
                f"Invalid destination EPSG code {self.code}: {e}"
            ) from e

    def __str__(self) -> str:
        return f"EPSG:{self.code}"


@dataclass(frozen=True)
class WktSrs:
    """Destination SRS given as a well-known-text string.

    Attributes
    ----------
    wkt : str
        WKT1 or WKT2 definition.
    """

    wkt: str

    def to_crs(self) -> CRS:
        """Build the rasterio CRS.

        Raises
        ------
        ConfigurationError
            If the string cannot be parsed as WKT.
        """
        try:
            return CRS.from_wkt(self.wkt)
        except CRSError as e:
            raise ConfigurationError(
                f"Invalid destination WKT: {e}"
            ) from e

    def __str__(self) -> str:
        return self.wkt


DestinationSRS = Union[EpsgCode, WktSrs]


def destination_srs(
    epsg: Optional[int] = None,
    wkt: Optional[str] = None,
) -> DestinationSRS:
    """Select the destination SRS from two mutually exclusive options.

    Parameters
    ----------
    epsg : int, optional
        EPSG code.
    wkt : str, optional
        WKT definition. An empty string counts as absent.

    Returns
    -------
    DestinationSRS
        ``EpsgCode`` or ``WktSrs``.

    Raises
    ------
    ConfigurationError
        If both or neither option is supplied.
    """
    has_wkt = wkt is not None and wkt.strip() != ''
    if epsg is not None and has_wkt:
        raise ConfigurationError(
            "Specify exactly one of `epsg` or `wkt`, not both."
        )
    if epsg is not None:
        return EpsgCode(int(epsg))
    if has_wkt:
        return WktSrs(wkt)
    raise ConfigurationError(
        "A destination spatial reference is required: "
        "specify one of `epsg` or `wkt`."
    )
