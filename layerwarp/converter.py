# -*- coding: utf-8 -*-
"""
Layer Converter - Convert a multi-layer product into reprojected rasters.

``ConversionJob`` holds the immutable configuration of one conversion.
``LayerConverter`` runs it: enumerate the sub-rasters of the source
container, derive the destination grid once from layer 0 (whether or
not layer 0 is selected), then reproject every selected layer onto that
grid, one output file per layer.

Any error stops the run. Files already written for earlier layers stay
on disk.

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
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

# Third-party
from rasterio.crs import CRS
from rasterio.enums import Resampling

# layerwarp internal
from layerwarp.IO.container import SubrasterReference, list_subrasters
from layerwarp.IO.writer import DEFAULT_FORMAT, resolve_driver
from layerwarp.exceptions import ConfigurationError, RasterIOError
from layerwarp.srs import (
    DEFAULT_EPSG,
    DestinationSRS,
    EpsgCode,
    WktSrs,
    destination_srs,
)
from layerwarp.warp.grid import (
    ERROR_THRESHOLD,
    DestinationGrid,
    build_destination_grid,
)
from layerwarp.warp.reproject import reproject_layer
from layerwarp.warp.resampling import DEFAULT_RESAMPLING, resolve_resampling

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionJob:
    """Immutable configuration of one conversion run.

    Attributes
    ----------
    source : Path
        Path to the multi-layer source container.
    dst_srs : DestinationSRS
        ``EpsgCode`` or ``WktSrs``.
    prefix : str, optional
        Output file name prefix.
    subset : Tuple[bool, ...], optional
        Selection mask aligned with the sub-raster enumeration order.
        None selects every layer.
    resolution : float, optional
        Output pixel size in destination CRS units. None or 0 keeps the
        natural warp grid.
    output_format : str
        GDAL driver short name. None or empty selects ``'GTiff'``.
    resampling : str
        Resampling method name, see ``resolve_resampling``.
    error_threshold : float
        Warp approximation tolerance in pixels.

    Derived attributes ``driver``, ``crs`` and ``resampling_mode`` are
    resolved once at construction.

    Raises
    ------
    ConfigurationError
        If the output format is unsupported, the resolution is negative,
        or the destination SRS is invalid.
    """

    source: Path
    dst_srs: DestinationSRS
    prefix: Optional[str] = None
    subset: Optional[Tuple[bool, ...]] = None
    resolution: Optional[float] = None
    output_format: Optional[str] = DEFAULT_FORMAT
    resampling: Optional[str] = DEFAULT_RESAMPLING
    error_threshold: float = ERROR_THRESHOLD
    driver: str = field(init=False)
    crs: CRS = field(init=False, repr=False, compare=False)
    resampling_mode: Resampling = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.dst_srs, (EpsgCode, WktSrs)):
            raise ConfigurationError(
                f"`dst_srs` must be an EpsgCode or WktSrs, "
                f"got {self.dst_srs!r}"
            )
        object.__setattr__(self, 'source', Path(self.source))
        if self.subset is not None:
            object.__setattr__(
                self, 'subset', tuple(bool(b) for b in self.subset)
            )
        if self.resolution is not None and self.resolution < 0:
            raise ConfigurationError(
                f"`resolution` must be positive, got {self.resolution}"
            )
        object.__setattr__(self, 'driver', resolve_driver(self.output_format))
        object.__setattr__(self, 'crs', self.dst_srs.to_crs())
        object.__setattr__(
            self, 'resampling_mode', resolve_resampling(self.resampling)
        )

    @classmethod
    def create(
        cls,
        source: Union[str, Path],
        prefix: Optional[str] = None,
        *,
        subset: Optional[Sequence[bool]] = None,
        resolution: Optional[float] = None,
        output_format: Optional[str] = None,
        epsg: Optional[int] = None,
        wkt: Optional[str] = None,
        resampling: Optional[str] = None,
    ) -> 'ConversionJob':
        """Build a job from loose keyword options.

        With neither ``epsg`` nor ``wkt`` the destination is EPSG:3857.

        Raises
        ------
        ConfigurationError
            If both ``epsg`` and ``wkt`` are given, or any other
            option is invalid.
        """
        if epsg is None and (wkt is None or wkt.strip() == ''):
            srs: DestinationSRS = EpsgCode(DEFAULT_EPSG)
        else:
            srs = destination_srs(epsg=epsg, wkt=wkt)
        return cls(
            source=Path(source),
            dst_srs=srs,
            prefix=prefix,
            subset=tuple(subset) if subset is not None else None,
            resolution=resolution,
            output_format=output_format,
            resampling=resampling or DEFAULT_RESAMPLING,
        )


class LayerConverter:
    """Run a ``ConversionJob``.

    Parameters
    ----------
    job : ConversionJob
        Conversion configuration.

    Attributes
    ----------
    grid : DestinationGrid or None
        Destination grid, available once ``run()`` has derived it.

    Examples
    --------
    >>> job = ConversionJob.create('MOD13Q1.hdf', 'ndvi', epsg=4326,
    ...                            resolution=0.0025)
    >>> written = LayerConverter(job).run()
    """

    def __init__(self, job: ConversionJob) -> None:
        self.job = job
        self.grid: Optional[DestinationGrid] = None

    def subrasters(self) -> List[SubrasterReference]:
        """Enumerate the source container's sub-rasters.

        Raises
        ------
        RasterIOError
            If the container cannot be opened or holds no layers.
        """
        refs = list_subrasters(self.job.source)
        if not refs:
            raise RasterIOError(
                f"No sub-rasters found in {self.job.source}"
            )
        return refs

    def selection(self, count: int) -> Tuple[bool, ...]:
        """Subset mask for ``count`` enumerated layers.

        Defaults to all layers. Mask entries past the last layer are
        ignored; layers past the end of a short mask are not selected.
        """
        subset = self.job.subset
        if subset is None:
            return (True,) * count
        if len(subset) > count:
            logger.warning(
                "Subset mask has %d entries but %s has %d sub-rasters; "
                "ignoring the extra entries",
                len(subset), self.job.source, count,
            )
        return subset[:count]

    def run(self) -> List[Path]:
        """Convert every selected layer.

        Returns
        -------
        List[Path]
            Written output paths, in enumeration order.
        """
        job = self.job
        refs = self.subrasters()
        logger.info(
            "Converting %s: %d sub-rasters to %s",
            job.source, len(refs), job.dst_srs,
        )

        self.grid = build_destination_grid(
            refs[0].identifier,
            job.crs,
            resampling=job.resampling_mode,
            resolution=job.resolution,
            error_threshold=job.error_threshold,
        )
        logger.info("Destination grid: %r", self.grid)

        written: List[Path] = []
        for ref, selected in zip(refs, self.selection(len(refs))):
            if not selected:
                logger.debug("Skipping layer %d %s", ref.index, ref.name)
                continue
            written.append(reproject_layer(ref, self.grid, job))
        return written


def convert(
    source: Union[str, Path],
    prefix: Optional[str] = None,
    **options,
) -> List[Path]:
    """Convert a multi-layer product in one call.

    Parameters
    ----------
    source : str or Path
        Source container path.
    prefix : str, optional
        Output file name prefix.
    **options
        Keyword options of ``ConversionJob.create`` (``subset``,
        ``resolution``, ``output_format``, ``epsg``, ``wkt``,
        ``resampling``).

    Returns
    -------
    List[Path]
        Written output paths.
    """
    job = ConversionJob.create(source, prefix, **options)
    return LayerConverter(job).run()
