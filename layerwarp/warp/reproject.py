# -*- coding: utf-8 -*-
"""
Layer Reprojection - Warp one sub-raster onto the shared destination grid.

For a single sub-raster: open it, resolve its no-data value, create a
single-band destination raster sized to the shared ``DestinationGrid``,
pre-fill it with the no-data value, resample source band 1 into it with
the job's resampling mode and error threshold, then copy the source
metadata across. Source and destination handles are context managed,
so both are released on every exit path.

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
from pathlib import Path
from typing import Optional, TYPE_CHECKING

# Third-party
from rasterio.warp import reproject

# layerwarp internal
from layerwarp.IO.container import SubrasterReference
from layerwarp.IO.subraster import SubrasterReader
from layerwarp.IO.writer import LayerWriter, driver_extension
from layerwarp.exceptions import ResamplingError
from layerwarp.warp.grid import DestinationGrid

if TYPE_CHECKING:
    from layerwarp.converter import ConversionJob

logger = logging.getLogger(__name__)


def output_path(prefix: Optional[str], layer_name: str, extension: str) -> Path:
    """Output file name for a layer.

    Parameters
    ----------
    prefix : str, optional
        Output name prefix. May include a directory component.
    layer_name : str
        Layer name (see ``SubrasterReference.name``).
    extension : str
        File extension without the dot.

    Returns
    -------
    Path
        ``{prefix}_{layer_name}.{extension}``, or
        ``{layer_name}.{extension}`` when no prefix is set.
    """
    if prefix:
        return Path(f"{prefix}_{layer_name}.{extension}")
    return Path(f"{layer_name}.{extension}")


def reproject_layer(
    subraster: SubrasterReference,
    grid: DestinationGrid,
    job: 'ConversionJob',
) -> Path:
    """Reproject one sub-raster into its own output file.

    Parameters
    ----------
    subraster : SubrasterReference
        Layer to convert.
    grid : DestinationGrid
        Shared destination grid. Not modified.
    job : ConversionJob
        Conversion settings (prefix, driver, CRS, resampling).

    Returns
    -------
    Path
        Path of the written raster.

    Raises
    ------
    RasterIOError
        If the sub-raster cannot be opened or the destination created.
    ResamplingError
        If the warp engine fails for this sub-raster.
    """
    dst_crs = job.crs
    path = output_path(
        job.prefix, subraster.name, driver_extension(job.driver)
    )

    with SubrasterReader(subraster.identifier) as reader:
        nodata = reader.nodata
        logger.debug(
            "Layer %d %s: dtype %s, nodata %s",
            subraster.index, subraster.name, reader.get_dtype(), nodata,
        )

        with LayerWriter(
            path,
            driver=job.driver,
            width=grid.width,
            height=grid.height,
            dtype=reader.get_dtype(),
            crs=dst_crs,
            transform=grid.affine,
            nodata=nodata,
        ) as writer:
            destination = writer.blank()
            try:
                reproject(
                    source=reader.band(1),
                    destination=destination,
                    src_transform=reader.metadata['transform'],
                    src_crs=reader.metadata['crs'],
                    src_nodata=nodata,
                    dst_transform=grid.affine,
                    dst_crs=dst_crs,
                    dst_nodata=nodata,
                    init_dest_nodata=False,
                    resampling=job.resampling_mode,
                    tolerance=job.error_threshold,
                )
            except Exception as e:
                raise ResamplingError(
                    f"Not possible to reproject dataset "
                    f"{subraster.identifier}: {e}"
                ) from e
            writer.write(destination)
            writer.update_tags(reader.tags)

    logger.info("Wrote %s (%dx%d)", path, grid.width, grid.height)
    return path
