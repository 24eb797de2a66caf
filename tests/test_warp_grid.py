# -*- coding: utf-8 -*-
"""
Destination Grid Tests - Bounding box, grid invariants and grid derivation.

Uses synthetic GeoTIFF files created with rasterio as reference
sub-rasters.

Dependencies
------------
pytest
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

import numpy as np
import pytest

rasterio = pytest.importorskip("rasterio")

from rasterio.crs import CRS
from rasterio.enums import Resampling
from rasterio.transform import Affine, from_bounds
from rasterio.vrt import WarpedVRT

from layerwarp.exceptions import ConfigurationError, RasterIOError
from layerwarp.warp.grid import (
    ERROR_THRESHOLD,
    DestinationGrid,
    bounding_box,
    build_destination_grid,
    grid_for_resolution,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

def _write_tiff(path, data, crs, transform, nodata=None):
    with rasterio.open(
        str(path), 'w', driver='GTiff',
        height=data.shape[0], width=data.shape[1], count=1,
        dtype=data.dtype.name, crs=crs, transform=transform,
        nodata=nodata,
    ) as ds:
        ds.write(data, 1)
    return path


@pytest.fixture
def geographic_tiff(tmp_path):
    """100x120 float32 GeoTIFF in EPSG:4326 over northern Italy."""
    data = np.random.rand(100, 120).astype(np.float32)
    transform = from_bounds(10.0, 45.0, 11.2, 46.0, 120, 100)
    return _write_tiff(
        tmp_path / "geographic.tif", data, 'EPSG:4326', transform
    )


@pytest.fixture
def mercator_tiff(tmp_path):
    """1000x1000 uint8 GeoTIFF in EPSG:3857 at 500 m pixels."""
    data = (np.arange(1000 * 1000) % 251).astype(np.uint8)
    data = data.reshape(1000, 1000)
    transform = Affine(500.0, 0.0, 1_000_000.0, 0.0, -500.0, 5_500_000.0)
    return _write_tiff(
        tmp_path / "mercator.tif", data, 'EPSG:3857', transform
    )


@pytest.fixture
def strip_tiff(tmp_path):
    """1000x10 GeoTIFF in EPSG:3857: wide in X, narrow in Y."""
    data = np.ones((10, 1000), dtype=np.uint8)
    transform = Affine(500.0, 0.0, 0.0, 0.0, -500.0, 100_000.0)
    return _write_tiff(
        tmp_path / "strip.tif", data, 'EPSG:3857', transform
    )


def _vrt_grid(path, crs):
    with rasterio.open(str(path)) as src:
        with WarpedVRT(
            src, crs=crs, resampling=Resampling.nearest,
            tolerance=ERROR_THRESHOLD,
        ) as vrt:
            return vrt.width, vrt.height, vrt.transform.to_gdal()


# ---------------------------------------------------------------------------
# bounding_box
# ---------------------------------------------------------------------------

class TestBoundingBox:

    @pytest.mark.parametrize("ox, px, oy, py, w, h", [
        (0.0, 1.0, 0.0, -1.0, 10, 20),
        (-180.0, 0.05, 90.0, -0.05, 7200, 3600),
        (1_000_000.0, 500.0, 5_500_000.0, -500.0, 1000, 1000),
        (12.5, 0.25, -3.0, -0.5, 3, 1),
    ])
    def test_axis_aligned(self, ox, px, oy, py, w, h):
        """Axis-aligned grids give (ox, oy + py*H) .. (ox + px*W, oy)."""
        min_x, min_y, max_x, max_y = bounding_box(
            w, h, (ox, px, 0.0, oy, 0.0, py)
        )
        assert min_x == pytest.approx(ox)
        assert min_y == pytest.approx(oy + py * h)
        assert max_x == pytest.approx(ox + px * w)
        assert max_y == pytest.approx(oy)

    def test_rotated_uses_all_corners(self):
        """Rotated grid envelope covers corners a two-point box would miss."""
        # 10x10 grid rotated so X also depends on row and Y on column
        gt = (100.0, 1.0, 0.5, 200.0, 0.5, -1.0)
        min_x, min_y, max_x, max_y = bounding_box(10, 10, gt)
        assert min_x == pytest.approx(100.0)
        assert max_x == pytest.approx(115.0)
        assert min_y == pytest.approx(190.0)
        assert max_y == pytest.approx(205.0)

    def test_empty_grid_is_a_point(self):
        assert bounding_box(0, 0, (5.0, 1.0, 0.0, 7.0, 0.0, -1.0)) == (
            5.0, 7.0, 5.0, 7.0
        )


# ---------------------------------------------------------------------------
# DestinationGrid
# ---------------------------------------------------------------------------

class TestDestinationGrid:

    def test_properties(self):
        grid = DestinationGrid(4, 2, (10, 2, 0, 20, 0, -2))
        assert grid.pixel_size == (2.0, -2.0)
        assert grid.bounds == (10.0, 16.0, 18.0, 20.0)
        assert grid.affine == Affine(2.0, 0.0, 10.0, 0.0, -2.0, 20.0)
        assert all(isinstance(c, float) for c in grid.geotransform)

    def test_from_affine_round_trip(self):
        transform = Affine(30.0, 0.0, 500_000.0, 0.0, -30.0, 4_000_000.0)
        grid = DestinationGrid.from_affine(50, 60, transform)
        assert grid.geotransform == (500_000.0, 30.0, 0.0,
                                     4_000_000.0, 0.0, -30.0)
        assert grid.affine == transform

    @pytest.mark.parametrize("width, height, axis", [
        (0, 5, "X"), (5, 0, "Y"), (-1, 5, "X"),
    ])
    def test_rejects_empty_dimension(self, width, height, axis):
        with pytest.raises(ConfigurationError, match=axis):
            DestinationGrid(width, height, (0, 1, 0, 0, 0, -1))

    def test_is_immutable(self):
        grid = DestinationGrid(4, 2, (10, 2, 0, 20, 0, -2))
        with pytest.raises(AttributeError):
            grid.width = 8


# ---------------------------------------------------------------------------
# grid_for_resolution
# ---------------------------------------------------------------------------

class TestGridForResolution:

    def test_origin_and_pixel_size(self):
        gt = (1000.0, 10.0, 0.0, 9000.0, 0.0, -10.0)
        grid = grid_for_resolution(200, 100, gt, 25.0)
        assert grid.geotransform == (1000.0, 25.0, 0.0, 9000.0, 0.0, -25.0)
        assert (grid.width, grid.height) == (80, 40)

    def test_half_pixel_rounds_up(self):
        gt = (0.0, 1.0, 0.0, 0.0, 0.0, -1.0)
        grid = grid_for_resolution(5, 3, gt, 2.0)
        assert (grid.width, grid.height) == (3, 2)

    def test_rotated_source_uses_envelope(self):
        gt = (100.0, 1.0, 0.5, 200.0, 0.5, -1.0)
        grid = grid_for_resolution(10, 10, gt, 1.0)
        assert grid.geotransform[0] == pytest.approx(100.0)
        assert grid.geotransform[3] == pytest.approx(205.0)
        assert (grid.width, grid.height) == (15, 15)

    def test_zero_x_size(self):
        gt = (0.0, 1.0, 0.0, 0.0, 0.0, -1.0)
        with pytest.raises(ConfigurationError, match="X size"):
            grid_for_resolution(10, 10, gt, 1000.0)

    def test_zero_y_size(self):
        gt = (0.0, 1.0, 0.0, 0.0, 0.0, -1.0)
        with pytest.raises(ConfigurationError, match="Y size"):
            grid_for_resolution(1000, 10, gt, 40.0)


# ---------------------------------------------------------------------------
# build_destination_grid
# ---------------------------------------------------------------------------

class TestBuildDestinationGrid:

    @pytest.mark.parametrize("resolution", [None, 0, 0.0])
    def test_auto_grid_matches_warped_view(self, geographic_tiff, resolution):
        """No resolution adopts the warped view's size and transform."""
        dst = CRS.from_epsg(3857)
        width, height, gt = _vrt_grid(geographic_tiff, dst)

        grid = build_destination_grid(
            str(geographic_tiff), dst, resolution=resolution
        )
        assert (grid.width, grid.height) == (width, height)
        assert grid.geotransform == pytest.approx(gt)

    def test_explicit_resolution_keeps_top_left(self, geographic_tiff):
        dst = CRS.from_epsg(3857)
        width, height, gt = _vrt_grid(geographic_tiff, dst)
        min_x, _, _, max_y = bounding_box(width, height, gt)

        grid = build_destination_grid(
            str(geographic_tiff), dst, resolution=2000.0
        )
        assert grid.geotransform[0] == pytest.approx(min_x)
        assert grid.geotransform[3] == pytest.approx(max_y)
        assert grid.pixel_size == (2000.0, -2000.0)
        assert grid.geotransform[2] == 0.0
        assert grid.geotransform[4] == 0.0

    def test_coarser_resolution_same_extent(self, mercator_tiff):
        """1000x1000 at 500 m regridded at 1000 m gives 500x500."""
        dst = CRS.from_epsg(3857)
        grid = build_destination_grid(
            str(mercator_tiff), dst, resolution=1000.0
        )
        assert (grid.width, grid.height) == (500, 500)

        native = (1_000_000.0, 5_000_000.0, 1_500_000.0, 5_500_000.0)
        for got, expected in zip(grid.bounds, native):
            assert abs(got - expected) < 1000.0

    def test_resolution_too_large_for_x(self, mercator_tiff):
        with pytest.raises(ConfigurationError, match="X size"):
            build_destination_grid(
                str(mercator_tiff), CRS.from_epsg(3857), resolution=1e9
            )

    def test_resolution_too_large_for_y(self, strip_tiff):
        """Extent 500 km by 5 km at 20 km pixels: Y rounds to zero."""
        with pytest.raises(ConfigurationError, match="Y size"):
            build_destination_grid(
                str(strip_tiff), CRS.from_epsg(3857), resolution=20_000.0
            )

    def test_resampling_mode_accepted(self, geographic_tiff):
        grid = build_destination_grid(
            str(geographic_tiff), CRS.from_epsg(4326),
            resampling=Resampling.bilinear,
        )
        assert grid.width > 0 and grid.height > 0

    def test_missing_reference(self, tmp_path):
        with pytest.raises(RasterIOError, match="missing.tif"):
            build_destination_grid(
                str(tmp_path / "missing.tif"), CRS.from_epsg(3857)
            )
