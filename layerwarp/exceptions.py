# -*- coding: utf-8 -*-
"""
Layerwarp Exception Hierarchy - Domain-specific exceptions for conversions.

Provides a small exception hierarchy that lets callers (the CLI, batch
scripts) catch layerwarp errors distinctly from Python built-in
exceptions. All layerwarp exceptions subclass both ``LayerwarpError``
and the appropriate built-in exception for backward compatibility.

Every error is fatal for a conversion run: there is no retry and no
skip-and-continue mode.

Author
------
Steven Siebert

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


class LayerwarpError(Exception):
    """Base exception for all layerwarp errors."""


class ConfigurationError(LayerwarpError, ValueError):
    """Invalid conversion configuration.

    Raised when no destination spatial reference is given (or two are),
    the output format is not provided by any available driver, or the
    requested resolution yields a zero-sized destination grid.
    """


class RasterIOError(LayerwarpError, OSError):
    """Raster open or create failure.

    Raised when the source container or one of its sub-rasters cannot be
    opened, or when a destination raster cannot be created.
    """


class ResamplingError(LayerwarpError, RuntimeError):
    """Warp engine failure for a given sub-raster.

    The message always names the sub-raster identifier that failed.
    """

