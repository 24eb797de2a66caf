# -*- coding: utf-8 -*-
"""
Resampling Policy - Map resampling method names to warp-engine modes.

A pure, total lookup. Names are matched case-insensitively; any name not
in the table, including None and the empty string, resolves to
nearest-neighbour. That fallback is the documented default, so a typo
in a method name never stops a conversion.

=====================================  =============================
Name                                   ``rasterio.enums.Resampling``
=====================================  =============================
``AVERAGE``                            ``average``
``BILINEAR``, ``BICUBIC``              ``bilinear``
``LANCZOS``                            ``lanczos``
``MODE``                               ``mode``
``CUBIC_CONVOLUTION``, ``CUBIC``       ``cubic``
``CUBIC_SPLINE``                       ``cubic_spline``
``NEAREST_NEIGHBOR``, anything else    ``nearest``
=====================================  =============================

``BICUBIC`` maps to bilinear, not cubic.

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
from rasterio.enums import Resampling

logger = logging.getLogger(__name__)

DEFAULT_RESAMPLING = 'NEAREST_NEIGHBOR'

_RESAMPLING_MODES: Dict[str, Resampling] = {
    'AVERAGE': Resampling.average,
    'BILINEAR': Resampling.bilinear,
    'BICUBIC': Resampling.bilinear,
    'LANCZOS': Resampling.lanczos,
    'MODE': Resampling.mode,
    'CUBIC_CONVOLUTION': Resampling.cubic,
    'CUBIC': Resampling.cubic,
    'CUBIC_SPLINE': Resampling.cubic_spline,
    'NEAREST_NEIGHBOR': Resampling.nearest,
}


def resolve_resampling(name: Optional[str]) -> Resampling:
    """Resolve a resampling method name.

    Parameters
    ----------
    name : str, optional
        Method name, e.g. ``'bilinear'`` or ``'CUBIC_SPLINE'``.

    Returns
    -------
    Resampling
        Warp-engine mode. Unrecognized names give
        ``Resampling.nearest``.
    """
    key = str(name).strip().upper() if name is not None else ''
    mode = _RESAMPLING_MODES.get(key)
    if mode is None:
        logger.debug(
            "Resampling %r not recognized, using nearest neighbour", name
        )
        return Resampling.nearest
    return mode
