# -*- coding: utf-8 -*-
"""
IO Base Classes - Abstract scoped handles for raster readers and writers.

Defines abstract base classes for opening source rasters and creating
destination rasters. Every handle is a context manager, so the
underlying GDAL dataset is released on every exit path, including
error paths.

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

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Union


class RasterReader(ABC):
    """
    Abstract base class for raster readers.

    Concrete readers open their dataset in ``_load_metadata`` and fill
    ``self.metadata``; ``close`` releases the dataset.

    Attributes
    ----------
    identifier : str
        Path or GDAL dataset identifier (e.g. an HDF4 subdataset string).
        Not necessarily a filesystem path, so existence is not checked
        here.
    metadata : Dict[str, Any]
        Raster metadata extracted on open.
    dataset : rasterio.DatasetReader or None
        Open rasterio dataset, ``None`` once closed.
    """

    def __init__(self, identifier: Union[str, Path]) -> None:
        """
        Initialize the reader and open the dataset.

        Parameters
        ----------
        identifier : Union[str, Path]
            Path or GDAL dataset identifier.
        """
        self.identifier = str(identifier)
        self.dataset = None
        self.metadata: Dict[str, Any] = {}
        self._load_metadata()

    @abstractmethod
    def _load_metadata(self) -> None:
        """
        Open the dataset and populate ``self.metadata``.

        Raises
        ------
        RasterIOError
            If the dataset cannot be opened.
        """
        pass

    def close(self) -> None:
        """Close the rasterio dataset if it is open."""
        if self.dataset is not None:
            self.dataset.close()
            self.dataset = None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False


class RasterWriter(ABC):
    """
    Abstract base class for raster writers.

    Attributes
    ----------
    filepath : Path
        Path where the raster is written.
    metadata : Dict[str, Any]
        Metadata tags to write with the raster.
    """

    def __init__(
        self,
        filepath: Union[str, Path],
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Initialize the raster writer.

        Parameters
        ----------
        filepath : Union[str, Path]
            Path where the raster will be written.
        metadata : Optional[Dict[str, Any]], default=None
            Metadata tags to include in the output file.
        """
        self.filepath = Path(filepath)
        self.metadata = dict(metadata or {})

    @abstractmethod
    def write(self, data: Any) -> None:
        """
        Write raster data to the file.

        Parameters
        ----------
        data : np.ndarray
            Pixel data to write.

        Raises
        ------
        RasterIOError
            If writing fails.
        """
        pass

    def close(self) -> None:
        """
        Close the writer and release resources.

        Default implementation does nothing. Override if the writer
        maintains open file handles.
        """
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False
