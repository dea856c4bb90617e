"""Index array export utilities."""

from __future__ import annotations

from pathlib import Path

import numpy as np

from gridmesh.exceptions import DataLoadError


def to_matrix(index_array: np.ndarray) -> np.ndarray:
    """Pack a flat index array into a one-plane 32-bit integer matrix.

    The host renderer expects a single row of ``long`` cells, one per index.

    Args:
        index_array: Flat array of non-negative vertex ids.

    Returns:
        Array of shape (1, n) with dtype int32.

    Raises:
        ValueError: If the array is not 1D or holds negative ids.
    """
    index_array = np.asarray(index_array)
    if index_array.ndim != 1:
        raise ValueError("index_array must be 1D")
    if index_array.size and index_array.min() < 0:
        raise ValueError("index_array must not contain negative ids")
    return index_array.astype(np.int32).reshape(1, -1)


def save_index_array(index_array: np.ndarray, path: str | Path) -> None:
    """Save a flat index array as whitespace separated text.

    Args:
        index_array: Flat array of vertex ids.
        path: Output file path.

    Example:
        >>> save_index_array(surface.index_array(), "output/index.txt")
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    np.savetxt(path, np.asarray(index_array, dtype=np.int64).reshape(1, -1), fmt="%d")


def load_index_array(path: str | Path) -> np.ndarray:
    """Load a flat index array written by save_index_array().

    Raises:
        DataLoadError: If the file is missing or malformed.
    """
    path = Path(path)

    if not path.exists():
        raise DataLoadError(f"File not found: {path}")

    try:
        data = np.loadtxt(path, dtype=np.int64, ndmin=1)
    except Exception as e:
        raise DataLoadError(f"Failed to read index array {path}: {e}") from e

    return data.ravel()
