"""Readers for mask files."""

from __future__ import annotations

from pathlib import Path

import numpy as np

from gridmesh.exceptions import DataLoadError, InvalidMaskValue
from gridmesh.filters.filter import coerce_mask


def read_mask(path: str | Path, delimiter: str | None = None) -> np.ndarray:
    """Read a visibility mask from a text file.

    Expected format: 0/1 values separated by whitespace or commas, or by
    ``delimiter`` if given. Line breaks are ignored, so a mask may span
    several lines of any length.

    Args:
        path: Path to mask file.
        delimiter: Extra value separator. Default: None (whitespace and
            commas only).

    Returns:
        Mask as a uint8 array.

    Raises:
        DataLoadError: If the file cannot be read or holds values other than
            0 and 1.
    """
    path = Path(path)

    if not path.exists():
        raise DataLoadError(f"File not found: {path}")

    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            text = f.read()

        for separator in {",", delimiter} - {None}:
            text = text.replace(separator, " ")

        # One value per line so rows of different length load as one column
        data = np.loadtxt(text.split(), dtype=np.int64, ndmin=1)
        return coerce_mask(data)

    except (OSError, ValueError, InvalidMaskValue) as e:
        raise DataLoadError(f"Failed to read mask file {path}: {e}") from e
