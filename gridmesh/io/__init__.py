"""I/O utilities for index arrays and masks."""

from gridmesh.io.readers import read_mask
from gridmesh.io.writers import load_index_array, save_index_array, to_matrix

__all__ = [
    "read_mask",
    "load_index_array",
    "save_index_array",
    "to_matrix",
]
