"""gridmesh - index topology and face visibility for grid surfaces.

Generates the vertex-index topology of a rectangular grid surface, as quads
or triangles, and applies a per-face visibility mask to control which faces
are emitted.

Example:
    >>> from gridmesh import Session
    >>> session = Session().set_dimension(3, 3).set_mask([0, 1, 0, 1])
    >>> session.surface.index_array().tolist()
    [0, 0, 0, 0, 2, 1, 4, 5, 0, 0, 0, 0, 5, 4, 7, 8]
    >>> matrix, face_count = session.emit()
"""

from gridmesh.config import SurfaceConfig
from gridmesh.exceptions import (
    DataLoadError,
    GridMeshError,
    InvalidDimension,
    InvalidDrawMode,
    InvalidMaskValue,
    MaskError,
    MaskLengthMismatch,
)
from gridmesh.filters import FaceContext, Filter
from gridmesh.mesh import DrawMode, Face, Surface
from gridmesh.session import Emission, Session

__version__ = "0.1.0"

__all__ = [
    # Main API
    "Session",
    "Emission",
    "Surface",
    "Filter",
    "Face",
    "FaceContext",
    "DrawMode",
    "SurfaceConfig",
    # Exceptions
    "GridMeshError",
    "InvalidDimension",
    "InvalidDrawMode",
    "MaskError",
    "MaskLengthMismatch",
    "InvalidMaskValue",
    "DataLoadError",
]
