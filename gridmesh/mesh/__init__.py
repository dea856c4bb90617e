"""Grid surface topology."""

from gridmesh.mesh.face import DrawMode, Face
from gridmesh.mesh.surface import Surface, validate_dim

__all__ = [
    "DrawMode",
    "Face",
    "Surface",
    "validate_dim",
]
