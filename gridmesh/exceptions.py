"""Custom exceptions for the gridmesh package."""


class GridMeshError(Exception):
    """Base exception for gridmesh package."""

    pass


class InvalidDimension(GridMeshError):
    """Grid dimension is not a pair of integers >= 2."""

    pass


class InvalidDrawMode(GridMeshError):
    """Draw mode is neither quads nor triangles."""

    pass


class MaskError(GridMeshError):
    """Visibility mask cannot be applied."""

    pass


class MaskLengthMismatch(MaskError):
    """Mask length does not match the surface face count."""

    pass


class InvalidMaskValue(MaskError):
    """Mask contains a value other than 0 or 1."""

    pass


class DataLoadError(GridMeshError):
    """Failed to load data from file."""

    pass
