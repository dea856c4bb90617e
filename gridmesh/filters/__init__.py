"""Face visibility filtering."""

from gridmesh.filters import patterns
from gridmesh.filters.filter import FaceContext, Filter, MaskPredicate, coerce_mask

__all__ = ["FaceContext", "Filter", "MaskPredicate", "coerce_mask", "patterns"]
