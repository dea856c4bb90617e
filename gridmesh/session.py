"""High-level Session API driving a surface and its filter."""

from __future__ import annotations

import logging
from typing import NamedTuple, Optional, Sequence

import numpy as np

from gridmesh.config import SurfaceConfig
from gridmesh.filters import patterns
from gridmesh.filters.filter import Filter, MaskPredicate
from gridmesh.io.writers import to_matrix
from gridmesh.mesh.face import DrawMode
from gridmesh.mesh.surface import Surface

logger = logging.getLogger(__name__)


class Emission(NamedTuple):
    """Output of one Session.emit() call.

    Attributes:
        matrix: Index array packed for the host, or None if nothing changed
            since the last emission.
        face_count: Current face count, always present.
    """

    matrix: Optional[np.ndarray]
    face_count: int


class Session:
    """One surface, one filter, and the pending-draw state between them.

    A new session has no draw pending. Every method that changes what would
    be drawn marks the session so the next emit() sends a fresh matrix.
    Changing the dimension or draw mode regenerates the surface and resets
    the mask to show every face.

    Args:
        config: Initial settings. Default: SurfaceConfig().

    Example:
        >>> session = (
        ...     Session()
        ...     .set_dimension(3, 3)
        ...     .set_draw_mode("quads")
        ...     .set_mask([0, 1, 0, 1])
        ... )
        >>> matrix, face_count = session.emit()
        >>> face_count
        4
    """

    def __init__(self, config: SurfaceConfig | None = None):
        self._config = config or SurfaceConfig()
        self._surface = Surface(self._config.dim, self._config.draw_mode)
        self._filter = Filter(self._surface)
        self._rng = np.random.default_rng(self._config.seed)
        self._needs_draw = False

    @property
    def config(self) -> SurfaceConfig:
        """Return the initial configuration."""
        return self._config

    @property
    def surface(self) -> Surface:
        """Return the session surface."""
        return self._surface

    @property
    def filter(self) -> Filter:
        """Return the session filter."""
        return self._filter

    @property
    def needs_draw(self) -> bool:
        """Return True if the next emit() will include a matrix."""
        return self._needs_draw

    def set_dimension(self, cols: int, rows: int) -> Session:
        """Set surface dimension and regenerate.

        Raises:
            InvalidDimension: If either component is not an integer >= 2.
        """
        self._surface.set_dim(cols, rows)
        self._filter.reset()
        self._needs_draw = True
        logger.info("Dimension set to %s", self._surface.dim)
        return self

    def set_draw_mode(self, draw_mode: DrawMode | int | str) -> Session:
        """Set surface draw mode ('quads' or 'triangles') and regenerate.

        Raises:
            InvalidDrawMode: If the draw mode is unknown.
        """
        self._surface.set_draw_mode(draw_mode)
        self._filter.reset()
        self._needs_draw = True
        logger.info("Draw mode set to %s", self._surface.draw_mode.name)
        return self

    def set_mask(self, bits: Sequence[int] | np.ndarray) -> Session:
        """Filter the surface with a list of face count 0/1 values.

        Raises:
            MaskLengthMismatch: If the list length differs from face count.
            InvalidMaskValue: If the list holds values other than 0 or 1.
        """
        self._filter.apply_mask(bits)
        self._needs_draw = True
        return self

    def generate_mask(
        self,
        predicate: MaskPredicate,
        ordered: bool = False,
    ) -> Session:
        """Generate and apply a mask from a predicate.

        See Filter.generate() for the meaning of ``ordered``.
        """
        self._filter.generate(predicate, ordered=ordered)
        self._needs_draw = True
        return self

    def fill(self) -> Session:
        """Show the entire surface."""
        return self.generate_mask(patterns.fill(), patterns.ORDERED["fill"])

    def random(self, density: float = 1.0) -> Session:
        """Show a random part of the surface.

        Args:
            density: Density of the distribution. Default: 1.0 (about half).
        """
        return self.generate_mask(
            patterns.random(density, rng=self._rng),
            patterns.ORDERED["random"],
        )

    def reverse(self) -> Session:
        """Show the complement of the current mask."""
        self._filter.reverse()
        self._needs_draw = True
        return self

    def ring(self, count: int) -> Session:
        """Hide every count-th stack, forming rings on a radial surface."""
        return self.generate_mask(patterns.ring(count), patterns.ORDERED["ring"])

    def cell_ring(self, count: int) -> Session:
        """Hide every count-th cell row, both triangles of a cell together."""
        return self.generate_mask(
            patterns.cell_ring(count), patterns.ORDERED["cell_ring"]
        )

    def spiral(self) -> Session:
        """Show the spiral pattern."""
        return self.generate_mask(patterns.spiral(), patterns.ORDERED["spiral"])

    def emit(self) -> Emission:
        """Return the index matrix if a draw is pending, plus the face count.

        Clears the pending-draw flag.
        """
        matrix = None
        if self._needs_draw:
            matrix = to_matrix(self._surface.index_array())
            self._needs_draw = False
            logger.debug("Emitting index matrix of %d cells", matrix.size)
        return Emission(matrix, self._surface.face_count)

    def get_info(self) -> dict:
        """Return an overview of session state.

        Returns:
            Dictionary with mask length, dimension, face count and draw mode.
        """
        info = {"mask_length": len(self._filter.mask)}
        info.update(self._surface.get_surface_info())
        return info
