"""Index topology of a rectangular vertex grid."""

from __future__ import annotations

import logging
from numbers import Integral
from typing import Iterator, Sequence

import numpy as np

from gridmesh.exceptions import InvalidDimension
from gridmesh.mesh.face import DrawMode, Face

logger = logging.getLogger(__name__)


def validate_dim(dim: Sequence[int]) -> tuple[int, int]:
    """Check a grid dimension and return it as a ``(cols, rows)`` tuple.

    Args:
        dim: Number of vertices along each axis, ``(cols, rows)``.

    Returns:
        The dimension as a tuple of two ints.

    Raises:
        InvalidDimension: If dim is not two integers, each at least 2.
    """
    try:
        values = tuple(dim)
    except TypeError as e:
        raise InvalidDimension(f"Dimension must be a pair, got {dim!r}") from e

    if len(values) != 2:
        raise InvalidDimension(
            f"Dimension must have 2 components, got {len(values)}"
        )
    for value in values:
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise InvalidDimension(
                f"Dimension components must be integers, got {values!r}"
            )
        if value < 2:
            raise InvalidDimension(
                f"A grid needs at least 2x2 vertices, got {values!r}"
            )
    return int(values[0]), int(values[1])


class Surface:
    """Grid surface made of quad or triangle faces.

    Faces are generated on construction and regenerated whenever the
    dimension or draw mode changes, so ``faces`` always matches the current
    ``(dim, draw_mode)`` pair.

    Args:
        dim: Grid dimension in vertices, ``(cols, rows)``.
        draw_mode: Tessellation style. Accepts anything DrawMode.parse does.

    Example:
        >>> surface = Surface((3, 3), "quads")
        >>> surface.face_count
        4
        >>> surface.index_array()[:4].tolist()
        [1, 0, 3, 4]
    """

    def __init__(
        self,
        dim: Sequence[int] = (20, 20),
        draw_mode: DrawMode | int | str = DrawMode.QUAD,
    ):
        self._dim = validate_dim(dim)
        self._draw_mode = DrawMode.parse(draw_mode)
        self._faces: list[Face] = []
        self.generate()

    @property
    def dim(self) -> tuple[int, int]:
        """Grid dimension in vertices, ``(cols, rows)``."""
        return self._dim

    @property
    def draw_mode(self) -> DrawMode:
        """Current tessellation style."""
        return self._draw_mode

    @property
    def width(self) -> int:
        """Number of vertex ids per face."""
        return self._draw_mode.width

    @property
    def faces(self) -> list[Face]:
        """Faces in traversal order."""
        return self._faces

    @property
    def face_count(self) -> int:
        """Number of faces."""
        return len(self._faces)

    @property
    def cell_count(self) -> int:
        """Number of quad cells in the grid."""
        cols, rows = self._dim
        return (cols - 1) * (rows - 1)

    def set_dim(self, cols: int, rows: int) -> Surface:
        """Set grid dimension and regenerate faces.

        Raises:
            InvalidDimension: If either component is not an integer >= 2.
                The surface is left unchanged.
        """
        self._dim = validate_dim((cols, rows))
        self.generate()
        return self

    def set_draw_mode(self, draw_mode: DrawMode | int | str) -> Surface:
        """Set draw mode and regenerate faces.

        Raises:
            InvalidDrawMode: If the draw mode is unknown. The surface is left
                unchanged.
        """
        self._draw_mode = DrawMode.parse(draw_mode)
        self.generate()
        return self

    def generate(self) -> None:
        """Generate faces for the current draw mode."""
        if self._draw_mode is DrawMode.QUAD:
            self.quad_grid()
        else:
            self.tri_grid()
        logger.debug(
            "Generated %d %s faces for dim %s",
            self.face_count,
            self._draw_mode.name,
            self._dim,
        )

    def quad_grid(self) -> None:
        """Build quad faces, matching jit.gl.mesh @draw_mode quad_grid.

        Stacks run near to far, sectors counterclockwise from 3 o'clock.
        """
        cols, rows = self._dim
        faces = []

        for i in range(rows - 1):
            start = i * cols
            for j in range(cols - 1):
                faces.append(
                    Face(
                        (
                            start + j + 1,
                            start + j,
                            start + j + cols,
                            start + j + cols + 1,
                        )
                    )
                )
        self._faces = faces

    def tri_grid(self) -> None:
        """Build triangle faces, matching jit.gl.mesh @draw_mode tri_grid.

        The first pass covers one half of every cell near to far, the second
        pass covers the other half far to near. Both halves share the
        diagonal between the cell's lower right and upper left vertices.
        """
        cols, rows = self._dim
        faces = []

        # near to far
        for i in range(rows - 1):
            start = i * cols + 1
            for j in range(cols - 1):
                faces.append(
                    Face((start + j, start + j + cols - 1, start + j + cols))
                )

        # far to near
        for i in range(rows - 1, 0, -1):
            start = (i + 1) * cols
            for j in range(cols, 1, -1):
                faces.append(
                    Face((start - j - cols, start - j, start - j - cols + 1))
                )
        self._faces = faces

    def cells(self) -> Iterator[tuple[int, int, bool]]:
        """Yield the grid cell of every face in face order.

        Yields:
            Tuples of ``(stack, sector, far_to_near)``. ``far_to_near`` is
            True only for the second triangle pass.
        """
        cols, rows = self._dim

        for stack in range(rows - 1):
            for sector in range(cols - 1):
                yield stack, sector, False

        if self._draw_mode is DrawMode.TRI:
            for stack in range(rows - 2, -1, -1):
                for sector in range(cols - 1):
                    yield stack, sector, True

    def visibility(self) -> np.ndarray:
        """Return per-face visibility as a boolean array."""
        return np.fromiter(
            (face.visible for face in self._faces),
            dtype=bool,
            count=self.face_count,
        )

    def index_array(self) -> np.ndarray:
        """Return the flat index array, respecting face visibility.

        Hidden faces contribute a run of zeros of the same width, so the
        length is always ``face_count * width``.

        Returns:
            Integer array of shape ``(face_count * width,)``.
        """
        if not self._faces:
            return np.zeros(0, dtype=np.int64)

        indices = np.array([face.indices for face in self._faces], dtype=np.int64)
        visible = self.visibility()
        return np.where(visible[:, None], indices, 0).ravel()

    def get_surface_info(self) -> dict:
        """Return information about the surface.

        Returns:
            Dictionary with dimension, draw mode and face statistics.
        """
        visible = self.visibility()
        return {
            "dim": self._dim,
            "draw_mode": self._draw_mode.name,
            "face_count": self.face_count,
            "visible_faces": int(visible.sum()),
            "index_count": self.face_count * self.width,
        }

    def __repr__(self) -> str:
        return (
            f"Surface(dim={self._dim}, draw_mode={self._draw_mode.name}, "
            f"face_count={self.face_count})"
        )
