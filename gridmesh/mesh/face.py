"""Face records and draw modes."""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from gridmesh.exceptions import InvalidDrawMode


class DrawMode(Enum):
    """Tessellation style of a surface.

    The value of each member is the number of vertex indices per face.
    """

    QUAD = 4
    TRI = 3

    @property
    def width(self) -> int:
        """Number of vertex indices per face."""
        return self.value

    @classmethod
    def parse(cls, value: DrawMode | int | str) -> DrawMode:
        """Convert a draw mode name, width or member into a DrawMode.

        Args:
            value: A DrawMode, a face width (4 or 3), or one of the names
                'quad', 'quads', 'tri', 'triangle', 'triangles'.

        Returns:
            Matching DrawMode member.

        Raises:
            InvalidDrawMode: If the value does not name a draw mode.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            mode = _DRAW_MODE_NAMES.get(value.strip().lower())
            if mode is not None:
                return mode
        elif isinstance(value, int) and not isinstance(value, bool):
            for mode in cls:
                if mode.value == value:
                    return mode
        raise InvalidDrawMode(
            f"Unknown draw mode: {value!r}. Supported: 'quads', 'triangles'"
        )


_DRAW_MODE_NAMES = {
    "quad": DrawMode.QUAD,
    "quads": DrawMode.QUAD,
    "tri": DrawMode.TRI,
    "triangle": DrawMode.TRI,
    "triangles": DrawMode.TRI,
}


class Face:
    """One polygon of a tessellated surface.

    Args:
        indices: Vertex ids in winding order. Four for a quad, three for a
            triangle.
        visible: Whether the face is emitted into the index array.
    """

    __slots__ = ("_indices", "visible")

    def __init__(self, indices: Sequence[int], visible: bool = True):
        self._indices = tuple(int(i) for i in indices)
        self.visible = bool(visible)

    @property
    def indices(self) -> tuple[int, ...]:
        """Vertex ids of the face."""
        return self._indices

    @property
    def width(self) -> int:
        """Number of vertex ids in the face."""
        return len(self._indices)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Face):
            return NotImplemented
        return self._indices == other._indices and self.visible == other.visible

    def __repr__(self) -> str:
        return f"Face(indices={list(self._indices)}, visible={self.visible})"
