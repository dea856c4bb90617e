"""Per-face visibility masks for a surface."""

from __future__ import annotations

import logging
from typing import Callable, NamedTuple, Optional, Sequence, Union

import numpy as np

from gridmesh.exceptions import InvalidMaskValue, MaskLengthMismatch
from gridmesh.mesh.surface import Surface

logger = logging.getLogger(__name__)


class FaceContext(NamedTuple):
    """Position of the face a mask predicate is being asked about.

    Attributes:
        index: Flat invocation index, equal to the face index.
        stack: Grid row of the face's cell. None in unordered mode.
        sector: Grid column of the face's cell. None in unordered mode.
        dim: Surface dimension ``(cols, rows)``.
        far_to_near: True for faces of the second triangle pass.
        loop_stack: Stack counter of the traversal loop that produced the
            face. Equals ``stack`` near to far and ``stack + 1`` far to
            near. None in unordered mode.
        loop_sector: Sector counter of the traversal loop. Equals
            ``sector`` near to far and ``cols - sector`` far to near. None
            in unordered mode.
    """

    index: int
    stack: Optional[int]
    sector: Optional[int]
    dim: tuple[int, int]
    far_to_near: bool = False
    loop_stack: Optional[int] = None
    loop_sector: Optional[int] = None


MaskPredicate = Callable[[FaceContext], Union[bool, int]]


def coerce_mask(bits: Sequence[int] | np.ndarray) -> np.ndarray:
    """Convert a sequence of 0/1 values or booleans into a uint8 mask.

    Raises:
        InvalidMaskValue: If the mask is not one-dimensional or any element
            is not 0, 1, True or False.
    """
    try:
        mask = np.asarray(bits)
    except ValueError as e:
        raise InvalidMaskValue(f"Mask must be a flat sequence: {e}") from e
    if mask.ndim != 1:
        raise InvalidMaskValue(
            f"Mask must be one-dimensional, got shape {mask.shape}"
        )
    if mask.size == 0:
        return np.zeros(0, dtype=np.uint8)
    if mask.dtype == bool:
        return mask.astype(np.uint8)
    if not np.issubdtype(mask.dtype, np.number):
        raise InvalidMaskValue(f"Mask must be numeric, got dtype {mask.dtype}")

    invalid = (mask != 0) & (mask != 1)
    if np.any(invalid):
        bad = mask[invalid][0]
        raise InvalidMaskValue(f"Mask values must be 0 or 1, got {bad!r}")
    return mask.astype(np.uint8)


class Filter:
    """Visibility mask applied to the faces of a surface.

    The filter does not own the surface; it only writes face visibility.
    Every apply() starts from a fully visible surface, so applying the same
    mask twice gives the same result as applying it once.

    Args:
        surface: Surface to filter.

    Example:
        >>> surface = Surface((3, 3), "quads")
        >>> flt = Filter(surface)
        >>> flt.apply_mask([0, 1, 0, 1])
        >>> surface.index_array()[:4].tolist()
        [0, 0, 0, 0]
    """

    def __init__(self, surface: Surface):
        self._surface = surface
        self._mask = np.ones(surface.face_count, dtype=np.uint8)

    @property
    def surface(self) -> Surface:
        """Return the filtered surface."""
        return self._surface

    @property
    def mask(self) -> np.ndarray:
        """Return a copy of the current mask."""
        return self._mask.copy()

    @property
    def is_stale(self) -> bool:
        """Return True if the mask no longer matches the face count."""
        return len(self._mask) != self._surface.face_count

    def set_mask(self, bits: Sequence[int] | np.ndarray) -> None:
        """Store a mask without applying it.

        The length is only checked by apply().
        """
        self._mask = coerce_mask(bits)

    def reset(self) -> None:
        """Replace the mask with an all-visible mask sized to the surface."""
        self._mask = np.ones(self._surface.face_count, dtype=np.uint8)
        self.apply()

    def apply(self) -> None:
        """Write the mask onto the surface's faces.

        Raises:
            MaskLengthMismatch: If the mask length differs from the face
                count. No face is modified in that case.
        """
        faces = self._surface.faces
        if len(self._mask) != len(faces):
            raise MaskLengthMismatch(
                f"Mask length ({len(self._mask)}) must match "
                f"face count ({len(faces)})"
            )

        for face, bit in zip(faces, self._mask):
            face.visible = True  # reset
            face.visible = bool(bit)

        logger.debug(
            "Applied mask: %d of %d faces visible",
            int(self._mask.sum()),
            len(faces),
        )

    def apply_mask(self, bits: Sequence[int] | np.ndarray) -> None:
        """Validate, store and apply a mask in one step.

        Raises:
            InvalidMaskValue: If the mask holds values other than 0 or 1.
            MaskLengthMismatch: If the mask length differs from the face
                count. The previous mask is kept in either case.
        """
        mask = coerce_mask(bits)
        if len(mask) != self._surface.face_count:
            raise MaskLengthMismatch(
                f"Mask length ({len(mask)}) must match "
                f"face count ({self._surface.face_count})"
            )
        self._mask = mask
        self.apply()

    def generate(self, predicate: MaskPredicate, ordered: bool = False) -> None:
        """Generate a mask by calling predicate once per face, then apply it.

        Args:
            predicate: Callable taking a FaceContext and returning 0, 1 or a
                boolean.
            ordered: If False, call predicate face_count times with only the
                flat index. If True, walk the surface in face order
                (counterclockwise, near to far, then far to near for the
                second triangle pass) and pass the cell's stack and sector
                along with the traversal loop counters.

        Raises:
            InvalidMaskValue: If predicate returns anything but 0, 1 or a
                boolean.
        """
        dim = self._surface.dim
        cols = dim[0]

        if ordered:
            contexts = (
                FaceContext(
                    index,
                    stack,
                    sector,
                    dim,
                    far_to_near,
                    stack + 1 if far_to_near else stack,
                    cols - sector if far_to_near else sector,
                )
                for index, (stack, sector, far_to_near) in enumerate(
                    self._surface.cells()
                )
            )
        else:
            contexts = (
                FaceContext(index, None, None, dim)
                for index in range(self._surface.face_count)
            )

        bits = [_as_bit(predicate(context)) for context in contexts]
        self._mask = np.array(bits, dtype=np.uint8)
        self.apply()

    def reverse(self) -> None:
        """Complement the current mask and apply it.

        Raises:
            MaskLengthMismatch: If the current mask is stale.
        """
        self.apply_mask(1 - self._mask)

    def __repr__(self) -> str:
        return (
            f"Filter(mask_length={len(self._mask)}, "
            f"visible={int(self._mask.sum())}, surface={self._surface!r})"
        )


def _as_bit(value) -> int:
    if isinstance(value, (bool, np.bool_)):
        return int(value)
    if value == 0 or value == 1:
        return int(value)
    raise InvalidMaskValue(f"Mask predicate must return 0 or 1, got {value!r}")
