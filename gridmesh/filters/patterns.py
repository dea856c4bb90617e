"""Procedural mask predicates.

Each factory returns a predicate for Filter.generate(). ``ORDERED`` records
the traversal each pattern is meant to run with.
"""

from __future__ import annotations

import numpy as np

from gridmesh.filters.filter import FaceContext, MaskPredicate


def fill() -> MaskPredicate:
    """Show every face."""

    def predicate(context: FaceContext) -> int:
        return 1

    return predicate


def random(
    density: float = 1.0,
    rng: np.random.Generator | int | None = None,
) -> MaskPredicate:
    """Show a random subset of faces.

    Each face is shown when ``u ** (1 / density)`` rounds to 1, where ``u`` is
    drawn uniformly from [0, 1). A density of 1 shows about half the faces;
    larger densities show more, smaller densities show fewer.

    Args:
        density: Positive density of the distribution.
        rng: Numpy Generator, or a seed for a new one.

    Raises:
        ValueError: If density is not positive.
    """
    if density <= 0:
        raise ValueError("Density must be positive")
    if not isinstance(rng, np.random.Generator):
        rng = np.random.default_rng(rng)
    exponent = 1.0 / density

    def predicate(context: FaceContext) -> int:
        # round half up
        return int(rng.random() ** exponent >= 0.5)

    return predicate


def ring(count: int) -> MaskPredicate:
    """Hide every stack whose loop counter is a multiple of count.

    Run in face order; on a radial surface the hidden stacks form rings.
    In triangle mode the far-to-near pass counts stacks from rows - 1 down
    to 1, so its hidden band sits one cell row nearer than the first pass.

    Raises:
        ValueError: If count is less than 1.
    """
    if count < 1:
        raise ValueError("Ring count must be at least 1")

    def predicate(context: FaceContext) -> bool:
        return context.loop_stack % count > 0

    return predicate


def cell_ring(count: int) -> MaskPredicate:
    """Hide every cell row whose index is a multiple of count.

    Like ring(), but both triangles of a cell always share visibility.

    Raises:
        ValueError: If count is less than 1.
    """
    if count < 1:
        raise ValueError("Ring count must be at least 1")

    def predicate(context: FaceContext) -> bool:
        return context.stack % count > 0

    return predicate


def spiral() -> MaskPredicate:
    """Hide faces below a cutoff that steps with the flat face index."""

    def predicate(context: FaceContext) -> int:
        cols, rows = context.dim
        return 0 if context.index < cols * (context.index % rows) else 1

    return predicate


ORDERED = {
    "fill": False,
    "random": False,
    "ring": True,
    "cell_ring": True,
    "spiral": False,
}
