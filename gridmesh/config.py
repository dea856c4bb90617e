"""Initial settings for a gridmesh session."""

from __future__ import annotations

from typing import Sequence

from gridmesh.mesh.face import DrawMode
from gridmesh.mesh.surface import validate_dim


class SurfaceConfig:
    """Configuration for a Session's surface and random patterns.

    Args:
        dim: Grid dimension in vertices, ``(cols, rows)``. Default: (20, 20).
        draw_mode: Tessellation style. Default: quads.
        seed: Seed for the random pattern generator. None draws fresh
            entropy.

    Raises:
        InvalidDimension: If dim is not two integers >= 2.
        InvalidDrawMode: If draw_mode is unknown.

    Example:
        >>> config = SurfaceConfig(dim=(10, 8), draw_mode="triangles", seed=1)
        >>> config.draw_mode
        <DrawMode.TRI: 3>
    """

    def __init__(
        self,
        dim: Sequence[int] = (20, 20),
        draw_mode: DrawMode | int | str = DrawMode.QUAD,
        seed: int | None = None,
    ):
        self._dim = validate_dim(dim)
        self._draw_mode = DrawMode.parse(draw_mode)
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise ValueError(f"seed must be an int or None, got {seed!r}")
        self._seed = seed

    @classmethod
    def from_dict(cls, data: dict) -> SurfaceConfig:
        """Create configuration from a mapping.

        Recognised keys are 'dim', 'draw_mode' and 'seed'; missing keys take
        their defaults.

        Raises:
            ValueError: If the mapping has unknown keys.
        """
        unknown = set(data) - {"dim", "draw_mode", "seed"}
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**data)

    @property
    def dim(self) -> tuple[int, int]:
        """Grid dimension in vertices."""
        return self._dim

    @property
    def draw_mode(self) -> DrawMode:
        """Tessellation style."""
        return self._draw_mode

    @property
    def seed(self) -> int | None:
        """Random pattern seed."""
        return self._seed

    def to_dict(self) -> dict:
        return {
            "dim": self._dim,
            "draw_mode": self._draw_mode.name.lower(),
            "seed": self._seed,
        }

    def __repr__(self) -> str:
        return (
            f"SurfaceConfig(dim={self._dim}, "
            f"draw_mode={self._draw_mode.name}, seed={self._seed})"
        )
