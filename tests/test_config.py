import pytest

from gridmesh.config import SurfaceConfig
from gridmesh.exceptions import InvalidDimension, InvalidDrawMode
from gridmesh.mesh import DrawMode


def test_defaults():
    config = SurfaceConfig()

    assert config.dim == (20, 20)
    assert config.draw_mode is DrawMode.QUAD
    assert config.seed is None


def test_from_dict_round_trip():
    config = SurfaceConfig.from_dict({"dim": [5, 4], "draw_mode": "triangles", "seed": 9})

    assert config.dim == (5, 4)
    assert config.draw_mode is DrawMode.TRI
    assert SurfaceConfig.from_dict(config.to_dict()).to_dict() == config.to_dict()


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ValueError, match="Unknown configuration keys"):
        SurfaceConfig.from_dict({"dim": (3, 3), "colour": "red"})


def test_invalid_values():
    with pytest.raises(InvalidDimension):
        SurfaceConfig(dim=(1, 1))
    with pytest.raises(InvalidDrawMode):
        SurfaceConfig(draw_mode="lines")
    with pytest.raises(ValueError):
        SurfaceConfig(seed="abc")


def test_repr():
    assert repr(SurfaceConfig(dim=(3, 4), seed=2)) == (
        "SurfaceConfig(dim=(3, 4), draw_mode=QUAD, seed=2)"
    )
