import numpy as np
import pytest

from gridmesh.exceptions import InvalidMaskValue, MaskLengthMismatch
from gridmesh.filters import FaceContext, Filter, coerce_mask
from gridmesh.mesh import DrawMode, Surface


def test_initial_mask_shows_every_face():
    surface = Surface((4, 4), DrawMode.TRI)
    flt = Filter(surface)

    assert flt.mask.tolist() == [1] * surface.face_count
    assert not flt.is_stale


def test_apply_mask_zeroes_hidden_faces():
    surface = Surface((3, 3), "quads")
    flt = Filter(surface)

    flt.generate(lambda context: 1)
    flt.apply_mask([0, 1, 0, 1])

    assert surface.index_array().tolist() == [
        0, 0, 0, 0, 2, 1, 4, 5, 0, 0, 0, 0, 5, 4, 7, 8,
    ]


def test_apply_is_not_cumulative():
    surface = Surface((3, 3), "quads")
    flt = Filter(surface)

    flt.apply_mask([0, 0, 1, 1])
    flt.apply_mask([1, 1, 0, 0])

    assert surface.visibility().tolist() == [True, True, False, False]


def test_apply_twice_is_idempotent():
    surface = Surface((5, 5), DrawMode.TRI)
    flt = Filter(surface)
    flt.set_mask([i % 3 == 0 for i in range(surface.face_count)])

    flt.apply()
    first = surface.index_array()
    flt.apply()

    np.testing.assert_array_equal(surface.index_array(), first)


def test_apply_rejects_wrong_length_without_touching_faces():
    surface = Surface((3, 3), "quads")
    flt = Filter(surface)
    flt.apply_mask([0, 1, 0, 1])

    flt.set_mask([1, 1, 1])
    with pytest.raises(MaskLengthMismatch):
        flt.apply()

    assert surface.visibility().tolist() == [False, True, False, True]


def test_apply_mask_keeps_previous_mask_on_mismatch():
    surface = Surface((3, 3), "quads")
    flt = Filter(surface)
    flt.apply_mask([1, 0, 1, 0])

    with pytest.raises(MaskLengthMismatch):
        flt.apply_mask([1, 1, 1, 1, 1])

    assert flt.mask.tolist() == [1, 0, 1, 0]


def test_stale_mask_after_regeneration():
    surface = Surface((3, 3), "quads")
    flt = Filter(surface)

    surface.set_dim(4, 4)

    assert flt.is_stale
    with pytest.raises(MaskLengthMismatch):
        flt.apply()
    with pytest.raises(MaskLengthMismatch):
        flt.reverse()


@pytest.mark.parametrize("bits", [[0, 2, 1], [0.5, 1, 0], ["a", "b"], [-1, 0]])
def test_coerce_mask_rejects_non_binary(bits):
    with pytest.raises(InvalidMaskValue):
        coerce_mask(bits)


def test_coerce_mask_accepts_booleans_and_floats():
    assert coerce_mask([True, False]).tolist() == [1, 0]
    assert coerce_mask(np.array([1.0, 0.0])).tolist() == [1, 0]
    assert coerce_mask([]).tolist() == []


def test_generate_unordered_calls_predicate_once_per_face():
    surface = Surface((4, 3), DrawMode.TRI)
    flt = Filter(surface)
    seen = []

    def record(context):
        seen.append(context)
        return context.index % 2

    flt.generate(record)

    assert [c.index for c in seen] == list(range(surface.face_count))
    assert all(c.stack is None and c.sector is None for c in seen)
    assert all(c.dim == (4, 3) for c in seen)
    assert flt.mask.tolist() == [i % 2 for i in range(surface.face_count)]


@pytest.mark.parametrize("dim", [(2, 2), (3, 3), (4, 3), (3, 6)])
@pytest.mark.parametrize("mode", [DrawMode.QUAD, DrawMode.TRI])
def test_generate_ordered_aligns_with_faces(dim, mode):
    surface = Surface(dim, mode)
    flt = Filter(surface)
    cols = dim[0]
    seen = []

    def record(context):
        seen.append(context)
        return 1

    flt.generate(record, ordered=True)

    assert len(seen) == surface.face_count
    for k, (context, face) in enumerate(zip(seen, surface.faces)):
        assert context.index == k
        base = context.stack * cols + context.sector
        assert set(face.indices) <= {base, base + 1, base + cols, base + cols + 1}


def test_generate_ordered_tri_repeats_far_to_near():
    surface = Surface((3, 3), DrawMode.TRI)
    flt = Filter(surface)
    seen = []

    flt.generate(lambda context: seen.append(context) or 1, ordered=True)

    assert [(c.stack, c.sector, c.far_to_near) for c in seen] == [
        (0, 0, False), (0, 1, False), (1, 0, False), (1, 1, False),
        (1, 0, True), (1, 1, True), (0, 0, True), (0, 1, True),
    ]


def test_generate_rejects_bad_predicate_result():
    surface = Surface((3, 3))
    flt = Filter(surface)

    with pytest.raises(InvalidMaskValue):
        flt.generate(lambda context: 2)
    assert flt.mask.tolist() == [1, 1, 1, 1]


def test_generate_accepts_boolean_predicates():
    surface = Surface((3, 3))
    flt = Filter(surface)

    flt.generate(lambda context: context.stack > 0, ordered=True)

    assert flt.mask.tolist() == [0, 0, 1, 1]


def test_reverse_is_an_involution():
    surface = Surface((6, 5), DrawMode.TRI)
    flt = Filter(surface)
    flt.generate(lambda context: context.index % 3 == 0)
    mask = flt.mask
    index_array = surface.index_array()

    flt.reverse()
    assert flt.mask.tolist() == (1 - mask).tolist()
    flt.reverse()

    np.testing.assert_array_equal(flt.mask, mask)
    np.testing.assert_array_equal(surface.index_array(), index_array)


def test_reset_shows_every_face_after_regeneration():
    surface = Surface((3, 3))
    flt = Filter(surface)
    flt.apply_mask([0, 0, 0, 0])

    surface.set_draw_mode("triangles")
    flt.reset()

    assert flt.mask.tolist() == [1] * 8
    assert surface.visibility().all()


def test_face_context_fields():
    context = FaceContext(3, 1, 2, (4, 4))
    assert context.far_to_near is False
    assert context.loop_stack is None
    assert context._asdict() == {
        "index": 3,
        "stack": 1,
        "sector": 2,
        "dim": (4, 4),
        "far_to_near": False,
        "loop_stack": None,
        "loop_sector": None,
    }


def test_generate_ordered_exposes_traversal_loop_counters():
    surface = Surface((3, 3), DrawMode.TRI)
    flt = Filter(surface)
    seen = []

    flt.generate(lambda context: seen.append(context) or 1, ordered=True)

    # near to far: i in 0..1, j in 0..1; far to near: i in 2..1, j in 3..2
    assert [(c.loop_stack, c.loop_sector) for c in seen] == [
        (0, 0), (0, 1), (1, 0), (1, 1),
        (2, 3), (2, 2), (1, 3), (1, 2),
    ]


def test_generate_unordered_has_no_loop_counters():
    surface = Surface((3, 3))
    flt = Filter(surface)
    seen = []

    flt.generate(lambda context: seen.append(context) or 1)

    assert all(c.loop_stack is None and c.loop_sector is None for c in seen)


@pytest.mark.parametrize(
    "bits",
    [[[0, 1], [0, 1]], np.ones((2, 2), dtype=int), [[0, 1], [1]], 1],
)
def test_coerce_mask_rejects_non_flat_masks(bits):
    with pytest.raises(InvalidMaskValue):
        coerce_mask(bits)
