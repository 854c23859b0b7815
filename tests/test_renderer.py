import numpy as np
import pytest
import tensorflow as tf

from burningship.renderer import MAX_ITERATION, _escape_step, iterate_field, render_frame
from burningship.viewport import Viewport, coordinate_field


def reference_count(c, max_iterations):
    """Plain per-point loop with early exit."""
    z = 0j
    n = 0
    for _ in range(max_iterations + 1):
        folded = complex(abs(z.real), -abs(z.imag))
        z = folded * folded + c
        if abs(z) > 2.0:
            break
        n += 1
    return min(n, max_iterations)


def test_counts_stay_in_range():
    result = render_frame(Viewport(origin=complex(-0.5, -0.5), zoom=1.0, width=48, height=32))

    assert result.iterations.shape == (32, 48)
    assert result.iterations.dtype == np.int32
    assert result.iterations.min() >= 0
    assert result.iterations.max() <= MAX_ITERATION
    # the view covers both bound and fast-escaping points
    assert result.iterations.max() == MAX_ITERATION
    assert result.iterations.min() == 0


def test_result_carries_its_working_grids():
    viewport = Viewport(origin=0j, zoom=2.0, width=20, height=10)
    result = render_frame(viewport, 30)

    np.testing.assert_array_equal(result.field, coordinate_field(viewport))
    assert result.bounds.width == 20
    assert result.elapsed >= 0.0


def test_origin_never_diverges():
    field = np.array([[0j]])

    assert iterate_field(field)[0, 0] == MAX_ITERATION
    assert iterate_field(field, 5)[0, 0] == 5


@pytest.mark.parametrize("c", [10 + 0j, -10 + 0j, 7 + 8j, 0 - 12j, -3 + 0j])
def test_far_points_escape_on_first_iterate(c):
    assert iterate_field(np.array([[c]]))[0, 0] == 0


def test_magnitude_exactly_two_is_still_live():
    # c = 2: z1 = 2 (live), z2 = 6 (escaped)
    # c = -2: the orbit settles on 2 and never escapes
    counts = iterate_field(np.array([[2 + 0j, -2 + 0j]]))

    assert counts[0, 0] == 1
    assert counts[0, 1] == MAX_ITERATION


def test_matches_scalar_reference():
    viewport = Viewport(origin=complex(-0.4, -0.6), zoom=1.3, width=36, height=24)
    field = coordinate_field(viewport)
    counts = iterate_field(field, 40)
    expected = np.vectorize(lambda c: reference_count(complex(c), 40))(field)

    np.testing.assert_array_equal(counts, expected)


def test_row_partitioned_generation_agrees_with_whole_grid():
    field = coordinate_field(Viewport(origin=complex(-0.5, -0.5), zoom=1.0, width=30, height=20))
    whole = iterate_field(field, 40)
    rows = np.vstack([iterate_field(field[y:y + 1], 40) for y in range(field.shape[0])])

    np.testing.assert_array_equal(whole, rows)


def test_frozen_points_keep_state():
    zs = tf.constant([5 + 5j, 0.5 + 0j], dtype=tf.complex128)
    cs = tf.constant([1 + 0j, 0.1 + 0j], dtype=tf.complex128)
    ns = tf.constant([3, 1], dtype=tf.int32)
    active = tf.constant([False, True])

    zs, ns, active = _escape_step(zs, cs, ns, active)

    assert zs.numpy()[0] == 5 + 5j
    assert ns.numpy().tolist() == [3, 2]
    assert active.numpy().tolist() == [False, True]
    assert zs.numpy()[1] == pytest.approx(0.35 + 0j)
