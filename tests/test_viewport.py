import numpy as np
import pytest

from burningship.viewport import (
    Viewport,
    compute_bounds,
    coordinate_field,
    pixel_index,
    pixel_to_complex,
)


@pytest.fixture
def default_viewport():
    return Viewport(origin=0j, zoom=1.0, width=720, height=480)


def test_default_bounds(default_viewport):
    bounds = compute_bounds(default_viewport)

    assert default_viewport.aspect == 1.5
    assert bounds.left == -3.0
    assert bounds.right == 3.0
    assert bounds.top == 2.0
    assert bounds.bottom == -2.0


def test_corner_pixels(default_viewport):
    bounds = compute_bounds(default_viewport)

    assert pixel_to_complex(bounds, 0, 0) == complex(-3.0, 2.0)
    far_corner = pixel_to_complex(bounds, 719, 479)
    assert far_corner.real == pytest.approx(3.0, abs=bounds.x_step)
    assert far_corner.imag == pytest.approx(-2.0, abs=bounds.y_step)


def test_zoom_and_origin_shrink_and_shift_bounds():
    viewport = Viewport(origin=complex(-1.0, 0.5), zoom=4.0, width=300, height=200)
    bounds = compute_bounds(viewport)

    assert bounds.left == pytest.approx(-1.75)
    assert bounds.right == pytest.approx(-0.25)
    assert bounds.top == pytest.approx(1.0)
    assert bounds.bottom == pytest.approx(0.0)


def test_screen_y_points_down_the_plane(default_viewport):
    bounds = compute_bounds(default_viewport)

    upper = pixel_to_complex(bounds, 10, 10)
    lower = pixel_to_complex(bounds, 10, 11)
    right = pixel_to_complex(bounds, 11, 10)
    assert lower.imag < upper.imag
    assert right.real > upper.real


def test_field_agrees_with_scalar_mapping():
    viewport = Viewport(origin=complex(0.3, -0.2), zoom=2.5, width=40, height=30)
    bounds = compute_bounds(viewport)
    field = coordinate_field(viewport)

    assert field.shape == (30, 40)
    assert field.dtype == np.complex128
    for x, y in [(0, 0), (39, 0), (0, 29), (17, 11), (39, 29)]:
        assert field[y, x] == pixel_to_complex(bounds, x, y)


def test_pixel_index_is_row_major():
    viewport = Viewport(origin=0j, zoom=1.0, width=13, height=7)
    flat = coordinate_field(viewport).reshape(-1)
    bounds = compute_bounds(viewport)

    assert pixel_index(3, 2, 10) == 23
    assert pixel_index(0, 0, 13) == 0
    assert flat[pixel_index(5, 4, 13)] == pixel_to_complex(bounds, 5, 4)


def test_single_pixel_grid_has_zero_step():
    bounds = compute_bounds(Viewport(origin=1 + 1j, zoom=1.0, width=1, height=1))

    assert bounds.x_step == 0.0
    assert bounds.y_step == 0.0


@pytest.mark.parametrize("zoom", [0.0, -1.0, 0.5, 0.999])
def test_zoom_below_floor_rejected(zoom):
    with pytest.raises(ValueError):
        Viewport(origin=0j, zoom=zoom, width=10, height=10)


def test_empty_grid_rejected():
    with pytest.raises(ValueError):
        Viewport(origin=0j, zoom=1.0, width=0, height=10)
