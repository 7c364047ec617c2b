"""Tests for camera pan/zoom state."""

import pytest
from gravity_sim.render.camera import Camera, ZOOM_SENSITIVITY


def test_camera_defaults():
    """Test initial camera state."""
    camera = Camera()
    assert camera.scale == 10.0
    assert camera.translation == (0.0, 0.0)
    assert ZOOM_SENSITIVITY == 0.1


def test_zoom_in_and_out():
    """Test that scroll up zooms in and scroll down zooms out."""
    camera = Camera(scale=5.0)
    
    assert camera.zoom(1.0)
    assert camera.scale == pytest.approx(4.9)
    assert camera.zoom(-2.0)
    assert camera.scale == pytest.approx(5.1)


def test_zoom_out_of_bounds_is_ignored():
    """Test that zoom steps leaving [min, max] are rejected."""
    camera = Camera(scale=10.0, min_scale=1.0, max_scale=10.0)
    
    assert not camera.zoom(-1.0)
    assert camera.scale == 10.0
    
    camera = Camera(scale=1.05)
    assert not camera.zoom(1.0)
    assert camera.scale == 1.05
    assert not camera.zoom(0.0)


def test_pan_scales_with_zoom():
    """Test that drag distance is converted to world units by scale."""
    camera = Camera(scale=2.0)
    
    assert camera.pan(10.0, 5.0)
    assert camera.translation == (-20.0, 10.0)
    assert not camera.pan(0.0, 0.0)


def test_update_only_pans_while_pressed():
    """Test per-frame input processing."""
    camera = Camera(scale=3.0)
    
    camera.update(False, [(4.0, 4.0)], [])
    assert camera.translation == (0.0, 0.0)
    
    camera.update(True, [(1.0, 2.0), (1.0, -1.0)], [1.0, 1.0])
    assert camera.scale == pytest.approx(2.8)
    # Zoom is applied before the pan
    assert camera.x == pytest.approx(-2.0 * 2.8)
    assert camera.y == pytest.approx(1.0 * 2.8)


def test_view_limits():
    """Test the visible world rectangle."""
    camera = Camera(scale=2.0, center=(10.0, -5.0))
    x_min, x_max, y_min, y_max = camera.view_limits(800, 600)
    
    assert (x_min, x_max) == (10.0 - 800.0, 10.0 + 800.0)
    assert (y_min, y_max) == (-5.0 - 600.0, -5.0 + 600.0)


def test_invalid_bounds():
    """Test scale bound validation and out-of-range warning."""
    with pytest.raises(ValueError):
        Camera(min_scale=0.0)
    with pytest.raises(ValueError):
        Camera(min_scale=5.0, max_scale=2.0)
    with pytest.raises(ValueError):
        Camera(scale=-5.0)
    with pytest.raises(ValueError):
        Camera(scale=0.0)
    with pytest.warns(UserWarning):
        Camera(scale=20.0)
