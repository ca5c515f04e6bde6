import math

import numpy as np
import pytest

from magmavoxel.camera import Camera, Movement


def _apply(matrix, point):
    out = matrix @ np.array([*point, 1.0])
    return out[:3] / out[3]


def test_defaults_match_source():
    cam = Camera([0.0, 30.0, 30.0])
    assert cam.yaw == -90.0
    assert cam.pitch == 0.0
    assert cam.speed == 3.5
    assert cam.sensitivity == 0.1
    assert np.allclose(cam.front, [0.0, 0.0, -1.0])
    assert np.allclose(cam.up, [0.0, 1.0, 0.0])


def test_position_is_copied():
    start = np.array([1.0, 2.0, 3.0])
    cam = Camera(start)
    cam.process_keyboard(Movement.FORWARD, 1.0)
    assert np.allclose(start, [1.0, 2.0, 3.0])


def test_zero_mouse_movement_looks_down_negative_z():
    cam = Camera([0.0, 0.0, 0.0])
    cam.process_mouse_movement(0.0, 0.0)
    assert np.allclose(cam.front, [0.0, 0.0, -1.0], atol=1e-12)


def test_mouse_movement_scales_by_sensitivity():
    cam = Camera([0.0, 0.0, 0.0])
    cam.process_mouse_movement(100.0, 50.0)
    assert math.isclose(cam.yaw, -90.0 + 100.0 * cam.sensitivity)
    assert math.isclose(cam.pitch, 50.0 * cam.sensitivity)
    assert math.isclose(float(np.linalg.norm(cam.front)), 1.0, rel_tol=1e-12)


@pytest.mark.parametrize("dy,limit", [(10_000.0, 89.0), (-10_000.0, -89.0)])
def test_pitch_is_clamped(dy, limit):
    cam = Camera([0.0, 0.0, 0.0])
    cam.process_mouse_movement(0.0, dy)
    assert cam.pitch == limit
    assert math.isclose(cam.front[1], math.sin(math.radians(limit)), rel_tol=1e-12)


def test_forward_then_backward_returns_home():
    cam = Camera([1.0, 2.0, 3.0])
    cam.process_mouse_movement(123.0, -45.0)
    cam.process_keyboard(Movement.FORWARD, 0.5)
    cam.process_keyboard(Movement.BACKWARD, 0.5)
    assert np.allclose(cam.position, [1.0, 2.0, 3.0])


def test_forward_moves_speed_times_time_along_front():
    cam = Camera([0.0, 0.0, 0.0])
    cam.process_keyboard(Movement.FORWARD, 2.0)
    assert np.allclose(cam.position, cam.front * cam.speed * 2.0)


def test_strafe_is_perpendicular_to_front():
    cam = Camera([0.0, 0.0, 0.0])
    cam.process_keyboard(Movement.RIGHT, 1.0)
    assert math.isclose(float(cam.position @ cam.front), 0.0, abs_tol=1e-12)
    assert cam.position[0] > 0.0
    cam.process_keyboard(Movement.LEFT, 2.0)
    assert cam.position[0] < 0.0


def test_process_keyboard_accepts_enum_values_and_rejects_others():
    cam = Camera([0.0, 0.0, 0.0])
    cam.process_keyboard(Movement.BACKWARD.value, 1.0)
    assert np.allclose(cam.position, -cam.front * cam.speed)
    with pytest.raises(ValueError):
        cam.process_keyboard(17, 1.0)


def test_view_matrix_maps_position_to_origin_and_front_to_minus_z():
    cam = Camera([0.0, 30.0, 30.0])
    cam.process_mouse_movement(40.0, -120.0)
    view = cam.view_matrix()
    assert np.allclose(_apply(view, cam.position), [0.0, 0.0, 0.0], atol=1e-9)
    ahead = _apply(view, cam.position + cam.front)
    assert np.allclose(ahead, [0.0, 0.0, -1.0], atol=1e-9)