"""4x4 homogeneous transforms for a right-handed, OpenGL-style clip space.

Matrices are row-major numpy arrays meant to multiply column vectors,
so a point ``p`` is transformed as ``matrix @ [x, y, z, 1]``.
"""

from __future__ import annotations

import math

import numpy as np


def _vec3(v) -> np.ndarray:
    arr = np.asarray(v, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {arr.shape}")
    return arr


def normalize(v) -> np.ndarray:
    """Return ``v`` scaled to unit length."""
    arr = np.asarray(v, dtype=float)
    length = float(np.linalg.norm(arr))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return arr / length


def look_at(eye, center, up) -> np.ndarray:
    """View matrix placing the eye at the origin, looking down -Z."""
    eye = _vec3(eye)
    center = _vec3(center)
    up = _vec3(up)

    f = normalize(center - eye)
    s = normalize(np.cross(f, up))
    u = np.cross(s, f)

    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -float(s @ eye)
    m[1, 3] = -float(u @ eye)
    m[2, 3] = float(f @ eye)
    return m


def perspective(fovy, aspect, near, far) -> np.ndarray:
    """Perspective projection; ``fovy`` is in radians, depth maps to [-1, 1]."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    if tan_half == 0:
        raise ValueError("field of view must be non-zero")

    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


def translation(offset) -> np.ndarray:
    """Matrix that moves points by ``offset``."""
    m = np.identity(4)
    m[:3, 3] = _vec3(offset)
    return m


def scaling(factors) -> np.ndarray:
    """Matrix that scales each axis by the matching entry of ``factors``."""
    arr = np.asarray(factors, dtype=float)
    if arr.shape == ():
        arr = np.full(3, float(arr))
    m = np.identity(4)
    m[0, 0], m[1, 1], m[2, 2] = _vec3(arr)
    return m