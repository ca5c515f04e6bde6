"""Classic 3D Perlin gradient noise with optional power-of-two wrapping."""

from __future__ import annotations

import math

_RANDTAB = (
    23, 125, 161, 52, 103, 117, 70, 37, 247, 101, 203, 169, 124, 126, 44, 123,
    152, 238, 145, 45, 171, 114, 253, 10, 192, 136, 4, 157, 249, 30, 35, 72,
    175, 63, 77, 90, 181, 16, 96, 111, 133, 104, 75, 162, 93, 56, 66, 240,
    8, 50, 84, 229, 49, 210, 173, 239, 141, 1, 87, 18, 2, 198, 143, 57,
    225, 160, 58, 217, 168, 206, 245, 204, 199, 6, 73, 60, 20, 230, 211, 233,
    94, 200, 88, 9, 74, 155, 33, 15, 219, 130, 226, 202, 83, 236, 42, 172,
    165, 218, 55, 222, 46, 107, 98, 154, 109, 67, 196, 178, 127, 158, 13, 243,
    65, 79, 166, 248, 25, 224, 115, 80, 68, 51, 184, 128, 232, 208, 151, 122,
    26, 212, 105, 43, 179, 213, 235, 148, 146, 89, 14, 195, 28, 78, 112, 76,
    250, 47, 24, 251, 140, 108, 186, 190, 228, 170, 183, 139, 39, 188, 244, 246,
    132, 48, 119, 144, 180, 138, 134, 193, 82, 182, 120, 121, 86, 220, 209, 3,
    91, 241, 149, 85, 205, 150, 113, 216, 31, 100, 41, 164, 177, 214, 153, 231,
    38, 71, 185, 174, 97, 201, 29, 95, 7, 92, 54, 254, 191, 118, 34, 221,
    131, 11, 163, 99, 234, 81, 227, 147, 156, 176, 17, 142, 69, 12, 110, 62,
    27, 255, 0, 194, 59, 116, 242, 252, 19, 21, 187, 53, 207, 129, 64, 135,
    61, 40, 167, 237, 102, 223, 106, 159, 197, 189, 215, 137, 36, 32, 22, 5,
)

_BASIS = (
    (1, 1, 0), (-1, 1, 0), (1, -1, 0), (-1, -1, 0),
    (1, 0, 1), (-1, 0, 1), (1, 0, -1), (-1, 0, -1),
    (0, 1, 1), (0, -1, 1), (0, 1, -1), (0, -1, -1),
)

# Twelve gradients spread over 64 slots; four of them get one extra slot.
_GRAD_SLOTS = (
    tuple(range(12)) + (0, 9, 1, 11) + tuple(range(12)) * 4
)

_GRAD_IDX = tuple(_GRAD_SLOTS[r & 63] for r in _RANDTAB)


def _perm(i: int) -> int:
    return _RANDTAB[i & 255]


def _grad(index: int, x: float, y: float, z: float) -> float:
    gx, gy, gz = _BASIS[index]
    return gx * x + gy * y + gz * z


def _ease(t: float) -> float:
    return ((t * 6 - 15) * t + 10) * t * t * t


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def perlin_noise3(x: float, y: float, z: float, x_wrap: int = 0, y_wrap: int = 0, z_wrap: int = 0) -> float:
    """Perlin noise at ``(x, y, z)``, roughly in ``[-1, 1]``.

    A wrap of 0 means no wrapping (period 256); otherwise a power of two
    up to 256 sets the period along that axis.
    """
    x_mask = (x_wrap - 1) & 255
    y_mask = (y_wrap - 1) & 255
    z_mask = (z_wrap - 1) & 255

    px, py, pz = math.floor(x), math.floor(y), math.floor(z)
    x0, x1 = px & x_mask, (px + 1) & x_mask
    y0, y1 = py & y_mask, (py + 1) & y_mask
    z0, z1 = pz & z_mask, (pz + 1) & z_mask

    x -= px
    y -= py
    z -= pz
    u, v, w = _ease(x), _ease(y), _ease(z)

    r0 = _perm(x0)
    r1 = _perm(x1)
    r00 = _perm(r0 + y0)
    r01 = _perm(r0 + y1)
    r10 = _perm(r1 + y0)
    r11 = _perm(r1 + y1)

    def corner(r: int, zi: int, dx: float, dy: float, dz: float) -> float:
        return _grad(_GRAD_IDX[(r + zi) & 255], dx, dy, dz)

    n000 = corner(r00, z0, x, y, z)
    n001 = corner(r00, z1, x, y, z - 1)
    n010 = corner(r01, z0, x, y - 1, z)
    n011 = corner(r01, z1, x, y - 1, z - 1)
    n100 = corner(r10, z0, x - 1, y, z)
    n101 = corner(r10, z1, x - 1, y, z - 1)
    n110 = corner(r11, z0, x - 1, y - 1, z)
    n111 = corner(r11, z1, x - 1, y - 1, z - 1)

    n00 = _lerp(n000, n001, w)
    n01 = _lerp(n010, n011, w)
    n10 = _lerp(n100, n101, w)
    n11 = _lerp(n110, n111, w)

    n0 = _lerp(n00, n01, v)
    n1 = _lerp(n10, n11, v)
    return _lerp(n0, n1, u)