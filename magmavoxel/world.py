"""Sparse voxel world: terrain generation, voxel lookup and visibility culling."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .noise import perlin_noise3
from .transforms import translation

TERRAIN_SCALE = 0.1
MAX_DRAW_DISTANCE = 400.0

_HALF = 0.5
_CUBE_CORNERS = np.array(
    [
        [-_HALF, -_HALF, -_HALF],
        [_HALF, -_HALF, -_HALF],
        [-_HALF, _HALF, -_HALF],
        [_HALF, _HALF, -_HALF],
        [-_HALF, -_HALF, _HALF],
        [_HALF, -_HALF, _HALF],
        [-_HALF, _HALF, _HALF],
        [_HALF, _HALF, _HALF],
    ]
)

_NEIGHBOUR_OFFSETS = (
    (1, 0, 0), (-1, 0, 0),
    (0, 1, 0), (0, -1, 0),
    (0, 0, 1), (0, 0, -1),
)


@dataclass
class Voxel:
    """A single block; inactive voxels are neither drawn nor hit."""

    active: bool = True


def _key(world_pos) -> tuple[int, int, int]:
    x, y, z = (int(c) for c in world_pos)
    return (x, y, z)


def is_cube_in_frustum(pos, view_proj) -> bool:
    """True if any corner of the unit cube centred at ``pos`` lies inside clip space."""
    centre = np.asarray(pos, dtype=float)
    corners = np.hstack([centre + _CUBE_CORNERS, np.ones((len(_CUBE_CORNERS), 1))])
    clip = corners @ np.asarray(view_proj, dtype=float).T
    w = clip[:, 3]
    usable = w != 0.0
    if not usable.any():
        return False
    ndc = clip[usable, :3] / w[usable, None]
    inside = np.all((ndc >= -1.0) & (ndc <= 1.0), axis=1)
    return bool(inside.any())


@dataclass
class VoxelWorld:
    """Voxels keyed by integer world position."""

    voxels: dict[tuple[int, int, int], Voxel] = field(default_factory=dict)

    def generate_terrain(self, width: int, depth: int, max_height: int) -> None:
        """Fill columns over a ``width`` x ``depth`` area centred on the origin."""
        half_w = int(width / 2)
        half_d = int(depth / 2)
        for x in range(-half_w, half_w):
            for z in range(-half_d, half_d):
                noise = perlin_noise3(x * TERRAIN_SCALE, 0.0, z * TERRAIN_SCALE, 0, 0, 0)
                height = int((noise + 1.0) / 2.0 * max_height)
                for y in range(height + 1):
                    self.voxels[(x, y, z)] = Voxel()

    def deactivate_voxel(self, world_pos) -> None:
        """Switch off the voxel at ``world_pos`` if there is one."""
        voxel = self.voxels.get(_key(world_pos))
        if voxel is not None and voxel.active:
            voxel.active = False

    def get_voxel(self, world_pos) -> Voxel | None:
        """The voxel at ``world_pos``, or None where there is none."""
        return self.voxels.get(_key(world_pos))

    def _has_exposed_face(self, pos: tuple[int, int, int]) -> bool:
        x, y, z = pos
        for dx, dy, dz in _NEIGHBOUR_OFFSETS:
            neighbour = self.voxels.get((x + dx, y + dy, z + dz))
            if neighbour is None or not neighbour.active:
                return True
        return False

    def visible_voxels(self, view_proj) -> list[tuple[int, int, int]]:
        """Positions worth drawing, farthest first.

        Inactive, too distant, fully enclosed and off-screen voxels are dropped.
        """
        vp = np.asarray(view_proj, dtype=float)
        camera_pos = np.linalg.inv(vp)[:3, 3]
        limit = MAX_DRAW_DISTANCE * MAX_DRAW_DISTANCE

        visible: list[tuple[float, tuple[int, int, int]]] = []
        for pos, voxel in self.voxels.items():
            if not voxel.active:
                continue
            world_pos = np.array(pos, dtype=float)
            delta = world_pos - camera_pos
            dist_sq = float(delta @ delta)
            if dist_sq > limit:
                continue
            if not self._has_exposed_face(pos):
                continue
            if not is_cube_in_frustum(world_pos, vp):
                continue
            visible.append((dist_sq, pos))

        visible.sort(key=lambda item: item[0], reverse=True)
        return [pos for _, pos in visible]

    def draw(self, renderer, shader, view_proj) -> None:
        """Draw every visible voxel as a unit cube through ``renderer``."""
        for pos in self.visible_voxels(view_proj):
            shader.set_mat4("model", translation(pos))
            renderer.draw(shader)