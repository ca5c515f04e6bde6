"""Fixed-size voxel chunk that builds a face-culled triangle mesh."""

from __future__ import annotations

from enum import Enum
from itertools import product

import numpy as np

from .noise import perlin_noise3
from .voxel_utils import CHUNK_SIZE
from .world import Voxel

CHUNK_NOISE_SCALE = 0.05

_OFFSETS = (
    (1, 0, 0), (-1, 0, 0),
    (0, 1, 0), (0, -1, 0),
    (0, 0, 1), (0, 0, -1),
)

_FACES = (
    (
        (0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (0.5, 0.5, 0.5),
        (0.5, -0.5, -0.5), (0.5, 0.5, 0.5), (0.5, -0.5, 0.5),
    ),
    (
        (-0.5, -0.5, 0.5), (-0.5, 0.5, 0.5), (-0.5, 0.5, -0.5),
        (-0.5, -0.5, 0.5), (-0.5, 0.5, -0.5), (-0.5, -0.5, -0.5),
    ),
    (
        (-0.5, 0.5, -0.5), (-0.5, 0.5, 0.5), (0.5, 0.5, 0.5),
        (-0.5, 0.5, -0.5), (0.5, 0.5, 0.5), (0.5, 0.5, -0.5),
    ),
    (
        (-0.5, -0.5, 0.5), (-0.5, -0.5, -0.5), (0.5, -0.5, -0.5),
        (-0.5, -0.5, 0.5), (0.5, -0.5, -0.5), (0.5, -0.5, 0.5),
    ),
    (
        (-0.5, -0.5, 0.5), (-0.5, 0.5, 0.5), (0.5, 0.5, 0.5),
        (-0.5, -0.5, 0.5), (0.5, 0.5, 0.5), (0.5, -0.5, 0.5),
    ),
    (
        (0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5),
        (0.5, -0.5, -0.5), (-0.5, 0.5, -0.5), (-0.5, -0.5, -0.5),
    ),
)


class FaceDirection(Enum):
    """The six faces of a voxel."""

    RIGHT = 0
    LEFT = 1
    TOP = 2
    BOTTOM = 3
    FRONT = 4
    BACK = 5

    @property
    def offset(self) -> tuple[int, int, int]:
        """Grid step to the neighbour this face looks at."""
        return _OFFSETS[self.value]

    @property
    def normal(self) -> tuple[float, float, float]:
        """Outward unit normal of the face."""
        return tuple(float(c) for c in _OFFSETS[self.value])

    @property
    def vertices(self) -> tuple[tuple[float, float, float], ...]:
        """Two triangles covering the face, relative to the voxel centre."""
        return _FACES[self.value]


def _in_bounds(x: int, y: int, z: int) -> bool:
    return 0 <= x < CHUNK_SIZE and 0 <= y < CHUNK_SIZE and 0 <= z < CHUNK_SIZE


class VoxelChunk:
    """A CHUNK_SIZE³ block of voxels, all inactive at first."""

    def __init__(self) -> None:
        self._voxels = [
            [[Voxel(active=False) for _ in range(CHUNK_SIZE)] for _ in range(CHUNK_SIZE)]
            for _ in range(CHUNK_SIZE)
        ]
        self.mesh_data = np.empty((0, 6), dtype=np.float32)
        self.dirty = True

    def generate_terrain_chunk(self, chunk_pos, max_height: int) -> None:
        """Raise noise-driven columns for the chunk at ``chunk_pos``."""
        chunk_x, _, chunk_z = (int(c) for c in chunk_pos)
        for x, z in product(range(CHUNK_SIZE), repeat=2):
            world_x = chunk_x * CHUNK_SIZE + x
            world_z = chunk_z * CHUNK_SIZE + z
            noise = perlin_noise3(
                world_x * CHUNK_NOISE_SCALE, 0.0, world_z * CHUNK_NOISE_SCALE, 0, 0, 0
            )
            height = int((noise + 1.0) * 0.5 * max_height)
            for y in range(min(height + 1, CHUNK_SIZE)):
                self._voxels[x][y][z].active = True
        self.dirty = True

    def get_voxel(self, x: int, y: int, z: int) -> Voxel | None:
        """The voxel at local ``(x, y, z)``, or None outside the chunk."""
        if not _in_bounds(x, y, z):
            return None
        return self._voxels[x][y][z]

    def is_voxel_solid(self, x: int, y: int, z: int) -> bool:
        """True for an active voxel inside the chunk."""
        return _in_bounds(x, y, z) and self._voxels[x][y][z].active

    def update_mesh(self) -> None:
        """Rebuild ``mesh_data``: one row (x, y, z, nx, ny, nz) per vertex."""
        rows: list[tuple[float, ...]] = []
        for x, y, z in product(range(CHUNK_SIZE), repeat=3):
            if not self._voxels[x][y][z].active:
                continue
            for face in FaceDirection:
                dx, dy, dz = face.offset
                if self.is_voxel_solid(x + dx, y + dy, z + dz):
                    continue
                normal = face.normal
                rows.extend(
                    (x + vx, y + vy, z + vz, *normal) for vx, vy, vz in face.vertices
                )
        self.mesh_data = np.array(rows, dtype=np.float32).reshape(-1, 6)
        self.dirty = False

    def vertex_count(self) -> int:
        """Number of vertices in the current mesh."""
        return len(self.mesh_data)