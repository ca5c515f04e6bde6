"""Projectiles fired from the camera and the parts of the held gun."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .transforms import normalize

BULLET_SPEED = 20.0
BULLET_LIFE = 3.0
MUZZLE_FLASH_LIFE = 0.05
MUZZLE_DISTANCE = 0.5
_MIN_SPEED_SQ = 0.0001


def _vec3(value) -> np.ndarray:
    arr = np.array(value, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {arr.shape}")
    return arr


@dataclass
class Projectile:
    """A moving (or, for a muzzle flash, stationary) short-lived object."""

    position: np.ndarray
    velocity: np.ndarray
    life: float

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.velocity = _vec3(self.velocity)


@dataclass(frozen=True)
class GunPart:
    """A box of the gun model, placed relative to the gun's origin."""

    offset: tuple[float, float, float]
    scale: tuple[float, float, float]
    color: tuple[float, float, float]


GUN_PARTS = (
    GunPart(offset=(0.0, 0.0, 0.0), scale=(0.1, 0.1, 0.7), color=(0.1, 0.1, 0.1)),
    GunPart(offset=(0.0, -0.18, 0.22), scale=(0.13, 0.25, 0.13), color=(0.15, 0.08, 0.02)),
)


def fire(camera) -> list[Projectile]:
    """A bullet along the camera's heading plus a muzzle flash at the barrel."""
    origin = camera.position + camera.front * MUZZLE_DISTANCE
    direction = normalize(camera.front)
    return [
        Projectile(origin, direction * BULLET_SPEED, BULLET_LIFE),
        Projectile(origin, np.zeros(3), MUZZLE_FLASH_LIFE),
    ]


def _round_half_away(values) -> tuple[int, int, int]:
    x, y, z = (int(math.copysign(math.floor(abs(c) + 0.5), c)) for c in values)
    return (x, y, z)


def step_projectiles(projectiles, world, delta_time: float) -> list[Projectile]:
    """Advance projectiles by ``delta_time``; return those still alive.

    A moving projectile that enters an active voxel knocks it out and dies.
    """
    for projectile in projectiles:
        projectile.position = projectile.position + projectile.velocity * delta_time
        projectile.life -= delta_time

        if float(projectile.velocity @ projectile.velocity) > _MIN_SPEED_SQ:
            cell = _round_half_away(projectile.position)
            voxel = world.get_voxel(cell)
            if voxel is not None and voxel.active:
                world.deactivate_voxel(cell)
                projectile.life = 0.0

    return [p for p in projectiles if p.life > 0.0]