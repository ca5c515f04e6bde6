"""First-person fly camera driven by mouse look and WASD movement."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from .transforms import look_at, normalize


class Movement(Enum):
    """Directions the camera can move in."""

    FORWARD = 0
    BACKWARD = 1
    LEFT = 2
    RIGHT = 3


def _as_vec3(value) -> np.ndarray:
    arr = np.array(value, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {arr.shape}")
    return arr


@dataclass
class Camera:
    """Camera with yaw/pitch orientation, in degrees."""

    position: np.ndarray
    front: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, -1.0]))
    up: np.ndarray = field(default_factory=lambda: np.array([0.0, 1.0, 0.0]))
    yaw: float = -90.0
    pitch: float = 0.0
    speed: float = 3.5
    sensitivity: float = 0.1

    def __post_init__(self) -> None:
        self.position = _as_vec3(self.position)
        self.front = _as_vec3(self.front)
        self.up = _as_vec3(self.up)

    def view_matrix(self) -> np.ndarray:
        """World-to-view transform for the current position and heading."""
        return look_at(self.position, self.position + self.front, self.up)

    def process_mouse_movement(self, x_offset: float, y_offset: float) -> None:
        """Turn the camera by a mouse delta; pitch is held within ±89°."""
        self.yaw += x_offset * self.sensitivity
        self.pitch += y_offset * self.sensitivity
        self.pitch = min(max(self.pitch, -89.0), 89.0)

        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        direction = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self.front = normalize(direction)

    def process_keyboard(self, direction: Movement, delta_time: float) -> None:
        """Move the camera for ``delta_time`` seconds in ``direction``."""
        direction = Movement(direction)
        velocity = self.speed * delta_time
        right = normalize(np.cross(self.front, self.up))

        if direction is Movement.FORWARD:
            self.position = self.position + self.front * velocity
        elif direction is Movement.BACKWARD:
            self.position = self.position - self.front * velocity
        elif direction is Movement.LEFT:
            self.position = self.position - right * velocity
        elif direction is Movement.RIGHT:
            self.position = self.position + right * velocity