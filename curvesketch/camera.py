"""Perspective camera with keyboard movement, orbiting and a quaternion trackball."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

ArrayLike = Sequence[float] | np.ndarray

DEFAULT_SPEED = 0.3
ORBIT_RADIUS = 5.0
ORBIT_STEP = math.radians(0.1)
FIELD_OF_VIEW = math.radians(45.0)
NEAR_PLANE = 0.1
FAR_PLANE = 100.0


def _vec(value: ArrayLike) -> np.ndarray:
    return np.asarray(value, dtype=float)


def _normalize(v: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(v))
    if length == 0:
        raise ValueError("cannot normalise a zero-length vector")
    return v / length


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection mapping depth into [-1, 1]."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    f = 1.0 / math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -2.0 * far * near / (far - near)
    m[3, 2] = -1.0
    return m


def look_at(eye: ArrayLike, center: ArrayLike, up: ArrayLike) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    e, c, u = _vec(eye), _vec(center), _vec(up)
    f = _normalize(c - e)
    s = _normalize(np.cross(f, u))
    t = np.cross(s, f)
    m = np.eye(4)
    m[0, :3] = s
    m[1, :3] = t
    m[2, :3] = -f
    m[0, 3] = -float(np.dot(s, e))
    m[1, 3] = -float(np.dot(t, e))
    m[2, 3] = float(np.dot(f, e))
    return m


def quat_from_axis_angle(axis: ArrayLike, angle: float) -> np.ndarray:
    """Quaternion (w, x, y, z) for ``angle`` radians about ``axis``.

    The axis is used as given, without normalisation.
    """
    a = _vec(axis)
    half = angle / 2.0
    return np.array([math.cos(half), *(a * math.sin(half))])


def quat_multiply(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    """Hamilton product a * b of two (w, x, y, z) quaternions."""
    aw, ax, ay, az = _vec(a)
    bw, bx, by, bz = _vec(b)
    return np.array(
        [
            aw * bw - ax * bx - ay * by - az * bz,
            aw * bx + ax * bw + ay * bz - az * by,
            aw * by - ax * bz + ay * bw + az * bx,
            aw * bz + ax * by - ay * bx + az * bw,
        ]
    )


def quat_to_matrix(q: ArrayLike) -> np.ndarray:
    """Homogeneous 4x4 rotation matrix of the quaternion (w, x, y, z)."""
    w, x, y, z = _vec(q)
    m = np.eye(4)
    m[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ]
    return m


class Camera:
    """Viewer state for the 3D spline view: position, view and trackball rotation."""

    _DIRECTIONS = ("forward", "backward", "left", "right", "up", "down")

    def __init__(self, width: int = 800, height: int = 800) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("window dimensions must be positive")
        self.width = width
        self.height = height
        self.speed = DEFAULT_SPEED
        self.trackball_size = min(width, height) / 2.0
        self.rotation = np.array([1.0, 0.0, 0.0, 0.0])
        self.last_position = np.zeros(3)
        self.rotation_angle = 0.0
        self.position = np.array([0.0, 0.0, 3.0])
        self.front = np.array([0.0, 0.0, -1.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.projection = perspective(
            FIELD_OF_VIEW, width / height, NEAR_PLANE, FAR_PLANE
        )
        self.view = look_at(self.position, self.position + self.front, self.up)

    def screen_to_sphere(self, x: float, y: float) -> np.ndarray:
        """Unit world-space direction of the ray through screen point (x, y).

        ``y`` grows upwards, as in the drawing coordinates.
        """
        nx = 2.0 * x / self.width - 1.0
        ny = 2.0 * y / self.height - 1.0
        clip = np.array([nx, ny, -1.0, 1.0])
        eye = np.linalg.inv(self.projection) @ clip
        eye[2] = -1.0
        eye[3] = 0.0
        world = (np.linalg.inv(self.view) @ eye)[:3]
        return _normalize(world)

    def move(self, direction: str, dt: float) -> None:
        """Move the camera for ``dt`` seconds and refresh the view.

        ``direction`` is one of forward, backward, left, right, up, down.
        """
        step = self.speed * dt
        if direction == "forward":
            self.position = self.position + step * self.front
        elif direction == "backward":
            self.position = self.position - step * self.front
        elif direction in ("left", "right"):
            side = _normalize(np.cross(self.front, self.up)) * step
            self.position = (
                self.position - side if direction == "left" else self.position + side
            )
        elif direction == "up":
            self.position = self.position + step * self.up
        elif direction == "down":
            self.position = self.position - step * self.up
        else:
            raise ValueError(
                f"unknown direction {direction!r}; expected one of {self._DIRECTIONS}"
            )
        self.update_view()

    def orbit(self, step: float = ORBIT_STEP) -> None:
        """Advance the orbit angle and place the camera on a circle about the origin."""
        self.rotation_angle += step
        self.position = np.array(
            [
                math.sin(self.rotation_angle) * ORBIT_RADIUS,
                0.0,
                math.cos(self.rotation_angle) * ORBIT_RADIUS,
            ]
        )
        self.front = _normalize(-self.position)
        self.up = np.array([0.0, 1.0, 0.0])
        self.view = look_at(self.position, np.zeros(3), self.up)

    def update_view(self) -> None:
        """Recompute the view matrix from position, front and up."""
        self.view = look_at(self.position, self.position + self.front, self.up)

    def trackball_drag(self, x: float, y: float) -> None:
        """Rotate the model by the arc from the last trackball point to (x, y)."""
        current = self.screen_to_sphere(x, y)
        axis = np.cross(self.last_position, current)
        dot = float(np.dot(self.last_position, current))
        angle = math.acos(max(-1.0, min(1.0, dot)))
        step = quat_from_axis_angle(axis, angle)
        self.rotation = quat_multiply(step, self.rotation)
        self.last_position = current