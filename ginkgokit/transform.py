"""Position, Euler rotation and scale combined into a cached model matrix."""

from __future__ import annotations

import math
from typing import Iterable, Optional

import numpy as np


def _vec3(value: Iterable[float], name: str) -> np.ndarray:
    arr = np.array(value, dtype=np.float32)
    if arr.shape != (3,):
        raise ValueError(f"{name} must have three components, got shape {arr.shape}")
    return arr


def euler_angle_xyz(x: float, y: float, z: float) -> np.ndarray:
    """Return the 4x4 rotation Rx(x) @ Ry(y) @ Rz(z) for angles in radians."""
    cx, sx = math.cos(x), math.sin(x)
    cy, sy = math.cos(y), math.sin(y)
    cz, sz = math.cos(z), math.sin(z)
    rx = np.array(
        [[1, 0, 0, 0], [0, cx, -sx, 0], [0, sx, cx, 0], [0, 0, 0, 1]], dtype=np.float64
    )
    ry = np.array(
        [[cy, 0, sy, 0], [0, 1, 0, 0], [-sy, 0, cy, 0], [0, 0, 0, 1]], dtype=np.float64
    )
    rz = np.array(
        [[cz, -sz, 0, 0], [sz, cz, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]], dtype=np.float64
    )
    return (rx @ ry @ rz).astype(np.float32)


class Transform:
    """A translation, Euler XYZ rotation and scale.

    The model matrix is ``translate @ rotate @ scale`` for column vectors and is
    rebuilt lazily the next time :meth:`matrix` is called after a change.
    """

    def __init__(
        self,
        position: Optional[Iterable[float]] = None,
        rotation: Optional[Iterable[float]] = None,
        scale: Optional[Iterable[float]] = None,
    ) -> None:
        self._position = _vec3((0.0, 0.0, 0.0) if position is None else position, "position")
        self._rotation = _vec3((0.0, 0.0, 0.0) if rotation is None else rotation, "rotation")
        self._scale = _vec3((1.0, 1.0, 1.0) if scale is None else scale, "scale")
        self._rotation_matrix = euler_angle_xyz(*self._rotation.tolist())
        self._matrix = np.identity(4, dtype=np.float32)
        self._dirty = True
        self.matrix()

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value: Iterable[float]) -> None:
        self.set_position(value)

    @property
    def rotation(self) -> np.ndarray:
        """Euler angles in radians, applied as X then Y then Z."""
        return self._rotation.copy()

    @rotation.setter
    def rotation(self, value: Iterable[float]) -> None:
        self.set_rotation(value)

    @property
    def scale(self) -> np.ndarray:
        return self._scale.copy()

    @scale.setter
    def scale(self, value: Iterable[float]) -> None:
        self.set_scale(value)

    def set_position(self, position: Iterable[float]) -> None:
        self._position = _vec3(position, "position")
        self._dirty = True

    def set_rotation(self, rotation: Iterable[float]) -> None:
        self._rotation = _vec3(rotation, "rotation")
        self._rotation_matrix = euler_angle_xyz(*self._rotation.tolist())
        self._dirty = True

    def set_scale(self, scale: Iterable[float]) -> None:
        self._scale = _vec3(scale, "scale")
        self._dirty = True

    def mod_position(self, delta: Iterable[float]) -> None:
        self._position = self._position + _vec3(delta, "delta")
        self._dirty = True

    def mod_rotation_euler(self, delta: Iterable[float]) -> None:
        self._rotation = self._rotation + _vec3(delta, "delta")
        self._rotation_matrix = euler_angle_xyz(*self._rotation.tolist())
        self._dirty = True

    def mod_scale(self, delta: Iterable[float]) -> None:
        self._scale = self._scale + _vec3(delta, "delta")
        self._dirty = True

    def matrix(self) -> np.ndarray:
        """Return the 4x4 model matrix, rebuilding it if anything changed."""
        if self._dirty:
            translate = np.identity(4, dtype=np.float32)
            translate[:3, 3] = self._position
            scale = np.diag(np.append(self._scale, np.float32(1.0))).astype(np.float32)
            self._matrix = (translate @ self._rotation_matrix @ scale).astype(np.float32)
            self._dirty = False
        return self._matrix.copy()