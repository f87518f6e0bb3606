"""Matrix helpers and a 2D orthographic camera."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

_DTYPE = np.float32


def _identity() -> np.ndarray:
    return np.identity(4, dtype=_DTYPE)


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    """Orthographic projection mapping the box onto clip space [-1, 1]."""
    m = _identity()
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m


def translate(matrix: np.ndarray, offset: Sequence[float]) -> np.ndarray:
    """Return ``matrix`` followed by a translation by ``offset``."""
    t = _identity()
    t[:3, 3] = np.asarray(offset, dtype=_DTYPE)
    return np.asarray(matrix, dtype=_DTYPE) @ t


def rotate(matrix: np.ndarray, angle: float, axis: Sequence[float]) -> np.ndarray:
    """Return ``matrix`` followed by a rotation of ``angle`` radians about ``axis``."""
    a = np.asarray(axis, dtype=np.float64)
    length = np.linalg.norm(a)
    if length == 0.0:
        raise ValueError("rotation axis must be non-zero")
    x, y, z = a / length
    c, s = math.cos(angle), math.sin(angle)
    cross = np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])
    outer = np.outer((x, y, z), (x, y, z))
    r = _identity()
    r[:3, :3] = c * np.identity(3) + s * cross + (1.0 - c) * outer
    return np.asarray(matrix, dtype=_DTYPE) @ r


def scale(matrix: np.ndarray, factors: float | Sequence[float]) -> np.ndarray:
    """Return ``matrix`` followed by a scale; a single number scales all axes."""
    s = _identity()
    s[:3, :3] = np.diag(np.broadcast_to(np.asarray(factors, dtype=_DTYPE), (3,)))
    return np.asarray(matrix, dtype=_DTYPE) @ s


class OrthographicCamera:
    """A camera with an orthographic projection, moved in the plane and turned about z."""

    def __init__(self, left: float, right: float, bottom: float, top: float) -> None:
        self._projection = ortho(left, right, bottom, top, -1.0, 1.0)
        self._view = _identity()
        self._view_projection = self._projection @ self._view
        self._position: tuple[float, float, float] = (0.0, 0.0, 0.0)
        self._rotation = 0.0

    @property
    def position(self) -> tuple[float, float, float]:
        return self._position

    @position.setter
    def position(self, position: Sequence[float]) -> None:
        values = tuple(float(v) for v in position)
        if len(values) != 3:
            raise ValueError("position needs exactly three coordinates")
        self._position = values  # type: ignore[assignment]
        self._recalculate_view_matrix()

    @property
    def rotation(self) -> float:
        """Rotation about the z axis, in degrees."""
        return self._rotation

    @rotation.setter
    def rotation(self, rotation: float) -> None:
        self._rotation = float(rotation)
        self._recalculate_view_matrix()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection.copy()

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view.copy()

    @property
    def view_projection_matrix(self) -> np.ndarray:
        return self._view_projection.copy()

    def _recalculate_view_matrix(self) -> None:
        transform = rotate(
            translate(_identity(), self._position),
            math.radians(self._rotation),
            (0.0, 0.0, 1.0),
        )
        self._view = np.linalg.inv(transform).astype(_DTYPE)
        self._view_projection = self._projection @ self._view