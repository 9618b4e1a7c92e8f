"""Vectors, 4x4 matrices and the transforms the game is built on.

Matrices use the row-vector convention: a point is a row on the left,
and the translation sits in the bottom row.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Iterator

__all__ = [
    "Vector2",
    "Vector3",
    "Vector4",
    "Matrix4x4",
    "multiply",
    "scale",
    "make_rotate_x_matrix",
    "make_rotate_y_matrix",
    "make_rotate_z_matrix",
    "transform_normal",
    "dot",
    "length",
    "normalize",
    "make_affine_matrix",
    "inverse",
    "make_perspective_fov_matrix",
    "make_orthographic_matrix",
    "make_viewport_matrix",
    "transpose",
    "transform",
    "multiply_transposed",
    "subtract_matrix",
    "add",
    "subtract",
    "add_scalar",
    "make_translate_matrix",
    "make_rotate_matrix",
    "make_identity_matrix",
    "make_scale_matrix",
]


@dataclass
class Vector2:
    """A two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def copy(self) -> "Vector2":
        return replace(self)


@dataclass
class Vector3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def copy(self) -> "Vector3":
        return replace(self)


@dataclass
class Vector4:
    """A four-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def copy(self) -> "Vector4":
        return replace(self)


def _zero_rows() -> list[list[float]]:
    return [[0.0] * 4 for _ in range(4)]


@dataclass
class Matrix4x4:
    """A 4x4 matrix stored as four rows of four floats."""

    m: list[list[float]] = field(default_factory=_zero_rows)

    def __post_init__(self) -> None:
        if len(self.m) != 4 or any(len(row) != 4 for row in self.m):
            raise ValueError("a Matrix4x4 needs exactly 4 rows of 4 values")
        self.m = [[float(v) for v in row] for row in self.m]

    @classmethod
    def from_values(cls, *values: float) -> "Matrix4x4":
        """Build a matrix from 16 values given row by row."""
        if len(values) != 16:
            raise ValueError("a Matrix4x4 needs exactly 16 values")
        return cls([list(values[row * 4:row * 4 + 4]) for row in range(4)])

    def values(self) -> tuple[float, ...]:
        """All 16 entries, row by row."""
        return tuple(v for row in self.m for v in row)

    def copy(self) -> "Matrix4x4":
        return Matrix4x4([row[:] for row in self.m])

    def __matmul__(self, other: "Matrix4x4") -> "Matrix4x4":
        return multiply(self, other)


def multiply(m1: Matrix4x4, m2: Matrix4x4) -> Matrix4x4:
    """Matrix product m1 * m2."""
    columns = list(zip(*m2.m))
    return Matrix4x4(
        [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in m1.m]
    )


def scale(factor: float, v: Vector3) -> Vector3:
    """Scale a vector by a scalar."""
    return Vector3(v.x * factor, v.y * factor, v.z * factor)


def make_rotate_x_matrix(theta: float) -> Matrix4x4:
    c, s = math.cos(theta), math.sin(theta)
    return Matrix4x4([
        [1.0, 0.0, 0.0, 0.0],
        [0.0, c, s, 0.0],
        [0.0, -s, c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def make_rotate_y_matrix(theta: float) -> Matrix4x4:
    c, s = math.cos(theta), math.sin(theta)
    return Matrix4x4([
        [c, 0.0, -s, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [s, 0.0, c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def make_rotate_z_matrix(theta: float) -> Matrix4x4:
    c, s = math.cos(theta), math.sin(theta)
    return Matrix4x4([
        [c, -s, 0.0, 0.0],
        [s, c, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def transform_normal(v: Vector3, m: Matrix4x4) -> Vector3:
    """Transform a direction by the upper 3x3 part, ignoring translation."""
    r = m.m
    return Vector3(
        v.x * r[0][0] + v.y * r[1][0] + v.z * r[2][0],
        v.x * r[0][1] + v.y * r[1][1] + v.z * r[2][1],
        v.x * r[0][2] + v.y * r[1][2] + v.z * r[2][2],
    )


def dot(v1: Vector3, v2: Vector3) -> float:
    return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z


def length(v: Vector3) -> float:
    return math.sqrt(dot(v, v))


def normalize(v: Vector3) -> Vector3:
    """Unit vector in the direction of v; a zero vector is returned unchanged."""
    size = length(v)
    if size == 0:
        return v.copy()
    return Vector3(v.x / size, v.y / size, v.z / size)


def make_rotate_matrix(r: Vector3) -> Matrix4x4:
    """Rotation about X, then Y, then Z."""
    return multiply(
        make_rotate_x_matrix(r.x),
        multiply(make_rotate_y_matrix(r.y), make_rotate_z_matrix(r.z)),
    )


def make_affine_matrix(scale_v: Vector3, rot: Vector3, translate: Vector3) -> Matrix4x4:
    """Scale, rotate, then translate."""
    rotate = make_rotate_matrix(rot).m
    factors = (scale_v.x, scale_v.y, scale_v.z)
    rows = [
        [factor * rotate[i][0], factor * rotate[i][1], factor * rotate[i][2], 0.0]
        for i, factor in enumerate(factors)
    ]
    rows.append([translate.x, translate.y, translate.z, 1.0])
    return Matrix4x4(rows)


def _det3(rows: list[list[float]]) -> float:
    (a, b, c), (d, e, f), (g, h, i) = rows
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


def _minor(m: list[list[float]], row: int, col: int) -> float:
    return _det3([
        [v for j, v in enumerate(r) if j != col]
        for i, r in enumerate(m)
        if i != row
    ])


def inverse(m: Matrix4x4) -> Matrix4x4:
    """Inverse of m. Raises ValueError for a singular matrix."""
    rows = m.m
    cofactors = [
        [(-1) ** (i + j) * _minor(rows, i, j) for j in range(4)] for i in range(4)
    ]
    determinant = sum(rows[0][j] * cofactors[0][j] for j in range(4))
    if determinant == 0.0:
        raise ValueError("matrix is singular and has no inverse")
    recip = 1.0 / determinant
    return Matrix4x4([[cofactors[j][i] * recip for j in range(4)] for i in range(4)])


def make_perspective_fov_matrix(
    fov_y: float, aspect_ratio: float, near_clip: float, far_clip: float
) -> Matrix4x4:
    cot = 1.0 / math.tan(fov_y / 2)
    depth = far_clip - near_clip
    return Matrix4x4([
        [(1.0 / aspect_ratio) * cot, 0.0, 0.0, 0.0],
        [0.0, cot, 0.0, 0.0],
        [0.0, 0.0, far_clip / depth, 1.0],
        [0.0, 0.0, -(near_clip * far_clip) / depth, 0.0],
    ])


def make_orthographic_matrix(
    left: float, top: float, right: float, bottom: float, near_clip: float, far_clip: float
) -> Matrix4x4:
    return Matrix4x4([
        [2.0 / (right - left), 0.0, 0.0, 0.0],
        [0.0, 2.0 / (top - bottom), 0.0, 0.0],
        [0.0, 0.0, 1.0 / (far_clip - near_clip), 0.0],
        [
            (left + right) / (left - right),
            (top + bottom) / (bottom - top),
            near_clip / (near_clip - far_clip),
            1.0,
        ],
    ])


def make_viewport_matrix(
    left: float, top: float, width: float, height: float, min_depth: float, max_depth: float
) -> Matrix4x4:
    return Matrix4x4([
        [width / 2, 0.0, 0.0, 0.0],
        [0.0, -(height / 2), 0.0, 0.0],
        [0.0, 0.0, max_depth - min_depth, 0.0],
        [left + width / 2, top + height / 2, min_depth, 1.0],
    ])


def transpose(m: Matrix4x4) -> Matrix4x4:
    return Matrix4x4([list(col) for col in zip(*m.m)])


def transform(vector: Vector3, matrix: Matrix4x4) -> Vector3:
    """Transform a point, dividing by w. Raises ValueError when w is zero."""
    r = matrix.m
    x, y, z = vector.x, vector.y, vector.z
    rx, ry, rz, w = (
        x * r[0][col] + y * r[1][col] + z * r[2][col] + r[3][col] for col in range(4)
    )
    if w == 0.0:
        raise ValueError("homogeneous coordinate w is zero")
    return Vector3(rx / w, ry / w, rz / w)


def multiply_transposed(vector: Vector3, matrix: Matrix4x4) -> Vector3:
    """Transform a point by a matrix whose translation is in the last column."""
    r = matrix.m
    x, y, z = vector.x, vector.y, vector.z
    return Vector3(
        *(x * r[row][0] + y * r[row][1] + z * r[row][2] + r[row][3] for row in range(3))
    )


def subtract_matrix(m1: Matrix4x4, m2: Matrix4x4) -> Matrix4x4:
    return Matrix4x4(
        [[a - b for a, b in zip(r1, r2)] for r1, r2 in zip(m1.m, m2.m)]
    )


def add(v1: Vector3, v2: Vector3) -> Vector3:
    return Vector3(v1.x + v2.x, v1.y + v2.y, v1.z + v2.z)


def subtract(v1: Vector3, v2: Vector3) -> Vector3:
    return Vector3(v1.x - v2.x, v1.y - v2.y, v1.z - v2.z)


def add_scalar(v: Vector3, s: float) -> Vector3:
    return Vector3(v.x + s, v.y + s, v.z + s)


def make_translate_matrix(translate: Vector3) -> Matrix4x4:
    return Matrix4x4([
        [1.0, 0.0, 0.0, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [translate.x, translate.y, translate.z, 1.0],
    ])


def make_identity_matrix() -> Matrix4x4:
    return Matrix4x4([[1.0 if i == j else 0.0 for j in range(4)] for i in range(4)])


def make_scale_matrix(scale_v: Vector3) -> Matrix4x4:
    return Matrix4x4([
        [scale_v.x, 0.0, 0.0, 0.0],
        [0.0, scale_v.y, 0.0, 0.0],
        [0.0, 0.0, scale_v.z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])