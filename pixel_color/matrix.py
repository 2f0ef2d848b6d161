"""Fixed-size 3x3 matrices in row-major and column-major layout.

Both layouts describe the same logical transform ``out = M · v``. A
``RowMatrix`` stores the three rows and multiplies by taking dot products, a
``ColMatrix`` stores the three basis columns and multiplies by summing the
columns scaled by the vector components.
"""
from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from .config import SingularMatrixError

# Determinants below this magnitude are treated as singular
SINGULAR_EPSILON = 1e-12

Vector = Union[Sequence[float], np.ndarray]


def _as_frozen(values: Union[Sequence[Sequence[float]], np.ndarray]) -> np.ndarray:
    arr = np.array(values, dtype=np.float64)
    if arr.shape != (3, 3):
        raise ValueError(f"Expected a 3x3 matrix, got shape {arr.shape}")
    arr.setflags(write=False)
    return arr


def _inverse_of_triple(v0: np.ndarray, v1: np.ndarray, v2: np.ndarray) -> np.ndarray:
    """Invert by cofactors, returning the three cross products over det.

    For rows ``v0, v1, v2`` the returned vectors are the columns of the
    inverse; for columns they are the rows of the inverse.
    """
    c0 = np.cross(v1, v2)
    c1 = np.cross(v2, v0)
    c2 = np.cross(v0, v1)
    det = float(np.dot(v0, c0))
    if abs(det) < SINGULAR_EPSILON:
        raise SingularMatrixError(f"Matrix is singular (determinant {det:.3e})")
    return np.stack([c0, c1, c2]) / det


def _apply_logical(m: np.ndarray, values: np.ndarray) -> np.ndarray:
    """Compute ``M · v`` for every vector of ``values`` (shape (..., 3)).

    Elementwise products summed in a fixed order, so each vector gets the
    same result whatever the size of the batch it is part of.
    """
    values = np.asarray(values, dtype=np.float64)
    return (
        values[..., 0:1] * m[:, 0]
        + values[..., 1:2] * m[:, 1]
        + values[..., 2:3] * m[:, 2]
    )


class RowMatrix:
    """A 3x3 matrix stored as three rows."""

    __slots__ = ("rows",)

    def __init__(self, rows: Union[Sequence[Sequence[float]], np.ndarray]) -> None:
        self.rows = _as_frozen(rows)

    @classmethod
    def identity(cls) -> "RowMatrix":
        return cls(np.eye(3))

    def mul_vec(self, v: Vector) -> np.ndarray:
        """Multiply a column vector, ``out[i] = dot(rows[i], v)``."""
        v = np.asarray(v, dtype=np.float64)
        return np.array([np.dot(row, v) for row in self.rows])

    def apply(self, values: np.ndarray) -> np.ndarray:
        """Transform an array of shape (N, 3) vector by vector."""
        return _apply_logical(self.rows, values)

    def inv(self) -> "RowMatrix":
        """Return the inverse matrix.

        Raises:
            SingularMatrixError: If the determinant is (nearly) zero.
        """
        columns = _inverse_of_triple(*self.rows)
        return RowMatrix(columns.T)

    def mul_mat(self, other: Union["RowMatrix", "ColMatrix"]) -> "RowMatrix":
        """Compose transforms, the result applies ``other`` first."""
        return RowMatrix(self.as_array() @ other.as_array())

    def transpose(self) -> "ColMatrix":
        """Same logical transform in column-major layout."""
        return ColMatrix(self.rows.T)

    def as_array(self) -> np.ndarray:
        return self.rows

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (RowMatrix, ColMatrix)):
            return bool(np.array_equal(self.as_array(), other.as_array()))
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.rows.tobytes())

    def __repr__(self) -> str:
        return f"RowMatrix({self.rows.tolist()})"


class ColMatrix:
    """A 3x3 matrix stored as three basis columns."""

    __slots__ = ("columns",)

    def __init__(self, columns: Union[Sequence[Sequence[float]], np.ndarray]) -> None:
        self.columns = _as_frozen(columns)

    def mul_vec(self, v: Vector) -> np.ndarray:
        """Multiply a column vector, ``out = sum(v[i] * columns[i])``."""
        v = np.asarray(v, dtype=np.float64)
        out = np.zeros(3, dtype=np.float64)
        for component, column in zip(v, self.columns):
            out += component * column
        return out

    def apply(self, values: np.ndarray) -> np.ndarray:
        """Transform an array of shape (N, 3) vector by vector."""
        return _apply_logical(self.columns.T, values)

    def inv(self) -> "ColMatrix":
        """Return the inverse matrix.

        Raises:
            SingularMatrixError: If the determinant is (nearly) zero.
        """
        rows = _inverse_of_triple(*self.columns)
        return ColMatrix(rows.T)

    def mul_mat(self, other: Union["RowMatrix", "ColMatrix"]) -> "ColMatrix":
        """Compose transforms, the result applies ``other`` first."""
        return ColMatrix((self.as_array() @ other.as_array()).T)

    def transpose(self) -> RowMatrix:
        """Same logical transform in row-major layout."""
        return RowMatrix(self.columns.T)

    def as_array(self) -> np.ndarray:
        return self.columns.T

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (RowMatrix, ColMatrix)):
            return bool(np.array_equal(self.as_array(), other.as_array()))
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.as_array().tobytes())

    def __repr__(self) -> str:
        return f"ColMatrix({self.columns.tolist()})"
