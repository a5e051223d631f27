# core/matrix.py
from typing import Sequence

import numpy as np

from phongtracer.core.errors import (
    MatrixNotInvertibleError,
    No2x2SubmatrixError,
    OutOfMatrixBorderError,
)
from phongtracer.core.tuple import Tuple
from phongtracer.core.utils import EPSILON, eq_with_eps

SUPPORTED_ORDERS = (2, 3, 4)


class Matrix:
    """
    A square matrix of order 2, 3 or 4 stored as a float64 numpy array.

    The determinant and inverse are computed by cofactor (Laplace) expansion
    rather than LAPACK so results follow the same arithmetic at every order.
    Apart from set(), every operation returns a new matrix.
    """

    def __init__(self, rows: Sequence[Sequence[float]]):
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] != data.shape[1] or data.shape[0] not in SUPPORTED_ORDERS:
            raise ValueError(f"unsupported matrix shape {data.shape}")
        self._data = data

    @classmethod
    def zeros(cls, order: int = 4) -> "Matrix":
        return cls(np.zeros((order, order)))

    @classmethod
    def identity(cls, order: int = 4) -> "Matrix":
        return cls(np.identity(order))

    @property
    def order(self) -> int:
        return self._data.shape[0]

    def copy(self) -> "Matrix":
        return Matrix(self._data)

    def _check_bounds(self, row: int, col: int):
        if not (0 <= row < self.order and 0 <= col < self.order):
            raise OutOfMatrixBorderError(row, col, self.order)

    def get(self, row: int, col: int) -> float:
        self._check_bounds(row, col)
        return float(self._data[row, col])

    def set(self, row: int, col: int, value: float):
        self._check_bounds(row, col)
        self._data[row, col] = value

    def transpose(self) -> "Matrix":
        return Matrix(self._data.T)

    def submatrix(self, row: int, col: int) -> "Matrix":
        """
        Returns the matrix one order smaller with the given row and column removed.
        """
        if self.order == 2:
            raise No2x2SubmatrixError()
        self._check_bounds(row, col)
        reduced = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return Matrix(reduced)

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        m = self.minor(row, col)
        return -m if (row + col) % 2 else m

    def determinant(self) -> float:
        if self.order == 2:
            d = self._data
            return float(d[0, 0] * d[1, 1] - d[0, 1] * d[1, 0])
        return sum(self.get(0, col) * self.cofactor(0, col) for col in range(self.order))

    def is_invertible(self, eps: float = EPSILON) -> bool:
        return not eq_with_eps(self.determinant(), 0.0, eps)

    def inverse(self, eps: float = EPSILON) -> "Matrix":
        """
        Inverts the matrix as the transposed cofactor matrix over the determinant.

        Raises MatrixNotInvertibleError when the determinant is within eps of 0.
        """
        det = self.determinant()
        if eq_with_eps(det, 0.0, eps):
            raise MatrixNotInvertibleError(det)
        result = Matrix.zeros(self.order)
        for row in range(self.order):
            for col in range(self.order):
                # Writing at (col, row) transposes the cofactor matrix.
                result.set(col, row, self.cofactor(row, col) / det)
        return result

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            if other.order != self.order:
                raise ValueError(f"cannot multiply order {self.order} by order {other.order}")
            return Matrix(self._data @ other._data)
        if isinstance(other, Tuple):
            if self.order != 4:
                raise ValueError("only a 4x4 matrix can transform a tuple")
            x, y, z, w = self._data @ np.array(list(other))
            return Tuple(x, y, z, w)
        return NotImplemented

    __mul__ = __matmul__

    def approx_eq(self, other: "Matrix", eps: float = EPSILON) -> bool:
        if self.order != other.order:
            return False
        return bool(np.all(np.abs(self._data - other._data) < eps))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.approx_eq(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()})"


def identity(order: int = 4) -> Matrix:
    return Matrix.identity(order)
