# core/matrix.py
from typing import Sequence, Tuple, Union

import numpy as np

from spheretrace.core.vector import EPSILON, Vector


class MatrixError(ValueError):
    """Base class for recoverable matrix failures."""


class NonSquareMatrixError(MatrixError):
    pass


class DimensionMismatchError(MatrixError):
    pass


class SingularMatrixError(MatrixError):
    pass


class Matrix:
    """
    A square N×N matrix of float64 values. The backing array is read-only;
    every operation returns a new Matrix.
    """
    def __init__(self, grid: Sequence[Sequence[float]]):
        try:
            row_lengths = [len(row) for row in grid]
        except TypeError:
            raise NonSquareMatrixError("Matrix needs a grid of rows of scalars") from None
        size = len(row_lengths)
        if size == 0:
            raise NonSquareMatrixError("Matrix needs at least one row")
        for length in row_lengths:
            if length != size:
                raise NonSquareMatrixError(
                    f"Matrix is not square: row of length {length} in a {size}-row grid")
        data = np.array(grid, dtype=np.float64)
        if data.ndim != 2:
            raise NonSquareMatrixError(f"Matrix grid must be 2-D, got {data.ndim} dimensions")
        data.flags.writeable = False
        self._data = data

    @classmethod
    def new(cls, grid: Sequence[Sequence[float]]) -> "Matrix":
        return cls(grid)

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        if size < 1:
            raise ValueError(f"Identity matrix size must be >= 1, got {size}")
        return cls(np.identity(size))

    @property
    def size(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, index: Tuple[int, int]) -> float:
        y, x = index
        return float(self._data[y, x])

    def rows(self) -> Tuple[Tuple[float, ...], ...]:
        return tuple(tuple(float(v) for v in row) for row in self._data)

    def as_array(self) -> np.ndarray:
        return self._data.copy()

    def multiply(self, other: Union["Matrix", Vector]) -> Union["Matrix", Vector]:
        """
        Matrix × Matrix for equal sizes, or Matrix × Vector for a 4×4 matrix.
        """
        if isinstance(other, Vector):
            if self.size != 4:
                raise DimensionMismatchError(
                    f"Cannot multiply a {self.size}x{self.size} matrix by a 4-vector")
            return Vector.new(self._data @ other.as_array())
        if not isinstance(other, Matrix):
            raise TypeError(f"Cannot multiply a matrix by {type(other).__name__}")
        if self.size != other.size:
            raise DimensionMismatchError(
                f"Cannot multiply matrices of sizes {self.size} and {other.size}")
        return Matrix(self._data @ other._data)

    def scale(self, k: float) -> "Matrix":
        return Matrix(self._data * k)

    def transposed(self) -> "Matrix":
        return Matrix(self._data.T)

    def determinant(self) -> float:
        """
        Determinant by cofactor expansion along the first row.
        O(n!), fine for the 4×4 matrices used here.
        """
        m = self._data
        if self.size == 1:
            return float(m[0, 0])
        if self.size == 2:
            return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])
        det = 0.0
        for x in range(self.size):
            det += float(m[0, x]) * self.cofactor(0, x)
        return det

    def submatrix(self, y: int, x: int) -> "Matrix":
        """Drops row y and column x."""
        data = np.delete(np.delete(self._data, y, axis=0), x, axis=1)
        return Matrix(data)

    def cofactor(self, y: int, x: int) -> float:
        # The empty minor of a 1×1 matrix has determinant 1
        minor = 1.0 if self.size == 1 else self.submatrix(y, x).determinant()
        sign = 1 - 2 * ((x + y) % 2)
        return sign * minor

    def inverse(self) -> "Matrix":
        """
        Adjugate divided by the determinant.

        Raises SingularMatrixError when the determinant is exactly zero.
        Near-singular matrices are inverted as-is.
        """
        det = self.determinant()
        if det == 0.0:
            raise SingularMatrixError("Tried to invert matrix with determinant 0")

        n = self.size
        grid = [[self.cofactor(x, y) / det for x in range(n)] for y in range(n)]
        return Matrix(grid)

    def approx_equal(self, other: "Matrix", epsilon: float = EPSILON) -> bool:
        if self.size != other.size:
            return False
        return bool(np.all(np.abs(self._data - other._data) < epsilon))

    def __matmul__(self, other):
        if isinstance(other, (Matrix, Vector)):
            return self.multiply(other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, (Matrix, Vector)):
            return self.multiply(other)
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self.rows()]})"

    def __str__(self) -> str:
        n = self.size
        lines = ["┌────" + "────┬────" * (n - 1) + "────┐"]
        for y, row in enumerate(self.rows()):
            lines.append("│" + "│".join(f"{v:^8.2f}" for v in row) + "│")
            if y != n - 1:
                lines.append("├────" + "────┼────" * (n - 1) + "────┤")
        lines.append("└────" + "────┴────" * (n - 1) + "────┘")
        return "\n".join(lines)
