"""Square matrices with cofactor-expansion determinants and inverses.

SquareMatrix is a generic N x N matrix of float64 values. Determinants are
computed by cofactor expansion along row 0, recursing through submatrices
down to the 2 x 2 base case, and the inverse is the adjugate divided by the
determinant. Only 4 x 4 matrices are used for transforms; the 3 x 3 and
2 x 2 sizes appear as intermediate steps of the expansion.

Matrix4 specialises SquareMatrix for affine transforms and supports the
``@`` operator against points, vectors and other 4 x 4 matrices.

Example:
    >>> from raylite.core.matrix import Matrix4
    >>> from raylite.core.tuples import Point
    >>> m = Matrix4([[1, 0, 0, 5], [0, 1, 0, -3], [0, 0, 1, 2], [0, 0, 0, 1]])
    >>> m @ Point(-3.0, 4.0, 5.0)
    Point(2.0, 1.0, 7.0)
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from raylite.core.tuples import EPSILON, Point, Tuple, Vector


class SingularMatrixError(ValueError):
    """Raised when the inverse of a matrix with determinant 0 is requested."""


class SquareMatrix:
    """An N x N matrix of double precision floats.

    Elements are addressed as ``m[row, col]``; ``m[row]`` returns a row as a
    tuple of floats. Equality is element-wise within EPSILON.
    """

    __slots__ = ("_data",)

    def __init__(self, rows: Sequence[Sequence[float]] | npt.ArrayLike) -> None:
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] != data.shape[1] or data.shape[0] == 0:
            raise ValueError(f"Matrix data must be square and non-empty, got shape {data.shape}")
        self._data = data

    @classmethod
    def identity(cls, size: int) -> SquareMatrix:
        return cls(np.identity(size))

    @property
    def size(self) -> int:
        return self._data.shape[0]

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a copy of the elements as a 2-D NumPy array."""
        return self._data.copy()

    def to_list(self) -> list[list[float]]:
        return self._data.tolist()

    def __getitem__(self, index):
        if isinstance(index, tuple):
            return float(self._data[index])
        return tuple(float(v) for v in self._data[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        if self._data.shape != other._data.shape:
            return False
        return bool(np.all(np.abs(self._data - other._data) < EPSILON))

    __hash__ = None  # type: ignore[assignment]

    def __matmul__(self, other):
        if isinstance(other, SquareMatrix):
            if other.size != self.size:
                raise ValueError(f"Cannot multiply {self.size}x{self.size} by {other.size}x{other.size}")
            return type(self)(self._data @ other._data)
        return NotImplemented

    def transpose(self) -> SquareMatrix:
        return type(self)(self._data.T)

    def submatrix(self, row: int, col: int) -> SquareMatrix:
        """Remove one row and one column, giving an (N-1) x (N-1) matrix.

        Raises:
            IndexError: If row or col is outside [0, N), or N is 1.
        """
        n = self.size
        if not (0 <= row < n and 0 <= col < n):
            raise IndexError(f"Invalid indices for a {n}x{n} matrix: {row}, {col}")
        if n == 1:
            raise IndexError("A 1x1 matrix has no submatrix")
        data = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return SquareMatrix(data)

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return minor if (row + col) % 2 == 0 else -minor

    def determinant(self) -> float:
        """Determinant by cofactor expansion along row 0."""
        n = self.size
        if n == 1:
            return float(self._data[0, 0])
        if n == 2:
            d = self._data
            return float(d[0, 0] * d[1, 1] - d[0, 1] * d[1, 0])
        return sum(float(self._data[0, col]) * self.cofactor(0, col) for col in range(n))

    def is_invertible(self) -> bool:
        return self.determinant() != 0.0

    def inverse(self) -> SquareMatrix:
        """Adjugate over determinant.

        The singularity check is exact: a determinant that cancels to 0.0 is
        singular, any other value is inverted.

        Raises:
            SingularMatrixError: If the determinant is exactly 0.0.
        """
        determinant = self.determinant()
        if determinant == 0.0:
            raise SingularMatrixError("Cannot invert matrix with determinant of 0")

        n = self.size
        if n == 1:
            return type(self)([[1.0 / determinant]])

        result = np.empty((n, n), dtype=np.float64)
        for row in range(n):
            for col in range(n):
                # Transposed write builds the adjugate in place
                result[col, row] = self.cofactor(row, col) / determinant
        return type(self)(result)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"


class Matrix4(SquareMatrix):
    """A 4 x 4 affine transform.

    ``m @ point`` yields a Point, ``m @ vector`` yields a Vector (the
    translation column has no effect since w = 0), and ``m @ other`` composes
    two transforms.
    """

    __slots__ = ()

    def __init__(self, rows: Sequence[Sequence[float]] | npt.ArrayLike) -> None:
        super().__init__(rows)
        if self.size != 4:
            raise ValueError(f"Matrix4 requires 4x4 data, got {self.size}x{self.size}")

    @classmethod
    def identity(cls, size: int = 4) -> Matrix4:
        if size != 4:
            raise ValueError(f"Matrix4 identity must be 4x4, got size {size}")
        return cls(np.identity(4))

    def __matmul__(self, other):
        if isinstance(other, Point):
            x, y, z, _ = self._data @ other.data
            return Point(x, y, z)
        if isinstance(other, Vector):
            x, y, z, _ = self._data @ other.data
            return Vector(x, y, z)
        if isinstance(other, Tuple) and len(other) == 4:
            return Tuple.from_array(self._data @ other.data)
        return super().__matmul__(other)
