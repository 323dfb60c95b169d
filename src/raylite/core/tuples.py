"""Fixed-arity numeric tuples: points, vectors and colours.

A Tuple wraps a small float64 NumPy array. Points and vectors are 4-component
homogeneous tuples distinguished by their w coordinate (1.0 for points, 0.0
for vectors), which lets affine matrices translate points while leaving
directions untouched. Colours are 3-component (red, green, blue) tuples whose
channels are not clamped until an image is serialised.

Equality between tuples is approximate: components are compared with an
absolute tolerance of EPSILON.

Example:
    >>> from raylite.core.tuples import Point, Vector
    >>> p = Point(1.0, 2.0, 3.0)
    >>> v = Vector(0.0, 1.0, 0.0)
    >>> p + v
    Point(1.0, 3.0, 3.0)
    >>> (p - Point(0.0, 0.0, 0.0)).magnitude()
    3.7416573867739413
"""

from __future__ import annotations

import math
from numbers import Real

import numpy as np
import numpy.typing as npt

# Tolerance for every floating point comparison in the renderer
EPSILON = 1e-5


def approx_equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """Compare two floats with an absolute tolerance."""
    return abs(a - b) < epsilon


class Tuple:
    """An N-component tuple of double precision floats.

    Supports component-wise addition and subtraction, negation, scalar
    multiplication and division, and the element-wise (Hadamard) product.
    Arithmetic results are re-typed through ``_promote`` so that, for example,
    the difference of two points is a Vector.

    Attributes:
        data: The underlying float64 array (read-only view).
    """

    __slots__ = ("_data",)

    def __init__(self, *components: float) -> None:
        self._data = np.array(components, dtype=np.float64)

    @classmethod
    def from_array(cls, data: npt.ArrayLike) -> Tuple:
        """Build a tuple of the most specific type for the given components."""
        array = np.asarray(data, dtype=np.float64)
        return _homogeneous(array) if array.shape == (4,) else Tuple(*array)

    @property
    def data(self) -> npt.NDArray[np.float64]:
        view = self._data.view()
        view.flags.writeable = False
        return view

    def _promote(self, data: npt.NDArray[np.float64]) -> Tuple:
        return Tuple.from_array(data)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __iter__(self):
        return (float(c) for c in self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        if self._data.shape != other._data.shape:
            return False
        return bool(np.all(np.abs(self._data - other._data) < EPSILON))

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return self._promote(self._data + other._data)

    def __sub__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return self._promote(self._data - other._data)

    def __neg__(self) -> Tuple:
        return self._promote(-self._data)

    def __mul__(self, scalar: float) -> Tuple:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self._promote(self._data * float(scalar))

    def __rmul__(self, scalar: float) -> Tuple:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Tuple:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self._promote(self._data / float(scalar))

    def hadamard(self, other: Tuple) -> Tuple:
        """Element-wise product, used to modulate colours by light intensity."""
        return self._promote(self._data * other._data)

    def __repr__(self) -> str:
        components = ", ".join(repr(c) for c in self)
        return f"{type(self).__name__}({components})"


class _Homogeneous(Tuple):
    """Shared accessors for 4-component tuples."""

    __slots__ = ()

    def _promote(self, data: npt.NDArray[np.float64]) -> Tuple:
        return _homogeneous(data)

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    @property
    def w(self) -> float:
        return float(self._data[3])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x!r}, {self.y!r}, {self.z!r})"


class Point(_Homogeneous):
    """A position in space (homogeneous coordinate w = 1)."""

    __slots__ = ()

    def __init__(self, x: float, y: float, z: float) -> None:
        self._data = np.array((x, y, z, 1.0), dtype=np.float64)

    @classmethod
    def origin(cls) -> Point:
        return cls(0.0, 0.0, 0.0)


class Vector(_Homogeneous):
    """A direction or displacement (homogeneous coordinate w = 0)."""

    __slots__ = ()

    def __init__(self, x: float, y: float, z: float) -> None:
        self._data = np.array((x, y, z, 0.0), dtype=np.float64)

    def magnitude(self) -> float:
        return math.sqrt(float(np.dot(self._data, self._data)))

    def normalize(self) -> Vector:
        """Return the unit vector pointing the same way.

        Raises:
            ZeroDivisionError: If the vector has zero length.
        """
        length = self.magnitude()
        if length == 0.0:
            raise ZeroDivisionError("Cannot normalize a zero-length vector")
        return Vector(self.x / length, self.y / length, self.z / length)

    def dot(self, other: Vector) -> float:
        return float(np.dot(self._data, other._data))

    def cross(self, other: Vector) -> Vector:
        x, y, z = np.cross(self._data[:3], other._data[:3])
        return Vector(x, y, z)

    def reflect(self, normal: Vector) -> Vector:
        """Reflect this vector about a (unit) normal."""
        return self - normal * (2.0 * self.dot(normal))


class Colour(Tuple):
    """An RGB colour; channels are unbounded until export."""

    __slots__ = ()

    def __init__(self, red: float, green: float, blue: float) -> None:
        self._data = np.array((red, green, blue), dtype=np.float64)

    @classmethod
    def black(cls) -> Colour:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def white(cls) -> Colour:
        return cls(1.0, 1.0, 1.0)

    def _promote(self, data: npt.NDArray[np.float64]) -> Colour:
        return Colour(*data)

    @property
    def red(self) -> float:
        return float(self._data[0])

    @property
    def green(self) -> float:
        return float(self._data[1])

    @property
    def blue(self) -> float:
        return float(self._data[2])

    def __mul__(self, other):
        # Colour * Colour modulates channel by channel
        if isinstance(other, Colour):
            return self.hadamard(other)
        return super().__mul__(other)


def _homogeneous(data: npt.NDArray[np.float64]) -> Tuple:
    """Type a 4-component array as Point, Vector or a bare Tuple by its w."""
    x, y, z, w = (float(c) for c in data)
    if w == 1.0:
        return Point(x, y, z)
    if w == 0.0:
        return Vector(x, y, z)
    return Tuple(x, y, z, w)
