# core/tuple.py
import math
from typing import Iterator

from phongtracer.core.errors import InvalidTupleError
from phongtracer.core.utils import EPSILON, eq_with_eps


class Tuple:
    """
    A homogeneous (x, y, z, w) coordinate. w == 1 marks a point and w == 0 a
    vector; both kinds share this one type and its arithmetic.

    Operations never modify a tuple in place, they always build a new one.
    """
    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x: float, y: float, z: float, w: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    def is_point(self) -> bool:
        if eq_with_eps(self.w, 1.0):
            return True
        if eq_with_eps(self.w, 0.0):
            return False
        raise InvalidTupleError(self.w)

    def is_vector(self) -> bool:
        return not self.is_point()

    def __add__(self, other: "Tuple") -> "Tuple":
        if eq_with_eps(self.w, 1.0) and eq_with_eps(other.w, 1.0):
            raise TypeError("cannot add two points")
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Tuple") -> "Tuple":
        if eq_with_eps(self.w, 0.0) and eq_with_eps(other.w, 1.0):
            raise TypeError("cannot subtract a point from a vector")
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> "Tuple":
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> "Tuple":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __rmul__(self, scalar: float) -> "Tuple":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Tuple":
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def approx_eq(self, other: "Tuple", eps: float = EPSILON) -> bool:
        return all(eq_with_eps(a, b, eps) for a, b in zip(self, other))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return self.approx_eq(other)

    # Approximate equality cannot be made consistent with a hash.
    __hash__ = None

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalize(self) -> "Tuple":
        """
        Scales the tuple to unit length. The caller must not pass a zero
        vector; the result would be NaN-filled.
        """
        m = self.magnitude()
        if m == 0:
            return Tuple(math.nan, math.nan, math.nan, math.nan)
        return self / m

    def dot(self, other: "Tuple") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: "Tuple") -> "Tuple":
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def reflect(self, normal: "Tuple") -> "Tuple":
        """
        Reflects this (incoming) vector around the given normal.
        """
        return self - normal * 2 * self.dot(normal)

    def __repr__(self) -> str:
        return f"Tuple({self.x}, {self.y}, {self.z}, {self.w})"


def point(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, 0.0)


def magnitude(t: Tuple) -> float:
    return t.magnitude()


def normalize(t: Tuple) -> Tuple:
    return t.normalize()


def dot(a: Tuple, b: Tuple) -> float:
    return a.dot(b)


def cross(a: Tuple, b: Tuple) -> Tuple:
    return a.cross(b)


def reflect(incoming: Tuple, normal: Tuple) -> Tuple:
    return incoming.reflect(normal)
