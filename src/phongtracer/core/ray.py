# core/ray.py
from phongtracer.core.matrix import Matrix
from phongtracer.core.tuple import Tuple


class Ray:
    """
    Represents a ray with an origin point and a direction vector.
    """
    def __init__(self, origin: Tuple, direction: Tuple):
        self.origin = origin
        self.direction = direction

    def position(self, t: float) -> Tuple:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def transform(self, m: Matrix) -> "Ray":
        return Ray(m @ self.origin, m @ self.direction)

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"


def transform(ray: Ray, m: Matrix) -> Ray:
    return ray.transform(m)
