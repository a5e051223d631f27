# geometry/intersection.py
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional

from phongtracer.core.ray import Ray
from phongtracer.core.utils import eq_with_eps

if TYPE_CHECKING:
    from phongtracer.geometry.shape import Shape


class Intersection:
    """
    Records the ray parameter t at which a ray meets a shape.
    """
    __slots__ = ("t", "object")

    def __init__(self, t: float, shape: "Shape"):
        self.t = t
        self.object = shape

    def __eq__(self, other) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return eq_with_eps(self.t, other.t) and self.object == other.object

    __hash__ = None

    def __repr__(self) -> str:
        return f"Intersection(t={self.t}, object={self.object!r})"


class Intersections:
    """
    An ordered collection of intersections, possibly from several shapes.
    """
    def __init__(self, intersections: Iterable[Intersection] = ()):
        self.items: List[Intersection] = list(intersections)

    def add(self, intersection: Intersection):
        self.items.append(intersection)

    def extend(self, other: Iterable[Intersection]):
        self.items.extend(other)

    def sort(self) -> "Intersections":
        self.items.sort(key=lambda i: i.t)
        return self

    def hit(self) -> Optional[Intersection]:
        """
        Returns the intersection with the lowest non-negative t, or None
        when every intersection lies behind the ray origin.
        """
        self.sort()
        for intersection in self.items:
            if intersection.t > 0 or eq_with_eps(intersection.t, 0.0):
                return intersection
        return None

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Intersection:
        return self.items[index]

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self.items)

    def __repr__(self) -> str:
        return f"Intersections({self.items!r})"


def intersect(shape: "Shape", ray: Ray) -> Intersections:
    return shape.intersect(ray)


def hit(intersections: Intersections) -> Optional[Intersection]:
    return intersections.hit()
