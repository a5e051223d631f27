# geometry/computations.py
from dataclasses import dataclass

from phongtracer.core.ray import Ray
from phongtracer.core.tuple import Tuple
from phongtracer.geometry.intersection import Intersection
from phongtracer.geometry.shape import Shape


@dataclass(frozen=True)
class Computations:
    """
    Geometry precomputed for shading a single intersection.
    """
    t: float
    object: Shape
    point: Tuple
    eyev: Tuple
    normalv: Tuple
    inside: bool


def prepare_computation(intersection: Intersection, ray: Ray) -> Computations:
    """
    Finds the world point, eye vector and normal for an intersection.

    When the eye is inside the shape the normal is flipped so it always
    points towards the eye.

    Raises:
        MatrixNotInvertibleError: If the shape's transform is singular.
    """
    t = intersection.t
    position = ray.position(t)
    eyev = -ray.direction
    normalv = intersection.object.normal_at(position)
    inside = normalv.dot(eyev) < 0
    if inside:
        normalv = -normalv
    return Computations(t, intersection.object, position, eyev, normalv, inside)
