# geometry/sphere.py
import math
from typing import List

from phongtracer.core.ray import Ray
from phongtracer.core.tuple import Tuple, point
from phongtracer.core.utils import eq_with_eps
from phongtracer.geometry.shape import Shape

ORIGIN = point(0.0, 0.0, 0.0)


class Sphere(Shape):
    """
    The unit sphere centred at the object-space origin. Size and position
    come from the transform.
    """

    def local_intersect(self, ray: Ray) -> List[float]:
        sphere_to_ray = ray.origin - ORIGIN
        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0
        discriminant = b * b - 4.0 * a * c

        if discriminant < 0 and not eq_with_eps(discriminant, 0.0):
            return []

        # A tangent ray still reports two (equal) roots.
        sqrt_disc = math.sqrt(max(discriminant, 0.0))
        t1 = (-b - sqrt_disc) / (2.0 * a)
        t2 = (-b + sqrt_disc) / (2.0 * a)
        return [t1, t2]

    def local_normal_at(self, object_point: Tuple) -> Tuple:
        return object_point - ORIGIN
