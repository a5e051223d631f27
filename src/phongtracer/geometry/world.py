# geometry/world.py
import logging
from typing import List, Optional

from phongtracer.core.color import BLACK, Color
from phongtracer.core.ray import Ray
from phongtracer.core.transformations import scaling
from phongtracer.core.tuple import point
from phongtracer.geometry.computations import Computations, prepare_computation
from phongtracer.geometry.intersection import Intersections
from phongtracer.geometry.shape import Shape
from phongtracer.geometry.sphere import Sphere
from phongtracer.materials.light import PointLight
from phongtracer.materials.lighting import lighting
from phongtracer.materials.material import Material

logger = logging.getLogger(__name__)


class World:
    """
    A scene: at most one point light and a list of shapes.

    The world is only read while rays are evaluated, so every color_at()
    call is independent of the others.
    """
    def __init__(self, light: Optional[PointLight] = None, objects: Optional[List[Shape]] = None):
        self.light = light
        self.objects: List[Shape] = [] if objects is None else list(objects)

    @classmethod
    def default(cls) -> "World":
        """
        Two concentric spheres lit from (-10, -10, -10), the scene used to
        check shading end to end.
        """
        outer = Sphere(material=Material(
            color=Color(0.8, 1.0, 0.6),
            ambient=0.1,
            diffuse=0.7,
            specular=0.2,
            shininess=200.0,
        ))
        inner = Sphere(transform=scaling(0.5, 0.5, 0.5))
        light = PointLight(point(-10.0, -10.0, -10.0), Color(1.0, 1.0, 1.0))
        return cls(light, [outer, inner])

    def add(self, obj: Shape):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def intersect(self, ray: Ray) -> Intersections:
        """
        Intersects the ray with every object and returns all hits sorted by t.
        """
        intersections = Intersections()
        for obj in self.objects:
            intersections.extend(obj.intersect(ray))
        return intersections.sort()

    def shade_hit(self, comps: Computations) -> Optional[Color]:
        if self.light is None:
            logger.debug("No light in world, %r left unshaded", comps.object)
            return None
        return lighting(comps.object.get_material(), self.light, comps.point, comps.eyev, comps.normalv)

    def color_at(self, ray: Ray) -> Color:
        """
        Returns the color seen along the ray, black if it hits nothing.

        Raises:
            MatrixNotInvertibleError: If an object's transform is singular.
        """
        hit = self.intersect(ray).hit()
        if hit is None:
            return BLACK
        color = self.shade_hit(prepare_computation(hit, ray))
        return BLACK if color is None else color
