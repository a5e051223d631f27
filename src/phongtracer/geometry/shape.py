# geometry/shape.py
import uuid
from typing import List, Optional

from phongtracer.core.color import Color
from phongtracer.core.matrix import Matrix
from phongtracer.core.ray import Ray
from phongtracer.core.tuple import Tuple
from phongtracer.geometry.intersection import Intersection, Intersections
from phongtracer.materials.material import Material


class Shape:
    """
    Abstract base for objects that can be hit by a ray.

    A shape's canonical geometry is fixed in object space; placement in the
    world is carried entirely by its transform. Rays are moved into object
    space with the inverse transform and normals are moved back with its
    transpose, so subclasses only implement the object-space math in
    local_intersect() and local_normal_at().
    """
    def __init__(self, transform: Optional[Matrix] = None, material: Optional[Material] = None):
        self.id = uuid.uuid4()
        self._transform = Matrix.identity()
        self._inverse: Optional[Matrix] = None
        self.material = Material() if material is None else material.copy()
        if transform is not None:
            self.set_transform(transform)

    def get_id(self) -> uuid.UUID:
        return self.id

    def get_transform(self) -> Matrix:
        return self._transform.copy()

    def set_transform(self, transform: Matrix):
        self._transform = transform.copy()
        self._inverse = None

    def inverse_transform(self) -> Matrix:
        """
        Returns the cached inverse of the transform, computing it on first use.

        Raises:
            MatrixNotInvertibleError: If the transform is singular.
        """
        if self._inverse is None:
            self._inverse = self._transform.inverse()
        return self._inverse

    def get_material(self) -> Material:
        return self.material

    def set_material(self, material: Material):
        self.material = material.copy()

    def get_color(self) -> Color:
        return self.material.color

    def set_color(self, color: Color):
        self.material.color = color

    def set_ambient(self, ambient: float):
        self.material.ambient = ambient

    def intersect(self, ray: Ray) -> Intersections:
        local_ray = ray.transform(self.inverse_transform())
        return Intersections(Intersection(t, self) for t in self.local_intersect(local_ray))

    def normal_at(self, world_point: Tuple) -> Tuple:
        inverse = self.inverse_transform()
        object_point = inverse @ world_point
        object_normal = self.local_normal_at(object_point)
        world_normal = inverse.transpose() @ object_normal
        # A translation in the transform leaks into w; a normal stays a vector.
        world_normal = Tuple(world_normal.x, world_normal.y, world_normal.z, 0.0)
        return world_normal.normalize()

    def local_intersect(self, ray: Ray) -> List[float]:
        raise NotImplementedError("local_intersect() must be implemented by subclasses.")

    def local_normal_at(self, object_point: Tuple) -> Tuple:
        raise NotImplementedError("local_normal_at() must be implemented by subclasses.")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id})"
