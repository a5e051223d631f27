# materials/material.py
import copy
from dataclasses import dataclass, field

from phongtracer.core.color import Color
from phongtracer.core.utils import EPSILON, eq_with_eps


@dataclass(eq=False)
class Material:
    """
    Surface attributes of the Phong model. The defaults describe a white,
    fairly shiny surface.
    """
    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0))
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0

    def copy(self) -> "Material":
        return copy.deepcopy(self)

    def approx_eq(self, other: "Material", eps: float = EPSILON) -> bool:
        return (self.color.approx_eq(other.color, eps)
                and eq_with_eps(self.ambient, other.ambient, eps)
                and eq_with_eps(self.diffuse, other.diffuse, eps)
                and eq_with_eps(self.specular, other.specular, eps)
                and eq_with_eps(self.shininess, other.shininess, eps))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return self.approx_eq(other)

    __hash__ = None
