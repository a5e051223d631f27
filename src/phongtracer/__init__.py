"""CPU ray tracing kernel: geometry, transforms, intersections and Phong shading."""
from phongtracer.core.color import Color
from phongtracer.core.errors import (
    InvalidTupleError,
    MatrixError,
    MatrixNotInvertibleError,
    No2x2SubmatrixError,
    OutOfCanvasBorderError,
    OutOfMatrixBorderError,
)
from phongtracer.core.matrix import Matrix
from phongtracer.core.ray import Ray
from phongtracer.core.tuple import Tuple, point, vector
from phongtracer.geometry.computations import Computations, prepare_computation
from phongtracer.geometry.intersection import Intersection, Intersections, hit, intersect
from phongtracer.geometry.sphere import Sphere
from phongtracer.geometry.world import World
from phongtracer.materials.light import PointLight
from phongtracer.materials.lighting import lighting
from phongtracer.materials.material import Material

__version__ = "0.1.0"
