# materials/light.py
from dataclasses import dataclass

from phongtracer.core.color import Color
from phongtracer.core.tuple import Tuple


@dataclass
class PointLight:
    """
    A light with no size, radiating intensity from a single point.
    """
    position: Tuple
    intensity: Color
