# core/color.py
from typing import Iterator

from phongtracer.core.utils import EPSILON, eq_with_eps


class Color:
    """
    An RGB triple. Channels are not clamped; values outside [0, 1] are only
    squeezed when a canvas is encoded.
    """
    __slots__ = ("red", "green", "blue")

    def __init__(self, red: float, green: float, blue: float):
        self.red = float(red)
        self.green = float(green)
        self.blue = float(blue)

    def __add__(self, other: "Color") -> "Color":
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: "Color") -> "Color":
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other):
        # Scalar scaling or the Hadamard product of two colors.
        if isinstance(other, (int, float)):
            return Color(self.red * other, self.green * other, self.blue * other)
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        return NotImplemented

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)

    def approx_eq(self, other: "Color", eps: float = EPSILON) -> bool:
        return (eq_with_eps(self.red, other.red, eps)
                and eq_with_eps(self.green, other.green, eps)
                and eq_with_eps(self.blue, other.blue, eps))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.approx_eq(other)

    __hash__ = None

    def __iter__(self) -> Iterator[float]:
        return iter((self.red, self.green, self.blue))

    def __repr__(self) -> str:
        return f"Color({self.red}, {self.green}, {self.blue})"


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
