# core/utils.py
import math

# Tolerance used by every approximate comparison in the package.
EPSILON = 1e-5


def eq_with_eps(a: float, b: float, eps: float = EPSILON) -> bool:
    """
    Returns True when a and b differ by less than eps.
    """
    return abs(a - b) < eps


def deg_to_rad(deg: float) -> float:
    return deg / 180.0 * math.pi
