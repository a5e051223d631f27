# renderer/tone_mapping.py
import math

import numpy as np
from numba import njit

from phongtracer.core.utils import EPSILON


@njit
def quantize_kernel(linear, max_value, eps, output):
    """
    Maps linear channel values to integers in [0, max_value]. NaN and values at or
    below 0 become 0, values at or above 1 become max_value (both within eps),
    the rest are scaled and rounded half away from zero.
    """
    height, width, channels = linear.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                value = linear[y, x, c]
                if value != value or value < 0.0 or abs(value) < eps:
                    output[y, x, c] = 0
                elif value > 1.0 or abs(value - 1.0) < eps:
                    output[y, x, c] = max_value
                else:
                    output[y, x, c] = int(math.floor(value * max_value + 0.5))


def quantize(linear: np.ndarray, max_value: int = 255, eps: float = EPSILON) -> np.ndarray:
    """
    Quantizes a (height, width, 3) float image to integers in [0, max_value].
    """
    linear = np.ascontiguousarray(linear, dtype=np.float64)
    output = np.zeros(linear.shape, dtype=np.int64)
    quantize_kernel(linear, max_value, eps, output)
    return output


def scale_color(value: float, max_value: int = 255) -> int:
    return int(quantize(np.array([[[value]]]), max_value)[0, 0, 0])
