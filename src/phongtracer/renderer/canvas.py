# renderer/canvas.py
import numpy as np
from PIL import Image

from phongtracer.core.color import BLACK, Color
from phongtracer.core.errors import OutOfCanvasBorderError
from phongtracer.renderer.tone_mapping import quantize


class Canvas:
    """
    A width x height grid of linear colors, stored row-major as a
    (height, width, 3) float64 array.
    """
    def __init__(self, width: int, height: int, color: Color = BLACK):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = np.empty((height, width, 3), dtype=np.float64)
        self._pixels[:, :] = tuple(color)

    def _check_bounds(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfCanvasBorderError(x, y, self.width, self.height)

    def pixel_at(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x]
        return Color(r, g, b)

    def write_pixel(self, x: int, y: int, color: Color):
        self._check_bounds(x, y)
        self._pixels[y, x] = tuple(color)

    def to_array(self) -> np.ndarray:
        return self._pixels.copy()

    def to_rgb8(self) -> np.ndarray:
        return quantize(self._pixels, 255).astype(np.uint8)

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.to_rgb8())

    def save_image(self, path: str):
        """
        Saves the canvas in any format Pillow infers from the file name.
        """
        self.to_image().save(path)
