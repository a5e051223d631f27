# renderer/raytracer.py
import logging

from phongtracer.camera.camera import Camera
from phongtracer.core.errors import MatrixError
from phongtracer.geometry.world import World
from phongtracer.renderer.canvas import Canvas

logger = logging.getLogger(__name__)


class Renderer:
    """
    Casts one ray through the centre of every pixel and stores the color
    the world returns for it.
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

    def render(self, world: World, camera: Camera) -> Canvas:
        canvas = Canvas(self.width, self.height)
        failed = 0
        for y in range(self.height):
            # Canvas rows run top to bottom, viewport v runs bottom to top.
            v = 1.0 - (y + 0.5) / self.height
            for x in range(self.width):
                u = (x + 0.5) / self.width
                ray = camera.get_ray(u, v)
                try:
                    color = world.color_at(ray)
                except MatrixError as exc:
                    failed += 1
                    logger.debug("Ray through pixel (%d, %d) failed: %s", x, y, exc)
                    continue
                canvas.write_pixel(x, y, color)
            logger.debug("Rendered row %d/%d", y + 1, self.height)

        if failed:
            logger.warning("%d of %d rays failed and were left black", failed, self.width * self.height)
        logger.info("Rendered %dx%d frame", self.width, self.height)
        return canvas
