# main.py
import argparse
import logging
import math
import time
from typing import Callable, Dict, Optional, Sequence, Tuple

import pygame

from phongtracer.camera.camera import Camera
from phongtracer.core.color import Color
from phongtracer.core.transformations import chain, rotation_z, scaling, shearing, translation
from phongtracer.core.tuple import point
from phongtracer.core.utils import deg_to_rad
from phongtracer.geometry.sphere import Sphere
from phongtracer.geometry.world import World
from phongtracer.materials.light import PointLight
from phongtracer.materials.presets import MaterialPresets
from phongtracer.renderer.canvas import Canvas
from phongtracer.renderer.ppm import save_canvas
from phongtracer.renderer.raytracer import Renderer

logger = logging.getLogger(__name__)

QUALITY_LEVELS = {
    "preview": {"width": 100, "height": 100},
    "balanced": {"width": 320, "height": 240},
    "high_quality": {"width": 640, "height": 480},
}

WHITE_LIGHT = Color(1.0, 1.0, 1.0)


def default_scene() -> World:
    return World.default()


def single_sphere_scene() -> World:
    """A magenta sphere lit from above, behind and left of the eye."""
    sphere = Sphere(material=MaterialPresets.magenta())
    return World(PointLight(point(-10.0, 10.0, -10.0), WHITE_LIGHT), [sphere])


def transformed_spheres_scene() -> World:
    """Three spheres placed only through their transforms."""
    squashed = Sphere(
        transform=chain(scaling(0.5, 1.0, 1.0), shearing(1.0, 0.0, 0.0, 0.0, 0.0, 0.0)),
        material=MaterialPresets.plastic(Color(0.85, 0.54, 0.48)),
    )
    left = Sphere(
        transform=chain(scaling(0.6, 0.6, 0.6), translation(-1.8, 0.4, 0.5)),
        material=MaterialPresets.glossy(Color(0.2, 0.5, 1.0)),
    )
    right = Sphere(
        transform=chain(scaling(0.4, 0.8, 0.4), rotation_z(math.pi / 6), translation(1.7, -0.3, -0.5)),
        material=MaterialPresets.matte(Color(0.3, 0.9, 0.3)),
    )
    return World(PointLight(point(-10.0, 10.0, -10.0), WHITE_LIGHT), [squashed, left, right])


SCENES: Dict[str, Callable[[], World]] = {
    "default": default_scene,
    "sphere": single_sphere_scene,
    "transforms": transformed_spheres_scene,
}


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a Phong-shaded sphere scene")
    parser.add_argument("--scene", default="sphere", choices=sorted(SCENES), help="Scene to render (default: sphere)")
    parser.add_argument(
        "--quality",
        default="preview",
        choices=sorted(QUALITY_LEVELS),
        help="Resolution preset (default: preview)",
    )
    parser.add_argument("--width", type=int, help="Override the preset width in pixels")
    parser.add_argument("--height", type=int, help="Override the preset height in pixels")
    parser.add_argument("--fov", type=float, default=40.0, help="Vertical field of view in degrees (default: 40)")
    parser.add_argument(
        "--eye",
        type=float,
        nargs=3,
        metavar=("X", "Y", "Z"),
        default=(0.0, 0.0, -5.0),
        help="Camera position; the camera looks down +z",
    )
    parser.add_argument("--output", "-o", default="render.ppm", help="Output file, .ppm or any Pillow format")
    parser.add_argument("--preview", action="store_true", help="Show the result in a window")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def resolve_size(args: argparse.Namespace) -> Tuple[int, int]:
    quality = QUALITY_LEVELS[args.quality]
    width = args.width if args.width else quality["width"]
    height = args.height if args.height else quality["height"]
    return width, height


def preview(canvas: Canvas):
    """Displays the canvas until the window is closed or Escape is pressed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((canvas.width, canvas.height))
        pygame.display.set_caption("phongtracer")
        # surfarray expects (width, height, 3)
        surface = pygame.surfarray.make_surface(canvas.to_rgb8().transpose(1, 0, 2))
        screen.blit(surface, (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    width, height = resolve_size(args)
    world = SCENES[args.scene]()
    camera = Camera(point(*args.eye), yaw=math.pi, pitch=0.0,
                    fov=deg_to_rad(args.fov), aspect_ratio=width / height)

    logger.info("Rendering scene '%s' at %dx%d", args.scene, width, height)
    start = time.perf_counter()
    canvas = Renderer(width, height).render(world, camera)
    logger.info("Finished in %.2fs", time.perf_counter() - start)

    save_canvas(canvas, args.output)
    logger.info("Saved %s", args.output)

    if args.preview:
        preview(canvas)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
