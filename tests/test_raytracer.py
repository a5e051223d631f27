import logging
import math

import pytest

from phongtracer.camera.camera import Camera
from phongtracer.core.color import BLACK, Color
from phongtracer.core.transformations import scaling, translation
from phongtracer.core.tuple import point
from phongtracer.geometry.sphere import Sphere
from phongtracer.geometry.world import World
from phongtracer.materials.light import PointLight
from phongtracer.renderer.raytracer import Renderer


@pytest.fixture
def camera():
    return Camera(point(0, 0, -5), yaw=math.pi, pitch=0.0, fov=math.pi / 2, aspect_ratio=1.0)


@pytest.fixture
def narrow_camera():
    return Camera(point(0, 0, -5), yaw=math.pi, pitch=0.0, fov=math.radians(30), aspect_ratio=1.0)


def test_render_default_world(camera):
    canvas = Renderer(5, 5).render(World.default(), camera)
    assert canvas.width == 5
    assert canvas.height == 5
    assert canvas.pixel_at(2, 2) == Color(0.38066, 0.47583, 0.2855)
    assert canvas.pixel_at(0, 0) == BLACK
    assert canvas.pixel_at(4, 4) == BLACK


def test_render_matches_color_at(narrow_camera):
    camera = narrow_camera
    world = World(PointLight(point(-10, 10, -10), Color(1, 1, 1)), [Sphere()])
    canvas = Renderer(7, 7).render(world, camera)
    for x, y in ((3, 3), (2, 3), (3, 4)):
        u = (x + 0.5) / 7
        v = 1.0 - (y + 0.5) / 7
        assert canvas.pixel_at(x, y) == world.color_at(camera.get_ray(u, v))


def test_rows_run_top_to_bottom(narrow_camera):
    camera = narrow_camera
    # Light from above: the top of the sphere is brighter than the bottom.
    world = World(PointLight(point(0, 10, -5), Color(1, 1, 1)), [Sphere()])
    canvas = Renderer(9, 9).render(world, camera)
    top = canvas.pixel_at(4, 3)
    bottom = canvas.pixel_at(4, 5)
    assert top.red > bottom.red


def test_failed_rays_are_left_black(camera, caplog):
    world = World(PointLight(point(-10, 10, -10), Color(1, 1, 1)), [Sphere(transform=scaling(0, 0, 0))])
    with caplog.at_level(logging.WARNING, logger="phongtracer.renderer.raytracer"):
        canvas = Renderer(3, 3).render(world, camera)
    assert all(canvas.pixel_at(x, y) == BLACK for x in range(3) for y in range(3))
    assert "9 of 9 rays failed" in caplog.text


def test_first_column_sees_negative_x(narrow_camera):
    sphere = Sphere(transform=translation(-0.8, 0, 0) @ scaling(0.5, 0.5, 0.5))
    world = World(PointLight(point(0, 0, -10), Color(1, 1, 1)), [sphere])
    canvas = Renderer(9, 9).render(world, narrow_camera)
    assert canvas.pixel_at(1, 4) != BLACK
    assert canvas.pixel_at(7, 4) == BLACK
