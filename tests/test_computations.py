from phongtracer.core.ray import Ray
from phongtracer.core.transformations import translation
from phongtracer.core.tuple import point, vector
from phongtracer.geometry.computations import prepare_computation
from phongtracer.geometry.intersection import Intersection
from phongtracer.geometry.sphere import Sphere


def test_precomputing_state_of_intersection():
    r = Ray(point(0, 0, -5), vector(0, 0, 1))
    shape = Sphere()
    i = Intersection(4, shape)
    comps = prepare_computation(i, r)
    assert comps.t == i.t
    assert comps.object is shape
    assert comps.point == point(0, 0, -1)
    assert comps.eyev == vector(0, 0, -1)
    assert comps.normalv == vector(0, 0, -1)


def test_hit_on_the_outside():
    r = Ray(point(0, 0, -5), vector(0, 0, 1))
    comps = prepare_computation(Intersection(4, Sphere()), r)
    assert comps.inside is False


def test_hit_on_the_inside_flips_normal():
    r = Ray(point(0, 0, 0), vector(0, 0, 1))
    comps = prepare_computation(Intersection(1, Sphere()), r)
    assert comps.point == point(0, 0, 1)
    assert comps.eyev == vector(0, 0, -1)
    assert comps.inside is True
    assert comps.normalv == vector(0, 0, -1)


def test_normal_uses_world_space_point():
    shape = Sphere(transform=translation(0, 0, 1))
    r = Ray(point(0, 0, -5), vector(0, 0, 1))
    comps = prepare_computation(Intersection(5, shape), r)
    assert comps.point == point(0, 0, 0)
    assert comps.normalv == vector(0, 0, -1)
