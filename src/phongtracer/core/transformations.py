# core/transformations.py
"""
Builders for 4x4 affine transforms. Each starts from the identity and fills
in the cells it needs.

Transforms compose by matrix multiplication in reverse application order:
to scale, then rotate, then translate, use ``translation @ rotation @ scaling``
(or ``chain(scaling, rotation, translation)``).
"""
import math
from functools import reduce

from phongtracer.core.matrix import Matrix


def translation(x: float, y: float, z: float) -> Matrix:
    m = Matrix.identity()
    m.set(0, 3, x)
    m.set(1, 3, y)
    m.set(2, 3, z)
    return m


def scaling(x: float, y: float, z: float) -> Matrix:
    m = Matrix.identity()
    m.set(0, 0, x)
    m.set(1, 1, y)
    m.set(2, 2, z)
    return m


def rotation_x(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    m = Matrix.identity()
    m.set(1, 1, c)
    m.set(1, 2, -s)
    m.set(2, 1, s)
    m.set(2, 2, c)
    return m


def rotation_y(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    m = Matrix.identity()
    m.set(0, 0, c)
    m.set(0, 2, s)
    m.set(2, 0, -s)
    m.set(2, 2, c)
    return m


def rotation_z(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    m = Matrix.identity()
    m.set(0, 0, c)
    m.set(0, 1, -s)
    m.set(1, 0, s)
    m.set(1, 1, c)
    return m


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """
    Each argument moves one coordinate in proportion to another, e.g. xy
    moves x in proportion to y.
    """
    m = Matrix.identity()
    m.set(0, 1, xy)
    m.set(0, 2, xz)
    m.set(1, 0, yx)
    m.set(1, 2, yz)
    m.set(2, 0, zx)
    m.set(2, 1, zy)
    return m


def chain(*transforms: Matrix) -> Matrix:
    """
    Composes transforms listed in the order they should be applied.
    """
    return reduce(lambda acc, t: t @ acc, transforms, Matrix.identity())
