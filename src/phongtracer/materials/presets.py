# materials/presets.py
from phongtracer.core.color import Color
from phongtracer.materials.material import Material


class MaterialPresets:
    """Predefined Phong materials for the demo scenes."""

    @staticmethod
    def default() -> Material:
        return Material()

    @staticmethod
    def matte(color: Color) -> Material:
        return Material(color=color, ambient=0.1, diffuse=0.9, specular=0.0, shininess=10.0)

    @staticmethod
    def plastic(color: Color) -> Material:
        return Material(color=color, ambient=0.1, diffuse=0.7, specular=0.3, shininess=50.0)

    @staticmethod
    def glossy(color: Color) -> Material:
        return Material(color=color, ambient=0.1, diffuse=0.6, specular=0.9, shininess=300.0)

    @staticmethod
    def magenta() -> Material:
        return Material(color=Color(1.0, 0.2, 1.0))

    @staticmethod
    def lime() -> Material:
        return Material(color=Color(0.8, 1.0, 0.6), ambient=0.1, diffuse=0.7, specular=0.2, shininess=200.0)
