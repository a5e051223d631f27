# materials/lighting.py
from phongtracer.core.color import BLACK, Color
from phongtracer.core.tuple import Tuple
from phongtracer.materials.light import PointLight
from phongtracer.materials.material import Material


def lighting(material: Material, light: PointLight, position: Tuple,
             eyev: Tuple, normalv: Tuple) -> Color:
    """
    Shades a surface point with the Phong reflection model.

    Args:
        material: Surface attributes at the point.
        light: The light illuminating the point.
        position: World-space point being shaded.
        eyev: Unit vector from the point towards the eye.
        normalv: Unit surface normal, on the same side as the eye.

    Returns:
        Color: ambient + diffuse + specular, unclamped. No occlusion test is
        made, so a point facing the light is lit even when another object
        lies between them.
    """
    effective_color = material.color * light.intensity
    lightv = (light.position - position).normalize()
    ambient = effective_color * material.ambient

    # A negative cosine means the light is on the other side of the surface.
    light_dot_normal = lightv.dot(normalv)
    if light_dot_normal < 0:
        return ambient

    diffuse = effective_color * material.diffuse * light_dot_normal

    reflectv = (-lightv).reflect(normalv)
    reflect_dot_eye = reflectv.dot(eyev)
    if reflect_dot_eye <= 0:
        specular = BLACK
    else:
        factor = reflect_dot_eye ** material.shininess
        specular = light.intensity * material.specular * factor

    return ambient + diffuse + specular
