# camera/camera.py
import math

from phongtracer.core.ray import Ray
from phongtracer.core.tuple import Tuple, vector

WORLD_UP = vector(0.0, 1.0, 0.0)


class Camera:
    """
    A pinhole camera aimed by yaw and pitch angles (radians).

    With yaw = pitch = 0 the camera looks down -z; yaw = pi turns it to +z.
    The pitch must stay strictly between -pi/2 and pi/2. The world frame is
    left-handed: looking down +z, +x is on the right of the image.
    """
    def __init__(self, position: Tuple, yaw: float, pitch: float,
                 fov: float, aspect_ratio: float):
        self.position = position
        self.yaw = yaw
        self.pitch = pitch
        self.fov = fov
        self.aspect_ratio = aspect_ratio
        self.update_camera()

    def update_camera(self):
        """Recomputes the orientation and the image plane after a move."""
        cos_pitch = math.cos(self.pitch)
        self.forward = vector(math.sin(self.yaw) * cos_pitch,
                              math.sin(self.pitch),
                              -math.cos(self.yaw) * cos_pitch).normalize()
        self.right = WORLD_UP.cross(self.forward).normalize()
        self.up = self.forward.cross(self.right).normalize()

        # Image plane at unit distance along forward.
        half_height = math.tan(self.fov / 2)
        half_width = half_height * self.aspect_ratio
        self.horizontal = self.right * (2.0 * half_width)
        self.vertical = self.up * (2.0 * half_height)

        plane_centre = self.position + self.forward
        self.lower_left_corner = plane_centre - self.right * half_width - self.up * half_height

    def get_ray(self, u: float, v: float) -> Ray:
        """
        Returns the normalized world-space ray through viewport coordinates
        (u, v), both in [0, 1] with (0, 0) at the lower-left corner.
        """
        target = self.lower_left_corner + self.horizontal * u + self.vertical * v
        return Ray(self.position, (target - self.position).normalize())
