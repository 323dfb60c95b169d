"""Phong local illumination.

The reflected colour at a surface point is the sum of three terms:

    ambient  = effective * material.ambient
    diffuse  = effective * material.diffuse * max(0, light_dir . normal)
    specular = intensity * material.specular * max(0, reflect_dir . eye)^shininess

where ``effective`` is the surface colour modulated by the light intensity.
When the point is in shadow, or the light is behind the surface, only the
ambient term remains; nothing is attenuated partially. A light sitting
exactly on the shaded point has no direction and also leaves only ambient.
Channels are not clamped.
"""

from typing import TYPE_CHECKING

import taichi as ti

from raylite.core.ti_types import reflect, vec3
from raylite.core.tuples import Colour, Point, Vector
from raylite.materials.material import Material
from raylite.scene.light import PointLight

if TYPE_CHECKING:
    from raylite.geometry.shape import Shape


def lighting(
    material: Material,
    light: PointLight,
    point: Point,
    eye: Vector,
    normal: Vector,
    in_shadow: bool = False,
    shape: "Shape | None" = None,
) -> Colour:
    """Shade a single surface point.

    Args:
        material: Surface material.
        light: The scene's light.
        point: World-space point being shaded.
        eye: Unit vector from the point toward the eye.
        normal: Unit surface normal at the point.
        in_shadow: Whether the light is occluded from the point.
        shape: The shape owning the point. When given, the pattern is
            evaluated through the shape's transform; otherwise ``point`` is
            used directly as the pattern-space point.

    Returns:
        The reflected colour.
    """
    if shape is not None:
        surface = material.pattern.colour_at_object(shape, point)
    else:
        surface = material.pattern.colour_at(point)

    effective = surface * light.intensity
    ambient = effective * material.ambient
    if in_shadow:
        return ambient

    to_light = light.position - point
    if to_light.magnitude() == 0.0:
        return ambient

    light_dir = to_light.normalize()
    light_dot_normal = light_dir.dot(normal)
    if light_dot_normal < 0.0:
        return ambient

    diffuse = effective * (material.diffuse * light_dot_normal)

    reflect_dot_eye = (-light_dir).reflect(normal).dot(eye)
    if reflect_dot_eye <= 0.0:
        return ambient + diffuse

    specular = light.intensity * (material.specular * reflect_dot_eye**material.shininess)
    return ambient + diffuse + specular


@ti.func
def phong(
    surface: vec3,
    ambient: ti.f64,
    diffuse: ti.f64,
    specular: ti.f64,
    shininess: ti.f64,
    light_position: vec3,
    intensity: vec3,
    point: vec3,
    eye: vec3,
    normal: vec3,
    in_shadow: ti.i32,
) -> vec3:
    """Kernel-side version of lighting with the material unpacked."""
    effective = surface * intensity
    result = effective * ambient

    to_light = light_position - point
    distance = to_light.norm()
    if in_shadow == 0 and distance > 0.0:
        light_dir = to_light / distance
        light_dot_normal = light_dir.dot(normal)
        if light_dot_normal >= 0.0:
            result += effective * diffuse * light_dot_normal
            reflect_dot_eye = reflect(-light_dir, normal).dot(eye)
            if reflect_dot_eye > 0.0:
                result += intensity * specular * ti.pow(reflect_dot_eye, shininess)

    return result
