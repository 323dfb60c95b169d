"""Parallel Whitted-style renderer running as a single Taichi kernel.

The Python scene (World and Camera) is uploaded into preallocated Taichi
fields laid out as structure-of-arrays, one slot per shape, and one kernel
evaluates every pixel in parallel. Each pixel runs the same algorithm as
``World.colour_at``: nearest non-negative hit over all shapes, normal flipped
toward the eye, shadow-biased over point, hard shadow test and Phong
lighting, all in double precision.

Fields are allocated when this module is imported, so Taichi must already be
initialised (see ``raylite.core.ti_types.init_taichi``).

Example:
    >>> from raylite.core.ti_types import init_taichi
    >>> init_taichi()
    >>> from raylite.core.integrator import render_world
    >>> from raylite.scene.scenes import spheres_scene
    >>>
    >>> world, camera = spheres_scene(320, 160, 1.047)
    >>> image = render_world(camera, world)  # (160, 320, 3) float64
"""

import logging
import time
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
import taichi as ti

from raylite.core.ti_types import transform_point, transform_vector, vec3
from raylite.geometry.plane import hit_plane
from raylite.geometry.shape import ShapeKind
from raylite.geometry.sphere import hit_sphere
from raylite.materials.pattern import MAX_PATTERN_COLOURS, PatternKind, pattern_colour
from raylite.scene.computations import SHADOW_BIAS
from raylite.scene.lighting import phong

if TYPE_CHECKING:
    from raylite.camera.camera import Camera
    from raylite.scene.world import World

logger = logging.getLogger(__name__)

# =============================================================================
# Scene Storage
# =============================================================================

# Maximum number of shapes in an uploaded world
MAX_SHAPES = 256

_num_shapes = ti.field(dtype=ti.i32, shape=())

# Geometry
_shape_kind = ti.field(dtype=ti.i32, shape=MAX_SHAPES)
_shape_inverse = ti.Matrix.field(4, 4, dtype=ti.f64, shape=MAX_SHAPES)
_shape_normal_matrix = ti.Matrix.field(4, 4, dtype=ti.f64, shape=MAX_SHAPES)

# Material coefficients
_ambient = ti.field(dtype=ti.f64, shape=MAX_SHAPES)
_diffuse = ti.field(dtype=ti.f64, shape=MAX_SHAPES)
_specular = ti.field(dtype=ti.f64, shape=MAX_SHAPES)
_shininess = ti.field(dtype=ti.f64, shape=MAX_SHAPES)

# Patterns
_pattern_kind = ti.field(dtype=ti.i32, shape=MAX_SHAPES)
_pattern_colours = ti.Vector.field(3, dtype=ti.f64, shape=(MAX_SHAPES, MAX_PATTERN_COLOURS))
_pattern_inverse = ti.Matrix.field(4, 4, dtype=ti.f64, shape=MAX_SHAPES)

# Light
_light_position = ti.Vector.field(3, dtype=ti.f64, shape=())
_light_intensity = ti.Vector.field(3, dtype=ti.f64, shape=())


def upload_world(world: "World") -> None:
    """Copy shapes, materials, patterns and the light into kernel storage.

    Shapes are stored in the world's insertion order, which keeps hit
    selection ties identical to the Python path.

    Raises:
        RuntimeError: If the world holds more than MAX_SHAPES shapes.
    """
    shapes = world.shapes
    if len(shapes) > MAX_SHAPES:
        raise RuntimeError(f"Maximum number of shapes ({MAX_SHAPES}) exceeded: {len(shapes)}")

    for i, shape in enumerate(shapes):
        _shape_kind[i] = int(shape.kind)
        _shape_inverse[i] = shape.inverse.to_list()
        _shape_normal_matrix[i] = shape.normal_matrix.to_list()

        material = shape.material
        _ambient[i] = material.ambient
        _diffuse[i] = material.diffuse
        _specular[i] = material.specular
        _shininess[i] = material.shininess

        pattern = material.pattern
        _pattern_kind[i] = int(pattern.kind)
        _pattern_inverse[i] = pattern.inverse.to_list()
        for slot, rgb in enumerate(pattern.padded_colours()):
            _pattern_colours[i, slot] = rgb

    _num_shapes[None] = len(shapes)

    light = world.light
    _light_position[None] = [light.position.x, light.position.y, light.position.z]
    _light_intensity[None] = list(light.intensity)

    logger.debug("Uploaded %d shapes to kernel storage", len(shapes))


# =============================================================================
# Camera and Render Target
# =============================================================================

# Maximum supported image dimensions (preallocated to avoid kernel recompilation)
MAX_IMAGE_WIDTH = 2048
MAX_IMAGE_HEIGHT = 2048

_camera_inverse = ti.Matrix.field(4, 4, dtype=ti.f64, shape=())
_half_width = ti.field(dtype=ti.f64, shape=())
_half_height = ti.field(dtype=ti.f64, shape=())
_pixel_size = ti.field(dtype=ti.f64, shape=())

_image_width = ti.field(dtype=ti.i32, shape=())
_image_height = ti.field(dtype=ti.i32, shape=())

# Colour buffer indexed [x, y], preallocated to the maximum size
_colour_buffer = ti.Vector.field(3, dtype=ti.f32, shape=(MAX_IMAGE_WIDTH, MAX_IMAGE_HEIGHT))


def upload_camera(camera: "Camera") -> None:
    """Copy the camera's view parameters and set the active image size.

    Raises:
        ValueError: If the image exceeds MAX_IMAGE_WIDTH x MAX_IMAGE_HEIGHT.
    """
    if camera.hsize > MAX_IMAGE_WIDTH or camera.vsize > MAX_IMAGE_HEIGHT:
        raise ValueError(
            f"Image dimensions ({camera.hsize}x{camera.vsize}) exceed maximum supported "
            f"({MAX_IMAGE_WIDTH}x{MAX_IMAGE_HEIGHT})"
        )

    _camera_inverse[None] = camera.inverse.to_list()
    _half_width[None] = camera.half_width
    _half_height[None] = camera.half_height
    _pixel_size[None] = camera.pixel_size
    _image_width[None] = camera.hsize
    _image_height[None] = camera.vsize


def get_image_dimensions() -> tuple[int, int]:
    """Active render target size as (width, height)."""
    return int(_image_width[None]), int(_image_height[None])


# =============================================================================
# Kernel Functions
# =============================================================================


@ti.func
def _intersect_shape(i: ti.i32, origin: vec3, direction: vec3):
    """Intersect a world-space ray with shape slot i.

    Returns:
        A tuple (count, t0, t1) from the primitive's object-space test.
    """
    inverse = _shape_inverse[i]
    local_origin = transform_point(inverse, origin)
    local_direction = transform_vector(inverse, direction)

    count = 0
    t0 = 0.0
    t1 = 0.0
    if _shape_kind[i] == int(ShapeKind.SPHERE):
        count, t0, t1 = hit_sphere(local_origin, local_direction)
    else:
        count, t0, t1 = hit_plane(local_origin, local_direction)
    return count, t0, t1


@ti.func
def _find_hit(origin: vec3, direction: vec3):
    """Nearest intersection with t >= 0 over all shapes.

    Shapes are scanned in slot order and ties keep the earlier candidate.

    Returns:
        A tuple (t, shape_index); shape_index is -1 when nothing is hit.
    """
    hit_t = 0.0
    hit_shape = -1
    for i in range(_num_shapes[None]):
        count, t0, t1 = _intersect_shape(i, origin, direction)
        if count > 0 and t0 >= 0.0 and (hit_shape == -1 or t0 < hit_t):
            hit_t = t0
            hit_shape = i
        if count > 1 and t1 >= 0.0 and (hit_shape == -1 or t1 < hit_t):
            hit_t = t1
            hit_shape = i
    return hit_t, hit_shape


@ti.func
def _normal_at(i: ti.i32, world_point: vec3) -> vec3:
    object_point = transform_point(_shape_inverse[i], world_point)
    local_normal = vec3(0.0, 1.0, 0.0)
    if _shape_kind[i] == int(ShapeKind.SPHERE):
        local_normal = object_point
    return transform_vector(_shape_normal_matrix[i], local_normal).normalized()


@ti.func
def _surface_colour(i: ti.i32, world_point: vec3) -> vec3:
    kind = _pattern_kind[i]
    p = transform_point(_shape_inverse[i], world_point)
    if kind != int(PatternKind.SOLID):
        p = transform_point(_pattern_inverse[i], p)
    return pattern_colour(kind, _pattern_colours[i, 0], _pattern_colours[i, 1], _pattern_colours[i, 2], p)


@ti.func
def _is_shadowed(point: vec3) -> ti.i32:
    to_light = _light_position[None] - point
    distance = to_light.norm()

    shadowed = 0
    if distance > 0.0:
        hit_t, hit_shape = _find_hit(point, to_light / distance)
        if hit_shape >= 0 and hit_t < distance:
            shadowed = 1
    return shadowed


@ti.func
def _ray_for_pixel(x: ti.i32, y: ti.i32):
    """World-space ray through the centre of pixel (x, y)."""
    x_offset = (ti.cast(x, ti.f64) + 0.5) * _pixel_size[None]
    y_offset = (ti.cast(y, ti.f64) + 0.5) * _pixel_size[None]
    world_x = _half_width[None] - x_offset
    world_y = _half_height[None] - y_offset

    inverse = _camera_inverse[None]
    pixel = transform_point(inverse, vec3(world_x, world_y, -1.0))
    origin = transform_point(inverse, vec3(0.0, 0.0, 0.0))
    return origin, (pixel - origin).normalized()


@ti.func
def _colour_at(origin: vec3, direction: vec3) -> vec3:
    colour = vec3(0.0, 0.0, 0.0)
    hit_t, i = _find_hit(origin, direction)

    if i >= 0:
        point = origin + direction * hit_t
        eye = -direction
        normal = _normal_at(i, point)
        if normal.dot(eye) < 0.0:
            normal = -normal
        over_point = point + normal * SHADOW_BIAS

        colour = phong(
            _surface_colour(i, over_point),
            _ambient[i],
            _diffuse[i],
            _specular[i],
            _shininess[i],
            _light_position[None],
            _light_intensity[None],
            over_point,
            eye,
            normal,
            _is_shadowed(over_point),
        )

    return colour


@ti.kernel
def _render_kernel():
    for x, y in ti.ndrange(_image_width[None], _image_height[None]):
        origin, direction = _ray_for_pixel(x, y)
        _colour_buffer[x, y] = ti.cast(_colour_at(origin, direction), ti.f32)


# =============================================================================
# Python Entry Point
# =============================================================================


def render_world(camera: "Camera", world: "World") -> npt.NDArray[np.float64]:
    """Render a world through a camera with the parallel kernel.

    Args:
        camera: The camera; its size must fit the preallocated buffer.
        world: The scene; at most MAX_SHAPES shapes.

    Returns:
        The image as a float64 array of shape (vsize, hsize, 3), row 0 at
        the top, unclamped.

    Raises:
        RuntimeError: If the world has too many shapes.
        ValueError: If the image is larger than the render target.
    """
    upload_world(world)
    upload_camera(camera)

    start = time.perf_counter()
    _render_kernel()
    ti.sync()
    logger.debug(
        "Kernel rendered %dx%d pixels in %.3fs",
        camera.hsize,
        camera.vsize,
        time.perf_counter() - start,
    )

    width, height = get_image_dimensions()
    image = _colour_buffer.to_numpy()[:width, :height]
    return np.transpose(image, (1, 0, 2)).astype(np.float64)
