"""Core math and rendering module.

Components:
    tuples: Point, Vector and Colour with approximate equality
    matrix: Square matrices, determinants and inverses
    transform: Translation, scaling, rotation, shearing and view transforms
    ray: Ray data structure
    ti_types: Taichi initialisation, f64 vector types and affine helpers
    integrator: Parallel Taichi render kernel

All geometry is double precision on both the Python and the kernel side.
"""

from .matrix import Matrix4, SingularMatrixError, SquareMatrix
from .ray import Ray
from .ti_types import init_taichi, mat4, vec3, vec4
from .transform import (
    Transform,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from .tuples import EPSILON, Colour, Point, Tuple, Vector, approx_equal

# Note: integrator is NOT imported here since it allocates Taichi fields on
# import. Call init_taichi() first, then import raylite.core.integrator.

__all__ = [
    "EPSILON",
    "approx_equal",
    "Tuple",
    "Point",
    "Vector",
    "Colour",
    "SquareMatrix",
    "Matrix4",
    "SingularMatrixError",
    "Transform",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "view_transform",
    "Ray",
    "init_taichi",
    "vec3",
    "vec4",
    "mat4",
]
