"""Geometry module for shape primitives and intersections.

Components:
    sphere: Unit sphere intersection and normal
    plane: xz-plane intersection and normal
    shape: Transformed shapes tagged by ShapeKind, and the ShapeFactory
    intersection: Intersection records and hit selection

Each primitive has a Python function for the serial renderer and a Taichi
function (@ti.func) with the same semantics for the parallel kernel.
"""

from .intersection import Intersection, find_hit
from .plane import PARALLEL_EPSILON, hit_plane
from .shape import Shape, ShapeFactory, ShapeKind
from .sphere import hit_sphere

__all__ = [
    "Intersection",
    "find_hit",
    "Shape",
    "ShapeKind",
    "ShapeFactory",
    "hit_sphere",
    "hit_plane",
    "PARALLEL_EPSILON",
]
