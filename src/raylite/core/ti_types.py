"""Taichi setup, vector/matrix types and affine helpers for kernel code.

All kernel-side geometry is double precision to match the Python-side math,
so these types are pinned to ti.f64 rather than the default float type.
Call init_taichi once before importing any module that allocates fields
(raylite.core.integrator); this module allocates none.

The helpers below take 3-component points/vectors and apply a 4 x 4 affine
matrix with the homogeneous coordinate implied (1 for points, 0 for vectors).
"""

import taichi as ti

vec3 = ti.types.vector(3, ti.f64)
vec4 = ti.types.vector(4, ti.f64)
mat4 = ti.types.matrix(4, 4, ti.f64)


@ti.func
def transform_point(m: mat4, p: vec3) -> vec3:
    """Apply an affine matrix to a point (w = 1)."""
    h = m @ vec4(p.x, p.y, p.z, 1.0)
    return vec3(h.x, h.y, h.z)


@ti.func
def transform_vector(m: mat4, v: vec3) -> vec3:
    """Apply an affine matrix to a direction (w = 0, translation ignored)."""
    h = m @ vec4(v.x, v.y, v.z, 0.0)
    return vec3(h.x, h.y, h.z)


@ti.func
def reflect(incident: vec3, normal: vec3) -> vec3:
    """Reflect an incident vector about a unit normal."""
    return incident - 2.0 * incident.dot(normal) * normal


def init_taichi(arch=None, **kwargs) -> None:
    """Initialise Taichi for double precision rendering.

    Args:
        arch: Taichi backend. Defaults to ti.cpu.
        **kwargs: Extra options forwarded to ti.init.
    """
    ti.init(arch=arch if arch is not None else ti.cpu, default_fp=ti.f64, **kwargs)
