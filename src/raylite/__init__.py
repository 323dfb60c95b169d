"""Whitted-style CPU ray tracer with Phong shading.

This package renders scenes of transformed spheres and planes lit by a single
point light. Scene state is built with plain Python objects; the per-pixel
render loop runs either serially in Python or in parallel inside a Taichi
kernel on the CPU backend.

Subpackages:
    core: Tuples, square matrices, affine transforms, rays and the Taichi integrator
    geometry: Sphere and plane primitives, intersection records
    materials: Phong material coefficients and surface patterns
    scene: Point light, lighting model, shading computations and the world
    camera: Pinhole camera with pixel-to-ray mapping and render loop
    preview: Pixel canvas, PPM/PNG export and Matplotlib preview
"""

__version__ = "0.1.0"
