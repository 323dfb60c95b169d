"""Scene module: light, shading and the world.

Components:
    light: Point light source
    lighting: Phong illumination (Python and Taichi versions)
    computations: Per-hit shading geometry
    world: Shape arena with shadow testing and shading
    scenes: Demo scene builders

The shading pipeline for one ray is:
    World.intersect -> find_hit -> prepare_computations -> World.shade_hit
"""

from .computations import SHADOW_BIAS, Computations, prepare_computations
from .light import PointLight
from .lighting import lighting, phong
from .world import World

# Note: scenes is NOT imported here because it depends on raylite.camera,
# which imports this package. Use raylite.scene.scenes directly.

__all__ = [
    "PointLight",
    "lighting",
    "phong",
    "Computations",
    "prepare_computations",
    "SHADOW_BIAS",
    "World",
]
