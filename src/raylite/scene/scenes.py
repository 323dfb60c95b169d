"""Ready-made demo scenes.

Each builder creates its shapes from a fresh ShapeFactory, so shape ids start
at 0 in every world. The ``*_scene`` builders return a (World, Camera) pair
sized for the requested resolution and field of view.

Available scenes:
    - default_world: two concentric spheres, used throughout the tests
    - spheres_scene: three spheres on a floor between two walls, all spheres
    - room_scene: three spheres inside a box of planes
    - patterns_scene: one shape per pattern variant on a checkered floor

Example:
    >>> import math
    >>> from raylite.scene.scenes import spheres_scene
    >>> world, camera = spheres_scene(200, 100, math.pi / 3)
    >>> len(world)
    6
"""

from __future__ import annotations

import math
from collections.abc import Callable

from raylite.camera.camera import Camera
from raylite.core.transform import Transform, scaling, shearing, view_transform
from raylite.core.tuples import Colour, Point, Vector
from raylite.geometry.shape import Shape, ShapeFactory
from raylite.materials.material import Material
from raylite.materials.pattern import Pattern
from raylite.scene.light import PointLight
from raylite.scene.world import World

# Coefficients shared by the demo objects
_GLOSSY = {"diffuse": 0.7, "specular": 0.3}
_MATTE = {"diffuse": 0.85, "specular": 0.15}


def default_world(shapes: ShapeFactory | None = None) -> World:
    """Two concentric spheres lit from the upper left front.

    The outer sphere is a unit sphere coloured (0.8, 1.0, 0.6) with diffuse
    0.7 and specular 0.2; the inner one is scaled by 0.5 with the default
    material. The light is white at (-10, 10, -10).

    Args:
        shapes: Factory to draw ids from. A new one is used when omitted.
    """
    shapes = shapes if shapes is not None else ShapeFactory()
    outer = shapes.sphere(
        material=Material.with_colour(Colour(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2)
    )
    inner = shapes.sphere(transform=scaling(0.5, 0.5, 0.5))
    light = PointLight(Point(-10.0, 10.0, -10.0), Colour.white())
    return World([outer, inner], light)


def _glossy_spheres(shapes: ShapeFactory) -> list[Shape]:
    """The green, lime and yellow spheres shared by the sphere scenes."""
    middle = shapes.sphere(
        transform=Transform().translation(-0.5, 1.0, 0.5).build(),
        material=Material.with_colour(Colour(0.1, 1.0, 0.5), **_GLOSSY),
    )
    right = shapes.sphere(
        transform=Transform().scaling(0.5, 0.5, 0.5).translation(1.5, 0.5, -0.5).build(),
        material=Material.with_colour(Colour(0.5, 1.0, 0.1), **_GLOSSY),
    )
    left = shapes.sphere(
        transform=Transform().scaling(0.33, 0.33, 0.33).translation(-1.5, 0.33, -0.75).build(),
        material=Material.with_colour(Colour(1.0, 0.8, 0.1), **_GLOSSY),
    )
    return [middle, right, left]


def spheres_scene(width: int, height: int, field_of_view: float) -> tuple[World, Camera]:
    """Three spheres resting on a floor in front of two walls.

    The floor and walls are spheres flattened to 0.01 in y, so the scene
    needs no planes at all.
    """
    shapes = ShapeFactory()
    wall_material = Material.with_colour(Colour(1.0, 0.9, 0.9), specular=0.0)
    flattened = Transform().scaling(10.0, 0.01, 10.0)

    floor = shapes.sphere(transform=flattened.build(), material=wall_material)
    left_wall = shapes.sphere(
        transform=flattened.rotation_x(math.pi / 2)
        .rotation_y(-math.pi / 4)
        .translation(0.0, 0.0, 5.0)
        .build(),
        material=wall_material,
    )
    right_wall = shapes.sphere(
        transform=flattened.rotation_x(math.pi / 2)
        .rotation_y(math.pi / 4)
        .translation(0.0, 0.0, 5.0)
        .build(),
        material=wall_material,
    )

    world = World(
        [floor, left_wall, right_wall, *_glossy_spheres(shapes)],
        PointLight(Point(0.0, 2.0, 2.0), Colour.white()),
    )
    camera = Camera(
        width,
        height,
        field_of_view,
        view_transform(Point(0.0, 1.5, -5.0), Point(0.0, 1.0, 0.0), Vector(0.0, 1.0, 0.0)),
    )
    return world, camera


def room_scene(width: int, height: int, field_of_view: float) -> tuple[World, Camera]:
    """Red, green and orange spheres inside a light blue room of planes."""
    shapes = ShapeFactory()

    spheres = [
        shapes.sphere(
            transform=Transform().translation(-2.0, -1.5, 2.0).build(),
            material=Material.with_colour(Colour(1.0, 0.0, 0.0), **_GLOSSY),
        ),
        shapes.sphere(
            transform=Transform().scaling(1.25, 1.25, 1.25).translation(1.5, -0.5, -2.5).build(),
            material=Material.with_colour(Colour(0.0, 1.0, 0.0), **_GLOSSY),
        ),
        shapes.sphere(
            transform=Transform().scaling(1.125, 1.125, 1.125).translation(0.0, 0.25, -1.0).build(),
            material=Material.with_colour(Colour(1.0, 0.5, 0.0), **_GLOSSY),
        ),
    ]

    upright = Transform().rotation_x(math.pi / 2)
    walls = [
        # floor
        shapes.plane(
            transform=Transform().translation(0.0, -3.0, 0.0).build(),
            material=Material.with_colour(Colour(0.6, 0.8, 1.0), **_MATTE),
        ),
        # back wall
        shapes.plane(
            transform=upright.translation(0.0, 0.0, 3.0).build(),
            material=Material.with_colour(Colour(0.7, 0.85, 1.0), **_MATTE),
        ),
        # ceiling
        shapes.plane(
            transform=Transform().rotation_x(math.pi).translation(0.0, 2.0, 0.0).build(),
            material=Material.with_colour(Colour(0.8, 0.9, 1.0), **_MATTE),
        ),
        # right wall
        shapes.plane(
            transform=upright.translation(0.0, 0.0, 4.0).rotation_y(math.pi / 2).build(),
            material=Material.with_colour(Colour(0.75, 0.88, 1.0), **_MATTE),
        ),
        # left wall
        shapes.plane(
            transform=upright.translation(0.0, 0.0, 4.0).rotation_y(-math.pi / 2).build(),
            material=Material.with_colour(Colour(0.65, 0.82, 1.0), **_MATTE),
        ),
    ]

    world = World(
        spheres + walls,
        PointLight(Point(-2.0, -1.5, -2.0), Colour.white()),
    )
    camera = Camera(
        width,
        height,
        field_of_view,
        view_transform(Point(0.0, 0.0, -12.0), Point(0.0, -0.4, 0.0), Vector(0.0, 1.0, 0.0)),
    )
    return world, camera


def patterns_scene(width: int, height: int, field_of_view: float) -> tuple[World, Camera]:
    """Patterned spheres on a checkered floor in front of a ringed wall."""
    shapes = ShapeFactory()
    grey = Colour(0.5, 0.5, 0.5)
    white = Colour.white()
    mauve = Colour(0.7, 0.6, 0.7)

    floor = shapes.plane(
        material=Material(pattern=Pattern.checkers(white, grey), **_MATTE),
    )
    wall = shapes.plane(
        transform=Transform().rotation_x(math.pi / 2).translation(0.0, 0.0, 5.0).build(),
        material=Material(
            pattern=Pattern.rings(grey, white, mauve, shearing(1.0, 1.0, 0.0, 0.0, 0.0, 0.0)),
            **_MATTE,
        ),
    )
    ringed = shapes.sphere(
        transform=Transform().scaling(1.5, 1.5, 1.5).rotation_x(1.5).translation(-3.0, 1.5, -4.0).build(),
        material=Material(pattern=Pattern.ring(white, mauve, scaling(0.2, 0.2, 0.2)), **_GLOSSY),
    )
    striped = shapes.sphere(
        transform=Transform().scaling(1.5, 1.5, 1.5).translation(3.0, 1.5, -4.0).build(),
        material=Material(pattern=Pattern.stripes(grey, white, mauve), **_GLOSSY),
    )
    graded = shapes.sphere(
        transform=Transform().scaling(0.33, 0.33, 0.33).translation(0.0, 1.0, -7.0).build(),
        material=Material(
            pattern=Pattern.gradient(
                mauve, Colour.black(), Transform().scaling(2.0, 2.0, 2.0).translation(1.0, 0.0, 0.0).build()
            ),
            **_GLOSSY,
        ),
    )
    disc = shapes.sphere(
        transform=Transform().scaling(0.66, 0.11, 0.66).translation(-2.0, 0.05, -6.25).build(),
        material=Material(
            pattern=Pattern.rings(
                grey,
                white,
                mauve,
                Transform().scaling(0.2, 0.2, 0.2).shearing(0.0, 0.0, 0.0, 0.0, 1.0, 1.0).build(),
            ),
            **_GLOSSY,
        ),
    )

    world = World(
        [floor, wall, ringed, striped, graded, disc],
        PointLight(Point(-7.0, 10.0, -10.0), Colour.white()),
    )
    camera = Camera(
        width,
        height,
        field_of_view,
        view_transform(Point(-1.0, 2.0, -9.0), Point(0.0, 1.0, 0.0), Vector(0.0, 1.0, 0.0)),
    )
    return world, camera


# Scene builders by command line name
SCENES: dict[str, Callable[[int, int, float], tuple[World, Camera]]] = {
    "spheres": spheres_scene,
    "room": room_scene,
    "patterns": patterns_scene,
}
