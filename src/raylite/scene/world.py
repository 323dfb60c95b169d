"""The world: an arena of shapes lit by one point light.

World is a read-only mapping from shape id to Shape, so intersections and
shading records resolve their handles through it. Nothing in the world
changes while rendering, which keeps colour_at safe to evaluate for many
pixels in parallel.

Example:
    >>> from raylite.scene.scenes import default_world
    >>> from raylite.core.ray import Ray
    >>> from raylite.core.tuples import Point, Vector
    >>> world = default_world()
    >>> colour = world.colour_at(Ray(Point(0.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0)))
    >>> round(colour.red, 5), round(colour.green, 5), round(colour.blue, 5)
    (0.38066, 0.47583, 0.2855)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from raylite.core.ray import Ray
from raylite.core.tuples import Colour, Point
from raylite.geometry.intersection import Intersection, find_hit
from raylite.geometry.shape import Shape
from raylite.scene.computations import Computations, prepare_computations
from raylite.scene.light import PointLight
from raylite.scene.lighting import lighting


class World(Mapping[int, Shape]):
    """A collection of shapes and the single light that illuminates them.

    Args:
        shapes: Shapes to include. Ids must be unique.
        light: The scene's point light.

    Raises:
        ValueError: If two shapes share an id.
    """

    def __init__(self, shapes: Iterable[Shape], light: PointLight) -> None:
        self._shapes: dict[int, Shape] = {}
        for shape in shapes:
            if shape.id in self._shapes:
                raise ValueError(f"Duplicate shape id {shape.id} in world")
            self._shapes[shape.id] = shape
        self._light = light

    @property
    def light(self) -> PointLight:
        return self._light

    @property
    def shapes(self) -> list[Shape]:
        """Shapes in insertion order."""
        return list(self._shapes.values())

    def __getitem__(self, shape_id: int) -> Shape:
        return self._shapes[shape_id]

    def __iter__(self) -> Iterator[int]:
        return iter(self._shapes)

    def __len__(self) -> int:
        return len(self._shapes)

    def intersect(self, ray: Ray) -> list[Intersection]:
        """All intersections of the ray with every shape, unsorted."""
        intersections: list[Intersection] = []
        for shape in self._shapes.values():
            intersections.extend(shape.intersect(ray))
        return intersections

    def prepare_computations(self, intersection: Intersection, ray: Ray) -> Computations:
        return prepare_computations(intersection, ray, self)

    def is_shadowed(self, point: Point) -> bool:
        """Whether any shape lies between ``point`` and the light.

        Pass the shadow-biased ``over_point`` of a hit, not the raw surface
        point, or the surface may occlude itself.
        """
        to_light = self._light.position - point
        distance = to_light.magnitude()
        # Nothing can lie between a point and a light on top of it
        if distance == 0.0:
            return False
        ray = Ray(point, to_light.normalize())
        hit = find_hit(self.intersect(ray))
        return hit is not None and hit.t < distance

    def shade_hit(self, comps: Computations) -> Colour:
        """Colour at a prepared hit, including the shadow test."""
        shape = self._shapes[comps.shape_id]
        return lighting(
            shape.material,
            self._light,
            comps.over_point,
            comps.eye,
            comps.normal,
            in_shadow=self.is_shadowed(comps.over_point),
            shape=shape,
        )

    def colour_at(self, ray: Ray) -> Colour:
        """Colour seen along a ray; black when it hits nothing."""
        hit = find_hit(self.intersect(ray))
        if hit is None:
            return Colour.black()
        return self.shade_hit(self.prepare_computations(hit, ray))

    def __repr__(self) -> str:
        return f"World(shapes={len(self)}, light={self._light!r})"
