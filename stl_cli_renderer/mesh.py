#
# PROJECT: stl-cli-renderer
# MODULE: stl_cli_renderer/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from dataclasses import dataclass

from .math_utils import Vec3

_ORIGIN = Vec3(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Triangle:
    """One facet: three vertices plus the normal read from the file.

    The normal is carried for future lighting; shading does not use it.
    """
    v1: Vec3
    v2: Vec3
    v3: Vec3
    normal: Vec3 = _ORIGIN

    @property
    def vertices(self):
        return (self.v1, self.v2, self.v3)


class Mesh:
    """
    Named list of triangles plus an axis-aligned bounding box.

    Bounds start at +inf/-inf per axis and are widened point by point through
    include_point(); they are never recomputed from the triangle list. An
    empty mesh therefore keeps its sentinel bounds, so check is_empty before
    using center or extent.
    """

    def __init__(self, name: str = ""):
        self.name = name
        self.triangles = []
        self.min_bounds = Vec3(math.inf, math.inf, math.inf)
        self.max_bounds = Vec3(-math.inf, -math.inf, -math.inf)

    def __len__(self):
        return len(self.triangles)

    def __iter__(self):
        return iter(self.triangles)

    def __repr__(self):
        return f"Mesh(name={self.name!r}, triangles={len(self.triangles)})"

    @property
    def is_empty(self) -> bool:
        return not self.triangles

    def include_point(self, v: Vec3):
        """Widen the running bounds to contain v."""
        self.min_bounds = self.min_bounds.component_min(v)
        self.max_bounds = self.max_bounds.component_max(v)

    def add_triangle(self, tri: Triangle):
        self.triangles.append(tri)

    def add_facet(self, v1: Vec3, v2: Vec3, v3: Vec3, normal: Vec3 = _ORIGIN):
        """Append a triangle and fold its vertices into the bounds."""
        for v in (v1, v2, v3):
            self.include_point(v)
        self.add_triangle(Triangle(v1, v2, v3, normal))

    @property
    def center(self) -> Vec3:
        return (self.min_bounds + self.max_bounds) / 2.0

    @property
    def extent(self) -> Vec3:
        return self.max_bounds - self.min_bounds

    @property
    def max_extent(self) -> float:
        return max(self.extent)

    @classmethod
    def cube(cls, size: float = 2.0) -> 'Mesh':
        """Factory for a cube centred on the origin (12 triangles)."""
        h = size / 2.0
        corners = [
            Vec3(-h, -h, -h), Vec3(h, -h, -h), Vec3(h, h, -h), Vec3(-h, h, -h),
            Vec3(-h, -h, h), Vec3(h, -h, h), Vec3(h, h, h), Vec3(-h, h, h),
        ]
        quads = [
            ((0, 3, 2, 1), Vec3(0, 0, -1)),  # front
            ((5, 6, 7, 4), Vec3(0, 0, 1)),   # back
            ((4, 7, 3, 0), Vec3(-1, 0, 0)),  # left
            ((1, 2, 6, 5), Vec3(1, 0, 0)),   # right
            ((3, 7, 6, 2), Vec3(0, 1, 0)),   # top
            ((4, 0, 1, 5), Vec3(0, -1, 0)),  # bottom
        ]
        mesh = cls("cube")
        for (a, b, c, d), normal in quads:
            mesh.add_facet(corners[a], corners[b], corners[c], normal)
            mesh.add_facet(corners[a], corners[c], corners[d], normal)
        return mesh
