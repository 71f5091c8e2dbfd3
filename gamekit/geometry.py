"""Indexed 2D vertex meshes, their factories and simple shapes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from gamekit.colors import Color3, Color4
from gamekit.rects import Rect2D
from gamekit.vectors import Val2D

__all__ = [
    "Vertex2D",
    "IndexedVertex2D",
    "Square",
    "Triangle",
    "line",
    "triangle",
    "rectangle",
    "regular_polygon",
    "circle",
]


def _unit(v: Val2D) -> Val2D:
    """``v`` scaled to length 1; a zero vector gives NaN components."""
    length = v.length()
    if length == 0:
        return Val2D(math.nan, math.nan)
    return v / length


def _bisector(p1: Val2D, p2: Val2D, p3: Val2D) -> Val2D:
    """Unit direction bisecting the corner at ``p2`` between its two edge normals."""
    d1 = _unit(p1 - p2)
    d2 = _unit(p3 - p2)
    n1 = Val2D(-d1.y, d1.x)
    n2 = Val2D(-d2.y, d2.x)
    return _unit(n1 + n2)


@dataclass
class Vertex2D:
    """One screen-space vertex: position, reciprocal w, colour and texture coordinate."""

    pos: Val2D = field(default_factory=lambda: Val2D(0.0, 0.0))
    rhw: float = 1.0
    color: Color4 = field(default_factory=Color4)
    uv: Val2D = field(default_factory=lambda: Val2D(0.0, 0.0))


@dataclass
class IndexedVertex2D:
    """A vertex list plus a triangle index list (three indices per triangle)."""

    vertex: list[Vertex2D] = field(default_factory=list)
    index: list[int] = field(default_factory=list)

    @classmethod
    def _sized(cls, vertex_count: int, index_count: int) -> IndexedVertex2D:
        return cls([Vertex2D() for _ in range(vertex_count)], [0] * index_count)

    def framed(self, thickness: float = 1.0, r_ignore_count: int = 0) -> IndexedVertex2D:
        """Outline of the vertex loop as a strip of quads ``thickness`` wide.

        The last ``r_ignore_count`` vertices are left out of the loop.
        """
        count = len(self.vertex) - r_ignore_count
        if count < 0:
            raise ValueError("r_ignore_count is larger than the vertex count")
        half = thickness / 2
        ring = self.vertex[:count]
        following = ring[1:] + ring[:1]
        after_next = ring[2:] + ring[:2]

        result = IndexedVertex2D()
        for v1, v2, v3 in zip(ring, following, after_next):
            c = _bisector(v1.pos, v2.pos, v3.pos) * half
            result.vertex.append(Vertex2D(pos=v2.pos - c, color=v2.color))
            result.vertex.append(Vertex2D(pos=v2.pos + c, color=v2.color))

        total = len(result.vertex)
        if total < 1:
            return result
        result.index = [
            (2 * i + offset) % total
            for i in range(total // 2)
            for offset in (0, 1, 2, 3, 0, 2)
        ]
        return result

    def truss_framed(self, thickness: float = 1.0) -> IndexedVertex2D:
        """Outline every indexed triangle separately, ``thickness`` wide."""
        half = thickness / 2
        polygon_count = len(self.index)
        result = IndexedVertex2D._sized(polygon_count * 2, 0)

        for i in range(polygon_count // 3):
            v1 = self.vertex[self.index[i]]
            v2 = self.vertex[self.index[i * 3 + 1]]
            v3 = self.vertex[self.index[i * 3 + 2]]

            c1 = _bisector(v1.pos, v2.pos, v3.pos) * half
            c2 = _bisector(v3.pos, v1.pos, v2.pos) * half
            c3 = _bisector(v2.pos, v3.pos, v1.pos) * half

            base = i * 6
            for slot, corner, offset in ((0, v2, c1), (2, v1, c2), (4, v3, c3)):
                outer = result.vertex[base + slot]
                inner = result.vertex[base + slot + 1]
                outer.pos = corner.pos + offset
                inner.pos = corner.pos - offset
                outer.color = corner.color
                inner.color = corner.color

        if polygon_count < 1:
            return result

        total = len(result.vertex)
        result.index = [
            ((2 * i + offset) % 6) + (i // 3) * 6
            for i in range(total // 2)
            for offset in (0, 1, 2, 3, 2, 1)
        ]
        return result


@dataclass
class Square:
    """An axis-aligned box placed at ``pos`` with ``size`` around ``origin``."""

    pos: Val2D = field(default_factory=Val2D)
    size: Val2D = field(default_factory=Val2D)
    origin: Val2D = field(default_factory=lambda: Val2D(0.0, 0.0))
    edge: float = 0.0
    color: Color3 = field(default_factory=Color3)
    edge_color: Color3 = field(default_factory=Color3)
    fill: bool = True

    def get_rect(self) -> Rect2D:
        """Rectangle whose offset is the near corner and whose size holds the far corner."""
        near = self.pos - self.size * self.origin
        far = self.pos + self.size * self.origin
        return Rect2D(near.x, near.y, far.x, far.y)


@dataclass
class Triangle:
    """Three corner points."""

    poses: tuple[Val2D, Val2D, Val2D] = field(
        default_factory=lambda: (Val2D(), Val2D(), Val2D())
    )

    @staticmethod
    def from_size(size: Val2D) -> Triangle:
        """Right triangle with its right angle at the origin."""
        return Triangle((Val2D(0, 0), Val2D(size.x, 0), Val2D(0, size.y)))


def _paint(mesh: IndexedVertex2D, color: Color4) -> IndexedVertex2D:
    for v in mesh.vertex:
        v.color = color
    return mesh


def line(p1: Val2D, p2: Val2D, color: Color4, thickness: float = 1.0) -> IndexedVertex2D:
    """A quad from ``p1`` to ``p2`` that is ``thickness`` wide."""
    half = thickness / 2
    d = _unit(p2 - p1).rotate(math.pi / 2) * half
    mesh = IndexedVertex2D(
        [Vertex2D(pos=p) for p in (p1 - d, p2 - d, p2 + d, p1 + d)],
        [0, 1, 2, 2, 3, 0],
    )
    return _paint(mesh, color)


def triangle(p1: Val2D, p2: Val2D, p3: Val2D, color: Color4) -> IndexedVertex2D:
    """A single triangle."""
    mesh = IndexedVertex2D([Vertex2D(pos=p) for p in (p1, p2, p3)], [0, 1, 2])
    return _paint(mesh, color)


def rectangle(p1: Val2D, p2: Val2D, color: Color4) -> IndexedVertex2D:
    """Axis-aligned rectangle between the opposite corners ``p1`` and ``p2``."""
    corners = (p1, Val2D(p2.x, p1.y), p2, Val2D(p1.x, p2.y))
    mesh = IndexedVertex2D([Vertex2D(pos=p) for p in corners], [0, 1, 2, 2, 3, 0])
    return _paint(mesh, color)


def regular_polygon(
    size: Any, pos: Val2D, color: Color4, vertexnum: int = 3, angle: float = 0.0
) -> IndexedVertex2D:
    """Triangle fan around ``pos``; the centre is the last vertex.

    Fewer than three corners gives an unrotated triangle.
    """
    if vertexnum < 3:
        return regular_polygon(size, pos, color, 3)

    corners = [
        Vertex2D(
            pos=Val2D(math.cos(rad), math.sin(rad)) * size + pos,
            color=color,
        )
        for rad in (2 * math.pi * (i / vertexnum) + angle for i in range(vertexnum))
    ]
    corners.append(Vertex2D(pos=pos, color=color))

    index = [n for i in range(vertexnum) for n in (vertexnum, i, i + 1)]
    index[-1] = 0
    return IndexedVertex2D(corners, index)


def circle(size: Any, pos: Val2D, color: Color4, vertexnum: int = 16) -> IndexedVertex2D:
    """A regular polygon with at least 16 corners."""
    if vertexnum < 16:
        return regular_polygon(size, pos, color, 16)
    return regular_polygon(size, pos, color, vertexnum)