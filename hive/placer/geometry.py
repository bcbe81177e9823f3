"""Low-level geometry helpers for the placer."""

from __future__ import annotations

import math
from typing import Iterable, Iterator

from shapely.geometry import Polygon, Point as ShapelyPoint

from .models import Point, RingCoordinate


def ring_point(
    origin: Point, coord: RingCoordinate, spacing: float,
) -> Point:
    """Position of a ring slot around *origin*.

    Ring ``k`` sits ``k * spacing`` away from the origin; its ``6k`` slots
    are spread evenly starting at angle 0 (pointing along +x).
    """
    if coord.ring == 0:
        return origin
    radius = coord.ring * spacing
    angle = coord.angle
    return Point(
        origin.x + math.cos(angle) * radius,
        origin.y + math.sin(angle) * radius,
    )


def iter_ring_coordinates(max_rings: int) -> Iterator[RingCoordinate]:
    """Yield ring slots in scan order: ring 1 first, ascending index."""
    for ring in range(1, max_rings + 1):
        for index in range(6 * ring):
            yield RingCoordinate(ring, index)


def is_free(
    candidate: Point, occupied: Iterable[Point], min_distance: float,
) -> bool:
    """True if *candidate* keeps at least *min_distance* from every point."""
    return all(candidate.distance_to(p) >= min_distance for p in occupied)


# ── Hexagon shape ──────────────────────────────────────────────────


def hexagon_vertices(center: Point, size: float) -> list[tuple[float, float]]:
    """Six vertices of a regular hexagon of width *size*.

    The first vertex sits at 30°, so vertices land at 90° and 270° and
    the side edges are vertical.  Radius is half the size.
    """
    radius = size / 2
    verts = []
    for i in range(6):
        angle = math.radians(i * 60.0 + 30.0)
        verts.append((
            center.x + math.cos(angle) * radius,
            center.y + math.sin(angle) * radius,
        ))
    return verts


def hexagon_outline(center: Point, size: float) -> Polygon:
    """Shapely polygon for the hexagon drawn at *center*."""
    return Polygon(hexagon_vertices(center, size))


def contains_point(center: Point, size: float, point: Point) -> bool:
    """Check if *point* lies inside (or on) the hexagon at *center*."""
    if size <= 0:
        return False
    return hexagon_outline(center, size).covers(ShapelyPoint(point.x, point.y))
