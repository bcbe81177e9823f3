"""Placer serialization — JSON conversion."""

from __future__ import annotations

from .models import Point, RingCoordinate


def point_to_dict(p: Point) -> dict:
    """Serialize a Point to a JSON-safe dict."""
    return {"x": round(p.x, 2), "y": round(p.y, 2)}


def parse_point(data: dict | list | tuple) -> Point:
    """Parse ``{"x": .., "y": ..}`` or ``[x, y]`` into a Point."""
    if isinstance(data, dict):
        return Point(float(data["x"]), float(data["y"]))
    return Point.of(data)


def ring_coordinate_to_dict(coord: RingCoordinate | None) -> dict | None:
    if coord is None:
        return None
    return {"ring": coord.ring, "index": coord.index}
