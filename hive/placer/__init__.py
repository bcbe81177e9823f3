"""Placer — finds a free honeycomb slot for each new habit.

Submodules:
  models        Value types (Point, HexFootprint, RingCoordinate) and constants.
  geometry      Ring positions, free-slot test, hexagon outlines (shapely).
  engine        First-fit ring walk (place, locate_slot).
  serialization JSON conversion (point_to_dict, parse_point).
"""

from .models import Point, HexFootprint, RingCoordinate, PlacementPreconditionError
from .engine import place, locate_slot
from .serialization import point_to_dict, parse_point, ring_coordinate_to_dict
from .geometry import (
    ring_point, iter_ring_coordinates, is_free,
    hexagon_vertices, hexagon_outline, contains_point,
)

__all__ = [
    # Models
    "Point", "HexFootprint", "RingCoordinate", "PlacementPreconditionError",
    # Engine
    "place", "locate_slot",
    # Serialization
    "point_to_dict", "parse_point", "ring_coordinate_to_dict",
    # Geometry
    "ring_point", "iter_ring_coordinates", "is_free",
    "hexagon_vertices", "hexagon_outline", "contains_point",
]
