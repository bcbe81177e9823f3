"""Main placement engine — first-fit ring walk around an origin."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from .geometry import is_free, iter_ring_coordinates, ring_point
from .models import (
    Point, HexFootprint, RingCoordinate, PlacementPreconditionError,
    DEFAULT_MAX_RINGS, DEFAULT_PACKING, PACKING_RANGE,
)


log = logging.getLogger(__name__)

PointLike = Point | tuple[float, float]


# ── Argument checks ────────────────────────────────────────────────


def _check_point(name: str, value: PointLike) -> Point:
    try:
        pt = Point.of(value)
    except (TypeError, ValueError) as exc:
        raise PlacementPreconditionError(
            name, f"expected a point or (x, y) pair, got {value!r}",
        ) from exc
    if not pt.is_finite:
        raise PlacementPreconditionError(
            name, f"coordinates must be finite, got ({pt.x}, {pt.y})",
        )
    return pt


def _check_real(name: str, value: float) -> bool:
    """True when *value* is a finite number; non-numbers are rejected."""
    try:
        return math.isfinite(value)
    except TypeError as exc:
        raise PlacementPreconditionError(
            name, f"expected a number, got {value!r}",
        ) from exc


def _resolve_footprint(
    footprint: HexFootprint | float | None, min_distance: float,
) -> HexFootprint:
    if footprint is None:
        return HexFootprint(min_distance)
    if not isinstance(footprint, HexFootprint):
        try:
            footprint = HexFootprint(float(footprint))
        except (TypeError, ValueError) as exc:
            raise PlacementPreconditionError(
                "footprint", f"expected a size, got {footprint!r}",
            ) from exc
    if not _check_real("footprint", footprint.size) or footprint.size <= 0:
        raise PlacementPreconditionError(
            "footprint", f"size must be positive and finite, got {footprint.size}",
        )
    return footprint


def _check_arguments(
    origin: PointLike,
    occupied: Sequence[PointLike],
    min_distance: float,
    max_rings: int,
    packing: float,
) -> tuple[Point, list[Point]]:
    """Validate placer inputs and normalise them to Points."""
    if not _check_real("min_distance", min_distance) or min_distance <= 0:
        raise PlacementPreconditionError(
            "min_distance", f"must be positive and finite, got {min_distance}",
        )
    if isinstance(max_rings, bool) or not isinstance(max_rings, int) or max_rings < 1:
        raise PlacementPreconditionError(
            "max_rings", f"must be a positive integer, got {max_rings!r}",
        )
    lo, hi = PACKING_RANGE
    if not _check_real("packing", packing) or not lo <= packing <= hi:
        raise PlacementPreconditionError(
            "packing", f"must lie in [{lo}, {hi}], got {packing}",
        )
    origin_pt = _check_point("origin", origin)
    occupied_pts = [
        _check_point(f"occupied[{i}]", p) for i, p in enumerate(occupied)
    ]
    return origin_pt, occupied_pts


# ── Main placement functions ──────────────────────────────────────


def locate_slot(
    origin: PointLike,
    occupied: Sequence[PointLike],
    min_distance: float,
    max_rings: int = DEFAULT_MAX_RINGS,
    *,
    footprint: HexFootprint | float | None = None,
    packing: float = DEFAULT_PACKING,
) -> RingCoordinate | None:
    """Find the first free ring slot around *origin*.

    Returns ``RingCoordinate(0, 0)`` when nothing is occupied yet, the
    first free slot in scan order otherwise, or ``None`` if every slot up
    to *max_rings* is too close to an occupied point.

    Raises
    ------
    PlacementPreconditionError
        If an argument is out of range or a coordinate is not finite.
    """
    origin_pt, occupied_pts = _check_arguments(
        origin, occupied, min_distance, max_rings, packing,
    )
    fp = _resolve_footprint(footprint, min_distance)

    if not occupied_pts:
        return RingCoordinate(0, 0)

    spacing = fp.horizontal_spacing(packing)
    for coord in iter_ring_coordinates(max_rings):
        candidate = ring_point(origin_pt, coord, spacing)
        if is_free(candidate, occupied_pts, min_distance):
            return coord
    return None


def place(
    origin: PointLike,
    occupied: Sequence[PointLike],
    min_distance: float,
    max_rings: int = DEFAULT_MAX_RINGS,
    *,
    footprint: HexFootprint | float | None = None,
    packing: float = DEFAULT_PACKING,
) -> Point:
    """Return the nearest free point on the ring lattice around *origin*.

    The first placement always lands on the origin.  After that, rings
    are walked outward and the first candidate (ascending ring, then
    ascending index) that keeps *min_distance* from every occupied point
    wins.  The result depends only on the set of occupied points, not on
    their order.

    Parameters
    ----------
    origin : Point | tuple
        Centre of the lattice.
    occupied : sequence of Point | tuple
        Positions already taken.  Not modified.
    min_distance : float
        Minimum centre-to-centre distance from every occupied point.
    max_rings : int
        How many rings to try before giving up (default 100).
    footprint : HexFootprint | float, optional
        Hexagon size the ring spacing is derived from.  Defaults to
        *min_distance*.
    packing : float
        Spacing multiplier on ``size * sqrt(3)``, within [0.5, 0.6].

    Returns
    -------
    Point
        The chosen slot, or *origin* if the search is exhausted.  In that
        case the caller ends up with overlapping items.
    """
    coord = locate_slot(
        origin, occupied, min_distance, max_rings,
        footprint=footprint, packing=packing,
    )
    origin_pt = Point.of(origin)

    if coord is None:
        log.warning(
            "No free slot within %d rings of (%.1f, %.1f); "
            "falling back to the origin",
            max_rings, origin_pt.x, origin_pt.y,
        )
        return origin_pt

    fp = _resolve_footprint(footprint, min_distance)
    result = ring_point(origin_pt, coord, fp.horizontal_spacing(packing))
    log.debug(
        "Placed at ring %d slot %d -> (%.1f, %.1f)",
        coord.ring, coord.index, result.x, result.y,
    )
    return result
