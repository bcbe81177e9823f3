"""Placer value types and configuration constants."""

from __future__ import annotations

import math
from dataclasses import dataclass

from hive.config import HIVE_RULES


# ── Value types ────────────────────────────────────────────────────


@dataclass(frozen=True)
class Point:
    """A 2-D position in display units."""

    x: float
    y: float

    @classmethod
    def of(cls, value: "Point | tuple[float, float]") -> "Point":
        """Accept a Point or an ``(x, y)`` pair."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(float(x), float(y))

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class HexFootprint:
    """Nominal width of one hexagon; ring spacing is derived from it."""

    size: float

    def horizontal_spacing(self, packing: float) -> float:
        """Distance between consecutive rings."""
        return self.size * math.sqrt(3) * packing


@dataclass(frozen=True)
class RingCoordinate:
    """Slot ``index`` on ring ``ring``.

    Ring 0 is the origin alone; ring ``k >= 1`` has ``6 * k`` slots.
    """

    ring: int
    index: int = 0

    @property
    def slot_count(self) -> int:
        return 1 if self.ring == 0 else 6 * self.ring

    @property
    def angle(self) -> float:
        """Angle of this slot around the origin, in radians."""
        if self.ring == 0:
            return 0.0
        return self.index * (math.pi / 3) / self.ring


class PlacementPreconditionError(ValueError):
    """Raised when the placer is called with arguments it cannot honour."""

    def __init__(self, argument: str, reason: str) -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(f"Invalid '{argument}': {reason}")


# ── Configuration ──────────────────────────────────────────────────

DEFAULT_MAX_RINGS = HIVE_RULES.max_rings
DEFAULT_PACKING = HIVE_RULES.packing
PACKING_RANGE = (0.5, 0.6)
