"""Shared tunables for the hive canvas.

These values describe how big habit hexagons are, how tightly the placer
packs them, and how the press gesture and habit forms behave.  The
**placer** (which spaces rings around the origin) and the **habit model**
(which sizes each hexagon by priority) both read from this single source
of truth.

Change a value here and both stay in sync automatically.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HiveRules:
    """Layout and interaction rules for the habit canvas.

    All distances are in display points, all durations in seconds.
    """

    high_size: float = 180.0
    """Hexagon width of a High priority habit (the largest footprint)."""

    medium_size: float = 160.0
    """Hexagon width of a Medium priority habit."""

    low_size: float = 140.0
    """Hexagon width of a Low priority habit."""

    packing: float = 0.58
    """Ring spacing multiplier on ``size * sqrt(3)``.  Any value in
    [0.5, 0.6] gives a non-overlapping honeycomb; lower packs tighter."""

    min_distance_factor: float = 1.0
    """Minimum centre-to-centre distance as a multiple of the footprint."""

    max_rings: int = 100
    """How many rings the placer walks before giving up."""

    long_press_s: float = 1.0
    """How long a press must be held before release counts it."""

    edit_button_inset: float = 15.0
    """Offset of the edit button centre from the hexagon's top-right
    corner, on both axes."""

    edit_button_radius: float = 20.0
    """Hit radius of the edit button."""

    title_limit: int = 20
    """Maximum habit title length."""

    custom_frequency_limit: int = 15
    """Maximum custom-frequency text length."""

    # ── Derived helpers ────────────────────────────────────────────

    @property
    def footprint_size(self) -> float:
        """Footprint used for placement.

        Every slot is sized for the largest hexagon so habits of mixed
        priority never collide.
        """
        return max(self.high_size, self.medium_size, self.low_size)

    @property
    def min_distance(self) -> float:
        """Minimum centre-to-centre distance between placed habits."""
        return self.footprint_size * self.min_distance_factor


# Module-level singleton — importable everywhere.
HIVE_RULES = HiveRules()
