"""
Press gesture state machine for a habit hexagon.

States:
- IDLE: no pointer down
- PRESSING: pointer down, hold timer running, progress outline filling
- COMMITTED: released inside the hexagon after the hold threshold
- EDIT_REQUESTED: released over the edit button
- CANCELLED: released too early or outside the hexagon

Locations are in hexagon-local coordinates: (0, 0) is the top-left of
the ``size`` x ``size`` frame, so the centre is ``(size / 2, size / 2)``.
Timestamps are plain floats in seconds; callers pass them explicitly so
the machine never reads a clock on its own.
"""

from __future__ import annotations

import logging
import math
from enum import Enum, auto
from typing import Optional

from hive.config import HIVE_RULES
from hive.placer import Point, contains_point

log = logging.getLogger(__name__)


class PressState(Enum):
    IDLE = auto()
    PRESSING = auto()
    COMMITTED = auto()
    EDIT_REQUESTED = auto()
    CANCELLED = auto()

    @property
    def is_final(self) -> bool:
        return self in (PressState.COMMITTED, PressState.EDIT_REQUESTED,
                        PressState.CANCELLED)


class PressGesture:
    """Tracks one press on a habit hexagon from pointer-down to release."""

    def __init__(
        self,
        size: float,
        *,
        threshold_s: float = HIVE_RULES.long_press_s,
        edit_button_inset: float = HIVE_RULES.edit_button_inset,
        edit_button_radius: float = HIVE_RULES.edit_button_radius,
    ) -> None:
        self.size = size
        self.threshold_s = threshold_s
        self.edit_button_radius = edit_button_radius
        self.edit_button = Point(size - edit_button_inset, edit_button_inset)
        self.reset()

    def reset(self) -> None:
        self.state = PressState.IDLE
        self.start_time: Optional[float] = None
        self.location: Optional[Point] = None
        self.over_edit_button = False

    # ── Hit tests ──────────────────────────────────────────────────

    @property
    def center(self) -> Point:
        return Point(self.size / 2, self.size / 2)

    def is_inside(self, location: Point) -> bool:
        return contains_point(self.center, self.size, location)

    def is_over_edit_button(self, location: Point) -> bool:
        return location.distance_to(self.edit_button) < self.edit_button_radius

    # ── Events ─────────────────────────────────────────────────────

    def pointer_down(self, location: Point, at: float) -> None:
        if self.state.is_final:
            self.reset()
        self.state = PressState.PRESSING
        self.start_time = at
        self.location = location
        self.over_edit_button = self.is_over_edit_button(location)
        log.debug("Press start at (%.1f, %.1f), size=%.0f, t=%.3f",
                  location.x, location.y, self.size, at)

    def pointer_move(self, location: Point, at: float) -> bool:
        """Track the pointer.

        A move while idle starts the press.  Returns True when the
        pointer entered or left the edit button, so the caller can play
        the hover animation.
        """
        if self.state is not PressState.PRESSING:
            self.pointer_down(location, at)
            return self.over_edit_button

        self.location = location
        over = self.is_over_edit_button(location)
        changed = over != self.over_edit_button
        self.over_edit_button = over
        log.debug("Press move to (%.1f, %.1f), over_edit=%s",
                  location.x, location.y, over)
        return changed

    def pointer_up(self, at: float) -> PressState:
        """Resolve the press into its final state."""
        if self.state is not PressState.PRESSING:
            log.debug("Release without an active press ignored")
            return self.state

        elapsed = at - self.start_time
        inside = self.location is not None and self.is_inside(self.location)

        if self.over_edit_button:
            self.state = PressState.EDIT_REQUESTED
        elif elapsed >= self.threshold_s and inside:
            self.state = PressState.COMMITTED
        else:
            self.state = PressState.CANCELLED

        log.debug("Press end: %s (held %.3fs of %.3fs, inside=%s)",
                  self.state.name, elapsed, self.threshold_s, inside)
        return self.state

    # ── Progress outline ───────────────────────────────────────────

    def progress(self, at: float) -> float:
        """Fraction of the hold threshold elapsed, clamped to [0, 1]."""
        if self.state is not PressState.PRESSING or self.start_time is None:
            return 0.0
        if self.threshold_s <= 0:
            return 1.0
        return max(0.0, min(1.0, (at - self.start_time) / self.threshold_s))


def replay(
    size: float, events: list[tuple[str, float, float, float]],
) -> PressState:
    """Run a recorded event list through a fresh PressGesture.

    Each event is ``(kind, x, y, t)`` with kind ``"down"``, ``"move"`` or
    ``"up"``; ``x``/``y`` are ignored for ``"up"``.  Returns the final
    state, or CANCELLED if the events never press or never release the
    pointer.
    """
    gesture = PressGesture(size)
    for kind, x, y, t in events:
        if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(t)):
            raise ValueError(f"Non-finite {kind} event ({x}, {y}, t={t})")
        if kind == "down":
            gesture.pointer_down(Point(x, y), t)
        elif kind == "move":
            gesture.pointer_move(Point(x, y), t)
        elif kind == "up":
            outcome = gesture.pointer_up(t)
            return outcome if outcome.is_final else PressState.CANCELLED
        else:
            raise ValueError(f"Unknown pointer event kind '{kind}'")
    return PressState.CANCELLED
