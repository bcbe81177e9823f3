"""
Hive view-model — the single owned state behind the canvas screen.

Holds the placed habits and the pan offset.  Every mutation of the habit
list goes through this object; there is no global singleton here (the
web layer owns one instance per process).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from hive.config import HIVE_RULES
from hive.habits import (
    Habit, HabitDraft, Comment, HabitValidationError, HabitNotFoundError,
    validate_draft, validate_comment, habit_to_dict,
)
from hive.placer import Point, place

from .gesture import PressState

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Offset:
    """Pan translation of the canvas."""

    width: float = 0.0
    height: float = 0.0


class HiveState:
    """Habits on the canvas plus the current pan offset."""

    def __init__(self) -> None:
        self.habits: list[Habit] = []
        self.offset = Offset()
        self.last_drag = Offset()

    # ── Lookup ─────────────────────────────────────────────────────

    def get(self, habit_id: str) -> Habit:
        for h in self.habits:
            if h.id == habit_id:
                return h
        raise HabitNotFoundError(habit_id)

    @property
    def occupied(self) -> list[Point]:
        return [h.position for h in self.habits]

    # ── Habits ─────────────────────────────────────────────────────

    def next_position(self, origin: Point) -> Point:
        """Where the next habit would land for *origin*."""
        return place(
            origin, self.occupied, HIVE_RULES.min_distance, HIVE_RULES.max_rings,
            footprint=HIVE_RULES.footprint_size, packing=HIVE_RULES.packing,
        )

    def add_habit(self, draft: HabitDraft, origin: Point) -> Habit:
        """Validate *draft* and place it in the first free slot around *origin*.

        Raises
        ------
        HabitValidationError
            If the draft is missing a title or custom frequency text.
        """
        draft = draft.normalized()
        errors = validate_draft(draft)
        if errors:
            raise HabitValidationError(errors)

        habit = Habit(
            position=self.next_position(origin),
            title=draft.title,
            frequency=draft.frequency,
            custom_frequency=draft.custom_frequency,
            gradient_style=draft.gradient_style,
            description=draft.description,
            priority=draft.priority,
            count=draft.count,
        )
        self.habits.append(habit)
        log.info("Added habit %s '%s' at (%.1f, %.1f)",
                 habit.id, habit.title, habit.position.x, habit.position.y)
        return habit

    def update_habit(self, habit_id: str, draft: HabitDraft) -> Habit:
        """Apply an edit form to a habit; its position stays put."""
        habit = self.get(habit_id)
        draft = draft.normalized()
        errors = validate_draft(draft)
        if errors:
            raise HabitValidationError(errors)

        habit.title = draft.title
        habit.frequency = draft.frequency
        habit.custom_frequency = draft.custom_frequency
        habit.description = draft.description
        habit.priority = draft.priority
        habit.count = draft.count
        habit.gradient_style = draft.gradient_style
        log.info("Updated habit %s '%s'", habit.id, habit.title)
        return habit

    def delete_habit(self, habit_id: str) -> Habit:
        habit = self.get(habit_id)
        self.habits.remove(habit)
        log.info("Deleted habit %s '%s'", habit.id, habit.title)
        return habit

    def increment(self, habit_id: str) -> Habit:
        habit = self.get(habit_id)
        habit.count += 1
        log.info("Habit %s count -> %d", habit.id, habit.count)
        return habit

    def add_comment(
        self, habit_id: str, text: str, when: Optional[datetime] = None,
    ) -> Comment:
        habit = self.get(habit_id)
        errors = validate_comment(text)
        if errors:
            raise HabitValidationError(errors)
        comment = Comment(text=text, date=when or datetime.now(timezone.utc))
        habit.comments.append(comment)
        return comment

    def apply_press(self, habit_id: str, outcome: PressState) -> Habit:
        """Act on a resolved press; only COMMITTED changes the count."""
        if outcome is PressState.COMMITTED:
            return self.increment(habit_id)
        return self.get(habit_id)

    # ── Panning ────────────────────────────────────────────────────

    @property
    def is_view_moved(self) -> bool:
        return abs(self.offset.width) > 1 or abs(self.offset.height) > 1

    def drag_changed(self, dx: float, dy: float) -> Offset:
        """Live drag: offset follows the translation from the drag start."""
        self.offset = Offset(self.last_drag.width + dx, self.last_drag.height + dy)
        return self.offset

    def drag_ended(self) -> Offset:
        self.last_drag = self.offset
        return self.offset

    def center_offset(self, width: float, height: float) -> Offset:
        """Offset that centres the habits' bounding box in the viewport."""
        if not self.habits:
            return Offset()
        xs = [h.position.x for h in self.habits]
        ys = [h.position.y for h in self.habits]
        center_x = (min(xs) + max(xs)) / 2
        center_y = (min(ys) + max(ys)) / 2
        return Offset(width / 2 - center_x, height / 2 - center_y)

    def recenter(self, width: float, height: float) -> Offset:
        self.offset = self.center_offset(width, height)
        self.last_drag = self.offset
        return self.offset


def state_to_dict(state: HiveState) -> dict:
    """Snapshot of the canvas for a client to draw."""
    return {
        "habits": [habit_to_dict(h) for h in state.habits],
        "offset": {"width": state.offset.width, "height": state.offset.height},
        "is_view_moved": state.is_view_moved,
    }
