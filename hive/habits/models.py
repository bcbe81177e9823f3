"""Habit dataclasses, enums and errors."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum

from hive.config import HIVE_RULES
from hive.placer.models import Point


# ── Enums ──────────────────────────────────────────────────────────


class Frequency(Enum):
    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    CUSTOM = "Custom"

    @property
    def display_text(self) -> str:
        """Lower-cased label; empty for Custom (the habit supplies its own)."""
        if self is Frequency.CUSTOM:
            return ""
        return self.value.lower()


class Priority(Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def size(self) -> float:
        """Hexagon width for this priority."""
        return {
            Priority.HIGH: HIVE_RULES.high_size,
            Priority.MEDIUM: HIVE_RULES.medium_size,
            Priority.LOW: HIVE_RULES.low_size,
        }[self]


class GradientStyle(Enum):
    BLUE = "blue"
    RED = "red"
    GREEN = "green"
    LIGHT_PINK = "light_pink"
    ORANGE = "orange"
    YELLOW = "yellow"
    PINK = "pink"
    TEAL = "teal"
    GREY = "grey"


# ── Dataclasses ────────────────────────────────────────────────────


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass
class Comment:
    text: str
    date: datetime
    id: str = field(default_factory=_new_id)


@dataclass
class Habit:
    """A habit hexagon placed on the canvas."""

    position: Point
    title: str
    frequency: Frequency = Frequency.DAILY
    custom_frequency: str = ""
    gradient_style: GradientStyle = GradientStyle.BLUE
    description: str = ""
    priority: Priority = Priority.MEDIUM
    count: int = 0
    comments: list[Comment] = field(default_factory=list)
    id: str = field(default_factory=_new_id)

    @property
    def display_frequency(self) -> str:
        if self.frequency is Frequency.CUSTOM:
            return self.custom_frequency
        return self.frequency.display_text

    @property
    def size(self) -> float:
        return self.priority.size


@dataclass
class HabitDraft:
    """Unsaved add/edit form state."""

    title: str = ""
    frequency: Frequency = Frequency.DAILY
    custom_frequency: str = ""
    description: str = ""
    priority: Priority = Priority.MEDIUM
    count: int = 0
    gradient_style: GradientStyle = GradientStyle.BLUE

    @classmethod
    def from_habit(cls, habit: Habit) -> "HabitDraft":
        """Seed an edit form with the habit's current values."""
        return cls(
            title=habit.title,
            frequency=habit.frequency,
            custom_frequency=habit.custom_frequency,
            description=habit.description,
            priority=habit.priority,
            count=habit.count,
            gradient_style=habit.gradient_style,
        )

    def normalized(self) -> "HabitDraft":
        """Copy with text fields cut to the form's input limits."""
        return replace(
            self,
            title=self.title[:HIVE_RULES.title_limit],
            custom_frequency=self.custom_frequency[:HIVE_RULES.custom_frequency_limit],
        )


# ── Errors ─────────────────────────────────────────────────────────


class HabitValidationError(ValueError):
    """Raised when a draft or comment cannot be accepted."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("; ".join(errors))


class HabitNotFoundError(LookupError):
    """Raised when no habit has the requested id."""

    def __init__(self, habit_id: str) -> None:
        self.habit_id = habit_id
        super().__init__(f"No habit with id '{habit_id}'")
