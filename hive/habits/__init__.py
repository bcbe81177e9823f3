"""Habits — dataclasses, palette, validation, and serialization."""

from .models import (
    Frequency, Priority, GradientStyle, Comment, Habit, HabitDraft,
    HabitValidationError, HabitNotFoundError,
)
from .palette import Rgba, Gradient, parse_hex_color, fill_gradient, outline_gradient, palette_to_dict
from .validation import validate_draft, validate_comment
from .serialization import (
    habit_to_dict, parse_habit, draft_from_dict, comment_to_dict, format_comment_date,
)

__all__ = [
    # Models
    "Frequency", "Priority", "GradientStyle", "Comment", "Habit", "HabitDraft",
    "HabitValidationError", "HabitNotFoundError",
    # Palette
    "Rgba", "Gradient", "parse_hex_color", "fill_gradient", "outline_gradient",
    "palette_to_dict",
    # Validation / Serialization
    "validate_draft", "validate_comment",
    "habit_to_dict", "parse_habit", "draft_from_dict", "comment_to_dict",
    "format_comment_date",
]
