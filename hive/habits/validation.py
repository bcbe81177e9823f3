"""Habit form validation — check a draft before it is saved."""

from __future__ import annotations

from .models import HabitDraft, Frequency, Priority, GradientStyle


def validate_draft(draft: HabitDraft) -> list[str]:
    """Validate an add/edit draft. Returns error messages (empty = valid)."""
    errors: list[str] = []

    # ── Enum fields ──
    if not isinstance(draft.frequency, Frequency):
        errors.append(f"Unknown frequency {draft.frequency!r}")
    if not isinstance(draft.priority, Priority):
        errors.append(f"Unknown priority {draft.priority!r}")
    if not isinstance(draft.gradient_style, GradientStyle):
        errors.append(f"Unknown gradient style {draft.gradient_style!r}")

    # ── Text fields ──
    if not draft.title:
        errors.append("Habit name is required")
    if draft.frequency is Frequency.CUSTOM and not draft.custom_frequency:
        errors.append("Custom frequency text is required when frequency is Custom")

    # ── Count ──
    if isinstance(draft.count, bool) or not isinstance(draft.count, int):
        errors.append(f"Count must be an integer, got {draft.count!r}")
    elif draft.count < 0:
        errors.append(f"Count must not be negative, got {draft.count}")

    return errors


def validate_comment(text: str) -> list[str]:
    """A comment needs some text."""
    if not text:
        return ["Comment text is required"]
    return []
