"""Habit serialization — JSON conversion."""

from __future__ import annotations

from datetime import datetime, tzinfo

from hive.placer.serialization import point_to_dict, parse_point

from .models import (
    Habit, HabitDraft, Comment, Frequency, Priority, GradientStyle,
    HabitValidationError,
)


def format_comment_date(when: datetime, tz: tzinfo | None = None) -> str:
    """Abbreviated date with short time, e.g. ``Feb 6, 2025 at 3:04 PM``.

    Aware datetimes are shown in *tz*, the machine's local zone by default;
    naive ones are taken as already local.
    """
    if when.tzinfo is not None:
        when = when.astimezone(tz)
    hour = when.hour % 12 or 12
    return f"{when:%b} {when.day}, {when.year} at {hour}:{when:%M} {when:%p}"


def comment_to_dict(c: Comment) -> dict:
    return {
        "id": c.id,
        "text": c.text,
        "date": c.date.isoformat(),
        "display_date": format_comment_date(c.date),
    }


def habit_to_dict(h: Habit) -> dict:
    """Serialize a Habit to a JSON-safe dict."""
    return {
        "id": h.id,
        "position": point_to_dict(h.position),
        "title": h.title,
        "frequency": h.frequency.value,
        **({"custom_frequency": h.custom_frequency} if h.custom_frequency else {}),
        "display_frequency": h.display_frequency,
        "gradient_style": h.gradient_style.value,
        "description": h.description,
        "priority": h.priority.value,
        "size": h.size,
        "count": h.count,
        "comments": [comment_to_dict(c) for c in h.comments],
    }


def _parse_enum(enum_cls, raw, field_name: str, errors: list[str]):
    try:
        return enum_cls(raw)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        errors.append(f"Unknown {field_name} '{raw}' (expected one of: {allowed})")
        return None


def draft_from_dict(data: dict) -> HabitDraft:
    """Parse raw form fields into a HabitDraft.

    Missing fields take the form defaults.  Unknown enum values raise
    HabitValidationError listing every bad field.
    """
    errors: list[str] = []
    frequency = _parse_enum(
        Frequency, data.get("frequency", Frequency.DAILY.value), "frequency", errors)
    priority = _parse_enum(
        Priority, data.get("priority", Priority.MEDIUM.value), "priority", errors)
    style = _parse_enum(
        GradientStyle, data.get("gradient_style", GradientStyle.BLUE.value),
        "gradient style", errors)
    if errors:
        raise HabitValidationError(errors)

    return HabitDraft(
        title=data.get("title", ""),
        frequency=frequency,
        custom_frequency=data.get("custom_frequency", ""),
        description=data.get("description", ""),
        priority=priority,
        count=data.get("count", 0),
        gradient_style=style,
    )


def parse_habit(data: dict) -> Habit:
    """Parse a dict produced by habit_to_dict back into a Habit."""
    comments = [
        Comment(
            id=c["id"],
            text=c["text"],
            date=datetime.fromisoformat(c["date"]),
        )
        for c in data.get("comments", [])
    ]
    return Habit(
        id=data["id"],
        position=parse_point(data["position"]),
        title=data["title"],
        frequency=Frequency(data["frequency"]),
        custom_frequency=data.get("custom_frequency", ""),
        gradient_style=GradientStyle(data["gradient_style"]),
        description=data.get("description", ""),
        priority=Priority(data["priority"]),
        count=int(data["count"]),
        comments=comments,
    )
