"""
FastAPI web server — JSON surface over one in-memory hive canvas.
"""

from __future__ import annotations

import logging
import threading
from typing import Literal

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from hive.canvas import HiveState, PressState, replay, state_to_dict
from hive.config import HIVE_RULES
from hive.habits import (
    HabitValidationError, HabitNotFoundError,
    draft_from_dict, habit_to_dict, comment_to_dict, palette_to_dict,
)
from hive.placer import (
    Point, PlacementPreconditionError,
    place, locate_slot, point_to_dict, ring_coordinate_to_dict, hexagon_vertices,
)

log = logging.getLogger(__name__)

# ── App ────────────────────────────────────────────────────────────

app = FastAPI(title="Habit Hive")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Session state (lives as long as the process) ───────────────────

_hive = HiveState()
_hive_lock = threading.Lock()    # guards _hive; sync handlers run in a threadpool


# ── Models ─────────────────────────────────────────────────────────

class PointModel(BaseModel):
    x: float
    y: float

    def to_point(self) -> Point:
        return Point(self.x, self.y)


class HabitRequest(BaseModel):
    title: str = ""
    frequency: str = "Daily"
    custom_frequency: str = ""
    description: str = ""
    priority: str = "Medium"
    count: int = 0
    gradient_style: str = "blue"


class AddHabitRequest(HabitRequest):
    origin: PointModel = PointModel(x=0.0, y=0.0)


class CommentRequest(BaseModel):
    text: str


class PointerEvent(BaseModel):
    kind: Literal["down", "move", "up"]
    x: float = 0.0
    y: float = 0.0
    t: float


class PressRequest(BaseModel):
    events: list[PointerEvent]


class PanRequest(BaseModel):
    dx: float
    dy: float
    ended: bool = False


class ViewportRequest(BaseModel):
    width: float = Field(gt=0)
    height: float = Field(gt=0)


class PlaceRequest(BaseModel):
    origin: PointModel
    occupied: list[PointModel] = []
    min_distance: float = HIVE_RULES.min_distance
    max_rings: int = HIVE_RULES.max_rings
    footprint: float | None = None
    packing: float = HIVE_RULES.packing


# ── Helpers ────────────────────────────────────────────────────────

def _draft(req: HabitRequest):
    try:
        return draft_from_dict(req.model_dump(exclude={"origin"}))
    except HabitValidationError as e:
        raise HTTPException(422, e.errors)


def _habit_or_404(habit_id: str):
    try:
        return _hive.get(habit_id)
    except HabitNotFoundError as e:
        raise HTTPException(404, str(e))


# ── Routes ─────────────────────────────────────────────────────────

@app.get("/api/hive")
def get_hive():
    with _hive_lock:
        return state_to_dict(_hive)


@app.post("/api/reset")
def reset_hive():
    """Drop every habit and the pan offset."""
    global _hive
    with _hive_lock:
        _hive = HiveState()
    log.info("Hive reset")
    return {"status": "ok"}


@app.get("/api/palette")
def get_palette():
    return palette_to_dict()


@app.post("/api/habits", status_code=201)
def add_habit(req: AddHabitRequest):
    draft = _draft(req)
    with _hive_lock:
        try:
            habit = _hive.add_habit(draft, req.origin.to_point())
        except HabitValidationError as e:
            raise HTTPException(422, e.errors)
        return habit_to_dict(habit)


@app.put("/api/habits/{habit_id}")
def update_habit(habit_id: str, req: HabitRequest):
    draft = _draft(req)
    with _hive_lock:
        _habit_or_404(habit_id)
        try:
            habit = _hive.update_habit(habit_id, draft)
        except HabitValidationError as e:
            raise HTTPException(422, e.errors)
        return habit_to_dict(habit)


@app.delete("/api/habits/{habit_id}")
def delete_habit(habit_id: str):
    with _hive_lock:
        _habit_or_404(habit_id)
        _hive.delete_habit(habit_id)
    return {"status": "ok"}


@app.post("/api/habits/{habit_id}/increment")
def increment_habit(habit_id: str):
    with _hive_lock:
        _habit_or_404(habit_id)
        return habit_to_dict(_hive.increment(habit_id))


@app.post("/api/habits/{habit_id}/comments", status_code=201)
def add_comment(habit_id: str, req: CommentRequest):
    with _hive_lock:
        _habit_or_404(habit_id)
        try:
            comment = _hive.add_comment(habit_id, req.text)
        except HabitValidationError as e:
            raise HTTPException(422, e.errors)
        return comment_to_dict(comment)


@app.post("/api/habits/{habit_id}/press")
def press_habit(habit_id: str, req: PressRequest):
    """Replay a recorded press and apply its outcome."""
    events = [(e.kind, e.x, e.y, e.t) for e in req.events]
    with _hive_lock:
        habit = _habit_or_404(habit_id)
        try:
            outcome = replay(habit.size, events)
        except ValueError as e:
            raise HTTPException(422, str(e))
        habit = _hive.apply_press(habit_id, outcome)
        return {
            "outcome": outcome.name.lower(),
            "edit_requested": outcome is PressState.EDIT_REQUESTED,
            "habit": habit_to_dict(habit),
        }


@app.get("/api/habits/{habit_id}/outline")
def habit_outline(habit_id: str):
    """Hexagon vertices in canvas coordinates, for drawing."""
    with _hive_lock:
        habit = _habit_or_404(habit_id)
    return {
        "size": habit.size,
        "vertices": [[round(x, 2), round(y, 2)]
                     for x, y in hexagon_vertices(habit.position, habit.size)],
    }


@app.post("/api/pan")
def pan(req: PanRequest):
    with _hive_lock:
        _hive.drag_changed(req.dx, req.dy)
        if req.ended:
            _hive.drag_ended()
        return {
            "offset": {"width": _hive.offset.width, "height": _hive.offset.height},
            "is_view_moved": _hive.is_view_moved,
        }


@app.post("/api/recenter")
def recenter(req: ViewportRequest):
    with _hive_lock:
        offset = _hive.recenter(req.width, req.height)
    return {"offset": {"width": offset.width, "height": offset.height}}


@app.post("/api/place")
def place_point(req: PlaceRequest):
    """Run the placer directly, without touching the canvas."""
    origin = req.origin.to_point()
    occupied = [p.to_point() for p in req.occupied]
    kwargs = dict(footprint=req.footprint, packing=req.packing)
    try:
        coord = locate_slot(origin, occupied, req.min_distance, req.max_rings, **kwargs)
        point = place(origin, occupied, req.min_distance, req.max_rings, **kwargs)
    except PlacementPreconditionError as e:
        raise HTTPException(422, str(e))
    return {
        "point": point_to_dict(point),
        "slot": ring_coordinate_to_dict(coord),
        "exhausted": coord is None,
    }


# ── Entry point ────────────────────────────────────────────────────

def main(host: str = "127.0.0.1", port: int = 8000):
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    uvicorn.run("hive.web.server:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
