"""Canvas — view-model state and the press gesture state machine."""

from .gesture import PressState, PressGesture, replay
from .state import Offset, HiveState, state_to_dict

__all__ = [
    "PressState", "PressGesture", "replay",
    "Offset", "HiveState", "state_to_dict",
]
