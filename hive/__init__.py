"""Habit Hive — habits laid out on a honeycomb canvas.

Packages:
  placer   First-fit hexagonal ring placement (the layout core).
  habits   Habit model, palette, validation, serialization.
  canvas   View-model state and the press gesture state machine.
  web      FastAPI JSON surface over one in-memory canvas.
"""
