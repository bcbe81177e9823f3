"""Gradient palette — fill and progress-outline colours per style."""

from __future__ import annotations

from dataclasses import dataclass

from .models import GradientStyle


@dataclass(frozen=True)
class Rgba:
    """8-bit colour channels; ``a`` is opacity (255 = opaque)."""

    r: int
    g: int
    b: int
    a: int = 255

    def with_opacity(self, opacity: float) -> "Rgba":
        return Rgba(self.r, self.g, self.b, round(255 * opacity))

    def to_css(self) -> str:
        return f"rgba({self.r}, {self.g}, {self.b}, {self.a / 255:.3g})"


@dataclass(frozen=True)
class Gradient:
    stops: tuple[Rgba, ...]
    start: str = "top_leading"
    end: str = "bottom_trailing"


def parse_hex_color(text: str) -> Rgba:
    """Parse ``RGB``, ``RRGGBB`` or ``AARRGGBB`` hex (``#`` optional).

    Any other length (or stray characters) yields ``Rgba(1, 1, 0, 1)``,
    an effectively invisible colour, instead of failing.
    """
    digits = "".join(ch for ch in text if ch.isalnum())
    try:
        value = int(digits, 16)
    except ValueError:
        return Rgba(1, 1, 0, 1)

    if len(digits) == 3:
        return Rgba(
            (value >> 8) * 17,
            (value >> 4 & 0xF) * 17,
            (value & 0xF) * 17,
        )
    if len(digits) == 6:
        return Rgba(value >> 16, value >> 8 & 0xFF, value & 0xFF)
    if len(digits) == 8:
        return Rgba(
            value >> 16 & 0xFF, value >> 8 & 0xFF, value & 0xFF, value >> 24,
        )
    return Rgba(1, 1, 0, 1)


# (hex, opacity) pairs; 8e8e93 is the system grey
_FILL: dict[GradientStyle, tuple[tuple[str, float], ...]] = {
    GradientStyle.BLUE: (("a1c4fd", 1.0), ("c2e9fb", 1.0)),
    GradientStyle.RED: (("ff6b6b", 1.0), ("ffa5a5", 1.0)),
    GradientStyle.GREEN: (("dcedc8", 1.0), ("f1f8e9", 1.0)),
    GradientStyle.LIGHT_PINK: (("e0c3fc", 1.0), ("f9e6ff", 1.0)),
    GradientStyle.ORANGE: (("ffe0b2", 1.0), ("ffcc80", 1.0)),
    GradientStyle.YELLOW: (("fffde7", 1.0), ("fff9c4", 1.0)),
    GradientStyle.PINK: (("ffc1e3", 1.0), ("ffe6f0", 1.0)),
    GradientStyle.TEAL: (("b2dfdb", 1.0), ("e0f2f1", 1.0)),
    GradientStyle.GREY: (("8e8e93", 0.6), ("8e8e93", 0.3)),
}

_OUTLINE: dict[GradientStyle, tuple[tuple[str, float], ...]] = {
    GradientStyle.BLUE: (("1e3c72", 0.5), ("a1c4fd", 0.8)),
    GradientStyle.RED: (("ff4040", 0.8), ("ff8080", 0.5)),
    GradientStyle.GREEN: (("56ab2f", 0.5), ("a8e063", 0.8)),
    GradientStyle.LIGHT_PINK: (("e0c3fc", 0.8), ("dd5e89", 0.5)),
    GradientStyle.ORANGE: (("ff8008", 0.8), ("ffc837", 0.5)),
    GradientStyle.YELLOW: (("f7971e", 0.8), ("ffd200", 0.5)),
    GradientStyle.PINK: (("dd5e89", 0.8), ("f7bb97", 0.5)),
    GradientStyle.TEAL: (("11998e", 0.8), ("38ef7d", 0.5)),
    GradientStyle.GREY: (("8e8e93", 0.6), ("8e8e93", 0.3)),
}


def _build(pairs: tuple[tuple[str, float], ...]) -> Gradient:
    return Gradient(stops=tuple(
        parse_hex_color(hx).with_opacity(op) for hx, op in pairs
    ))


def fill_gradient(style: GradientStyle) -> Gradient:
    """Background gradient of a habit hexagon."""
    return _build(_FILL[style])


def outline_gradient(style: GradientStyle) -> Gradient:
    """Gradient of the long-press progress outline."""
    return _build(_OUTLINE[style])


def palette_to_dict() -> dict:
    """Every style's fill and outline gradients as CSS colour strings."""
    return {
        style.value: {
            "fill": [c.to_css() for c in fill_gradient(style).stops],
            "outline": [c.to_css() for c in outline_gradient(style).stops],
        }
        for style in GradientStyle
    }
